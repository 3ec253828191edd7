import uuid

from django.db import models


class Project(models.Model):
    """
    Groups related jobs. Deleting a project deletes its jobs.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique project identifier"
    )
    name = models.CharField(
        max_length=255,
        help_text="Human-readable project name"
    )
    description = models.TextField(
        blank=True,
        default='',
        help_text="Optional free-text description"
    )
    is_completed = models.BooleanField(default=False)
    deadline = models.DateField(
        null=True,
        blank=True,
        help_text="Optional due date for the whole project"
    )

    # Audit fields
    date_created = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date_created']
        verbose_name = 'Project'
        verbose_name_plural = 'Projects'

    def __str__(self):
        return self.name
