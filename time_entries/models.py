import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from time_entries.services import aggregation


class TimeEntry(models.Model):
    """
    A single logged interval against a job. No end time means in progress.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    job = models.ForeignKey(
        'jobs.Job',
        on_delete=models.CASCADE,
        null=True,
        related_name='time_entries',
        help_text="Job this time is logged against"
    )
    start = models.DateTimeField(
        help_text="When the time entry started"
    )
    end = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the time entry ended (empty while in progress)"
    )
    notes = models.TextField(
        blank=True,
        default='',
        help_text="Optional free-text notes"
    )
    is_billable = models.BooleanField(
        default=True,
        help_text="Whether this entry counts toward earnings"
    )
    custom_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Hourly rate overriding the job's rate for this entry"
    )

    # Audit fields
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-start']
        indexes = [
            models.Index(fields=['-start'], name='time_entry_start_idx'),
            models.Index(fields=['job', 'start'], name='time_entry_job_start_idx'),
        ]
        verbose_name = 'Time Entry'
        verbose_name_plural = 'Time Entries'

    def __str__(self):
        end = self.end.strftime('%Y-%m-%d %H:%M') if self.end else 'in progress'
        return f"Time entry: {self.start.strftime('%Y-%m-%d %H:%M')} - {end}"

    def clean(self):
        if self.end is not None and self.start is not None and self.end < self.start:
            raise ValidationError({'end': 'End time cannot be before the start time.'})

    @property
    def is_in_progress(self):
        return self.end is None

    @property
    def duration(self):
        return aggregation.entry_duration(self)

    @property
    def duration_seconds(self):
        return aggregation.entry_duration_seconds(self)

    @property
    def effective_rate(self):
        return aggregation.effective_rate(self)

    @property
    def earnings(self):
        return aggregation.entry_earnings(self)

    @property
    def formatted_duration(self):
        return aggregation.format_duration_compact(self.duration_seconds)
