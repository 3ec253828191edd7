import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from time_entries.services import aggregation


class JobColor(models.TextChoices):
    """Fixed palette a job can be themed with."""

    SLATE = 'slate', 'Slate'
    SAGE = 'sage', 'Sage'
    MIST = 'mist', 'Mist'
    SAND = 'sand', 'Sand'
    ROSE = 'rose', 'Rose'
    SKY = 'sky', 'Sky'
    TERRACOTTA = 'terracotta', 'Terracotta'
    LAVENDER = 'lavender', 'Lavender'
    STONE = 'stone', 'Stone'
    INDIGO = 'indigo', 'Indigo'
    TEAL = 'teal', 'Teal'
    MAROON = 'maroon', 'Maroon'
    OLIVE = 'olive', 'Olive'
    CORAL = 'coral', 'Coral'

    @property
    def display_color(self):
        return JOB_COLOR_HEX[self.value]


JOB_COLOR_HEX = {
    'slate': '#B3BFCC',
    'sage': '#B3CCB3',
    'mist': '#D9D9E6',
    'sand': '#E6D9BF',
    'rose': '#E6CCCC',
    'sky': '#A6CCE6',
    'terracotta': '#D99980',
    'lavender': '#CCBFE6',
    'stone': '#B3B3B3',
    'indigo': '#808CB3',
    'teal': '#80B3B3',
    'maroon': '#B38080',
    'olive': '#99A680',
    'coral': '#E6A699',
}

DEFAULT_ICON = 'briefcase'

ICON_OPTIONS = (
    'briefcase', 'person.2', 'display', 'wrench.and.screwdriver',
    'hammer', 'building.2', 'doc.text', 'folder', 'calendar',
    'clock', 'timer', 'stopwatch', 'dollarsign.circle', 'eurosign.circle',
    'chart.bar', 'chart.pie', 'desktopcomputer', 'laptopcomputer',
    'server.rack', 'pencil.and.ruler', 'signature', 'at',
    'person.3', 'lightbulb', 'target', 'airplane.departure',
    'car', 'shippingbox', 'paintbrush.pointed', 'briefcase.fill',
    'pencil', 'highlighter', 'paperclip', 'link', 'ruler',
    'book.closed', 'creditcard', 'tray.full', 'archivebox',
    'printer', 'scanner', 'phone', 'teletype', 'mail',
    'location', 'map', 'pin', 'network', 'globe',
    'cpu', 'memorychip', 'lifepreserver', 'graduationcap', 'fork.knife',
    'camera', 'scissors', 'eyedropper', 'wrench', 'arrow.up.arrow.down',
)

ICON_CHOICES = [
    (name, name.replace('.', ' ').title()) for name in ICON_OPTIONS
]


class Job(models.Model):
    """
    A billable engagement that time entries are logged against.

    Deleting a job deletes its time entries.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    name = models.CharField(
        max_length=255,
        help_text="Display name of the job"
    )
    description = models.TextField(
        blank=True,
        null=True,
        help_text="Optional free-text description"
    )
    hourly_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Rate applied to entries without a custom rate"
    )
    is_completed = models.BooleanField(default=False)
    icon_name = models.CharField(
        max_length=50,
        default=DEFAULT_ICON,
        choices=ICON_CHOICES,
        help_text="Icon identifier from the fixed icon set"
    )
    color_theme = models.CharField(
        max_length=20,
        choices=JobColor.choices,
        help_text="Colour theme used for the job card and calendar"
    )
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='jobs',
        help_text="Parent project (optional)"
    )

    # Audit fields
    date_created = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-date_created']
        indexes = [
            models.Index(fields=['-date_created'], name='job_date_created_idx'),
        ]
        verbose_name = 'Job'
        verbose_name_plural = 'Jobs'

    def __str__(self):
        return self.name

    def clean(self):
        if not (self.name or '').strip():
            raise ValidationError({'name': 'Job name cannot be blank.'})

    @property
    def display_color(self):
        return JOB_COLOR_HEX.get(self.color_theme)

    def toggle_completed(self):
        """Flip the completion flag and persist it."""
        self.is_completed = not self.is_completed
        self.save(update_fields=['is_completed'])

    def change_icon(self, icon_name):
        """Switch to another icon from the fixed icon set."""
        if icon_name not in ICON_OPTIONS:
            raise ValidationError({'icon_name': f'Unknown icon: {icon_name}'})
        self.icon_name = icon_name
        self.save(update_fields=['icon_name'])

    def touch(self):
        self.updated_at = timezone.now()

    @property
    def total_logged_time(self):
        """Total logged time in seconds (in-progress entries count as zero)."""
        return aggregation.total_duration(self.time_entries.all())

    @property
    def formatted_total_logged_time(self):
        return aggregation.format_duration(self.total_logged_time)

    @property
    def total_earnings(self):
        return aggregation.total_earnings(self.time_entries.all())
