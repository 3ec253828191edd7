from django.conf import settings as django_settings
from django.db import models

FIRST_WEEKDAY_KEY = 'first_weekday'
SHOW_BILLABLE_TAG_KEY = 'show_billable_tag'
CURRENCY_KEY = 'currency'


class Setting(models.Model):
    """
    Stores user preferences as key-value pairs.
    Provides a flexible way to store configuration that can be modified without code changes.
    """
    key = models.CharField(
        max_length=255,
        unique=True,
        primary_key=True,
        help_text="Unique identifier for this setting"
    )
    value = models.TextField(
        help_text="Value for this setting"
    )
    description = models.TextField(
        blank=True,
        help_text="Human-readable description of what this setting controls"
    )

    # Audit fields
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['key']
        verbose_name = 'Setting'
        verbose_name_plural = 'Settings'

    def __str__(self):
        return f"{self.key}: {self.value[:50]}"

    @classmethod
    def get(cls, key, default=None):
        """
        Get a setting value by key. Returns default if not found.

        Usage:
            currency = Setting.get('currency', 'GBP')
        """
        try:
            return cls.objects.get(pk=key).value
        except cls.DoesNotExist:
            return default

    @classmethod
    def set(cls, key, value, description=''):
        """
        Set a setting value. Creates if doesn't exist, updates if it does.

        Usage:
            Setting.set('first_weekday', 2, 'Calendar weeks start on Monday')
        """
        obj, created = cls.objects.update_or_create(
            key=key,
            defaults={'value': str(value), 'description': description}
        )
        return obj


def get_first_weekday():
    """First day of the calendar week, 1 (Sunday) ... 7 (Saturday)."""
    value = Setting.get(FIRST_WEEKDAY_KEY, django_settings.HOURGLASS_FIRST_WEEKDAY)
    try:
        return int(value)
    except (TypeError, ValueError):
        return django_settings.HOURGLASS_FIRST_WEEKDAY


def get_show_billable_tag():
    return str(Setting.get(SHOW_BILLABLE_TAG_KEY, 'true')).lower() in ('1', 'true', 'yes', 'on')


def get_currency():
    return Setting.get(CURRENCY_KEY, django_settings.HOURGLASS_CURRENCY)


def get_preferences():
    return {
        FIRST_WEEKDAY_KEY: get_first_weekday(),
        SHOW_BILLABLE_TAG_KEY: get_show_billable_tag(),
        CURRENCY_KEY: get_currency(),
    }
