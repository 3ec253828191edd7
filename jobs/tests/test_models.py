from datetime import datetime, timedelta
from decimal import Decimal

import pytz
from django.core.exceptions import ValidationError
from django.test import TestCase

from jobs.models import DEFAULT_ICON, ICON_OPTIONS, JOB_COLOR_HEX, Job, JobColor
from projects.models import Project
from time_entries.models import TimeEntry

UTC = pytz.UTC


class JobModelTests(TestCase):
    """Tests for the Job model."""

    def setUp(self):
        self.job = Job.objects.create(name='Acme', hourly_rate=Decimal('40.00'), color_theme=JobColor.SKY)

    def log(self, hours, is_billable=True, custom_rate=None, end=True):
        start = UTC.localize(datetime(2024, 3, 4, 9, 0))
        return TimeEntry.objects.create(
            job=self.job,
            start=start,
            end=start + timedelta(hours=hours) if end else None,
            is_billable=is_billable,
            custom_rate=custom_rate,
        )

    def test_defaults(self):
        self.assertEqual(self.job.icon_name, DEFAULT_ICON)
        self.assertFalse(self.job.is_completed)
        self.assertIsNone(self.job.updated_at)
        self.assertEqual(str(self.job), 'Acme')

    def test_display_color(self):
        self.assertEqual(self.job.display_color, '#A6CCE6')
        self.assertEqual(JobColor.CORAL.display_color, '#E6A699')

    def test_every_color_has_a_hex_value(self):
        self.assertEqual(set(JOB_COLOR_HEX), set(JobColor.values))
        self.assertEqual(len(JobColor.values), 14)

    def test_blank_name_is_rejected(self):
        job = Job(name='   ', hourly_rate=Decimal('10'), color_theme=JobColor.SAGE)
        with self.assertRaises(ValidationError):
            job.full_clean()

    def test_negative_rate_is_rejected(self):
        job = Job(name='Refunds', hourly_rate=Decimal('-1'), color_theme=JobColor.SAGE)
        with self.assertRaises(ValidationError):
            job.full_clean()

    def test_unknown_color_is_rejected(self):
        job = Job(name='Neon', hourly_rate=Decimal('10'), color_theme='neon')
        with self.assertRaises(ValidationError):
            job.full_clean()

    def test_toggle_completed(self):
        self.job.toggle_completed()
        self.job.refresh_from_db()
        self.assertTrue(self.job.is_completed)
        self.job.toggle_completed()
        self.job.refresh_from_db()
        self.assertFalse(self.job.is_completed)

    def test_change_icon(self):
        self.job.change_icon('hammer')
        self.job.refresh_from_db()
        self.assertEqual(self.job.icon_name, 'hammer')

    def test_change_icon_rejects_unknown(self):
        with self.assertRaises(ValidationError):
            self.job.change_icon('not-an-icon')
        self.assertIn(self.job.icon_name, ICON_OPTIONS)

    def test_totals(self):
        self.log(2)
        self.log(1, is_billable=False)
        self.log(0.5, custom_rate=Decimal('100.00'))
        self.log(3, end=False)

        self.assertEqual(self.job.total_logged_time, 3.5 * 3600)
        self.assertEqual(self.job.formatted_total_logged_time, '3h 30m')
        self.assertEqual(self.job.total_earnings, Decimal('130'))

    def test_totals_without_entries(self):
        self.assertEqual(self.job.total_logged_time, 0)
        self.assertEqual(self.job.formatted_total_logged_time, '0h 0m')
        self.assertEqual(self.job.total_earnings, Decimal('0'))

    def test_delete_cascades_to_entries(self):
        self.log(1)
        self.job.delete()
        self.assertFalse(TimeEntry.objects.exists())

    def test_project_delete_cascades_to_jobs(self):
        project = Project.objects.create(name='Website')
        self.job.project = project
        self.job.save()
        self.log(1)

        project.delete()

        self.assertFalse(Job.objects.exists())
        self.assertFalse(TimeEntry.objects.exists())


class TimeEntryModelTests(TestCase):
    """Tests for the TimeEntry model's derived values."""

    def setUp(self):
        self.job = Job.objects.create(name='Acme', hourly_rate=Decimal('40.00'), color_theme=JobColor.SLATE)
        self.start = UTC.localize(datetime(2024, 3, 4, 9, 0))

    def test_in_progress(self):
        entry = TimeEntry.objects.create(job=self.job, start=self.start)
        self.assertTrue(entry.is_in_progress)
        self.assertEqual(entry.duration_seconds, 0)
        self.assertEqual(entry.earnings, Decimal('0'))

    def test_end_before_start_is_invalid(self):
        entry = TimeEntry(job=self.job, start=self.start, end=self.start - timedelta(minutes=1))
        with self.assertRaises(ValidationError):
            entry.full_clean()

    def test_entry_requires_job(self):
        entry = TimeEntry(start=self.start, end=self.start + timedelta(hours=1))
        with self.assertRaises(ValidationError):
            entry.full_clean()

    def test_effective_rate_prefers_custom_rate(self):
        entry = TimeEntry.objects.create(
            job=self.job, start=self.start, end=self.start + timedelta(hours=2), custom_rate=Decimal('50.00'),
        )
        self.assertEqual(entry.effective_rate, Decimal('50.00'))
        self.assertEqual(entry.earnings, Decimal('100'))
        self.assertEqual(entry.formatted_duration, '2h 0m')

    def test_default_ordering_is_newest_first(self):
        older = TimeEntry.objects.create(job=self.job, start=self.start)
        newer = TimeEntry.objects.create(job=self.job, start=self.start + timedelta(days=1))
        self.assertEqual(list(TimeEntry.objects.all()), [newer, older])
