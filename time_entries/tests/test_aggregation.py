"""
Tests for duration and earnings arithmetic.

Entries here are plain objects; the aggregation helpers never touch the database.
"""
from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytz
from django.test import SimpleTestCase

from time_entries.services import aggregation


def make_job(rate='40.00'):
    return SimpleNamespace(hourly_rate=Decimal(rate))


def make_entry(job=None, start=None, hours=2, end=True, is_billable=True, custom_rate=None):
    start = start or pytz.UTC.localize(datetime(2024, 3, 4, 9, 0))
    return SimpleNamespace(
        job=job,
        start=start,
        end=start + timedelta(hours=hours) if end else None,
        is_billable=is_billable,
        custom_rate=Decimal(custom_rate) if custom_rate is not None else None,
    )


class EntryArithmeticTests(SimpleTestCase):
    """Per-entry duration, rate and earnings."""

    def test_two_hours_at_forty_earns_eighty(self):
        entry = make_entry(job=make_job('40'))
        self.assertEqual(aggregation.entry_duration_seconds(entry), 7200)
        self.assertEqual(aggregation.effective_rate(entry), Decimal('40'))
        self.assertEqual(aggregation.entry_earnings(entry), Decimal('80.00'))

    def test_in_progress_entry_counts_as_zero(self):
        entry = make_entry(job=make_job(), end=False)
        self.assertEqual(aggregation.entry_duration(entry), timedelta(0))
        self.assertEqual(aggregation.entry_earnings(entry), Decimal('0'))

    def test_custom_rate_overrides_job_rate(self):
        entry = make_entry(job=make_job('40'), custom_rate='55.50')
        self.assertEqual(aggregation.effective_rate(entry), Decimal('55.50'))
        self.assertEqual(aggregation.entry_earnings(entry), Decimal('111.00'))

    def test_zero_custom_rate_is_still_used(self):
        entry = make_entry(job=make_job('40'), custom_rate='0')
        self.assertEqual(aggregation.effective_rate(entry), Decimal('0'))

    def test_rate_is_zero_without_job(self):
        entry = make_entry(job=None)
        self.assertEqual(aggregation.effective_rate(entry), Decimal('0'))
        self.assertEqual(aggregation.entry_earnings(entry), Decimal('0'))

    def test_non_billable_earns_nothing(self):
        entry = make_entry(job=make_job('40'), is_billable=False)
        self.assertEqual(aggregation.entry_duration_seconds(entry), 7200)
        self.assertEqual(aggregation.entry_earnings(entry), Decimal('0'))


class TotalsTests(SimpleTestCase):
    """Totals over entry sequences."""

    def test_empty_list(self):
        self.assertEqual(aggregation.total_duration([]), 0)
        self.assertEqual(aggregation.total_earnings([]), Decimal('0'))

    def test_non_billable_entries_add_duration_but_not_earnings(self):
        job = make_job('30')
        entries = [
            make_entry(job=job, hours=1),
            make_entry(job=job, hours=3, is_billable=False),
        ]
        self.assertEqual(aggregation.total_duration(entries), 4 * 3600)
        self.assertEqual(aggregation.total_earnings(entries), Decimal('30'))

    def test_all_non_billable(self):
        entries = [make_entry(job=make_job(), is_billable=False)]
        self.assertEqual(aggregation.total_duration(entries), 7200)
        self.assertEqual(aggregation.total_earnings(entries), Decimal('0'))

    def test_summarize(self):
        job = make_job('40')
        summary = aggregation.summarize([
            make_entry(job=job, hours=2),
            make_entry(job=job, hours=0.5, is_billable=False),
            make_entry(job=job, end=False),
        ])
        self.assertEqual(summary.entry_count, 3)
        self.assertEqual(summary.billable_count, 2)
        self.assertEqual(summary.total_seconds, 9000)
        self.assertEqual(summary.to_dict()['total_earnings'], '80.00')
        self.assertEqual(summary.formatted_duration, '2h 30m')


class FormatDurationTests(SimpleTestCase):
    """Tests for the two duration formats."""

    def test_summary_format_always_shows_hours(self):
        self.assertEqual(aggregation.format_duration(0), '0h 0m')
        self.assertEqual(aggregation.format_duration(300), '0h 5m')
        self.assertEqual(aggregation.format_duration(7500), '2h 5m')

    def test_compact_format_drops_zero_hours(self):
        self.assertEqual(aggregation.format_duration_compact(300), '5m')
        self.assertEqual(aggregation.format_duration_compact(0), '0m')
        self.assertEqual(aggregation.format_duration_compact(7500), '2h 5m')
        self.assertEqual(aggregation.format_duration_compact(3600), '1h 0m')

    def test_seconds_are_truncated(self):
        self.assertEqual(aggregation.format_duration_compact(119), '1m')
