import json
import uuid
from datetime import datetime, timedelta
from decimal import Decimal

import pytz
from django.test import TestCase
from django.urls import reverse

from jobs.models import Job, JobColor
from settings.models import FIRST_WEEKDAY_KEY, Setting
from time_entries.models import TimeEntry

UTC = pytz.UTC


class EntryViewTestCase(TestCase):

    def setUp(self):
        self.job = Job.objects.create(name='Acme Redesign', hourly_rate=Decimal('40.00'), color_theme=JobColor.SKY)

    def make_entry(self, start, hours=2, **kwargs):
        return TimeEntry.objects.create(job=self.job, start=start, end=start + timedelta(hours=hours), **kwargs)


class EntryListViewTests(EntryViewTestCase):
    """Tests for the entry_list GET view."""

    def test_lists_entries_with_summary(self):
        self.make_entry(UTC.localize(datetime(2024, 3, 4, 9, 0)))
        self.make_entry(UTC.localize(datetime(2024, 3, 5, 9, 0)), hours=1, is_billable=False)

        response = self.client.get(reverse('time_entries:entry_list', args=[self.job.pk]))
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(len(data['entries']), 2)
        self.assertEqual(data['summary']['total_earnings'], '80.00')
        self.assertEqual(data['summary']['formatted_duration'], '3h 0m')
        self.assertEqual(data['entries'][0]['formatted_duration'], '1h 0m')
        self.assertTrue(data['show_billable_tag'])

    def test_filter_and_sort_params(self):
        self.make_entry(UTC.localize(datetime(2024, 3, 4, 9, 0)), hours=3)
        self.make_entry(UTC.localize(datetime(2024, 3, 5, 9, 0)), hours=1, is_billable=False)

        response = self.client.get(
            reverse('time_entries:entry_list', args=[self.job.pk]),
            {'filter': 'billable', 'sort': 'shortest_first'},
        )
        data = response.json()
        self.assertEqual(data['filter'], 'billable')
        self.assertEqual(data['sort'], 'shortest_first')
        self.assertEqual(len(data['entries']), 1)
        self.assertTrue(data['entries'][0]['is_billable'])

    def test_unknown_job_returns_404(self):
        response = self.client.get(reverse('time_entries:entry_list', args=[uuid.uuid4()]))
        self.assertEqual(response.status_code, 404)


class LogTimeViewTests(EntryViewTestCase):
    """Tests for the log_time POST view."""

    def post(self, payload, job_id=None):
        return self.client.post(
            reverse('time_entries:log_time', args=[job_id or self.job.pk]),
            data=json.dumps(payload),
            content_type='application/json',
        )

    def test_logs_entry(self):
        response = self.post({
            'date': '2024-03-04',
            'start_time': '09:00',
            'end_time': '11:00',
            'notes': 'Kickoff',
        })
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['entry']['earnings'], '80.00')

        entry = TimeEntry.objects.get(pk=data['entry']['id'])
        self.assertEqual(entry.job, self.job)
        self.assertEqual(entry.notes, 'Kickoff')
        self.assertTrue(entry.is_billable)

    def test_overnight_entry(self):
        response = self.post({'date': '2024-03-04', 'start_time': '23:00', 'end_time': '01:00'})
        self.assertEqual(response.status_code, 200)
        entry = TimeEntry.objects.get(pk=response.json()['entry']['id'])
        self.assertEqual(entry.duration_seconds, 7200)

    def test_custom_rate_and_non_billable(self):
        response = self.post({
            'date': '2024-03-04',
            'start_time': '09:00',
            'end_time': '10:00',
            'is_billable': False,
            'custom_rate': '65',
        })
        entry = TimeEntry.objects.get(pk=response.json()['entry']['id'])
        self.assertFalse(entry.is_billable)
        self.assertEqual(entry.custom_rate, Decimal('65.00'))

    def test_string_flags_are_parsed(self):
        response = self.post({
            'date': '2024-03-04',
            'start_time': '09:00',
            'end_time': '10:00',
            'is_billable': 'false',
        })
        self.assertEqual(response.status_code, 200)
        entry = TimeEntry.objects.get(pk=response.json()['entry']['id'])
        self.assertFalse(entry.is_billable)

    def test_unrecognised_billable_flag_returns_400(self):
        response = self.post({
            'date': '2024-03-04',
            'start_time': '09:00',
            'end_time': '10:00',
            'is_billable': 'maybe',
        })
        self.assertEqual(response.status_code, 400)
        self.assertFalse(TimeEntry.objects.exists())

    def test_logging_stamps_job_activity(self):
        self.assertIsNone(self.job.updated_at)
        self.post({'date': '2024-03-04', 'start_time': '09:00', 'end_time': '10:00'})
        self.job.refresh_from_db()
        self.assertIsNotNone(self.job.updated_at)

    def test_missing_field_returns_400(self):
        response = self.post({'date': '2024-03-04', 'start_time': '09:00'})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(TimeEntry.objects.exists())

    def test_invalid_rate_returns_400(self):
        response = self.post({
            'date': '2024-03-04',
            'start_time': '09:00',
            'end_time': '10:00',
            'custom_rate': '-5',
        })
        self.assertEqual(response.status_code, 400)
        self.assertFalse(TimeEntry.objects.exists())

    def test_invalid_json_returns_400(self):
        response = self.client.post(
            reverse('time_entries:log_time', args=[self.job.pk]),
            data='{',
            content_type='application/json',
        )
        self.assertEqual(response.status_code, 400)

    def test_unknown_job_returns_404(self):
        response = self.post({'date': '2024-03-04', 'start_time': '09:00', 'end_time': '10:00'}, job_id=uuid.uuid4())
        self.assertEqual(response.status_code, 404)


class DeleteEntryViewTests(EntryViewTestCase):
    """Tests for the delete_entry DELETE view."""

    def test_deletes_entry(self):
        entry = self.make_entry(UTC.localize(datetime(2024, 3, 4, 9, 0)))
        response = self.client.delete(reverse('time_entries:delete_entry', args=[entry.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(TimeEntry.objects.filter(pk=entry.pk).exists())

    def test_delete_stamps_job_activity(self):
        entry = self.make_entry(UTC.localize(datetime(2024, 3, 4, 9, 0)))
        self.client.delete(reverse('time_entries:delete_entry', args=[entry.pk]))
        self.job.refresh_from_db()
        self.assertIsNotNone(self.job.updated_at)

    def test_unknown_entry_returns_404(self):
        response = self.client.delete(reverse('time_entries:delete_entry', args=[uuid.uuid4()]))
        self.assertEqual(response.status_code, 404)

    def test_get_not_allowed(self):
        entry = self.make_entry(UTC.localize(datetime(2024, 3, 4, 9, 0)))
        response = self.client.get(reverse('time_entries:delete_entry', args=[entry.pk]))
        self.assertEqual(response.status_code, 405)


class ActivityCalendarViewTests(EntryViewTestCase):
    """Tests for the activity_calendar GET view."""

    def get(self, **params):
        return self.client.get(reverse('time_entries:activity_calendar', args=[self.job.pk]), params)

    def test_month_grid(self):
        self.make_entry(UTC.localize(datetime(2024, 5, 10, 9, 0)))
        response = self.get(month='2024-05', first_weekday='1')
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(len(data['cells']), 42)
        self.assertEqual(data['cells'][0]['date'], '2024-04-28')
        self.assertEqual(data['weekdays'][0], 'Sun')
        self.assertEqual(data['previous_month'], '2024-04')
        self.assertEqual(data['next_month'], '2024-06')

        colored = [cell for cell in data['cells'] if cell['bucket_color']]
        self.assertEqual([cell['date'] for cell in colored], ['2024-05-10'])
        self.assertEqual(colored[0]['bucket_color'], self.job.display_color)

    def test_uses_saved_first_weekday(self):
        Setting.set(FIRST_WEEKDAY_KEY, 2)
        data = self.get(month='2024-05').json()
        self.assertEqual(data['cells'][0]['date'], '2024-04-29')
        self.assertEqual(data['weekdays'][0], 'Mon')

    def test_out_of_range_first_weekday_gives_empty_grid(self):
        data = self.get(month='2024-05', first_weekday='9').json()
        self.assertEqual(data['cells'], [])
        self.assertEqual(data['weekdays'], [])

    def test_bad_month_returns_400(self):
        self.assertEqual(self.get(month='May 2024').status_code, 400)


class ExportEntriesViewTests(EntryViewTestCase):
    """Tests for the CSV download."""

    def test_downloads_csv(self):
        self.make_entry(UTC.localize(datetime(2024, 3, 4, 9, 0)), notes='Met client, discussed scope')
        response = self.client.get(reverse('time_entries:export_entries', args=[self.job.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'text/csv; charset=utf-8')
        self.assertIn('acme-redesign-time-entries.csv', response['Content-Disposition'])

        lines = response.content.decode('utf-8').splitlines()
        self.assertEqual(lines[0], 'Start Time,End Time,Duration (HH:MM:ss),Notes,Is Billable,Rate,Earnings')
        self.assertIn('"Met client, discussed scope"', lines[1])

    def test_empty_export(self):
        response = self.client.get(reverse('time_entries:export_entries', args=[self.job.pk]))
        self.assertEqual(
            response.content.decode('utf-8'),
            'Start Time,End Time,Duration (HH:MM:ss),Notes,Is Billable,Rate,Earnings',
        )
