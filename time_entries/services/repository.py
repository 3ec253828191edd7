"""
Explicit data access for time entries.

Callers list entries with a filter and sort option, insert and delete through
the repository, and re-query after a change. Subscribers are told about each
insert/delete so views holding derived figures know to refresh.
"""
import logging
from datetime import timedelta

from django.db import models
from django.utils import timezone

from jobs.models import Job
from time_entries.models import TimeEntry
from time_entries.services import aggregation
from time_entries.services.calendar_grid import add_months

logger = logging.getLogger(__name__)

INSERTED = 'inserted'
DELETED = 'deleted'


class FilterOption(models.TextChoices):
    ALL = 'all', 'All Time'
    PAST_WEEK = 'past_week', 'Past 7 Days'
    PAST_MONTH = 'past_month', 'Past 30 Days'
    BILLABLE = 'billable', 'Billable'
    NON_BILLABLE = 'non_billable', 'Non-Billable'

    @classmethod
    def parse(cls, value):
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


class SortOption(models.TextChoices):
    NEWEST_FIRST = 'newest_first', 'Newest First'
    OLDEST_FIRST = 'oldest_first', 'Oldest First'
    LONGEST_FIRST = 'longest_first', 'Longest First'
    SHORTEST_FIRST = 'shortest_first', 'Shortest First'

    @classmethod
    def parse(cls, value):
        try:
            return cls(value)
        except ValueError:
            return cls.NEWEST_FIRST


def apply_filter(queryset, filter_option, now=None):
    now = now or timezone.now()
    if filter_option == FilterOption.PAST_WEEK:
        return queryset.filter(start__gte=now - timedelta(days=7))
    if filter_option == FilterOption.PAST_MONTH:
        return queryset.filter(start__gte=add_months(now, -1))
    if filter_option == FilterOption.BILLABLE:
        return queryset.filter(is_billable=True)
    if filter_option == FilterOption.NON_BILLABLE:
        return queryset.filter(is_billable=False)
    return queryset


def apply_sort(queryset, sort_option):
    """
    Order entries. Duration is derived rather than stored, so the duration
    sorts run in Python over rows pre-sorted newest first (stable on ties).
    """
    if sort_option == SortOption.OLDEST_FIRST:
        return list(queryset.order_by('start'))
    entries = list(queryset.order_by('-start'))
    if sort_option == SortOption.LONGEST_FIRST:
        entries.sort(key=aggregation.entry_duration, reverse=True)
    elif sort_option == SortOption.SHORTEST_FIRST:
        entries.sort(key=aggregation.entry_duration)
    return entries


class TimeEntryRepository:
    """List, insert and delete time entries, notifying subscribers on change."""

    def __init__(self):
        self._subscribers = []

    def subscribe(self, callback):
        """Register `callback(action, entry)` for inserts and deletes."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _notify(self, action, entry):
        for callback in list(self._subscribers):
            callback(action, entry)

    def list(self, filter_option=FilterOption.ALL, sort_option=SortOption.NEWEST_FIRST, job=None, now=None):
        queryset = TimeEntry.objects.select_related('job')
        if job is not None:
            queryset = queryset.filter(job=job)
        queryset = apply_filter(queryset, FilterOption.parse(filter_option), now=now)
        return apply_sort(queryset, SortOption.parse(sort_option))

    def get(self, entry_id):
        return TimeEntry.objects.select_related('job').get(pk=entry_id)

    def insert(self, entry):
        """Validate and save a new entry."""
        entry.full_clean()
        entry.save()
        logger.info(f"Inserted time entry {entry.pk} for job {entry.job_id}")
        self._notify(INSERTED, entry)
        return entry

    def delete(self, entry_id):
        """Delete an entry by id. Raises TimeEntry.DoesNotExist for unknown ids."""
        entry = self.get(entry_id)
        entry.delete()
        logger.info(f"Deleted time entry {entry_id}")
        self._notify(DELETED, entry)
        return entry


def stamp_job_activity(action, entry):
    """Mark the entry's job as updated whenever one of its entries changes."""
    if entry.job_id is None:
        return
    Job.objects.filter(pk=entry.job_id).update(updated_at=timezone.now())


# Shared by the views and management commands so subscribers see every change
entry_repository = TimeEntryRepository()
