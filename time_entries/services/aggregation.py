"""
Duration and earnings arithmetic over time entries.

Everything here works on plain sequences of entry objects (model instances
or anything exposing ``start``, ``end``, ``is_billable``, ``custom_rate`` and
``job.hourly_rate``) and never touches the database itself.
"""
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

SECONDS_PER_HOUR = Decimal(3600)
ZERO = Decimal('0')


def as_decimal(value):
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def entry_duration(entry):
    """Logged interval, or zero while the entry is still in progress."""
    if entry.end is None:
        return timedelta(0)
    return entry.end - entry.start


def entry_duration_seconds(entry):
    return entry_duration(entry).total_seconds()


def effective_rate(entry):
    """
    Hourly rate applied to an entry.

    Resolution order is custom rate, then the owning job's rate, then zero.
    """
    if entry.custom_rate is not None:
        return as_decimal(entry.custom_rate)
    job = entry.job
    if job is not None and job.hourly_rate is not None:
        return as_decimal(job.hourly_rate)
    return ZERO


def entry_earnings(entry):
    """Duration in hours times the effective rate; zero for non-billable entries."""
    if not entry.is_billable:
        return ZERO
    hours = Decimal(entry_duration_seconds(entry)) / SECONDS_PER_HOUR
    return hours * effective_rate(entry)


def total_duration(entries):
    """Sum of entry durations, in seconds."""
    return sum((entry_duration_seconds(entry) for entry in entries), 0.0)


def total_earnings(entries):
    return sum((entry_earnings(entry) for entry in entries if entry.is_billable), ZERO)


def _hours_minutes(seconds):
    total_seconds = int(seconds)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    return hours, minutes


def format_duration(seconds):
    """Summary format, e.g. ``2h 5m`` (``0h 0m`` for nothing logged)."""
    hours, minutes = _hours_minutes(seconds)
    return f"{hours}h {minutes}m"


def format_duration_compact(seconds):
    """Row format: ``2h 5m``, or just ``5m`` when under an hour."""
    hours, minutes = _hours_minutes(seconds)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


@dataclass(frozen=True)
class EntrySummary:
    """Totals shown above an entry list."""

    entry_count: int
    billable_count: int
    total_seconds: float
    total_earnings: Decimal

    @property
    def formatted_duration(self):
        return format_duration(self.total_seconds)

    def to_dict(self):
        return {
            'entry_count': self.entry_count,
            'billable_count': self.billable_count,
            'total_seconds': self.total_seconds,
            'formatted_duration': self.formatted_duration,
            'total_earnings': f"{self.total_earnings:.2f}",
        }


def summarize(entries):
    entries = list(entries)
    return EntrySummary(
        entry_count=len(entries),
        billable_count=sum(1 for entry in entries if entry.is_billable),
        total_seconds=total_duration(entries),
        total_earnings=total_earnings(entries),
    )
