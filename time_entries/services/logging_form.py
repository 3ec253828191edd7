"""
Turn the "log time" form (one calendar date plus separate start and end
clock times) into a TimeEntry.
"""
from datetime import datetime, timedelta

from django.core.exceptions import ValidationError

from hourglass.timezone_utils import get_default_timezone
from time_entries.models import TimeEntry
from time_entries.services.aggregation import as_decimal

DATE_FORMAT = '%Y-%m-%d'
CLOCK_FORMATS = ('%H:%M', '%H:%M:%S')
TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')


def parse_date(value):
    try:
        return datetime.strptime((value or '').strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f'Invalid date "{value}", expected YYYY-MM-DD')


def parse_clock_time(value):
    value = (value or '').strip()
    for fmt in CLOCK_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f'Invalid time "{value}", expected HH:MM')


def parse_rate(value):
    """Optional non-negative rate; blank means no custom rate."""
    if value is None or str(value).strip() == '':
        return None
    try:
        rate = as_decimal(str(value).strip())
    except ArithmeticError:
        raise ValidationError(f'Invalid rate "{value}"')
    if not rate.is_finite():
        raise ValidationError(f'Invalid rate "{value}"')
    if rate < 0:
        raise ValidationError('Rate cannot be negative')
    return rate


def parse_billable(value):
    """JSON boolean, or a yes/no style string. Missing means billable."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValidationError(f'Invalid billable flag "{value}"')


def combine_local(day, clock, tz):
    return tz.localize(datetime.combine(day, clock.replace(second=0, microsecond=0)))


def build_time_entry(job, day, start_time, end_time, notes='', is_billable=True, custom_rate=None, tz=None):
    """
    Build an unsaved entry on `day` from `start_time` to `end_time`.

    An end clock time earlier than the start means the span crossed
    midnight, so the end moves to the following day.
    """
    tz = tz or get_default_timezone()
    start = combine_local(day, start_time, tz)
    end = combine_local(day, end_time, tz)
    if end < start:
        end = combine_local(day + timedelta(days=1), end_time, tz)

    return TimeEntry(
        job=job,
        start=start,
        end=end,
        notes=notes or '',
        is_billable=is_billable,
        custom_rate=parse_rate(custom_rate),
    )
