"""
Monthly activity calendar.

Builds the fixed 6-week grid shown under a job and tags each day with the
colour of the first entry logged on it.
"""
import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional

from django.utils import timezone

from hourglass.timezone_utils import get_default_timezone, local_date

logger = logging.getLogger(__name__)

GRID_DAYS = 42

# Colour for entries that are not (yet) attached to a job
UNASSIGNED_COLOR = '#8E8E93'

# Host-calendar weekday numbering: 1 = Sunday ... 7 = Saturday
WEEKDAY_SYMBOLS = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']


@dataclass(frozen=True)
class DayCell:
    date: date
    is_in_displayed_month: bool
    is_today: bool
    bucket_color: Optional[str] = None

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'day': self.date.day,
            'is_in_displayed_month': self.is_in_displayed_month,
            'is_today': self.is_today,
            'bucket_color': self.bucket_color,
        }


def add_months(value, months):
    """
    Move a date (or datetime) by whole months, clamping the day to the
    length of the target month (Jan 31 + 1 month -> Feb 28/29).
    """
    month_index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def as_date(value):
    """Calendar date of a date or datetime; datetimes are read as already local."""
    if isinstance(value, datetime):
        return value.date()
    return value


def shift_month(month, by):
    """First day of the month `by` months away from `month`."""
    return add_months(month.replace(day=1), by)


def month_bounds(month):
    """First and last calendar day of the month containing `month`."""
    first = month.replace(day=1)
    last = first.replace(day=calendar.monthrange(first.year, first.month)[1])
    return first, last


def host_weekday(day):
    """Weekday of `day` as 1 (Sunday) ... 7 (Saturday)."""
    return day.isoweekday() % 7 + 1


def weekday_symbols(first_weekday):
    """Short weekday names rotated so the header starts at `first_weekday`."""
    index = first_weekday - 1
    return WEEKDAY_SYMBOLS[index:] + WEEKDAY_SYMBOLS[:index]


def grid_start(month, first_weekday):
    """
    Nearest date on or before the first of the month that falls on
    `first_weekday`. May be in the previous month.
    """
    first, _ = month_bounds(month)
    offset = (host_weekday(first) - first_weekday) % 7
    return first - timedelta(days=offset)


def entry_color(entry):
    job = entry.job
    if job is None:
        return UNASSIGNED_COLOR
    return job.display_color or UNASSIGNED_COLOR


def daily_colors(entries, tz=None):
    """
    Map each local calendar day to the colour of the first entry that
    started on it. Later entries on the same day never replace it.
    """
    colors = {}
    for entry in entries:
        day = local_date(entry.start, tz)
        if day not in colors:
            colors[day] = entry_color(entry)
    return colors


def build_month_grid(month, first_weekday, entries, today=None, tz=None) -> List[DayCell]:
    """
    Build the 42-cell (6 x 7) activity grid for the month containing `month`.

    Cells outside the displayed month are included so the grid height never
    changes; renderers show them blank. Returns an empty grid when the
    weekday or the date range cannot be resolved.
    """
    if not isinstance(first_weekday, int) or not 1 <= first_weekday <= 7:
        logger.warning(f"Invalid first weekday {first_weekday!r}; returning empty calendar grid")
        return []

    tz = tz or get_default_timezone()
    month = as_date(month)
    if today is None:
        today = timezone.now().astimezone(tz).date()
    today = as_date(today)

    try:
        start = grid_start(month, first_weekday)
        days = [start + timedelta(days=offset) for offset in range(GRID_DAYS)]
    except (OverflowError, ValueError) as e:
        logger.warning(f"Could not resolve calendar grid for {month}: {e}")
        return []

    colors = daily_colors(entries, tz)

    return [
        DayCell(
            date=day,
            is_in_displayed_month=(day.year, day.month) == (month.year, month.month),
            is_today=day == today,
            bucket_color=colors.get(day),
        )
        for day in days
    ]
