"""
CSV export of time entries.

Rows are written in the order given; callers sort before exporting.
Quoting is RFC 4180 minimal quoting: fields containing a comma, double
quote or line break are wrapped in double quotes with embedded quotes doubled.
"""
import csv
import io
from decimal import ROUND_HALF_UP, Decimal

from django.utils import timezone

from hourglass.timezone_utils import get_default_timezone
from time_entries.services import aggregation

CSV_HEADER = [
    'Start Time',
    'End Time',
    'Duration (HH:MM:ss)',
    'Notes',
    'Is Billable',
    'Rate',
    'Earnings',
]

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'
MISSING_END = 'N/A'
LINE_TERMINATOR = '\n'
CENTS = Decimal('0.01')


def format_timestamp(value, tz=None):
    if timezone.is_aware(value):
        value = value.astimezone(tz or get_default_timezone())
    return value.strftime(TIMESTAMP_FORMAT)


def format_clock_duration(seconds):
    """Zero-padded ``HH:MM:SS``."""
    total_seconds = int(seconds)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_money(value):
    return str(aggregation.as_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))


def entry_row(entry, tz=None):
    return [
        format_timestamp(entry.start, tz),
        format_timestamp(entry.end, tz) if entry.end is not None else MISSING_END,
        format_clock_duration(aggregation.entry_duration_seconds(entry)),
        entry.notes or '',
        'Yes' if entry.is_billable else 'No',
        format_money(aggregation.effective_rate(entry)),
        format_money(aggregation.entry_earnings(entry)),
    ]


def render_csv(entries, tz=None):
    """
    Build the CSV document and count its data rows.

    Rows are separated by newlines with no trailing newline after the last
    row, so an empty export is exactly the header line.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator=LINE_TERMINATOR)
    writer.writerow(CSV_HEADER)
    count = 0
    for entry in entries:
        writer.writerow(entry_row(entry, tz))
        count += 1
    return buffer.getvalue()[:-len(LINE_TERMINATOR)], count


def write_csv(entries, stream, tz=None):
    """Write the CSV document to a text stream. Returns the row count."""
    document, count = render_csv(entries, tz)
    stream.write(document)
    return count


def export_csv(entries, tz=None):
    """Serialize entries into a CSV document (header row always present)."""
    return render_csv(entries, tz)[0]

