import json
import logging
from datetime import datetime

from django.core.exceptions import ValidationError
from django.http import HttpResponse, JsonResponse
from django.utils.text import slugify
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST, require_http_methods

from hourglass.timezone_utils import get_user_timezone, get_user_today
from jobs.models import Job
from settings.models import get_first_weekday, get_show_billable_tag
from .models import TimeEntry
from .services import aggregation
from .services.calendar_grid import build_month_grid, shift_month, weekday_symbols
from .services.csv_export import export_csv
from .services.logging_form import build_time_entry, parse_billable, parse_clock_time, parse_date
from .services.repository import FilterOption, SortOption, entry_repository

logger = logging.getLogger(__name__)


def serialize_entry(entry):
    return {
        'id': str(entry.id),
        'job_id': str(entry.job_id) if entry.job_id else None,
        'start': entry.start.isoformat(),
        'end': entry.end.isoformat() if entry.end else None,
        'is_in_progress': entry.is_in_progress,
        'duration_seconds': entry.duration_seconds,
        'formatted_duration': entry.formatted_duration,
        'notes': entry.notes,
        'is_billable': entry.is_billable,
        'custom_rate': f"{entry.custom_rate:.2f}" if entry.custom_rate is not None else None,
        'effective_rate': f"{entry.effective_rate:.2f}",
        'earnings': f"{entry.earnings:.2f}",
    }


def get_job_or_404_json(job_id):
    try:
        return Job.objects.get(pk=job_id), None
    except Job.DoesNotExist:
        return None, JsonResponse({'success': False, 'message': 'Job not found'}, status=404)


@require_GET
def entry_list(request, job_id):
    """
    Entries for a job with the list's filter and sort options applied.

    Query params:
        - filter: all | past_week | past_month | billable | non_billable
        - sort: newest_first | oldest_first | longest_first | shortest_first
    """
    job, error = get_job_or_404_json(job_id)
    if error:
        return error

    filter_option = FilterOption.parse(request.GET.get('filter', FilterOption.ALL))
    sort_option = SortOption.parse(request.GET.get('sort', SortOption.NEWEST_FIRST))
    entries = entry_repository.list(filter_option, sort_option, job=job)

    return JsonResponse({
        'success': True,
        'filter': filter_option.value,
        'sort': sort_option.value,
        'show_billable_tag': get_show_billable_tag(),
        'summary': aggregation.summarize(entries).to_dict(),
        'entries': [serialize_entry(entry) for entry in entries],
    })


@csrf_exempt
@require_POST
def log_time(request, job_id):
    """
    AJAX endpoint to log time against a job.

    Expects JSON:
        - date: YYYY-MM-DD
        - start_time, end_time: HH:MM (an end before the start crosses midnight)
        - notes: string (optional)
        - is_billable: boolean (default true)
        - custom_rate: number (optional)
    """
    job, error = get_job_or_404_json(job_id)
    if error:
        return error

    try:
        data = json.loads(request.body or b'{}')
    except json.JSONDecodeError:
        return JsonResponse({'success': False, 'message': 'Invalid JSON'}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({'success': False, 'message': 'Expected a JSON object'}, status=400)

    for field in ('date', 'start_time', 'end_time'):
        if not data.get(field):
            return JsonResponse({'success': False, 'message': f'{field} is required'}, status=400)

    try:
        entry = build_time_entry(
            job,
            parse_date(data['date']),
            parse_clock_time(data['start_time']),
            parse_clock_time(data['end_time']),
            notes=data.get('notes') or '',
            is_billable=parse_billable(data.get('is_billable')),
            custom_rate=data.get('custom_rate'),
            tz=get_user_timezone(request),
        )
        entry_repository.insert(entry)
    except ValidationError as e:
        logger.warning(f"Rejected time entry for job {job.pk}: {e.messages}")
        return JsonResponse({'success': False, 'message': ' '.join(e.messages)}, status=400)

    return JsonResponse({
        'success': True,
        'message': f'Logged {entry.formatted_duration} on {job.name}',
        'entry': serialize_entry(entry),
    })


@csrf_exempt
@require_http_methods(["DELETE"])
def delete_entry(request, entry_id):
    """Delete a single time entry."""
    try:
        entry_repository.delete(entry_id)
    except TimeEntry.DoesNotExist:
        return JsonResponse({'success': False, 'message': 'Time entry not found'}, status=404)
    return JsonResponse({'success': True})


@require_GET
def activity_calendar(request, job_id):
    """
    Activity calendar grid for a job.

    Query params:
        - month: YYYY-MM (defaults to the current month in the user's timezone)
        - first_weekday: 1 (Sunday) ... 7 (Saturday), overrides the saved preference
    """
    job, error = get_job_or_404_json(job_id)
    if error:
        return error

    user_tz = get_user_timezone(request)
    today = get_user_today(request)[0]

    month_param = request.GET.get('month')
    if month_param:
        try:
            month = datetime.strptime(month_param, '%Y-%m').date()
        except ValueError:
            return JsonResponse({'success': False, 'message': 'month must be YYYY-MM'}, status=400)
    else:
        month = today.replace(day=1)

    first_weekday = get_first_weekday()
    if request.GET.get('first_weekday'):
        try:
            first_weekday = int(request.GET['first_weekday'])
        except ValueError:
            return JsonResponse({'success': False, 'message': 'first_weekday must be 1-7'}, status=400)

    entries = entry_repository.list(FilterOption.ALL, SortOption.NEWEST_FIRST, job=job)
    cells = build_month_grid(month, first_weekday, entries, today=today, tz=user_tz)

    return JsonResponse({
        'success': True,
        'month': month.strftime('%Y-%m'),
        'title': month.strftime('%B %y'),
        'previous_month': shift_month(month, -1).strftime('%Y-%m'),
        'next_month': shift_month(month, 1).strftime('%Y-%m'),
        'weekdays': weekday_symbols(first_weekday) if cells else [],
        'cells': [cell.to_dict() for cell in cells],
    })


@require_GET
def export_entries(request, job_id):
    """Download a job's entries as CSV, honouring the list's filter and sort."""
    job, error = get_job_or_404_json(job_id)
    if error:
        return error

    filter_option = FilterOption.parse(request.GET.get('filter', FilterOption.ALL))
    sort_option = SortOption.parse(request.GET.get('sort', SortOption.NEWEST_FIRST))
    entries = entry_repository.list(filter_option, sort_option, job=job)

    try:
        document = export_csv(entries, tz=get_user_timezone(request))
    except Exception:
        logger.exception(f"CSV export failed for job {job.pk}")
        return JsonResponse({'success': False, 'message': 'Export failed'}, status=500)

    filename = f"{slugify(job.name) or 'job'}-time-entries.csv"
    response = HttpResponse(document, content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response
