import json
import logging
from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST, require_http_methods

from projects.models import Project
from time_entries.services import aggregation
from .models import DEFAULT_ICON, ICON_OPTIONS, Job, JobColor

logger = logging.getLogger(__name__)


def serialize_job(job, entries=None):
    """Serialize a job, with totals over `entries` (all of its entries by default)."""
    if entries is None:
        entries = list(job.time_entries.all())
    summary = aggregation.summarize(entries)
    return {
        'id': str(job.id),
        'name': job.name,
        'description': job.description,
        'hourly_rate': f"{job.hourly_rate:.2f}",
        'is_completed': job.is_completed,
        'icon_name': job.icon_name,
        'color_theme': job.color_theme,
        'display_color': job.display_color,
        'project_id': str(job.project_id) if job.project_id else None,
        'date_created': job.date_created.isoformat(),
        'updated_at': job.updated_at.isoformat() if job.updated_at else None,
        'total_logged_time': summary.total_seconds,
        'formatted_total_logged_time': summary.formatted_duration,
        'total_earnings': f"{summary.total_earnings:.2f}",
    }


def validation_message(error):
    if hasattr(error, 'message_dict'):
        return '; '.join(
            f"{field}: {' '.join(messages)}" for field, messages in error.message_dict.items()
        )
    return ' '.join(error.messages)


def parse_hourly_rate(value):
    try:
        rate = Decimal(str(value))
    except (InvalidOperation, TypeError):
        raise ValidationError({'hourly_rate': f'Invalid hourly rate: {value}'})
    if not rate.is_finite():
        raise ValidationError({'hourly_rate': f'Invalid hourly rate: {value}'})
    return rate


def load_json(request):
    data = json.loads(request.body or b'{}')
    if not isinstance(data, dict):
        raise ValueError('Expected a JSON object')
    return data


@require_GET
def job_list(request):
    """List all jobs, newest first."""
    jobs = Job.objects.prefetch_related('time_entries').all()
    return JsonResponse({
        'success': True,
        'jobs': [serialize_job(job) for job in jobs],
        'colors': [{'value': c.value, 'label': c.label, 'display_color': c.display_color} for c in JobColor],
        'icons': list(ICON_OPTIONS),
    })


@csrf_exempt
@require_POST
def create_job(request):
    """
    Create a new job via AJAX.

    Expects JSON:
        - name: string (required, non-blank)
        - hourly_rate: number >= 0 (required)
        - color_theme: one of the job colours (required)
        - description, icon_name, project_id: optional
    """
    try:
        data = load_json(request)
    except (json.JSONDecodeError, ValueError):
        return JsonResponse({'success': False, 'message': 'Invalid JSON'}, status=400)

    name = (data.get('name') or '').strip()
    if not name:
        return JsonResponse({'success': False, 'message': 'Job name is required'}, status=400)
    if data.get('hourly_rate') in (None, ''):
        return JsonResponse({'success': False, 'message': 'Hourly rate is required'}, status=400)
    if not data.get('color_theme'):
        return JsonResponse({'success': False, 'message': 'Color theme is required'}, status=400)

    try:
        project = None
        if data.get('project_id'):
            project = Project.objects.get(pk=data['project_id'])

        description = (data.get('description') or '').strip()
        job = Job(
            name=name,
            description=description or None,
            hourly_rate=parse_hourly_rate(data['hourly_rate']),
            color_theme=data['color_theme'],
            icon_name=data.get('icon_name') or DEFAULT_ICON,
            project=project,
        )
        job.full_clean()
        job.save()
    except Project.DoesNotExist:
        return JsonResponse({'success': False, 'message': 'Project not found'}, status=404)
    except ValidationError as e:
        return JsonResponse({'success': False, 'message': validation_message(e)}, status=400)

    logger.info(f"Created job {job.pk} ({job.name})")
    return JsonResponse({'success': True, 'job': serialize_job(job, entries=[])})


@require_GET
def get_job(request, job_id):
    """Get a job's details and totals."""
    try:
        job = Job.objects.get(pk=job_id)
    except Job.DoesNotExist:
        return JsonResponse({'success': False, 'message': 'Job not found'}, status=404)
    return JsonResponse({'success': True, 'job': serialize_job(job)})


@csrf_exempt
@require_http_methods(["PATCH"])
def update_job(request, job_id):
    """Edit name, description, rate, colour or icon. Completion has its own endpoint."""
    try:
        job = Job.objects.get(pk=job_id)
        data = load_json(request)

        if 'name' in data:
            job.name = (data['name'] or '').strip()
        if 'description' in data:
            job.description = (data['description'] or '').strip() or None
        if 'hourly_rate' in data:
            job.hourly_rate = parse_hourly_rate(data['hourly_rate'])
        if 'color_theme' in data:
            job.color_theme = data['color_theme']
        if 'icon_name' in data:
            job.icon_name = data['icon_name']

        job.touch()
        job.full_clean()
        job.save()
    except Job.DoesNotExist:
        return JsonResponse({'success': False, 'message': 'Job not found'}, status=404)
    except (json.JSONDecodeError, ValueError):
        return JsonResponse({'success': False, 'message': 'Invalid JSON'}, status=400)
    except ValidationError as e:
        return JsonResponse({'success': False, 'message': validation_message(e)}, status=400)

    return JsonResponse({'success': True, 'job': serialize_job(job)})


@csrf_exempt
@require_POST
def toggle_completed(request, job_id):
    """Mark a job completed, or reopen it."""
    try:
        job = Job.objects.get(pk=job_id)
    except Job.DoesNotExist:
        return JsonResponse({'success': False, 'message': 'Job not found'}, status=404)

    job.toggle_completed()
    logger.info(f"Job {job.pk} completed={job.is_completed}")
    return JsonResponse({'success': True, 'is_completed': job.is_completed})


@csrf_exempt
@require_http_methods(["DELETE"])
def delete_job(request, job_id):
    """Delete a job and, with it, all of its time entries."""
    try:
        job = Job.objects.get(pk=job_id)
    except Job.DoesNotExist:
        return JsonResponse({'success': False, 'message': 'Job not found'}, status=404)

    deleted_entries = job.time_entries.count()
    job.delete()
    logger.info(f"Deleted job {job_id} and {deleted_entries} time entries")
    return JsonResponse({'success': True, 'deleted_entries': deleted_entries})
