import logging
from datetime import datetime

from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from jobs.views import load_json, validation_message
from .models import Project

logger = logging.getLogger(__name__)


def serialize_project(project):
    return {
        'id': str(project.id),
        'name': project.name,
        'description': project.description,
        'is_completed': project.is_completed,
        'deadline': project.deadline.isoformat() if project.deadline else None,
        'job_count': project.jobs.count(),
        'date_created': project.date_created.isoformat(),
    }


@csrf_exempt
@require_http_methods(["GET", "POST"])
def project_list(request):
    """
    GET lists projects. POST creates one from JSON:
        - name: string (required)
        - description: string (optional)
        - deadline: YYYY-MM-DD (optional)
    """
    if request.method == 'GET':
        return JsonResponse({
            'success': True,
            'projects': [serialize_project(p) for p in Project.objects.all()],
        })

    try:
        data = load_json(request)
    except ValueError:
        return JsonResponse({'success': False, 'message': 'Invalid JSON'}, status=400)

    name = (data.get('name') or '').strip()
    if not name:
        return JsonResponse({'success': False, 'message': 'Project name is required'}, status=400)

    deadline = None
    if data.get('deadline'):
        try:
            deadline = datetime.strptime(data['deadline'], '%Y-%m-%d').date()
        except (TypeError, ValueError):
            return JsonResponse({'success': False, 'message': 'deadline must be YYYY-MM-DD'}, status=400)

    project = Project(name=name, description=data.get('description') or '', deadline=deadline)
    try:
        project.full_clean()
    except ValidationError as e:
        return JsonResponse({'success': False, 'message': validation_message(e)}, status=400)
    project.save()
    logger.info(f"Created project {project.pk} ({project.name})")

    return JsonResponse({
        'success': True,
        'message': f'Project "{project.name}" created',
        'project': serialize_project(project),
    })


@csrf_exempt
@require_http_methods(["DELETE"])
def delete_project(request, project_id):
    """Delete a project along with its jobs and their entries."""
    try:
        project = Project.objects.get(pk=project_id)
    except Project.DoesNotExist:
        return JsonResponse({'success': False, 'message': 'Project not found'}, status=404)

    job_count = project.jobs.count()
    name = project.name
    project.delete()
    logger.info(f"Deleted project {project_id} ({name}) and {job_count} jobs")

    return JsonResponse({'success': True, 'message': f'Project "{name}" deleted', 'deleted_jobs': job_count})
