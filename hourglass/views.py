from django.http import JsonResponse

from jobs.models import Job
from time_entries.models import TimeEntry


def home(request):
    """
    Counts of open jobs and logged entries.
    """
    return JsonResponse({
        'success': True,
        'open_jobs': Job.objects.filter(is_completed=False).count(),
        'completed_jobs': Job.objects.filter(is_completed=True).count(),
        'time_entries': TimeEntry.objects.count(),
    })
