import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from .models import (
    CURRENCY_KEY,
    FIRST_WEEKDAY_KEY,
    SHOW_BILLABLE_TAG_KEY,
    Setting,
    get_preferences,
)

logger = logging.getLogger(__name__)

DESCRIPTIONS = {
    FIRST_WEEKDAY_KEY: 'First day of the calendar week (1 = Sunday)',
    SHOW_BILLABLE_TAG_KEY: 'Show the billable tag on entry rows',
    CURRENCY_KEY: 'Currency used to display earnings',
}


@require_GET
def preferences(request):
    """Current user preferences as JSON."""
    return JsonResponse({'success': True, 'preferences': get_preferences()})


@csrf_exempt
@require_POST
def update_preferences(request):
    """
    AJAX endpoint to update user preferences.

    Expects a JSON body with any of:
        - first_weekday: integer 1 (Sunday) ... 7 (Saturday)
        - show_billable_tag: boolean
        - currency: three-letter currency code

    Nothing is saved unless every supplied value is valid.
    """
    try:
        data = json.loads(request.body or b'{}')
    except json.JSONDecodeError:
        return JsonResponse({'success': False, 'message': 'Invalid JSON'}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({'success': False, 'message': 'Expected a JSON object'}, status=400)

    updates = {}

    if FIRST_WEEKDAY_KEY in data:
        try:
            first_weekday = int(data[FIRST_WEEKDAY_KEY])
        except (TypeError, ValueError):
            first_weekday = 0
        if not 1 <= first_weekday <= 7:
            return JsonResponse({
                'success': False,
                'message': 'first_weekday must be between 1 (Sunday) and 7 (Saturday)'
            }, status=400)
        updates[FIRST_WEEKDAY_KEY] = first_weekday

    if SHOW_BILLABLE_TAG_KEY in data:
        updates[SHOW_BILLABLE_TAG_KEY] = 'true' if data[SHOW_BILLABLE_TAG_KEY] else 'false'

    if CURRENCY_KEY in data:
        currency = str(data[CURRENCY_KEY]).strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            return JsonResponse({
                'success': False,
                'message': 'currency must be a three-letter code'
            }, status=400)
        updates[CURRENCY_KEY] = currency

    for key, value in updates.items():
        Setting.set(key, value, DESCRIPTIONS[key])

    logger.info(f"Updated preferences: {sorted(updates)}")
    return JsonResponse({'success': True, 'preferences': get_preferences()})
