from datetime import datetime

import pytz
from django.conf import settings
from django.utils import timezone


def get_default_timezone():
    """Timezone configured for the site (TIME_ZONE setting), falling back to UTC."""
    try:
        return pytz.timezone(settings.TIME_ZONE)
    except pytz.exceptions.UnknownTimeZoneError:
        return pytz.UTC


def get_user_timezone(request):
    """
    Get the user's timezone from the cookie set by JavaScript.
    Falls back to the site timezone if no (valid) timezone is set.
    """
    user_tz_name = request.COOKIES.get('user_timezone')
    if not user_tz_name:
        return get_default_timezone()
    try:
        return pytz.timezone(user_tz_name)
    except pytz.exceptions.UnknownTimeZoneError:
        return get_default_timezone()


def get_user_today(request):
    """
    Get today's date in the user's timezone.
    Returns both the date object and timezone-aware start/end datetimes.
    """
    user_tz = get_user_timezone(request)
    now_in_user_tz = timezone.now().astimezone(user_tz)
    today = now_in_user_tz.date()

    # Create timezone-aware start and end of day in user's timezone
    today_start = user_tz.localize(datetime.combine(today, datetime.min.time()))
    today_end = user_tz.localize(datetime.combine(today, datetime.max.time()))

    return today, today_start, today_end


def local_date(value, tz=None):
    """
    Calendar day of a datetime in the given timezone.

    Naive datetimes are taken as already local. Aware datetimes are converted
    to `tz` (the site timezone when omitted) before the date is read.
    """
    if timezone.is_naive(value):
        return value.date()
    return value.astimezone(tz or get_default_timezone()).date()
