from django.apps import AppConfig


class TimeEntriesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "time_entries"
    verbose_name = "Time Entries"

    def ready(self):
        from .services.repository import entry_repository, stamp_job_activity
        entry_repository.subscribe(stamp_job_activity)
