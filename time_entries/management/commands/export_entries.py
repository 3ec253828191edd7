"""
Django management command to export a job's time entries as CSV.

Usage:
    python manage.py export_entries <job_id>
    python manage.py export_entries <job_id> --output=entries.csv --filter=billable --sort=oldest_first
"""
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from hourglass.timezone_utils import get_default_timezone
from jobs.models import Job
from time_entries.services.csv_export import write_csv
from time_entries.services.repository import FilterOption, SortOption, entry_repository


class Command(BaseCommand):
    help = "Export a job's time entries to CSV"

    def add_arguments(self, parser):
        parser.add_argument('job_id', help='UUID of the job to export')
        parser.add_argument(
            '--output',
            help='File to write (default: stdout)'
        )
        parser.add_argument(
            '--filter',
            default=FilterOption.ALL.value,
            choices=FilterOption.values,
            help='Entry filter (default: all)'
        )
        parser.add_argument(
            '--sort',
            default=SortOption.NEWEST_FIRST.value,
            choices=SortOption.values,
            help='Entry order (default: newest_first)'
        )

    def handle(self, *args, **options):
        try:
            job = Job.objects.get(pk=options['job_id'])
        except (Job.DoesNotExist, ValidationError, ValueError):
            raise CommandError(f"Job {options['job_id']} not found")

        entries = entry_repository.list(options['filter'], options['sort'], job=job)
        tz = get_default_timezone()

        output = options.get('output')
        if not output:
            write_csv(entries, self.stdout, tz)
            return

        try:
            with open(output, 'w', newline='', encoding='utf-8') as f:
                count = write_csv(entries, f, tz)
        except OSError as e:
            raise CommandError(f'Could not write {output}: {e}')

        self.stdout.write(self.style.SUCCESS(f'Exported {count} entries for "{job.name}" to {output}'))
