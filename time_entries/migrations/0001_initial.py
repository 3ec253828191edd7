import decimal
import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('jobs', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='TimeEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('start', models.DateTimeField(help_text='When the time entry started')),
                ('end', models.DateTimeField(blank=True, help_text='When the time entry ended (empty while in progress)', null=True)),
                ('notes', models.TextField(blank=True, default='', help_text='Optional free-text notes')),
                ('is_billable', models.BooleanField(default=True, help_text='Whether this entry counts toward earnings')),
                ('custom_rate', models.DecimalField(blank=True, decimal_places=2, help_text="Hourly rate overriding the job's rate for this entry", max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(decimal.Decimal('0'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('job', models.ForeignKey(help_text='Job this time is logged against', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='time_entries', to='jobs.job')),
            ],
            options={
                'verbose_name': 'Time Entry',
                'verbose_name_plural': 'Time Entries',
                'ordering': ['-start'],
                'indexes': [
                    models.Index(fields=['-start'], name='time_entry_start_idx'),
                    models.Index(fields=['job', 'start'], name='time_entry_job_start_idx'),
                ],
            },
        ),
    ]
