import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique project identifier', primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Human-readable project name', max_length=255)),
                ('description', models.TextField(blank=True, default='', help_text='Optional free-text description')),
                ('is_completed', models.BooleanField(default=False)),
                ('deadline', models.DateField(blank=True, help_text='Optional due date for the whole project', null=True)),
                ('date_created', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Project',
                'verbose_name_plural': 'Projects',
                'ordering': ['-date_created'],
            },
        ),
    ]
