import decimal
import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('projects', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Job',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Display name of the job', max_length=255)),
                ('description', models.TextField(blank=True, help_text='Optional free-text description', null=True)),
                ('hourly_rate', models.DecimalField(decimal_places=2, default=decimal.Decimal('0.00'), help_text='Rate applied to entries without a custom rate', max_digits=10, validators=[django.core.validators.MinValueValidator(decimal.Decimal('0'))])),
                ('is_completed', models.BooleanField(default=False)),
                (
                    'icon_name',
                    models.CharField(
                        choices=[
                            ('briefcase', 'Briefcase'),
                            ('person.2', 'Person 2'),
                            ('display', 'Display'),
                            ('wrench.and.screwdriver', 'Wrench And Screwdriver'),
                            ('hammer', 'Hammer'),
                            ('building.2', 'Building 2'),
                            ('doc.text', 'Doc Text'),
                            ('folder', 'Folder'),
                            ('calendar', 'Calendar'),
                            ('clock', 'Clock'),
                            ('timer', 'Timer'),
                            ('stopwatch', 'Stopwatch'),
                            ('dollarsign.circle', 'Dollarsign Circle'),
                            ('eurosign.circle', 'Eurosign Circle'),
                            ('chart.bar', 'Chart Bar'),
                            ('chart.pie', 'Chart Pie'),
                            ('desktopcomputer', 'Desktopcomputer'),
                            ('laptopcomputer', 'Laptopcomputer'),
                            ('server.rack', 'Server Rack'),
                            ('pencil.and.ruler', 'Pencil And Ruler'),
                            ('signature', 'Signature'),
                            ('at', 'At'),
                            ('person.3', 'Person 3'),
                            ('lightbulb', 'Lightbulb'),
                            ('target', 'Target'),
                            ('airplane.departure', 'Airplane Departure'),
                            ('car', 'Car'),
                            ('shippingbox', 'Shippingbox'),
                            ('paintbrush.pointed', 'Paintbrush Pointed'),
                            ('briefcase.fill', 'Briefcase Fill'),
                            ('pencil', 'Pencil'),
                            ('highlighter', 'Highlighter'),
                            ('paperclip', 'Paperclip'),
                            ('link', 'Link'),
                            ('ruler', 'Ruler'),
                            ('book.closed', 'Book Closed'),
                            ('creditcard', 'Creditcard'),
                            ('tray.full', 'Tray Full'),
                            ('archivebox', 'Archivebox'),
                            ('printer', 'Printer'),
                            ('scanner', 'Scanner'),
                            ('phone', 'Phone'),
                            ('teletype', 'Teletype'),
                            ('mail', 'Mail'),
                            ('location', 'Location'),
                            ('map', 'Map'),
                            ('pin', 'Pin'),
                            ('network', 'Network'),
                            ('globe', 'Globe'),
                            ('cpu', 'Cpu'),
                            ('memorychip', 'Memorychip'),
                            ('lifepreserver', 'Lifepreserver'),
                            ('graduationcap', 'Graduationcap'),
                            ('fork.knife', 'Fork Knife'),
                            ('camera', 'Camera'),
                            ('scissors', 'Scissors'),
                            ('eyedropper', 'Eyedropper'),
                            ('wrench', 'Wrench'),
                            ('arrow.up.arrow.down', 'Arrow Up Arrow Down'),
                        ],
                        default='briefcase',
                        help_text='Icon identifier from the fixed icon set',
                        max_length=50,
                    ),
                ),
                ('color_theme', models.CharField(choices=[('slate', 'Slate'), ('sage', 'Sage'), ('mist', 'Mist'), ('sand', 'Sand'), ('rose', 'Rose'), ('sky', 'Sky'), ('terracotta', 'Terracotta'), ('lavender', 'Lavender'), ('stone', 'Stone'), ('indigo', 'Indigo'), ('teal', 'Teal'), ('maroon', 'Maroon'), ('olive', 'Olive'), ('coral', 'Coral')], help_text='Colour theme used for the job card and calendar', max_length=20)),
                ('date_created', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(blank=True, null=True)),
                ('project', models.ForeignKey(blank=True, help_text='Parent project (optional)', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='jobs', to='projects.project')),
            ],
            options={
                'verbose_name': 'Job',
                'verbose_name_plural': 'Jobs',
                'ordering': ['-date_created'],
                'indexes': [models.Index(fields=['-date_created'], name='job_date_created_idx')],
            },
        ),
    ]
