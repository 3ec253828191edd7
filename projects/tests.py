import json
import uuid
from datetime import date
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from jobs.models import Job, JobColor
from projects.models import Project


class ProjectModelTests(TestCase):
    """Tests for the Project model."""

    def test_str_returns_name(self):
        self.assertEqual(str(Project.objects.create(name='Website')), 'Website')


class ProjectViewTests(TestCase):
    """Tests for the project list/create and delete views."""

    def post(self, payload):
        return self.client.post(
            reverse('projects:project_list'),
            data=json.dumps(payload),
            content_type='application/json',
        )

    def test_create_project(self):
        response = self.post({'name': 'Website', 'deadline': '2024-06-30'})
        self.assertEqual(response.status_code, 200)
        project = Project.objects.get()
        self.assertEqual(project.deadline, date(2024, 6, 30))
        self.assertEqual(response.json()['project']['id'], str(project.pk))

    def test_create_requires_name(self):
        response = self.post({'name': '  '})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Project.objects.exists())

    def test_create_rejects_bad_deadline(self):
        self.assertEqual(self.post({'name': 'Website', 'deadline': 'soon'}).status_code, 400)

    def test_list_projects(self):
        project = Project.objects.create(name='Website')
        Job.objects.create(name='Build', hourly_rate=Decimal('10'), color_theme=JobColor.OLIVE, project=project)
        data = self.client.get(reverse('projects:project_list')).json()
        self.assertEqual(len(data['projects']), 1)
        self.assertEqual(data['projects'][0]['job_count'], 1)

    def test_delete_project_cascades(self):
        project = Project.objects.create(name='Website')
        Job.objects.create(name='Build', hourly_rate=Decimal('10'), color_theme=JobColor.OLIVE, project=project)
        response = self.client.delete(reverse('projects:delete_project', args=[project.pk]))
        self.assertEqual(response.json()['deleted_jobs'], 1)
        self.assertFalse(Job.objects.exists())

    def test_delete_unknown_project(self):
        response = self.client.delete(reverse('projects:delete_project', args=[uuid.uuid4()]))
        self.assertEqual(response.status_code, 404)
