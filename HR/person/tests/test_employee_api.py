"""
API Tests for Employee endpoints.

The employee detail keeps the older response shape: one URL per document
category, where the earliest upload wins.
"""
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from core.base.test_utils import make_file, use_in_memory_storage
from HR.person.models import Employee, EmployeeDocument


@use_in_memory_storage()
class EmployeeAPITest(TestCase):
    """Test Employee API endpoints."""

    def setUp(self):
        self.client = APIClient()
        self.list_url = '/api/employees/'
        self.payload = {'name': 'Juan Perez', 'site': 'Lima', 'group': '4'}

    def create_employee(self, **extra):
        response = self.client.post(self.list_url, dict(self.payload, **extra), format='multipart')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return response.data['id']

    def test_create_requires_name_site_group(self):
        response = self.client.post(self.list_url, {'name': 'Juan Perez'}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(set(response.data['fields']), {'site', 'group'})
        self.assertEqual(Employee.objects.count(), 0)

    def test_create_with_documents(self):
        employee_id = self.create_employee(
            identity=[make_file('dni.pdf')],
            training=[make_file('sst.pdf')],
        )

        documents = EmployeeDocument.objects.filter(employee_id=employee_id)
        self.assertEqual(sorted(d.category for d in documents), ['identity', 'training'])
        for document in documents:
            self.assertIn(f'employees/{employee_id}/', document.url)

    def test_resume_is_not_an_employee_category(self):
        employee_id = self.create_employee(resume=[make_file('cv.pdf')])
        self.assertEqual(EmployeeDocument.objects.filter(employee_id=employee_id).count(), 0)

    def test_detail_first_document_wins(self):
        employee_id = self.create_employee(identity=[make_file('dni-original.pdf')])
        self.client.post(
            f'{self.list_url}{employee_id}/documents/',
            {'identity': [make_file('dni-renovado.pdf')]},
            format='multipart'
        )

        response = self.client.get(f'{self.list_url}{employee_id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'Juan Perez')
        self.assertIn('dni-original', response.data['identity'])
        self.assertIsNone(response.data['medical'])
        self.assertNotIn('resume', response.data)

        history = self.client.get(f'{self.list_url}{employee_id}/documents/')
        self.assertEqual(len(history.data), 2)
        self.assertIn('dni-renovado', history.data[0]['url'])

    def test_partial_update(self):
        employee_id = self.create_employee()

        response = self.client.put(
            f'{self.list_url}{employee_id}/', {'site': 'Arequipa', 'group': ''}, format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'ok': True})
        employee = Employee.objects.get(pk=employee_id)
        self.assertEqual(employee.site, 'Arequipa')
        self.assertEqual(employee.group, '4')

    def test_list_group_range(self):
        inside = self.create_employee(group='2')
        self.create_employee(group='20')
        self.create_employee(group='N/A')

        response = self.client.get(self.list_url, {'groupStart': '1', 'groupEnd': '9'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([e['id'] for e in response.data], [inside])

    def test_detail_not_found(self):
        response = self.client.get(f'{self.list_url}999999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_documents_append_without_files(self):
        employee_id = self.create_employee()

        response = self.client.post(f'{self.list_url}{employee_id}/documents/', {}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'No files uploaded')
        self.assertIn('files', response.data['fields'])

    def test_documents_append_resume_only_is_rejected(self):
        """resume is not collected for employees, so nothing is left to append"""
        employee_id = self.create_employee()

        response = self.client.post(
            f'{self.list_url}{employee_id}/documents/',
            {'resume': [make_file('cv.pdf')]},
            format='multipart',
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(EmployeeDocument.objects.filter(employee_id=employee_id).count(), 0)
