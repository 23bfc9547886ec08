"""
Error translation tests: every failure leaves the API as {"error": ...}
with the status code of its kind.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, IntegrityError
from django.db.models import ProtectedError
from django.http import Http404
from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIClient

from core.base import exceptions
from staffing_project.exception_handler import custom_exception_handler


class UniqueViolationTests(SimpleTestCase):

    def test_sqlite_message(self):
        exc = IntegrityError('UNIQUE constraint failed: site.code')
        self.assertTrue(exceptions.is_unique_violation(exc))

    def test_postgres_sqlstate(self):
        cause = Exception('duplicate key value violates unique constraint')
        cause.sqlstate = '23505'
        exc = IntegrityError('duplicate')
        exc.__cause__ = cause
        self.assertTrue(exceptions.is_unique_violation(exc))

    def test_other_integrity_error(self):
        exc = IntegrityError('NOT NULL constraint failed: site.name')
        self.assertFalse(exceptions.is_unique_violation(exc))


class ExceptionHandlerTests(SimpleTestCase):

    def handle(self, exc):
        return custom_exception_handler(exc, {})

    def test_domain_error_keeps_status_and_fields(self):
        response = self.handle(exceptions.ValidationError('Invalid', fields={'name': ['Required']}))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data, {'error': 'Invalid', 'fields': {'name': ['Required']}})

    def test_django_validation_error(self):
        response = self.handle(DjangoValidationError({'valid_from': 'Too early'}))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['fields'], {'valid_from': ['Too early']})

    def test_translations(self):
        cases = [
            (Http404(), 404),
            (ProtectedError('referenced', set()), 409),
            (IntegrityError('UNIQUE constraint failed: employer.tax_id'), 409),
            (IntegrityError('FOREIGN KEY constraint failed'), 500),
            (DatabaseError('connection lost'), 500),
        ]
        for exc, expected in cases:
            with self.subTest(exc=exc):
                response = self.handle(exc)
                self.assertEqual(response.status_code, expected)
                self.assertIn('error', response.data)

    def test_unknown_exception_is_left_to_django(self):
        self.assertIsNone(self.handle(RuntimeError('boom')))


class HealthCheckTests(TestCase):

    def test_health_check(self):
        response = APIClient().get('/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'text/plain')
