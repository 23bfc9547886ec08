"""
Employee Service - Business Logic Layer

Simplified employee records kept alongside candidates for existing clients.
Creation, partial updates and documents go through the same transactional
writer as candidates; the detail view keeps the old "first document per
category" shape.
"""

import logging

from django.db import transaction
from django.db.models import QuerySet

from core.base.exceptions import NotFoundError
from core.base.filters import apply_filters, group_range_filter, month_filter, year_filter
from HR.person.dtos import EmployeeCreateDTO, EmployeeUpdateDTO
from HR.person.models import Employee, EmployeeDocument
from HR.person.models.document import EMPLOYEE_DOCUMENT_CATEGORIES
from HR.person.services.record_writer import RecordWithDocumentsWriter

logger = logging.getLogger(__name__)

EMPLOYEE_FILTERS = [
    year_filter('created_at'),
    month_filter('created_at'),
    group_range_filter('group'),
]


class EmployeeService:
    """Service layer for employee records"""

    @staticmethod
    def writer(storage=None) -> RecordWithDocumentsWriter:
        return RecordWithDocumentsWriter(
            model=Employee,
            document_model=EmployeeDocument,
            owner_field='employee',
            namespace='employees',
            required_fields=('full_name', 'site', 'group'),
            storage=storage,
        )

    @staticmethod
    def list_employees(filters: dict = None) -> QuerySet:
        """
        List employees, newest first.

        Args:
            filters: Dictionary of filters
                - year / month: Creation date parts or 'ALL'
                - groupStart / groupEnd: Inclusive numeric group range
        """
        return apply_filters(Employee.objects.all(), EMPLOYEE_FILTERS, filters or {},
                             date_field='created_at')

    @staticmethod
    def get_employee(employee_id: int) -> Employee:
        try:
            return Employee.objects.prefetch_related('documents').get(pk=employee_id)
        except Employee.DoesNotExist:
            raise NotFoundError(f"Employee {employee_id} not found")

    @staticmethod
    def first_document_urls(employee: Employee) -> dict:
        """
        Earliest document URL per category, None where there is none.

        Deprecated: later documents of the same category are hidden. Use the
        documents endpoint for the full history.
        """
        urls = {category.value: None for category in EMPLOYEE_DOCUMENT_CATEGORIES}
        for document in sorted(employee.documents.all(), key=lambda d: (d.created_at, d.id)):
            if urls[document.category] is None:
                urls[document.category] = document.url
        return urls

    @staticmethod
    def create(dto: EmployeeCreateDTO, storage=None) -> Employee:
        fields = {
            'full_name': dto.full_name,
            'site': dto.site,
            'group': dto.group,
        }
        return EmployeeService.writer(storage).create(fields, dto.files)

    @staticmethod
    def update(dto: EmployeeUpdateDTO, storage=None) -> Employee:
        """Merge sent non-blank fields and append any uploaded documents."""
        field_updates = {}
        for field_name in ('full_name', 'site', 'group'):
            value = getattr(dto, field_name)
            if value not in (None, ''):
                field_updates[field_name] = value

        with transaction.atomic():
            try:
                employee = Employee.objects.select_for_update().get(pk=dto.employee_id)
            except Employee.DoesNotExist:
                raise NotFoundError(f"Employee {dto.employee_id} not found")

            if field_updates:
                employee.update_fields(field_updates)
            EmployeeService.writer(storage).attach(employee, dto.files)

        return employee

    @staticmethod
    def list_documents(employee_id: int) -> QuerySet:
        if not Employee.objects.filter(pk=employee_id).exists():
            raise NotFoundError(f"Employee {employee_id} not found")
        return EmployeeDocument.objects.filter(employee_id=employee_id).order_by('-created_at', '-id')

    @staticmethod
    def add_documents(employee_id: int, files: dict, storage=None):
        employee = EmployeeService.get_employee(employee_id)
        return EmployeeService.writer(storage).attach(employee, files)
