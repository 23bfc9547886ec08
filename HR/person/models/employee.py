from django.db import models

from core.base.models import AuditMixin, FieldMergeMixin
from .document import DocumentMixin


class Employee(FieldMergeMixin, AuditMixin, models.Model):
    """
    Employee record (simplified family kept for existing clients).

    Only the name, site and group are tracked. Unlike candidates there is no
    natural key, so documents are stored under the employee id.
    """
    full_name = models.CharField(max_length=200)
    site = models.CharField(max_length=100)
    group = models.CharField(max_length=20)

    class Meta:
        db_table = 'employee'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.full_name


class EmployeeDocument(DocumentMixin):
    employee = models.ForeignKey(
        Employee,
        on_delete=models.CASCADE,
        related_name='documents'
    )

    class Meta(DocumentMixin.Meta):
        db_table = 'employee_document'
        indexes = [
            models.Index(fields=['employee', 'category']),
        ]
