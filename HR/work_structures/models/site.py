from django.core.exceptions import ValidationError
from django.db import models

from core.base.codes import CODE_MAX_LENGTH
from core.base.managers import BaseManager
from core.base.models import AuditMixin, FieldMergeMixin


class Site(FieldMergeMixin, AuditMixin):
    """
    Physical workplace (plant, office, warehouse).

    Fields:
    - code: Unique code, derived from name when not given
    - name: Display name
    - address: Optional street address
    """
    code = models.CharField(
        max_length=CODE_MAX_LENGTH,
        unique=True,
        help_text="Unique site code (e.g. LIMA-NORTE)"
    )
    name = models.CharField(max_length=128)
    address = models.CharField(max_length=255, blank=True)

    objects = BaseManager()

    class Meta:
        db_table = 'site'
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.name}"


class Project(FieldMergeMixin, AuditMixin):
    """
    Work carried out at one site.

    A site with projects cannot be deleted (PROTECT).
    """
    code = models.CharField(max_length=CODE_MAX_LENGTH, unique=True)
    name = models.CharField(max_length=128)
    site = models.ForeignKey(
        Site,
        on_delete=models.PROTECT,
        related_name='projects',
        help_text="Site the project belongs to"
    )

    objects = BaseManager()

    class Meta:
        db_table = 'project'
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.name}"


class Shift(FieldMergeMixin, AuditMixin):
    """
    Named working time range.

    end_time may be earlier than start_time for overnight shifts.
    """
    code = models.CharField(max_length=CODE_MAX_LENGTH, unique=True)
    name = models.CharField(max_length=128)
    start_time = models.TimeField(null=True, blank=True)
    end_time = models.TimeField(null=True, blank=True)

    objects = BaseManager()

    class Meta:
        db_table = 'shift'
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.name}"

    def clean(self):
        if (self.start_time is None) != (self.end_time is None):
            raise ValidationError({
                'end_time': 'Start and end time must be given together'
            })
