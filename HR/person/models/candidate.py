from django.db import models

from core.base.models import AuditMixin, FieldMergeMixin
from .document import DocumentMixin


class CandidateStatus(models.TextChoices):
    UNDER_REVIEW = 'under_review', 'Under review'
    CANCELLED = 'cancelled', 'Cancelled'
    APPROVED = 'approved', 'Approved'


class Candidate(FieldMergeMixin, AuditMixin, models.Model):
    """
    Job candidate.

    Mixins:
    - FieldMergeMixin: Partial updates (unsent fields keep their value)
    - AuditMixin: created_at, updated_at

    Fields:
    - national_id: Natural key, unique
    - last_name_1 / last_name_2 / first_names: Name parts
    - site, shift, group: Workplace assignment as entered (free text;
      group is usually a number but not guaranteed to be one)
    - status: Review status, any transition allowed
    """
    national_id = models.CharField(
        max_length=20,
        unique=True,
        help_text="National identity document number"
    )
    last_name_1 = models.CharField(max_length=100)
    last_name_2 = models.CharField(max_length=100)
    first_names = models.CharField(max_length=150)

    site = models.CharField(max_length=100, blank=True, null=True)
    shift = models.CharField(max_length=100, blank=True, null=True)
    group = models.CharField(max_length=20, blank=True, null=True)

    status = models.CharField(
        max_length=20,
        choices=CandidateStatus.choices,
        default=CandidateStatus.UNDER_REVIEW,
        db_index=True
    )

    class Meta:
        db_table = 'candidate'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['created_at', 'id']),
        ]

    def __str__(self):
        return f"{self.national_id} - {self.full_name}"

    @property
    def full_name(self):
        parts = [self.first_names, self.last_name_1, self.last_name_2]
        return ' '.join(part for part in parts if part)


class CandidateDocument(DocumentMixin):
    candidate = models.ForeignKey(
        Candidate,
        on_delete=models.CASCADE,
        related_name='documents'
    )

    class Meta(DocumentMixin.Meta):
        db_table = 'candidate_document'
        indexes = [
            models.Index(fields=['candidate', 'category']),
        ]
