from django.db import models
from django.db.models import Q

from core.base.codes import CODE_MAX_LENGTH
from core.base.managers import BaseManager, EffectiveDatedManager
from core.base.models import AuditMixin, EffectiveDatedMixin, FieldMergeMixin


class Employer(FieldMergeMixin, AuditMixin):
    """
    Company profile.

    Only one row is meaningful; readers take the first by id.
    """
    tax_id = models.CharField(
        max_length=20,
        unique=True,
        help_text="Taxpayer identification number"
    )
    business_name = models.CharField(max_length=200)
    trade_name = models.CharField(max_length=200, blank=True)
    address = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=30, blank=True)

    class Meta:
        db_table = 'employer'
        ordering = ['id']

    def __str__(self):
        return self.business_name


class TaxRegime(FieldMergeMixin, AuditMixin):
    """Tax regime catalog entry."""
    code = models.CharField(max_length=CODE_MAX_LENGTH, unique=True)
    name = models.CharField(max_length=128)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)

    objects = BaseManager()

    class Meta:
        db_table = 'tax_regime'
        ordering = ['code']

    def __str__(self):
        return f"{self.code} - {self.name}"


class EmployerTaxRegime(EffectiveDatedMixin, AuditMixin):
    """
    Tax regime held by the employer over a period.

    The open period (valid_to NULL) is the current regime; the partial
    unique constraint allows one open period per employer.
    """
    employer = models.ForeignKey(
        Employer,
        on_delete=models.PROTECT,
        related_name='tax_regimes'
    )
    tax_regime = models.ForeignKey(
        TaxRegime,
        on_delete=models.PROTECT,
        related_name='employer_periods'
    )

    objects = EffectiveDatedManager()

    class Meta:
        db_table = 'employer_tax_regime'
        ordering = ['-valid_from', '-id']
        constraints = [
            models.UniqueConstraint(
                fields=['employer'],
                condition=Q(valid_to__isnull=True),
                name='one_open_tax_regime_per_employer',
            ),
        ]

    def __str__(self):
        return f"{self.employer_id}: {self.tax_regime_id} from {self.valid_from}"

    @classmethod
    def get_period_subject_fields(cls):
        return ['employer']
