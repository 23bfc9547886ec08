"""
Core Base Module

Provides shared base classes, mixins, and utilities for the staffing apps.

**Architecture:**
Each feature is a separate mixin that can be composed together.

Exports:
    Individual Feature Mixins:
        - AuditMixin: Adds created_at, updated_at
        - FieldMergeMixin: Partial updates through update_fields()
        - EffectiveDatedMixin: Adds valid_from, valid_to and open_period()

    Managers & QuerySets:
        - BaseQuerySet: Base queryset with filter_by_search_params
        - BaseManager: Manager for plain reference tables
        - EffectiveDatedQuerySet: current()/active_on()/history()
        - EffectiveDatedManager: Manager for EffectiveDatedMixin models

Helpers (import from their modules):
    - core.base.filters: list filter builders (year, month, status, group range)
    - core.base.uploads: DocumentUploader
    - core.base.codes: unique code generation
    - core.base.exceptions: error taxonomy

Usage Examples:

    # Reference table with a generated code
    from core.base import AuditMixin, FieldMergeMixin
    from core.base.managers import BaseManager

    class Site(FieldMergeMixin, AuditMixin):
        code = models.CharField(max_length=30, unique=True)
        name = models.CharField(max_length=128)
        objects = BaseManager()

    # Effective-dated history
    from core.base import EffectiveDatedMixin
    from core.base.managers import EffectiveDatedManager

    class EmployerTaxRegime(EffectiveDatedMixin):
        employer = models.ForeignKey(Employer, on_delete=models.PROTECT)
        tax_regime = models.ForeignKey(TaxRegime, on_delete=models.PROTECT)
        objects = EffectiveDatedManager()

        @classmethod
        def get_period_subject_fields(cls):
            return ['employer']
"""

from core.base.models import (
    AuditMixin,
    FieldMergeMixin,
    EffectiveDatedMixin,
)

from core.base.managers import (
    BaseQuerySet,
    BaseManager,
    EffectiveDatedQuerySet,
    EffectiveDatedManager,
)

__all__ = [
    # Individual Feature Mixins
    'AuditMixin',
    'FieldMergeMixin',
    'EffectiveDatedMixin',

    # Managers & QuerySets
    'BaseQuerySet',
    'BaseManager',
    'EffectiveDatedQuerySet',
    'EffectiveDatedManager',
]
