"""
Tax regime catalog and the employer's effective-dated regime history.

Switching regime closes the open period the day before the new one starts
and opens the new period, in one transaction. The employer row is locked
first so concurrent switches for the same employer run one after the other;
the partial unique constraint on open periods backs this up.
"""
import logging

from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from core.base.exceptions import ConflictError, NotFoundError, ValidationError, is_unique_violation
from HR.work_structures.dtos import EmployerTaxRegimeDTO, TaxRegimeCreateDTO, TaxRegimeUpdateDTO
from HR.work_structures.models import Employer, EmployerTaxRegime, TaxRegime
from HR.work_structures.services.reference_service import ReferenceService, sent_fields

logger = logging.getLogger(__name__)


class TaxRegimeService(ReferenceService):
    """Service for the tax regime catalog"""
    model = TaxRegime
    label = 'Tax regime'

    @classmethod
    def list(cls, filters: dict = None):
        """
        List catalog entries.

        Args:
            filters: code / name / search, plus is_active ('true'/'false')
        """
        filters = filters or {}
        queryset = super().list(filters)
        is_active = filters.get('is_active')
        if is_active is not None and str(is_active).strip() != '':
            queryset = queryset.filter(is_active=str(is_active).lower() in ('true', '1'))
        return queryset

    @classmethod
    def create_fields(cls, dto: TaxRegimeCreateDTO) -> dict:
        return {
            'name': dto.name,
            'description': dto.description or '',
            'is_active': dto.is_active,
        }

    @classmethod
    def update_fields(cls, dto: TaxRegimeUpdateDTO) -> dict:
        return sent_fields(dto, ['name', 'description', 'is_active'])


class EmployerTaxRegimeService:
    """Service for the employer's tax regime history"""

    @staticmethod
    def set_regime(dto: EmployerTaxRegimeDTO) -> EmployerTaxRegime:
        """
        Switch the employer to another tax regime from dto.valid_from (default today).

        Returns:
            The new open period with its catalog row loaded

        Raises:
            NotFoundError: no employer profile yet
            ValidationError: unknown/inactive regime, or valid_from before the
                current period's start
            ConflictError: another open period appeared concurrently
        """
        effective_date = dto.valid_from or timezone.localdate()

        try:
            regime = TaxRegime.objects.get(pk=dto.tax_regime_id)
        except TaxRegime.DoesNotExist:
            raise ValidationError(
                "Tax regime not found",
                fields={'taxRegimeId': [f"Tax regime {dto.tax_regime_id} does not exist"]}
            )
        if not regime.is_active:
            raise ValidationError(
                "Tax regime is inactive",
                fields={'taxRegimeId': [f"Tax regime {regime.code} is inactive"]}
            )

        try:
            with transaction.atomic():
                employer = Employer.objects.select_for_update().order_by('id').first()
                if employer is None:
                    raise NotFoundError("Employer profile not found")

                period = EmployerTaxRegime.open_period(
                    {'employer': employer},
                    {'tax_regime': regime},
                    effective_date=effective_date,
                )
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise ConflictError("Employer already has an open tax regime period") from exc
            raise

        logger.info("Employer %s tax regime set to %s from %s",
                    employer.pk, regime.code, period.valid_from)
        return EmployerTaxRegime.objects.select_related('tax_regime').get(pk=period.pk)

    @staticmethod
    def get_current() -> EmployerTaxRegime:
        employer = _first_employer()
        period = (
            EmployerTaxRegime.objects.current()
            .filter(employer=employer)
            .select_related('tax_regime')
            .first()
        )
        if period is None:
            raise NotFoundError("Employer has no current tax regime")
        return period

    @staticmethod
    def get_history() -> QuerySet:
        """All periods of the employer, most recent start first."""
        employer = _first_employer()
        return EmployerTaxRegime.objects.history(employer=employer).select_related('tax_regime')


def _first_employer():
    employer = Employer.objects.order_by('id').first()
    if employer is None:
        raise NotFoundError("Employer profile not found")
    return employer
