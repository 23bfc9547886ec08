import logging

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from core.base.exceptions import (
    ConflictError,
    NotFoundError,
    ReferentialIntegrityError,
    is_unique_violation,
)
from HR.work_structures.dtos import EmployerCreateDTO, EmployerUpdateDTO
from HR.work_structures.models import Employer
from HR.work_structures.services.reference_service import sent_fields

logger = logging.getLogger(__name__)

EMPLOYER_FIELDS = ['tax_id', 'business_name', 'trade_name', 'address', 'email', 'phone']


class EmployerService:
    """Service for the employer profile"""

    @staticmethod
    def get_profile() -> Employer:
        """Return the employer (first row by id)."""
        employer = Employer.objects.order_by('id').first()
        if employer is None:
            raise NotFoundError("Employer profile not found")
        return employer

    @staticmethod
    def create(dto: EmployerCreateDTO) -> Employer:
        employer = Employer(
            tax_id=dto.tax_id,
            business_name=dto.business_name,
            trade_name=dto.trade_name or '',
            address=dto.address or '',
            email=dto.email or '',
            phone=dto.phone or '',
        )
        employer.full_clean(validate_unique=False)
        try:
            with transaction.atomic():
                employer.save()
        except IntegrityError as exc:
            _raise_conflict(exc)

        logger.info("Created employer %s (%s)", employer.pk, employer.tax_id)
        return employer

    @staticmethod
    def update(dto: EmployerUpdateDTO) -> Employer:
        field_updates = sent_fields(dto, EMPLOYER_FIELDS)

        with transaction.atomic():
            try:
                employer = Employer.objects.select_for_update().get(pk=dto.employer_id)
            except Employer.DoesNotExist:
                raise NotFoundError(f"Employer {dto.employer_id} not found")

            if field_updates:
                try:
                    employer.update_fields(field_updates)
                except IntegrityError as exc:
                    _raise_conflict(exc)
        return employer

    @staticmethod
    def delete(employer_id: int):
        try:
            employer = Employer.objects.get(pk=employer_id)
        except Employer.DoesNotExist:
            raise NotFoundError(f"Employer {employer_id} not found")

        try:
            with transaction.atomic():
                employer.delete()
        except ProtectedError as exc:
            raise ReferentialIntegrityError(
                "Employer has tax regime history and cannot be deleted"
            ) from exc
        logger.info("Deleted employer %s", employer_id)


def _raise_conflict(exc):
    if is_unique_violation(exc):
        raise ConflictError("Tax ID already registered") from exc
    raise exc
