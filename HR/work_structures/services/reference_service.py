"""
Shared CRUD behaviour for code-keyed reference tables (sites, projects,
shifts, tax regimes).

- create: code is normalized when given, derived from name otherwise
- update: field-presence merge (None = not sent)
- delete: blocked with ReferentialIntegrityError while rows reference it
"""
import logging

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError, QuerySet

from core.base.codes import generate_unique_code, normalize_code
from core.base.exceptions import (
    ConflictError,
    NotFoundError,
    ReferentialIntegrityError,
    ValidationError,
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class ReferenceService:
    """
    Base service for one reference model.

    Subclasses set `model` and `label`, and implement create_fields() and
    update_fields() to turn their DTOs into model field dicts.
    """
    model = None
    label = 'Record'

    @classmethod
    def queryset(cls) -> QuerySet:
        return cls.model.objects.all()

    @classmethod
    def list(cls, filters: dict = None) -> QuerySet:
        """
        List rows ordered by code.

        Args:
            filters: Optional code / name / search parameters
        """
        return cls.queryset().filter_by_search_params(filters or {}).order_by('code')

    @classmethod
    def get(cls, pk: int):
        try:
            return cls.queryset().get(pk=pk)
        except cls.model.DoesNotExist:
            raise NotFoundError(f"{cls.label} {pk} not found")

    @classmethod
    def create_fields(cls, dto) -> dict:
        raise NotImplementedError

    @classmethod
    def update_fields(cls, dto) -> dict:
        raise NotImplementedError

    @classmethod
    def create(cls, dto):
        """
        Create a row, deriving a unique code from the name when none is given.

        Raises:
            ValidationError: invalid fields or no usable code
            ConflictError: code already used
        """
        fields = cls.create_fields(dto)
        if dto.code:
            fields['code'] = cls._normalized(dto.code)
        else:
            fields['code'] = generate_unique_code(cls.model, dto.name)

        instance = cls.model(**fields)
        instance.full_clean(validate_unique=False)
        cls._save(instance)

        logger.info("Created %s %s (%s)", cls.label, instance.pk, instance.code)
        return instance

    @classmethod
    def update(cls, pk: int, dto):
        """Apply the sent fields only; everything else keeps its value."""
        field_updates = cls.update_fields(dto)
        if dto.code is not None:
            field_updates['code'] = cls._normalized(dto.code)

        with transaction.atomic():
            try:
                instance = cls.model.objects.select_for_update().get(pk=pk)
            except cls.model.DoesNotExist:
                raise NotFoundError(f"{cls.label} {pk} not found")

            if field_updates:
                try:
                    instance.update_fields(field_updates)
                except IntegrityError as exc:
                    cls._raise_conflict(exc)
        return instance

    @classmethod
    def delete(cls, pk: int):
        instance = cls.get(pk)
        try:
            with transaction.atomic():
                instance.delete()
        except ProtectedError as exc:
            raise ReferentialIntegrityError(
                f"{cls.label} {pk} is still referenced and cannot be deleted"
            ) from exc
        logger.info("Deleted %s %s", cls.label, pk)

    @classmethod
    def _normalized(cls, code):
        max_length = cls.model._meta.get_field('code').max_length
        normalized = normalize_code(code, max_length)
        if not normalized:
            raise ValidationError(
                "Invalid code",
                fields={'code': ['Must contain letters or digits']}
            )
        return normalized

    @classmethod
    def _save(cls, instance):
        try:
            with transaction.atomic():
                instance.save()
        except IntegrityError as exc:
            cls._raise_conflict(exc)

    @classmethod
    def _raise_conflict(cls, exc):
        if is_unique_violation(exc):
            raise ConflictError(f"{cls.label} code already exists") from exc
        raise exc


def sent_fields(dto, names) -> dict:
    """Collect the DTO attributes that were sent (not None)."""
    return {
        name: getattr(dto, name)
        for name in names
        if getattr(dto, name) is not None
    }
