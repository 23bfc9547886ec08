"""
Candidate Service - Business Logic Layer

Handles the candidate intake workflow:
- Listing with year/month/status/group-range filters
- Creation with documents (one transaction)
- Partial updates (unsent or blank fields keep their value)
- Review status changes
- Document history and appends
"""

import logging

from django.db import transaction
from django.db.models import Count, OuterRef, QuerySet, Subquery

from core.base.exceptions import NotFoundError, ValidationError
from core.base.filters import (
    apply_filters,
    group_range_filter,
    month_filter,
    status_filter,
    year_filter,
)
from HR.person.dtos import CandidateCreateDTO, CandidateUpdateDTO
from HR.person.models import Candidate, CandidateDocument, CandidateStatus, DocumentCategory
from HR.person.services.record_writer import RecordWithDocumentsWriter

logger = logging.getLogger(__name__)

CANDIDATE_FILTERS = [
    year_filter('created_at'),
    month_filter('created_at'),
    status_filter('status', case_insensitive=True),
    group_range_filter('group'),
]

UPDATABLE_FIELDS = [
    'last_name_1', 'last_name_2', 'first_names', 'site', 'shift', 'group', 'status',
]


def document_url_field(category) -> str:
    return f'{category}_url'


def with_latest_document_urls(queryset: QuerySet) -> QuerySet:
    """Annotate each candidate with its newest document URL per category (NULL when none)."""
    annotations = {}
    for category in DocumentCategory:
        latest = CandidateDocument.objects.filter(
            candidate=OuterRef('pk'), category=category
        ).order_by('-created_at', '-id')
        annotations[document_url_field(category.value)] = Subquery(latest.values('url')[:1])
    return queryset.annotate(**annotations)


class CandidateService:
    """Service layer for candidate management"""

    @staticmethod
    def writer(storage=None) -> RecordWithDocumentsWriter:
        return RecordWithDocumentsWriter(
            model=Candidate,
            document_model=CandidateDocument,
            owner_field='candidate',
            namespace='candidates',
            required_fields=('national_id', 'last_name_1', 'last_name_2', 'first_names'),
            owner_key=lambda candidate: candidate.national_id,
            conflict_message='National ID already registered',
            storage=storage,
        )

    @staticmethod
    def list_candidates(filters: dict = None) -> QuerySet:
        """
        List candidates, newest first.

        Args:
            filters: Dictionary of filters
                - year: Creation year or 'ALL' (default)
                - month: Creation month or 'ALL' (default)
                - status: Case-insensitive status match
                - groupStart / groupEnd: Inclusive numeric group range
                  (both required; non-numeric groups never match)

        Returns:
            QuerySet of Candidate objects annotated with doc_count and the
            newest document URL per category
        """
        queryset = with_latest_document_urls(
            Candidate.objects.annotate(doc_count=Count('documents'))
        )
        return apply_filters(queryset, CANDIDATE_FILTERS, filters or {}, date_field='created_at')

    @staticmethod
    def get_candidate(candidate_id: int) -> Candidate:
        try:
            return with_latest_document_urls(
                Candidate.objects.prefetch_related('documents')
            ).get(pk=candidate_id)
        except Candidate.DoesNotExist:
            raise NotFoundError(f"Candidate {candidate_id} not found")

    @staticmethod
    def create(dto: CandidateCreateDTO, storage=None) -> Candidate:
        """
        Create a candidate and its documents atomically.

        Raises:
            ValidationError: required fields missing
            ConflictError: national_id already registered
            UploadError / PersistenceError: write failed, nothing was kept
        """
        fields = {
            'national_id': dto.national_id,
            'last_name_1': dto.last_name_1,
            'last_name_2': dto.last_name_2,
            'first_names': dto.first_names,
            'site': dto.site or None,
            'shift': dto.shift or None,
            'group': dto.group or None,
        }
        return CandidateService.writer(storage).create(fields, dto.files)

    @staticmethod
    def update(dto: CandidateUpdateDTO, storage=None) -> Candidate:
        """
        Merge sent fields into the candidate and append any uploaded documents.

        None or blank values are ignored, matching the COALESCE merge policy.
        """
        field_updates = {}
        for field_name in UPDATABLE_FIELDS:
            value = getattr(dto, field_name)
            if value not in (None, ''):
                field_updates[field_name] = value

        with transaction.atomic():
            try:
                candidate = Candidate.objects.select_for_update().get(pk=dto.candidate_id)
            except Candidate.DoesNotExist:
                raise NotFoundError(f"Candidate {dto.candidate_id} not found")

            if field_updates:
                candidate.update_fields(field_updates)
            CandidateService.writer(storage).attach(candidate, dto.files)

        return candidate

    @staticmethod
    def set_status(candidate_id: int, status: str) -> Candidate:
        """
        Change review status. Any status may follow any other.

        Raises:
            ValidationError: status is not one of CandidateStatus
            NotFoundError: no such candidate
        """
        if status not in CandidateStatus.values:
            raise ValidationError(
                "Invalid status",
                fields={'status': [f"Must be one of: {', '.join(CandidateStatus.values)}"]}
            )

        try:
            candidate = Candidate.objects.get(pk=candidate_id)
        except Candidate.DoesNotExist:
            raise NotFoundError(f"Candidate {candidate_id} not found")

        candidate.status = status
        candidate.save(update_fields=['status', 'updated_at'])

        logger.info("Candidate %s status set to %s", candidate_id, status)
        return candidate

    @staticmethod
    def list_documents(candidate_id: int) -> QuerySet:
        if not Candidate.objects.filter(pk=candidate_id).exists():
            raise NotFoundError(f"Candidate {candidate_id} not found")
        return CandidateDocument.objects.filter(candidate_id=candidate_id).order_by('-created_at', '-id')

    @staticmethod
    def add_documents(candidate_id: int, files: dict, storage=None):
        candidate = CandidateService.get_candidate(candidate_id)
        return CandidateService.writer(storage).attach(candidate, files)
