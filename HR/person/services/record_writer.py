"""
Record + Documents Transactional Writer

Creates a parent record and its uploaded documents as one unit:

1. Insert parent row (generated id + natural key for storage pathing)
2. Upload files category by category, in DocumentCategory order
3. Bulk-insert all document rows in one statement
4. Commit

Any failure rolls the whole transaction back. Objects already written to
document storage are deleted afterwards so a failed create leaves nothing
behind on either side.
"""
import logging

from django.db import DatabaseError, IntegrityError, transaction

from core.base.exceptions import (
    ConflictError,
    DomainError,
    PersistenceError,
    ValidationError,
    is_unique_violation,
)
from core.base.uploads import DocumentUploader
from HR.person.models import DocumentCategory

logger = logging.getLogger(__name__)


class RecordWithDocumentsWriter:
    """
    Writer for one parent model and its document model.

    Args:
        model: Parent model (e.g. Candidate)
        document_model: Document model with a FK to model
        owner_field: Name of that FK on document_model
        namespace: Top-level storage folder
        required_fields: Fields that must be present and non-blank on create
        owner_key: Callable record -> storage folder key (default: pk)
        conflict_message: Message for uniqueness violations on create
        storage: Django storage backend (default: default_storage)
    """

    categories = DocumentCategory.values

    def __init__(self, model, document_model, owner_field, namespace,
                 required_fields=(), owner_key=None, conflict_message=None, storage=None):
        self.model = model
        self.document_model = document_model
        self.owner_field = owner_field
        self.required_fields = tuple(required_fields)
        self.owner_key = owner_key or (lambda record: record.pk)
        self.conflict_message = conflict_message or f"{model.__name__} already exists"
        self.uploader = DocumentUploader(namespace, storage=storage)

    def create(self, fields: dict, files: dict = None):
        """
        Insert the parent record and its documents atomically.

        Returns:
            The committed parent record

        Raises:
            ValidationError: a required field is missing
            ConflictError: natural key already taken
            UploadError: a file could not be stored
            PersistenceError: any other database failure
        """
        missing = [name for name in self.required_fields if not fields.get(name)]
        if missing:
            raise ValidationError(
                "Missing required fields",
                fields={name: ['This field is required.'] for name in missing}
            )

        uploaded = []
        try:
            with transaction.atomic():
                record = self.model.objects.create(**fields)
                uploaded = self.uploader.upload_all(
                    self.owner_key(record), files or {}, self.categories
                )
                self._insert_documents(record, uploaded)
        except Exception as exc:
            self.uploader.discard(uploaded)
            self._raise_translated(exc, f"create {self.model.__name__}")

        logger.info("Created %s %s with %d document(s)",
                    self.model.__name__, record.pk, len(uploaded))
        return record

    def attach(self, record, files: dict):
        """
        Append documents to an existing record.

        Runs in its own atomic block, so inside a caller's transaction it
        becomes a savepoint.

        Returns:
            list of created document rows
        """
        if not files:
            return []

        uploaded = []
        try:
            with transaction.atomic():
                uploaded = self.uploader.upload_all(
                    self.owner_key(record), files, self.categories
                )
                documents = self._insert_documents(record, uploaded)
        except Exception as exc:
            self.uploader.discard(uploaded)
            self._raise_translated(exc, f"attach documents to {self.model.__name__} {record.pk}")

        return documents

    def _insert_documents(self, record, uploaded):
        if not uploaded:
            return []
        return self.document_model.objects.bulk_create([
            self.document_model(
                **{self.owner_field: record},
                category=document.category,
                url=document.url,
                storage_name=document.storage_name,
            )
            for document in uploaded
        ])

    def _raise_translated(self, exc, action):
        if isinstance(exc, DomainError):
            logger.warning("Could not %s: %s", action, exc.message)
            raise exc
        if isinstance(exc, IntegrityError) and is_unique_violation(exc):
            logger.warning("Could not %s: duplicate key", action)
            raise ConflictError(self.conflict_message) from exc
        if isinstance(exc, DatabaseError):
            logger.error("Could not %s: %s", action, exc)
            raise PersistenceError(f"Could not {action}") from exc
        raise exc
