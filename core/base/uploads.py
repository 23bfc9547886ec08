"""
Document uploads to object storage.

Files go through Django's storage API so the same code writes to the local
filesystem in development and to S3 (django-storages) in production. Objects
land under a deterministic folder:

    {namespace}/{owner_key}/{category}/{object-name}{.ext}
"""
import logging
import os
from dataclasses import dataclass

from django.core.files.storage import default_storage
from django.utils.text import slugify

from core.base.exceptions import UploadError

logger = logging.getLogger(__name__)

OBJECT_NAME_MAX_LENGTH = 60


@dataclass
class UploadedDocument:
    category: str
    url: str
    storage_name: str


def object_name(filename):
    """
    Derive a storage-safe name from an uploaded file's original name.

    Path and extension are dropped, the stem is slugified and capped.
    """
    basename = (filename or '').replace('\\', '/').rsplit('/', 1)[-1]
    stem, _ = os.path.splitext(basename)
    name = slugify(stem)[:OBJECT_NAME_MAX_LENGTH].strip('-_')
    return name or 'document'


def _extension(filename):
    _, ext = os.path.splitext(filename or '')
    return ext.lower()[:10]


class DocumentUploader:
    """
    Uploads categorized files for one owner.

    Args:
        namespace: Top-level folder (e.g. 'candidates')
        storage: Django storage backend (default: default_storage)
    """

    def __init__(self, namespace, storage=None):
        self.namespace = namespace
        self.storage = storage or default_storage

    def folder(self, owner_key, category):
        return f"{self.namespace}/{owner_key}/{category}"

    def upload(self, file, owner_key, category) -> UploadedDocument:
        original = getattr(file, 'name', '') or ''
        path = f"{self.folder(owner_key, category)}/{object_name(original)}{_extension(original)}"
        try:
            stored_name = self.storage.save(path, file)
            url = self.storage.url(stored_name)
        except Exception as exc:
            raise UploadError(f"Could not upload '{original}' ({category})") from exc
        return UploadedDocument(category=category, url=url, storage_name=stored_name)

    def upload_all(self, owner_key, files_by_category, categories):
        """
        Upload every file, category by category in the given order.

        Returns:
            list[UploadedDocument] ordered by category then original file order

        Raises:
            UploadError: any single upload failed. Objects stored earlier in
            this call are removed before the error propagates.
        """
        uploaded = []
        try:
            for category in categories:
                for file in files_by_category.get(category) or []:
                    uploaded.append(self.upload(file, owner_key, category))
        except UploadError:
            self.discard(uploaded)
            raise
        return uploaded

    def discard(self, uploaded):
        """Best-effort removal of stored objects whose database rows were rolled back."""
        for document in uploaded:
            try:
                self.storage.delete(document.storage_name)
            except Exception:
                logger.exception("Could not delete orphaned upload %s", document.storage_name)
            else:
                logger.info("Deleted orphaned upload %s", document.storage_name)
