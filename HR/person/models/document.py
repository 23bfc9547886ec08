from django.db import models


class DocumentCategory(models.TextChoices):
    """
    Fixed document tags. Declaration order is the order in which uploads
    are processed and stored.
    """
    IDENTITY = 'identity', 'Identity document'
    CERTIFICATES = 'certificates', 'Certificates'
    BACKGROUND_CHECK = 'background_check', 'Background check'
    MEDICAL = 'medical', 'Medical'
    TRAINING = 'training', 'Training'
    RESUME = 'resume', 'Resume'


# Maximum number of files accepted per category in one request
CATEGORY_MAX_FILES = {
    DocumentCategory.IDENTITY: 2,
    DocumentCategory.CERTIFICATES: 10,
    DocumentCategory.BACKGROUND_CHECK: 5,
    DocumentCategory.MEDICAL: 5,
    DocumentCategory.TRAINING: 10,
    DocumentCategory.RESUME: 2,
}


class DocumentMixin(models.Model):
    """
    Common columns of an uploaded document row.

    Documents are append-only: a new upload under the same category adds a
    row, it never replaces the previous one.
    """
    category = models.CharField(
        max_length=20,
        choices=DocumentCategory.choices,
        db_index=True
    )
    url = models.CharField(max_length=500, help_text="Public URL returned by document storage")
    storage_name = models.CharField(
        max_length=300,
        blank=True,
        help_text="Key of the object in document storage"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.category}: {self.url}"


# Categories accepted for employee documents (no resume)
EMPLOYEE_DOCUMENT_CATEGORIES = [
    DocumentCategory.IDENTITY,
    DocumentCategory.CERTIFICATES,
    DocumentCategory.BACKGROUND_CHECK,
    DocumentCategory.MEDICAL,
    DocumentCategory.TRAINING,
]
