"""
Serializers and helpers for uploaded documents
"""
from django.conf import settings
from rest_framework import serializers

from HR.person.models import CandidateDocument, DocumentCategory, EmployeeDocument
from HR.person.models.document import CATEGORY_MAX_FILES


class CandidateDocumentSerializer(serializers.ModelSerializer):
    """Read serializer for CandidateDocument"""
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = CandidateDocument
        fields = ['id', 'category', 'url', 'createdAt']
        read_only_fields = fields


class EmployeeDocumentSerializer(serializers.ModelSerializer):
    """Read serializer for EmployeeDocument"""
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = EmployeeDocument
        fields = ['id', 'category', 'url', 'createdAt']
        read_only_fields = fields


def collect_document_files(request_files, categories=None):
    """
    Pick uploaded files out of a multipart request, keyed by category.

    Each category is a multipart field named after the category tag
    (identity, certificates, ...). Unknown fields are ignored.

    Raises:
        serializers.ValidationError: too many files in a category or a file
        over DOCUMENT_MAX_UPLOAD_SIZE
    """
    categories = [str(category) for category in (categories or DocumentCategory.values)]
    max_size = settings.DOCUMENT_MAX_UPLOAD_SIZE
    files = {}
    errors = {}

    for category in categories:
        uploaded = request_files.getlist(category) if request_files else []
        if not uploaded:
            continue

        limit = CATEGORY_MAX_FILES[category]
        if len(uploaded) > limit:
            errors[category] = [f"At most {limit} file(s) allowed"]
            continue

        too_large = [f.name for f in uploaded if f.size > max_size]
        if too_large:
            errors[category] = [f"File too large: {name}" for name in too_large]
            continue

        files[category] = uploaded

    if errors:
        raise serializers.ValidationError(errors)
    return files
