"""
Serializers for Candidate model

Request and response fields use the camelCase names the front end sends
(nationalId, lastName1, groupStart, ...).
"""
from rest_framework import serializers

from core.base.filters import ALL
from HR.person.dtos import CandidateCreateDTO, CandidateUpdateDTO
from HR.person.models import Candidate, CandidateStatus, DocumentCategory
from HR.person.serializers.document_serializers import CandidateDocumentSerializer
from HR.person.services.candidate_service import document_url_field

# Largest group number the digit-guarded range filter can compare (18 digits).
GROUP_MAX = 10 ** 18 - 1


class YearMonthField(serializers.CharField):
    """Integer within [min_value, max_value] or the literal 'ALL'."""

    def __init__(self, min_value, max_value, **kwargs):
        self.min_value = min_value
        self.max_value = max_value
        kwargs.setdefault('required', False)
        kwargs.setdefault('default', ALL)
        kwargs.setdefault('allow_blank', True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value = super().to_internal_value(data).strip()
        if value == '' or value.upper() == ALL:
            return ALL
        try:
            number = int(value)
        except ValueError:
            raise serializers.ValidationError(f"Must be a number or '{ALL}'")
        if not self.min_value <= number <= self.max_value:
            raise serializers.ValidationError(
                f"Must be between {self.min_value} and {self.max_value}"
            )
        return number


class RecordListQuerySerializer(serializers.Serializer):
    """Query parameters shared by the candidate and employee lists"""
    year = YearMonthField(1900, 9999)
    month = YearMonthField(1, 12)
    groupStart = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=GROUP_MAX)
    groupEnd = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=GROUP_MAX)


class CandidateListQuerySerializer(RecordListQuerySerializer):
    status = serializers.CharField(required=False, allow_blank=True)


class CandidateSerializer(serializers.ModelSerializer):
    """
    Read serializer for candidate lists.

    Adds one URL per document category (the newest upload, None when
    missing), read from the annotations CandidateService puts on the queryset.
    """
    nationalId = serializers.CharField(source='national_id', read_only=True)
    lastName1 = serializers.CharField(source='last_name_1', read_only=True)
    lastName2 = serializers.CharField(source='last_name_2', read_only=True)
    firstNames = serializers.CharField(source='first_names', read_only=True)
    fullName = serializers.CharField(source='full_name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    docCount = serializers.IntegerField(source='doc_count', read_only=True, default=0)

    class Meta:
        model = Candidate
        fields = [
            'id', 'nationalId', 'lastName1', 'lastName2', 'firstNames', 'fullName',
            'site', 'shift', 'group', 'status', 'createdAt', 'docCount'
        ]
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        for category in DocumentCategory:
            data[category.value] = getattr(instance, document_url_field(category.value), None)
        return data


class CandidateDetailSerializer(CandidateSerializer):
    """Read serializer for one candidate with its document history (newest first)"""
    documents = CandidateDocumentSerializer(many=True, read_only=True)

    class Meta(CandidateSerializer.Meta):
        fields = [
            'id', 'nationalId', 'lastName1', 'lastName2', 'firstNames', 'fullName',
            'site', 'shift', 'group', 'status', 'createdAt', 'documents'
        ]
        read_only_fields = fields


class CandidateCreateSerializer(serializers.Serializer):
    """Write serializer for creating a candidate (multipart form fields)"""
    nationalId = serializers.CharField(max_length=20)
    lastName1 = serializers.CharField(max_length=100)
    lastName2 = serializers.CharField(max_length=100)
    firstNames = serializers.CharField(max_length=150)
    site = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    shift = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    group = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)

    def to_dto(self, files=None) -> CandidateCreateDTO:
        data = self.validated_data
        return CandidateCreateDTO(
            national_id=data['nationalId'].strip(),
            last_name_1=data['lastName1'],
            last_name_2=data['lastName2'],
            first_names=data['firstNames'],
            site=data.get('site'),
            shift=data.get('shift'),
            group=data.get('group'),
            files=files or {},
        )


class CandidateUpdateSerializer(serializers.Serializer):
    """Write serializer for partial candidate updates; blank means unchanged"""
    lastName1 = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    lastName2 = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    firstNames = serializers.CharField(max_length=150, required=False, allow_blank=True, allow_null=True)
    site = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    shift = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    group = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=CandidateStatus.choices, required=False, allow_blank=True)

    def to_dto(self, candidate_id, files=None) -> CandidateUpdateDTO:
        data = self.validated_data
        return CandidateUpdateDTO(
            candidate_id=candidate_id,
            last_name_1=data.get('lastName1'),
            last_name_2=data.get('lastName2'),
            first_names=data.get('firstNames'),
            site=data.get('site'),
            shift=data.get('shift'),
            group=data.get('group'),
            status=data.get('status'),
            files=files or {},
        )


class CandidateStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=CandidateStatus.choices)
