"""
Serializers for Site, Project and Shift
"""
from rest_framework import serializers

from HR.work_structures.dtos import (
    ProjectCreateDTO,
    ProjectUpdateDTO,
    ShiftCreateDTO,
    ShiftUpdateDTO,
    SiteCreateDTO,
    SiteUpdateDTO,
)
from HR.work_structures.models import Project, Shift, Site


class SiteSerializer(serializers.ModelSerializer):
    """Read serializer for Site model"""
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Site
        fields = ['id', 'code', 'name', 'address', 'createdAt']
        read_only_fields = fields


class SiteCreateSerializer(serializers.Serializer):
    """Write serializer for creating a site; code is optional"""
    code = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    name = serializers.CharField(max_length=128)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)

    def to_dto(self) -> SiteCreateDTO:
        return SiteCreateDTO(**self.validated_data)


class SiteUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a site; only sent fields change"""
    code = serializers.CharField(max_length=30, required=False)
    name = serializers.CharField(max_length=128, required=False)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)

    def to_dto(self, site_id) -> SiteUpdateDTO:
        return SiteUpdateDTO(site_id=site_id, **self.validated_data)


class ProjectSerializer(serializers.ModelSerializer):
    """Read serializer for Project model"""
    siteId = serializers.IntegerField(source='site_id', read_only=True)
    siteName = serializers.CharField(source='site.name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Project
        fields = ['id', 'code', 'name', 'siteId', 'siteName', 'createdAt']
        read_only_fields = fields


class ProjectCreateSerializer(serializers.Serializer):
    """Write serializer for creating a project"""
    code = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    name = serializers.CharField(max_length=128)
    siteId = serializers.IntegerField()

    def to_dto(self) -> ProjectCreateDTO:
        data = self.validated_data
        return ProjectCreateDTO(
            name=data['name'],
            site_id=data['siteId'],
            code=data.get('code'),
        )


class ProjectUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a project"""
    code = serializers.CharField(max_length=30, required=False)
    name = serializers.CharField(max_length=128, required=False)
    siteId = serializers.IntegerField(required=False)

    def to_dto(self, project_id) -> ProjectUpdateDTO:
        data = self.validated_data
        return ProjectUpdateDTO(
            project_id=project_id,
            code=data.get('code'),
            name=data.get('name'),
            site_id=data.get('siteId'),
        )


class ShiftSerializer(serializers.ModelSerializer):
    """Read serializer for Shift model"""
    startTime = serializers.TimeField(source='start_time', read_only=True)
    endTime = serializers.TimeField(source='end_time', read_only=True)

    class Meta:
        model = Shift
        fields = ['id', 'code', 'name', 'startTime', 'endTime']
        read_only_fields = fields


class ShiftCreateSerializer(serializers.Serializer):
    """Write serializer for creating a shift"""
    code = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    name = serializers.CharField(max_length=128)
    startTime = serializers.TimeField(required=False, allow_null=True)
    endTime = serializers.TimeField(required=False, allow_null=True)

    def to_dto(self) -> ShiftCreateDTO:
        data = self.validated_data
        return ShiftCreateDTO(
            name=data['name'],
            code=data.get('code'),
            start_time=data.get('startTime'),
            end_time=data.get('endTime'),
        )


class ShiftUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a shift"""
    code = serializers.CharField(max_length=30, required=False)
    name = serializers.CharField(max_length=128, required=False)
    startTime = serializers.TimeField(required=False)
    endTime = serializers.TimeField(required=False)

    def to_dto(self, shift_id) -> ShiftUpdateDTO:
        data = self.validated_data
        return ShiftUpdateDTO(
            shift_id=shift_id,
            code=data.get('code'),
            name=data.get('name'),
            start_time=data.get('startTime'),
            end_time=data.get('endTime'),
        )
