"""
Serializers for Employee model (simplified legacy family)
"""
from rest_framework import serializers

from HR.person.dtos import EmployeeCreateDTO, EmployeeUpdateDTO
from HR.person.models import Employee
from HR.person.services.employee_service import EmployeeService


class EmployeeSerializer(serializers.ModelSerializer):
    """Read serializer for employee lists"""
    name = serializers.CharField(source='full_name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Employee
        fields = ['id', 'name', 'site', 'group', 'createdAt']
        read_only_fields = fields


class EmployeeDetailSerializer(EmployeeSerializer):
    """
    Read serializer for one employee.

    Adds one URL per document category (the earliest upload wins, None when
    missing). Deprecated shape; the documents endpoint returns the history.
    """

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data.update(EmployeeService.first_document_urls(instance))
        return data


class EmployeeCreateSerializer(serializers.Serializer):
    """Write serializer for creating an employee"""
    name = serializers.CharField(max_length=200)
    site = serializers.CharField(max_length=100)
    group = serializers.CharField(max_length=20)

    def to_dto(self, files=None) -> EmployeeCreateDTO:
        data = self.validated_data
        return EmployeeCreateDTO(
            full_name=data['name'],
            site=data['site'],
            group=data['group'],
            files=files or {},
        )


class EmployeeUpdateSerializer(serializers.Serializer):
    """Write serializer for partial employee updates; blank means unchanged"""
    name = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    site = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    group = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)

    def to_dto(self, employee_id, files=None) -> EmployeeUpdateDTO:
        data = self.validated_data
        return EmployeeUpdateDTO(
            employee_id=employee_id,
            full_name=data.get('name'),
            site=data.get('site'),
            group=data.get('group'),
            files=files or {},
        )
