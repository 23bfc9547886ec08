"""
Serializers for Employer, the tax regime catalog and the regime history
"""
from rest_framework import serializers

from HR.work_structures.dtos import (
    EmployerCreateDTO,
    EmployerTaxRegimeDTO,
    EmployerUpdateDTO,
    TaxRegimeCreateDTO,
    TaxRegimeUpdateDTO,
)
from HR.work_structures.models import Employer, EmployerTaxRegime, TaxRegime


class EmployerSerializer(serializers.ModelSerializer):
    """Read serializer for Employer model"""
    taxId = serializers.CharField(source='tax_id', read_only=True)
    businessName = serializers.CharField(source='business_name', read_only=True)
    tradeName = serializers.CharField(source='trade_name', read_only=True)

    class Meta:
        model = Employer
        fields = ['id', 'taxId', 'businessName', 'tradeName', 'address', 'email', 'phone']
        read_only_fields = fields


class EmployerCreateSerializer(serializers.Serializer):
    """Write serializer for creating the employer profile"""
    taxId = serializers.CharField(max_length=20)
    businessName = serializers.CharField(max_length=200)
    tradeName = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)

    def to_dto(self) -> EmployerCreateDTO:
        data = self.validated_data
        return EmployerCreateDTO(
            tax_id=data['taxId'],
            business_name=data['businessName'],
            trade_name=data.get('tradeName'),
            address=data.get('address'),
            email=data.get('email'),
            phone=data.get('phone'),
        )


class EmployerUpdateSerializer(serializers.Serializer):
    """Write serializer for updating the employer profile; only sent fields change"""
    taxId = serializers.CharField(max_length=20, required=False)
    businessName = serializers.CharField(max_length=200, required=False)
    tradeName = serializers.CharField(max_length=200, required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)

    def to_dto(self, employer_id) -> EmployerUpdateDTO:
        data = self.validated_data
        return EmployerUpdateDTO(
            employer_id=employer_id,
            tax_id=data.get('taxId'),
            business_name=data.get('businessName'),
            trade_name=data.get('tradeName'),
            address=data.get('address'),
            email=data.get('email'),
            phone=data.get('phone'),
        )


class TaxRegimeSerializer(serializers.ModelSerializer):
    """Read serializer for TaxRegime model"""
    isActive = serializers.BooleanField(source='is_active', read_only=True)

    class Meta:
        model = TaxRegime
        fields = ['id', 'code', 'name', 'description', 'isActive']
        read_only_fields = fields


class TaxRegimeCreateSerializer(serializers.Serializer):
    """Write serializer for adding a catalog entry"""
    code = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    name = serializers.CharField(max_length=128)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    isActive = serializers.BooleanField(required=False, default=True)

    def to_dto(self) -> TaxRegimeCreateDTO:
        data = self.validated_data
        return TaxRegimeCreateDTO(
            name=data['name'],
            code=data.get('code'),
            description=data.get('description'),
            is_active=data.get('isActive', True),
        )


class TaxRegimeUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a catalog entry"""
    code = serializers.CharField(max_length=30, required=False)
    name = serializers.CharField(max_length=128, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    isActive = serializers.BooleanField(required=False)

    def to_dto(self, tax_regime_id) -> TaxRegimeUpdateDTO:
        data = self.validated_data
        return TaxRegimeUpdateDTO(
            tax_regime_id=tax_regime_id,
            code=data.get('code'),
            name=data.get('name'),
            description=data.get('description'),
            is_active=data.get('isActive'),
        )


class EmployerTaxRegimeSerializer(serializers.ModelSerializer):
    """Read serializer for one period of the employer's regime history"""
    taxRegimeId = serializers.IntegerField(source='tax_regime_id', read_only=True)
    taxRegimeCode = serializers.CharField(source='tax_regime.code', read_only=True)
    taxRegimeName = serializers.CharField(source='tax_regime.name', read_only=True)
    validFrom = serializers.DateField(source='valid_from', read_only=True)
    validTo = serializers.DateField(source='valid_to', read_only=True)
    isCurrent = serializers.BooleanField(source='is_current', read_only=True)

    class Meta:
        model = EmployerTaxRegime
        fields = ['id', 'taxRegimeId', 'taxRegimeCode', 'taxRegimeName',
                  'validFrom', 'validTo', 'isCurrent']
        read_only_fields = fields


class EmployerTaxRegimeCreateSerializer(serializers.Serializer):
    """
    Write serializer for switching regime.

    validFrom defaults to today when omitted.
    """
    taxRegimeId = serializers.IntegerField()
    validFrom = serializers.DateField(required=False, allow_null=True)

    def to_dto(self) -> EmployerTaxRegimeDTO:
        data = self.validated_data
        return EmployerTaxRegimeDTO(
            tax_regime_id=data['taxRegimeId'],
            valid_from=data.get('validFrom'),
        )
