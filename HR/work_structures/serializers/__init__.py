"""
Work Structures Serializers
"""
from .site_serializers import (
    SiteSerializer,
    SiteCreateSerializer,
    SiteUpdateSerializer,
    ProjectSerializer,
    ProjectCreateSerializer,
    ProjectUpdateSerializer,
    ShiftSerializer,
    ShiftCreateSerializer,
    ShiftUpdateSerializer
)
from .employer_serializers import (
    EmployerSerializer,
    EmployerCreateSerializer,
    EmployerUpdateSerializer,
    TaxRegimeSerializer,
    TaxRegimeCreateSerializer,
    TaxRegimeUpdateSerializer,
    EmployerTaxRegimeSerializer,
    EmployerTaxRegimeCreateSerializer
)
