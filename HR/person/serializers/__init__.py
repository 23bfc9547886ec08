"""
Person Domain Serializers
"""
from .document_serializers import (
    CandidateDocumentSerializer,
    EmployeeDocumentSerializer,
    collect_document_files
)
from .candidate_serializers import (
    CandidateSerializer,
    CandidateDetailSerializer,
    CandidateCreateSerializer,
    CandidateUpdateSerializer,
    CandidateStatusSerializer,
    CandidateListQuerySerializer,
    RecordListQuerySerializer
)
from .employee_serializers import (
    EmployeeSerializer,
    EmployeeDetailSerializer,
    EmployeeCreateSerializer,
    EmployeeUpdateSerializer
)
