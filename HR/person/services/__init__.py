"""
Person Domain Services

Business logic for candidate and employee records.
All writes should go through these services.

Services:
- CandidateService: List, create with documents, update, status changes
- EmployeeService: Simplified employee records and documents
- RecordWithDocumentsWriter: Transactional parent + documents writer
"""

from .record_writer import RecordWithDocumentsWriter
from .candidate_service import CandidateService
from .employee_service import EmployeeService

__all__ = [
    'RecordWithDocumentsWriter',
    'CandidateService',
    'EmployeeService',
]
