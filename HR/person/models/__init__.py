"""
Person Domain Models

Models:
- DocumentCategory: Fixed vocabulary of document tags
- CandidateStatus: Review status of a candidate
- Candidate: Job candidate identity and workplace assignment
- CandidateDocument: Uploaded file belonging to a candidate
- Employee: Simplified employee record
- EmployeeDocument: Uploaded file belonging to an employee
"""

from .document import DocumentCategory, DocumentMixin
from .candidate import Candidate, CandidateStatus, CandidateDocument
from .employee import Employee, EmployeeDocument

__all__ = [
    'DocumentCategory',
    'DocumentMixin',
    'Candidate',
    'CandidateStatus',
    'CandidateDocument',
    'Employee',
    'EmployeeDocument',
]
