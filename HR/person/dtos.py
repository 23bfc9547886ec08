"""
Data Transfer Objects for Person Domain

DTOs for service layer operations. Serializers validate the request and
build these; services never see request objects.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CandidateCreateDTO:
    """DTO for creating a new candidate"""
    national_id: str
    last_name_1: str
    last_name_2: str
    first_names: str
    site: Optional[str] = None
    shift: Optional[str] = None
    group: Optional[str] = None
    files: dict = field(default_factory=dict)  # category -> [UploadedFile]


@dataclass
class CandidateUpdateDTO:
    """DTO for updating an existing candidate. None = keep current value"""
    candidate_id: int
    last_name_1: Optional[str] = None
    last_name_2: Optional[str] = None
    first_names: Optional[str] = None
    site: Optional[str] = None
    shift: Optional[str] = None
    group: Optional[str] = None
    status: Optional[str] = None
    files: dict = field(default_factory=dict)


@dataclass
class EmployeeCreateDTO:
    """DTO for creating a new employee"""
    full_name: str
    site: str
    group: str
    files: dict = field(default_factory=dict)


@dataclass
class EmployeeUpdateDTO:
    """DTO for updating an existing employee. None = keep current value"""
    employee_id: int
    full_name: Optional[str] = None
    site: Optional[str] = None
    group: Optional[str] = None
    files: dict = field(default_factory=dict)
