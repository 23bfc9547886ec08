from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass
class SiteCreateDTO:
    """DTO for creating a site; code is derived from name when omitted"""
    name: str
    code: Optional[str] = None
    address: Optional[str] = None


@dataclass
class SiteUpdateDTO:
    """DTO for updating a site (None = field not sent)"""
    site_id: int  # Primary Key
    code: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None


@dataclass
class ProjectCreateDTO:
    """DTO for creating a project"""
    name: str
    site_id: int
    code: Optional[str] = None


@dataclass
class ProjectUpdateDTO:
    """DTO for updating a project"""
    project_id: int  # Primary Key
    code: Optional[str] = None
    name: Optional[str] = None
    site_id: Optional[int] = None


@dataclass
class ShiftCreateDTO:
    """DTO for creating a shift"""
    name: str
    code: Optional[str] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None


@dataclass
class ShiftUpdateDTO:
    """DTO for updating a shift"""
    shift_id: int  # Primary Key
    code: Optional[str] = None
    name: Optional[str] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None


@dataclass
class TaxRegimeCreateDTO:
    """DTO for adding a tax regime to the catalog"""
    name: str
    code: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True


@dataclass
class TaxRegimeUpdateDTO:
    """DTO for updating a catalog entry"""
    tax_regime_id: int  # Primary Key
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


@dataclass
class EmployerCreateDTO:
    """DTO for creating the employer profile"""
    tax_id: str
    business_name: str
    trade_name: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class EmployerUpdateDTO:
    """DTO for updating the employer profile"""
    employer_id: int  # Primary Key
    tax_id: Optional[str] = None
    business_name: Optional[str] = None
    trade_name: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class EmployerTaxRegimeDTO:
    """DTO for switching the employer to another tax regime"""
    tax_regime_id: int
    valid_from: Optional[date] = None  # None = today
