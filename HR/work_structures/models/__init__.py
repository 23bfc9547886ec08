"""
Work Structures Domain Models

Models:
- Site: Physical workplace
- Project: Work carried out at one site
- Shift: Named working time range
- Employer: Company profile (read as a singleton, first by id)
- TaxRegime: Tax regime catalog
- EmployerTaxRegime: Effective-dated history of the employer's tax regime
"""

from .site import Site, Project, Shift
from .employer import Employer, TaxRegime, EmployerTaxRegime

__all__ = [
    'Site',
    'Project',
    'Shift',
    'Employer',
    'TaxRegime',
    'EmployerTaxRegime',
]
