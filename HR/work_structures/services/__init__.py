from .reference_service import ReferenceService
from .site_service import SiteService, ProjectService, ShiftService
from .employer_service import EmployerService
from .tax_regime_service import TaxRegimeService, EmployerTaxRegimeService
