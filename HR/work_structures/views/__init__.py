from .site_views import (
    site_list,
    site_detail,
    project_list,
    project_detail,
    shift_list,
    shift_detail
)
from .employer_views import (
    employer_profile,
    employer_detail,
    employer_tax_regime,
    employer_tax_regime_history,
    tax_regime_list,
    tax_regime_detail
)
