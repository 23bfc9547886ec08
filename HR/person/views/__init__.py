from .candidate_views import (
    candidate_list,
    candidate_detail,
    candidate_status,
    candidate_documents
)
from .employee_views import (
    employee_list,
    employee_detail,
    employee_documents
)
