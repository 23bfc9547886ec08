from django.http import HttpResponse
from django.views.decorators.http import require_GET


@require_GET
def health_check(request):
    """Liveness check."""
    return HttpResponse("API running", content_type="text/plain")
