"""
URL configuration for staffing_project project.

    /                       health check (plain text)
    /api/                   HR endpoints (candidates, employees, reference data)
"""
from django.urls import path, include

from staffing_project.views import health_check

urlpatterns = [
    path('', health_check, name='health_check'),
    path('api/', include('HR.urls')),
]
