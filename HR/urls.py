"""
HR App - Main URL Configuration
This file routes URLs to the appropriate sub-apps within the HR module.
"""
from django.urls import path, include

app_name = 'hr'

urlpatterns = [
    # Candidates, employees and their documents
    path('', include('HR.person.urls')),
    # Sites, projects, shifts, employer and tax regimes
    path('', include('HR.work_structures.urls')),
]
