"""
URL configuration for HR Person module.
"""
from django.urls import path

from . import views

app_name = 'person'

urlpatterns = [
    # Candidate endpoints
    path('candidates/', views.candidate_list, name='candidate_list'),
    path('candidates/<int:pk>/', views.candidate_detail, name='candidate_detail'),
    path('candidates/<int:pk>/status/', views.candidate_status, name='candidate_status'),
    path('candidates/<int:pk>/documents/', views.candidate_documents, name='candidate_documents'),

    # Employee endpoints
    path('employees/', views.employee_list, name='employee_list'),
    path('employees/<int:pk>/', views.employee_detail, name='employee_detail'),
    path('employees/<int:pk>/documents/', views.employee_documents, name='employee_documents'),
]
