"""
URL configuration for HR Work Structures module.
"""
from django.urls import path
from HR.work_structures import views

app_name = 'work_structures'

urlpatterns = [
    # Site endpoints
    path('sites/', views.site_list, name='site_list'),
    path('sites/<int:pk>/', views.site_detail, name='site_detail'),

    # Project endpoints
    path('projects/', views.project_list, name='project_list'),
    path('projects/<int:pk>/', views.project_detail, name='project_detail'),

    # Shift endpoints
    path('shifts/', views.shift_list, name='shift_list'),
    path('shifts/<int:pk>/', views.shift_detail, name='shift_detail'),

    # Employer endpoints
    path('employer/', views.employer_profile, name='employer_profile'),
    path('employer/tax-regime/', views.employer_tax_regime, name='employer_tax_regime'),
    path('employer/tax-regime/history/', views.employer_tax_regime_history, name='employer_tax_regime_history'),
    path('employer/<int:pk>/', views.employer_detail, name='employer_detail'),

    # Tax regime catalog endpoints
    path('tax-regimes/', views.tax_regime_list, name='tax_regime_list'),
    path('tax-regimes/<int:pk>/', views.tax_regime_detail, name='tax_regime_detail'),
]
