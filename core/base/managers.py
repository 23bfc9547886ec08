"""
Core Base Managers Module

Provides custom managers and querysets for base models.

**Architecture:**
- BaseQuerySet: Generic filtering (code/name/search)
- EffectiveDatedQuerySet: For models with valid_from/valid_to

Exports:
    QuerySets:
        - BaseQuerySet: filter_by_search_params
        - EffectiveDatedQuerySet: current(), active_on(), history()

    Managers:
        - BaseManager: For plain reference tables
        - EffectiveDatedManager: For EffectiveDatedMixin models

Usage:
    from core.base.managers import EffectiveDatedManager

    class EmployerTaxRegime(EffectiveDatedMixin, models.Model):
        objects = EffectiveDatedManager()

    EmployerTaxRegime.objects.current().filter(employer=employer).first()
"""

from django.db import models
from django.db.models import Q


class BaseQuerySet(models.QuerySet):
    """
    Base QuerySet with common filtering methods.

    Methods:
        - filter_by_search_params: Filter by code/name/search
    """

    def filter_by_search_params(self, query_params):
        """
        Apply standard code/name/search filters from query parameters.

        Args:
            query_params: QueryDict or dict with optional keys:
                - code: Exact match (case-insensitive)
                - name: Contains match (case-insensitive)
                - search: Contains match across code and name

        Returns:
            Filtered QuerySet
        """
        queryset = self

        code = query_params.get('code')
        if code:
            queryset = queryset.filter(code__iexact=code)

        name = query_params.get('name')
        if name:
            queryset = queryset.filter(name__icontains=name)

        search = query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(code__icontains=search) |
                Q(name__icontains=search)
            )

        return queryset


class BaseManager(models.Manager.from_queryset(BaseQuerySet)):
    pass


class EffectiveDatedQuerySet(models.QuerySet):
    """
    QuerySet for EffectiveDatedMixin models.

    Methods:
        - current(): Open periods (valid_to IS NULL)
        - active_on(date): Periods covering a specific date
        - history(**subject): All periods of one subject, newest start first
    """

    def current(self):
        """Return only open periods."""
        return self.filter(valid_to__isnull=True)

    def active_on(self, reference_date):
        """
        Return periods covering a specific date.

        Args:
            reference_date: Date to check

        Returns:
            QuerySet: Periods holding on that date
        """
        return self.filter(
            valid_from__lte=reference_date
        ).filter(
            Q(valid_to__isnull=True) |
            Q(valid_to__gte=reference_date)
        )

    def history(self, **subject):
        """
        Return every period of a subject, most recent start first.

        Example:
            EmployerTaxRegime.objects.history(employer=employer)
        """
        return self.filter(**subject).order_by('-valid_from', '-id')


class EffectiveDatedManager(models.Manager.from_queryset(EffectiveDatedQuerySet)):
    """
    Manager for EffectiveDatedMixin models.

    Usage:
        EmployerTaxRegime.objects.current()
        EmployerTaxRegime.objects.active_on(date(2024, 1, 1))
        EmployerTaxRegime.objects.history(employer=employer)
    """
    pass
