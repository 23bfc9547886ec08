"""
List filters built from optional query parameters.

Each filter is a small builder: given the raw parameter value(s) it returns a
Predicate (a Q condition plus any annotations the condition refers to) or
None when the filter is inactive. compose() ANDs the active predicates in
declaration order; the ORM binds every value as a query parameter.

Usage:
    CANDIDATE_FILTERS = [
        year_filter('created_at'),
        month_filter('created_at'),
        status_filter('status'),
        group_range_filter('group'),
    ]

    queryset = apply_filters(Candidate.objects.all(), CANDIDATE_FILTERS, params,
                             date_field='created_at')
"""
from dataclasses import dataclass, field
from functools import reduce
import operator

from django.db.models import BigIntegerField, Case, Q, When
from django.db.models.functions import Cast

ALL = 'ALL'
DIGITS_ONLY = r'^[0-9]{1,18}$'


@dataclass
class Predicate:
    condition: Q
    annotations: dict = field(default_factory=dict)


@dataclass
class ListFilter:
    """A named filter reading one or more query parameters."""
    params: tuple
    build: callable
    # Only the date part filters treat the ALL sentinel as "no constraint".
    accepts_all: bool = False

    def predicate(self, values: dict):
        raw = [values.get(name) for name in self.params]
        if any(self._is_inactive(value) for value in raw):
            return None
        return self.build(*raw)

    def _is_inactive(self, value):
        if value is None:
            return True
        if isinstance(value, str):
            text = value.strip()
            return text == '' or (self.accepts_all and text.upper() == ALL)
        return False


def year_filter(date_field, param='year'):
    """Exact match on the year part of date_field. 'ALL' means no constraint."""
    return ListFilter(
        params=(param,),
        build=lambda value: Predicate(Q(**{f'{date_field}__year': int(value)})),
        accepts_all=True,
    )


def month_filter(date_field, param='month'):
    """Exact match on the month part of date_field. 'ALL' means no constraint."""
    return ListFilter(
        params=(param,),
        build=lambda value: Predicate(Q(**{f'{date_field}__month': int(value)})),
        accepts_all=True,
    )


def status_filter(status_field, param='status', case_insensitive=True):
    lookup = 'iexact' if case_insensitive else 'exact'
    return ListFilter(
        params=(param,),
        build=lambda value: Predicate(Q(**{f'{status_field}__{lookup}': value})),
    )


def group_range_filter(group_field, start_param='groupStart', end_param='groupEnd'):
    """
    Inclusive numeric range over a text column.

    The column may hold non-numeric text, so the cast only happens inside a
    CASE guarded by a digits-only match of at most 18 digits, which always
    fits a BIGINT. Other rows get NULL and drop out of the range comparison
    instead of failing the query.
    """
    alias = f'_{group_field}_number'

    def build(start, end):
        number = Case(
            When(**{f'{group_field}__regex': DIGITS_ONLY},
                 then=Cast(group_field, BigIntegerField())),
            default=None,
            output_field=BigIntegerField(),
        )
        condition = Q(**{f'{alias}__gte': int(start), f'{alias}__lte': int(end)})
        return Predicate(condition, {alias: number})

    return ListFilter(params=(start_param, end_param), build=build)


def compose(filters, values: dict) -> Predicate:
    """
    Combine the active filters into one predicate.

    Returns a Predicate with an empty Q() when no filter is active.
    """
    active = [f.predicate(values) for f in filters]
    active = [p for p in active if p is not None]
    if not active:
        return Predicate(Q())

    annotations = {}
    for predicate in active:
        annotations.update(predicate.annotations)
    condition = reduce(operator.and_, (p.condition for p in active))
    return Predicate(condition, annotations)


def apply_filters(queryset, filters, values: dict, date_field='created_at'):
    """
    Filter queryset and order it by date descending, id descending.

    The id tiebreak keeps the order stable because dates are not unique.
    """
    predicate = compose(filters, values)
    if predicate.annotations:
        queryset = queryset.annotate(**predicate.annotations)
    return queryset.filter(predicate.condition).order_by(f'-{date_field}', '-id')
