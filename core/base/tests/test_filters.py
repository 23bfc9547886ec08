"""
List filter builder tests.

Uses candidates because they carry every filtered column: created_at,
status and a free-text group.
"""
from datetime import datetime, timezone

from django.db.models import Q
from django.test import TestCase

from core.base.filters import (
    ALL,
    apply_filters,
    compose,
    group_range_filter,
    month_filter,
    status_filter,
    year_filter,
)
from HR.person.models import Candidate

FILTERS = [
    year_filter('created_at'),
    month_filter('created_at'),
    status_filter('status', case_insensitive=True),
    group_range_filter('group'),
]


def make_candidate(national_id, group=None, status='under_review', created_at=None):
    candidate = Candidate.objects.create(
        national_id=national_id,
        last_name_1='Quispe',
        last_name_2='Mamani',
        first_names='Rosa',
        group=group,
        status=status,
    )
    if created_at:
        Candidate.objects.filter(pk=candidate.pk).update(created_at=created_at)
    return candidate


def ids(queryset):
    return [c.national_id for c in queryset]


class ComposeTests(TestCase):

    def test_no_active_filter_gives_empty_predicate(self):
        predicate = compose(FILTERS, {'year': ALL, 'month': '', 'status': None})
        self.assertEqual(predicate.condition, Q())
        self.assertEqual(predicate.annotations, {})

    def test_all_is_only_a_sentinel_for_year_and_month(self):
        predicate = compose(FILTERS, {'status': ALL})
        self.assertEqual(predicate.condition, Q(status__iexact=ALL))

    def test_group_range_needs_both_bounds(self):
        predicate = compose(FILTERS, {'groupStart': 1})
        self.assertEqual(predicate.condition, Q())

    def test_group_range_adds_annotation(self):
        predicate = compose(FILTERS, {'groupStart': 1, 'groupEnd': 5})
        self.assertIn('_group_number', predicate.annotations)


class ApplyFiltersTests(TestCase):

    def setUp(self):
        self.jan = make_candidate('10000001', group='3', status='approved',
                                  created_at=datetime(2024, 1, 15, 12, tzinfo=timezone.utc))
        self.mar = make_candidate('10000002', group='12', status='under_review',
                                  created_at=datetime(2024, 3, 15, 12, tzinfo=timezone.utc))
        self.old = make_candidate('10000003', group='A-1', status='cancelled',
                                  created_at=datetime(2023, 3, 15, 12, tzinfo=timezone.utc))

    def test_all_sentinel_equals_absent_filter(self):
        """year=ALL, month=ALL returns the same rows as no filter at all"""
        with_sentinel = apply_filters(Candidate.objects.all(), FILTERS, {'year': ALL, 'month': ALL})
        without = apply_filters(Candidate.objects.all(), FILTERS, {})
        self.assertEqual(list(with_sentinel), list(without))
        self.assertEqual(len(without), 3)

    def test_ordering_is_date_then_id_descending(self):
        tie = make_candidate('10000004',
                             created_at=datetime(2024, 3, 15, 12, tzinfo=timezone.utc))
        result = apply_filters(Candidate.objects.all(), FILTERS, {})
        self.assertEqual(ids(result), [tie.national_id, '10000002', '10000001', '10000003'])

    def test_year_and_month(self):
        result = apply_filters(Candidate.objects.all(), FILTERS, {'year': 2024, 'month': 3})
        self.assertEqual(ids(result), ['10000002'])

    def test_year_only(self):
        result = apply_filters(Candidate.objects.all(), FILTERS, {'year': '2023'})
        self.assertEqual(ids(result), ['10000003'])

    def test_status_is_case_insensitive(self):
        result = apply_filters(Candidate.objects.all(), FILTERS, {'status': 'APPROVED'})
        self.assertEqual(ids(result), ['10000001'])

    def test_status_exact_when_configured(self):
        exact = [status_filter('status', case_insensitive=False)]
        result = apply_filters(Candidate.objects.all(), exact, {'status': 'APPROVED'})
        self.assertEqual(list(result), [])

    def test_group_range_is_inclusive_and_numeric(self):
        """'12' is outside 1..5 even though it sorts between them as text"""
        result = apply_filters(Candidate.objects.all(), FILTERS, {'groupStart': 3, 'groupEnd': 5})
        self.assertEqual(ids(result), ['10000001'])

        result = apply_filters(Candidate.objects.all(), FILTERS, {'groupStart': 1, 'groupEnd': 12})
        self.assertEqual(ids(result), ['10000002', '10000001'])

    def test_non_numeric_groups_are_excluded_not_errors(self):
        make_candidate('10000005', group=None)
        result = apply_filters(Candidate.objects.all(), FILTERS, {'groupStart': 0, 'groupEnd': 1000})
        self.assertNotIn('10000003', ids(result))
        self.assertNotIn('10000005', ids(result))
        self.assertEqual(len(result), 2)

    def test_filters_combine_with_and(self):
        result = apply_filters(
            Candidate.objects.all(), FILTERS,
            {'year': 2024, 'status': 'under_review', 'groupStart': 10, 'groupEnd': 20}
        )
        self.assertEqual(ids(result), ['10000002'])

    def test_status_all_is_a_literal_value(self):
        """status=ALL compares against the text 'ALL' and matches nobody"""
        result = apply_filters(Candidate.objects.all(), FILTERS, {'status': ALL})
        self.assertEqual(list(result), [])

    def test_very_long_digit_groups_are_excluded_not_errors(self):
        make_candidate('10000006', group='99999999999999999999')
        make_candidate('10000007', group='4294967296')
        result = apply_filters(
            Candidate.objects.all(), FILTERS, {'groupStart': 0, 'groupEnd': 10 ** 18 - 1}
        )
        self.assertIn('10000007', ids(result))
        self.assertNotIn('10000006', ids(result))
        self.assertEqual(len(result), 3)
