"""
Tax regime history tests.

Switching regime closes the open period the day before the new start and
opens a new period, so after N switches the history has N rows, one open.
"""
from datetime import date, datetime, timedelta, timezone as dt_timezone
from unittest import mock

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase, override_settings
from django.utils import timezone

from core.base.exceptions import NotFoundError, ValidationError
from HR.work_structures.dtos import EmployerTaxRegimeDTO
from HR.work_structures.models import Employer, EmployerTaxRegime, TaxRegime
from HR.work_structures.services import EmployerTaxRegimeService


class EmployerTaxRegimeServiceTests(TestCase):

    def setUp(self):
        self.employer = Employer.objects.create(tax_id='20123456789', business_name='Andes SAC')
        self.rus = TaxRegime.objects.create(code='NRUS', name='Nuevo RUS')
        self.rmt = TaxRegime.objects.create(code='RMT', name='Regimen MYPE Tributario')
        self.rg = TaxRegime.objects.create(code='RG', name='Regimen General')

    def switch(self, regime, valid_from):
        return EmployerTaxRegimeService.set_regime(
            EmployerTaxRegimeDTO(tax_regime_id=regime.pk, valid_from=valid_from)
        )

    def test_first_period_is_open(self):
        period = self.switch(self.rus, date(2023, 1, 1))

        self.assertIsNone(period.valid_to)
        self.assertEqual(period.tax_regime.code, 'NRUS')
        self.assertEqual(EmployerTaxRegimeService.get_current().pk, period.pk)

    def test_history_after_n_switches(self):
        starts = [date(2022, 1, 1), date(2023, 3, 1), date(2024, 7, 15)]
        for regime, start in zip([self.rus, self.rmt, self.rg], starts):
            self.switch(regime, start)

        history = list(EmployerTaxRegimeService.get_history())

        self.assertEqual(len(history), 3)
        self.assertEqual([p.valid_from for p in history], list(reversed(starts)))
        self.assertEqual([p.tax_regime.code for p in history], ['RG', 'RMT', 'NRUS'])
        self.assertEqual(sum(1 for p in history if p.valid_to is None), 1)
        # each closed period ends the day before its successor starts
        for newer, older in zip(history, history[1:]):
            self.assertEqual(older.valid_to, newer.valid_from - timedelta(days=1))

    def test_default_effective_date_is_today(self):
        period = EmployerTaxRegimeService.set_regime(EmployerTaxRegimeDTO(tax_regime_id=self.rus.pk))
        self.assertEqual(period.valid_from, timezone.localdate())

    @override_settings(TIME_ZONE='America/Lima')
    def test_default_effective_date_follows_configured_time_zone(self):
        """02:00 UTC on 1 March is still 29 February in Lima"""
        utc_now = datetime(2024, 3, 1, 2, 0, tzinfo=dt_timezone.utc)
        with mock.patch('django.utils.timezone.now', return_value=utc_now):
            period = EmployerTaxRegimeService.set_regime(EmployerTaxRegimeDTO(tax_regime_id=self.rus.pk))

        self.assertEqual(period.valid_from, date(2024, 2, 29))

    def test_same_start_date_corrects_current_period(self):
        self.switch(self.rus, date(2024, 1, 1))
        period = self.switch(self.rmt, date(2024, 1, 1))

        self.assertEqual(EmployerTaxRegime.objects.count(), 1)
        self.assertEqual(period.tax_regime.code, 'RMT')
        self.assertIsNone(period.valid_to)

    def test_start_before_current_period_is_rejected(self):
        self.switch(self.rus, date(2024, 1, 1))

        with self.assertRaises(DjangoValidationError):
            self.switch(self.rmt, date(2023, 12, 31))

        self.assertEqual(EmployerTaxRegimeService.get_current().tax_regime.code, 'NRUS')

    def test_inactive_regime_is_rejected(self):
        self.rg.is_active = False
        self.rg.save()

        with self.assertRaises(ValidationError):
            self.switch(self.rg, date(2024, 1, 1))

    def test_unknown_regime_is_rejected(self):
        with self.assertRaises(ValidationError):
            EmployerTaxRegimeService.set_regime(EmployerTaxRegimeDTO(tax_regime_id=999999))

    def test_no_employer(self):
        Employer.objects.all().delete()

        with self.assertRaises(NotFoundError):
            self.switch(self.rus, date(2024, 1, 1))
        with self.assertRaises(NotFoundError):
            EmployerTaxRegimeService.get_current()

    def test_no_current_period(self):
        with self.assertRaises(NotFoundError):
            EmployerTaxRegimeService.get_current()

    def test_database_allows_one_open_period_per_employer(self):
        self.switch(self.rus, date(2024, 1, 1))

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                EmployerTaxRegime.objects.create(
                    employer=self.employer, tax_regime=self.rmt, valid_from=date(2025, 1, 1)
                )

    def test_active_on(self):
        self.switch(self.rus, date(2022, 1, 1))
        self.switch(self.rg, date(2023, 1, 1))

        on_date = EmployerTaxRegime.objects.active_on(date(2022, 12, 31)).get()
        self.assertEqual(on_date.tax_regime_id, self.rus.pk)
        self.assertTrue(on_date.active_on(date(2022, 6, 1)))
        self.assertFalse(on_date.active_on(date(2023, 1, 1)))
