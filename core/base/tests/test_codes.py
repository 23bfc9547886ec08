"""
Unique code generation tests.

Covers normalization (diacritics, separators, truncation) and the
-2, -3 suffixes used when a code is already taken.
"""
from django.test import TestCase

from core.base.codes import generate_unique_code, normalize_code
from core.base.exceptions import ValidationError
from HR.work_structures.models import Site


class NormalizeCodeTests(TestCase):

    def test_strips_diacritics_and_uppercases(self):
        self.assertEqual(normalize_code('Mañana Tránsito'), 'MANANA-TRANSITO')

    def test_collapses_separator_runs_and_trims(self):
        self.assertEqual(normalize_code('  --Lima / Norte!! '), 'LIMA-NORTE')

    def test_truncates_without_trailing_separator(self):
        self.assertEqual(normalize_code('abcd efgh', max_length=5), 'ABCD')

    def test_empty_when_no_letters_or_digits(self):
        self.assertEqual(normalize_code('¡¿ -- ?!'), '')
        self.assertEqual(normalize_code(None), '')


class GenerateUniqueCodeTests(TestCase):

    def test_free_code_is_used_as_is(self):
        self.assertEqual(generate_unique_code(Site, 'Alpha'), 'ALPHA')

    def test_collisions_get_numbered_suffixes(self):
        """Three sites named Alpha get ALPHA, ALPHA-2, ALPHA-3"""
        codes = []
        for _ in range(3):
            code = generate_unique_code(Site, 'Alpha')
            Site.objects.create(code=code, name='Alpha')
            codes.append(code)

        self.assertEqual(codes, ['ALPHA', 'ALPHA-2', 'ALPHA-3'])

    def test_suffix_fits_in_max_length(self):
        name = 'X' * 40
        Site.objects.create(code='X' * 30, name=name)

        code = generate_unique_code(Site, name)

        self.assertEqual(code, 'X' * 28 + '-2')
        self.assertEqual(len(code), 30)

    def test_exclude_pk_ignores_own_row(self):
        site = Site.objects.create(code='ALPHA', name='Alpha')
        self.assertEqual(generate_unique_code(Site, 'Alpha', exclude_pk=site.pk), 'ALPHA')

    def test_name_without_usable_characters_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            generate_unique_code(Site, '***')
        self.assertIn('name', ctx.exception.fields)
