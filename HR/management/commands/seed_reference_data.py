from django.core.management.base import BaseCommand
from django.db import transaction

from HR.work_structures.models import TaxRegime


TAX_REGIMES = [
    ('NRUS', 'Nuevo RUS', 'Simplified single regime for small businesses'),
    ('RER', 'Regimen Especial de Renta', 'Special income tax regime'),
    ('RMT', 'Regimen MYPE Tributario', 'Tax regime for micro and small enterprises'),
    ('RG', 'Regimen General', 'General income tax regime'),
]


class Command(BaseCommand):
    help = 'Seed the tax regime catalog (safe to run more than once)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--deactivate-missing',
            action='store_true',
            help='Mark catalog entries not in the seed list as inactive',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('\n* Seeding tax regimes...')
        created_count = 0
        for code, name, description in TAX_REGIMES:
            _, created = TaxRegime.objects.update_or_create(
                code=code,
                defaults={'name': name, 'description': description, 'is_active': True},
            )
            if created:
                created_count += 1
        self.stdout.write(f'  {created_count} created, {len(TAX_REGIMES) - created_count} updated')

        if options['deactivate_missing']:
            seeded_codes = [code for code, _, _ in TAX_REGIMES]
            deactivated = TaxRegime.objects.exclude(code__in=seeded_codes).update(is_active=False)
            self.stdout.write(f'  {deactivated} deactivated')

        self.stdout.write(self.style.SUCCESS('Reference data ready.'))
