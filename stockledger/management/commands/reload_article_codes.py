"""
Management command to reload the article code snapshot.

Usage:
    python manage.py reload_article_codes
    python manage.py reload_article_codes --dry-run
"""

from django.core.management.base import BaseCommand

from stockledger.adapters import get_article_catalog
from stockledger.service import get_ledger


class Command(BaseCommand):
    """Reload article codes command."""

    help = 'Recarga el mapa de códigos de artículo desde el catálogo'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Consulta el catálogo sin reemplazar el mapa en memoria'
        )

    def handle(self, *args, **options):
        if options['dry_run']:
            count = len(get_article_catalog().fetch_article_code_map())
            self.stdout.write(f'{count} código(s) en el catálogo')
        else:
            count = get_ledger().reload_article_codes()
            self.stdout.write(
                self.style.SUCCESS(f'{count} código(s) cargado(s)')
            )
