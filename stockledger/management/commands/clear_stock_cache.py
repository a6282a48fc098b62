"""
Management command to drop the cached "all stock" snapshot.

Usage:
    python manage.py clear_stock_cache
"""

from django.core.management.base import BaseCommand

from stockledger.cache import AggregateCache


class Command(BaseCommand):
    """Clear aggregate stock cache command."""

    help = 'Invalida la caché del listado completo de stock'

    def handle(self, *args, **options):
        cache = AggregateCache()
        cache.invalidate()
        self.stdout.write(
            self.style.SUCCESS(f"Caché '{cache.key}' invalidada")
        )
