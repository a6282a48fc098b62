"""
StockRecord model — point-in-time counters for one article.
"""

from typing import Any

from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from stockledger.models.enums import LedgerField


class StockRecordManager(models.Manager):
    """Manager with helper methods for StockRecord queries."""

    def for_articles(self, identifiers):
        """Filter records for a set of article identifiers."""
        return self.filter(article_code__in=list(identifiers))


class StockRecord(models.Model):
    """
    Stock counters of one article across the four warehouses.

    Each warehouse has a current counter (stock_*) and a pending
    counter (pending_*). Rows are seeded by an external process and
    only mutated through the ledger service.
    """

    # Internal article identifier (CODIGOARTICULO in the catalog)
    article_code = models.CharField(
        primary_key=True,
        max_length=15,
        verbose_name=_('Artículo'),
    )

    stock_mdp = models.PositiveIntegerField(default=0, verbose_name=_('Stock MDP'))
    stock_ba = models.PositiveIntegerField(default=0, verbose_name=_('Stock BA'))
    stock_gp = models.PositiveIntegerField(default=0, verbose_name=_('Stock GP'))
    stock_ros = models.PositiveIntegerField(default=0, verbose_name=_('Stock ROS'))
    pending_mdp = models.PositiveIntegerField(default=0, verbose_name=_('Pendiente MDP'))
    pending_ba = models.PositiveIntegerField(default=0, verbose_name=_('Pendiente BA'))
    pending_gp = models.PositiveIntegerField(default=0, verbose_name=_('Pendiente GP'))
    pending_ros = models.PositiveIntegerField(default=0, verbose_name=_('Pendiente ROS'))

    date_created = models.DateTimeField(null=True, blank=True, default=timezone.now)
    date_updated = models.DateTimeField(default=timezone.now)
    date_updated_ba = models.DateTimeField(null=True, blank=True)

    objects = StockRecordManager()

    class Meta:
        db_table = 'stock'
        verbose_name = _('Stock')
        verbose_name_plural = _('Stock')
        ordering = ['article_code']
        constraints = [
            models.CheckConstraint(
                condition=Q(**{f'{field.value}__gte': 0}),
                name=f'{field.value}_non_negative',
            )
            for field in LedgerField
        ]

    def snapshot(self) -> dict[str, Any]:
        """Plain dict of every column, detached from the ORM."""
        return {f.attname: getattr(self, f.attname) for f in self._meta.concrete_fields}

    def __str__(self) -> str:
        return self.article_code
