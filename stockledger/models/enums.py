"""
Enums for Stock Ledger models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Warehouse(models.TextChoices):
    """Physical locations, each tracking its own counters."""
    MDP = 'MDP', _('MDP')
    BA = 'BA', _('BA')
    GP = 'GP', _('GP')
    ROS = 'ROS', _('ROS')


class LedgerField(models.TextChoices):
    """
    The eight counter slots of a StockRecord.

    STOCK_*:   current stock at the warehouse
    PENDING_*: reserved but not yet fulfilled at the warehouse
    """
    STOCK_MDP = 'stock_mdp', _('Stock MDP')
    STOCK_BA = 'stock_ba', _('Stock BA')
    STOCK_GP = 'stock_gp', _('Stock GP')
    STOCK_ROS = 'stock_ros', _('Stock ROS')
    PENDING_MDP = 'pending_mdp', _('Pendiente MDP')
    PENDING_BA = 'pending_ba', _('Pendiente BA')
    PENDING_GP = 'pending_gp', _('Pendiente GP')
    PENDING_ROS = 'pending_ros', _('Pendiente ROS')

    @property
    def warehouse(self) -> Warehouse:
        return Warehouse(self.value.split('_', 1)[1].upper())

    @property
    def is_pending(self) -> bool:
        return self.value.startswith('pending_')

    def read(self, record) -> int:
        """Current value of this slot on a record (null counts as 0)."""
        return getattr(record, self.value) or 0


class Operation(models.TextChoices):
    """Counter mutations supported by the ledger."""
    RESERVE = 'reserve', _('Reserva')
    RELEASE = 'release', _('Liberación')

    def apply(self, current: int | None, quantity: int) -> int:
        """
        New counter value after applying quantity.

        RESERVE adds without a ceiling. RELEASE subtracts and never
        goes below zero.
        """
        current = current or 0
        if self is Operation.RESERVE:
            return current + quantity
        return max(0, current - quantity)
