"""Django app configuration for Stock Ledger."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class StockLedgerConfig(AppConfig):
    """Configuration for Stock Ledger app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "stockledger"
    verbose_name = _("Stock por sucursal")
