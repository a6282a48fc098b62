"""
Stock Ledger configuration.

Usage in settings.py:
    STOCKLEDGER = {
        "ARTICLE_CATALOG": "stockledger.adapters.sql.SqlArticleCatalog",
        "CATALOG_DATABASE": "catalog",
        "CACHE_TTL_GLOBAL": 300,
    }
"""

from dataclasses import dataclass, field
from typing import Any

from django.conf import settings


DEFAULT_CATALOG_QUERY = 'SELECT CODIGOPARTICULAR, CODIGOARTICULO FROM ARTICULOS'


@dataclass
class StockLedgerSettings:
    """Stock Ledger configuration settings."""

    # Article catalog backend (dotted path)
    ARTICLE_CATALOG: str = ""

    # Static code -> identifier map (StaticArticleCatalog)
    ARTICLE_CODES: dict[str, str] = field(default_factory=dict)

    # Database alias and query for SqlArticleCatalog
    CATALOG_DATABASE: str = "catalog"
    CATALOG_QUERY: str = DEFAULT_CATALOG_QUERY

    # Aggregate "read all" cache
    CACHE_ALIAS: str = "default"
    CACHE_KEY: str = "allStock"

    # Seconds (0 = never expires)
    CACHE_TTL_GLOBAL: int = 0

    # Drop the aggregate cache after each successful reserve/release
    INVALIDATE_CACHE_ON_WRITE: bool = False


def get_stockledger_settings() -> StockLedgerSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "STOCKLEDGER", {})
    return StockLedgerSettings(**{
        k: v for k, v in user_settings.items()
        if k in StockLedgerSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_stockledger_settings(), name)


stockledger_settings = _LazySettings()
