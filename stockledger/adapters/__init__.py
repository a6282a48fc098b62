"""
Stock Ledger Adapters.

Implementations of protocols for external systems.
"""

from stockledger.adapters.catalog import get_article_catalog, reset_article_catalog
from stockledger.adapters.sql import SqlArticleCatalog
from stockledger.adapters.static import StaticArticleCatalog
from stockledger.adapters.store import DjangoStockLedgerStore

__all__ = [
    "DjangoStockLedgerStore",
    "SqlArticleCatalog",
    "StaticArticleCatalog",
    "get_article_catalog",
    "reset_article_catalog",
]
