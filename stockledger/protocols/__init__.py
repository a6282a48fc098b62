"""
Stock Ledger Protocols.

Defines interfaces for external system integration.
"""

from stockledger.protocols.catalog import (
    ArticleCatalog,
    ArticleMapping,
)
from stockledger.protocols.store import (
    FieldChange,
    StockLedgerStore,
)

__all__ = [
    "ArticleCatalog",
    "ArticleMapping",
    "FieldChange",
    "StockLedgerStore",
]
