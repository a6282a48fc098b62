"""
Article Catalog Protocol — Interface for code → identifier lookup.

Stock Ledger defines this protocol; the external catalog (the ERP's
ARTICULOS table, a static map, ...) implements it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ArticleMapping:
    """One external article code and the internal identifier it stands for."""

    code: str  # CODIGOPARTICULAR
    identifier: str  # CODIGOARTICULO


@runtime_checkable
class ArticleCatalog(Protocol):
    """
    Protocol for the article catalog.

    Implementations return the full code → identifier snapshot in one
    call. Connectivity errors should propagate; the ledger has no local
    recovery for them.
    """

    def fetch_article_code_map(self) -> list[ArticleMapping]:
        """
        Fetch every code → identifier pair.

        Returns:
            List of ArticleMapping
        """
        ...
