"""
Stock Ledger Catalog Adapter — loads the configured ArticleCatalog from settings.

Usage:
    from stockledger.adapters import get_article_catalog

    catalog = get_article_catalog()
    entries = catalog.fetch_article_code_map()

Settings:
    STOCKLEDGER = {
        "ARTICLE_CATALOG": "stockledger.adapters.sql.SqlArticleCatalog",
    }

If ARTICLE_CATALOG is not configured, get_article_catalog() raises ImproperlyConfigured.
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from stockledger.conf import stockledger_settings
from stockledger.protocols.catalog import ArticleCatalog

logger = logging.getLogger(__name__)


# Cached catalog instance
_lock = threading.Lock()
_article_catalog: ArticleCatalog | None = None


def get_article_catalog() -> ArticleCatalog:
    """
    Return the configured article catalog.

    Returns:
        ArticleCatalog instance

    Raises:
        ImproperlyConfigured: If ARTICLE_CATALOG is not configured or import fails
    """
    global _article_catalog

    if _article_catalog is None:
        with _lock:
            if _article_catalog is None:  # double-checked
                catalog_path = stockledger_settings.ARTICLE_CATALOG

                if not catalog_path:
                    raise ImproperlyConfigured(
                        "STOCKLEDGER['ARTICLE_CATALOG'] must be configured. "
                        "Example: 'stockledger.adapters.sql.SqlArticleCatalog'"
                    )

                try:
                    catalog_class = import_string(catalog_path)
                except ImportError as e:
                    raise ImproperlyConfigured(
                        f"Failed to import article catalog '{catalog_path}': {e}"
                    ) from e

                catalog = catalog_class()
                if not isinstance(catalog, ArticleCatalog):
                    raise ImproperlyConfigured(
                        f"'{catalog_path}' does not implement ArticleCatalog"
                    )
                _article_catalog = catalog
                logger.debug("Loaded article catalog: %s", catalog_path)

    return _article_catalog


def reset_article_catalog() -> None:
    """Reset the cached catalog. Useful for testing."""
    global _article_catalog
    _article_catalog = None
