"""
SQL Article Catalog — reads code → identifier pairs over a Django connection.

The ERP catalog lives in its own database (Firebird in production);
configure it as an extra entry in DATABASES and point
CATALOG_DATABASE at that alias.

Settings:
    DATABASES = {
        "default": {...},
        "catalog": {...},
    }
    STOCKLEDGER = {
        "ARTICLE_CATALOG": "stockledger.adapters.sql.SqlArticleCatalog",
        "CATALOG_DATABASE": "catalog",
    }
"""

from __future__ import annotations

import logging

from django.db import connections

from stockledger.conf import stockledger_settings
from stockledger.protocols.catalog import ArticleMapping

logger = logging.getLogger(__name__)


def _clean(value) -> str:
    """Stringify a column value; CHAR columns come back space-padded."""
    if value is None:
        return ''
    return str(value).strip()


class SqlArticleCatalog:
    """
    ArticleCatalog that runs one query returning (code, identifier) rows.

    Args:
        database: Django database alias (default CATALOG_DATABASE)
        query: SQL returning two columns, code first (default CATALOG_QUERY)
    """

    def __init__(self, database: str | None = None, query: str | None = None):
        self.database = database or stockledger_settings.CATALOG_DATABASE
        self.query = query or stockledger_settings.CATALOG_QUERY

    def fetch_article_code_map(self) -> list[ArticleMapping]:
        with connections[self.database].cursor() as cursor:
            cursor.execute(self.query)
            rows = cursor.fetchall()

        mappings = []
        skipped = 0
        for code, identifier in rows:
            code, identifier = _clean(code), _clean(identifier)
            if not code or not identifier:
                skipped += 1
                continue
            mappings.append(ArticleMapping(code=code, identifier=identifier))

        logger.debug(
            "Fetched %d article codes from '%s' (%d skipped)",
            len(mappings), self.database, skipped,
        )
        return mappings
