"""
Static Article Catalog — settings-backed adapter for development and testing.

Usage in settings.py:
    STOCKLEDGER = {
        "ARTICLE_CATALOG": "stockledger.adapters.static.StaticArticleCatalog",
        "ARTICLE_CODES": {"FRI44420": "04768"},
    }

WARNING: Do NOT use in production. The map never changes unless the
settings do, so new ERP articles will not resolve.
"""

from __future__ import annotations

from stockledger.conf import stockledger_settings
from stockledger.protocols.catalog import ArticleMapping


class StaticArticleCatalog:
    """
    ArticleCatalog over a fixed code → identifier dict.

    Without an explicit mapping, reads STOCKLEDGER["ARTICLE_CODES"]
    on every fetch, so settings overrides in tests take effect.
    """

    def __init__(self, mapping: dict[str, str] | None = None):
        self.mapping = mapping

    def fetch_article_code_map(self) -> list[ArticleMapping]:
        mapping = self.mapping
        if mapping is None:
            mapping = stockledger_settings.ARTICLE_CODES
        return [
            ArticleMapping(code=code, identifier=identifier)
            for code, identifier in mapping.items()
        ]
