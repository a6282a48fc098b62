"""
Article identifier resolution — external code → internal identifier.

The resolver owns an in-memory snapshot of the catalog. A miss reloads
the whole snapshot once; there is no per-code refresh or expiry.
"""

import logging
import threading
from types import MappingProxyType

from stockledger.protocols.catalog import ArticleCatalog

logger = logging.getLogger('stockledger')


class ArticleIdentifierResolver:
    """
    Resolves article codes through a wholesale-refreshed snapshot.

    Reads never lock: the snapshot is an immutable mapping swapped in
    under a lock by reload(). Two concurrent misses may both reload;
    each swap is a complete snapshot, so that is only extra I/O.
    """

    def __init__(self, catalog: ArticleCatalog):
        self.catalog = catalog
        self._lock = threading.Lock()
        self._mapping = MappingProxyType({})

    def resolve(self, code: str) -> str | None:
        """
        Identifier for an article code, reloading the snapshot on a miss.

        Returns:
            The identifier, or None if the catalog does not know the code
        """
        identifier = self._mapping.get(code)
        if identifier is None:
            self.reload()
            identifier = self._mapping.get(code)
            if identifier is None:
                logger.warning("stock.article_code.not_found", extra={"article_code": code})
        return identifier

    def reload(self) -> int:
        """
        Replace the snapshot with a fresh catalog read.

        Catalog errors propagate and leave the current snapshot in place.

        Returns:
            Number of codes in the new snapshot
        """
        entries = self.catalog.fetch_article_code_map()
        mapping = {entry.code: entry.identifier for entry in entries}
        with self._lock:
            self._mapping = MappingProxyType(mapping)
        logger.debug("stock.article_codes.reloaded", extra={"count": len(mapping)})
        return len(mapping)

    def clear(self) -> None:
        """Forget every code; the next resolve() reloads."""
        with self._lock:
            self._mapping = MappingProxyType({})

    def __contains__(self, code) -> bool:
        return code in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)
