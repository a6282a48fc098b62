"""
Aggregate cache — the full ledger snapshot used by get_all().

A single slot in a Django cache backend. It expires on TTL only;
writes do not touch it unless INVALIDATE_CACHE_ON_WRITE is set.
"""

import logging

from django.core.cache import caches

from stockledger.conf import stockledger_settings

logger = logging.getLogger('stockledger')


class AggregateCache:
    """
    Time-boxed cache of the full list of StockRecord snapshots.

    Args:
        alias: Django cache alias (default from settings)
        key: Cache key (default "allStock")
        ttl: Seconds to keep the snapshot; 0 keeps it until evicted
    """

    def __init__(self, alias: str | None = None, key: str | None = None,
                 ttl: int | None = None):
        self.alias = alias or stockledger_settings.CACHE_ALIAS
        self.key = key or stockledger_settings.CACHE_KEY
        self.ttl = stockledger_settings.CACHE_TTL_GLOBAL if ttl is None else int(ttl)

    @property
    def backend(self):
        return caches[self.alias]

    @property
    def timeout(self) -> int | None:
        """Django timeout for the slot (None = never expires, unlike Django's 0)."""
        return self.ttl if self.ttl > 0 else None

    def get(self) -> list[dict] | None:
        """Cached snapshot list, or None on a miss."""
        value = self.backend.get(self.key)
        logger.debug("stock.cache.%s", "hit" if value is not None else "miss",
                     extra={"cache_key": self.key})
        return value

    def set(self, snapshots: list[dict]) -> None:
        self.backend.set(self.key, snapshots, timeout=self.timeout)

    def invalidate(self) -> None:
        self.backend.delete(self.key)
        logger.debug("stock.cache.invalidated", extra={"cache_key": self.key})
