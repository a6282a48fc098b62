"""
Stock Ledger Service — The single public interface for all ledger operations.

Usage:
    from stockledger import ledger

    ledger.reserve({"articleCode": "FRI44420", "quantity": 5, "warehouse": "MDP"})
    ledger.release({"articleId": "04768", "quantity": 10, "warehouse": "BA", "pending": True})
    ledger.get_by_articles(["04768"], ["FRI44420"])
    ledger.get_all()

Every operation returns a LedgerResult; reportable problems (unknown
code, bad warehouse, missing record) come back as error details and
are never raised. Database and catalog failures propagate.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from stockledger.adapters.catalog import get_article_catalog
from stockledger.adapters.store import DjangoStockLedgerStore
from stockledger.cache import AggregateCache
from stockledger.conf import stockledger_settings
from stockledger.exceptions import StockLedgerError
from stockledger.models.enums import LedgerField, Operation
from stockledger.protocols.catalog import ArticleCatalog
from stockledger.protocols.store import FieldChange, StockLedgerStore
from stockledger.resolver import ArticleIdentifierResolver
from stockledger.warehouses import resolve_field

logger = logging.getLogger('stockledger')


# ══════════════════════════════════════════════════════════════
# PAYLOADS & RESULTS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class StockEventPayload:
    """
    Reserve/release request.

    One of article_id / article_code is expected; article_code wins
    when both are given.
    """

    quantity: Any = None
    warehouse: str | None = None
    article_id: str | None = None
    article_code: str | None = None
    pending: bool = False

    _aliases: ClassVar[dict[str, str]] = {
        'articleId': 'article_id',
        'articleCode': 'article_code',
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StockEventPayload:
        """Build from a request body (camelCase or snake_case keys)."""
        values = {}
        for key, value in data.items():
            name = cls._aliases.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value
        return cls(**values)

    @classmethod
    def coerce(cls, payload: StockEventPayload | Mapping[str, Any]) -> StockEventPayload:
        if isinstance(payload, cls):
            return payload
        return cls.from_dict(payload)


@dataclass(frozen=True)
class ReserveResult:
    """Outcome of a reserve: the counter touched and its new value."""

    article_code: str
    field: LedgerField
    previous_value: int
    new_value: int
    quantity: int
    pending: bool
    date_updated: datetime

    quantity_key: ClassVar[str] = 'reserved_quantity'

    @classmethod
    def from_change(cls, change: FieldChange, pending: bool):
        return cls(
            article_code=change.article_id,
            field=change.field,
            previous_value=change.previous_value,
            new_value=change.new_value,
            quantity=change.quantity,
            pending=pending,
            date_updated=change.date_updated,
        )

    @property
    def warehouse(self) -> str:
        return self.field.warehouse.value

    def as_dict(self) -> dict[str, Any]:
        return {
            'article_code': self.article_code,
            'field': self.field.value,
            self.field.value: self.new_value,
            'previous_value': self.previous_value,
            self.quantity_key: self.quantity,
            'warehouse': self.warehouse,
            'pending': self.pending,
            'date_updated': self.date_updated,
        }


@dataclass(frozen=True)
class ReleaseResult(ReserveResult):
    """
    Outcome of a release.

    released_quantity echoes the request even when the counter hit
    zero; applied_quantity is what was actually subtracted.
    """

    quantity_key: ClassVar[str] = 'released_quantity'

    @property
    def applied_quantity(self) -> int:
        return self.previous_value - self.new_value

    @property
    def clamped(self) -> bool:
        return self.applied_quantity < self.quantity

    def as_dict(self) -> dict[str, Any]:
        return {**super().as_dict(), 'applied_quantity': self.applied_quantity}


@dataclass
class LedgerResult:
    """
    Success-or-errors envelope.

    data and errors may both be set (partial success on batch reads).
    """

    data: Any = None
    errors: list[dict[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict[str, Any]:
        """Serialize to {"data": ..., "errors": [...]} omitting what is absent."""
        out: dict[str, Any] = {}
        if self.data is not None:
            out['data'] = self.data.as_dict() if hasattr(self.data, 'as_dict') else self.data
        if self.errors:
            out['errors'] = list(self.errors)
        return out


def _split(values) -> list[str]:
    """Normalize identifiers/codes: None, "a, b" or an iterable of strings."""
    if values is None:
        return []
    if isinstance(values, str):
        values = values.split(',')
    return [v.strip() for v in values if v and v.strip()]


# ══════════════════════════════════════════════════════════════
# LEDGER
# ══════════════════════════════════════════════════════════════

class StockLedger:
    """
    Reserve/release and read operations over StockRecord counters.

    Owns its ArticleIdentifierResolver: the code snapshot lives as long
    as the ledger instance.

    Args:
        catalog: ArticleCatalog (default: STOCKLEDGER['ARTICLE_CATALOG'])
        store: StockLedgerStore (default: DjangoStockLedgerStore)
        cache: AggregateCache for get_all() (default from settings)
    """

    def __init__(self, catalog: ArticleCatalog | None = None,
                 store: StockLedgerStore | None = None,
                 cache: AggregateCache | None = None):
        self.resolver = ArticleIdentifierResolver(catalog or get_article_catalog())
        self.store = store or DjangoStockLedgerStore()
        self.cache = cache or AggregateCache()

    # ══════════════════════════════════════════════════════════════
    # CORE: MUTATIONS
    # ══════════════════════════════════════════════════════════════

    def reserve(self, payload) -> LedgerResult:
        """
        Add quantity to a warehouse counter.

        No ceiling: the counter grows by exactly quantity.

        Errors (returned, not raised):
            MISSING_IDENTIFIER, ARTICLE_CODE_NOT_FOUND, INVALID_WAREHOUSE,
            STOCK_RECORD_NOT_FOUND, INVALID_QUANTITY, INVALID_PENDING
        """
        return self._adjust(payload, Operation.RESERVE, ReserveResult)

    def release(self, payload) -> LedgerResult:
        """
        Subtract quantity from a warehouse counter, flooring at zero.

        The result reports previous_value, the new value and
        applied_quantity, so a clamped release is detectable.
        """
        return self._adjust(payload, Operation.RELEASE, ReleaseResult)

    def _adjust(self, payload, operation: Operation, result_class) -> LedgerResult:
        payload = StockEventPayload.coerce(payload)

        try:
            article_id = self._resolve_article(payload.article_id, payload.article_code)
            pending = self._validate_pending(payload.pending)
            target = resolve_field(payload.warehouse, pending)
            if target is None:
                raise StockLedgerError('INVALID_WAREHOUSE', warehouse=payload.warehouse)
            quantity = self._validate_quantity(payload.quantity)

            change = self.store.adjust(article_id, target, operation, quantity)
            if change is None:
                raise StockLedgerError('STOCK_RECORD_NOT_FOUND', article_id=article_id)
        except StockLedgerError as e:
            logger.warning(
                f"stock.{operation.value}.rejected",
                extra={"code": e.code, "detail": e.message},
            )
            return LedgerResult(errors=[e.as_error_detail()])

        if stockledger_settings.INVALIDATE_CACHE_ON_WRITE:
            self.cache.invalidate()

        result = result_class.from_change(change, pending)
        logger.info(
            f"stock.{operation.value}d",
            extra={
                "article_id": change.article_id,
                "field": change.field.value,
                "qty": quantity,
                "previous": change.previous_value,
                "new": change.new_value,
            },
        )
        return LedgerResult(data=result)

    # ══════════════════════════════════════════════════════════════
    # CORE: QUERIES
    # ══════════════════════════════════════════════════════════════

    def get_by_articles(self, identifiers=None, codes=None) -> LedgerResult:
        """
        Snapshots for many articles in one store query.

        Each code is resolved independently; unknown codes become
        ARTICLE_CODE_NOT_FOUND errors while the rest are still read.

        Args:
            identifiers: Article identifiers (iterable or comma-separated)
            codes: Article codes (iterable or comma-separated)

        Returns:
            LedgerResult with data=list of snapshots and any errors
        """
        article_ids = _split(identifiers)
        errors = []

        for code in _split(codes):
            article_id = self.resolver.resolve(code)
            if article_id is None:
                errors.append(
                    StockLedgerError('ARTICLE_CODE_NOT_FOUND', article_code=code).as_error_detail()
                )
            else:
                article_ids.append(article_id)

        records = self.store.find_many(article_ids) if article_ids else []
        return LedgerResult(data=records, errors=errors)

    def get_one(self, article_id: str | None = None,
                article_code: str | None = None) -> LedgerResult:
        """Snapshot of one article, resolved like reserve/release."""
        try:
            identifier = self._resolve_article(article_id, article_code)
            record = self.store.find_one(identifier)
            if record is None:
                raise StockLedgerError('STOCK_RECORD_NOT_FOUND', article_id=identifier)
        except StockLedgerError as e:
            return LedgerResult(errors=[e.as_error_detail()])
        return LedgerResult(data=record)

    def get_all(self) -> list[dict[str, Any]]:
        """
        Every StockRecord snapshot, served from the aggregate cache.

        A miss scans the store once and caches the result for
        CACHE_TTL_GLOBAL seconds (0 = until evicted). Not invalidated
        by reserve/release unless INVALIDATE_CACHE_ON_WRITE is set.
        """
        cached = self.cache.get()
        if cached is not None:
            return cached

        snapshots = self.store.find_all()
        self.cache.set(snapshots)
        return snapshots

    # ══════════════════════════════════════════════════════════════
    # MAINTENANCE
    # ══════════════════════════════════════════════════════════════

    def reload_article_codes(self) -> int:
        """Force a catalog reload. Returns the number of codes."""
        return self.resolver.reload()

    def clear_cache(self) -> None:
        self.cache.invalidate()

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    def _resolve_article(self, article_id: str | None, article_code: str | None) -> str:
        """Operative identifier; a code is resolved, an id is trusted as given."""
        if article_code:
            if article_id:
                logger.warning(
                    "stock.article.ambiguous",
                    extra={"article_id": article_id, "article_code": article_code},
                )
            identifier = self.resolver.resolve(article_code)
            if identifier is None:
                raise StockLedgerError('ARTICLE_CODE_NOT_FOUND', article_code=article_code)
            return identifier

        if article_id:
            return article_id

        raise StockLedgerError('MISSING_IDENTIFIER')

    @staticmethod
    def _validate_quantity(quantity) -> int:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise StockLedgerError('INVALID_QUANTITY', quantity=quantity)
        return quantity

    @staticmethod
    def _validate_pending(pending) -> bool:
        if pending is None:
            return False
        if not isinstance(pending, bool):
            raise StockLedgerError('INVALID_PENDING', pending=pending)
        return pending


# ══════════════════════════════════════════════════════════════
# PROCESS LEDGER
# ══════════════════════════════════════════════════════════════

_lock = threading.Lock()
_ledger: StockLedger | None = None


def get_ledger() -> StockLedger:
    """
    Return the process-wide ledger, built from settings on first use.

    Raises:
        ImproperlyConfigured: If no article catalog is configured
    """
    global _ledger

    if _ledger is None:
        with _lock:
            if _ledger is None:  # double-checked
                _ledger = StockLedger()

    return _ledger


def reset_ledger() -> None:
    """Drop the process ledger and its code snapshot. Useful for testing."""
    global _ledger
    _ledger = None
