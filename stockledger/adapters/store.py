"""
Django Stock Ledger Store — StockLedgerStore backed by the ORM.

Usage:
    from stockledger.adapters.store import DjangoStockLedgerStore

    store = DjangoStockLedgerStore()
    change = store.adjust("04768", LedgerField.PENDING_BA, Operation.RELEASE, 10)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from django.db import transaction
from django.utils import timezone

from stockledger.models.enums import LedgerField, Operation
from stockledger.models.stock import StockRecord
from stockledger.protocols.store import FieldChange

logger = logging.getLogger(__name__)


class DjangoStockLedgerStore:
    """
    StockLedgerStore over the StockRecord model.

    Concurrency:
        - adjust() runs under transaction.atomic()
        - Uses select_for_update() on the article row
        - Computes the new value after the lock, so concurrent
          reserve/release calls on one article serialize
    """

    def __init__(self, using: str | None = None):
        self.using = using

    @property
    def records(self):
        return StockRecord.objects.db_manager(self.using)

    def find_one(self, identifier: str) -> dict[str, Any] | None:
        record = self.records.filter(pk=identifier).first()
        return record.snapshot() if record else None

    def find_many(self, identifiers: Iterable[str]) -> list[dict[str, Any]]:
        ids = list(dict.fromkeys(identifiers))
        if not ids:
            return []
        return [r.snapshot() for r in self.records.for_articles(ids)]

    def find_all(self) -> list[dict[str, Any]]:
        return [r.snapshot() for r in self.records.order_by('article_code')]

    def update(self, identifier: str, values: dict[str, Any]) -> bool:
        return self.records.filter(pk=identifier).update(**values) > 0

    def adjust(self, identifier: str, field: LedgerField,
               operation: Operation, quantity: int) -> FieldChange | None:
        field = LedgerField(field)
        operation = Operation(operation)

        with transaction.atomic(using=self.using):
            try:
                record = self.records.select_for_update().get(pk=identifier)
            except StockRecord.DoesNotExist:
                return None

            previous = field.read(record)
            new_value = operation.apply(previous, quantity)
            now = timezone.now()
            self.update(identifier, {field.value: new_value, 'date_updated': now})

        if operation is Operation.RELEASE and previous - quantity < 0:
            logger.info(
                "stock.release.floored",
                extra={
                    "article_id": identifier,
                    "field": field.value,
                    "requested": quantity,
                    "previous": previous,
                },
            )

        return FieldChange(
            article_id=identifier,
            field=field,
            operation=operation,
            quantity=quantity,
            previous_value=previous,
            new_value=new_value,
            date_updated=now,
        )
