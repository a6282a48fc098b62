"""
Stock Ledger Store Protocol — persistence boundary for StockRecord rows.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from stockledger.models.enums import LedgerField, Operation


@dataclass(frozen=True)
class FieldChange:
    """Outcome of one atomic counter adjustment."""

    article_id: str
    field: LedgerField
    operation: Operation
    quantity: int
    previous_value: int
    new_value: int
    date_updated: datetime


@runtime_checkable
class StockLedgerStore(Protocol):
    """
    Protocol for StockRecord persistence.

    Reads return plain snapshots (dicts). adjust() must run the
    read-modify-write for one counter atomically.
    """

    def find_one(self, identifier: str) -> dict[str, Any] | None:
        """Snapshot of one record, or None."""
        ...

    def find_many(self, identifiers: Iterable[str]) -> list[dict[str, Any]]:
        """Snapshots for the identifiers that exist."""
        ...

    def find_all(self) -> list[dict[str, Any]]:
        """Snapshots of every record."""
        ...

    def update(self, identifier: str, values: dict[str, Any]) -> bool:
        """
        Write column values to one record.

        Returns:
            True if a record was updated
        """
        ...

    def adjust(self, identifier: str, field: LedgerField,
               operation: Operation, quantity: int) -> FieldChange | None:
        """
        Apply operation to one counter and stamp date_updated.

        Returns:
            FieldChange, or None if the record does not exist
        """
        ...
