"""
Stock Ledger Models.

- StockRecord: per-article counters (current and pending) per warehouse
- Warehouse, LedgerField, Operation: enumerations addressing those counters
"""

from stockledger.models.enums import LedgerField, Operation, Warehouse
from stockledger.models.stock import StockRecord

__all__ = [
    'Warehouse',
    'LedgerField',
    'Operation',
    'StockRecord',
]
