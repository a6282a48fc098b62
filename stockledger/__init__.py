"""
Django Stock Ledger — per-article warehouse counters.

Usage:
    from stockledger import ledger, StockLedgerError

    ledger.reserve({"articleCode": "FRI44420", "quantity": 5, "warehouse": "MDP"})
    ledger.release({"articleId": "04768", "quantity": 10, "warehouse": "BA", "pending": True})
    ledger.get_all()
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'ledger':
        from stockledger.service import get_ledger
        return get_ledger()
    elif name == 'StockLedger':
        from stockledger.service import StockLedger
        return StockLedger
    elif name == 'StockLedgerError':
        from stockledger.exceptions import StockLedgerError
        return StockLedgerError
    elif name == 'StockRecord':
        from stockledger.models.stock import StockRecord
        return StockRecord
    elif name == 'Warehouse':
        from stockledger.models.enums import Warehouse
        return Warehouse
    elif name == 'LedgerField':
        from stockledger.models.enums import LedgerField
        return LedgerField
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'ledger',
    'StockLedger',
    'StockLedgerError',
    'StockRecord',
    'Warehouse',
    'LedgerField',
]

__version__ = '0.1.0'
