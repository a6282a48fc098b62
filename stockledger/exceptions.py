"""
Exceptions for Stock Ledger.

All reportable conditions are StockLedgerError with a structured code.
The ledger service catches them at its public boundary and turns them
into error details, so callers get results instead of exceptions.
"""

from typing import Any


class StockLedgerError(Exception):
    """
    Structured exception for ledger operations.

    Usage:
        try:
            raise StockLedgerError('INVALID_WAREHOUSE', warehouse='XX')
        except StockLedgerError as e:
            if e.code == 'INVALID_WAREHOUSE':
                print(f"Unknown warehouse {e.data['warehouse']}")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_titles = {
        'MISSING_IDENTIFIER': 'Missing article identifier',
        'ARTICLE_CODE_NOT_FOUND': 'Article code not found',
        'INVALID_WAREHOUSE': 'Invalid warehouse',
        'STOCK_RECORD_NOT_FOUND': 'Stock record not found',
        'INVALID_QUANTITY': 'Invalid quantity',
        'INVALID_PENDING': 'Invalid pending flag',
    }

    _default_messages = {
        'MISSING_IDENTIFIER': 'No article identifier provided',
        'ARTICLE_CODE_NOT_FOUND': 'Article code {article_code} not found',
        'INVALID_WAREHOUSE': 'Invalid warehouse provided: {warehouse}',
        'STOCK_RECORD_NOT_FOUND': 'Stock record for article {article_id} not found',
        'INVALID_QUANTITY': 'Quantity must be a non-negative integer, got {quantity!r}',
        'INVALID_PENDING': 'Pending must be a boolean, got {pending!r}',
    }

    # Payload field an error points at (ErrorDetail.source)
    _default_sources = {
        'MISSING_IDENTIFIER': 'articleId',
        'ARTICLE_CODE_NOT_FOUND': 'articleCode',
        'INVALID_WAREHOUSE': 'warehouse',
        'INVALID_QUANTITY': 'quantity',
        'INVALID_PENDING': 'pending',
    }

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.data = data
        if message is None:
            template = self._default_messages.get(code, code)
            try:
                message = template.format(**data)
            except KeyError:
                message = template
        self.message = message
        super().__init__(message)

    @property
    def title(self) -> str:
        return self._default_titles.get(self.code, self.code)

    def as_error_detail(self) -> dict[str, str]:
        """Serialize to the ErrorDetail shape returned by the ledger."""
        detail = {'title': self.title, 'detail': self.message}
        source = self._default_sources.get(self.code)
        if source is not None:
            detail = {'source': source, **detail}
        return detail

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for logs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {k: str(v) for k, v in self.data.items()},
        }

    def __repr__(self) -> str:
        return f"StockLedgerError({self.code!r}, {self.message!r})"
