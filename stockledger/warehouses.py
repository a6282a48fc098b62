"""
Warehouse field resolution — isolated, testable, no state.

Maps a (warehouse code, pending flag) pair to the StockRecord counter
it addresses.

Examples:
    resolve_field('mdp')              -> LedgerField.STOCK_MDP
    resolve_field('BA', pending=True) -> LedgerField.PENDING_BA
    resolve_field('XX')               -> None
"""

from stockledger.models.enums import LedgerField, Warehouse


_FIELDS = {
    Warehouse.MDP: (LedgerField.STOCK_MDP, LedgerField.PENDING_MDP),
    Warehouse.BA: (LedgerField.STOCK_BA, LedgerField.PENDING_BA),
    Warehouse.GP: (LedgerField.STOCK_GP, LedgerField.PENDING_GP),
    Warehouse.ROS: (LedgerField.STOCK_ROS, LedgerField.PENDING_ROS),
}


def parse_warehouse(code) -> Warehouse | None:
    """Match a warehouse code case-insensitively, or None (no trimming)."""
    if not isinstance(code, str):
        return None
    try:
        return Warehouse(code.upper())
    except ValueError:
        return None


def resolve_field(warehouse, pending: bool = False) -> LedgerField | None:
    """
    Counter addressed by a warehouse code and pending flag.

    Returns None for unknown warehouses; callers report that as
    invalid input, not as a fault.
    """
    parsed = parse_warehouse(warehouse)
    if parsed is None:
        return None
    current, pending_field = _FIELDS[parsed]
    return pending_field if pending else current
