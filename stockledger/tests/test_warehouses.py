"""
Tests for warehouse field resolution and counter arithmetic.
"""

import pytest

from stockledger.models import LedgerField, Operation, Warehouse
from stockledger.warehouses import parse_warehouse, resolve_field


EXPECTED = {
    ('MDP', False): LedgerField.STOCK_MDP,
    ('MDP', True): LedgerField.PENDING_MDP,
    ('BA', False): LedgerField.STOCK_BA,
    ('BA', True): LedgerField.PENDING_BA,
    ('GP', False): LedgerField.STOCK_GP,
    ('GP', True): LedgerField.PENDING_GP,
    ('ROS', False): LedgerField.STOCK_ROS,
    ('ROS', True): LedgerField.PENDING_ROS,
}


class TestResolveField:
    """Tests for resolve_field()."""

    @pytest.mark.parametrize('warehouse,pending', list(EXPECTED))
    def test_known_warehouses(self, warehouse, pending):
        """Every warehouse maps to its current or pending slot."""
        assert resolve_field(warehouse, pending) == EXPECTED[(warehouse, pending)]

    @pytest.mark.parametrize('warehouse', ['mdp', 'Ba', 'gP', 'ros'])
    def test_case_insensitive(self, warehouse):
        """Warehouse codes match regardless of case."""
        assert resolve_field(warehouse).warehouse == Warehouse(warehouse.upper())
        assert resolve_field(warehouse, pending=True).is_pending

    def test_pending_defaults_to_false(self):
        """Without pending flag the current-stock slot is used."""
        assert resolve_field('GP') == LedgerField.STOCK_GP

    @pytest.mark.parametrize('warehouse', [' ros ', ' MDP', 'MDP ', 'B A'])
    def test_padded_code_is_not_found(self, warehouse):
        """Only the bare code matches; whitespace is not trimmed."""
        assert resolve_field(warehouse) is None

    @pytest.mark.parametrize('warehouse', ['XX', '', 'MDPX', 'stock_mdp', None, 42])
    def test_unknown_warehouse_returns_none(self, warehouse):
        """Anything outside MDP/BA/GP/ROS is not found, never an exception."""
        assert resolve_field(warehouse) is None
        assert resolve_field(warehouse, pending=True) is None

    def test_parse_warehouse(self):
        assert parse_warehouse('ba') is Warehouse.BA
        assert parse_warehouse('Córdoba') is None


class TestLedgerField:
    """Tests for the LedgerField slot enumeration."""

    def test_eight_slots(self):
        assert len(LedgerField) == 8
        assert {f.warehouse for f in LedgerField} == set(Warehouse)

    def test_pending_slots(self):
        pending = {f for f in LedgerField if f.is_pending}
        assert pending == {
            LedgerField.PENDING_MDP, LedgerField.PENDING_BA,
            LedgerField.PENDING_GP, LedgerField.PENDING_ROS,
        }

    def test_read_treats_null_as_zero(self):
        class Row:
            stock_ba = None
            pending_ba = 3

        assert LedgerField.STOCK_BA.read(Row()) == 0
        assert LedgerField.PENDING_BA.read(Row()) == 3


class TestOperation:
    """Tests for reserve/release arithmetic."""

    @pytest.mark.parametrize('current,quantity', [(0, 0), (4, 5), (0, 7), (10**9, 10**9)])
    def test_reserve_is_plain_addition(self, current, quantity):
        """Reserve adds without a ceiling."""
        assert Operation.RESERVE.apply(current, quantity) == current + quantity

    @pytest.mark.parametrize('current,quantity,expected', [
        (10, 3, 7),
        (4, 4, 0),
        (4, 10, 0),
        (0, 1, 0),
        (0, 0, 0),
    ])
    def test_release_floors_at_zero(self, current, quantity, expected):
        """Release never goes below zero."""
        assert Operation.RELEASE.apply(current, quantity) == expected

    def test_release_matches_max_formula(self):
        for current in range(0, 12, 3):
            for quantity in range(0, 12, 4):
                assert Operation.RELEASE.apply(current, quantity) == max(0, current - quantity)

    def test_null_current_counts_as_zero(self):
        assert Operation.RESERVE.apply(None, 5) == 5
        assert Operation.RELEASE.apply(None, 5) == 0
