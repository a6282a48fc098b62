"""
Tests for Stock Ledger management commands and admin.
"""

from io import StringIO

import pytest
from django.contrib import admin
from django.core.cache import caches
from django.core.management import call_command

from stockledger.models import StockRecord
from stockledger.service import get_ledger


class TestReloadArticleCodes:
    """Tests for reload_article_codes."""

    def test_reload(self):
        out = StringIO()

        call_command('reload_article_codes', stdout=out)

        assert '3 código(s) cargado(s)' in out.getvalue()
        assert 'FRI44420' in get_ledger().resolver

    def test_dry_run_leaves_snapshot_alone(self):
        out = StringIO()

        call_command('reload_article_codes', '--dry-run', stdout=out)

        assert '3 código(s) en el catálogo' in out.getvalue()
        assert len(get_ledger().resolver) == 0


class TestClearStockCache:
    """Tests for clear_stock_cache."""

    def test_clears_slot(self):
        caches['default'].set('allStock', [{'article_code': '04768'}])
        out = StringIO()

        call_command('clear_stock_cache', stdout=out)

        assert caches['default'].get('allStock') is None
        assert "'allStock'" in out.getvalue()


class TestStockRecordAdmin:
    """The admin is read-only."""

    @pytest.fixture
    def model_admin(self):
        return admin.site._registry[StockRecord]

    def test_registered_read_only(self, model_admin, rf):
        request = rf.get('/')

        assert not model_admin.has_add_permission(request)
        assert not model_admin.has_change_permission(request)
        assert not model_admin.has_delete_permission(request)
        assert 'stock_mdp' in model_admin.get_readonly_fields(request)
