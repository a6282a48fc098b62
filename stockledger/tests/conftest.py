"""
Pytest fixtures for Stock Ledger tests.
"""

import pytest
from django.core.cache import caches

from stockledger.adapters import reset_article_catalog
from stockledger.cache import AggregateCache
from stockledger.models import StockRecord
from stockledger.service import StockLedger, reset_ledger
from stockledger.tests.fakes import CountingCatalog, CountingStore


@pytest.fixture(autouse=True)
def _isolate():
    """Fresh cache and process singletons for every test."""
    caches['default'].clear()
    reset_ledger()
    reset_article_catalog()
    yield
    reset_ledger()
    reset_article_catalog()


@pytest.fixture
def catalog():
    return CountingCatalog()


@pytest.fixture
def store():
    return CountingStore()


@pytest.fixture
def ledger(catalog, store):
    """Ledger with counting collaborators and a never-expiring cache."""
    return StockLedger(catalog=catalog, store=store, cache=AggregateCache(ttl=0))


@pytest.fixture
def make_record(db):
    """Factory for StockRecord rows (all counters default to 0)."""
    def _make(article_code='04768', **counters):
        return StockRecord.objects.create(article_code=article_code, **counters)
    return _make


@pytest.fixture
def record(make_record):
    """Article 04768 (code FRI44420) with some stock everywhere."""
    return make_record(
        '04768',
        stock_mdp=4, stock_ba=7, stock_gp=0, stock_ros=2,
        pending_mdp=1, pending_ba=4, pending_gp=0, pending_ros=0,
    )
