"""
Tests for ArticleIdentifierResolver.
"""

import threading

import pytest

from stockledger.protocols import ArticleMapping
from stockledger.resolver import ArticleIdentifierResolver
from stockledger.tests.fakes import CountingCatalog


class FailingCatalog:
    """Catalog whose connection is down."""

    def fetch_article_code_map(self):
        raise ConnectionError('catalog unreachable')


class TestResolve:
    """Tests for resolver.resolve()."""

    def test_miss_triggers_single_reload(self, catalog):
        """First lookup loads the whole catalog once."""
        resolver = ArticleIdentifierResolver(catalog)

        assert resolver.resolve('FRI44420') == '04768'
        assert catalog.calls == 1
        assert len(resolver) == 3

    def test_warm_map_needs_no_reload(self, catalog):
        """Same code twice: same identifier, no second reload."""
        resolver = ArticleIdentifierResolver(catalog)

        first = resolver.resolve('FRI44420')
        second = resolver.resolve('FRI44420')

        assert first == second == '04768'
        assert catalog.calls == 1

    def test_other_known_codes_served_from_snapshot(self, catalog):
        """Codes loaded by an earlier reload resolve without I/O."""
        resolver = ArticleIdentifierResolver(catalog)
        resolver.resolve('FRI44420')

        assert resolver.resolve('HEL10001') == '01001'
        assert catalog.calls == 1

    def test_unknown_code_returns_none_after_reload(self, catalog):
        """Unknown code: one reload, then None."""
        resolver = ArticleIdentifierResolver(catalog)

        assert resolver.resolve('UNKNOWN_CODE') is None
        assert catalog.calls == 1

    def test_unknown_code_reloads_every_time(self, catalog):
        """Unseen codes keep triggering reloads (no negative caching)."""
        resolver = ArticleIdentifierResolver(catalog)
        resolver.resolve('UNKNOWN_CODE')
        resolver.resolve('UNKNOWN_CODE')

        assert catalog.calls == 2

    def test_new_catalog_code_picked_up_on_miss(self):
        """A code added to the catalog after warm-up resolves on its first lookup."""
        catalog = CountingCatalog({'FRI44420': '04768'})
        resolver = ArticleIdentifierResolver(catalog)
        resolver.resolve('FRI44420')

        catalog.mapping['NEW00001'] = '09999'

        assert resolver.resolve('NEW00001') == '09999'
        assert catalog.calls == 2


class TestReload:
    """Tests for resolver.reload()."""

    def test_reload_replaces_snapshot_wholesale(self):
        """Codes missing from the new catalog read disappear."""
        catalog = CountingCatalog({'A': '1', 'B': '2'})
        resolver = ArticleIdentifierResolver(catalog)
        assert resolver.reload() == 2

        catalog.mapping = {'B': '22'}
        assert resolver.reload() == 1

        assert 'A' not in resolver
        assert resolver.resolve('B') == '22'

    def test_catalog_failure_propagates(self):
        """Connectivity errors are faults, not 'not found'."""
        resolver = ArticleIdentifierResolver(FailingCatalog())

        with pytest.raises(ConnectionError):
            resolver.resolve('FRI44420')

    def test_failed_reload_keeps_previous_snapshot(self, catalog):
        resolver = ArticleIdentifierResolver(catalog)
        resolver.reload()

        resolver.catalog = FailingCatalog()
        with pytest.raises(ConnectionError):
            resolver.reload()

        assert resolver.resolve('FRI44420') == '04768'

    def test_clear_forces_reload(self, catalog):
        resolver = ArticleIdentifierResolver(catalog)
        resolver.resolve('FRI44420')
        resolver.clear()

        assert len(resolver) == 0
        assert resolver.resolve('FRI44420') == '04768'
        assert catalog.calls == 2

    def test_last_duplicate_code_wins(self):
        class DuplicateCatalog:
            def fetch_article_code_map(self):
                return [ArticleMapping('X', '1'), ArticleMapping('X', '2')]

        resolver = ArticleIdentifierResolver(DuplicateCatalog())
        assert resolver.resolve('X') == '2'


class TestConcurrency:
    """Concurrent misses are wasted work, never wrong answers."""

    def test_concurrent_resolves_agree(self, catalog):
        resolver = ArticleIdentifierResolver(catalog)
        results = []

        def worker():
            results.append(resolver.resolve('LAV20002'))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == ['02002'] * 8
        assert 1 <= catalog.calls <= 8
