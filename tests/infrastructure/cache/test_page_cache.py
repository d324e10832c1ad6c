"""Tests for the page cache."""

from unittest.mock import patch

import pytest

from invoice_dashboard.infrastructure.cache import (
    PageCache,
    get_page_cache,
    normalize_path,
    reset_page_cache,
)


@pytest.fixture
def cache() -> PageCache:
    return PageCache(max_size=3, ttl=60)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/dashboard/invoices", "/dashboard/invoices"),
        ("/dashboard/invoices/", "/dashboard/invoices"),
        ("dashboard/invoices", "/dashboard/invoices"),
        ("/", "/"),
    ],
)
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


class TestPageCache:
    def test_get_after_set(self, cache):
        cache.set("/dashboard/invoices", {"rows": 1})
        assert cache.get("/dashboard/invoices/") == {"rows": 1}

    def test_miss_returns_none(self, cache):
        assert cache.get("/dashboard/invoices") is None
        assert cache.stats()["misses"] == 1

    def test_invalidate_drops_every_variant(self, cache):
        cache.set("/dashboard/invoices", "page1", variant="offset=0")
        cache.set("/dashboard/invoices", "page2", variant="offset=50")
        cache.set("/dashboard/customers", "other")

        cache.invalidate("/dashboard/invoices")

        assert cache.get("/dashboard/invoices", "offset=0") is None
        assert cache.get("/dashboard/invoices", "offset=50") is None
        assert cache.get("/dashboard/customers") == "other"
        assert cache.stats()["invalidations"] == 1

    def test_invalidate_unknown_path_is_harmless(self, cache):
        cache.invalidate("/nothing")
        assert cache.stats()["size"] == 0

    def test_entries_expire(self, cache):
        with patch("invoice_dashboard.infrastructure.cache.page_cache.time.time", return_value=1000.0):
            cache.set("/p", "v", ttl=10)
        with patch("invoice_dashboard.infrastructure.cache.page_cache.time.time", return_value=1011.0):
            assert cache.get("/p") is None

    def test_lru_eviction(self, cache):
        cache.set("/a", 1)
        cache.set("/b", 2)
        cache.set("/c", 3)
        cache.get("/a")
        cache.set("/d", 4)

        assert cache.get("/b") is None
        assert cache.get("/a") == 1

    def test_clear(self, cache):
        cache.set("/a", 1)
        cache.clear()
        assert cache.stats()["size"] == 0


def test_global_cache_is_shared():
    first = get_page_cache()
    assert get_page_cache() is first
    reset_page_cache()
    assert get_page_cache() is not first


class TestGenerations:
    def test_invalidate_bumps_generation(self, cache):
        assert cache.generation("/dashboard/invoices") == 0
        cache.invalidate("/dashboard/invoices/")
        assert cache.generation("/dashboard/invoices") == 1

    def test_write_with_current_generation_is_stored(self, cache):
        token = cache.generation("/dashboard/invoices")
        assert cache.set("/dashboard/invoices", "fresh", generation=token) is True
        assert cache.get("/dashboard/invoices") == "fresh"

    def test_write_read_before_invalidation_is_dropped(self, cache):
        token = cache.generation("/dashboard/invoices")
        cache.invalidate("/dashboard/invoices")

        assert cache.set("/dashboard/invoices", "stale", generation=token) is False
        assert cache.get("/dashboard/invoices") is None
        assert cache.stats()["stale_writes"] == 1

    def test_other_paths_unaffected(self, cache):
        token = cache.generation("/dashboard/customers")
        cache.invalidate("/dashboard/invoices")
        assert cache.set("/dashboard/customers", "ok", generation=token) is True
