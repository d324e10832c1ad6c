"""
In-memory cache of rendered dashboard views.

Entries are keyed by ``(path, variant)``; invalidating a path drops every
variant cached under it. Size is bounded with LRU eviction and entries
expire after a TTL. Each path carries a generation counter so a view
read before an invalidation is never written back afterwards.
"""

import time
from collections import OrderedDict
from typing import Any

from invoice_dashboard.config import get_logger, get_settings
from invoice_dashboard.core.interfaces import IPageCache

logger = get_logger(__name__)


def normalize_path(path: str) -> str:
    """Canonical form of a logical path: leading slash, no trailing slash."""
    return "/" + path.strip().strip("/")


class PageCache(IPageCache):
    """LRU + TTL cache for views, keyed by path."""

    def __init__(self, max_size: int = 256, ttl: int = 300):
        self.max_size = max_size
        self.ttl = ttl
        self._entries: OrderedDict[tuple[str, str], tuple[float, Any]] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._invalidations = 0
        self._stale_writes = 0
        # path -> invalidation count; clear() keeps it
        self._generations: dict[str, int] = {}

    def get(self, path: str, variant: str = "") -> Any | None:
        key = (normalize_path(path), variant)
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        expires_at, value = entry
        if expires_at < time.time():
            del self._entries[key]
            self._misses += 1
            return None

        self._entries.move_to_end(key)
        self._hits += 1
        return value

    def generation(self, path: str) -> int:
        return self._generations.get(normalize_path(path), 0)

    def set(
        self,
        path: str,
        value: Any,
        variant: str = "",
        ttl: int | None = None,
        generation: int | None = None,
    ) -> bool:
        target = normalize_path(path)
        if generation is not None and generation != self._generations.get(target, 0):
            self._stale_writes += 1
            logger.debug("page_cache_stale_write_skipped", path=target, variant=variant)
            return False

        key = (target, variant)
        self._entries[key] = (time.time() + (self.ttl if ttl is None else ttl), value)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
        return True

    def invalidate(self, path: str) -> None:
        target = normalize_path(path)
        stale = [key for key in self._entries if key[0] == target]
        for key in stale:
            del self._entries[key]
        self._generations[target] = self._generations.get(target, 0) + 1
        self._invalidations += 1
        logger.info("page_cache_invalidated", path=target, entries=len(stale))

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> dict[str, Any]:
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "ttl": self.ttl,
            "hits": self._hits,
            "misses": self._misses,
            "invalidations": self._invalidations,
            "stale_writes": self._stale_writes,
        }


_page_cache: PageCache | None = None


def get_page_cache() -> PageCache:
    """Get or create the process-wide page cache."""
    global _page_cache
    if _page_cache is None:
        settings = get_settings()
        _page_cache = PageCache(
            max_size=settings.cache.page_cache_size,
            ttl=settings.cache.page_cache_ttl,
        )
    return _page_cache


def reset_page_cache() -> None:
    """Drop the process-wide page cache (for testing)."""
    global _page_cache
    _page_cache = None
