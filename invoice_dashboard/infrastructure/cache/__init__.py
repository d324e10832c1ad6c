"""View caching."""

from invoice_dashboard.infrastructure.cache.page_cache import (
    PageCache,
    get_page_cache,
    normalize_path,
    reset_page_cache,
)

__all__ = [
    "PageCache",
    "get_page_cache",
    "normalize_path",
    "reset_page_cache",
]
