"""
Abstract interfaces for rendered page caching.
"""

from abc import ABC, abstractmethod
from typing import Any


class ICacheInvalidator(ABC):
    """Marks the cached representation of a logical path as stale."""

    @abstractmethod
    def invalidate(self, path: str) -> None:
        """Invalidate every cached entry for ``path``."""
        pass


class IPageCache(ICacheInvalidator):
    """
    Abstract interface for caching rendered views by path.

    Entries are keyed by path plus an optional variant (e.g. a query string),
    so invalidating a path drops all of its variants.
    """

    @abstractmethod
    def get(self, path: str, variant: str = "") -> Any | None:
        """Get a cached view."""
        pass

    @abstractmethod
    def generation(self, path: str) -> int:
        """Counter bumped each time ``path`` is invalidated."""
        pass

    @abstractmethod
    def set(
        self,
        path: str,
        value: Any,
        variant: str = "",
        ttl: int | None = None,
        generation: int | None = None,
    ) -> bool:
        """Cache a rendered view.

        When ``generation`` is given and ``path`` has been invalidated
        since it was read, the view is stale and is not stored.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop all cached views."""
        pass

    @abstractmethod
    def stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        pass
