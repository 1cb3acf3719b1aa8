"""Cache port - Injectable result caching.

A GraphModel never changes after it is built, so query results can be
memoised for as long as the graph is in use. This protocol lets the
route service take any cache, or none, by injection.
"""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Disabled caching, tests
    """

    def get(self, key: Hashable) -> Optional[T]:
        """Get a value from the cache.

        Returns:
            The cached value, or None if not found or expired.
        """
        ...

    def set(self, key: Hashable, value: T) -> None:
        """Set a value in the cache."""
        ...

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...

    def stats(self) -> Dict[str, float]:
        """Return hit/miss counters and size."""
        ...
