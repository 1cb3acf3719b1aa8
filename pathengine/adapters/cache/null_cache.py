"""Null cache - always misses.

Used when PATHENGINE_CACHE_ENABLED=false, and in tests that must see
every query reach the solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache implementing the CachePort protocol."""

    name: str = "null"

    def get(self, key: Hashable) -> Optional[T]:
        return None

    def set(self, key: Hashable, value: T, ttl: Optional[float] = None) -> None:
        pass

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, float]:
        return {"size": 0, "hits": 0, "misses": 0, "hit_rate_percent": 0.0}
