"""
In-process TTL cache holding the latest token listing.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from service_alpha.app.tokens.models import TokenListResponse


@dataclass(frozen=True)
class CacheEntry:
    """A cached listing and the clock reading taken when it was stored."""

    value: TokenListResponse
    fetched_at: float


class TokenCache:
    """Single-entry cache that expires its value after ``ttl_seconds``.

    The entry is overwritten on every ``set`` and is never invalidated other
    than by age. ``clock`` must be monotonic; tests pass a fake one.
    """

    def __init__(self, ttl_seconds: float = 30.0, *, clock: Callable[[], float] = time.monotonic) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: Optional[CacheEntry] = None

    @property
    def entry(self) -> Optional[CacheEntry]:
        return self._entry

    def get(self) -> Optional[TokenListResponse]:
        """Return the cached listing while it is younger than the TTL."""
        entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.fetched_at < self.ttl_seconds:
            return entry.value
        return None

    def set(self, value: TokenListResponse) -> CacheEntry:
        """Store ``value`` stamped with the current clock reading."""
        self._entry = CacheEntry(value=value, fetched_at=self._clock())
        return self._entry

    def age(self) -> Optional[float]:
        """Seconds since the entry was stored, or None when empty."""
        if self._entry is None:
            return None
        return self._clock() - self._entry.fetched_at
