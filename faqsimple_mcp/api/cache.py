"""
In-memory response cache with a fixed lifetime
"""

import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    captured_at: float

    def is_fresh(self, now: float, lifetime: float) -> bool:
        return now - self.captured_at < lifetime


class ResponseCache(Generic[T]):
    """
    Maps a request signature to the last response for it.

    Stale entries are ignored by `get` but kept until overwritten or cleared.
    Keys are opaque; callers keep their key spaces disjoint.
    """

    def __init__(self, lifetime_ms: int = 300_000, clock: Callable[[], float] = time.monotonic) -> None:
        self.lifetime: float = lifetime_ms / 1000
        self._clock: Callable[[], float] = clock
        self._entries: dict[str, CacheEntry[T]] = {}

    def get(self, key: str) -> T | None:
        entry: CacheEntry[T] | None = self._entries.get(key)
        if entry is None or not entry.is_fresh(self._clock(), self.lifetime):
            return None
        return entry.value

    def put(self, key: str, value: T) -> None:
        self._entries[key] = CacheEntry(value=value, captured_at=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
