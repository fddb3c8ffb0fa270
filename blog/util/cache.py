"""In-process cache with a time-to-live."""

import time
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Iterable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class TTLCache(Generic[K, V]):
    """Small mapping whose entries expire after a fixed time.

    There is no invalidation hook: an entry is served until it ages out or is
    evicted because the cache is full (oldest insert first). Not thread-safe;
    the API runs on a single event loop.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize cache.

        Args:
            ttl_seconds: How long an entry stays valid
            max_entries: Maximum number of entries kept
            clock: Monotonic time source (overridable in tests)
        """
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[K, tuple[float, V]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get_many(self, keys: Iterable[K]) -> dict[K, V]:
        """Return the live entries for ``keys``, dropping expired ones."""
        now = self._clock()
        found: dict[K, V] = {}

        for key in keys:
            entry = self._entries.get(key)
            if entry is None:
                continue
            expires_at, value = entry
            if expires_at <= now:
                del self._entries[key]
                continue
            found[key] = value

        return found

    def set_many(self, values: dict[K, V]) -> None:
        """Store ``values``, each expiring ``ttl_seconds`` from now."""
        expires_at = self._clock() + self.ttl_seconds

        for key, value in values.items():
            self._entries.pop(key, None)
            self._entries[key] = (expires_at, value)

        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()
