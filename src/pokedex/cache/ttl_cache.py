"""In-memory TTL cache with a background sweep.

Every entry records the (monotonic) time it was stored.  An entry is
*logically* expired once it is older than the TTL: :meth:`TTLCache.get`
refuses to return it from that moment on.  *Physical* removal is the job of
a reaper thread that wakes up every ``ttl`` seconds and drops every entry
older than ``now - ttl``.  Both paths share :func:`is_expired` so the two
checks can never drift apart.

Each :class:`TTLCache` owns its reaper thread and stop event; call
:meth:`TTLCache.stop` (or use the cache as a context manager) to shut the
thread down.

See Also:
    :class:`~pokedex.client.pokeapi.PokeAPIClient` -- the cache-aside
    client that keys this cache by request URL.
"""

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

V = TypeVar("V")


def is_expired(created_at: float, ttl: float, now: float) -> bool:
    """Return ``True`` when an entry created at *created_at* is older than *ttl*."""
    return now - created_at > ttl


@dataclass
class CacheEntry(Generic[V]):
    """A stored value and the clock reading taken when it was stored."""

    created_at: float
    value: V


class TTLCache(Generic[V]):
    """Thread-safe string-keyed cache whose entries expire after ``ttl_seconds``.

    The reaper thread starts in the constructor.  A single lock guards the
    entry map, which is enough for the one foreground caller plus the
    reaper.

    Args:
        ttl_seconds: Maximum age of a valid entry, also used as the sweep
            interval.  Must be positive.
        clock: Monotonic time source, injectable for tests.

    Example::

        with TTLCache[str](300) as cache:
            cache.put("https://pokeapi.co/api/v2/pokemon/pikachu", "...")
            cache.get("https://pokeapi.co/api/v2/pokemon/pikachu")

    Raises:
        ValueError: If *ttl_seconds* is zero, negative, infinite or NaN.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not math.isfinite(ttl_seconds) or ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive and finite, got {ttl_seconds!r}")
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._entries: dict[str, CacheEntry[V]] = {}
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._reaper: Optional[threading.Thread] = threading.Thread(
            target=self._reap_loop,
            name="ttl-cache-reaper",
            daemon=True,
        )
        self._reaper.start()

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> TTLCache[V]:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    @property
    def ttl(self) -> float:
        """The configured time-to-live in seconds."""
        return self._ttl

    @property
    def running(self) -> bool:
        """Whether the reaper thread is still alive."""
        return self._reaper is not None and self._reaper.is_alive()

    def put(self, key: str, value: V) -> None:
        """Insert or overwrite *key*, resetting its creation time."""
        entry = CacheEntry(created_at=self._clock(), value=value)
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> Optional[V]:
        """Return the value for *key*, or ``None`` if missing or expired.

        An expired entry is left in place for the reaper to remove.
        """
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if is_expired(entry.created_at, self._ttl, self._clock()):
            return None
        return entry.value

    def reap(self) -> int:
        """Remove every expired entry and return how many were removed."""
        now = self._clock()
        with self._lock:
            stale = [
                key
                for key, entry in self._entries.items()
                if is_expired(entry.created_at, self._ttl, now)
            ]
            for key in stale:
                del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()

    def stop(self) -> None:
        """Stop the reaper thread.  Safe to call any number of times."""
        self._stop_event.set()
        reaper, self._reaper = self._reaper, None
        if reaper is not None and reaper is not threading.current_thread():
            reaper.join()

    def stats(self) -> dict[str, Any]:
        """Return ``size`` (stored entries), ``ttl_seconds`` and ``running``."""
        return {
            "size": len(self),
            "ttl_seconds": self._ttl,
            "running": self.running,
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        # Physical presence only; logical expiry is ignored here.
        with self._lock:
            return key in self._entries

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _reap_loop(self) -> None:
        while not self._stop_event.wait(self._ttl):
            self.reap()
