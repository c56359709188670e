"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
import weakref
from dataclasses import dataclass, field


@dataclass
class _Entry:
    val: bytes
    created_at: float = field(default_factory=time.monotonic)


def _reap_loop(ref: "weakref.ref[Cache]", interval: float, stop: threading.Event) -> None:
    while not stop.wait(interval):
        cache = ref()
        if cache is None:
            return
        cache.reap()
        del cache


class Cache:
    """Maps keys to byte strings; a background thread drops stale entries.

    Every ``interval`` seconds, entries at least ``interval`` seconds old
    are removed.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._lock = threading.Lock()
        self._data: dict[str, _Entry] = {}
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=_reap_loop,
            args=(weakref.ref(self), self.interval, self._stop),
            name="cache-reaper",
            daemon=True,
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._data[key] = _Entry(bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or None if absent."""
        with self._lock:
            entry = self._data.get(key)
        return None if entry is None else entry.val

    def reap(self) -> None:
        """Remove every entry that is at least ``interval`` seconds old."""
        now = time.monotonic()
        with self._lock:
            stale = [k for k, e in self._data.items() if now - e.created_at >= self.interval]
            for key in stale:
                del self._data[key]

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._reaper.is_alive() and self._reaper is not threading.current_thread():
            self._reaper.join()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __enter__(self) -> "Cache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()