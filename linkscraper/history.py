"""Recent-history tracker — the last few distinct URLs visited."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


class VisitHistory:
    """Bounded list of distinct URLs, oldest first.

    Revisiting a URL moves it to the most-recent position instead of adding
    a second entry. Every read and write goes through one lock; readers get a
    copy, newest first.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("history capacity must be at least 1")
        self._capacity = capacity
        self._urls: list[str] = []
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, url: str) -> None:
        with self._lock:
            if url in self._urls:
                self._urls.remove(url)
                self._urls.append(url)
                return
            self._urls.append(url)
            if len(self._urls) > self._capacity:
                evicted = self._urls.pop(0)
                logger.debug("history evicted", extra={"url": evicted})

    def snapshot(self) -> list[str]:
        """Return the recorded URLs, most recent first."""
        with self._lock:
            return self._urls[::-1]

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)
