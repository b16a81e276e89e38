"""A bounded channel for printing messages while a line is being edited."""

from __future__ import annotations

import queue
from typing import Generic, TypeVar

T = TypeVar("T")

EXTERNAL_PRINTER_DEFAULT_CAPACITY = 20


class ExternalPrinter(Generic[T]):
    """Holds lines sent from elsewhere, printed above the line being edited."""

    def __init__(self, max_cap: int = EXTERNAL_PRINTER_DEFAULT_CAPACITY) -> None:
        if max_cap < 1:
            raise ValueError(f"capacity must be at least 1, got {max_cap}")
        self.max_cap = max_cap
        self._queue: queue.Queue[T] = queue.Queue(maxsize=max_cap)

    def sender(self) -> queue.Queue[T]:
        """The channel to send lines into from other threads; ``put`` blocks when full."""
        return self._queue

    def receiver(self) -> queue.Queue[T]:
        """The channel lines are received from."""
        return self._queue

    def print(self, line: T) -> None:
        """Send a line; blocks while the printer is at capacity."""
        self._queue.put(line)

    def get_line(self) -> T | None:
        """The next line if there is one, without blocking."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None