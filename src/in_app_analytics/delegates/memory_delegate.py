"""In-process delegate that keeps the most recent records in memory."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Union

from in_app_analytics.records import TrackedError, TrackedEvent

from .analytics_delegate import AnalyticsDelegate

__all__ = ["MemoryDelegate"]

logger = logging.getLogger(__name__)

Record = Union[TrackedEvent, TrackedError]

CHANNELS = ("event", "failure", "error", "log")


class MemoryDelegate(AnalyticsDelegate):
    """Buffer reports per channel in bounded deques.

    Useful for hosts that display recent activity and for tests that need to
    inspect what the dispatch core forwarded.
    """

    def __init__(self, name: str = "memory", max_entries: int = 1000) -> None:
        super().__init__(name=name)
        self.max_entries = max(1, int(max_entries))
        self._lock = threading.Lock()
        self._records: Dict[str, Deque[Record]] = {
            channel: deque(maxlen=self.max_entries) for channel in CHANNELS
        }

    @property
    def events(self) -> List[TrackedEvent]:
        return self.records("event")  # type: ignore[return-value]

    @property
    def failures(self) -> List[TrackedEvent]:
        return self.records("failure")  # type: ignore[return-value]

    @property
    def errors(self) -> List[TrackedError]:
        return self.records("error")  # type: ignore[return-value]

    @property
    def logs(self) -> List[TrackedEvent]:
        return self.records("log")  # type: ignore[return-value]

    def records(self, channel: str) -> List[Record]:
        """Return a snapshot of the records buffered for ``channel``."""

        if channel not in self._records:
            raise KeyError(f"Unknown delegate channel: {channel}")
        with self._lock:
            return list(self._records[channel])

    def clear(self) -> None:
        """Drop every buffered record."""

        with self._lock:
            for buffer in self._records.values():
                buffer.clear()

    async def event(self, event: TrackedEvent) -> None:
        self._append("event", event)

    async def failure(self, event: TrackedEvent) -> None:
        self._append("failure", event)

    async def error(self, error: TrackedError) -> None:
        self._append("error", error)

    async def log(self, event: TrackedEvent) -> None:
        self._append("log", event)

    def _append(self, channel: str, record: Record) -> None:
        with self._lock:
            self._records[channel].append(record)
        logger.debug("Buffered %s record in '%s'", channel, self.name)
