"""Abstract base class for reporting backends."""

from __future__ import annotations

import abc

from in_app_analytics.records import TrackedError, TrackedEvent


class AnalyticsDelegate(abc.ABC):
    """Contract every reporting backend implements.

    The dispatch core holds a reference to a delegate and calls one of the
    four coroutines per report. Implementations may raise; the core treats a
    raised exception as "the delegate declined this report" and never lets it
    reach application code.

    Args:
        name: Optional friendly identifier for logging and debugging.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or self.__class__.__name__

    @abc.abstractmethod
    async def event(self, event: TrackedEvent) -> None:
        """Accept a successful event report."""

    @abc.abstractmethod
    async def failure(self, event: TrackedEvent) -> None:
        """Accept a failed event, call or log report."""

    @abc.abstractmethod
    async def error(self, error: TrackedError) -> None:
        """Accept a captured error."""

    @abc.abstractmethod
    async def log(self, event: TrackedEvent) -> None:
        """Accept a successful wrapped-call or log-entry report."""


__all__ = ["AnalyticsDelegate"]
