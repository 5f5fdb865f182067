"""Composite delegate that fans records out to multiple delegates."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from in_app_analytics.exceptions import DelegateError
from in_app_analytics.records import TrackedError, TrackedEvent

from .analytics_delegate import AnalyticsDelegate

__all__ = ["CompositeDelegate"]

logger = logging.getLogger(__name__)


class CompositeDelegate(AnalyticsDelegate):
    """Forward every record to a collection of sub-delegates.

    Every sub-delegate is tried even when an earlier one fails; failures are
    collected and raised together as one :class:`DelegateError`.
    """

    def __init__(
        self,
        name: str = "composite",
        delegates: Iterable[AnalyticsDelegate] | None = None,
    ) -> None:
        """Initialise the composite delegate with optional sub-delegates."""
        super().__init__(name=name)
        self.delegates: List[AnalyticsDelegate] = list(delegates or [])
        logger.info(
            "Created composite delegate with %s sub-delegates: %s",
            len(self.delegates),
            [delegate.name for delegate in self.delegates],
        )

    def add_delegate(self, delegate: AnalyticsDelegate) -> None:
        """Append a delegate to the composite at runtime."""
        self.delegates.append(delegate)
        logger.debug(
            "Added %s '%s' to composite delegate",
            delegate.__class__.__name__,
            delegate.name,
        )

    async def event(self, event: TrackedEvent) -> None:
        await self._fan_out("event", event)

    async def failure(self, event: TrackedEvent) -> None:
        await self._fan_out("failure", event)

    async def error(self, error: TrackedError) -> None:
        await self._fan_out("error", error)

    async def log(self, event: TrackedEvent) -> None:
        await self._fan_out("log", event)

    async def _fan_out(self, operation: str, record: Any) -> None:
        """Propagate ``record`` to every configured delegate."""
        failures: Dict[str, BaseException] = {}
        for delegate in self.delegates:
            try:
                await getattr(delegate, operation)(record)
            except Exception as exc:
                failures[delegate.name] = exc
                logger.error("Sub-delegate %s failed on %s: %s", delegate.name, operation, exc)

        if failures:
            raise DelegateError(operation, failures)

        logger.debug("Forwarded %s record to %s sub-delegates", operation, len(self.delegates))
