"""Logging-based delegate for development environments."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from in_app_analytics.records import TrackedError, TrackedEvent

from .analytics_delegate import AnalyticsDelegate

__all__ = ["LoggingDelegate"]

logger = logging.getLogger(__name__)


class LoggingDelegate(AnalyticsDelegate):
    """Forward records by writing structured log entries."""

    def __init__(
        self,
        name: str = "logging",
        logger_name: Optional[str] = None,
        log_level: int = logging.INFO,
        failure_log_level: int = logging.WARNING,
        error_log_level: int = logging.ERROR,
    ) -> None:
        """Initialise the logging delegate with the desired log levels."""
        super().__init__(name=name)
        self.log_level = log_level
        self.failure_log_level = failure_log_level
        self.error_log_level = error_log_level
        self.records_logger = logging.getLogger(logger_name or __name__)
        logger.debug(
            "Created logging delegate '%s' with levels %s/%s/%s",
            name,
            log_level,
            failure_log_level,
            error_log_level,
        )

    async def event(self, event: TrackedEvent) -> None:
        """Log a successful event."""
        self._write(self.log_level, "EVENT", event.to_map())

    async def failure(self, event: TrackedEvent) -> None:
        """Log a failed report."""
        self._write(self.failure_log_level, "FAILURE", event.to_map())

    async def error(self, error: TrackedError) -> None:
        """Log a captured error."""
        self._write(self.error_log_level, "ERROR", error.to_map())

    async def log(self, event: TrackedEvent) -> None:
        """Log a successful call or log entry."""
        self._write(self.log_level, "LOG", event.to_map())

    def _write(self, level: int, channel: str, record: Dict[str, Any]) -> None:
        """Emit one record as a JSON document on the configured logger."""
        if not record:
            logger.debug("Skipping empty %s record", channel.lower())
            return
        self.records_logger.log(level, "%s: %s", channel, json.dumps(record, ensure_ascii=False, sort_keys=True))
