"""Local report lines emitted next to delegate forwarding."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from .analytics_config import AnalyticsConfig
from .call_kind import INTERNAL_FAILURE_SIGN

STATUS_DONE = "done"
STATUS_FAILED = "failed"
STATUS_DELEGATE_FAILED = "delegate failed"
STATUS_REPORT_FAILED = "report failed"


def format_line(
    name: str,
    *,
    sign: Optional[str] = None,
    reason: Optional[str] = None,
    status: Optional[str] = None,
    msg: Optional[str] = None,
) -> str:
    """Build ``"{sign} {name}[{reason}] => {status}:{msg}"``, skipping unset parts."""

    line = f"{sign} {name}" if sign else name
    if reason:
        line = f"{line}[{reason}]"
    if status:
        line = f"{line} => {status}"
    if msg:
        line = f"{line}:{msg}"
    return line


class AnalyticsLogSink:
    """Write report lines to the logger named after the configuration.

    Success lines need both ``show_logs`` and ``show_success_logs``; every
    other line needs ``show_logs``. Levels default to ``INFO``/``ERROR``.
    Sequence numbers and the optional timestamp travel as log-record
    attributes (``analytics_sequence_number``, ``analytics_time``) so
    formatters and handlers can use them.
    """

    def __init__(self, config: AnalyticsConfig) -> None:
        self._config = config
        self._logger = logging.getLogger(config.name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def success(
        self,
        name: str,
        *,
        sign: Optional[str] = None,
        reason: Optional[str] = None,
        msg: Optional[str] = None,
    ) -> None:
        config = self._config
        if not (config.show_logs and config.show_success_logs):
            return
        self._emit(
            format_line(name, sign=sign, reason=reason, status=STATUS_DONE, msg=msg),
            level=config.success_log_level if config.success_log_level is not None else logging.INFO,
            sequence_number=config.success_sequence_number,
        )

    def failure(
        self,
        name: str,
        *,
        sign: Optional[str] = None,
        reason: Optional[str] = None,
        msg: Optional[str] = None,
        error: Optional[BaseException] = None,
        status: str = STATUS_FAILED,
    ) -> None:
        config = self._config
        if not config.show_logs:
            return
        self._emit(
            format_line(name, sign=sign, reason=reason, status=status, msg=msg),
            level=config.error_log_level if config.error_log_level is not None else logging.ERROR,
            sequence_number=config.error_sequence_number,
            error=error,
        )

    def internal_failure(
        self,
        name: str,
        error: BaseException,
        *,
        sign: str = INTERNAL_FAILURE_SIGN,
        reason: Optional[str] = None,
        status: str = STATUS_DELEGATE_FAILED,
    ) -> None:
        """Report a failure of the reporting pipeline itself.

        ``status`` is ``delegate failed`` when the delegate raised and
        ``report failed`` when the record could not be built or scheduled.
        """

        self.failure(
            name,
            sign=sign,
            reason=reason,
            msg=str(error) or type(error).__name__,
            error=error,
            status=status,
        )

    def _emit(
        self,
        line: str,
        *,
        level: int,
        sequence_number: Optional[int],
        error: Optional[BaseException] = None,
    ) -> None:
        config = self._config
        exc_info = None
        if error is not None and config.log_throw_enabled:
            exc_info = (type(error), error, error.__traceback__)
        try:
            self._logger.log(
                level,
                line,
                exc_info=exc_info,
                extra={
                    "analytics_sequence_number": sequence_number,
                    "analytics_time": datetime.now() if config.show_log_time else None,
                },
            )
        except Exception:  # noqa: BLE001 - misbehaving handlers must not reach callers
            logging.getLogger(__name__).debug("Failed to emit report line %r", line, exc_info=True)


__all__ = [
    "AnalyticsLogSink",
    "STATUS_DELEGATE_FAILED",
    "STATUS_DONE",
    "STATUS_FAILED",
    "STATUS_REPORT_FAILED",
    "format_line",
]
