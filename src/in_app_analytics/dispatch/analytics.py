"""Dispatch core coordinating classification, forwarding and local logging."""

from __future__ import annotations

import contextlib
import inspect
import logging
from typing import (
    Any,
    AsyncIterable,
    AsyncIterator,
    Awaitable,
    Callable,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    TypeVar,
    Union,
)

from in_app_analytics.records import TrackedError, TrackedEvent

from .analytics_config import AnalyticsConfig
from .call_kind import INTERNAL_FAILURE_SIGN, CallKind
from .log_sink import STATUS_REPORT_FAILED, AnalyticsLogSink
from .outcome import Outcome, capture, capture_async
from .scheduler import DelegateScheduler

logger = logging.getLogger(__name__)

T = TypeVar("T")

Record = Union[TrackedEvent, TrackedError]
StreamSource = Union[AsyncIterable[T], Iterable[T]]
StreamProducer = Callable[[], Union[StreamSource[T], Awaitable[StreamSource[T]]]]


def describe_failure(msg: Optional[str], error: BaseException) -> str:
    """Combine the caller's message with the text of ``error``."""

    text = str(error) or type(error).__name__
    return f"{msg}: {text}" if msg else text


class Analytics:
    """Report events, wrapped work and captured errors.

    Every public method is total from the caller's point of view: failures of
    the wrapped work are classified and reported, failures of the delegate are
    logged locally, and neither ever propagates. Value-producing operations
    return ``None`` when the work failed.

    Synchronous operations hand delegate forwarding to a
    :class:`DelegateScheduler`; asynchronous operations await it before
    returning.

    Args:
        config: Immutable configuration; a disabled one when omitted.
        scheduler: Scheduler used by synchronous operations.
    """

    def __init__(
        self,
        config: Optional[AnalyticsConfig] = None,
        *,
        scheduler: Optional[DelegateScheduler] = None,
    ) -> None:
        self._config = config if config is not None else AnalyticsConfig.disabled()
        self._sink = AnalyticsLogSink(self._config)
        self._scheduler = scheduler or DelegateScheduler()

    @property
    def config(self) -> AnalyticsConfig:
        return self._config

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def delegate(self) -> Any:
        return self._config.delegate

    # ------------------------------------------------------------------
    # Synchronous operations
    # ------------------------------------------------------------------

    def event(
        self,
        name: str,
        *,
        reason: Optional[str] = None,
        msg: Optional[str] = None,
        sign: Optional[str] = None,
        props: Optional[Mapping[str, Any]] = None,
        extra: Optional[Mapping[str, Any]] = None,
        status: bool = True,
    ) -> None:
        """Record an event whose outcome is given by ``status``."""

        kind = CallKind.EVENT
        with self._boundary(name):
            ok = bool(status)
            record = TrackedEvent.create(
                name,
                reason=reason,
                sign=kind.sign(ok, sign),
                msg=msg,
                props=props,
                extra=extra,
                platform=self._config.platform,
            )
            self._report_soon(record, kind, ok)

    def log(self, name: str, reason: str, *, msg: Optional[str] = None, status: bool = True) -> None:
        """Emit a free-form log entry; ``reason`` is required."""

        self._entry(CallKind.LOG, name, reason, msg, status)

    def warning(self, name: str, reason: str, *, msg: Optional[str] = None, status: bool = True) -> None:
        """Emit a free-form warning entry; ``reason`` is required."""

        self._entry(CallKind.WARNING, name, reason, msg, status)

    def call(
        self,
        fn: Callable[[], Any],
        *,
        name: str = CallKind.CALL.default_name,
        reason: Optional[str] = None,
        msg: Optional[str] = None,
    ) -> None:
        """Run ``fn`` and report whether it raised."""

        kind = CallKind.CALL
        outcome = capture(fn)
        with self._boundary(name):
            self._report_soon(self._build_event(kind, name, outcome, reason, msg), kind, outcome.ok, outcome.error)

    def execute(
        self,
        fn: Callable[[], T],
        *,
        name: str = CallKind.EXECUTE.default_name,
        reason: Optional[str] = None,
        msg: Optional[str] = None,
    ) -> Optional[T]:
        """Run ``fn``, report the outcome and return its value or ``None``."""

        kind = CallKind.EXECUTE
        outcome = capture(fn)
        with self._boundary(name):
            self._report_soon(self._build_event(kind, name, outcome, reason, msg), kind, outcome.ok, outcome.error)
        return outcome.value

    def error(self, report: TrackedError) -> None:
        """Forward a captured error through the failure path."""

        with self._boundary(self._error_name(report)):
            self._report_soon(report, CallKind.ERROR, False)

    # ------------------------------------------------------------------
    # Asynchronous operations
    # ------------------------------------------------------------------

    async def call_async(
        self,
        fn: Callable[[], Awaitable[Any]],
        *,
        name: str = CallKind.CALL_ASYNC.default_name,
        reason: Optional[str] = None,
        msg: Optional[str] = None,
    ) -> None:
        """Await ``fn()`` and report whether it raised."""

        kind = CallKind.CALL_ASYNC
        outcome = await capture_async(fn)
        with self._boundary(name):
            await self._report(self._build_event(kind, name, outcome, reason, msg), kind, outcome.ok, outcome.error)

    async def future(
        self,
        fn: Callable[[], Awaitable[T]],
        *,
        name: str = CallKind.FUTURE.default_name,
        reason: Optional[str] = None,
        msg: Optional[str] = None,
    ) -> Optional[T]:
        """Await ``fn()``, report the outcome and return its value or ``None``."""

        kind = CallKind.FUTURE
        outcome = await capture_async(fn)
        with self._boundary(name):
            await self._report(self._build_event(kind, name, outcome, reason, msg), kind, outcome.ok, outcome.error)
        return outcome.value

    async def stream(
        self,
        producer: StreamProducer[T],
        *,
        name: str = CallKind.STREAM.default_name,
        reason: Optional[str] = None,
        msg: Optional[str] = None,
    ) -> AsyncIterator[Optional[T]]:
        """Re-yield the elements of ``producer()`` and report the overall outcome.

        Elements pass through unchanged. When the producer or the iteration
        fails, the failure is reported, a single ``None`` is yielded in place
        of the error and the stream ends.
        """

        kind = CallKind.STREAM
        failure: Optional[Exception] = None
        try:
            source = producer()
            if inspect.isawaitable(source):
                source = await source
            if hasattr(source, "__aiter__"):
                async for item in source:  # type: ignore[union-attr]
                    yield item
            else:
                for item in source:  # type: ignore[union-attr]
                    yield item
        except Exception as error:  # noqa: BLE001 - classification boundary
            failure = error

        with self._boundary(name):
            ok = failure is None
            record = self._build_event(kind, name, None, reason, msg, ok=ok, error=failure)
            await self._report(record, kind, ok, failure)

        if failure is not None:
            yield None

    async def report_error(self, report: TrackedError) -> None:
        """Forward a captured error and wait for the delegate to accept it."""

        with self._boundary(self._error_name(report)):
            await self._report(report, CallKind.ERROR, False)

    async def flush(self) -> None:
        """Wait for forwarding scheduled by synchronous operations on this loop."""

        await self._scheduler.drain()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _entry(self, kind: CallKind, name: str, reason: str, msg: Optional[str], status: bool) -> None:
        with self._boundary(name):
            ok = bool(status)
            record = TrackedEvent.create(
                name,
                reason=reason,
                sign=kind.sign(ok),
                msg=msg,
                platform=self._config.platform,
            )
            self._report_soon(record, kind, ok)

    def _build_event(
        self,
        kind: CallKind,
        name: str,
        outcome: Optional[Outcome[Any]],
        reason: Optional[str],
        msg: Optional[str],
        *,
        ok: Optional[bool] = None,
        error: Optional[BaseException] = None,
    ) -> TrackedEvent:
        """Shape a wrapped-work outcome into a record."""

        if outcome is not None:
            ok = outcome.ok
            error = outcome.error
        ok = bool(ok)
        extra = None
        if error is not None:
            msg = describe_failure(msg, error)
            extra = {"error_type": type(error).__name__}
        return TrackedEvent.create(
            name,
            reason=reason,
            sign=kind.sign(ok),
            msg=msg,
            extra=extra,
            platform=self._config.platform,
        )

    def _report_soon(
        self,
        record: Record,
        kind: CallKind,
        ok: bool,
        error: Optional[BaseException] = None,
    ) -> None:
        """Report from a synchronous caller without waiting for the delegate."""

        if not self._config.forwarding:
            self._log_outcome(record, ok, error)
            return
        coro = self._report(record, kind, ok, error)
        try:
            self._scheduler.submit(coro)
        except Exception as schedule_error:  # noqa: BLE001 - e.g. no usable loop at shutdown
            coro.close()
            self._sink.internal_failure(self._record_name(record), schedule_error, status=STATUS_REPORT_FAILED)

    async def _report(
        self,
        record: Record,
        kind: CallKind,
        ok: bool,
        error: Optional[BaseException] = None,
    ) -> None:
        """Forward ``record`` to the delegate, then log the outcome locally."""

        if self._config.forwarding:
            try:
                await self._forward(record, kind, ok)
            except Exception as delegate_error:  # noqa: BLE001 - delegate declined
                self._log_delegate_failure(record, delegate_error)
                return
        self._log_outcome(record, ok, error)

    async def _forward(self, record: Record, kind: CallKind, ok: bool) -> None:
        delegate = self._config.delegate
        if delegate is None:
            return
        if isinstance(record, TrackedError):
            await delegate.error(record)
        elif not ok:
            await delegate.failure(record)
        elif kind.uses_event_channel:
            await delegate.event(record)
        else:
            await delegate.log(record)

    def _log_outcome(self, record: Record, ok: bool, error: Optional[BaseException]) -> None:
        name = self._record_name(record)
        reason = record.reason if isinstance(record, TrackedEvent) else None
        if ok:
            self._sink.success(name, sign=record.sign, reason=reason, msg=record.msg)
        else:
            self._sink.failure(name, sign=record.sign, reason=reason, msg=record.msg, error=error)

    def _log_delegate_failure(self, record: Record, delegate_error: BaseException) -> None:
        sign = INTERNAL_FAILURE_SIGN
        if isinstance(record, TrackedError) and not self._config.escalate_error_delegate_failures:
            sign = record.sign or INTERNAL_FAILURE_SIGN
        reason = record.reason if isinstance(record, TrackedEvent) else None
        self._sink.internal_failure(self._record_name(record), delegate_error, sign=sign, reason=reason)

    @contextlib.contextmanager
    def _boundary(self, name: str) -> Iterator[None]:
        """Log and absorb failures of the reporting pipeline itself."""

        try:
            yield
        except Exception as error:  # noqa: BLE001 - public operations never raise
            logger.debug("Reporting pipeline failed for %s", name, exc_info=True)
            self._sink.internal_failure(name, error, status=STATUS_REPORT_FAILED)

    @staticmethod
    def _error_name(report: TrackedError) -> str:
        return report.type.value if report.type is not None else CallKind.ERROR.default_name

    def _record_name(self, record: Record) -> str:
        if isinstance(record, TrackedError):
            return self._error_name(record)
        return record.name


__all__ = ["Analytics", "describe_failure"]
