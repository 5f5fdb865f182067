"""Module-level reporting functions bound to the process-wide instance.

Each function looks the instance up at call time, so it always reports
through whatever the latest ``init`` installed.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Awaitable, Callable, Mapping, Optional, TypeVar

from in_app_analytics.bridge import UiErrorDetails, host_error_bridge
from in_app_analytics.dispatch import CallKind
from in_app_analytics.dispatch.analytics import StreamProducer
from in_app_analytics.records.tracked_error import StackSource
from in_app_analytics.registry import get_analytics

T = TypeVar("T")


def event(
    name: str,
    *,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
    sign: Optional[str] = None,
    props: Optional[Mapping[str, Any]] = None,
    extra: Optional[Mapping[str, Any]] = None,
    status: bool = True,
) -> None:
    get_analytics().event(name, reason=reason, msg=msg, sign=sign, props=props, extra=extra, status=status)


def log(name: str, reason: str, *, msg: Optional[str] = None, status: bool = True) -> None:
    get_analytics().log(name, reason, msg=msg, status=status)


def warning(name: str, reason: str, *, msg: Optional[str] = None, status: bool = True) -> None:
    get_analytics().warning(name, reason, msg=msg, status=status)


def call(
    fn: Callable[[], Any],
    *,
    name: str = CallKind.CALL.default_name,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
) -> None:
    get_analytics().call(fn, name=name, reason=reason, msg=msg)


def execute(
    fn: Callable[[], T],
    *,
    name: str = CallKind.EXECUTE.default_name,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
) -> Optional[T]:
    return get_analytics().execute(fn, name=name, reason=reason, msg=msg)


async def call_async(
    fn: Callable[[], Awaitable[Any]],
    *,
    name: str = CallKind.CALL_ASYNC.default_name,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
) -> None:
    await get_analytics().call_async(fn, name=name, reason=reason, msg=msg)


async def future(
    fn: Callable[[], Awaitable[T]],
    *,
    name: str = CallKind.FUTURE.default_name,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
) -> Optional[T]:
    return await get_analytics().future(fn, name=name, reason=reason, msg=msg)


def stream(
    producer: StreamProducer[T],
    *,
    name: str = CallKind.STREAM.default_name,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
) -> AsyncIterator[Optional[T]]:
    return get_analytics().stream(producer, name=name, reason=reason, msg=msg)


def report_ui_error(details: UiErrorDetails) -> None:
    """Hand an error caught by the UI layer to the registered bridge handler."""

    host_error_bridge.handle_ui_error(details)


def report_platform_error(exception: BaseException, stack: StackSource = None) -> bool:
    """Hand an uncaught platform error to the registered bridge handler."""

    return host_error_bridge.handle_platform_error(exception, stack)


async def flush() -> None:
    """Wait for forwarding scheduled by synchronous reports on this loop."""

    await get_analytics().flush()


__all__ = [
    "call",
    "call_async",
    "event",
    "execute",
    "flush",
    "future",
    "log",
    "report_platform_error",
    "report_ui_error",
    "stream",
    "warning",
]
