"""Wrap existing awaitables and streams in analytics reporting."""

from __future__ import annotations

from typing import AsyncIterable, AsyncIterator, Awaitable, Iterable, Optional, TypeVar, Union

from in_app_analytics.dispatch import CallKind
from in_app_analytics.registry import get_analytics

T = TypeVar("T")


async def track_future(
    awaitable: Awaitable[T],
    *,
    name: Optional[str] = None,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
) -> Optional[T]:
    """Await ``awaitable`` through :meth:`Analytics.future`.

    Returns the awaited value, or ``None`` when it raised.
    """

    async def _await() -> T:
        return await awaitable

    return await get_analytics().future(
        _await,
        name=name or CallKind.FUTURE.default_name,
        reason=reason,
        msg=msg,
    )


def track_stream(
    source: Union[AsyncIterable[T], Iterable[T]],
    *,
    name: Optional[str] = None,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
) -> AsyncIterator[Optional[T]]:
    """Re-yield ``source`` through :meth:`Analytics.stream`."""

    return get_analytics().stream(
        lambda: source,
        name=name or CallKind.STREAM.default_name,
        reason=reason,
        msg=msg,
    )


__all__ = ["track_future", "track_stream"]
