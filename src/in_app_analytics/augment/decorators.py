"""Decorator that reports every call of the wrapped function."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Optional, TypeVar

from in_app_analytics.registry import get_analytics

F = TypeVar("F", bound=Callable[..., Any])


def tracked(
    name: Optional[str] = None,
    *,
    reason: Optional[str] = None,
    msg: Optional[str] = None,
) -> Callable[[F], F]:
    """Report each call of the decorated function.

    Coroutine functions run through :meth:`Analytics.future`, everything else
    through :meth:`Analytics.execute`. The wrapper returns the function's
    result, or ``None`` when it raised. The event name defaults to the
    function's qualified name.

    Example:
        >>> @tracked("checkout", reason="cart")
        ... def checkout(cart):
        ...     return submit(cart)
    """

    def decorator(func: F) -> F:
        event_name = name or func.__qualname__

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await get_analytics().future(
                    lambda: func(*args, **kwargs), name=event_name, reason=reason, msg=msg
                )

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return get_analytics().execute(
                lambda: func(*args, **kwargs), name=event_name, reason=reason, msg=msg
            )

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["tracked"]
