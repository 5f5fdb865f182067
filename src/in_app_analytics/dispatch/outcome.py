"""Two-case result produced by running wrapped work inside a fault boundary.

The dispatch core classifies :class:`Success` and :class:`Failure` values
instead of reacting to exceptions as they propagate. Only :class:`Exception`
subclasses are captured; cancellation and interpreter-exit signals keep
propagating.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Work completed and produced ``value``."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Failure:
    """Work raised ``error``."""

    error: Exception

    @property
    def ok(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None


Outcome = Union[Success[T], Failure]


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> "Outcome[T]":
    """Run ``fn`` synchronously and return its outcome."""

    try:
        return Success(fn(*args, **kwargs))
    except Exception as error:  # noqa: BLE001 - classification boundary
        return Failure(error)


async def capture_async(
    fn: Callable[..., Union[Awaitable[T], T]],
    *args: Any,
    **kwargs: Any,
) -> "Outcome[T]":
    """Run ``fn``, awaiting its result when it is awaitable, and return its outcome."""

    try:
        result = fn(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        return Success(result)
    except Exception as error:  # noqa: BLE001 - classification boundary
        return Failure(error)


__all__ = ["Failure", "Outcome", "Success", "capture", "capture_async"]
