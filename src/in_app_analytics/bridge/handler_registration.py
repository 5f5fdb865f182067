"""Registration entry kept by the host error bridge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class HandlerRegistration:
    """One installed handler and the host handler it chains to.

    Attributes:
        kind: Error source the handler is registered for (``ui``/``platform``).
        analytics: Dispatch core the handler reports to.
        handler: Composed callable: report, then run ``previous``.
        previous: Handler the host supplied before initialization, if any.
    """

    kind: str
    analytics: Any
    handler: Callable[..., Any]
    previous: Optional[Callable[..., Any]] = None


__all__ = ["HandlerRegistration"]
