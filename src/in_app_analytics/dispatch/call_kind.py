"""Call kinds recognised by the dispatch core and their status glyphs.

Each reporting operation has a default event name and a pair of glyphs that
tag its success and failure log lines. The glyphs only need to be distinct per
kind; backends should not rely on their exact values.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

INTERNAL_FAILURE_SIGN = "💣"


class CallKind(Enum):
    """Reporting operation kinds.

    Attributes:
        EVENT: Explicit event with a caller-given status.
        CALL: Synchronous unit of work.
        CALL_ASYNC: Asynchronous unit of work.
        EXECUTE: Synchronous value-producing work.
        FUTURE: Asynchronous value-producing work.
        STREAM: Sequence-producing work.
        LOG: Free-form log entry.
        WARNING: Free-form warning entry.
        ERROR: Captured error forwarded from the host.
    """

    EVENT = ("event", "✅", "❌")
    CALL = ("call", "👌", "⚠️")
    CALL_ASYNC = ("call_async", "👌", "⚠️")
    EXECUTE = ("execute", "🎯", "🚫")
    FUTURE = ("future", "🎯", "🚫")
    STREAM = ("stream", "🌊", "🚧")
    LOG = ("log", "📝", "📛")
    WARNING = ("warning", "🔔", "🚩")
    ERROR = ("error", "🚨", "🚨")

    def __init__(self, default_name: str, success_sign: str, failure_sign: str) -> None:
        self.default_name = default_name
        self.success_sign = success_sign
        self.failure_sign = failure_sign

    def sign(self, ok: bool, override: Optional[str] = None) -> str:
        """Return ``override`` when given, else the glyph for the outcome."""

        if override:
            return override
        return self.success_sign if ok else self.failure_sign

    @property
    def uses_event_channel(self) -> bool:
        """Whether successes go to the delegate's ``event`` rather than ``log``."""

        return self is CallKind.EVENT


__all__ = ["CallKind", "INTERNAL_FAILURE_SIGN"]
