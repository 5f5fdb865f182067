"""Immutable record describing one captured failure."""

from __future__ import annotations

import traceback
from dataclasses import dataclass, fields
from datetime import datetime
from types import TracebackType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from .error_type import ErrorType
from .platform import current_platform

if TYPE_CHECKING:
    from in_app_analytics.bridge.ui_error_details import UiErrorDetails

ASSERTION_SIGN = "🧨"
EXCEPTION_SIGN = "🚨"
UNKNOWN_SIGN = "💥"
PLATFORM_SIGN = "🛑"

StackSource = Union[TracebackType, str, None]


@dataclass(frozen=True)
class TrackedError:
    """A captured error as handed to delegates.

    Attributes:
        time: ISO-8601 timestamp of the capture.
        platform: Opaque host platform tag.
        msg: Description of the exception.
        sign: Short status glyph.
        details: Extended description or stack trace text.
        type: Origin classification.
    """

    time: Optional[str] = None
    platform: Optional[str] = None
    msg: Optional[str] = None
    sign: Optional[str] = None
    details: Optional[str] = None
    type: Optional[ErrorType] = None

    @classmethod
    def empty(cls) -> "TrackedError":
        """Return the canonical "nothing to report" error."""

        return cls()

    @classmethod
    def from_ui_error(cls, details: "UiErrorDetails", *, platform: Optional[str] = None) -> "TrackedError":
        """Map an error caught by the UI/framework layer.

        Failed assertions are tagged ``assertion``; everything else is tagged
        ``widget``. The sign distinguishes assertions, real exceptions and
        arbitrary objects reported as errors.
        """

        exception = details.exception
        if isinstance(exception, AssertionError):
            sign = ASSERTION_SIGN
            error_type = ErrorType.ASSERTION
        else:
            sign = EXCEPTION_SIGN if isinstance(exception, BaseException) else UNKNOWN_SIGN
            error_type = ErrorType.WIDGET

        return cls(
            time=datetime.now().isoformat(),
            platform=platform if platform is not None else current_platform(),
            msg=str(exception),
            sign=sign,
            details=details.exception_as_string(),
            type=error_type,
        )

    @classmethod
    def from_platform_error(
        cls,
        exception: BaseException,
        stack: StackSource = None,
        *,
        platform: Optional[str] = None,
    ) -> "TrackedError":
        """Map an uncaught error surfaced by the platform hook."""

        return cls(
            time=datetime.now().isoformat(),
            platform=platform if platform is not None else current_platform(),
            msg=str(exception),
            sign=PLATFORM_SIGN,
            details=format_stack(stack if stack is not None else exception.__traceback__),
            type=ErrorType.PLATFORM,
        )

    @classmethod
    def parse(cls, source: Any) -> "TrackedError":
        """Rebuild an error from its generic mapping form.

        Wrongly typed fields are left unset; malformed input yields
        :meth:`empty`.
        """

        if not isinstance(source, Mapping) or not source:
            return cls.empty()

        def text(key: str) -> Optional[str]:
            value = source.get(key)
            return value if isinstance(value, str) else None

        return cls(
            time=text("time"),
            platform=text("platform"),
            msg=text("msg"),
            sign=text("sign"),
            details=text("details"),
            type=ErrorType.parse(source.get("type")),
        )

    @property
    def is_empty(self) -> bool:
        """Return whether every field is unset."""

        return all(getattr(self, field.name) is None for field in fields(self))

    def to_map(self) -> dict[str, Any]:
        """Return the generic mapping form, omitting unset and empty fields."""

        data: dict[str, Any] = {}
        for key in ("time", "platform", "msg", "sign"):
            value = getattr(self, key)
            if value:
                data[key] = value
        if self.type is not None:
            data["type"] = self.type.value
        if self.details:
            data["details"] = self.details
        return data

    def __str__(self) -> str:
        label = self.type.value if self.type is not None else "error"
        return f"TrackedError({self.sign} {label}: {self.msg} - {self.details})"


def format_stack(stack: StackSource) -> Optional[str]:
    """Render a traceback object (or pass text through) for ``details``."""

    if stack is None:
        return None
    if isinstance(stack, str):
        return stack or None
    return "".join(traceback.format_tb(stack)) or None


__all__ = [
    "ASSERTION_SIGN",
    "EXCEPTION_SIGN",
    "PLATFORM_SIGN",
    "TrackedError",
    "UNKNOWN_SIGN",
    "format_stack",
]
