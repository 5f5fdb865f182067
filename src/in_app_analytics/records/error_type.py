"""Origin classification for captured errors."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorType(str, Enum):
    """Where a :class:`TrackedError` came from.

    Attributes:
        ASSERTION: A failed ``assert`` raised inside UI/framework code.
        WIDGET: Any other UI/framework-level error.
        PLATFORM: An uncaught error surfaced by the platform hook.
    """

    ASSERTION = "assertion"
    WIDGET = "widget"
    PLATFORM = "platform"

    @classmethod
    def parse(cls, source: Any) -> Optional["ErrorType"]:
        """Resolve ``source`` by member, declaration index or name.

        Returns ``None`` rather than raising when nothing matches.
        """

        if isinstance(source, cls):
            return source
        members = list(cls)
        if isinstance(source, int) and not isinstance(source, bool):
            return members[source] if 0 <= source < len(members) else None
        if isinstance(source, str):
            for member in members:
                if source in (member.value, member.name):
                    return member
        return None


__all__ = ["ErrorType"]
