"""Immutable record describing one discrete, named occurrence."""

from __future__ import annotations

import math
import time as _time
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping, Optional

from .normalization import normalize_props
from .platform import current_platform

SUCCESS_SIGN = "✅"
FAILURE_SIGN = "❌"


@dataclass(frozen=True)
class TrackedEvent:
    """A tracked event as handed to delegates.

    Attributes:
        name: Event name. An empty name marks the empty sentinel.
        reason: Optional sub-classification of the event.
        time: Milliseconds since the epoch; ``0`` means unset.
        platform: Opaque host platform tag.
        msg: Human-readable detail.
        sign: Short status glyph.
        props: Caller payload.
        extra: Alternate payload, serialized only when ``props`` is absent.
    """

    name: str
    reason: Optional[str] = None
    time: int = 0
    platform: Optional[str] = None
    msg: Optional[str] = None
    sign: Optional[str] = None
    props: Optional[Mapping[str, Any]] = None
    extra: Optional[Mapping[str, Any]] = None

    @classmethod
    def empty(cls) -> "TrackedEvent":
        """Return the canonical "nothing to report" event."""

        return cls(name="")

    @classmethod
    def create(
        cls,
        name: str,
        *,
        reason: Optional[str] = None,
        sign: Optional[str] = None,
        msg: Optional[str] = None,
        props: Optional[Mapping[str, Any]] = None,
        extra: Optional[Mapping[str, Any]] = None,
        platform: Optional[str] = None,
    ) -> "TrackedEvent":
        """Build an event stamped with the current time and platform.

        Args:
            name: Event name.
            reason: Optional sub-classification.
            sign: Status glyph; defaults to the success glyph.
            msg: Optional human-readable detail.
            props: Optional caller payload.
            extra: Optional alternate payload.
            platform: Platform tag override; detected when omitted.

        Returns:
            A new :class:`TrackedEvent`.
        """

        return cls(
            name=name,
            reason=reason,
            time=int(_time.time() * 1000),
            platform=platform if platform is not None else current_platform(),
            msg=msg,
            sign=sign if sign is not None else SUCCESS_SIGN,
            props=props,
            extra=extra,
        )

    @classmethod
    def parse(cls, source: Any) -> "TrackedEvent":
        """Rebuild an event from its generic mapping form.

        Malformed input yields :meth:`empty` instead of raising.
        """

        if not isinstance(source, Mapping) or not source:
            return cls.empty()
        name = source.get("name")
        if not isinstance(name, str) or not name:
            return cls.empty()

        raw_time = source.get("time")
        props = source.get("props")
        extra = source.get("extra")
        return cls(
            name=name,
            reason=_string_or_none(source.get("reason")),
            time=_coerce_millis(raw_time),
            platform=_string_or_none(source.get("platform")),
            msg=_string_or_none(source.get("msg")),
            sign=_string_or_none(source.get("sign")),
            props=normalize_props(props) if isinstance(props, Mapping) else None,
            extra=normalize_props(extra) if isinstance(extra, Mapping) else None,
        )

    @property
    def is_empty(self) -> bool:
        """Return whether this is the empty sentinel."""

        return not self.name

    @property
    def payload(self) -> dict[str, Any]:
        """Return the normalized payload: ``props`` when present, else ``extra``."""

        if self.props is not None:
            return normalize_props(self.props)
        return normalize_props(self.extra)

    def to_map(self) -> dict[str, Any]:
        """Return the generic mapping form, omitting unset and empty fields."""

        if self.is_empty:
            return {}

        data: dict[str, Any] = {"name": self.name}
        if self.time > 0:
            data["time"] = self.time
        for key in ("platform", "reason", "sign", "msg"):
            value = getattr(self, key)
            if value:
                data[key] = value
        payload = self.payload
        if payload:
            data["props"] = payload
        return data

    def __str__(self) -> str:
        reason = f"[{self.reason}]" if self.reason else ""
        return f"TrackedEvent({self.sign} {self.name}{reason}: {self.msg})"


def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _coerce_millis(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        return 0
    if not math.isfinite(value):
        return 0
    return int(value)


__all__ = ["FAILURE_SIGN", "SUCCESS_SIGN", "TrackedEvent"]
