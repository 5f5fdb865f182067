"""Normalization of caller-supplied event payloads.

Payloads are reduced to JSON-compatible scalars, lists and string-keyed
mappings. Anything the normalizer cannot represent is dropped silently: a
report with a partially unusable payload is still worth sending, so this
module never raises.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .event_item import EventItem

logger = logging.getLogger(__name__)

_SCALARS = (str, bool, int, float)


class _Unrepresentable:
    """Marker returned for values that must disappear from the output."""


_DROP = _Unrepresentable()


def normalize_value(value: Any) -> Any:
    """Return ``value`` reduced to a representable form, or the drop marker."""

    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, EventItem):
        return normalize_props(value.as_map()) or _DROP
    if isinstance(value, Mapping):
        return normalize_props(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [normalize_value(item) for item in value]
        return [item for item in items if not is_dropped(item)]
    logger.debug("Dropping unrepresentable payload value of type %s", type(value).__name__)
    return _DROP


def normalize_props(props: Optional[Mapping[Any, Any]]) -> dict[str, Any]:
    """Normalize a payload mapping recursively.

    Args:
        props: Caller payload; keys are converted to strings.

    Returns:
        A new dictionary holding only representable values. ``None`` or a
        non-mapping input yields an empty dictionary.
    """

    if not isinstance(props, Mapping):
        return {}

    normalized: dict[str, Any] = {}
    for key, value in props.items():
        try:
            converted = normalize_value(value)
        except Exception:  # noqa: BLE001 - hostile __iter__/__str__ implementations
            logger.debug("Dropping payload key %r after normalization failure", key, exc_info=True)
            continue
        if is_dropped(converted):
            continue
        normalized[str(key)] = converted
    return normalized


def is_dropped(value: Any) -> bool:
    """Return ``True`` when :func:`normalize_value` discarded ``value``."""

    return value is _DROP


__all__ = ["is_dropped", "normalize_props", "normalize_value"]
