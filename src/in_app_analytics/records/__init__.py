"""Record model: immutable events, errors and payload helpers."""

from .error_type import ErrorType
from .event_item import EventItem
from .names import EventFields, Events
from .normalization import normalize_props, normalize_value
from .platform import current_platform
from .tracked_error import TrackedError
from .tracked_event import FAILURE_SIGN, SUCCESS_SIGN, TrackedEvent

__all__ = [
    "ErrorType",
    "EventFields",
    "EventItem",
    "Events",
    "FAILURE_SIGN",
    "SUCCESS_SIGN",
    "TrackedError",
    "TrackedEvent",
    "current_platform",
    "normalize_props",
    "normalize_value",
]
