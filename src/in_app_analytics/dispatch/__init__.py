"""Dispatch core: classification, delegate forwarding and local report lines."""

from .analytics import Analytics, describe_failure
from .analytics_config import DEFAULT_NAME, AnalyticsConfig, default_enabled
from .call_kind import INTERNAL_FAILURE_SIGN, CallKind
from .log_sink import AnalyticsLogSink, format_line
from .outcome import Failure, Outcome, Success, capture, capture_async
from .scheduler import DelegateScheduler

__all__ = [
    "Analytics",
    "AnalyticsConfig",
    "AnalyticsLogSink",
    "CallKind",
    "DEFAULT_NAME",
    "DelegateScheduler",
    "Failure",
    "INTERNAL_FAILURE_SIGN",
    "Outcome",
    "Success",
    "capture",
    "capture_async",
    "default_enabled",
    "describe_failure",
    "format_line",
]
