"""In-app analytics: report events, wrapped work and captured errors.

Typical use::

    import in_app_analytics as analytics

    analytics.init(delegate=MyBackend(), enabled=True)
    analytics.event("signup", props={"plan": "pro"})
    user = await analytics.future(lambda: fetch_user(user_id), name="fetch_user")

Reporting never raises into the caller: failed work is reported and shows up
as a ``None`` result, failed reporting is logged locally.
"""

from in_app_analytics.api import (
    call,
    call_async,
    event,
    execute,
    flush,
    future,
    log,
    report_platform_error,
    report_ui_error,
    stream,
    warning,
)
from in_app_analytics.augment import track_future, track_stream, tracked
from in_app_analytics.bridge import HostErrorBridge, UiErrorDetails, host_error_bridge, install_excepthooks
from in_app_analytics.config import AnalyticsSettings, ConfigurationLoader, load_settings
from in_app_analytics.delegates import (
    AnalyticsDelegate,
    CompositeDelegate,
    LoggingDelegate,
    MemoryDelegate,
    create_delegate,
)
from in_app_analytics.dispatch import Analytics, AnalyticsConfig, CallKind
from in_app_analytics.exceptions import ConfigurationError, DelegateError, InAppAnalyticsError
from in_app_analytics.records import (
    ErrorType,
    EventFields,
    EventItem,
    Events,
    TrackedError,
    TrackedEvent,
)
from in_app_analytics.registry import get_analytics, init, init_from_file, init_from_settings, reset

__version__ = "0.1.0"

__all__ = [
    "Analytics",
    "AnalyticsConfig",
    "AnalyticsDelegate",
    "AnalyticsSettings",
    "CallKind",
    "CompositeDelegate",
    "ConfigurationError",
    "ConfigurationLoader",
    "DelegateError",
    "ErrorType",
    "EventFields",
    "EventItem",
    "Events",
    "HostErrorBridge",
    "InAppAnalyticsError",
    "LoggingDelegate",
    "MemoryDelegate",
    "TrackedError",
    "TrackedEvent",
    "UiErrorDetails",
    "call",
    "call_async",
    "create_delegate",
    "event",
    "execute",
    "flush",
    "future",
    "get_analytics",
    "host_error_bridge",
    "init",
    "init_from_file",
    "init_from_settings",
    "install_excepthooks",
    "load_settings",
    "log",
    "report_platform_error",
    "report_ui_error",
    "reset",
    "stream",
    "track_future",
    "track_stream",
    "tracked",
    "warning",
]
