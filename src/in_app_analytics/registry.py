"""Process-wide analytics instance.

The registry owns the single :class:`Analytics` the rest of the process
reports through. ``init`` builds a new configuration and instance, wires both
host error sources to it and swaps the reference under a lock; callers that
already hold the previous instance keep using it undisturbed.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from in_app_analytics.bridge import (
    PlatformErrorHandler,
    UiErrorHandler,
    host_error_bridge,
    install_excepthooks as _install_excepthooks,
)
from in_app_analytics.config import AnalyticsSettings, ConfigurationLoader
from in_app_analytics.config.loader import PathLike
from in_app_analytics.delegates import AnalyticsDelegate
from in_app_analytics.dispatch import DEFAULT_NAME, Analytics, AnalyticsConfig, default_enabled
from in_app_analytics.records import current_platform

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_current: Optional[Analytics] = None


def init(
    delegate: Optional[AnalyticsDelegate] = None,
    *,
    enabled: Optional[bool] = None,
    name: str = DEFAULT_NAME,
    show_logs: bool = True,
    show_success_logs: bool = True,
    show_log_time: bool = False,
    log_throw_enabled: bool = True,
    error_log_level: Optional[int] = None,
    success_log_level: Optional[int] = None,
    error_sequence_number: Optional[int] = None,
    success_sequence_number: Optional[int] = None,
    platform: Optional[str] = None,
    escalate_error_delegate_failures: bool = True,
    widget_error: Optional[UiErrorHandler] = None,
    platform_error: Optional[PlatformErrorHandler] = None,
    install_excepthooks: bool = True,
) -> Analytics:
    """Configure the process-wide instance and return it.

    Args:
        delegate: Reporting backend; nothing is forwarded without one.
        enabled: Forward records to the delegate. Defaults to on for
            optimized interpreters and off otherwise.
        name: Display name; also the logger channel for report lines.
        widget_error: Host UI-error handler to chain to.
        platform_error: Host platform-error handler to chain to.
        install_excepthooks: Route ``sys.excepthook`` and
            ``threading.excepthook`` through the host error bridge.

    The remaining keyword arguments map one-to-one onto
    :class:`~in_app_analytics.dispatch.AnalyticsConfig`.

    Raises:
        ValueError: If ``name`` is empty or a sequence number is negative.
    """

    config = AnalyticsConfig(
        enabled=enabled if enabled is not None else default_enabled(),
        name=name,
        show_logs=show_logs,
        show_success_logs=show_success_logs,
        show_log_time=show_log_time,
        log_throw_enabled=log_throw_enabled,
        error_log_level=error_log_level,
        success_log_level=success_log_level,
        error_sequence_number=error_sequence_number,
        success_sequence_number=success_sequence_number,
        platform=platform or current_platform(),
        escalate_error_delegate_failures=escalate_error_delegate_failures,
        delegate=delegate,
    )
    return _activate(
        config,
        widget_error=widget_error,
        platform_error=platform_error,
        install_excepthooks=install_excepthooks,
    )


def init_from_settings(
    settings: AnalyticsSettings,
    delegate: Optional[AnalyticsDelegate] = None,
    *,
    widget_error: Optional[UiErrorHandler] = None,
    platform_error: Optional[PlatformErrorHandler] = None,
) -> Analytics:
    """Configure the process-wide instance from validated settings.

    Raises:
        ConfigurationError: If the settings' delegate specification is invalid.
    """

    return _activate(
        settings.to_config(delegate),
        widget_error=widget_error,
        platform_error=platform_error,
        install_excepthooks=settings.install_excepthooks,
    )


def init_from_file(
    path: PathLike,
    delegate: Optional[AnalyticsDelegate] = None,
    *,
    section: Optional[str] = None,
    **handlers: Any,
) -> Analytics:
    """Configure the process-wide instance from a YAML settings file.

    Extra keyword arguments (``widget_error``, ``platform_error``) are passed
    to :func:`init_from_settings`.

    Raises:
        ConfigurationError: If the file cannot be loaded or holds invalid values.
    """

    settings = ConfigurationLoader(section=section).load(path)
    return init_from_settings(settings, delegate, **handlers)


def get_analytics() -> Analytics:
    """Return the current instance, creating a disabled one on first use."""

    global _current
    current = _current
    if current is not None:
        return current
    with _lock:
        if _current is None:
            _current = Analytics(AnalyticsConfig.disabled())
        return _current


def reset() -> None:
    """Drop the current instance; the next lookup starts from defaults."""

    global _current
    with _lock:
        _current = None


def _activate(
    config: AnalyticsConfig,
    *,
    widget_error: Optional[UiErrorHandler],
    platform_error: Optional[PlatformErrorHandler],
    install_excepthooks: bool,
) -> Analytics:
    global _current
    analytics = Analytics(config)
    host_error_bridge.register(analytics, ui_previous=widget_error, platform_previous=platform_error)
    if install_excepthooks:
        _install_excepthooks(host_error_bridge)

    with _lock:
        _current = analytics

    logger.info(
        "Analytics %s initialized (enabled=%s, delegate=%s)",
        config.name,
        config.enabled,
        type(config.delegate).__name__ if config.delegate is not None else None,
    )
    return analytics


__all__ = ["get_analytics", "init", "init_from_file", "init_from_settings", "reset"]
