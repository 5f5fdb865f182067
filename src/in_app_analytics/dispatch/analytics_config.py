"""
Dispatch core configuration.

Purpose:
    Hold the immutable settings one :class:`Analytics` instance runs with.
    Re-initialization builds a new configuration; nothing mutates an existing
    one.
External Dependencies:
    None. This module relies exclusively on the Python standard library.
Fallback Semantics:
    :meth:`AnalyticsConfig.disabled` is used when the process never called
    ``init``: reporting is off, no delegate is attached, local logging still
    follows the verbosity switches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from in_app_analytics.records import current_platform

if TYPE_CHECKING:
    from in_app_analytics.delegates import AnalyticsDelegate

DEFAULT_NAME = "ANALYTICS"


def default_enabled() -> bool:
    """Return the build-mode default for ``enabled``.

    Reporting is on for optimized ("release") interpreters, i.e. when Python
    runs with ``-O`` and ``__debug__`` is false.
    """

    return not __debug__


@dataclass(frozen=True)
class AnalyticsConfig:
    """Immutable configuration for the dispatch core.

    Parameters:
        enabled (bool): Whether records are forwarded to the delegate.
        name (str): Display name; also the logger channel for report lines.
        show_logs (bool): Master switch for local report lines.
        show_success_logs (bool): Emit success lines (requires ``show_logs``).
        show_log_time (bool): Attach the emission time to each line's
            ``analytics_time`` log-record attribute.
        log_throw_enabled (bool): Attach exception info to failure lines.
        error_log_level (int | None): Level for failure lines; ``ERROR`` when unset.
        success_log_level (int | None): Level for success lines; ``INFO`` when unset.
        error_sequence_number (int | None): Tag passed with failure lines.
        success_sequence_number (int | None): Tag passed with success lines.
        platform (str): Opaque host platform tag stamped on records.
        escalate_error_delegate_failures (bool): Tag delegate failures while
            reporting captured errors with the internal-failure glyph instead
            of the error's own glyph.
        delegate (AnalyticsDelegate | None): Reporting backend; non-owning.
    """

    enabled: bool = False
    name: str = DEFAULT_NAME
    show_logs: bool = True
    show_success_logs: bool = True
    show_log_time: bool = False
    log_throw_enabled: bool = True
    error_log_level: Optional[int] = None
    success_log_level: Optional[int] = None
    error_sequence_number: Optional[int] = None
    success_sequence_number: Optional[int] = None
    platform: str = field(default_factory=current_platform)
    escalate_error_delegate_failures: bool = True
    delegate: Optional["AnalyticsDelegate"] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must be a non-empty string")
        for label in ("error_sequence_number", "success_sequence_number"):
            value = getattr(self, label)
            if value is not None and value < 0:
                raise ValueError(f"{label} must be non-negative")

    @classmethod
    def disabled(cls) -> "AnalyticsConfig":
        """Return the configuration used before any explicit initialization."""

        return cls(enabled=False, delegate=None)

    @property
    def forwarding(self) -> bool:
        """Return whether records are handed to a delegate."""

        return self.enabled and self.delegate is not None


__all__ = ["AnalyticsConfig", "DEFAULT_NAME", "default_enabled"]
