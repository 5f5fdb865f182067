"""Pydantic settings model mirroring the initialization options."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from in_app_analytics.delegates import AnalyticsDelegate, create_delegate
from in_app_analytics.dispatch.analytics_config import DEFAULT_NAME, AnalyticsConfig, default_enabled
from in_app_analytics.records import current_platform


class AnalyticsSettings(BaseModel):
    """Validated, serializable form of the options accepted by ``init``.

    ``enabled`` falls back to the build-mode default when omitted. ``delegate``
    is a factory specification (``{"type": "logging", ...}``) consumed by
    :func:`in_app_analytics.delegates.create_delegate`.
    """

    enabled: Optional[bool] = Field(
        default=None, description="Forward records to the delegate; build-mode default when unset."
    )
    name: str = Field(default=DEFAULT_NAME, min_length=1, description="Display name and report channel.")
    show_logs: bool = True
    show_success_logs: bool = True
    show_log_time: bool = False
    log_throw_enabled: bool = True
    error_log_level: Optional[int] = None
    success_log_level: Optional[int] = None
    error_sequence_number: Optional[int] = Field(default=None, ge=0)
    success_sequence_number: Optional[int] = Field(default=None, ge=0)
    platform: Optional[str] = None
    escalate_error_delegate_failures: bool = True
    install_excepthooks: bool = Field(
        default=True, description="Route interpreter-level uncaught errors through the bridge."
    )
    delegate: Optional[Dict[str, Any]] = Field(
        default=None, description="Delegate factory specification."
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("error_log_level", "success_log_level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, str):
            level = logging.getLevelName(value.strip().upper())
            if not isinstance(level, int):
                raise ValueError(f"unknown logging level: {value}")
            return level
        return value

    @field_validator("delegate", mode="before")
    @classmethod
    def _require_delegate_type(cls, value: Any) -> Any:
        if value is not None and isinstance(value, dict) and "type" not in value:
            raise ValueError("delegate specification needs a 'type'")
        return value

    def to_config(self, delegate: Optional[AnalyticsDelegate] = None) -> AnalyticsConfig:
        """Build the immutable dispatch configuration.

        Args:
            delegate: Delegate instance to attach. When omitted and a
                ``delegate`` specification is present, the factory builds one.

        Raises:
            ConfigurationError: If the delegate specification is invalid.
        """

        if delegate is None and self.delegate is not None:
            delegate = create_delegate(self.delegate)

        return AnalyticsConfig(
            enabled=self.enabled if self.enabled is not None else default_enabled(),
            name=self.name,
            show_logs=self.show_logs,
            show_success_logs=self.show_success_logs,
            show_log_time=self.show_log_time,
            log_throw_enabled=self.log_throw_enabled,
            error_log_level=self.error_log_level,
            success_log_level=self.success_log_level,
            error_sequence_number=self.error_sequence_number,
            success_sequence_number=self.success_sequence_number,
            platform=self.platform or current_platform(),
            escalate_error_delegate_failures=self.escalate_error_delegate_failures,
            delegate=delegate,
        )


__all__ = ["AnalyticsSettings"]
