"""Factory helpers for constructing delegates from configuration."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from in_app_analytics.exceptions import ConfigurationError

from .analytics_delegate import AnalyticsDelegate
from .composite_delegate import CompositeDelegate
from .logging_delegate import LoggingDelegate
from .memory_delegate import MemoryDelegate

__all__ = ["create_delegate"]


def create_delegate(config: Mapping[str, Any]) -> AnalyticsDelegate:
    """Instantiate a configured delegate from a mapping."""
    delegate_type = str(config.get("type", "")).strip().lower()
    if not delegate_type:
        raise ConfigurationError("Delegate type not specified in configuration")

    name = str(config.get("name", delegate_type))

    if delegate_type == "logging":
        return LoggingDelegate(
            name=name,
            logger_name=config.get("logger_name"),
            log_level=_coerce_log_level(config.get("log_level", logging.INFO)),
            failure_log_level=_coerce_log_level(config.get("failure_log_level", logging.WARNING)),
            error_log_level=_coerce_log_level(config.get("error_log_level", logging.ERROR)),
        )
    if delegate_type == "memory":
        return MemoryDelegate(name=name, max_entries=int(config.get("max_entries", 1000)))
    if delegate_type == "composite":
        sub_configs = config.get("delegates", [])
        return CompositeDelegate(name=name, delegates=_create_sub_delegates(sub_configs))

    raise ConfigurationError(f"Unknown delegate type: {delegate_type}")


def _create_sub_delegates(configs: Iterable[Mapping[str, Any]]) -> list[AnalyticsDelegate]:
    """Recursively create delegates defined inside a composite configuration."""
    delegates: list[AnalyticsDelegate] = []
    for sub_config in configs:
        if not isinstance(sub_config, Mapping):
            raise ConfigurationError(f"Composite delegate entries must be mappings, got {type(sub_config)}")
        delegates.append(create_delegate(sub_config))
    return delegates


def _coerce_log_level(value: Any) -> int:
    """Translate configuration values into valid logging levels."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, str):
        level = logging.getLevelName(value.upper())
        if isinstance(level, int):
            return level

    raise ConfigurationError(f"Invalid logging level: {value}")
