"""
Core exceptions for in-app analytics.

Reporting operations never raise into caller code, so the classes below are
only raised on configuration paths (settings validation, YAML loading,
delegate construction) or internally by delegates that aggregate failures.

The exceptions are organized into categories:
- Configuration Exceptions
- Delegate Exceptions
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class InAppAnalyticsError(Exception):
    """Base exception class for all in-app analytics errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize an analytics error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information for debugging
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

        logger.debug("InAppAnalyticsError: %s", message, extra={
            "error_code": error_code,
            "context": context,
        })


# Configuration Exceptions

class ConfigurationError(InAppAnalyticsError):
    """Raised when settings, YAML files or delegate specs are invalid."""

    def __init__(self, message: str, source: Optional[str] = None):
        """
        Initialize a configuration error.

        Args:
            message: Description of the invalid configuration
            source: Optional file path or section the configuration came from
        """
        self.source = source
        super().__init__(
            message,
            error_code="CONFIGURATION_ERROR",
            context={"source": source} if source else None,
        )


# Delegate Exceptions

class DelegateError(InAppAnalyticsError):
    """Raised by delegates that forward to several backends and some failed."""

    def __init__(self, operation: str, failures: Dict[str, BaseException]):
        """
        Initialize a delegate error.

        Args:
            operation: Delegate operation that failed (event, failure, error, log)
            failures: Mapping of sub-delegate names to the exception each raised
        """
        self.operation = operation
        self.failures = dict(failures)
        details = "; ".join(f"{name}: {error}" for name, error in self.failures.items())
        super().__init__(
            f"Delegate operation '{operation}' failed: {details}",
            error_code="DELEGATE_ERROR",
            context={"operation": operation, "failed": list(self.failures)},
        )


__all__ = ["ConfigurationError", "DelegateError", "InAppAnalyticsError"]
