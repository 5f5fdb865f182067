"""Delegate contract and bundled reporting backends."""

from .analytics_delegate import AnalyticsDelegate
from .composite_delegate import CompositeDelegate
from .factory import create_delegate
from .logging_delegate import LoggingDelegate
from .memory_delegate import MemoryDelegate

__all__ = [
    "AnalyticsDelegate",
    "CompositeDelegate",
    "LoggingDelegate",
    "MemoryDelegate",
    "create_delegate",
]
