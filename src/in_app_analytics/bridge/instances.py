"""Global bridge instance used by initialization and the interpreter hooks."""

from __future__ import annotations

from .host_error_bridge import HostErrorBridge

host_error_bridge = HostErrorBridge()

__all__ = ["host_error_bridge"]
