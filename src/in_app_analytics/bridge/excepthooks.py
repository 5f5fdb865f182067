"""Installation of the platform-error handler into interpreter hooks.

``sys.excepthook`` and ``threading.excepthook`` play the role of the
platform's uncaught-error callback. The installed hooks ask the bridge to
report the error; when the bridge says it was not handled, the hook that was
in place before runs as well, so the error is still printed.
"""

from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType
from typing import Any, Callable, Optional

from .host_error_bridge import HostErrorBridge
from .instances import host_error_bridge

logger = logging.getLogger(__name__)

SysExceptHook = Callable[[type[BaseException], BaseException, Optional[TracebackType]], Any]
ThreadingExceptHook = Callable[[Any], Any]

_install_lock = threading.Lock()
_installed = False


def build_excepthook(bridge: HostErrorBridge, fallback: SysExceptHook) -> SysExceptHook:
    """Return a ``sys.excepthook`` replacement routed through ``bridge``."""

    def excepthook(
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_traceback: Optional[TracebackType],
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            fallback(exc_type, exc_value, exc_traceback)
            return
        if not bridge.handle_platform_error(exc_value, exc_traceback):
            fallback(exc_type, exc_value, exc_traceback)

    return excepthook


def build_threading_excepthook(bridge: HostErrorBridge, fallback: ThreadingExceptHook) -> ThreadingExceptHook:
    """Return a ``threading.excepthook`` replacement routed through ``bridge``."""

    def excepthook(args: Any) -> None:
        exc_value = args.exc_value
        if exc_value is None or isinstance(exc_value, SystemExit):
            fallback(args)
            return
        if not bridge.handle_platform_error(exc_value, args.exc_traceback):
            fallback(args)

    return excepthook


def install_excepthooks(bridge: Optional[HostErrorBridge] = None) -> bool:
    """Route interpreter-level uncaught errors through ``bridge``.

    Installation happens once per process; later calls are no-ops because the
    hooks always consult the bridge's current registration.

    Returns:
        ``True`` when the hooks were installed by this call.
    """

    global _installed
    target = bridge or host_error_bridge
    with _install_lock:
        if _installed:
            return False
        sys.excepthook = build_excepthook(target, sys.excepthook)
        threading.excepthook = build_threading_excepthook(target, threading.excepthook)
        _installed = True

    logger.debug("Installed platform error hooks")
    return True


def excepthooks_installed() -> bool:
    """Return whether :func:`install_excepthooks` already ran."""

    return _installed


__all__ = [
    "build_excepthook",
    "build_threading_excepthook",
    "excepthooks_installed",
    "install_excepthooks",
]
