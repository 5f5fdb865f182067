"""Host error bridge: UI and platform error sources feeding the dispatch core."""

from .excepthooks import (
    build_excepthook,
    build_threading_excepthook,
    excepthooks_installed,
    install_excepthooks,
)
from .handler_registration import HandlerRegistration
from .host_error_bridge import (
    PLATFORM_ERRORS,
    UI_ERRORS,
    HostErrorBridge,
    PlatformErrorHandler,
    UiErrorHandler,
)
from .instances import host_error_bridge
from .ui_error_details import UiErrorDetails

__all__ = [
    "HandlerRegistration",
    "HostErrorBridge",
    "PLATFORM_ERRORS",
    "PlatformErrorHandler",
    "UI_ERRORS",
    "UiErrorDetails",
    "UiErrorHandler",
    "build_excepthook",
    "build_threading_excepthook",
    "excepthooks_installed",
    "host_error_bridge",
    "install_excepthooks",
]
