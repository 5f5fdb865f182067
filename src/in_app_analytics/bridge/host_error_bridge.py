"""Bridge that routes host error sources into the dispatch core."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, Optional

from in_app_analytics.records import TrackedError
from in_app_analytics.records.tracked_error import StackSource

from .handler_registration import HandlerRegistration
from .ui_error_details import UiErrorDetails

if TYPE_CHECKING:
    from in_app_analytics.dispatch import Analytics

logger = logging.getLogger(__name__)

UiErrorHandler = Callable[[UiErrorDetails], None]
PlatformErrorHandler = Callable[[BaseException, StackSource], bool]

UI_ERRORS = "ui"
PLATFORM_ERRORS = "platform"


class HostErrorBridge:
    """Registration table for the two host error sources.

    Each registration captures the :class:`Analytics` instance it was created
    for and the handler the host had supplied before. Handling an error
    reports it, then chains to that previous handler so the host's own
    handling keeps working. Registering again replaces both entries; there is
    no way to unregister.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, HandlerRegistration] = {}
        self._lock = threading.RLock()

    def register(
        self,
        analytics: "Analytics",
        *,
        ui_previous: Optional[UiErrorHandler] = None,
        platform_previous: Optional[PlatformErrorHandler] = None,
    ) -> None:
        """Install handlers for ``analytics``, replacing earlier registrations.

        Args:
            analytics: Dispatch core that receives the captured errors.
            ui_previous: Host UI-error handler to chain to.
            platform_previous: Host platform-error handler to chain to; its
                return value decides whether the error counts as handled.
        """

        registrations = {
            UI_ERRORS: HandlerRegistration(
                kind=UI_ERRORS,
                analytics=analytics,
                handler=self._ui_handler(analytics, ui_previous),
                previous=ui_previous,
            ),
            PLATFORM_ERRORS: HandlerRegistration(
                kind=PLATFORM_ERRORS,
                analytics=analytics,
                handler=self._platform_handler(analytics, platform_previous),
                previous=platform_previous,
            ),
        }
        with self._lock:
            self._registrations = registrations

        logger.debug("Registered host error handlers for %s", analytics.name)

    def registration(self, kind: str) -> Optional[HandlerRegistration]:
        """Return the current registration for ``kind``, if any."""

        with self._lock:
            return self._registrations.get(kind)

    def handle_ui_error(self, details: UiErrorDetails) -> None:
        """Report an error caught by the UI/framework layer."""

        registration = self.registration(UI_ERRORS)
        if registration is None:
            logger.debug("No UI error handler registered; dropping %r", details.exception)
            return
        registration.handler(details)

    def handle_platform_error(self, exception: BaseException, stack: StackSource = None) -> bool:
        """Report an uncaught platform error.

        Returns:
            ``True`` when the host's previous handler declared the error
            handled; ``False`` otherwise, including when nothing is registered.
        """

        registration = self.registration(PLATFORM_ERRORS)
        if registration is None:
            return False
        return bool(registration.handler(exception, stack))

    @staticmethod
    def _ui_handler(analytics: "Analytics", previous: Optional[UiErrorHandler]) -> UiErrorHandler:
        def handle(details: UiErrorDetails) -> None:
            try:
                analytics.error(TrackedError.from_ui_error(details, platform=analytics.config.platform))
            except Exception:  # noqa: BLE001 - reporting must not break the host hook
                logger.error("Failed to report UI error", exc_info=True)
            if previous is not None:
                previous(details)

        return handle

    @staticmethod
    def _platform_handler(
        analytics: "Analytics", previous: Optional[PlatformErrorHandler]
    ) -> PlatformErrorHandler:
        def handle(exception: BaseException, stack: StackSource = None) -> bool:
            try:
                analytics.error(
                    TrackedError.from_platform_error(exception, stack, platform=analytics.config.platform)
                )
            except Exception:  # noqa: BLE001 - reporting must not break the host hook
                logger.error("Failed to report platform error", exc_info=True)
            if previous is not None:
                return bool(previous(exception, stack))
            return False

        return handle


__all__ = [
    "HostErrorBridge",
    "PLATFORM_ERRORS",
    "PlatformErrorHandler",
    "UI_ERRORS",
    "UiErrorHandler",
]
