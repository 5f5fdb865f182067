"""Unit tests for the host error bridge and interpreter hooks."""

import sys
import threading
from types import SimpleNamespace

import pytest

from in_app_analytics.bridge import (
    PLATFORM_ERRORS,
    UI_ERRORS,
    HostErrorBridge,
    UiErrorDetails,
    build_excepthook,
    build_threading_excepthook,
)
from in_app_analytics.dispatch import Analytics, AnalyticsConfig
from in_app_analytics.records import ErrorType


@pytest.fixture
def bridge():
    return HostErrorBridge()


class TestUiErrors:
    def test_reports_and_chains_to_previous(self, bridge, analytics, memory_delegate):
        seen = []
        bridge.register(analytics, ui_previous=seen.append)
        details = UiErrorDetails(AssertionError("layout overflow"), library="widgets")

        bridge.handle_ui_error(details)

        (error,) = memory_delegate.errors
        assert error.type is ErrorType.ASSERTION
        assert error.platform == "test-os"
        assert seen == [details]

    def test_unregistered_bridge_drops_error(self, bridge):
        bridge.handle_ui_error(UiErrorDetails(ValueError("x")))

        assert bridge.registration(UI_ERRORS) is None

    def test_previous_handler_errors_are_not_swallowed(self, bridge, analytics, memory_delegate):
        def previous(details):
            raise RuntimeError("host handler failed")

        bridge.register(analytics, ui_previous=previous)

        with pytest.raises(RuntimeError, match="host handler failed"):
            bridge.handle_ui_error(UiErrorDetails(ValueError("x")))
        assert len(memory_delegate.errors) == 1

    def test_reporting_failures_are_swallowed(self, bridge, caplog):
        class _Broken(Analytics):
            def error(self, report):
                raise RuntimeError("reporting broke")

        seen = []
        bridge.register(_Broken(AnalyticsConfig(name="TEST")), ui_previous=seen.append)

        bridge.handle_ui_error(UiErrorDetails(ValueError("x")))

        assert len(seen) == 1
        assert "Failed to report UI error" in caplog.text


class TestPlatformErrors:
    def test_unregistered_returns_false(self, bridge):
        assert bridge.handle_platform_error(RuntimeError("x")) is False

    def test_returns_previous_result(self, bridge, analytics, memory_delegate):
        bridge.register(analytics, platform_previous=lambda exception, stack: True)

        assert bridge.handle_platform_error(RuntimeError("crash"), "frame") is True
        (error,) = memory_delegate.errors
        assert error.type is ErrorType.PLATFORM
        assert error.details == "frame"

    def test_without_previous_returns_false(self, bridge, analytics, memory_delegate):
        bridge.register(analytics)

        assert bridge.handle_platform_error(RuntimeError("crash")) is False
        assert len(memory_delegate.errors) == 1

    def test_reregistration_replaces_both_entries(self, bridge, analytics, memory_delegate):
        other = Analytics(AnalyticsConfig(name="OTHER"))
        bridge.register(analytics)
        bridge.register(other)

        assert bridge.registration(PLATFORM_ERRORS).analytics is other
        assert bridge.registration(UI_ERRORS).analytics is other
        bridge.handle_platform_error(RuntimeError("crash"))
        assert memory_delegate.errors == []


class TestExceptHooks:
    def test_excepthook_runs_fallback_when_unhandled(self, bridge, analytics, memory_delegate):
        fallback_calls = []
        bridge.register(analytics)
        hook = build_excepthook(bridge, lambda *args: fallback_calls.append(args))
        error = RuntimeError("fatal")

        hook(RuntimeError, error, None)

        assert len(memory_delegate.errors) == 1
        assert fallback_calls == [(RuntimeError, error, None)]

    def test_excepthook_skips_fallback_when_handled(self, bridge, analytics):
        fallback_calls = []
        bridge.register(analytics, platform_previous=lambda exception, stack: True)
        hook = build_excepthook(bridge, lambda *args: fallback_calls.append(args))

        hook(RuntimeError, RuntimeError("fatal"), None)

        assert fallback_calls == []

    def test_keyboard_interrupt_goes_straight_to_fallback(self, bridge, analytics, memory_delegate):
        fallback_calls = []
        bridge.register(analytics)
        hook = build_excepthook(bridge, lambda *args: fallback_calls.append(args))

        hook(KeyboardInterrupt, KeyboardInterrupt(), None)

        assert memory_delegate.errors == []
        assert len(fallback_calls) == 1

    def test_threading_hook(self, bridge, analytics, memory_delegate):
        fallback_calls = []
        bridge.register(analytics)
        hook = build_threading_excepthook(bridge, fallback_calls.append)
        args = SimpleNamespace(
            exc_type=ValueError,
            exc_value=ValueError("worker failed"),
            exc_traceback=None,
            thread=threading.current_thread(),
        )

        hook(args)

        assert memory_delegate.errors[0].msg == "worker failed"
        assert fallback_calls == [args]

    def test_hooks_are_not_installed_by_building(self, bridge):
        original = sys.excepthook

        build_excepthook(bridge, original)

        assert sys.excepthook is original


def test_install_excepthooks_is_idempotent(monkeypatch, bridge, analytics, memory_delegate):
    from in_app_analytics.bridge import excepthooks

    fallback_calls = []
    monkeypatch.setattr(excepthooks, "_installed", False)
    monkeypatch.setattr(sys, "excepthook", lambda *args: fallback_calls.append(args))
    monkeypatch.setattr(threading, "excepthook", lambda args: None)
    bridge.register(analytics)

    assert excepthooks.install_excepthooks(bridge) is True
    assert excepthooks.excepthooks_installed()
    assert excepthooks.install_excepthooks(bridge) is False

    sys.excepthook(RuntimeError, RuntimeError("fatal"), None)

    assert len(memory_delegate.errors) == 1
    assert len(fallback_calls) == 1
