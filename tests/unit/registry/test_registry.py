"""Unit tests for the process-wide registry and module-level API."""

import logging

import pytest

import in_app_analytics
from in_app_analytics import registry
from in_app_analytics.bridge import PLATFORM_ERRORS, UI_ERRORS, UiErrorDetails, host_error_bridge
from in_app_analytics.config import AnalyticsSettings
from in_app_analytics.delegates import MemoryDelegate
from in_app_analytics.dispatch import default_enabled
from in_app_analytics.records import ErrorType


class TestRegistry:
    def test_lazy_default_is_disabled(self):
        analytics = registry.get_analytics()

        assert not analytics.enabled
        assert analytics.delegate is None
        assert registry.get_analytics() is analytics

    def test_enabled_defaults_to_build_mode(self, memory_delegate):
        analytics = registry.init(memory_delegate, install_excepthooks=False)

        assert analytics.enabled is default_enabled()

    def test_init_replaces_instance_and_registers_bridge(self, memory_delegate):
        first = registry.init(memory_delegate, enabled=True, install_excepthooks=False)
        second = registry.init(memory_delegate, enabled=True, name="SECOND", install_excepthooks=False)

        assert registry.get_analytics() is second
        assert first.name == "ANALYTICS"
        assert host_error_bridge.registration(UI_ERRORS).analytics is second
        assert host_error_bridge.registration(PLATFORM_ERRORS).analytics is second

    def test_init_validates_options(self):
        with pytest.raises(ValueError):
            registry.init(name="", install_excepthooks=False)

    def test_platform_override(self, memory_delegate):
        registry.init(memory_delegate, enabled=True, platform="web", install_excepthooks=False)

        in_app_analytics.event("signup")

        assert memory_delegate.events[0].platform == "web"

    def test_init_from_settings_builds_delegate(self):
        settings = AnalyticsSettings(enabled=True, install_excepthooks=False, delegate={"type": "memory"})

        analytics = registry.init_from_settings(settings)

        assert isinstance(analytics.delegate, MemoryDelegate)
        assert registry.get_analytics() is analytics

    def test_init_from_file(self, tmp_path, memory_delegate):
        path = tmp_path / "app.yaml"
        path.write_text("analytics:\n  enabled: true\n  name: FILE\n  install_excepthooks: false\n")

        analytics = registry.init_from_file(path, memory_delegate, section="analytics")

        assert analytics.name == "FILE"
        assert analytics.delegate is memory_delegate

    def test_reset(self, memory_delegate):
        registry.init(memory_delegate, install_excepthooks=False)
        registry.reset()

        assert registry.get_analytics().delegate is None


class TestModuleApi:
    @pytest.fixture(autouse=True)
    def _configured(self, memory_delegate):
        registry.init(memory_delegate, enabled=True, name="TEST", install_excepthooks=False)

    def test_sync_operations(self, memory_delegate):
        in_app_analytics.event("signup", props={"plan": "pro"})
        in_app_analytics.log("sync", "nightly")
        in_app_analytics.warning("quota", "storage", status=False)
        in_app_analytics.call(lambda: None, name="tick")

        assert in_app_analytics.execute(lambda: 3) == 3
        assert [event.name for event in memory_delegate.events] == ["signup"]
        assert [event.name for event in memory_delegate.logs] == ["sync", "tick", "execute"]
        assert [event.name for event in memory_delegate.failures] == ["quota"]

    @pytest.mark.asyncio
    async def test_async_operations(self, memory_delegate):
        async def value():
            return "v"

        await in_app_analytics.call_async(value)
        assert await in_app_analytics.future(value) == "v"
        assert [item async for item in in_app_analytics.stream(lambda: ["x"])] == ["x"]

        in_app_analytics.event("background")
        await in_app_analytics.flush()

        assert [event.name for event in memory_delegate.logs] == ["call_async", "future", "stream"]
        assert memory_delegate.events[0].name == "background"

    def test_error_reporting(self, memory_delegate):
        in_app_analytics.report_ui_error(UiErrorDetails(ValueError("render")))
        handled = in_app_analytics.report_platform_error(RuntimeError("crash"))

        assert handled is False
        assert [error.type for error in memory_delegate.errors] == [ErrorType.WIDGET, ErrorType.PLATFORM]

    def test_chains_to_host_handlers(self, memory_delegate):
        seen = []
        registry.init(
            memory_delegate,
            enabled=True,
            install_excepthooks=False,
            widget_error=seen.append,
            platform_error=lambda exception, stack: True,
        )

        in_app_analytics.report_ui_error(UiErrorDetails("oops"))

        assert len(seen) == 1
        assert in_app_analytics.report_platform_error(RuntimeError("crash")) is True


def test_init_logs_summary(caplog, memory_delegate):
    caplog.set_level(logging.INFO, logger="in_app_analytics.registry")

    registry.init(memory_delegate, enabled=True, name="SHOP", install_excepthooks=False)

    assert "Analytics SHOP initialized (enabled=True, delegate=MemoryDelegate)" in caplog.text


class TestQuietForwarding:
    @pytest.fixture(autouse=True)
    def _configured(self, memory_delegate, caplog):
        caplog.set_level(logging.DEBUG)
        registry.init(memory_delegate, enabled=True, show_logs=False, install_excepthooks=False)

    @staticmethod
    def _report_lines(caplog):
        return [record for record in caplog.records if record.name == registry.get_analytics().name]

    def test_event_is_forwarded_without_report_lines(self, memory_delegate, caplog):
        in_app_analytics.event("signup", msg="ok")

        (event,) = memory_delegate.events
        assert event.name == "signup"
        assert event.msg == "ok"
        assert event.platform
        assert self._report_lines(caplog) == []

    def test_failed_call_is_forwarded_without_report_lines(self, memory_delegate, caplog):
        def fn():
            raise ValueError("boom")

        in_app_analytics.call(fn)

        (failure,) = memory_delegate.failures
        assert "boom" in failure.msg
        assert memory_delegate.logs == []
        assert self._report_lines(caplog) == []
