"""Unit tests for the augmentation helpers."""

import asyncio

import pytest

import in_app_analytics
from in_app_analytics import track_future, track_stream, tracked
from in_app_analytics.dispatch import CallKind


@pytest.fixture
def configured(memory_delegate):
    return in_app_analytics.init(memory_delegate, enabled=True, name="TEST", install_excepthooks=False)


async def _value(value):
    await asyncio.sleep(0)
    return value


class TestTrackFuture:
    @pytest.mark.asyncio
    async def test_reports_through_current_instance(self, configured, memory_delegate):
        assert await track_future(_value(5), name="compute") == 5

        assert memory_delegate.logs[0].name == "compute"
        assert memory_delegate.logs[0].sign == CallKind.FUTURE.success_sign

    @pytest.mark.asyncio
    async def test_failure_returns_none(self, configured, memory_delegate):
        async def fail():
            raise ValueError("nope")

        assert await track_future(fail(), msg="loading") is None
        assert memory_delegate.failures[0].name == "future"
        assert memory_delegate.failures[0].msg == "loading: nope"


class TestTrackStream:
    @pytest.mark.asyncio
    async def test_wraps_iterables(self, configured, memory_delegate):
        items = [item async for item in track_stream([1, 2, 3], name="batch")]

        assert items == [1, 2, 3]
        assert memory_delegate.logs[0].name == "batch"


class TestTracked:
    def test_plain_function_uses_execute(self, configured, memory_delegate):
        @tracked("add", reason="math")
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"
        (event,) = memory_delegate.logs
        assert event.sign == CallKind.EXECUTE.success_sign
        assert event.reason == "math"

    def test_failure_returns_none(self, configured, memory_delegate):
        @tracked()
        def divide(a, b):
            return a / b

        assert divide(1, 0) is None
        assert memory_delegate.failures[0].name.endswith("divide")

    @pytest.mark.asyncio
    async def test_coroutine_function_uses_future(self, configured, memory_delegate):
        @tracked("fetch")
        async def fetch(key):
            return await _value(key.upper())

        assert await fetch("id") == "ID"
        assert memory_delegate.logs[0].sign == CallKind.FUTURE.success_sign

    def test_uses_instance_current_at_call_time(self, memory_delegate):
        @tracked("late")
        def work():
            return 1

        work()
        assert memory_delegate.logs == []

        in_app_analytics.init(memory_delegate, enabled=True, name="TEST", install_excepthooks=False)
        work()
        assert len(memory_delegate.logs) == 1
