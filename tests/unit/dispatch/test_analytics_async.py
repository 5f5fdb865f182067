"""Unit tests for the asynchronous reporting operations."""

import asyncio
import logging

import pytest

from in_app_analytics.dispatch import CallKind
from in_app_analytics.records import ErrorType, TrackedError, TrackedEvent


async def _value(value):
    await asyncio.sleep(0)
    return value


async def _fail(message="boom"):
    await asyncio.sleep(0)
    raise ValueError(message)


async def _collect(stream):
    return [item async for item in stream]


@pytest.fixture(autouse=True)
def _capture(caplog):
    caplog.set_level(logging.INFO)


class TestFuture:
    @pytest.mark.asyncio
    async def test_returns_awaited_value(self, analytics, memory_delegate):
        result = await analytics.future(lambda: _value("user"), name="fetch_user")

        assert result == "user"
        (event,) = memory_delegate.logs
        assert event.name == "fetch_user"
        assert event.sign == CallKind.FUTURE.success_sign

    @pytest.mark.asyncio
    async def test_failure_returns_none_and_reports(self, analytics, memory_delegate, caplog):
        assert await analytics.future(lambda: _fail(), name="fetch_user", reason="profile") is None

        (event,) = memory_delegate.failures
        assert event.msg == "boom"
        assert event.reason == "profile"
        assert caplog.records[-1].getMessage() == "🚫 fetch_user[profile] => failed:boom"

    @pytest.mark.asyncio
    async def test_synchronous_raise_inside_factory_is_captured(self, analytics, memory_delegate):
        def factory():
            raise LookupError("no coroutine")

        assert await analytics.future(factory) is None
        assert memory_delegate.failures[0].msg == "no coroutine"

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, analytics):
        async def cancelled():
            raise asyncio.CancelledError

        with pytest.raises(asyncio.CancelledError):
            await analytics.future(cancelled)


class TestCallAsync:
    @pytest.mark.asyncio
    async def test_reports_success_and_failure(self, analytics, memory_delegate):
        await analytics.call_async(lambda: _value(None), name="refresh")
        await analytics.call_async(lambda: _fail("offline"), name="refresh", msg="sync")

        assert memory_delegate.logs[0].sign == CallKind.CALL_ASYNC.success_sign
        assert memory_delegate.failures[0].msg == "sync: offline"


class TestStream:
    @pytest.mark.asyncio
    async def test_passes_elements_through(self, analytics, memory_delegate):
        async def numbers():
            for number in range(3):
                yield number

        assert await _collect(analytics.stream(numbers, name="numbers")) == [0, 1, 2]
        (event,) = memory_delegate.logs
        assert event.sign == CallKind.STREAM.success_sign

    @pytest.mark.asyncio
    async def test_accepts_plain_and_awaitable_iterables(self, analytics, memory_delegate):
        async def load():
            return ["a", "b"]

        assert await _collect(analytics.stream(lambda: iter([1, 2]))) == [1, 2]
        assert await _collect(analytics.stream(load)) == ["a", "b"]
        assert len(memory_delegate.logs) == 2

    @pytest.mark.asyncio
    async def test_failure_yields_single_none_then_ends(self, analytics, memory_delegate, caplog):
        async def broken():
            yield 1
            raise ValueError("stream cut")

        assert await _collect(analytics.stream(broken, name="feed")) == [1, None]
        (event,) = memory_delegate.failures
        assert event.msg == "stream cut"
        assert caplog.records[-1].getMessage() == "🚧 feed => failed:stream cut"

    @pytest.mark.asyncio
    async def test_failing_producer(self, analytics, memory_delegate):
        def producer():
            raise RuntimeError("no source")

        assert await _collect(analytics.stream(producer)) == [None]
        assert memory_delegate.failures[0].name == "stream"


class TestScheduledForwarding:
    @pytest.mark.asyncio
    async def test_sync_operation_inside_loop_forwards_in_background(self, analytics, memory_delegate):
        analytics.event("signup")

        assert memory_delegate.events == []
        await analytics.flush()
        assert [event.name for event in memory_delegate.events] == ["signup"]

    @pytest.mark.asyncio
    async def test_report_error_awaits_delegate(self, analytics, memory_delegate):
        report = TrackedError(msg="crash", type=ErrorType.WIDGET)

        await analytics.report_error(report)

        assert memory_delegate.errors == [report]


class TestReportingFailures:
    @pytest.mark.asyncio
    async def test_future_returns_value_when_reporting_fails(self, analytics, memory_delegate, monkeypatch):
        def explode(cls, *args, **kwargs):
            raise RuntimeError("cannot build record")

        monkeypatch.setattr(TrackedEvent, "create", classmethod(explode))

        assert await analytics.future(lambda: _value("user"), name="fetch_user") == "user"
        assert memory_delegate.logs == []
