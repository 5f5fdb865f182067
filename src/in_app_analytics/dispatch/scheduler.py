"""Fire-and-forget execution of delegate forwarding for synchronous callers."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Coroutine

logger = logging.getLogger(__name__)


class DelegateScheduler:
    """Run reporting coroutines on behalf of synchronous entry points.

    Inside a running event loop the coroutine becomes a task that the
    scheduler keeps referenced until it finishes; the caller does not wait for
    it. Without a running loop the coroutine is run to completion on a private
    loop before :meth:`submit` returns; the event loop set for the thread, if
    any, is neither replaced nor cleared.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[Any]] = set()
        self._lock = threading.Lock()

    @property
    def pending(self) -> int:
        """Return the number of scheduled tasks that have not finished."""

        with self._lock:
            return sum(1 for task in self._tasks if not task.done())

    def submit(self, coro: Coroutine[Any, Any, Any]) -> None:
        """Schedule ``coro`` on the running loop, or run it to completion."""

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None:
            self._run_private(coro)
            return

        task = loop.create_task(coro)
        with self._lock:
            self._tasks.add(task)
        task.add_done_callback(self._discard)

    @staticmethod
    def _run_private(coro: Coroutine[Any, Any, Any]) -> None:
        """Run ``coro`` on a throwaway loop, leaving the thread's current loop alone."""

        loop = asyncio.new_event_loop()
        try:
            loop.run_until_complete(coro)
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            loop.close()

    async def drain(self) -> None:
        """Wait until every task scheduled on the current loop has finished."""

        loop = asyncio.get_running_loop()
        while True:
            with self._lock:
                pending = [task for task in self._tasks if not task.done() and task.get_loop() is loop]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    def _discard(self, task: asyncio.Task[Any]) -> None:
        with self._lock:
            self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Reporting task failed unexpectedly", exc_info=task.exception())


__all__ = ["DelegateScheduler"]
