"""asyncio implementation of the Scheduler port."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = structlog.get_logger()


class AsyncioTimerHandle:
    """Cancellable handle for a callback scheduled on the running event loop.

    Cancelling only has an effect while the delay is still running. Once the
    callback has started it is left to finish.
    """

    def __init__(self) -> None:
        self.task: asyncio.Task[None] | None = None
        self.started = False
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self.started or self._cancelled:
            return
        self._cancelled = True
        if self.task is not None:
            self.task.cancel()


class AsyncioScheduler:
    """Runs delayed async callbacks as tasks on the current event loop."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[None]] = set()

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], Awaitable[None]],
    ) -> AsyncioTimerHandle:
        handle = AsyncioTimerHandle()
        task = asyncio.get_running_loop().create_task(self._run(handle, delay_seconds, callback))
        handle.task = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return handle

    async def drain(self) -> None:
        while pending := [task for task in self._tasks if not task.done()]:
            results = await asyncio.gather(*pending, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.error("scheduled_callback_failed", error=str(result))

    @staticmethod
    async def _run(
        handle: AsyncioTimerHandle,
        delay_seconds: float,
        callback: Callable[[], Awaitable[None]],
    ) -> None:
        await asyncio.sleep(max(delay_seconds, 0))
        handle.started = True
        await callback()
