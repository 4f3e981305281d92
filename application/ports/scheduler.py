from collections.abc import Awaitable, Callable
from typing import Protocol


class TimerHandle(Protocol):
    """Handle to a callback scheduled with a Scheduler."""

    def cancel(self) -> None:
        """Prevent the callback from running if it has not started yet.

        A callback that already started keeps running; cancelling is a no-op.
        """
        ...

    @property
    def cancelled(self) -> bool: ...


class Scheduler(Protocol):
    """Port for delayed execution of async callbacks (debounce timers)."""

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], Awaitable[None]],
    ) -> TimerHandle:
        """Run `callback` once after `delay_seconds` unless cancelled first."""
        ...

    async def drain(self) -> None:
        """Wait until no scheduled callback is pending or running."""
        ...
