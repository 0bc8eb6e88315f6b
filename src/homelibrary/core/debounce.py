# ABOUTME: Async debouncer that commits only the last value submitted within a quiet period.
# ABOUTME: A newer submission cancels the pending commit task instead of letting it fire.

import asyncio
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_DELAY_SECONDS = 0.3


class Debouncer(Generic[T]):
    """Delay commits until input has been quiet for `delay` seconds.

    submit() must be called from a running event loop. Each call cancels
    the pending commit, if any, and schedules a new one, so a burst of
    submissions commits only its final value.
    """

    def __init__(
        self, on_commit: Callable[[T], None], delay: float = DEFAULT_DELAY_SECONDS
    ) -> None:
        self.delay = delay
        self._on_commit = on_commit
        self._task: asyncio.Task[None] | None = None
        self._pending_value: T | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def submit(self, value: T) -> None:
        self.cancel()
        self._pending_value = value
        self._task = asyncio.get_running_loop().create_task(self._commit_later(value))

    def cancel(self) -> None:
        """Drop the pending commit without firing it."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._pending_value = None

    def flush(self) -> None:
        """Commit the pending value now instead of waiting out the delay."""
        if not self.pending:
            return
        value = self._pending_value
        self.cancel()
        self._on_commit(value)  # type: ignore[arg-type]

    async def wait(self) -> None:
        """Wait for the pending commit, if any, to fire or be cancelled."""
        if self._task is not None:
            await asyncio.wait({self._task})

    async def _commit_later(self, value: T) -> None:
        await asyncio.sleep(self.delay)
        self._task = None
        self._pending_value = None
        self._on_commit(value)
