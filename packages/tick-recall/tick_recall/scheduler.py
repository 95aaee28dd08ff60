"""TaskScheduler - registry of cancelable deferred callbacks."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from tick_recall.clock import Clock

logger = logging.getLogger(__name__)


@dataclass
class TaskHandle:
    """Token for one scheduled callback. Runs once, then leaves the registry."""

    task_id: int
    name: str
    due: int
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False


class TaskScheduler:
    """Owns every pending deferred action of a controller.

    Tasks fire from ``advance`` in due-tick order, ties broken by
    registration order. ``cancel_all`` drops the whole registry at once; a
    task cancelled while a batch is firing does not run.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._tasks: dict[int, TaskHandle] = {}
        self._next_id = 0

    @property
    def clock(self) -> Clock:
        return self._clock

    def schedule(
        self, delay_ticks: int, callback: Callable[[], None], name: str = ""
    ) -> TaskHandle:
        """Run *callback* once, *delay_ticks* ticks from now."""
        if delay_ticks < 1:
            raise ValueError(f"delay_ticks must be >= 1, got {delay_ticks}")
        handle = TaskHandle(
            task_id=self._next_id,
            name=name,
            due=self._clock.tick_number + delay_ticks,
            callback=callback,
        )
        self._next_id += 1
        self._tasks[handle.task_id] = handle
        logger.debug("scheduled %r for tick %d", name, handle.due)
        return handle

    def cancel(self, handle: TaskHandle) -> None:
        handle.cancelled = True
        self._tasks.pop(handle.task_id, None)

    def cancel_all(self) -> int:
        """Cancel every pending task. Returns how many were dropped."""
        dropped = list(self._tasks.values())
        self._tasks = {}
        for handle in dropped:
            handle.cancelled = True
        if dropped:
            logger.debug("cancelled %d pending task(s)", len(dropped))
        return len(dropped)

    def pending(self) -> int:
        return len(self._tasks)

    def is_pending(self, handle: TaskHandle) -> bool:
        return handle.task_id in self._tasks

    def handles(self) -> list[TaskHandle]:
        return sorted(self._tasks.values(), key=lambda h: (h.due, h.task_id))

    def advance(self, ticks: int = 1) -> int:
        """Advance the clock tick by tick, firing due tasks. Returns fired count."""
        fired = 0
        for _ in range(ticks):
            now = self._clock.advance()
            due = [h for h in self.handles() if h.due <= now]
            for handle in due:
                if handle.cancelled or handle.task_id not in self._tasks:
                    continue
                del self._tasks[handle.task_id]
                handle.callback()
                fired += 1
        return fired
