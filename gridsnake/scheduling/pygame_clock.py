"""
Pygame Scheduler - Repeating callbacks polled from a pygame main loop.
"""

from typing import Callable, List, Optional

import pygame

from ..core.scheduler_interface import SchedulerInterface, ScheduledTask


class PygameScheduler(SchedulerInterface):
    """
    Fires due tasks when poll() is called once per frame.

    A task fires at most once per poll; if a frame stalls past several
    intervals the missed ticks are dropped rather than replayed.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """
        Initialize the scheduler.

        Args:
            clock: Millisecond clock (defaults to pygame.time.get_ticks)
        """
        self._clock = clock or pygame.time.get_ticks
        self.tasks: List[ScheduledTask] = []

    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(interval_ms, callback, due_at=self._clock() + interval_ms)
        self.tasks.append(task)
        return task

    def poll(self) -> int:
        """
        Fire every task whose deadline has passed.

        Returns:
            Number of callbacks fired
        """
        now = self._clock()
        fired = 0

        for task in list(self.tasks):
            if task.cancelled or task.due_at > now:
                continue
            task.fire()
            fired += 1
            if task.due_at <= now:
                task.due_at = now + task.interval_ms

        self.tasks = [t for t in self.tasks if not t.cancelled]
        return fired
