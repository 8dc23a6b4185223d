"""
Manual Scheduler - Virtual clock advanced explicitly by the caller.
"""

from typing import Callable, List

from ..core.scheduler_interface import SchedulerInterface, ScheduledTask


class ManualScheduler(SchedulerInterface):
    """
    Scheduler driven by advance() instead of wall-clock time.

    Every elapsed interval fires its task once, so advancing by 350ms with a
    100ms task fires it three times.
    """

    def __init__(self):
        self.now = 0
        self.tasks: List[ScheduledTask] = []

    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(interval_ms, callback, due_at=self.now + interval_ms)
        self.tasks.append(task)
        return task

    def advance(self, ms: int) -> int:
        """
        Move the clock forward and fire every task that falls due.

        Args:
            ms: Milliseconds to advance

        Returns:
            Number of callbacks fired
        """
        target = self.now + ms
        fired = 0

        while True:
            self.tasks = [t for t in self.tasks if not t.cancelled]
            due = [t for t in self.tasks if t.due_at <= target]
            if not due:
                break

            # Earliest deadline first, schedule order breaks ties
            task = min(due, key=lambda t: t.due_at)
            self.now = task.due_at
            task.fire()
            fired += 1

        self.now = target
        return fired

    @property
    def active_tasks(self) -> int:
        """Number of tasks that have not been cancelled."""
        return sum(1 for t in self.tasks if not t.cancelled)
