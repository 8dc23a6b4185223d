"""
Abstract scheduler interface for gridsnake.

Decouples the simulation from any particular timer mechanism: the engine's
tick is handed to a scheduler, and the returned task is the cancellation
handle.
"""

from abc import ABC, abstractmethod
from typing import Callable


class ScheduledTask:
    """A repeating callback registered with a scheduler."""

    def __init__(self, interval_ms: int, callback: Callable[[], None], due_at: int):
        if interval_ms <= 0:
            raise ValueError(f"Interval must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.callback = callback
        self.due_at = due_at
        self.cancelled = False

    def cancel(self) -> None:
        """Stop further firings. Safe to call more than once."""
        self.cancelled = True

    def fire(self) -> None:
        """Run the callback and move the deadline one interval forward."""
        self.due_at += self.interval_ms
        self.callback()


class SchedulerInterface(ABC):
    """Runs callbacks at a fixed interval."""

    @abstractmethod
    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """
        Call callback every interval_ms milliseconds until cancelled.

        Args:
            interval_ms: Interval between calls, must be positive
            callback: Zero-argument callable

        Returns:
            ScheduledTask used to cancel the schedule
        """
        pass
