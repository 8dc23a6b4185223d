"""
Abstract game interface for gridsnake.

The engine owns its session state; collaborators only read snapshots and
receive change notifications through GameListener.
"""

from abc import ABC, abstractmethod
from typing import Any


class GameListener:
    """
    Receives change notifications from a game.

    Hooks are called synchronously at the end of the operation that
    triggered them. Subclasses override only the hooks they need.
    """

    def on_session_started(self, snapshot: Any) -> None:
        """Called after start() has reset the session."""
        pass

    def on_tick(self, snapshot: Any) -> None:
        """Called after a tick has been applied (redraw point)."""
        pass

    def on_game_over(self, snapshot: Any, reason: Any) -> None:
        """
        Called once when the session ends by collision or a full board.

        Args:
            snapshot: Final, last valid state; snapshot.score is the final score
            reason: Why the session ended
        """
        pass


class GameInterface(ABC):
    """
    Abstract base class for tick-driven games.

    A scheduler calls tick() at a fixed cadence, input handlers call
    request_direction() between ticks, and renderers read get_snapshot().
    """

    @abstractmethod
    def start(self) -> bool:
        """
        Begin a new session.

        Returns:
            True if a new session was started
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """End the current session without a game-over notification."""
        pass

    @abstractmethod
    def tick(self) -> None:
        """Advance the simulation by one discrete step."""
        pass

    @abstractmethod
    def request_direction(self, candidate: Any) -> bool:
        """
        Queue a direction change for the next tick.

        Returns:
            True if the request was accepted, False if it was ignored
        """
        pass

    @abstractmethod
    def get_snapshot(self) -> Any:
        """
        Get a read-only view of the current state for rendering.

        Returns:
            Snapshot valid until the next mutation
        """
        pass

    @property
    @abstractmethod
    def running(self) -> bool:
        """Whether a session is in progress."""
        pass

    @abstractmethod
    def add_listener(self, listener: GameListener) -> None:
        """Register a listener for change notifications."""
        pass

    @abstractmethod
    def remove_listener(self, listener: GameListener) -> None:
        """Unregister a previously added listener."""
        pass
