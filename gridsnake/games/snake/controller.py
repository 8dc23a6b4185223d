"""
Game Controller - Binds the engine to a scheduler and symbolic input.
"""
import logging
from typing import Optional

from ...core.game_interface import GameListener
from ...core.scheduler_interface import SchedulerInterface, ScheduledTask
from .config import SnakeConfig
from .engine import SnakeEngine, GameSnapshot, GameOverReason


logger = logging.getLogger(__name__)

DIRECTION_SYMBOLS = ("up", "down", "left", "right")
RESTART_SYMBOL = "restart"


class GameController(GameListener):
    """
    Drives a SnakeEngine from a fixed-interval scheduler.

    start() (re)starts the engine and schedules its tick; the schedule is
    cancelled on game over or stop().
    """

    def __init__(
        self,
        scheduler: SchedulerInterface,
        config: Optional[SnakeConfig] = None,
        engine: Optional[SnakeEngine] = None,
    ):
        """
        Initialize the controller.

        Args:
            scheduler: Scheduler that will call engine.tick
            config: Engine configuration, ignored when engine is given
            engine: Pre-built engine (defaults to SnakeEngine(config))
        """
        self.engine = engine or SnakeEngine(config)
        self.scheduler = scheduler
        self._task: Optional[ScheduledTask] = None
        self.engine.add_listener(self)

    @property
    def snapshot(self) -> GameSnapshot:
        return self.engine.get_snapshot()

    @property
    def is_scheduled(self) -> bool:
        """Whether the tick timer is active."""
        return self._task is not None and not self._task.cancelled

    def start(self) -> bool:
        """
        Start or restart a session and its tick timer.

        Returns:
            True if the engine started a new session
        """
        if not self.engine.start():
            return False

        self._cancel_timer()
        if self.engine.running:
            self._task = self.scheduler.schedule_repeating(
                self.engine.config.tick_interval_ms, self.engine.tick
            )
        return True

    def stop(self) -> None:
        """Stop the session and cancel the tick timer."""
        self._cancel_timer()
        self.engine.stop()

    def handle_input(self, symbol: str) -> bool:
        """
        Apply a symbolic input event.

        Args:
            symbol: "up", "down", "left", "right" or "restart"

        Returns:
            True if the input changed the game
        """
        symbol = symbol.lower()
        if symbol == RESTART_SYMBOL:
            return self.start()
        if symbol in DIRECTION_SYMBOLS:
            return self.engine.request_direction(symbol)
        logger.debug("Ignoring unknown input %r", symbol)
        return False

    def on_game_over(self, snapshot: GameSnapshot, reason: GameOverReason) -> None:
        self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
