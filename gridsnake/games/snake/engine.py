"""
Snake Engine - Pure game logic without rendering.

One engine owns one GameSession at a time. An external scheduler calls
tick() at a fixed cadence, input handlers call request_direction() between
ticks, and renderers read get_snapshot() after each notification.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Tuple, Optional, Dict, Any, Union

import numpy as np

from ...core.game_interface import GameInterface, GameListener
from .config import SnakeConfig, RESTART_IGNORE
from .grid import Cell, GridModel


logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def vector(self) -> Tuple[int, int]:
        """Unit velocity (dx, dy) in cells per tick."""
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    @classmethod
    def from_name(cls, name: str) -> Optional["Direction"]:
        """Look up a direction by symbolic name ("up", "Left", ...)."""
        return cls.__members__.get(name.strip().upper())

    @classmethod
    def from_vector(cls, vector: Tuple[int, int]) -> Optional["Direction"]:
        for direction, vec in _VECTORS.items():
            if vec == tuple(vector):
                return direction
        return None


_VECTORS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


class GameOverReason(Enum):
    """Why a session ended."""
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


@dataclass
class GameSession:
    """Mutable state of one game, owned by SnakeEngine."""
    snake: List[Cell]
    direction: Direction = Direction.RIGHT
    food: Optional[Cell] = None
    score: int = 0
    running: bool = True
    direction_changed: bool = False
    ticks: int = 0
    game_over_reason: Optional[GameOverReason] = None


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a session, handed to renderers and listeners."""
    segments: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    running: bool
    direction: Direction
    width: int
    height: int
    ticks: int = 0
    high_score: int = 0
    game_over_reason: Optional[GameOverReason] = None

    @property
    def head(self) -> Optional[Cell]:
        return self.segments[0] if self.segments else None

    @property
    def game_over(self) -> bool:
        return self.game_over_reason is not None

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the snapshot in renderer format.

        Returns:
            Dictionary containing full game state
        """
        return {
            "snake": [c.to_dict() for c in self.segments],
            "food": self.food.to_dict() if self.food else None,
            "direction": int(self.direction),
            "score": self.score,
            "high_score": self.high_score,
            "running": self.running,
            "game_over": self.game_over,
            "reason": self.game_over_reason.value if self.game_over_reason else None,
            "frame": self.ticks,
            "width": self.width,
            "height": self.height,
        }

    def to_array(self) -> np.ndarray:
        """
        Encode the board as a (3, height, width) float32 array.

        Channel 0 is the body (all segments), channel 1 the head and
        channel 2 the food.
        """
        planes = np.zeros((3, self.height, self.width), dtype=np.float32)
        for cell in self.segments:
            if 0 <= cell.x < self.width and 0 <= cell.y < self.height:
                planes[0, cell.y, cell.x] = 1.0
        head = self.head
        if head is not None and 0 <= head.x < self.width and 0 <= head.y < self.height:
            planes[1, head.y, head.x] = 1.0
        if self.food is not None:
            planes[2, self.food.y, self.food.x] = 1.0
        return planes


DirectionLike = Union[Direction, str, Tuple[int, int]]


class SnakeEngine(GameInterface):
    """
    Core Snake game logic.

    The snake moves one cell per tick and grows by one segment for each
    food item eaten. The session ends when the new head would leave the
    grid or land on the snake's own body.
    """

    def __init__(self, config: Optional[SnakeConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the engine. No session exists until start() is called.

        Args:
            config: Engine configuration (defaults to SnakeConfig())
            rng: Random source for food placement (defaults to one seeded from config.seed)
        """
        self.config = (config or SnakeConfig()).validate()
        self.grid = GridModel(self.config.grid_width, self.config.grid_height)
        self.random = rng or random.Random(self.config.seed)
        self.high_score = 0

        self._session: Optional[GameSession] = None
        self._listeners: List[GameListener] = []

    @property
    def session(self) -> Optional[GameSession]:
        """The current or most recent session, None before the first start()."""
        return self._session

    @property
    def running(self) -> bool:
        return self._session is not None and self._session.running

    @property
    def velocity(self) -> Tuple[int, int]:
        """Current unit velocity (dx, dy)."""
        direction = self._session.direction if self._session else Direction.RIGHT
        return direction.vector

    def add_listener(self, listener: GameListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def start(self) -> bool:
        """
        Begin a new session.

        With restart_policy "ignore" a call while a session is running does
        nothing; with "force" the running session is discarded.

        Returns:
            True if a new session was started
        """
        if self.running and self.config.restart_policy == RESTART_IGNORE:
            logger.debug("start() ignored: session already running")
            return False

        head_x, head_y = self.config.start_cell()
        snake = [Cell(head_x - i, head_y) for i in range(self.config.initial_length)]
        session = GameSession(snake=snake, direction=Direction.RIGHT)
        self._session = session
        placed = self.place_food()

        logger.info(
            "Session started on %dx%d grid, head at (%d, %d)",
            self.grid.width, self.grid.height, head_x, head_y,
        )
        if not placed:
            self._finish(GameOverReason.BOARD_FULL)

        self._emit("on_session_started", self.get_snapshot())
        self._announce_game_over(session)
        return True

    def stop(self) -> None:
        """End the running session quietly. Does nothing when not running."""
        if not self.running:
            return
        self._session.running = False
        logger.info("Session stopped at score %d", self._session.score)

    def request_direction(self, candidate: DirectionLike) -> bool:
        """
        Queue a direction change for the next tick.

        Only the first accepted request per tick takes effect. Requests for
        the current direction, its opposite, or an unknown direction are
        ignored and do not use up the tick's change.

        Args:
            candidate: Direction, symbolic name, or unit vector

        Returns:
            True if the direction was changed
        """
        session = self._session
        if session is None or not session.running:
            return False

        if session.direction_changed:
            logger.debug("Direction request %r ignored: already changed this tick", candidate)
            return False

        direction = self._coerce_direction(candidate)
        if direction is None:
            logger.debug("Direction request %r ignored: unknown direction", candidate)
            return False

        if direction == session.direction or direction == session.direction.opposite:
            return False

        session.direction = direction
        session.direction_changed = True
        return True

    def tick(self) -> None:
        """Advance the snake one cell; no-op when not running."""
        session = self._session
        if session is None or not session.running:
            return

        dx, dy = session.direction.vector
        new_head = session.snake[0].offset(dx, dy)

        reason = self._collision(new_head)
        if reason is not None:
            self._finish(reason)
            self._announce_game_over(session)
            return

        session.snake.insert(0, new_head)

        if new_head == session.food:
            # Food eaten: keep the tail so the snake grows
            session.score += 1
            self.high_score = max(self.high_score, session.score)
            if not self.place_food():
                self._finish(GameOverReason.BOARD_FULL)
        else:
            session.snake.pop()

        session.direction_changed = False
        session.ticks += 1

        self._emit("on_tick", self.get_snapshot())
        self._announce_game_over(session)

    def place_food(self) -> bool:
        """
        Place food on a random cell not occupied by the snake.

        Returns:
            False if the snake covers the whole grid (food is cleared)
        """
        session = self._session
        occupied = set(session.snake)

        for _ in range(self.grid.size):
            cell = self.grid.random_cell(self.random)
            if cell not in occupied:
                session.food = cell
                return True

        # Fallback: pick among the remaining empty cells (board nearly full)
        free = [cell for cell in self.grid.cells() if cell not in occupied]
        if free:
            logger.debug("Food placed by scan, %d free cells left", len(free))
            session.food = self.random.choice(free)
            return True

        logger.warning("No free cell left for food")
        session.food = None
        return False

    def get_snapshot(self) -> GameSnapshot:
        session = self._session
        if session is None:
            return GameSnapshot(
                segments=(),
                food=None,
                score=0,
                running=False,
                direction=Direction.RIGHT,
                width=self.grid.width,
                height=self.grid.height,
                high_score=self.high_score,
            )

        return GameSnapshot(
            segments=tuple(session.snake),
            food=session.food,
            score=session.score,
            running=session.running,
            direction=session.direction,
            width=self.grid.width,
            height=self.grid.height,
            ticks=session.ticks,
            high_score=self.high_score,
            game_over_reason=session.game_over_reason,
        )

    def _collision(self, point: Cell) -> Optional[GameOverReason]:
        """
        Check the next head position against walls and the pre-move body.

        The tail cell counts as occupied unless allow_tail_chase is set and
        the tail is about to move away (no food at point).
        """
        if not self.grid.contains(point):
            return GameOverReason.WALL

        body = self._session.snake
        if self.config.allow_tail_chase and point != self._session.food:
            body = body[:-1]

        if point in body:
            return GameOverReason.SELF
        return None

    def _finish(self, reason: GameOverReason) -> None:
        session = self._session
        session.running = False
        session.game_over_reason = reason
        logger.info("Game over (%s), final score %d", reason.value, session.score)

    def _announce_game_over(self, session: GameSession) -> None:
        # A listener may have started a new session while handling an earlier hook
        if session is not self._session or session.game_over_reason is None:
            return
        self._emit("on_game_over", self.get_snapshot(), session.game_over_reason)

    def _emit(self, hook: str, *args) -> None:
        for listener in list(self._listeners):
            getattr(listener, hook)(*args)

    @staticmethod
    def _coerce_direction(candidate: DirectionLike) -> Optional[Direction]:
        if isinstance(candidate, Direction):
            return candidate
        if isinstance(candidate, str):
            return Direction.from_name(candidate)
        if isinstance(candidate, (tuple, list)) and len(candidate) == 2:
            return Direction.from_vector(candidate)
        return None
