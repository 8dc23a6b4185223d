"""
Snake game configuration.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional, Tuple


RESTART_FORCE = "force"
RESTART_IGNORE = "ignore"
RESTART_POLICIES = (RESTART_FORCE, RESTART_IGNORE)

# Head column of the initial snake when start_x is not configured,
# clamped to the last column on narrow grids
DEFAULT_HEAD_COLUMN = 6


@dataclass
class SnakeConfig:
    """Configuration for the Snake engine."""

    # Grid dimensions
    grid_width: int = 20
    grid_height: int = 20

    # Initial snake, laid out horizontally behind the head
    initial_length: int = 3
    start_x: Optional[int] = None
    start_y: Optional[int] = None

    # Session rules
    restart_policy: str = RESTART_FORCE
    allow_tail_chase: bool = False
    seed: Optional[int] = None

    # Scheduler
    tick_interval_ms: int = 100

    def start_cell(self) -> Tuple[int, int]:
        """Get the (x, y) cell of the initial head."""
        x = self.start_x if self.start_x is not None else min(DEFAULT_HEAD_COLUMN, self.grid_width - 1)
        y = self.start_y if self.start_y is not None else self.grid_height // 2
        return x, y

    def validate(self) -> "SnakeConfig":
        """
        Check the configuration describes a playable game.

        Returns:
            self, for chaining

        Raises:
            ValueError: If any setting is out of range
        """
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(f"Grid size must be positive, got {self.grid_width}x{self.grid_height}")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be at least 1, got {self.initial_length}")
        if self.restart_policy not in RESTART_POLICIES:
            raise ValueError(
                f"Unknown restart_policy '{self.restart_policy}', expected one of {RESTART_POLICIES}"
            )
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")

        x, y = self.start_cell()
        tail_x = x - (self.initial_length - 1)
        if not (0 <= tail_x and x < self.grid_width and 0 <= y < self.grid_height):
            raise ValueError(
                f"Initial snake of length {self.initial_length} at ({x}, {y}) "
                f"does not fit a {self.grid_width}x{self.grid_height} grid"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from dictionary, ignoring unknown keys."""
        field_names = set(cls.__dataclass_fields__)
        return cls(**{k: v for k, v in (data or {}).items() if k in field_names})
