"""
Grid model - the discrete coordinate space the snake lives on.
"""

import random
from dataclasses import dataclass
from typing import Dict, Iterator, Optional


@dataclass(frozen=True)
class Cell:
    """A cell on the game grid."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Cell":
        """Return the cell displaced by (dx, dy)."""
        return Cell(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


class GridModel:
    """Fixed width x height grid of cells. Stateless apart from its size."""

    def __init__(self, width: int = 20, height: int = 20):
        """
        Initialize the grid.

        Args:
            width: Grid width in cells
            height: Grid height in cells
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def contains(self, cell: Cell) -> bool:
        """Check if a cell lies inside the grid."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def random_cell(self, rng: Optional[random.Random] = None) -> Cell:
        """
        Draw a cell uniformly from the whole grid.

        Args:
            rng: Random source (defaults to the module-level generator)
        """
        rng = rng or random
        return Cell(rng.randrange(self.width), rng.randrange(self.height))

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(x, y)
