"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Optional, Tuple

from ...core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (26, 26, 26)
GRID_COLOR = (45, 45, 45)
SNAKE_HEAD_COLOR = (144, 238, 144)
SNAKE_BODY_COLOR = (120, 210, 120)
SNAKE_OUTLINE_COLOR = (0, 100, 0)
FOOD_COLOR = (255, 0, 0)
TEXT_COLOR = (220, 220, 220)


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake game using Pygame, implementing RendererInterface.

    Draws into a rectangular area of any surface, so the same renderer
    works for a standalone window or an embedded panel.
    """

    def __init__(
        self,
        cell_size: int = 20,
        grid_width: int = 20,
        grid_height: int = 20
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            grid_width: Grid width in cells
            grid_height: Grid height in cells
        """
        self._cell_size = cell_size
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._offset_x = 0
        self._offset_y = 0

    @property
    def cell_size(self) -> int:
        return self._cell_size

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._grid_width * self._cell_size, self._grid_height * self._cell_size)

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area where this renderer should draw."""
        self._offset_x = x
        self._offset_y = y
        # Adjust cell size to fit the area
        cell_w = width // self._grid_width
        cell_h = height // self._grid_height
        self._cell_size = max(1, min(cell_w, cell_h))

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        """Get the pixel rectangle of a grid cell."""
        return pygame.Rect(
            self._offset_x + x * self._cell_size,
            self._offset_y + y * self._cell_size,
            self._cell_size,
            self._cell_size
        )

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from GameSnapshot.to_dict()
            surface: Pygame surface to draw on
        """
        width = game_state.get("width", self._grid_width)
        height = game_state.get("height", self._grid_height)

        game_width = width * self._cell_size
        game_height = height * self._cell_size

        # Draw background
        game_rect = pygame.Rect(
            self._offset_x, self._offset_y,
            game_width, game_height
        )
        pygame.draw.rect(surface, DARK_GRAY, game_rect)

        # Draw grid lines (subtle)
        for x in range(width + 1):
            start = (self._offset_x + x * self._cell_size, self._offset_y)
            end = (self._offset_x + x * self._cell_size, self._offset_y + game_height)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        for y in range(height + 1):
            start = (self._offset_x, self._offset_y + y * self._cell_size)
            end = (self._offset_x + game_width, self._offset_y + y * self._cell_size)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        # Draw food (circle centered on its tile)
        food = game_state.get("food")
        if food is not None:
            half = self._cell_size // 2
            center = (
                self._offset_x + food["x"] * self._cell_size + half,
                self._offset_y + food["y"] * self._cell_size + half,
            )
            pygame.draw.circle(surface, FOOD_COLOR, center, half)

        # Draw snake
        for i, segment in enumerate(game_state.get("snake", [])):
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            seg_rect = self.cell_rect(segment["x"], segment["y"])
            pygame.draw.rect(surface, color, seg_rect)
            pygame.draw.rect(surface, SNAKE_OUTLINE_COLOR, seg_rect, 1)

            if i == 0:
                self._draw_eyes(surface, segment, game_state.get("direction", 0))

    def _draw_eyes(self, surface: pygame.Surface, head: Dict[str, int], direction: int):
        """Draw eyes on the snake's head."""
        cx = self._offset_x + head["x"] * self._cell_size + self._cell_size // 2
        cy = self._offset_y + head["y"] * self._cell_size + self._cell_size // 2

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        # Position eyes based on direction
        if direction == 0:  # RIGHT
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == 1:  # DOWN
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == 2:  # LEFT
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:  # UP
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)


class StandaloneRenderer(SnakeRenderer):
    """
    Snake renderer with its own window.
    Used for human play mode.
    """

    PADDING = 40
    FOOTER = 80

    def __init__(
        self,
        grid_width: int = 20,
        grid_height: int = 20,
        cell_size: int = 20,
        title: str = "Snake"
    ):
        """
        Initialize standalone renderer with its own window.

        Args:
            grid_width: Grid width in cells
            grid_height: Grid height in cells
            cell_size: Size of each cell in pixels
            title: Window title
        """
        super().__init__(cell_size, grid_width, grid_height)

        self.window_width = grid_width * cell_size + self.PADDING * 2
        self.window_height = grid_height * cell_size + self.PADDING * 2 + self.FOOTER

        pygame.init()
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)

        self._offset_x = self.PADDING
        self._offset_y = self.PADDING
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 28)

    def render_frame(self, game_state: Dict[str, Any], message: Optional[str] = None) -> None:
        """
        Draw a full frame: board, score line and an optional message.

        Args:
            game_state: Dictionary from GameSnapshot.to_dict()
            message: Centered overlay text (e.g. game over)
        """
        self.surface.fill(BLACK)
        self.render(game_state, self.surface)

        self._blit_centered(
            self.font.render(f"Score: {game_state['score']}", True, TEXT_COLOR),
            self.window_height - 70
        )
        self._blit_centered(
            self.small_font.render(f"High Score: {game_state.get('high_score', 0)}", True, (150, 150, 150)),
            self.window_height - 40
        )

        if message:
            self._blit_centered(
                self.font.render(message, True, (255, 100, 100)),
                self.window_height // 2 - 60
            )

        pygame.display.flip()

    def _blit_centered(self, text: pygame.Surface, y: int) -> None:
        self.surface.blit(text, (self.window_width // 2 - text.get_width() // 2, y))

    def close(self):
        """Close the renderer and pygame."""
        pygame.quit()
