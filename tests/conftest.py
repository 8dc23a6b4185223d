"""
Pytest configuration and fixtures for gridsnake tests.

This module sets up pygame mocking to allow testing the renderer and the
pygame scheduler without requiring a display or actual pygame initialization.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


def create_mock_pygame():
    """Create a mock of the parts of pygame gridsnake uses."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 480
    mock_surface.get_height.return_value = 560
    mock_pygame.display.set_mode.return_value = mock_surface

    # Fonts
    mock_font = MagicMock()
    mock_text = MagicMock()
    mock_text.get_width.return_value = 100
    mock_font.render.return_value = mock_text
    mock_pygame.font.Font.return_value = mock_font

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114

    # Time
    mock_pygame.time.get_ticks.return_value = 0

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before the renderer or pygame scheduler are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def mock_screen(mock_pygame_module):
    """Provide a mock pygame screen surface."""
    screen = MagicMock()
    screen.get_width.return_value = 480
    screen.get_height.return_value = 560
    return screen


@pytest.fixture
def snake_config():
    """Default 20x20 configuration with a fixed seed."""
    from gridsnake.games.snake.config import SnakeConfig

    return SnakeConfig(seed=1234)


@pytest.fixture
def engine(snake_config):
    """A started engine with the initial snake at (6,10),(5,10),(4,10)."""
    from gridsnake.games.snake.engine import SnakeEngine

    game = SnakeEngine(snake_config)
    game.start()
    return game


@pytest.fixture
def recorder():
    """Listener that records every notification it receives."""
    from gridsnake.core.game_interface import GameListener

    class Recorder(GameListener):
        def __init__(self):
            self.events = []

        def on_session_started(self, snapshot):
            self.events.append(("started", snapshot))

        def on_tick(self, snapshot):
            self.events.append(("tick", snapshot))

        def on_game_over(self, snapshot, reason):
            self.events.append(("game_over", snapshot, reason))

        def names(self):
            return [e[0] for e in self.events]

    return Recorder()
