#!/usr/bin/env python3
"""
Human Play Mode - Play the Snake game yourself.

Controls:
    Arrow Keys or WASD: Move the snake
    Space or R: Start / restart game
    ESC: Quit
"""
import sys
import os
import argparse
import logging
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'

import pygame

from gridsnake.games.snake import GameController, GameOverReason, GameSnapshot
from gridsnake.games.snake.renderer import StandaloneRenderer
from gridsnake.scheduling.pygame_clock import PygameScheduler
from gridsnake.utils.config_loader import load_config
from gridsnake.utils.logging_setup import setup_logging


logger = logging.getLogger("gridsnake.play_human")

KEY_BINDINGS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_SPACE: "restart",
    pygame.K_r: "restart",
}

GAME_OVER_TEXT = {
    GameOverReason.WALL: "Game Over!",
    GameOverReason.SELF: "Game Over!",
    GameOverReason.BOARD_FULL: "You Win!",
}


def overlay_message(snapshot: GameSnapshot) -> Optional[str]:
    """Get the centered overlay text for a snapshot, None while playing."""
    if snapshot.game_over:
        return f"{GAME_OVER_TEXT[snapshot.game_over_reason]} Final Score: {snapshot.score}"
    if not snapshot.running:
        return "Press Space to start"
    return None


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Play Snake with the keyboard")
    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to config.yaml (default: search cwd and project root)"
    )
    return parser.parse_args()


def main():
    """Main entry point for human play mode."""
    args = parse_args()
    config = load_config(args.config)
    setup_logging(config.logging)

    controller = GameController(PygameScheduler(), config.game)
    renderer = StandaloneRenderer(
        grid_width=config.game.grid_width,
        grid_height=config.game.grid_height,
        cell_size=config.visualization.cell_size,
        title=config.visualization.window_title
    )
    clock = pygame.time.Clock()

    logger.info("Arrow keys / WASD to move, Space or R to start, ESC to quit")

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in KEY_BINDINGS:
                    controller.handle_input(KEY_BINDINGS[event.key])

        controller.scheduler.poll()

        snapshot = controller.snapshot
        renderer.render_frame(snapshot.to_dict(), overlay_message(snapshot))
        clock.tick(config.visualization.render_fps)

    controller.stop()
    renderer.close()
    logger.info("High score: %d", controller.engine.high_score)


if __name__ == "__main__":
    main()
