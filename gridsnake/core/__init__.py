"""
Core abstractions for gridsnake.

Provides abstract interfaces that the engine, its renderers, and its schedulers implement.
"""

from .game_interface import GameInterface, GameListener
from .renderer_interface import RendererInterface
from .scheduler_interface import SchedulerInterface, ScheduledTask

__all__ = [
    'GameInterface',
    'GameListener',
    'RendererInterface',
    'SchedulerInterface',
    'ScheduledTask',
]
