"""
Fixed-interval schedulers.

ManualScheduler advances a virtual clock for deterministic tests.
PygameScheduler (gridsnake.scheduling.pygame_clock) is polled from a pygame
main loop and is imported separately so headless use never loads pygame.
"""

from .manual import ManualScheduler

__all__ = [
    'ManualScheduler',
]
