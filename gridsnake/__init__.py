# gridsnake Source Package
"""
gridsnake - Grid-based snake game engine.

Modules:
- core: Abstract interfaces for games, listeners, renderers, and schedulers
- games: Game implementations (Snake)
- scheduling: Fixed-interval schedulers (manual and pygame-driven)
- utils: Configuration and logging
"""

__version__ = "1.0.0"
