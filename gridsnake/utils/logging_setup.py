"""
Logging setup - Rich console output plus an optional log file.
"""
import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from .config_loader import LoggingConfig


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: Optional["LoggingConfig"] = None, console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the gridsnake logger.

    Args:
        config: Level and optional log file (defaults to INFO, console only)
        console: Rich console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    level_name = (config.level if config else "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'")

    logger = logging.getLogger("gridsnake")
    logger.setLevel(level)

    # Replace handlers from an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    log_file = config.log_file if config else None
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
