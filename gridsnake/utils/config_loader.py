"""
Configuration Loader - Load and validate configuration from YAML.

A single config.yaml holds three sections:
- game: engine settings (SnakeConfig)
- visualization: window and drawing settings
- logging: log level and optional log file

Missing sections or keys fall back to defaults; unknown keys are ignored.
"""
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Any

import yaml

from ..games.snake.config import SnakeConfig


logger = logging.getLogger(__name__)


@dataclass
class VisualizationConfig:
    """Visualization settings."""
    cell_size: int = 20
    render_fps: int = 60
    window_title: str = "Snake"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: SnakeConfig = field(default_factory=SnakeConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def find_config_file() -> Optional[Path]:
    """Look for config.yaml in the working directory, then the project root."""
    possible_paths = [
        Path.cwd() / "config.yaml",
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml lookup)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If the game section describes an unplayable game
    """
    path = Path(config_path) if config_path else find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if not data:
        return Config()

    config = Config(
        game=SnakeConfig.from_dict(data.get('game') or {}),
        visualization=_dict_to_dataclass(data.get('visualization'), VisualizationConfig),
        logging=_dict_to_dataclass(data.get('logging'), LoggingConfig),
    )
    config.game.validate()

    logger.debug("Loaded config from %s", path)
    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
