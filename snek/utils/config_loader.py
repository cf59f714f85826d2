"""
Configuration Loader - Load and validate configuration from YAML.

Reads config.yaml from the working directory or the project root:

    game:      board size, tile size, speed, initial pause
    logging:   log level and optional log file
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict

from ..game.config import GameSettings, ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.level, str) or self.level.upper() not in LOG_LEVELS:
            raise ConfigError(f"logging level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}")
        self.level = self.level.upper()


@dataclass
class Config:
    """Complete application configuration."""
    game: GameSettings = field(default_factory=GameSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game": self.game.to_dict(),
            "logging": asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """
        Build a config from parsed YAML.

        Raises:
            ConfigError: If a section is not a mapping or a value is invalid
        """
        if not isinstance(data, dict):
            raise ConfigError(f"configuration root must be a mapping, got {type(data).__name__}")

        config = cls()

        if 'game' in data:
            config.game = GameSettings.from_dict(_section(data, 'game'))

        if 'logging' in data:
            config.logging = _dict_to_dataclass(_section(data, 'logging'), LoggingConfig)

        return config


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' section must be a mapping, got {type(section).__name__}")
    return section


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Find config.yaml in common locations."""
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
        config_path: Path to config file (defaults to config.yaml in the
            working directory or the project root)

    Returns:
        Config object with all settings

    Raises:
        ConfigError: If the file contents are invalid
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    config = Config.from_dict(data)
    logger.debug("Loaded config from %s", path)
    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    with open(config_path, 'w') as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
