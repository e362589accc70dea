"""Configuration management for Findrr."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(levelname)s: %(message)s"
    file: str | None = None


class FindrrConfig(BaseModel):
    """Main Findrr configuration."""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Loads and saves runtime settings from an explicit YAML file."""

    def __init__(self, config_path: Path | None = None):
        """Initialize config manager."""
        self.config_path = config_path
        self._config: FindrrConfig | None = None

    def load(self) -> FindrrConfig:
        """Load configuration from file, or use defaults.

        Defaults are used when no path was given, the file does not exist,
        or its contents are not valid settings.
        """
        if self.config_path is None:
            self._config = FindrrConfig()
        elif not self.config_path.exists():
            logger.warning(f"Config file not found at {self.config_path}, using defaults")
            self._config = FindrrConfig()
        else:
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                self._config = FindrrConfig(**data)
            except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
                logger.warning(f"Error loading config from {self.config_path}: {e}")
                logger.warning("Using default configuration")
                self._config = FindrrConfig()

        return self._config

    def save(self, config: FindrrConfig | None = None) -> None:
        """Save configuration to file."""
        config_to_save = config or self._config
        if config_to_save is None:
            raise ValueError("No configuration to save")
        if self.config_path is None:
            raise ValueError("No configuration path to save to")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        data = config_to_save.model_dump()
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, indent=2)

    def get_config(self) -> FindrrConfig:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            self.load()
        return self._config


def load_config(config_path: Path | None = None) -> FindrrConfig:
    """Load configuration from a specific path, or defaults."""
    return ConfigManager(config_path).load()


def configure_logging(config: FindrrConfig, verbose: bool = False) -> None:
    """Set up root logging from settings.

    Messages go to stderr, and additionally to ``config.logging.file`` when
    one is configured and can be opened.
    """
    level = "DEBUG" if verbose else config.logging.level
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.logging.file:
        try:
            handlers.append(logging.FileHandler(config.logging.file, encoding="utf-8"))
        except OSError as e:
            logger.warning(f"Cannot open log file {config.logging.file}: {e}")

    logging.basicConfig(
        level=getattr(logging, level),
        format=config.logging.format,
        handlers=handlers,
    )
