"""Test configuration management functionality."""

import logging
from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from findrr.config.settings import (
    ConfigManager,
    FindrrConfig,
    LoggingConfig,
    configure_logging,
    load_config,
)


class TestConfigManager:
    """Test configuration manager functionality."""

    def test_defaults_without_path(self):
        """Test that no file is consulted when no path is given."""
        config = ConfigManager().load()

        assert isinstance(config, FindrrConfig)
        assert config.logging.level == "INFO"
        assert config.logging.file is None

    def test_missing_file_uses_defaults(self, temp_dir, caplog):
        """Test that a missing file falls back to defaults without creating it."""
        config_path = temp_dir / "missing.yaml"

        config = ConfigManager(config_path).load()

        assert config == FindrrConfig()
        assert not config_path.exists()
        assert "Config file not found" in caplog.text

    def test_save_and_load_config(self, temp_dir):
        """Test saving and loading configuration."""
        config_path = temp_dir / "nested" / "findrr.yaml"
        manager = ConfigManager(config_path)

        config = FindrrConfig(logging=LoggingConfig(level="DEBUG", file="out.log"))
        manager.save(config)
        assert config_path.exists()

        loaded = ConfigManager(config_path).load()
        assert loaded.logging.level == "DEBUG"
        assert loaded.logging.file == "out.log"

    def test_load_existing_config(self, temp_dir):
        """Test loading from a hand-written YAML file."""
        config_path = temp_dir / "existing.yaml"
        with open(config_path, "w") as f:
            yaml.dump({"logging": {"level": "WARNING", "format": "%(message)s"}}, f)

        config = load_config(config_path)

        assert config.logging.level == "WARNING"
        assert config.logging.format == "%(message)s"

    def test_empty_file_uses_defaults(self, temp_dir):
        """Test that an empty YAML document is treated as no overrides."""
        config_path = temp_dir / "empty.yaml"
        config_path.write_text("")

        assert load_config(config_path) == FindrrConfig()

    @pytest.mark.parametrize(
        "content",
        ["logging: {level: LOUD}", "logging: [1, 2", "- just\n- a list\n"],
    )
    def test_invalid_file_uses_defaults(self, temp_dir, caplog, content):
        """Test that unusable files fall back to defaults with a warning."""
        config_path = temp_dir / "bad.yaml"
        config_path.write_text(content)

        config = load_config(config_path)

        assert config == FindrrConfig()
        assert "Using default configuration" in caplog.text

    def test_save_without_config_raises(self, temp_dir):
        """Test that saving requires a configuration."""
        with pytest.raises(ValueError):
            ConfigManager(temp_dir / "x.yaml").save()

    def test_get_config_loads_lazily(self):
        """Test that get_config loads on first use."""
        manager = ConfigManager()
        assert manager.get_config() is manager.get_config()


class TestLoggingConfig:
    """Test logging settings validation and setup."""

    def test_level_validation(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="verbose")

    def test_configure_logging_levels(self, temp_dir):
        """Test that --verbose overrides the configured level."""
        config = FindrrConfig(logging=LoggingConfig(level="ERROR"))

        with patch("logging.basicConfig") as basic_config:
            configure_logging(config)
            assert basic_config.call_args.kwargs["level"] == logging.ERROR

            configure_logging(config, verbose=True)
            assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_configure_logging_file_handler(self, temp_dir):
        """Test that a configured log file gets its own handler."""
        log_file = temp_dir / "findrr.log"
        config = FindrrConfig(logging=LoggingConfig(file=str(log_file)))

        with patch("logging.basicConfig") as basic_config:
            configure_logging(config)

        handlers = basic_config.call_args.kwargs["handlers"]
        assert len(handlers) == 2
        assert isinstance(handlers[1], logging.FileHandler)
        for handler in handlers:
            handler.close()

    def test_configure_logging_unwritable_file(self, temp_dir, caplog):
        """Test that a log file that cannot be opened falls back to stderr only."""
        log_file = temp_dir / "missing-dir" / "findrr.log"
        config = FindrrConfig(logging=LoggingConfig(file=str(log_file)))

        with patch("logging.basicConfig") as basic_config:
            configure_logging(config)

        handlers = basic_config.call_args.kwargs["handlers"]
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)
        assert "Cannot open log file" in caplog.text
