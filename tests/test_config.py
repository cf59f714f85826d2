"""
Tests for settings validation, config loading and logging setup.
"""

import logging
from pathlib import Path

import pytest
import yaml

from snek.game.config import GameSettings, ConfigError
from snek.utils.config_loader import Config, LoggingConfig, load_config, save_config
from snek.utils.log import setup_logging


class TestGameSettings:
    """Tests for GameSettings."""

    def test_defaults(self):
        """Test default settings."""
        settings = GameSettings()

        assert settings.board_size == (45, 45)
        assert settings.tile_size == 20
        assert settings.updates_per_move == 1
        assert settings.start_paused is True

    def test_window_size(self):
        """Test pixel size of the board."""
        settings = GameSettings(board_width=10, board_height=5, tile_size=16)
        assert settings.window_size == (160, 80)

    @pytest.mark.parametrize("field,value", [
        ("board_width", 0),
        ("board_height", -3),
        ("tile_size", 0),
        ("updates_per_move", 0),
        ("board_width", "45"),
        ("tile_size", 2.5),
        ("updates_per_move", True),
    ])
    def test_rejects_non_positive_integers(self, field, value):
        """Test every numeric setting must be a positive integer."""
        with pytest.raises(ConfigError, match=field):
            GameSettings(**{field: value})

    def test_rejects_board_over_byte_range(self):
        """Test board dimensions must fit an 8-bit coordinate."""
        with pytest.raises(ConfigError, match="at most 254"):
            GameSettings(board_width=255)

    def test_accepts_max_board(self):
        """Test the largest board is allowed."""
        assert GameSettings(board_width=254, board_height=254).board_size == (254, 254)

    def test_dict_round_trip(self):
        """Test to_dict and from_dict agree."""
        settings = GameSettings(board_width=12, board_height=9, tile_size=8,
                                updates_per_move=4, start_paused=False)
        assert GameSettings.from_dict(settings.to_dict()) == settings


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_load_file(self, tmp_path, sample_config):
        """Test a full config file is loaded."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(sample_config))

        config = load_config(str(path))

        assert config.game.board_size == (30, 20)
        assert config.game.tile_size == 16
        assert config.game.updates_per_move == 3
        assert config.game.start_paused is False
        assert config.logging.level == "DEBUG"

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test a missing file falls back to defaults."""
        config = load_config(str(tmp_path / "missing.yaml"))
        assert config == Config()

    def test_empty_file_uses_defaults(self, tmp_path):
        """Test an empty file falls back to defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == Config()

    def test_partial_section(self, tmp_path):
        """Test missing keys keep their defaults and unknown keys are ignored."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  board_width: 20\n  colour: red\n")

        config = load_config(str(path))

        assert config.game.board_size == (20, 45)
        assert config.logging == LoggingConfig()

    def test_invalid_value(self, tmp_path):
        """Test invalid settings raise ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  updates_per_move: 0\n")

        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_non_mapping_root(self, tmp_path):
        """Test a list at the top level is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(str(path))

    def test_bad_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ConfigError, match="logging level"):
            Config.from_dict({"logging": {"level": "LOUD"}})

    def test_save_and_reload(self, tmp_path, sample_config):
        """Test a saved config loads back identically."""
        config = Config.from_dict(sample_config)
        path = tmp_path / "saved.yaml"

        save_config(config, str(path))

        assert load_config(str(path)) == config

    def test_project_config_file(self):
        """Test the shipped config.yaml is valid."""
        project_root = Path(__file__).parent.parent

        config = load_config(str(project_root / "config.yaml"))

        assert config.game.board_size == (45, 45)
        assert config.game.start_paused is True


class TestSetupLogging:
    """Tests for logging setup."""

    def test_level_and_file(self, tmp_path):
        """Test the level is applied and a log file is written."""
        log_file = tmp_path / "logs" / "snek.log"
        logger = setup_logging(LoggingConfig(level="debug", log_file=str(log_file)))

        logging.getLogger("snek.game").debug("hello")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "hello" in log_file.read_text()

        setup_logging(LoggingConfig())

    def test_repeated_setup_does_not_stack_handlers(self):
        """Test calling setup twice keeps a single stream handler."""
        setup_logging(LoggingConfig())
        logger = setup_logging(LoggingConfig())

        assert len(logger.handlers) == 1
