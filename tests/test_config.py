"""Tests for configuration classes."""

import logging
import os
from unittest.mock import patch


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        """Test default game settings."""
        with patch.dict(os.environ, {}, clear=True):
            from config import GameConfig

            config = GameConfig()

            assert config.pair_count == 8
            assert config.min_pairs == 2
            assert config.max_pairs == 8
            assert config.flip_back_delay == 1.0
            assert config.match_points == 2
            assert config.mismatch_penalty == 1
            assert config.seed is None

    def test_env_overrides(self):
        """Test values are read from the environment."""
        env = {"MEMORY_PAIRS": "4", "MEMORY_FLIP_DELAY": "0.5", "MEMORY_SEED": "99"}
        with patch.dict(os.environ, env):
            from config import GameConfig

            config = GameConfig()

            assert config.pair_count == 4
            assert config.flip_back_delay == 0.5
            assert config.seed == 99

    def test_flip_delay_can_be_disabled(self):
        """Test 'none' turns the flip-back timer off."""
        for value in ("none", "OFF", " "):
            with patch.dict(os.environ, {"MEMORY_FLIP_DELAY": value}):
                from config import _parse_flip_delay

                assert _parse_flip_delay() is None


class TestDisplayConfig:
    """Tests for DisplayConfig class."""

    def test_window_size_from_env(self):
        """Test window size environment variables."""
        with patch.dict(os.environ, {"WINDOW_WIDTH": "800", "WINDOW_HEIGHT": "1000"}):
            from config import DisplayConfig

            config = DisplayConfig()

            assert config.width == 800
            assert config.height == 1000
            assert config.fps == 60


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_debug_forces_debug_level(self):
        """Test debug mode overrides the log level."""
        with patch.dict(os.environ, {"DEBUG": "true", "LOG_LEVEL": "WARNING"}):
            from config import AppConfig

            config = AppConfig()

            assert config.debug is True
            assert config.effective_log_level == "DEBUG"

    def test_log_level_from_env(self):
        """Test LOG_LEVEL is used outside debug mode."""
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}, clear=True):
            from config import AppConfig

            config = AppConfig()

            assert config.effective_log_level == "WARNING"

    def test_setup_logging(self):
        """Test logging setup accepts level names."""
        from config import setup_logging

        with patch("logging.basicConfig") as basic_config:
            setup_logging("debug")

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
