"""Configuration management with environment variable support."""

import logging
import os
import sys
from dataclasses import dataclass, field


def _parse_optional_int(name: str) -> int | None:
    """Parse an optional integer environment variable."""
    value = os.getenv(name, "").strip()
    return int(value) if value else None


def _parse_flip_delay() -> float | None:
    """Parse MEMORY_FLIP_DELAY; 'none' disables the flip-back timer."""
    value = os.getenv("MEMORY_FLIP_DELAY", "1.0").strip().lower()
    if value in ("none", "off", ""):
        return None
    return float(value)


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    pair_count: int = field(default_factory=lambda: int(os.getenv("MEMORY_PAIRS", "8")))
    min_pairs: int = 2
    max_pairs: int = 8
    flip_back_delay: float | None = field(default_factory=_parse_flip_delay)
    match_points: int = 2
    mismatch_penalty: int = 1
    seed: int | None = field(default_factory=lambda: _parse_optional_int("MEMORY_SEED"))


@dataclass(frozen=True)
class DisplayConfig:
    """Window configuration for the pygame front-end."""

    width: int = field(default_factory=lambda: int(os.getenv("WINDOW_WIDTH", "1024")))
    height: int = field(default_factory=lambda: int(os.getenv("WINDOW_HEIGHT", "720")))
    fps: int = 60


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @property
    def effective_log_level(self) -> str:
        """Log level, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level.upper()


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


# Global configuration instance
config = AppConfig()
