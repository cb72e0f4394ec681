"""Configuration constants for the PyGame memory game UI."""

from dataclasses import dataclass
from typing import Tuple

# Card contents rendered by the UI; the default font only covers basic Latin
UI_SYMBOLS: Tuple[str, ...] = ("A", "K", "Q", "J", "10", "9", "8", "7")


@dataclass(frozen=True)
class Colors:
    """Color palette for the memory game UI."""

    # Background
    BACKGROUND: Tuple[int, int, int] = (204, 229, 255)

    # Card colors
    CARD_WHITE: Tuple[int, int, int] = (245, 243, 238)
    CARD_RED: Tuple[int, int, int] = (192, 57, 57)
    CARD_BLACK: Tuple[int, int, int] = (28, 28, 32)
    CARD_BACK: Tuple[int, int, int] = (40, 90, 200)
    CARD_BACK_STRIPE: Tuple[int, int, int] = (255, 255, 255)
    CARD_MATCHED: Tuple[int, int, int] = (100, 200, 100)

    # Effects
    SHADOW: Tuple[int, int, int, int] = (0, 0, 0, 80)

    # Text
    TEXT_DARK: Tuple[int, int, int] = (30, 30, 40)
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_MUTED: Tuple[int, int, int] = (150, 150, 160)
    GAME_OVER: Tuple[int, int, int] = (40, 160, 60)

    # Buttons
    BUTTON_DEFAULT: Tuple[int, int, int] = (60, 70, 90)
    BUTTON_HOVER: Tuple[int, int, int] = (80, 95, 120)
    BUTTON_PRESSED: Tuple[int, int, int] = (45, 55, 70)
    BUTTON_DISABLED: Tuple[int, int, int] = (50, 50, 55)

    # Panels
    PANEL_BG: Tuple[int, int, int] = (250, 250, 252)
    PANEL_BORDER: Tuple[int, int, int] = (180, 180, 195)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Screen
    MIN_SCREEN_WIDTH: int = 480
    MIN_SCREEN_HEIGHT: int = 480

    # Card grid
    CARD_ASPECT: float = 2 / 3  # width / height
    CARD_MIN_WIDTH_LANDSCAPE: int = 100
    CARD_MIN_WIDTH_PORTRAIT: int = 80
    CARD_SPACING: int = 10
    CARD_PADDING: int = 4
    CARD_CORNER_RADIUS: int = 10
    CARD_SHADOW_OFFSET: int = 4
    STRIPE_WIDTH: int = 10
    GRID_PADDING: int = 16

    # Control panel
    LANDSCAPE_GRID_FRACTION: float = 0.7
    PORTRAIT_PANEL_HEIGHT: int = 200
    PANEL_MARGIN: int = 16
    PANEL_PADDING: int = 16
    PANEL_CORNER_RADIUS: int = 10

    # UI Elements
    BUTTON_WIDTH: int = 140
    BUTTON_HEIGHT: int = 45
    BUTTON_CORNER_RADIUS: int = 6


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
