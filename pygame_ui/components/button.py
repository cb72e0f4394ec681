"""Clickable panel button with an optional keyboard shortcut."""

from enum import Enum, auto
from typing import Callable, Optional, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS

Color = Tuple[int, int, int]


def _blend(a: Color, b: Color, t: float) -> Color:
    return tuple(int(x + (y - x) * t) for x, y in zip(a, b))


class ButtonState(Enum):
    """Visual state of a button."""

    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


class Button:
    """A labelled button positioned by its center.

    ``on_click`` fires when the left mouse button is released over the
    button, or when ``hotkey`` is pressed. A disabled button ignores both.
    """

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        on_click: Optional[Callable[[], None]] = None,
        hotkey: Optional[int] = None,
        width: float = DIMENSIONS.BUTTON_WIDTH,
        height: float = DIMENSIONS.BUTTON_HEIGHT,
        font_size: int = 28,
    ):
        """Initialize a button.

        Args:
            x: Center x position
            y: Center y position
            text: Label
            on_click: Callback fired on click or hotkey
            hotkey: pygame key constant that also triggers the button
            width: Button width
            height: Button height
            font_size: Label font size
        """
        self.center_x = x
        self.center_y = y
        self.text = text
        self.on_click = on_click
        self.hotkey = hotkey
        self.width = width
        self.height = height
        self.font_size = font_size

        self.enabled = True
        self.state = ButtonState.NORMAL
        self._hover = 0.0  # 0..1, eased toward the hover target

        self._font: Optional[pygame.font.Font] = None
        self._hint_font: Optional[pygame.font.Font] = None

    @property
    def rect(self) -> pygame.Rect:
        rect = pygame.Rect(0, 0, int(self.width), int(self.height))
        rect.center = (int(self.center_x), int(self.center_y))
        return rect

    @property
    def hotkey_label(self) -> Optional[str]:
        if self.hotkey is None:
            return None
        return pygame.key.name(self.hotkey).upper()

    def set_position(self, x: float, y: float) -> None:
        self.center_x = x
        self.center_y = y

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the button, dropping any press in progress."""
        self.enabled = enabled
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED

    def contains_point(self, point: Tuple[float, float]) -> bool:
        return self.rect.collidepoint(point)

    def click(self) -> bool:
        """Trigger the button programmatically.

        Returns:
            True if the callback ran
        """
        if not self.enabled:
            return False
        if self.on_click:
            self.on_click()
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a pygame event.

        Args:
            event: The pygame event

        Returns:
            True if the button fired
        """
        if not self.enabled:
            return False

        if event.type == pygame.KEYDOWN:
            return event.key == self.hotkey and self.click()

        if event.type == pygame.MOUSEMOTION:
            if self.state != ButtonState.PRESSED:
                inside = self.contains_point(event.pos)
                self.state = ButtonState.HOVERED if inside else ButtonState.NORMAL

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.contains_point(event.pos):
                self.state = ButtonState.PRESSED

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.state == ButtonState.PRESSED:
                if self.contains_point(event.pos):
                    self.state = ButtonState.HOVERED
                    return self.click()
                self.state = ButtonState.NORMAL

        return False

    def update(self, dt: float) -> None:
        target = 1.0 if self.state in (ButtonState.HOVERED, ButtonState.PRESSED) else 0.0
        self._hover += (target - self._hover) * min(1.0, 15.0 * dt)

    def _colors(self) -> Tuple[Color, Color]:
        """Background and label colors for the current state."""
        if not self.enabled:
            return COLORS.BUTTON_DISABLED, COLORS.TEXT_MUTED
        if self.state == ButtonState.PRESSED:
            return COLORS.BUTTON_PRESSED, COLORS.TEXT_WHITE
        return _blend(COLORS.BUTTON_DEFAULT, COLORS.BUTTON_HOVER, self._hover), COLORS.TEXT_WHITE

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
            self._hint_font = pygame.font.Font(None, 18)

        bg_color, text_color = self._colors()
        rect = self.rect
        if self.state == ButtonState.PRESSED:
            rect.move_ip(0, 2)

        pygame.draw.rect(surface, bg_color, rect, border_radius=DIMENSIONS.BUTTON_CORNER_RADIUS)
        label = self._font.render(self.text, True, text_color)
        surface.blit(label, label.get_rect(center=rect.center))

        if self.hotkey_label and self.enabled:
            hint = self._hint_font.render(f"[{self.hotkey_label}]", True, COLORS.TEXT_MUTED)
            surface.blit(hint, hint.get_rect(centerx=rect.centerx, top=rect.bottom + 4))
