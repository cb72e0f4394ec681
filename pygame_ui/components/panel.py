"""Panel components with rounded borders."""

from typing import Optional, Tuple

import pygame

from pygame_ui.components.button import Button
from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.core.engine_adapter import GameSnapshot


class Panel:
    """A rounded rectangle panel with border and optional transparency.

    Use for containing UI elements, info displays, etc.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        bg_color: Tuple[int, int, int] = COLORS.PANEL_BG,
        bg_alpha: int = 230,
        border_color: Tuple[int, int, int] = COLORS.PANEL_BORDER,
        border_width: int = 2,
    ):
        """Initialize a panel.

        Args:
            x: Left edge
            y: Top edge
            width: Panel width
            height: Panel height
            bg_color: Background color (RGB)
            bg_alpha: Background transparency (0-255)
            border_color: Border color (RGB)
            border_width: Border thickness (0 for no border)
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.bg_color = bg_color
        self.bg_alpha = bg_alpha
        self.border_color = border_color
        self.border_width = border_width

        self._surface: Optional[pygame.Surface] = None
        self._needs_redraw = True

    @property
    def rect(self) -> pygame.Rect:
        """Get the panel's rectangle."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def set_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Move and resize the panel."""
        if (width, height) != (self.width, self.height):
            self._needs_redraw = True
        self.x, self.y, self.width, self.height = x, y, width, height

    def contains_point(self, point: Tuple[float, float]) -> bool:
        """Check if a point is inside the panel."""
        return self.rect.collidepoint(point)

    def _render(self) -> pygame.Surface:
        """Render the panel surface."""
        surface = pygame.Surface((max(1, int(self.width)), max(1, int(self.height))), pygame.SRCALPHA)
        bg_rect = surface.get_rect()
        pygame.draw.rect(
            surface,
            (*self.bg_color, self.bg_alpha),
            bg_rect,
            border_radius=DIMENSIONS.PANEL_CORNER_RADIUS,
        )
        if self.border_width > 0:
            pygame.draw.rect(
                surface,
                self.border_color,
                bg_rect,
                width=self.border_width,
                border_radius=DIMENSIONS.PANEL_CORNER_RADIUS,
            )
        return surface

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the panel."""
        if self._needs_redraw or self._surface is None:
            self._surface = self._render()
            self._needs_redraw = False

        surface.blit(self._surface, (int(self.x), int(self.y)))


class ControlPanel(Panel):
    """Score and moves readout with New Game and Shuffle buttons."""

    def __init__(self, on_new_game, on_shuffle, **kwargs):
        super().__init__(0, 0, 1, 1, **kwargs)
        self.new_game_button = Button(0, 0, "New Game", on_click=on_new_game, hotkey=pygame.K_n)
        self.shuffle_button = Button(0, 0, "Shuffle", on_click=on_shuffle, hotkey=pygame.K_s)
        self.buttons = [self.new_game_button, self.shuffle_button]

        self.score = 0
        self.moves = 0
        self.matched_pairs = 0
        self.pair_count = 0
        self.game_over = False

        self._font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, 30)
        return self._font

    @property
    def title_font(self) -> pygame.font.Font:
        if self._title_font is None:
            self._title_font = pygame.font.Font(None, 40)
        return self._title_font

    def set_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Move the panel and lay out its buttons."""
        super().set_rect(x, y, width, height)

        pad = DIMENSIONS.PANEL_PADDING
        button_y = y + height - pad - DIMENSIONS.BUTTON_HEIGHT / 2 - 14
        self.new_game_button.set_position(x + width * 0.28, button_y)
        self.shuffle_button.set_position(x + width * 0.72, button_y)
        button_width = max(60, min(DIMENSIONS.BUTTON_WIDTH, width * 0.42))
        for button in self.buttons:
            button.width = button_width

    def apply(self, snapshot: GameSnapshot) -> None:
        """Copy the values shown in the panel."""
        self.score = snapshot.score
        self.moves = snapshot.moves
        self.matched_pairs = snapshot.matched_pairs
        self.pair_count = snapshot.pair_count
        self.game_over = snapshot.game_over

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route an event to the buttons (clicks and N/S hotkeys)."""
        consumed = False
        for button in self.buttons:
            consumed = button.handle_event(event) or consumed
        return consumed

    def update(self, dt: float) -> None:
        for button in self.buttons:
            button.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)
        pad = DIMENSIONS.PANEL_PADDING
        left = int(self.x) + pad
        right = int(self.x + self.width) - pad
        top = int(self.y) + pad

        score = self.font.render(f"Score: {self.score}", True, COLORS.TEXT_DARK)
        moves = self.font.render(f"Moves: {self.moves}", True, COLORS.TEXT_DARK)
        surface.blit(score, (left, top))
        surface.blit(moves, moves.get_rect(right=right, top=top))

        pairs = self.font.render(f"Pairs: {self.matched_pairs}/{self.pair_count}", True, COLORS.TEXT_MUTED)
        surface.blit(pairs, (left, top + 30))

        if self.game_over:
            banner = self.title_font.render("Game Over!", True, COLORS.GAME_OVER)
            surface.blit(banner, banner.get_rect(right=right, top=top + 26))

        for button in self.buttons:
            button.draw(surface)
