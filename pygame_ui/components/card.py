"""Memory card sprite."""

from enum import Enum, auto
from typing import Optional, Tuple
from uuid import UUID

import pygame

from pygame_ui.config import COLORS, DIMENSIONS, UI_SYMBOLS
from pygame_ui.core.engine_adapter import UICardInfo


class CardState(Enum):
    """Visual state of a card."""

    IDLE = auto()
    HOVERED = auto()


class CardSprite:
    """A memory card drawn face up (content) or face down (striped back).

    The sprite mirrors one engine card; ``sync`` copies the engine state in
    and ``move_to`` places it in the grid.
    """

    def __init__(
        self,
        info: UICardInfo,
        x: float = 0,
        y: float = 0,
        width: int = DIMENSIONS.CARD_MIN_WIDTH_LANDSCAPE,
        height: int = int(DIMENSIONS.CARD_MIN_WIDTH_LANDSCAPE / DIMENSIONS.CARD_ASPECT),
    ):
        self.card_id: UUID = info.id
        self.content = info.content
        self.face_up = info.face_up
        self.matched = info.matched

        self.x = x
        self.y = y
        self.width = width
        self.height = height

        self.state = CardState.IDLE
        self._hover_offset = 0.0
        self._target_hover_offset = 0.0

        self._cached: Optional[pygame.Surface] = None
        self._cache_key: Optional[tuple] = None

    def sync(self, info: UICardInfo) -> None:
        """Copy the engine's view of this card."""
        self.face_up = info.face_up
        self.matched = info.matched

    def move_to(self, x: float, y: float, width: int, height: int) -> None:
        """Place the card center at (x, y) with the given size."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def rect(self) -> pygame.Rect:
        """The card's rectangle (without hover lift)."""
        rect = pygame.Rect(0, 0, int(self.width), int(self.height))
        rect.center = (int(self.x), int(self.y))
        return rect

    def contains_point(self, point: Tuple[float, float]) -> bool:
        """Check if a point is within the card bounds."""
        return self.rect.collidepoint(point)

    def set_hover(self, hovered: bool) -> None:
        """Lift the card while hovered."""
        if hovered:
            self.state = CardState.HOVERED
            self._target_hover_offset = -6
        else:
            self.state = CardState.IDLE
            self._target_hover_offset = 0

    def update(self, dt: float) -> None:
        """Ease the hover lift toward its target."""
        self._hover_offset += (self._target_hover_offset - self._hover_offset) * min(1.0, 15.0 * dt)

    def _content_color(self) -> Tuple[int, int, int]:
        # Alternate red and black through the symbol set
        if self.content in UI_SYMBOLS and UI_SYMBOLS.index(self.content) % 2:
            return COLORS.CARD_RED
        return COLORS.CARD_BLACK

    def _render_card_face(self, width: int, height: int) -> pygame.Surface:
        """Render the face-up side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        rect = pygame.Rect(0, 0, width, height)
        radius = DIMENSIONS.CARD_CORNER_RADIUS

        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=radius)
        border = COLORS.CARD_MATCHED if self.matched else COLORS.CARD_BLACK
        pygame.draw.rect(surface, border, rect, width=3 if self.matched else 2, border_radius=radius)

        font = pygame.font.Font(None, max(16, int(height * 0.45)))
        text = font.render(self.content, True, self._content_color())
        surface.blit(text, text.get_rect(center=(width // 2, height // 2)))

        if self.matched:
            surface.set_alpha(170)
        return surface

    def _render_card_back(self, width: int, height: int) -> pygame.Surface:
        """Render the face-down side: blue with vertical stripes."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        rect = pygame.Rect(0, 0, width, height)
        radius = DIMENSIONS.CARD_CORNER_RADIUS

        pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=radius)

        stripes = pygame.Surface((width, height), pygame.SRCALPHA)
        for x in range(0, width + 1, DIMENSIONS.STRIPE_WIDTH):
            pygame.draw.line(stripes, COLORS.CARD_BACK_STRIPE, (x, 0), (x, height), 1)

        # Keep the stripes inside the rounded corners
        mask = pygame.Surface((width, height), pygame.SRCALPHA)
        pygame.draw.rect(mask, (255, 255, 255, 255), rect, border_radius=radius)
        stripes.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
        surface.blit(stripes, (0, 0))
        return surface

    def _render(self) -> pygame.Surface:
        key = (self.face_up, self.matched, int(self.width), int(self.height))
        if self._cached is None or key != self._cache_key:
            width, height = int(self.width), int(self.height)
            if self.face_up:
                self._cached = self._render_card_face(width, height)
            else:
                self._cached = self._render_card_back(width, height)
            self._cache_key = key
        return self._cached

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the card with its drop shadow."""
        card_surface = self._render()
        draw_rect = card_surface.get_rect(center=(int(self.x), int(self.y + self._hover_offset)))

        offset = DIMENSIONS.CARD_SHADOW_OFFSET
        shadow = pygame.Surface(draw_rect.size, pygame.SRCALPHA)
        pygame.draw.rect(
            shadow,
            COLORS.SHADOW,
            shadow.get_rect(),
            border_radius=DIMENSIONS.CARD_CORNER_RADIUS,
        )
        surface.blit(shadow, draw_rect.move(offset // 2, offset))
        surface.blit(card_surface, draw_rect)
