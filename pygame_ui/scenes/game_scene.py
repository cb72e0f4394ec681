"""Main game scene with the card grid - integrated with core engine."""

import logging
from typing import Dict, Optional, Tuple
from uuid import UUID

import pygame

from config import GameConfig
from pygame_ui.components.card import CardSprite
from pygame_ui.components.panel import ControlPanel
from pygame_ui.config import COLORS
from pygame_ui.core.engine_adapter import EngineAdapter, GameSnapshot
from pygame_ui.scenes.base_scene import BaseScene
from pygame_ui.utils.layout import GridLayout, compute_layout

logger = logging.getLogger(__name__)


class GameScene(BaseScene):
    """Memory game scene: card grid plus control panel."""

    def __init__(self, game_config: GameConfig = None):
        super().__init__()
        self.game_config = game_config

        # Engine adapter
        self.engine: Optional[EngineAdapter] = None

        # Sprites keyed by card id; deck order comes from the snapshot
        self.sprites: Dict[UUID, CardSprite] = {}
        self.layout: Optional[GridLayout] = None
        self.hovered_card: Optional[CardSprite] = None

        self.control_panel: Optional[ControlPanel] = None
        self._snapshot: Optional[GameSnapshot] = None

    def on_enter(self, size: Tuple[int, int]) -> None:
        """Initialize the game scene."""
        super().on_enter(size)

        self.engine = EngineAdapter(game_config=self.game_config)
        self.engine.set_callbacks(
            on_state_change=self._on_state_change,
            on_match=self._on_match,
            on_game_over=self._on_game_over,
        )

        self.control_panel = ControlPanel(
            on_new_game=self._on_new_game,
            on_shuffle=self._on_shuffle,
        )
        self._on_state_change(self.engine.get_snapshot())

    def on_exit(self) -> None:
        """Clean up when leaving the scene."""
        super().on_exit()
        if self.engine:
            self.engine.close()
        self.sprites.clear()
        self.hovered_card = None

    def on_resize(self, size: Tuple[int, int]) -> None:
        super().on_resize(size)
        self._relayout()

    # Engine callbacks

    def _on_state_change(self, snapshot: GameSnapshot) -> None:
        """Mirror the engine state into sprites and the panel."""
        self._snapshot = snapshot

        current_ids = {card.id for card in snapshot.cards}
        if set(self.sprites) != current_ids:
            # New deck: rebuild sprites
            self.sprites = {card.id: CardSprite(card) for card in snapshot.cards}
            self.hovered_card = None
        else:
            for card in snapshot.cards:
                self.sprites[card.id].sync(card)

        if self.control_panel:
            self.control_panel.apply(snapshot)
        self._relayout()

    def _on_match(self, content: str) -> None:
        logger.debug("Pair found: %s", content)

    def _on_game_over(self, score: int, moves: int) -> None:
        logger.info("All pairs found: score %d, %d moves", score, moves)

    # Layout

    def _relayout(self) -> None:
        """Position cards in deck order and place the control panel."""
        if self._snapshot is None or not self.width or not self.height:
            return

        self.layout = compute_layout(self.width, self.height, len(self._snapshot.cards))
        width, height = self.layout.card_size
        for card, center in zip(self._snapshot.cards, self.layout.card_centers):
            self.sprites[card.id].move_to(center[0], center[1], width, height)

        if self.control_panel:
            self.control_panel.set_rect(*self.layout.panel_rect)

    # Actions

    def _on_new_game(self) -> None:
        if self.engine:
            self.engine.new_game()

    def _on_shuffle(self) -> None:
        if self.engine:
            self.engine.shuffle()

    def card_at(self, point: Tuple[float, float]) -> Optional[CardSprite]:
        """Get the card under a point."""
        for sprite in self.sprites.values():
            if sprite.contains_point(point):
                return sprite
        return None

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle input events.

        The control panel sees every event first, which covers its buttons
        and their N / S hotkeys. Left clicks on the grid select cards.
        """
        if self.control_panel and self.control_panel.handle_event(event):
            return True

        if event.type == pygame.MOUSEMOTION:
            self._update_hover(event.pos)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            sprite = self.card_at(event.pos)
            if sprite and self.engine:
                self.engine.select(sprite.card_id)
                self._update_hover(event.pos)
                return True

        return False

    def _update_hover(self, pos: Tuple[float, float]) -> None:
        sprite = self.card_at(pos)
        if sprite and self.engine and not self.engine.is_selectable(sprite.card_id):
            sprite = None

        if sprite is not self.hovered_card:
            if self.hovered_card:
                self.hovered_card.set_hover(False)
            if sprite:
                sprite.set_hover(True)
            self.hovered_card = sprite

    def update(self, dt: float) -> None:
        """Update game state."""
        if self.engine:
            self.engine.update(dt)

        for sprite in self.sprites.values():
            sprite.update(dt)

        if self.control_panel:
            self.control_panel.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw all game elements."""
        surface.fill(COLORS.BACKGROUND)

        for sprite in self.sprites.values():
            if sprite is not self.hovered_card:
                sprite.draw(surface)
        # Hovered card on top
        if self.hovered_card:
            self.hovered_card.draw(surface)

        if self.control_panel:
            self.control_panel.draw(surface)
