"""UI components for the memory game."""

from pygame_ui.components.card import CardSprite, CardState
from pygame_ui.components.panel import Panel, ControlPanel
from pygame_ui.components.button import Button, ButtonState

__all__ = [
    "CardSprite",
    "CardState",
    "Panel",
    "ControlPanel",
    "Button",
    "ButtonState",
]
