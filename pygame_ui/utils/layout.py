"""Layout math for the card grid and control panel.

Pure functions with no pygame dependency so they can be tested headless.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from pygame_ui.config import DIMENSIONS

Number = Union[int, float]
Rect = Tuple[int, int, int, int]  # x, y, width, height


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def adaptive_columns(available_width: float, min_item_width: float, spacing: float) -> int:
    """Number of columns of at least ``min_item_width`` that fit a row."""
    if available_width <= min_item_width:
        return 1
    return max(1, int((available_width + spacing) // (min_item_width + spacing)))


@dataclass
class GridLayout:
    """Card grid and control panel placement for one window size."""

    landscape: bool
    grid_rect: Rect
    panel_rect: Rect
    columns: int
    rows: int
    card_size: Tuple[int, int]
    card_centers: List[Tuple[int, int]] = field(default_factory=list)


def compute_layout(width: int, height: int, card_count: int) -> GridLayout:
    """Place ``card_count`` cards and the control panel in a window.

    Wide windows put the panel on the right, tall windows put it below
    the grid. Columns adapt to a minimum card width; cards shrink to fit
    the grid height when there are too many rows.

    Args:
        width: Window width
        height: Window height
        card_count: Number of cards in deck order

    Returns:
        The computed layout
    """
    landscape = width > height
    margin = DIMENSIONS.PANEL_MARGIN

    if landscape:
        grid_width = int(width * DIMENSIONS.LANDSCAPE_GRID_FRACTION)
        grid_rect = (0, 0, grid_width, height)
        panel_rect = (grid_width + margin, margin, width - grid_width - margin * 2, height - margin * 2)
        min_card_width = DIMENSIONS.CARD_MIN_WIDTH_LANDSCAPE
    else:
        panel_height = DIMENSIONS.PORTRAIT_PANEL_HEIGHT
        grid_rect = (0, 0, width, max(0, height - panel_height))
        panel_rect = (margin, height - panel_height + margin, width - margin * 2, panel_height - margin * 2)
        min_card_width = DIMENSIONS.CARD_MIN_WIDTH_PORTRAIT

    padding = DIMENSIONS.GRID_PADDING
    spacing = DIMENSIONS.CARD_SPACING
    inner_width = max(1, grid_rect[2] - padding * 2)
    inner_height = max(1, grid_rect[3] - padding * 2)

    columns = adaptive_columns(inner_width, min_card_width, spacing)
    if card_count:
        columns = min(columns, card_count)
    rows = math.ceil(card_count / columns) if card_count else 0

    card_width = (inner_width - (columns - 1) * spacing) / columns
    card_height = card_width / DIMENSIONS.CARD_ASPECT
    if rows:
        max_height = (inner_height - (rows - 1) * spacing) / rows
        if card_height > max_height:
            card_height = max_height
            card_width = card_height * DIMENSIONS.CARD_ASPECT

    # Inset each slot so neighbouring cards never touch
    card_width = max(1, int(card_width - DIMENSIONS.CARD_PADDING * 2))
    card_height = max(1, int(card_height - DIMENSIONS.CARD_PADDING * 2))
    slot_width = card_width + DIMENSIONS.CARD_PADDING * 2
    slot_height = card_height + DIMENSIONS.CARD_PADDING * 2

    used_width = columns * slot_width + (columns - 1) * spacing
    used_height = rows * slot_height + max(0, rows - 1) * spacing
    origin_x = grid_rect[0] + (grid_rect[2] - used_width) / 2
    origin_y = grid_rect[1] + (grid_rect[3] - used_height) / 2

    centers = []
    for index in range(card_count):
        row, col = divmod(index, columns)
        cx = origin_x + col * (slot_width + spacing) + slot_width / 2
        cy = origin_y + row * (slot_height + spacing) + slot_height / 2
        centers.append((int(round(cx)), int(round(cy))))

    return GridLayout(
        landscape=landscape,
        grid_rect=grid_rect,
        panel_rect=panel_rect,
        columns=columns,
        rows=rows,
        card_size=(card_width, card_height),
        card_centers=centers,
    )
