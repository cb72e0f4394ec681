"""Tests for card grid layout math."""

import pytest

from pygame_ui.config import DIMENSIONS
from pygame_ui.utils.layout import adaptive_columns, clamp, compute_layout


def _inside(point, rect):
    x, y, w, h = rect
    return x <= point[0] <= x + w and y <= point[1] <= y + h


class TestHelpers:
    """Tests for layout helper functions."""

    def test_clamp(self):
        """Test clamping to a range."""
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10

    @pytest.mark.parametrize(
        "width,min_width,spacing,expected",
        [
            (50, 100, 10, 1),
            (100, 100, 10, 1),
            (210, 100, 10, 2),
            (684, 100, 10, 6),
        ],
    )
    def test_adaptive_columns(self, width, min_width, spacing, expected):
        """Test columns fit the minimum item width."""
        assert adaptive_columns(width, min_width, spacing) == expected


class TestComputeLayout:
    """Tests for compute_layout."""

    def test_landscape_puts_panel_on_right(self):
        """Test wide windows split the grid and panel side by side."""
        layout = compute_layout(1024, 720, 16)

        assert layout.landscape
        grid_width = int(1024 * DIMENSIONS.LANDSCAPE_GRID_FRACTION)
        assert layout.grid_rect == (0, 0, grid_width, 720)
        assert layout.panel_rect[0] > grid_width

    def test_portrait_puts_panel_below(self):
        """Test tall windows stack the panel under the grid."""
        layout = compute_layout(600, 900, 16)

        assert not layout.landscape
        assert layout.grid_rect[3] == 900 - DIMENSIONS.PORTRAIT_PANEL_HEIGHT
        assert layout.panel_rect[1] >= layout.grid_rect[3]

    def test_landscape_columns(self):
        """Test column count in a standard window."""
        layout = compute_layout(1024, 720, 16)

        assert layout.columns == 6
        assert layout.rows == 3
        assert len(layout.card_centers) == 16

    def test_columns_capped_by_card_count(self):
        """Test a small deck uses a single row."""
        layout = compute_layout(1024, 720, 4)

        assert layout.columns == 4
        assert layout.rows == 1

    @pytest.mark.parametrize("size", [(1024, 720), (600, 900), (480, 480), (1600, 500)])
    def test_cards_inside_grid(self, size):
        """Test every card center lies within the grid area."""
        layout = compute_layout(size[0], size[1], 16)

        for center in layout.card_centers:
            assert _inside(center, layout.grid_rect)

    def test_card_aspect_ratio(self):
        """Test cards keep a 2:3 shape."""
        layout = compute_layout(1024, 720, 16)
        width, height = layout.card_size

        assert width / height == pytest.approx(DIMENSIONS.CARD_ASPECT, abs=0.05)

    def test_cards_do_not_overlap(self):
        """Test neighbouring cards in a row are at least a card apart."""
        layout = compute_layout(1024, 720, 16)
        width = layout.card_size[0]
        first_row = layout.card_centers[: layout.columns]

        for left, right in zip(first_row, first_row[1:]):
            assert right[0] - left[0] >= width
            assert right[1] == left[1]

    def test_empty_deck(self):
        """Test layout with no cards."""
        layout = compute_layout(1024, 720, 0)

        assert layout.rows == 0
        assert layout.card_centers == []
