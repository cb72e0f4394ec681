"""Pytest fixtures for UI tests."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402


@pytest.fixture
def headless():
    """Initialize pygame without a real window."""
    pygame.init()
    surface = pygame.display.set_mode((1024, 720))
    yield surface
    pygame.quit()
