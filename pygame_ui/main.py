"""Main entry point for the PyGame memory game UI."""

import logging
import sys

import pygame

from config import AppConfig, setup_logging
from pygame_ui.config import DIMENSIONS
from pygame_ui.scenes.game_scene import GameScene
from pygame_ui.utils.layout import clamp

logger = logging.getLogger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self, app_config: AppConfig = None):
        """Initialize the application.

        Args:
            app_config: Application settings (read from the environment if None)
        """
        self.config = app_config or AppConfig()

        pygame.init()
        pygame.display.set_caption("Memory Game")

        self.screen = pygame.display.set_mode(
            (self.config.display.width, self.config.display.height),
            pygame.RESIZABLE,
        )
        self.clock = pygame.time.Clock()
        self.running = True

        self.scene = GameScene(game_config=self.config.game)
        self.scene.on_enter(self.screen.get_size())

    def _resize(self, width: int, height: int) -> None:
        """Apply a new window size (pygame 2 resizes the display itself)."""
        size = (
            int(clamp(width, DIMENSIONS.MIN_SCREEN_WIDTH, 10_000)),
            int(clamp(height, DIMENSIONS.MIN_SCREEN_HEIGHT, 10_000)),
        )
        if size != (width, height):
            self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        logger.debug("Window resized to %dx%d", *size)
        self.scene.on_resize(size)

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                continue

            if event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)
                continue

            self.scene.handle_event(event)

    def update(self, dt: float) -> None:
        """Update application state.

        Args:
            dt: Delta time in seconds
        """
        self.scene.update(dt)

    def draw(self) -> None:
        """Render the application."""
        self.scene.draw(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(self.config.display.fps) / 1000.0

            self.handle_events()
            self.update(dt)
            self.draw()

        self.scene.on_exit()
        pygame.quit()


def main() -> None:
    """Entry point for the pygame UI."""
    app_config = AppConfig()
    setup_logging(app_config.effective_log_level)
    logger.info("Starting memory game")

    app = Application(app_config)
    app.run()
    sys.exit(0)


if __name__ == "__main__":
    main()
