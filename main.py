import logging
import sys

import pygame

from constants import FPS, WINDOW_TITLE
from controls import KeyboardInput
from display import DisplayManager, draw_world
from game import Game
from settings import Settings

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    settings = Settings.load()
    pygame.init()

    # ---------------------------------------------------------------------------
    # Core systems
    # ---------------------------------------------------------------------------
    try:
        display = DisplayManager(settings.config, settings.window_scale)
    except pygame.error as exc:
        logger.critical("Failed to open the game window: %s", exc)
        pygame.quit()
        sys.exit(1)
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 20)

    game_surface = display.create_game_surface()
    keyboard = KeyboardInput.from_settings(settings)
    game = Game(settings.config)
    show_debug = settings.show_debug
    logger.info("Starting %s at %dx%d", WINDOW_TITLE, display.width, display.height)

    # ---------------------------------------------------------------------------
    # Main loop
    # ---------------------------------------------------------------------------
    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                display.resize_window(event.w, event.h)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_F3:
                show_debug = not show_debug

        game.update(keyboard.sample(pygame.key.get_pressed()))

        draw_world(game_surface, game, font, show_debug)
        display.render_game_surface(game_surface)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
