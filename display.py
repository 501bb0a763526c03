import pygame

from constants import BACKGROUND_COLOR, DEBUG_TEXT_COLOR, PLATFORM_COLOR, PLAYER_COLOR


class DisplayManager:
    def __init__(self, config, window_scale=1):
        self.base_width = config.screen_width
        self.base_height = config.screen_height
        self.window_scale = max(1, int(window_scale))
        self.screen = None
        self.width = 0
        self.height = 0
        self.scale = 1.0
        self.offset_x = 0
        self.offset_y = 0

        self.init_display()

    def init_display(self):
        """Open a resizable window at the configured multiple of the base resolution."""
        self.width = self.base_width * self.window_scale
        self.height = self.base_height * self.window_scale
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)

        self.calculate_scaling()

    def calculate_scaling(self):
        """Fit the base resolution into the window, letterboxing the spare axis."""
        self.scale = min(self.width / self.base_width, self.height / self.base_height)
        self.game_width = int(self.base_width * self.scale)
        self.game_height = int(self.base_height * self.scale)
        self.offset_x = (self.width - self.game_width) // 2
        self.offset_y = (self.height - self.game_height) // 2

    def create_game_surface(self):
        return pygame.Surface((self.base_width, self.base_height))

    def render_game_surface(self, game_surface):
        """Blit the base-resolution frame into the letterboxed game area."""
        self.screen.fill((0, 0, 0))
        frame = game_surface
        if self.scale != 1.0:
            frame = pygame.transform.scale(game_surface, (self.game_width, self.game_height))
        self.screen.blit(frame, (self.offset_x, self.offset_y))

    def resize_window(self, new_width, new_height):
        self.width, self.height = new_width, new_height
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        self.calculate_scaling()


def draw_world(surface, game, font, show_debug=True):
    surface.fill(BACKGROUND_COLOR)

    for plat in game.platforms:
        pygame.draw.rect(surface, PLATFORM_COLOR, pygame.Rect(plat.min_x, plat.min_y, plat.width, plat.height))

    p = game.player
    pygame.draw.rect(surface, PLAYER_COLOR, pygame.Rect(int(p.x), int(p.y), p.width, p.height))

    if show_debug:
        y = 4
        for line in game.debug_text().splitlines():
            text = font.render(line, True, DEBUG_TEXT_COLOR)
            surface.blit(text, (4, y))
            y += text.get_height()
