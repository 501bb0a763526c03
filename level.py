from dataclasses import dataclass
from typing import Optional, Tuple

from settings import GameConfig


@dataclass(frozen=True)
class Platform:
    """A static solid rectangle covering [min_x, max_x) x [min_y, max_y)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y


def initial_platforms(config: Optional[GameConfig] = None) -> Tuple[Platform, ...]:
    """Return the level's platforms, in the order collisions are checked."""
    config = config if config is not None else GameConfig()
    w, h = config.screen_width, config.screen_height
    return (
        Platform(0, h - 40, w, h),            # Floor
        Platform(200, h - 100, 300, h - 80),  # Mid platform 1
        Platform(400, h - 180, 500, h - 160), # Mid platform 2
        Platform(50, h - 260, 150, h - 240),  # High platform
    )
