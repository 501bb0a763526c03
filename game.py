import logging
from typing import Optional, Sequence, Tuple

from collision import clamp_to_screen, resolve_collisions
from controls import InputState
from level import Platform, initial_platforms
from player import Player, apply_gravity, apply_input, reset_position, spawn_player
from settings import GameConfig

logger = logging.getLogger(__name__)


def advance(player: Player, inputs: InputState, platforms: Sequence[Platform],
            config: GameConfig) -> Tuple[Player, bool]:
    """Advance the player by one frame and report whether it fell off screen.

    Order matters: input, gravity, collision (which clears on_ground first),
    screen clamp, then the fall-off reset.
    """
    player = apply_input(player, inputs.left, inputs.right, inputs.jump_pressed, config)
    player = apply_gravity(player, config)
    player = resolve_collisions(player, platforms)
    player = clamp_to_screen(player, config)
    if player.y > config.screen_height:
        return reset_position(player, config), True
    return player, False


def step(player: Player, inputs: InputState, platforms: Sequence[Platform],
         config: GameConfig) -> Player:
    return advance(player, inputs, platforms, config)[0]


class Game:
    """Owns the level and the player for one run of the simulation."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.platforms = initial_platforms(self.config)
        self.player = spawn_player(self.config)
        self.frame = 0

    def update(self, inputs: InputState) -> Player:
        self.frame += 1
        last_x = self.player.x
        self.player, fell = advance(self.player, inputs, self.platforms, self.config)
        if fell:
            logger.debug("Frame %d: player fell off screen near x=%.1f, reset", self.frame, last_x)
        return self.player

    def debug_text(self) -> str:
        p = self.player
        return (
            f"X: {p.x:.1f}, Y: {p.y:.1f}\n"
            f"VX: {p.vx:.1f}, VY: {p.vy:.1f}\n"
            f"OnGround: {str(p.on_ground).lower()}"
        )
