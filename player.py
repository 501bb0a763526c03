from dataclasses import dataclass, replace

from collision import Box
from constants import PLAYER_HEIGHT, PLAYER_WIDTH
from settings import GameConfig


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    vx: float = 0
    vy: float = 0
    on_ground: bool = False
    width: int = PLAYER_WIDTH
    height: int = PLAYER_HEIGHT

    def box(self) -> Box:
        return Box(self.x, self.y, self.x + self.width, self.y + self.height)

    def next_box_x(self) -> Box:
        """Bounding box after the horizontal move only."""
        return self.box().translated(self.vx, 0)

    def next_box_y(self) -> Box:
        """Bounding box after the vertical move only."""
        return self.box().translated(0, self.vy)


def spawn_player(config: GameConfig) -> Player:
    return Player(
        float(config.start_x),
        float(config.start_y),
        width=config.player_width,
        height=config.player_height,
    )


def apply_input(player: Player, left: bool, right: bool, jump_pressed: bool,
                config: GameConfig) -> Player:
    """Set horizontal velocity from held keys and start a jump if grounded.

    Left wins when both directions are held. ``jump_pressed`` must be
    edge-triggered: true only on the frame the key went down.
    """
    if left:
        vx = -config.move_speed
    elif right:
        vx = config.move_speed
    else:
        vx = 0
    player = replace(player, vx=vx)

    if jump_pressed and player.on_ground:
        player = replace(player, vy=-config.jump_power, on_ground=False)
    return player


def apply_gravity(player: Player, config: GameConfig) -> Player:
    # Applied while grounded too; the vertical collision pass zeroes it again.
    vy = min(player.vy + config.gravity, config.max_fall_speed)
    return replace(player, vy=vy)


def reset_position(player: Player, config: GameConfig) -> Player:
    return replace(
        player,
        x=float(config.start_x),
        y=float(config.start_y),
        vx=0,
        vy=0,
        on_ground=False,
    )
