from dataclasses import dataclass, replace
from typing import Optional, Sequence


@dataclass(frozen=True)
class Box:
    """Axis-aligned box covering [min_x, max_x) x [min_y, max_y)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def translated(self, dx, dy):
        return Box(self.min_x + dx, self.min_y + dy, self.max_x + dx, self.max_y + dy)


def overlaps(a, b) -> bool:
    """Half-open AABB test; boxes that only touch along an edge do not overlap."""
    return (a.min_x < b.max_x and b.min_x < a.max_x and
            a.min_y < b.max_y and b.min_y < a.max_y)


def first_overlap(box, platforms: Sequence) -> Optional[object]:
    """Return the first platform in list order that overlaps ``box``."""
    for plat in platforms:
        if overlaps(box, plat):
            return plat
    return None


def resolve_horizontal(player, platforms):
    """Resolve horizontal motion between player and platforms.

    Only ``x`` and ``vx`` change: a blocked move zeroes ``vx`` and leaves
    ``x`` where it was, an unblocked one commits ``x += vx``.
    """
    if first_overlap(player.next_box_x(), platforms) is not None:
        return replace(player, vx=0)
    return replace(player, x=player.x + player.vx)


def resolve_vertical(player, platforms):
    """Resolve vertical motion between player and platforms.

    Only ``y``, ``vy`` and ``on_ground`` change. The first overlapping
    platform wins, even if a later one would stop the player sooner.
    """
    plat = first_overlap(player.next_box_y(), platforms)
    if plat is None:
        return replace(player, y=player.y + player.vy)

    if player.vy > 0:
        # falling -> land on top
        return replace(player, y=plat.min_y - player.height, vy=0, on_ground=True)
    if player.vy < 0:
        # hit bottom of platform
        return replace(player, y=plat.max_y, vy=0)
    return replace(player, vy=0)


def resolve_collisions(player, platforms):
    """Run both axis passes against the same start-of-frame player.

    The vertical pass must not see the x committed by the horizontal pass,
    so each pass gets the original state and the results are merged.
    """
    start = replace(player, on_ground=False)
    moved_x = resolve_horizontal(start, platforms)
    moved_y = resolve_vertical(start, platforms)
    return replace(moved_y, x=moved_x.x, vx=moved_x.vx)


def clamp_to_screen(player, config):
    """Keep player within horizontal screen bounds, stopping it at the edge."""
    if player.x < 0:
        return replace(player, x=0, vx=0)
    if player.x + player.width > config.screen_width:
        return replace(player, x=config.screen_width - player.width, vx=0)
    return player
