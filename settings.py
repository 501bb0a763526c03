# settings.py
from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from constants import (
    GRAVITY,
    JUMP_POWER,
    MAX_FALL,
    MOVE_SPEED,
    PLAYER_HEIGHT,
    PLAYER_START,
    PLAYER_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SETTINGS_PATH,
    WINDOW_SCALE,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTROLS = {
    "left": "LEFT",
    "right": "RIGHT",
    "jump": "SPACE",
}


def key_name_to_const(name: str) -> int:
    import pygame
    # Allow both pygame constant names (K_LEFT, K_a) and SDL key names
    for attr in (f"K_{name.upper()}", f"K_{name.lower()}"):
        if hasattr(pygame, attr):
            return getattr(pygame, attr)
    try:
        return pygame.key.key_code(name.lower())
    except ValueError:
        return pygame.K_UNKNOWN


@dataclass(frozen=True)
class GameConfig:
    """Screen size and physics tuning for one simulation.

    Shared by the platform layout and the boundary clamp, so both always
    agree on the screen size.
    """

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    player_width: int = PLAYER_WIDTH
    player_height: int = PLAYER_HEIGHT
    move_speed: float = MOVE_SPEED
    jump_power: float = JUMP_POWER
    gravity: float = GRAVITY
    max_fall_speed: float = MAX_FALL
    start_x: float = PLAYER_START[0]
    start_y: float = PLAYER_START[1]

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError(
                f"screen size must be positive, got {self.screen_width}x{self.screen_height}"
            )
        if self.player_width <= 0 or self.player_height <= 0:
            raise ValueError(
                f"player size must be positive, got {self.player_width}x{self.player_height}"
            )
        if self.player_width > self.screen_width:
            raise ValueError("player is wider than the screen")
        if self.gravity <= 0 or self.max_fall_speed <= 0:
            raise ValueError("gravity and max_fall_speed must be positive")


@dataclass
class Settings:
    controls: dict = None
    window_scale: int = WINDOW_SCALE
    show_debug: bool = True
    config: GameConfig = field(default_factory=GameConfig)

    def __post_init__(self):
        merged = DEFAULT_CONTROLS.copy()
        if self.controls:
            merged.update({k: v for k, v in self.controls.items() if k in DEFAULT_CONTROLS})
        self.controls = merged

    @classmethod
    def load(cls, path: Path = SETTINGS_PATH) -> "Settings":
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("settings root must be a JSON object")
            controls = data.get("controls")
            if controls is not None:
                if not isinstance(controls, dict):
                    raise ValueError("'controls' must be a JSON object")
                bad = sorted(k for k, v in controls.items() if not isinstance(v, str))
                if bad:
                    raise ValueError(f"key bindings must be key names: {', '.join(bad)}")
            return cls(
                controls=controls,
                window_scale=int(data.get("window_scale", WINDOW_SCALE)),
                show_debug=bool(data.get("show_debug", True)),
            )
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("Failed to load settings '%s': %s", path, exc)
            return cls()

    # helpers
    def get_key(self, action: str) -> int:
        return key_name_to_const(self.controls.get(action, DEFAULT_CONTROLS[action]))
