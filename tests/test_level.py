"""Tests for level.py: the platform catalog."""

from level import Platform, initial_platforms
from settings import GameConfig


def test_default_layout():
    platforms = initial_platforms()
    assert platforms == (
        Platform(0, 440, 640, 480),
        Platform(200, 380, 300, 400),
        Platform(400, 300, 500, 320),
        Platform(50, 220, 150, 240),
    )


def test_floor_spans_screen_for_custom_size():
    floor = initial_platforms(GameConfig(screen_width=800, screen_height=600))[0]
    assert floor == Platform(0, 560, 800, 600)
    assert (floor.width, floor.height) == (800, 40)


def test_platforms_are_thick_enough():
    for plat in initial_platforms():
        assert plat.height >= 20
