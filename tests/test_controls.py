"""Tests for controls.py: keyboard sampling and jump edge detection."""

from collections import defaultdict

import pygame

from controls import InputState, KeyboardInput
from settings import Settings

LEFT, RIGHT, JUMP = 1, 2, 3


def keys(*held):
    return defaultdict(bool, {k: True for k in held})


def test_nothing_held():
    assert KeyboardInput(LEFT, RIGHT, JUMP).sample(keys()) == InputState()


def test_movement_is_continuous():
    kb = KeyboardInput(LEFT, RIGHT, JUMP)
    for _ in range(3):
        state = kb.sample(keys(LEFT, RIGHT))
        assert state.left and state.right


def test_jump_is_edge_triggered():
    kb = KeyboardInput(LEFT, RIGHT, JUMP)
    assert kb.sample(keys(JUMP)).jump_pressed is True
    assert kb.sample(keys(JUMP)).jump_pressed is False
    assert kb.sample(keys(JUMP)).jump_pressed is False
    assert kb.sample(keys()).jump_pressed is False
    assert kb.sample(keys(JUMP)).jump_pressed is True


def test_from_settings():
    kb = KeyboardInput.from_settings(Settings(controls={"jump": "UP"}))
    assert (kb.left_key, kb.right_key, kb.jump_key) == (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP)
