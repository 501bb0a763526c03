from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    """Logical actions for one frame."""

    left: bool = False
    right: bool = False
    jump_pressed: bool = False


class KeyboardInput:
    """
    Turns raw key state into an InputState.

    - left / right: continuous (hold)
    - jump: edge-triggered, true only on the frame the key goes down
    """

    def __init__(self, left_key: int, right_key: int, jump_key: int):
        self.left_key = left_key
        self.right_key = right_key
        self.jump_key = jump_key

        # previous jump key state for edge detection
        self._prev_jump = False

    @classmethod
    def from_settings(cls, settings) -> "KeyboardInput":
        return cls(settings.get_key("left"), settings.get_key("right"), settings.get_key("jump"))

    def sample(self, pressed) -> InputState:
        """Read ``pressed`` (``pygame.key.get_pressed()`` or any mapping by key code)."""
        jump_now = bool(pressed[self.jump_key])
        jump_pressed = jump_now and not self._prev_jump
        self._prev_jump = jump_now

        return InputState(
            left=bool(pressed[self.left_key]),
            right=bool(pressed[self.right_key]),
            jump_pressed=jump_pressed,
        )
