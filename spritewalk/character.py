"""A keyboard-driven character that walks around on a spritesheet."""

from __future__ import annotations

import enum
import time
from typing import Any, Callable, Iterable

import pygame

from spritewalk.sprite import Sprite

DEFAULT_SPEED = 0.5


class Direction(enum.IntEnum):
    """Spritesheet rows, counted from the bottom of the image."""

    SOUTH = 0
    EAST = 1
    WEST = 2
    NORTH = 3


_UP_KEYS = (pygame.K_w, pygame.K_UP)
_DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)
_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)


def _any_down(pressed: Any, keys: Iterable[int]) -> bool:
    return any(pressed[key] for key in keys)


class CharacterController(Sprite):
    """A sprite moved by WASD or the arrow keys at a fixed speed."""

    def __init__(
        self,
        filename: str,
        n_animations: int,
        n_frames: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(filename, n_animations, n_frames, clock)
        self.speed = DEFAULT_SPEED
        self.velocity = pygame.math.Vector2(0.0, 0.0)

    def handle_input(self, pressed: Any) -> None:
        """Set direction and animation from a key-state lookup.

        ``pressed`` is anything indexed by pygame key codes, such as the
        result of :func:`pygame.key.get_pressed`.
        """
        velocity = pygame.math.Vector2(0.0, 0.0)
        self.is_moving = False

        if _any_down(pressed, _UP_KEYS):
            velocity.y = 1.0
            self.set_animation(Direction.NORTH)
            self.is_moving = True
        elif _any_down(pressed, _DOWN_KEYS):
            velocity.y = -1.0
            self.set_animation(Direction.SOUTH)
            self.is_moving = True

        if _any_down(pressed, _LEFT_KEYS):
            velocity.x = -1.0
            self.set_animation(Direction.WEST)
            self.is_moving = True
        elif _any_down(pressed, _RIGHT_KEYS):
            velocity.x = 1.0
            self.set_animation(Direction.EAST)
            self.is_moving = True

        if velocity.length() > 0.0:
            velocity = velocity.normalize()
        self.velocity = velocity

    def update(self, delta_time: float) -> None:
        """Move by the current velocity, then advance the animation."""
        self.position += self.velocity * self.speed * float(delta_time)
        super().update(delta_time)