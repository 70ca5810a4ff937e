"""An animated sprite drawn from a spritesheet of equal-sized frames."""

from __future__ import annotations

import time
from typing import Callable

import pygame

QUAD_SCALE = 0.2


class Sprite:
    """A spritesheet with one animation per row and one frame per column.

    Row 0 is the bottom row of the image. Positions are in normalised
    coordinates, from -1 to 1 on both axes, with y pointing up.
    """

    def __init__(
        self,
        texture_file: str,
        n_animations: int,
        n_frames: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.clock = clock
        self.image: pygame.Surface | None = None
        self.position = pygame.math.Vector2(0.0, 0.0)
        self.n_animations = 0
        self.n_frames = 0
        self.current_frame = 0
        self.current_animation = 0
        self.is_moving = False
        self.animation_speed = 0.1
        self.last_frame_time = 0.0
        self.frame_width = 0.0
        self.frame_height = 0.0
        self.setup(texture_file, n_animations, n_frames)

    def setup(self, texture_file: str, n_animations: int, n_frames: int) -> None:
        """Load the spritesheet and set its grid of animations and frames."""
        if n_animations <= 0 or n_frames <= 0:
            raise ValueError("a spritesheet needs at least one animation and one frame")
        self.n_animations = n_animations
        self.n_frames = n_frames
        self.frame_width = 1.0 / n_frames
        self.frame_height = 1.0 / n_animations
        try:
            self.image = pygame.image.load(str(texture_file))
        except (pygame.error, OSError):
            self.image = None
            print("Failed to load texture")

    def set_animation(self, anim_index: int) -> None:
        """Select the row to animate; indices past the last row are ignored."""
        if anim_index < self.n_animations:
            self.current_animation = anim_index

    def update(self, delta_time: float) -> None:
        """Advance the frame while moving, or rest on the first frame."""
        if self.is_moving:
            now = self.clock()
            if now - self.last_frame_time > self.animation_speed:
                self.last_frame_time = now
                self.current_frame = (self.current_frame + 1) % self.n_frames
        else:
            self.current_frame = 0

    def frame_offset(self) -> tuple[float, float]:
        """The current frame's offset in texture units, counted from the bottom-left."""
        return (
            self.frame_width * self.current_frame,
            self.frame_height * self.current_animation,
        )

    def frame_rect(self) -> pygame.Rect:
        """The current frame's rectangle in image pixels."""
        if self.image is None:
            raise ValueError("no texture loaded")
        width, height = self.image.get_size()
        frame_w = width // self.n_frames
        frame_h = height // self.n_animations
        left = self.current_frame * frame_w
        top = height - (self.current_animation + 1) * frame_h
        return pygame.Rect(left, top, frame_w, frame_h)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current frame centred on the sprite's position."""
        if self.image is None:
            return
        width, height = surface.get_size()
        quad_w = max(1, round(QUAD_SCALE * width))
        quad_h = max(1, round(QUAD_SCALE * height))
        frame = self.image.subsurface(self.frame_rect())
        frame = pygame.transform.scale(frame, (quad_w, quad_h))
        center_x = (self.position.x + 1.0) / 2.0 * width
        center_y = (1.0 - self.position.y) / 2.0 * height
        target = frame.get_rect(center=(round(center_x), round(center_y)))
        surface.blit(frame, target)