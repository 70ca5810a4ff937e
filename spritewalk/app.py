"""The walking-sprite window and its main loop."""

from __future__ import annotations

import argparse
import time
from typing import Callable, Sequence

import pygame

from spritewalk.character import CharacterController
from spritewalk.gllog import DEFAULT_LOG_FILE, GLLog

WINDOW_TITLE = "Animacao de Sprite"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
BACKGROUND = (round(0.1 * 255), round(0.1 * 255), round(0.2 * 255))
FPS_INTERVAL = 0.25


class FpsCounter:
    """Counts frames and reports the rate every quarter of a second."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self.previous_seconds: float | None = None
        self.frame_count = 0

    def tick(self) -> str | None:
        """Count one frame; return a new window title when one is due."""
        now = self.clock()
        if self.previous_seconds is None:
            self.previous_seconds = now
        title = None
        elapsed = now - self.previous_seconds
        if elapsed > FPS_INTERVAL:
            self.previous_seconds = now
            fps = self.frame_count / elapsed
            title = f"opengl @ fps: {fps:.2f}"
            self.frame_count = 0
        self.frame_count += 1
        return title


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spritewalk", description="Walk a spritesheet character with WASD or the arrow keys."
    )
    parser.add_argument("spritesheet", nargs="?", default="sully.png")
    parser.add_argument("--animations", type=int, default=4, help="rows in the spritesheet")
    parser.add_argument("--frames", type=int, default=4, help="columns in the spritesheet")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--log", default=DEFAULT_LOG_FILE, help="log file path")
    parser.add_argument(
        "--max-frames", type=int, default=None, help="stop after this many frames"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run until it is closed or Escape is pressed."""
    args = _parse_args(argv)
    log = GLLog(args.log)
    log.log("starting pygame %s", pygame.version.ver)

    pygame.display.init()
    try:
        surface = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        driver = pygame.display.get_driver()
        print(f"Renderer: {driver}")
        print(f"pygame version {pygame.version.ver}")
        log.log("renderer: %s\nversion: %s\n", driver, pygame.version.ver)

        clock = time.monotonic
        player = CharacterController(args.spritesheet, args.animations, args.frames, clock)
        fps = FpsCounter(clock)

        last_time = clock()
        frames = 0
        running = True
        while running:
            now = clock()
            delta_time = now - last_time
            last_time = now

            title = fps.tick()
            if title is not None:
                pygame.display.set_caption(title)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    print(f"width {event.w} height {event.h}")
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            player.handle_input(pygame.key.get_pressed())

            surface = pygame.display.get_surface()
            surface.fill(BACKGROUND)
            player.update(delta_time)
            player.draw(surface)
            pygame.display.flip()

            frames += 1
            if args.max_frames is not None and frames >= args.max_frames:
                running = False
    finally:
        pygame.display.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())