"""A small interactive demo: two lines, one clipped where they cross."""

from __future__ import annotations

import argparse

import pygame

from core2d.mathutil import lines_intersection
from core2d.types import RED, WHITE, Vector2f
from core2d.window import Window

_STEP = 2.5


def step_lines(
    start1: Vector2f, end1: Vector2f, start2: Vector2f, end2: Vector2f
) -> Vector2f:
    """Return where the first line should end: the crossing point, or ``end1``."""
    hit = lines_intersection(start1, end1, start2, end2)
    return hit if hit is not None else end1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Line intersection demo.")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0: run until closed)"
    )
    args = parser.parse_args(argv)

    start1 = Vector2f(0.0, 0.0)
    start2 = Vector2f(60.0, 100.0)
    end2 = Vector2f(60.0, 0.0)

    win = Window("Test", 640, 480, 60)
    frames = 0
    running = True
    try:
        while running:
            win.clock.update()

            win.fetch_events()
            if win.is_event(pygame.QUIT):
                running = False

            if win.keyboard.is_held(pygame.KSCAN_D):
                start2.x += _STEP
                end2.x += _STEP
            if win.keyboard.is_held(pygame.KSCAN_A):
                start2.x -= _STEP
                end2.x -= _STEP

            end1 = step_lines(start1, Vector2f(100.0, 50.0), start2, end2)

            win.fill(WHITE)
            win.draw_line(start1, end1, RED)
            win.draw_line(start2, end2, RED)
            win.show()

            frames += 1
            if args.frames and frames >= args.frames:
                running = False
    finally:
        win.destroy()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())