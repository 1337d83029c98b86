"""A character that walks right across the screen and wraps back to the left."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from raygames.palette import RAYWHITE
from raygames.walker.app import _load_scaled

SCREEN_SIZE = (600, 500)
SPRITE_SIZE = (100, 100)
FRAME_TIME = 0.2


def advance_position(x: float, speed: float, moving: bool, screen_width: int) -> float:
    """Return the new x: step right while moving, wrap to 0 past the right edge."""
    if moving:
        x += speed
    if x > screen_width - SPRITE_SIZE[0]:
        x = 0.0
    return x


def update_animation(
    anim_time: float, frame: int, moving: bool, dt: float
) -> tuple[float, int]:
    """Return the new ``(anim_time, frame)``, swapping frames every 0.2 s while moving."""
    if moving:
        anim_time += dt
        if anim_time >= FRAME_TIME:
            frame = 1 - frame
            anim_time = 0.0
    else:
        frame = 0
    return anim_time, frame


def main(argv: list[str] | None = None) -> int:
    """Open a window where the right arrow walks the character."""
    parser = argparse.ArgumentParser(prog="raygames-walk-right", description="Walk right.")
    parser.add_argument("--images", type=Path, default=Path("Images"))
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Walking Animation")
        background = _load_scaled(args.images / "background.png", SCREEN_SIZE)
        walk = [
            _load_scaled(args.images / f"monster_right_{i}.png", SPRITE_SIZE) for i in (1, 2)
        ]
        clock = pygame.time.Clock()
        x, y = 200.0, 300.0
        speed = 1.0
        anim_time, frame = 0.0, 0
        dt = 0.0

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            moving = bool(pygame.key.get_pressed()[pygame.K_RIGHT])
            anim_time, frame = update_animation(anim_time, frame, True, dt)
            x = advance_position(x, speed, moving, SCREEN_SIZE[0])

            screen.fill(RAYWHITE.rgba)
            screen.blit(background, (0, 0))
            sprite = walk[frame] if moving else walk[0]
            screen.blit(sprite, (int(x), int(y)))
            pygame.display.flip()
            dt = clock.tick(60) / 1000.0
    finally:
        pygame.quit()
    return 0