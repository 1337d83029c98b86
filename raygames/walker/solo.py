"""A single character walking left and right with a two-frame animation."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from raygames.palette import BLACK
from raygames.walker.app import _load_scaled

_FRAME_TIME = 0.2
_SCREEN_SIZE = (1200, 600)
_SPRITE_SIZE = (150, 150)


class Walker:
    """A character that walks within the screen and remembers which way it faces."""

    def __init__(self, screen_width: int, sprite_width: int, x: float, y: float) -> None:
        self.screen_width = screen_width
        self.sprite_width = sprite_width
        self.x = x
        self.y = y
        self.speed = 1.0
        self.is_moving_right = True
        self.frame = 0
        self.animation_time = 0.0

    def handle_movement(self, left: bool, right: bool) -> None:
        """Step in the held direction (right wins) and stay on screen."""
        if right:
            self.x += self.speed
            self.is_moving_right = True
        elif left:
            self.x -= self.speed
            self.is_moving_right = False

        if self.x > self.screen_width - self.sprite_width:
            self.x = self.screen_width - self.sprite_width
        if self.x < 0:
            self.x = 0

    def update_animation(self, moving: bool, dt: float) -> int:
        """Swap frames every 0.2 s while moving, stand still otherwise; return the frame."""
        if moving:
            self.animation_time += dt
            if self.animation_time >= _FRAME_TIME:
                self.frame = 1 - self.frame
                self.animation_time = 0.0
        else:
            self.frame = 0
        return self.frame


def main(argv: list[str] | None = None) -> int:
    """Open a window with one walking character."""
    parser = argparse.ArgumentParser(prog="raygames-walk", description="Walk a character.")
    parser.add_argument("--images", type=Path, default=Path("Images"))
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(_SCREEN_SIZE)
        pygame.display.set_caption("Walking Animation")
        background = _load_scaled(args.images / "background.png", _SCREEN_SIZE)
        right = [
            _load_scaled(args.images / f"monster_right_{i}.png", _SPRITE_SIZE) for i in (1, 2)
        ]
        left = [
            _load_scaled(args.images / f"monster_left_{i}.png", _SPRITE_SIZE) for i in (1, 2)
        ]
        walker = Walker(_SCREEN_SIZE[0], left[0].get_width(), _SCREEN_SIZE[0] // 2, 325)
        clock = pygame.time.Clock()
        dt = 0.0

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            keys = pygame.key.get_pressed()
            moving = keys[pygame.K_RIGHT] or keys[pygame.K_LEFT]
            walker.handle_movement(keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
            frame = walker.update_animation(moving, dt)

            screen.fill(BLACK.rgba)
            screen.blit(background, (0, 0))
            frames = right if walker.is_moving_right else left
            sprite = frames[frame] if moving else frames[0]
            screen.blit(sprite, (int(walker.x), int(walker.y)))
            pygame.display.flip()
            dt = clock.tick(60) / 1000.0
    finally:
        pygame.quit()
    return 0