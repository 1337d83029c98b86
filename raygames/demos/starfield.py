"""A falling star field drawn one pixel per star."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

import pygame

from raygames.palette import BLACK, ORANGE

MAX_STARS = 9999
SCREEN_SIZE = (300, 300)
MAX_SPEED = 5


@dataclass
class Star:
    """One star: its position and how many pixels it falls per frame."""

    x: float
    y: float
    speed: float


class Starfield:
    """A set of stars falling down the screen and reappearing at the top."""

    def __init__(
        self,
        count: int,
        width: int,
        height: int,
        rng: random.Random | None = None,
    ) -> None:
        if count < 0:
            raise ValueError(f"star count must not be negative: {count}")
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.stars = [
            Star(
                float(self.rng.randrange(width)),
                float(self.rng.randrange(height)),
                self._random_speed(),
            )
            for _ in range(count)
        ]

    def _random_speed(self) -> float:
        return float(self.rng.randint(1, MAX_SPEED))

    def update(self) -> None:
        """Move every star down; a star past the bottom restarts at the top."""
        for star in self.stars:
            star.y += star.speed
            if star.y > self.height:
                star.x = float(self.rng.randrange(self.width))
                star.y = 0.0
                star.speed = self._random_speed()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw each star as a single orange pixel."""
        width, height = surface.get_size()
        color = ORANGE.rgba
        for star in self.stars:
            x, y = int(star.x), int(star.y)
            if 0 <= x < width and 0 <= y < height:
                surface.set_at((x, y), color)


def main(argv: list[str] | None = None) -> int:
    """Open a window showing the star field."""
    parser = argparse.ArgumentParser(prog="raygames-starfield", description="Star field.")
    parser.add_argument("--stars", type=int, default=MAX_STARS)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Starfield Simulation")
        clock = pygame.time.Clock()
        field = Starfield(args.stars, *SCREEN_SIZE, rng=random.Random())

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            field.update()
            screen.fill(BLACK.rgba)
            field.draw(screen)
            pygame.display.flip()
            clock.tick(120)
    finally:
        pygame.quit()
    return 0