"""The bonus ship that crosses the top of the screen now and then."""

from __future__ import annotations

import random

import pygame

from raygames.geometry import Rectangle, Vector2

_MARGIN = 25


class MysteryShip:
    """A ship that flies from one side of the screen to the other once spawned."""

    def __init__(
        self,
        width: int,
        height: int,
        screen_width: int,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.screen_width = screen_width
        self.rng = rng if rng is not None else random.Random()
        self.x = 0.0
        self.y = 0.0
        self.speed = 0
        self.alive = False

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def spawn(self) -> None:
        """Start the ship at a random side, heading across."""
        self.y = 90
        if self.rng.randint(0, 1) == 0:
            self.x = _MARGIN
            self.speed = 3
        else:
            self.x = self.screen_width - self.width - _MARGIN
            self.speed = -3
        self.alive = True

    def update(self) -> None:
        """Move the ship; it disappears when it reaches either margin."""
        if self.alive:
            self.x += self.speed
            if self.x > self.screen_width - self.width - _MARGIN or self.x < _MARGIN:
                self.alive = False

    def rect(self) -> Rectangle:
        """Return the hit box; it has no size while the ship is gone."""
        if self.alive:
            return Rectangle(self.x, self.y, self.width, self.height)
        return Rectangle(self.x, self.y, 0, 0)

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        """Draw the ship while it is alive."""
        if self.alive:
            surface.blit(image, (int(self.x), int(self.y)))