"""Laser shots fired by the player's ship and by enemies."""

from __future__ import annotations

import pygame

from raygames.geometry import Rectangle, Vector2
from raygames.palette import GREEN

WIDTH = 4
HEIGHT = 15


class Laser:
    """A shot moving vertically until it leaves the play area."""

    def __init__(self, position: Vector2, speed: int, screen_height: int) -> None:
        self.x = position.x
        self.y = position.y
        self.speed = speed
        self.screen_height = screen_height
        self.active = True

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def update(self) -> None:
        """Move the shot and deactivate it once it leaves the play area."""
        self.y += self.speed
        if self.active and (self.y > self.screen_height - 100 or self.y < 25):
            self.active = False

    def rect(self) -> Rectangle:
        """Return the shot's hit box."""
        return Rectangle(self.x, self.y, WIDTH, HEIGHT)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the shot while it is active."""
        if self.active:
            pygame.draw.rect(
                surface, GREEN.rgba, pygame.Rect(int(self.x), int(self.y), WIDTH, HEIGHT)
            )