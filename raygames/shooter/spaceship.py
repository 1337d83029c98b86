"""The player's ship: movement, firing and its lasers."""

from __future__ import annotations

from collections.abc import Callable

import pygame

from raygames.geometry import Rectangle, Vector2
from raygames.shooter.laser import Laser

_MARGIN = 25
_STEP = 7
_FIRE_INTERVAL = 0.35
_LASER_SPEED = -6


class SpaceShip:
    """The player's ship at the bottom of the screen."""

    def __init__(
        self,
        width: int,
        height: int,
        screen_width: int,
        screen_height: int,
        on_fire: Callable[[], object] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.on_fire = on_fire
        self.x = (screen_width - width) // 2
        self.y = screen_height - height - 100
        self.last_fire_time = 0.0
        self.lasers: list[Laser] = []

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def move_left(self) -> None:
        """Move left, never far past the left margin."""
        if self.x < _MARGIN:
            self.x = _MARGIN
        self.x -= _STEP

    def move_right(self) -> None:
        """Move right, never far past the right margin."""
        limit = self.screen_width - self.width - _MARGIN
        if self.x > limit:
            self.x = limit
        self.x += _STEP

    def fire_laser(self, now: float) -> None:
        """Fire a laser from the ship's nose unless one was fired too recently."""
        if now - self.last_fire_time >= _FIRE_INTERVAL:
            self.lasers.append(
                Laser(
                    Vector2(self.x + self.width // 2 - 2, self.y),
                    _LASER_SPEED,
                    self.screen_height,
                )
            )
            self.last_fire_time = now
            if self.on_fire is not None:
                self.on_fire()

    def rect(self) -> Rectangle:
        """Return the ship's hit box."""
        return Rectangle(self.x, self.y, self.width, self.height)

    def reset(self) -> None:
        """Put the ship back in its starting place and drop its lasers."""
        self.x = (self.screen_width - self.width) / 2
        self.y = self.screen_height - self.height - 100
        self.lasers.clear()

    def draw(self, surface: pygame.Surface, image: pygame.Surface) -> None:
        """Draw the ship."""
        surface.blit(image, (int(self.x), int(self.y)))