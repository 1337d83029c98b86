"""The walking player character: movement, animation and health."""

from __future__ import annotations

from collections.abc import Mapping

import pygame

from raygames.geometry import Rectangle
from raygames.palette import GREEN, RED, YELLOW, Color

_START_Y = 325.0
_FRAME_TIME = 0.7
_BAR_MAX_WIDTH = 100
_BAR_HEIGHT = 10
_BAR_LIFT = 20


class Player:
    """A character walking left and right along the ground."""

    def __init__(self, screen_width: int, size: tuple[int, int] = (150, 150)) -> None:
        self.screen_width = screen_width
        self.width, self.height = size
        self.x = screen_width / 2.0
        self.y = _START_Y
        self.speed = 1.0
        self.is_moving = False
        self.is_moving_right = True
        self.frame = 0
        self.animation_time = 0.0
        self.max_health = 100.0
        self.current_health = 100.0

    def handle_movement(self, left: bool, right: bool) -> None:
        """Step in the held direction (right wins) and stay on screen."""
        if right:
            self.x += self.speed
            self.is_moving_right = True
        elif left:
            self.x -= self.speed
            self.is_moving_right = False

        if self.x > self.screen_width - self.width:
            self.x = self.screen_width - self.width
        if self.x < 0:
            self.x = 0

    def update_animation(self, dt: float) -> None:
        """Swap walking frames while moving; stand on the first frame otherwise."""
        if self.is_moving:
            self.animation_time += dt
            if self.animation_time >= _FRAME_TIME:
                self.frame = 1 - self.frame
                self.animation_time = 0.0
        else:
            self.frame = 0

    def update(self, left: bool, right: bool, dt: float) -> None:
        """Move and animate for one frame with the given keys held."""
        self.is_moving = left or right
        self.handle_movement(left, right)
        self.update_animation(dt)

    def rect(self) -> Rectangle:
        """Return the player's hit box."""
        return Rectangle(self.x, self.y, self.width, self.height)

    def take_damage(self, damage: float) -> None:
        """Lose health, never going below zero."""
        self.current_health = max(self.current_health - damage, 0.0)

    def health_bar(self) -> tuple[Rectangle, Color]:
        """Return the health bar above the player and its colour for the current health."""
        width = _BAR_MAX_WIDTH * (self.current_health / self.max_health)
        if self.current_health <= self.max_health * 0.25:
            color = RED
        elif self.current_health <= self.max_health * 0.5:
            color = YELLOW
        else:
            color = GREEN
        x = self.x + self.width // 2 - width / 2
        return Rectangle(x, self.y - _BAR_LIFT, width, _BAR_HEIGHT), color

    def _sprite_key(self) -> str:
        side = "right" if self.is_moving_right else "left"
        frame = self.frame + 1 if self.is_moving else 1
        return f"{side}{frame}"

    def draw(self, surface: pygame.Surface, sprites: Mapping[str, pygame.Surface]) -> None:
        """Draw the background, the player and its health bar.

        ``sprites`` holds "background", "right1", "right2", "left1" and "left2".
        """
        surface.blit(sprites["background"], (0, 0))
        surface.blit(sprites[self._sprite_key()], (int(self.x), int(self.y)))
        bar, color = self.health_bar()
        pygame.draw.rect(
            surface,
            color.rgba,
            pygame.Rect(int(bar.x), int(bar.y), int(bar.width), int(bar.height)),
        )