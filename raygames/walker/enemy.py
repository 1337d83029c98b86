"""The enemy that walks toward the player and attacks on contact."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pygame

from raygames.geometry import Rectangle, check_collision_recs
from raygames.palette import RED

_START_Y = 380.0
_WALK_FRAMES = 6
_ATTACK_FRAMES = 4
_WALK_FRAME_TIME = 0.3
_ATTACK_FRAME_TIME = 1.0
_BAR_WIDTH = 50
_BAR_HEIGHT = 5
_BAR_LIFT = 10


class Enemy:
    """An enemy that chases the player from the left edge."""

    def __init__(self, screen_width: int, size: tuple[int, int] = (100, 100)) -> None:
        self.screen_width = screen_width
        self.width, self.height = size
        self.x = 0.0
        self.y = _START_Y
        self.speed = 1.0
        self.is_moving = False
        self.max_health = 100.0
        self.current_health = 100.0
        self.frame = 0
        self.animation_time = 0.0

    def rect(self) -> Rectangle:
        """Return the enemy's hit box."""
        return Rectangle(self.x, self.y, self.width, self.height)

    def handle_movement(self, player_rect: Rectangle) -> None:
        """Stop on contact, walk right while left of the player, wrap past the right edge."""
        if check_collision_recs(self.rect(), player_rect):
            self.is_moving = False
        elif self.x < player_rect.x:
            self.is_moving = True
            self.x += self.speed

        if self.x > self.screen_width + self.width:
            self.x = 0.0

    def handle_animation(self, dt: float) -> None:
        """Cycle walking frames every 0.3 s while moving, attack frames every 1 s otherwise."""
        self.animation_time += dt
        if self.is_moving:
            if self.animation_time >= _WALK_FRAME_TIME:
                self.frame = (self.frame + 1) % _WALK_FRAMES
                self.animation_time = 0.0
        elif self.animation_time >= _ATTACK_FRAME_TIME:
            self.frame = (self.frame + 1) % _ATTACK_FRAMES
            self.animation_time = 0.0

    def update(self, player_rect: Rectangle, dt: float) -> None:
        """Move and animate for one frame."""
        self.handle_movement(player_rect)
        self.handle_animation(dt)

    def health_bar(self) -> Rectangle:
        """Return the health bar drawn above the enemy."""
        x = self.x + self.width // 2 - _BAR_WIDTH / 2
        return Rectangle(x, self.y - _BAR_LIFT, _BAR_WIDTH, _BAR_HEIGHT)

    def _current_sprite(
        self, sprites: Mapping[str, Sequence[pygame.Surface]]
    ) -> pygame.Surface:
        frames = sprites["walk"] if self.is_moving else sprites["attack"]
        limit = _WALK_FRAMES if self.is_moving else _ATTACK_FRAMES
        index = self.frame if 0 <= self.frame < limit else 0
        return frames[index]

    def draw(
        self, surface: pygame.Surface, sprites: Mapping[str, Sequence[pygame.Surface]]
    ) -> None:
        """Draw the current frame and the health bar.

        ``sprites`` holds "walk" (six frames) and "attack" (four frames).
        """
        surface.blit(self._current_sprite(sprites), (int(self.x), int(self.y)))
        bar = self.health_bar()
        pygame.draw.rect(
            surface,
            RED.rgba,
            pygame.Rect(int(bar.x), int(bar.y), int(bar.width), int(bar.height)),
        )