"""The player-versus-enemy walking game."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pygame

from raygames.geometry import check_collision_recs
from raygames.walker.enemy import Enemy
from raygames.walker.player import Player

_DAMAGE_DELAY = 1.0
_DAMAGE = 10.0


class Game:
    """A player and an enemy that hurts it at most once a second on contact."""

    def __init__(
        self,
        screen_width: int,
        player_size: tuple[int, int] = (150, 150),
        enemy_size: tuple[int, int] = (100, 100),
    ) -> None:
        self.player = Player(screen_width, player_size)
        self.enemy = Enemy(screen_width, enemy_size)
        self.damage_delay_timer = 0.0

    def update(self, left: bool, right: bool, dt: float) -> None:
        """Advance one frame: move both characters, apply contact damage, animate."""
        self.player.handle_movement(left, right)
        self.enemy.handle_movement(self.player.rect())

        self.player.update(left, right, dt)
        self.enemy.update(self.player.rect(), dt)

        self.damage_delay_timer += dt
        if (
            check_collision_recs(self.player.rect(), self.enemy.rect())
            and self.damage_delay_timer >= _DAMAGE_DELAY
        ):
            self.player.take_damage(_DAMAGE)
            self.damage_delay_timer = 0.0

        self.update_animation(dt)

    def update_animation(self, dt: float) -> None:
        """Advance both characters' animations."""
        self.player.update_animation(dt)
        self.enemy.handle_animation(dt)

    def draw(self, surface: pygame.Surface, sprites: Mapping[str, Mapping[str, Any]]) -> None:
        """Draw the player (with background) then the enemy.

        ``sprites`` holds "player" and "enemy" sprite mappings.
        """
        self.player.draw(surface, sprites["player"])
        self.enemy.draw(surface, sprites["enemy"])