"""Space shooter game state: the ship, invaders, shields, bonus ship and scoring."""

from __future__ import annotations

import random
import re
from collections.abc import Callable, Mapping
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

import pygame

from raygames.geometry import Rectangle, Vector2, check_collision_recs
from raygames.shooter.enemy import KINDS, Enemy
from raygames.shooter.laser import Laser
from raygames.shooter.mystery_ship import MysteryShip
from raygames.shooter.obstacle import Obstacle
from raygames.shooter.spaceship import SpaceShip

_EDGE_MARGIN = 25
_ENEMY_LASER_INTERVAL = 0.35
_ENEMY_LASER_SPEED = 6
_ENEMY_POINTS = {1: 100, 2: 200, 3: 300}
_MYSTERY_POINTS = 500
_ENEMY_ROWS = 5
_ENEMY_COLUMNS = 11
_OBSTACLE_COUNT = 4
_START_LIVES = 3

DEFAULT_HIGH_SCORE_PATH = Path("High_score.txt")


@dataclass(frozen=True)
class SpriteSizes:
    """Pixel sizes ``(width, height)`` of the sprites the game measures hit boxes with."""

    ship: tuple[int, int]
    mystery_ship: tuple[int, int]
    enemies: Mapping[int, tuple[int, int]]


def load_high_score(path: Path | str) -> int:
    """Return the high score stored at ``path``, or 0 when there is none to read."""
    try:
        text = Path(path).read_text()
    except OSError:
        return 0
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def save_high_score(path: Path | str, score: int) -> None:
    """Store ``score`` at ``path``; a file that cannot be written is skipped."""
    with suppress(OSError):
        Path(path).write_text(str(score))


class Game:
    """One game of the space shooter."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        sizes: SpriteSizes,
        rng: random.Random | None = None,
        high_score_path: Path | str = DEFAULT_HIGH_SCORE_PATH,
        sounds: Mapping[str, Callable[[], object]] | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.sizes = sizes
        self.rng = rng if rng is not None else random.Random()
        self.high_score_path = Path(high_score_path)
        self.sounds = dict(sounds or {})

        ship_width, ship_height = sizes.ship
        self.spaceship = SpaceShip(
            ship_width, ship_height, screen_width, screen_height, self.sounds.get("laser")
        )
        mystery_width, mystery_height = sizes.mystery_ship
        self.mystery_ship = MysteryShip(mystery_width, mystery_height, screen_width, self.rng)

        self.obstacles: list[Obstacle] = []
        self.enemies: list[Enemy] = []
        self.enemy_lasers: list[Laser] = []
        self.enemy_direction = 1
        self.time_last_enemy_fired = 0.0
        self.time_last_spawn = 0.0
        self.mystery_ship_spawn_interval = 0.0
        self.lives = _START_LIVES
        self.run = True
        self.score = 0
        self.high_score = 0
        self._init_game()

    def _play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound()

    def _init_game(self) -> None:
        self.obstacles = self.create_obstacles()
        self.enemies = self.create_enemies()
        self.enemy_direction = 1
        self.time_last_enemy_fired = 0.0
        self.time_last_spawn = 0.0
        self.lives = _START_LIVES
        self.run = True
        self.score = 0
        self.high_score = load_high_score(self.high_score_path)
        self.mystery_ship_spawn_interval = self.rng.randint(10, 20)

    def _reset(self) -> None:
        self.spaceship.reset()
        self.enemies.clear()
        self.enemy_lasers.clear()
        self.obstacles.clear()

    def restart(self) -> None:
        """Start a new game after the previous one ended."""
        self._reset()
        self._init_game()

    def handle_input(self, left: bool, right: bool, fire: bool, now: float) -> None:
        """Move or fire the ship according to the keys held; ignored once the game is over."""
        if not self.run:
            return
        if left:
            self.spaceship.move_left()
        if right:
            self.spaceship.move_right()
        if fire:
            self.spaceship.fire_laser(now)

    def update(self, now: float) -> None:
        """Advance the game by one frame at time ``now``; nothing moves once it is over."""
        if not self.run:
            return
        if now - self.time_last_spawn > self.mystery_ship_spawn_interval:
            self.mystery_ship.spawn()
            self.time_last_spawn = now
            self.mystery_ship_spawn_interval = self.rng.randint(10, 20)

        for laser in self.spaceship.lasers:
            laser.update()
        self.move_enemies()
        self.enemy_shoot_laser(now)
        for laser in self.enemy_lasers:
            laser.update()
        self.delete_inactive_lasers()
        self.mystery_ship.update()
        self.check_for_collisions()

    def create_obstacles(self) -> list[Obstacle]:
        """Return the shields spread evenly across the screen."""
        obstacle_width = Obstacle.width()
        gap = (self.screen_width - _OBSTACLE_COUNT * obstacle_width) // 5
        return [
            Obstacle(
                Vector2(
                    float((i + 1) * gap + i * obstacle_width),
                    float(self.screen_width - 200),
                )
            )
            for i in range(_OBSTACLE_COUNT)
        ]

    def create_enemies(self) -> list[Enemy]:
        """Return the invader formation: kind 3 on top, then kind 2, then kind 1."""
        enemies = []
        for row in range(_ENEMY_ROWS):
            if row == 0:
                kind = 3
            elif row in (1, 2):
                kind = 2
            else:
                kind = 1
            for column in range(_ENEMY_COLUMNS):
                position = Vector2(75.0 + column * 55, 110.0 + row * 55)
                enemies.append(Enemy(kind, position, self.sizes.enemies[kind]))
        return enemies

    def _move_down_enemies(self, distance: int) -> None:
        for enemy in self.enemies:
            enemy.y += distance

    def move_enemies(self) -> None:
        """Slide the formation sideways, turning and stepping down at the edges."""
        for enemy in self.enemies:
            if enemy.x + enemy.width > self.screen_width - _EDGE_MARGIN:
                self.enemy_direction = -1
                self._move_down_enemies(1)
            if enemy.x < _EDGE_MARGIN:
                self.enemy_direction = 1
                self._move_down_enemies(1)
            enemy.update(self.enemy_direction)

    def enemy_shoot_laser(self, now: float) -> None:
        """Let a random invader fire when enough time has passed since the last shot."""
        if now - self.time_last_enemy_fired >= _ENEMY_LASER_INTERVAL and self.enemies:
            enemy = self.enemies[self.rng.randint(0, len(self.enemies) - 1)]
            self.enemy_lasers.append(
                Laser(
                    Vector2(enemy.x + enemy.width // 2, enemy.y + enemy.height),
                    _ENEMY_LASER_SPEED,
                    self.screen_height,
                )
            )
            self.time_last_enemy_fired = now

    def delete_inactive_lasers(self) -> None:
        """Drop every laser that has left the play area or hit something."""
        self.spaceship.lasers[:] = [laser for laser in self.spaceship.lasers if laser.active]
        self.enemy_lasers = [laser for laser in self.enemy_lasers if laser.active]

    def _hit_obstacles(self, rect: Rectangle) -> bool:
        hit = False
        for obstacle in self.obstacles:
            remaining = [b for b in obstacle.blocks if not check_collision_recs(b.rect(), rect)]
            if len(remaining) != len(obstacle.blocks):
                hit = True
                obstacle.blocks = remaining
        return hit

    def check_for_collisions(self) -> None:
        """Resolve hits between lasers, invaders, shields, the bonus ship and the player."""
        for laser in self.spaceship.lasers:
            survivors = []
            for enemy in self.enemies:
                if check_collision_recs(enemy.rect(), laser.rect()):
                    self._play("explosion")
                    self.score += _ENEMY_POINTS[enemy.kind]
                    self.check_for_high_score()
                    laser.active = False
                else:
                    survivors.append(enemy)
            self.enemies = survivors

            if self._hit_obstacles(laser.rect()):
                laser.active = False

            if check_collision_recs(self.mystery_ship.rect(), laser.rect()):
                self.mystery_ship.alive = False
                laser.active = False
                self.score += _MYSTERY_POINTS
                self.check_for_high_score()
                self._play("explosion")

        for laser in self.enemy_lasers:
            if check_collision_recs(laser.rect(), self.spaceship.rect()):
                laser.active = False
                self.lives -= 1
                if self.lives == 0:
                    self._game_over()
            if self._hit_obstacles(laser.rect()):
                laser.active = False

        for enemy in self.enemies:
            self._hit_obstacles(enemy.rect())
            if check_collision_recs(enemy.rect(), self.spaceship.rect()):
                self._game_over()

    def _game_over(self) -> None:
        self.run = False

    def check_for_high_score(self) -> None:
        """Record and store the score when it beats the high score."""
        if self.score > self.high_score:
            self.high_score = self.score
            save_high_score(self.high_score_path, self.high_score)

    def draw(self, surface: pygame.Surface, images: Mapping[str, pygame.Surface]) -> None:
        """Draw everything; ``images`` holds "ship", "mystery", "enemy1", "enemy2", "enemy3"."""
        self.spaceship.draw(surface, images["ship"])
        for laser in self.spaceship.lasers:
            laser.draw(surface)
        for obstacle in self.obstacles:
            obstacle.draw(surface)
        enemy_images = {kind: images[f"enemy{kind}"] for kind in KINDS}
        for enemy in self.enemies:
            enemy.draw(surface, enemy_images)
        for laser in self.enemy_lasers:
            laser.draw(surface)
        self.mystery_ship.draw(surface, images["mystery"])