"""Circles moved around the window: toward a mouse click, or with the arrow keys."""

from __future__ import annotations

import argparse

import pygame

from raygames.geometry import Vector2
from raygames.palette import BLACK, BLUE, WHITE

SCREEN_SIZE = (600, 500)


class Ball:
    """A circle that glides at constant speed toward the last clicked point."""

    move_speed = 200.0
    radius = 20.0

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.position = Vector2(300, 250)
        self.target = self.position

    def set_target(self, target: Vector2) -> None:
        """Choose the point the ball heads for."""
        self.target = target

    def update(self, dt: float) -> None:
        """Move toward the target for ``dt`` seconds, staying inside the window."""
        direction = self.target - self.position
        distance = direction.length()
        if distance > 0:
            step = direction.scale(self.move_speed * dt / distance)
            self.position = self.position + step
            self._limit_movement()

    def _limit_movement(self) -> None:
        r = self.radius
        x = min(max(self.position.x, r), self.screen_width - r)
        y = min(max(self.position.y, r), self.screen_height - r)
        self.position = Vector2(x, y)


class KeyCircle:
    """A circle moved with the arrow keys that cannot leave the window."""

    radius = 50
    speed = 5

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.x = 300
        self.y = 250

    def move(self, left: bool, right: bool, up: bool, down: bool) -> None:
        """Step for each held key while the circle is clear of that edge."""
        if right and self.x < self.screen_width - self.radius:
            self.x += self.speed
        if left and self.x - self.radius > 0:
            self.x -= self.speed
        if up and self.y - self.radius > 0:
            self.y -= self.speed
        if down and self.y < self.screen_height - self.radius:
            self.y += self.speed


def _quit_requested(events: list[pygame.event.Event]) -> bool:
    return any(
        e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE)
        for e in events
    )


def main(argv: list[str] | None = None) -> int:
    """Open a window where the ball follows mouse clicks."""
    argparse.ArgumentParser(prog="raygames-chaser", description="Click to move.").parse_args(
        argv
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Move the circle")
        clock = pygame.time.Clock()
        ball = Ball(*SCREEN_SIZE)
        dt = 0.0

        while True:
            events = pygame.event.get()
            if _quit_requested(events):
                break
            for event in events:
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    ball.set_target(Vector2(*event.pos))
            ball.update(dt)

            screen.fill(BLACK.rgba)
            pygame.draw.circle(
                screen, BLUE.rgba, (ball.position.x, ball.position.y), ball.radius
            )
            pygame.display.flip()
            dt = clock.tick(60) / 1000.0
    finally:
        pygame.quit()
    return 0


def keys_main(argv: list[str] | None = None) -> int:
    """Open a window where the arrow keys move a circle."""
    argparse.ArgumentParser(
        prog="raygames-move-circle", description="Move a circle with the arrows."
    ).parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Move the circle")
        clock = pygame.time.Clock()
        circle = KeyCircle(*SCREEN_SIZE)

        while not _quit_requested(pygame.event.get()):
            keys = pygame.key.get_pressed()
            circle.move(
                keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_UP], keys[pygame.K_DOWN]
            )
            screen.fill(WHITE.rgba)
            pygame.draw.circle(screen, BLUE.rgba, (circle.x, circle.y), circle.radius)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0