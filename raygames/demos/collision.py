"""Two demos of collision checks: rectangles and circles moved with the arrow keys."""

from __future__ import annotations

import argparse

import pygame

from raygames.geometry import (
    Rectangle,
    Vector2,
    check_collision_circles,
    check_collision_recs,
)
from raygames.palette import BLUE, GREEN, RAYWHITE, RED

SCREEN_SIZE = (800, 600)
STEP = 5.0

PLAYER_RECT = Rectangle(200, 200, 50, 50)
OBSTACLE_RECT = Rectangle(400, 300, 100, 100)

PLAYER_CIRCLE = (Vector2(200, 200), 20.0)
OBSTACLE_CIRCLE = (Vector2(400, 300), 50.0)


def move_by_keys(
    position: Vector2,
    left: bool,
    right: bool,
    up: bool,
    down: bool,
    step: float = STEP,
) -> Vector2:
    """Return ``position`` moved ``step`` pixels for each arrow key held."""
    x, y = position.x, position.y
    if right:
        x += step
    if left:
        x -= step
    if up:
        y -= step
    if down:
        y += step
    return Vector2(x, y)


def _held_keys() -> tuple[bool, bool, bool, bool]:
    keys = pygame.key.get_pressed()
    return (
        bool(keys[pygame.K_LEFT]),
        bool(keys[pygame.K_RIGHT]),
        bool(keys[pygame.K_UP]),
        bool(keys[pygame.K_DOWN]),
    )


def _quit_requested() -> bool:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
    return False


def _status(surface: pygame.Surface, font: pygame.font.Font, colliding: bool) -> None:
    if colliding:
        surface.blit(font.render("Collision Detected!", True, RED.rgba), (10, 10))
    else:
        surface.blit(font.render("No Collision", True, GREEN.rgba), (10, 10))


def _to_pygame(rect: Rectangle) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


def rectangles_main(argv: list[str] | None = None) -> int:
    """Move a square into a fixed block and show whether they collide."""
    argparse.ArgumentParser(
        prog="raygames-collide-rects", description="Rectangle collision demo."
    ).parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Rectangle Collision Detection")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        player = PLAYER_RECT

        while not _quit_requested():
            moved = move_by_keys(Vector2(player.x, player.y), *_held_keys())
            player = Rectangle(moved.x, moved.y, player.width, player.height)
            colliding = check_collision_recs(player, OBSTACLE_RECT)

            screen.fill(RAYWHITE.rgba)
            color = RED if colliding else GREEN
            pygame.draw.rect(screen, color.rgba, _to_pygame(player))
            pygame.draw.rect(screen, BLUE.rgba, _to_pygame(OBSTACLE_RECT))
            _status(screen, font, colliding)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


def circles_main(argv: list[str] | None = None) -> int:
    """Move a small circle into a big one and show whether they collide."""
    argparse.ArgumentParser(
        prog="raygames-collide-circles", description="Circle collision demo."
    ).parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Circle Collision Detection")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        player, player_radius = PLAYER_CIRCLE
        obstacle, obstacle_radius = OBSTACLE_CIRCLE

        while not _quit_requested():
            player = move_by_keys(player, *_held_keys())
            colliding = check_collision_circles(
                player, player_radius, obstacle, obstacle_radius
            )

            screen.fill(RAYWHITE.rgba)
            color = RED if colliding else GREEN
            pygame.draw.circle(screen, color.rgba, (player.x, player.y), player_radius)
            pygame.draw.circle(screen, BLUE.rgba, (obstacle.x, obstacle.y), obstacle_radius)
            _status(screen, font, colliding)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0