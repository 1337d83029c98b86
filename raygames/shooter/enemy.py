"""The invading ships that move in formation."""

from __future__ import annotations

from collections.abc import Mapping

import pygame

from raygames.geometry import Rectangle, Vector2

KINDS = (1, 2, 3)


class Enemy:
    """An invader of kind 1, 2 or 3 with the size of its sprite."""

    def __init__(self, kind: int, position: Vector2, size: tuple[int, int]) -> None:
        if kind not in KINDS:
            raise ValueError(f"unknown enemy kind: {kind}")
        self.kind = kind
        self.x = position.x
        self.y = position.y
        self.width, self.height = size

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def update(self, direction: int) -> None:
        """Move sideways by ``direction`` pixels."""
        self.x += direction

    def rect(self) -> Rectangle:
        """Return the invader's hit box."""
        return Rectangle(self.x, self.y, self.width, self.height)

    def draw(self, surface: pygame.Surface, images: Mapping[int, pygame.Surface]) -> None:
        """Draw the sprite for this invader's kind."""
        surface.blit(images[self.kind], (int(self.x), int(self.y)))