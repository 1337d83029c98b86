"""Destructible shields made of small blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from raygames.geometry import Rectangle, Vector2
from raygames.palette import GREEN

BLOCK_SIZE = 3


@dataclass(frozen=True)
class Block:
    """One 3 x 3 piece of a shield."""

    position: Vector2

    def rect(self) -> Rectangle:
        """Return the block's hit box."""
        return Rectangle(self.position.x, self.position.y, BLOCK_SIZE, BLOCK_SIZE)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the block."""
        pygame.draw.rect(
            surface,
            GREEN.rgba,
            pygame.Rect(int(self.position.x), int(self.position.y), BLOCK_SIZE, BLOCK_SIZE),
        )


@dataclass
class Obstacle:
    """A shield whose blocks follow the shape in ``GRID``."""

    GRID = (
        (0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0),
        (0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0),
        (0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0),
        (0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1),
    )

    position: Vector2
    blocks: list[Block] = field(init=False)

    def __post_init__(self) -> None:
        self.blocks = [
            Block(
                Vector2(
                    self.position.x + column * BLOCK_SIZE,
                    self.position.y + row * BLOCK_SIZE,
                )
            )
            for row, cells in enumerate(self.GRID)
            for column, cell in enumerate(cells)
            if cell == 1
        ]

    @classmethod
    def width(cls) -> int:
        """Return the width of a shield in pixels."""
        return len(cls.GRID[0]) * BLOCK_SIZE

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every remaining block."""
        for block in self.blocks:
            block.draw(surface)