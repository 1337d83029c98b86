"""Tetromino pieces: their rotations, position and drawing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

import pygame

from raygames.tetris.colors import cell_colors


class Position(NamedTuple):
    """A cell on the board."""

    row: int
    column: int


class Block:
    """A piece with a set of rotation states, offset on the board."""

    cell_size = 30

    def __init__(
        self,
        block_id: int,
        cells: Sequence[Iterable[tuple[int, int]]],
        start_column: int,
    ) -> None:
        self.block_id = block_id
        self.cells: tuple[tuple[Position, ...], ...] = tuple(
            tuple(Position(*cell) for cell in rotation) for rotation in cells
        )
        self.rotation_state = 0
        self.row_offset = 0
        self.column_offset = 0
        self.move(0, start_column)

    def move(self, rows: int, columns: int) -> None:
        """Shift the piece by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state + 1) % len(self.cells)

    def undo_rotation(self) -> None:
        """Go back to the previous rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state - 1) % len(self.cells)

    def cell_positions(self) -> list[Position]:
        """Return the board cells the piece occupies now."""
        return [
            Position(cell.row + self.row_offset, cell.column + self.column_offset)
            for cell in self.cells[self.rotation_state]
        ]

    def draw(self, surface: pygame.Surface, offset_x: int, offset_y: int) -> None:
        """Draw the piece's tiles onto ``surface``."""
        color = cell_colors()[self.block_id].rgba
        size = self.cell_size
        for cell in self.cell_positions():
            pygame.draw.rect(
                surface,
                color,
                pygame.Rect(
                    cell.column * size + offset_x,
                    cell.row * size + offset_y,
                    size - 1,
                    size - 2,
                ),
            )


class LBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            1,
            [
                [(0, 2), (1, 0), (1, 1), (1, 2)],
                [(0, 1), (1, 1), (2, 1), (2, 2)],
                [(1, 0), (1, 1), (1, 2), (2, 0)],
                [(0, 0), (0, 1), (1, 1), (2, 1)],
            ],
            3,
        )


class JBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            2,
            [
                [(0, 0), (1, 0), (1, 1), (1, 2)],
                [(0, 1), (0, 2), (1, 1), (2, 1)],
                [(1, 0), (1, 1), (1, 2), (2, 2)],
                [(0, 1), (1, 1), (2, 0), (2, 1)],
            ],
            3,
        )


class IBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            3,
            [
                [(1, 0), (1, 1), (1, 2), (1, 3)],
                [(0, 2), (1, 2), (2, 2), (3, 2)],
                [(2, 0), (2, 1), (2, 2), (2, 3)],
                [(0, 1), (1, 1), (2, 1), (3, 1)],
            ],
            3,
        )


class OBlock(Block):
    def __init__(self) -> None:
        super().__init__(4, [[(0, 0), (0, 1), (1, 0), (1, 1)]], 4)


class SBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            5,
            [
                [(0, 1), (0, 2), (1, 0), (1, 1)],
                [(0, 1), (1, 1), (1, 2), (2, 2)],
                [(1, 1), (1, 2), (2, 0), (2, 1)],
                [(0, 0), (1, 0), (1, 1), (2, 1)],
            ],
            3,
        )


class TBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            6,
            [
                [(0, 1), (1, 0), (1, 1), (1, 2)],
                [(0, 1), (1, 1), (1, 2), (2, 1)],
                [(1, 0), (1, 1), (1, 2), (2, 1)],
                [(0, 1), (1, 0), (1, 1), (2, 1)],
            ],
            3,
        )


class ZBlock(Block):
    def __init__(self) -> None:
        super().__init__(
            7,
            [
                [(0, 0), (0, 1), (1, 1), (1, 2)],
                [(0, 2), (1, 1), (1, 2), (2, 1)],
                [(1, 0), (1, 1), (2, 1), (2, 2)],
                [(0, 1), (1, 0), (1, 1), (2, 0)],
            ],
            3,
        )


def all_blocks() -> list[Block]:
    """Return one fresh piece of every kind."""
    return [IBlock(), JBlock(), LBlock(), OBlock(), SBlock(), TBlock(), ZBlock()]