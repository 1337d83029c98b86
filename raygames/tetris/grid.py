"""The Tetris playing field."""

from __future__ import annotations

import pygame

from raygames.tetris.colors import cell_colors


class Grid:
    """A 20 x 10 board of cell values; 0 marks an empty cell."""

    def __init__(self) -> None:
        self.num_rows = 20
        self.num_cols = 10
        self.cell_size = 30
        self.colors = cell_colors()
        self.cells: list[list[int]] = []
        self.initialize()

    def initialize(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.num_cols for _ in range(self.num_rows)]

    def is_cell_outside(self, row: int, column: int) -> bool:
        """Return True when the cell lies outside the board."""
        return not (0 <= row < self.num_rows and 0 <= column < self.num_cols)

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Return True when the cell holds no block."""
        if self.is_cell_outside(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")
        return self.cells[row][column] == 0

    def _is_row_full(self, row: int) -> bool:
        return all(self.cells[row])

    def _clear_row(self, row: int) -> None:
        self.cells[row] = [0] * self.num_cols

    def _move_row_down(self, row: int, num_rows: int) -> None:
        self.cells[row + num_rows] = self.cells[row]
        self.cells[row] = [0] * self.num_cols

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above them, and return how many were removed."""
        completed = 0
        for row in reversed(range(self.num_rows)):
            if self._is_row_full(row):
                self._clear_row(row)
                completed += 1
            elif completed > 0:
                self._move_row_down(row, completed)
        return completed

    def render_text(self) -> str:
        """Return the board as text, one line per row, each value followed by a space."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.cells
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every cell of the board onto ``surface``."""
        size = self.cell_size
        for row, values in enumerate(self.cells):
            for column, value in enumerate(values):
                pygame.draw.rect(
                    surface,
                    self.colors[value].rgba,
                    pygame.Rect(column * size + 11, row * size + 11, size - 1, size - 1),
                )