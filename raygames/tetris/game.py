"""Tetris game state: the falling piece, the bag of pieces, scoring and game over."""

from __future__ import annotations

import random
from collections.abc import Callable, Mapping

import pygame

from raygames.tetris.block import Block, all_blocks
from raygames.tetris.grid import Grid

_LINE_SCORES = {1: 100, 2: 300, 3: 500}


class Game:
    """One game of Tetris on a 20 x 10 grid."""

    def __init__(
        self,
        rng: random.Random | None = None,
        sounds: Mapping[str, Callable[[], object]] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.sounds = dict(sounds or {})
        self.grid = Grid()
        self.blocks: list[Block] = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()
        self.game_over = False
        self.score = 0

    def _play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound()

    def _random_block(self) -> Block:
        if not self.blocks:
            self.blocks = all_blocks()
        return self.blocks.pop(self.rng.randrange(len(self.blocks)))

    def reset(self) -> None:
        """Clear the board, refill the bag and zero the score."""
        self.grid.initialize()
        self.blocks = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()
        self.score = 0

    def handle_key(self, key: int | None) -> None:
        """React to one pressed key; any key restarts a finished game."""
        if self.game_over and key:
            self.game_over = False
            self.reset()
        if key == pygame.K_LEFT:
            self.move_block_left()
        elif key == pygame.K_RIGHT:
            self.move_block_right()
        elif key == pygame.K_DOWN:
            self.move_block_down()
            self.update_score(0, 1)
        elif key == pygame.K_UP:
            self.rotate_block()

    def _blocked(self) -> bool:
        return self.is_block_outside() or not self.block_fits()

    def move_block_left(self) -> None:
        """Shift the piece one column left if it fits there."""
        if not self.game_over:
            self.current_block.move(0, -1)
            if self._blocked():
                self.current_block.move(0, 1)

    def move_block_right(self) -> None:
        """Shift the piece one column right if it fits there."""
        if not self.game_over:
            self.current_block.move(0, 1)
            if self._blocked():
                self.current_block.move(0, -1)

    def move_block_down(self) -> None:
        """Drop the piece one row, locking it in place when it cannot fall."""
        if not self.game_over:
            self.current_block.move(1, 0)
            if self._blocked():
                self.current_block.move(-1, 0)
                self.lock_block()

    def rotate_block(self) -> None:
        """Rotate the piece if the rotated shape fits."""
        if not self.game_over:
            self.current_block.rotate()
            if self._blocked():
                self.current_block.undo_rotation()
            else:
                self._play("rotate")

    def block_fits(self) -> bool:
        """Return True when every cell of the piece is on the board and empty."""
        return all(
            not self.grid.is_cell_outside(cell.row, cell.column)
            and self.grid.is_cell_empty(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def is_block_outside(self) -> bool:
        """Return True when any cell of the piece lies off the board."""
        return any(
            self.grid.is_cell_outside(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def lock_block(self) -> None:
        """Fix the piece into the grid, bring in the next one and clear full rows."""
        for cell in self.current_block.cell_positions():
            self.grid.cells[cell.row][cell.column] = self.current_block.block_id
        self.current_block = self.next_block
        if not self.block_fits():
            self.game_over = True
        self.next_block = self._random_block()
        cleared = self.grid.clear_full_rows()
        if cleared > 0:
            self._play("clear")
            self.update_score(cleared, 0)

    def update_score(self, lines_cleared: int, move_down_points: int) -> None:
        """Add points for cleared lines and for manual drops."""
        self.score += _LINE_SCORES.get(lines_cleared, 0)
        self.score += move_down_points

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the board, the falling piece and the preview of the next piece."""
        self.grid.draw(surface)
        self.current_block.draw(surface, 11, 11)
        if self.next_block.block_id == 3:
            self.next_block.draw(surface, 255, 290)
        elif self.next_block.block_id == 4:
            self.next_block.draw(surface, 255, 280)
        else:
            self.next_block.draw(surface, 270, 270)


class Ticker:
    """Fires once each time at least ``interval`` seconds have passed."""

    def __init__(self, interval: float) -> None:
        self.interval = interval
        self.last_update = 0.0

    def triggered(self, now: float) -> bool:
        """Return True and restart the wait when the interval has elapsed at ``now``."""
        if now - self.last_update >= self.interval:
            self.last_update = now
            return True
        return False