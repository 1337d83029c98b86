"""Tetris: blocks, the playing grid, the game rules and its window."""