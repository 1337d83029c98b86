"""The Tetris window: input, timed drops and the score panel."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable
from pathlib import Path

import pygame

from raygames.palette import WHITE
from raygames.tetris.colors import BACKGROUND_COLOR, LIGHT_BLUE
from raygames.tetris.game import Game, Ticker

_PANEL_X = 320
_PANEL_WIDTH = 170


def score_text_x(text_width: float) -> float:
    """Return the x position that centres text of this width in the score panel."""
    return _PANEL_X + (_PANEL_WIDTH - text_width) / 2


def _init_audio(sound_dir: Path) -> dict[str, Callable[[], object]]:
    try:
        pygame.mixer.init()
    except pygame.error:
        return {}
    sounds: dict[str, Callable[[], object]] = {}
    for name in ("rotate", "clear"):
        path = sound_dir / f"{name}.mp3"
        if path.is_file():
            try:
                sounds[name] = pygame.mixer.Sound(str(path)).play
            except pygame.error:
                continue
    music = sound_dir / "music.mp3"
    if music.is_file():
        try:
            pygame.mixer.music.load(str(music))
            pygame.mixer.music.play(-1)
        except pygame.error:
            pass
    return sounds


def _panel(surface: pygame.Surface, rect: pygame.Rect) -> None:
    radius = int(0.3 * min(rect.width, rect.height) / 2)
    pygame.draw.rect(surface, LIGHT_BLUE.rgba, rect, border_radius=radius)


def main(argv: list[str] | None = None) -> int:
    """Open the Tetris window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="raygames-tetris", description="Play Tetris.")
    parser.add_argument("--sound-dir", type=Path, default=Path("Sound"))
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((500, 620))
        pygame.display.set_caption("Tetris")
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, 38)
        small_font = pygame.font.Font(None, 32)
        game = Game(random.Random(), _init_audio(args.sound_dir))
        ticker = Ticker(1)
        start = time.monotonic()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.handle_key(event.key)

            if ticker.triggered(time.monotonic() - start):
                game.move_block_down()

            screen.fill(BACKGROUND_COLOR.rgba)
            screen.blit(font.render("Score", True, WHITE.rgba), (365, 15))
            screen.blit(font.render("Next", True, WHITE.rgba), (370, 175))
            if game.game_over:
                screen.blit(small_font.render("Game Over", True, WHITE.rgba), (320, 450))

            _panel(screen, pygame.Rect(_PANEL_X, 55, _PANEL_WIDTH, 60))
            score_text = str(game.score)
            width = font.size(score_text)[0]
            screen.blit(
                font.render(score_text, True, WHITE.rgba), (int(score_text_x(width)), 65)
            )
            _panel(screen, pygame.Rect(_PANEL_X, 215, _PANEL_WIDTH, 180))
            game.draw(screen)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0