"""The space shooter window: input, music, the score panel and lives."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable
from pathlib import Path

import pygame

from raygames.palette import Color
from raygames.shooter.game import DEFAULT_HIGH_SCORE_PATH, Game, SpriteSizes

_GREEN = Color(0, 228, 48, 255)
_BACKGROUND = Color(29, 29, 27, 255)
_FALLBACK_SIZE = (40, 30)

_IMAGE_FILES = {
    "ship": "pixel_ship.png",
    "enemy1": "pixel_ship_blue.png",
    "enemy2": "pixel_ship_yellow.png",
    "enemy3": "pixel_ship_red_small_2.png",
    "mystery": "pixel_ship3_green.png",
}


def format_with_leading_zeros(number: int, width: int) -> str:
    """Return ``number`` as text padded on the left with zeros to ``width`` characters."""
    text = str(number)
    if len(text) > width:
        raise ValueError(f"{number} does not fit in {width} characters")
    return "0" * (width - len(text)) + text


def _load_image(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, OSError):
        placeholder = pygame.Surface(_FALLBACK_SIZE, pygame.SRCALPHA)
        placeholder.fill(_GREEN.rgba)
        return placeholder


def _init_audio(asset_dir: Path) -> dict[str, Callable[[], object]]:
    try:
        pygame.mixer.init()
    except pygame.error:
        return {}
    sounds: dict[str, Callable[[], object]] = {}
    for name in ("explosion", "laser"):
        path = asset_dir / f"{name}.ogg"
        if path.is_file():
            try:
                sounds[name] = pygame.mixer.Sound(str(path)).play
            except pygame.error:
                continue
    music = asset_dir / "music.ogg"
    if music.is_file():
        try:
            pygame.mixer.music.load(str(music))
            pygame.mixer.music.play(-1)
        except pygame.error:
            pass
    return sounds


def main(argv: list[str] | None = None) -> int:
    """Open the space shooter window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="raygames-shooter", description="Play the space shooter.")
    parser.add_argument("--assets", type=Path, default=Path("src"))
    parser.add_argument("--high-score", type=Path, default=DEFAULT_HIGH_SCORE_PATH)
    args = parser.parse_args(argv)

    screen_width, screen_height, offset = 650, 600, 50
    pygame.init()
    try:
        screen = pygame.display.set_mode((screen_width + offset, screen_height + 2 * offset))
        pygame.display.set_caption("Space shooter")
        width, height = screen.get_size()
        images = {key: _load_image(args.assets / name) for key, name in _IMAGE_FILES.items()}
        sizes = SpriteSizes(
            ship=images["ship"].get_size(),
            mystery_ship=images["mystery"].get_size(),
            enemies={kind: images[f"enemy{kind}"].get_size() for kind in (1, 2, 3)},
        )
        sounds = _init_audio(args.assets)
        game = Game(width, height, sizes, random.Random(), args.high_score, sounds)

        big_font = pygame.font.Font(None, 34)
        label_font = pygame.font.Font(None, 28)
        restart_font = pygame.font.Font(None, 50)
        clock = pygame.time.Clock()
        start = time.monotonic()
        green = _GREEN.rgba

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and not game.run:
                        game.restart()

            now = time.monotonic() - start
            keys = pygame.key.get_pressed()
            game.handle_input(keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_SPACE], now)
            game.update(now)

            screen.fill(_BACKGROUND.rgba)
            frame = pygame.Rect(10, 10, 680, 680)
            pygame.draw.rect(screen, green, frame, width=2, border_radius=int(0.18 * 680 / 2))
            pygame.draw.line(screen, green, (25, 630), (675, 630), 3)

            status = "Level 01" if game.run else "Game Over"
            screen.blit(big_font.render(status, True, green), (470, 640))
            if not game.run:
                screen.blit(restart_font.render("Press R to Restart", True, green), (100, 97))

            for i in range(game.lives):
                screen.blit(images["ship"], (50 + 50 * i, 645))

            screen.blit(big_font.render("Score", True, green), (50, 15))
            score_text = format_with_leading_zeros(game.score, 5)
            screen.blit(big_font.render(score_text, True, green), (50, 50))
            screen.blit(label_font.render("HIGH-SCORE", True, green), (470, 15))
            high_text = format_with_leading_zeros(game.high_score, 5)
            screen.blit(big_font.render(high_text, True, green), (475, 40))

            game.draw(screen, images)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0