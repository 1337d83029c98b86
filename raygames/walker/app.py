"""The walking game window and its sprite loading."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import pygame

from raygames.palette import BLACK, MAGENTA
from raygames.walker.game import Game

SCREEN_SIZE = (1200, 600)
PLAYER_SIZE = (150, 150)
ENEMY_SIZE = (100, 100)


def _load_scaled(path: Path, size: tuple[int, int]) -> pygame.Surface:
    """Load an image scaled to ``size``; a missing or broken file gives a plain block."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError):
        placeholder = pygame.Surface(size)
        placeholder.fill(MAGENTA.rgba)
        return placeholder
    return pygame.transform.scale(image, size)


def load_sprites(root: Path | str) -> dict[str, dict[str, Any]]:
    """Load every sprite the game draws from the asset directory ``root``."""
    root = Path(root)
    player_dir = root / "Sprites" / "Player walking"
    player = {
        "background": _load_scaled(root / "Images" / "background.png", SCREEN_SIZE),
        "right1": _load_scaled(player_dir / "monster_right_1.png", PLAYER_SIZE),
        "right2": _load_scaled(player_dir / "monster_right_2.png", PLAYER_SIZE),
        "left1": _load_scaled(player_dir / "monster_Left_1.png", PLAYER_SIZE),
        "left2": _load_scaled(player_dir / "monster_Left_2.png", PLAYER_SIZE),
    }
    walk_dir = root / "Sprites" / "Enemy walking"
    attack_dir = root / "Sprites" / "Enemy Attack"
    enemy = {
        "walk": [_load_scaled(walk_dir / f"Sprite{i}.png", ENEMY_SIZE) for i in range(1, 7)],
        "attack": [
            _load_scaled(attack_dir / f"Sprite{i}.png", ENEMY_SIZE) for i in range(1, 5)
        ],
    }
    return {"player": player, "enemy": enemy}


def main(argv: list[str] | None = None) -> int:
    """Open the walking game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="raygames-walker", description="Walk and fight.")
    parser.add_argument("--root", type=Path, default=Path("."))
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Walking Animation")
        sprites = load_sprites(args.root)
        game = Game(
            SCREEN_SIZE[0],
            sprites["player"]["right1"].get_size(),
            sprites["enemy"]["walk"][0].get_size(),
        )
        clock = pygame.time.Clock()
        dt = 0.0

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            keys = pygame.key.get_pressed()
            game.update(keys[pygame.K_LEFT], keys[pygame.K_RIGHT], dt)
            game.update_animation(dt)

            screen.fill(BLACK.rgba)
            game.draw(screen, sprites)
            pygame.display.flip()
            dt = clock.tick(60) / 1000.0
    finally:
        pygame.quit()
    return 0