"""A stick figure firing a bullet to the left."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

import pygame

from raygames.palette import BLACK, BLUE, GREEN, MAGENTA

SCREEN_SIZE = (600, 500)
START_X = 320.0
START_Y = 340.0
BULLET_LENGTH = 10


@dataclass
class Bullet:
    """A bullet that flies left from the gun until it leaves the screen."""

    x: float = START_X
    y: float = START_Y
    speed: float = -10.0
    fired: bool = False

    def fire(self) -> bool:
        """Put the bullet at the gun and launch it; return False if already flying."""
        if self.fired:
            return False
        self.x, self.y = START_X, START_Y
        self.fired = True
        return True

    def update(self) -> None:
        """Move a flying bullet and stop it once it passes the left edge."""
        if self.fired:
            self.x += self.speed
            if self.x < 0:
                self.fired = False


def _draw_figure(surface: pygame.Surface) -> None:
    blue = BLUE.rgba
    pygame.draw.circle(surface, MAGENTA.rgba, (350, 300), 25)
    pygame.draw.line(surface, blue, (350, 325), (350, 350))
    pygame.draw.line(surface, blue, (325, 350), (375, 350))
    pygame.draw.line(surface, blue, (350, 350), (325, 400))
    pygame.draw.line(surface, blue, (350, 350), (375, 400))
    pygame.draw.line(surface, blue, (330, 340), (330, 360))
    pygame.draw.line(surface, blue, (320, 340), (330, 340))


def main(argv: list[str] | None = None) -> int:
    """Open the window; space fires the bullet."""
    argparse.ArgumentParser(prog="raygames-bullet", description="Fire a bullet.").parse_args(
        argv
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Gun Animation")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        bullet = Bullet()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        bullet.fire()

            bullet.update()

            screen.fill(BLACK.rgba)
            _draw_figure(screen)
            if bullet.fired:
                pygame.draw.line(
                    screen,
                    MAGENTA.rgba,
                    (int(bullet.x), int(bullet.y)),
                    (int(bullet.x) + BULLET_LENGTH, int(bullet.y)),
                )
            else:
                screen.blit(font.render("Press space to fire", True, GREEN.rgba), (20, 20))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
    return 0