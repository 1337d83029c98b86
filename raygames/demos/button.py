"""Clickable image buttons: a start/exit menu and a button that announces a link."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from raygames.geometry import Rectangle, Vector2, check_collision_point_rec
from raygames.palette import BLACK, GREEN, RAYWHITE, RED, color_alpha

_FALLBACK_SIZE = (200, 80)
DEFAULT_URL = "https://example.com/"


class Button:
    """A rectangular button area at a screen position."""

    def __init__(self, position: Vector2, width: float, height: float) -> None:
        self.position = position
        self.width = width
        self.height = height

    @property
    def rect(self) -> Rectangle:
        """The area that reacts to the mouse."""
        return Rectangle(self.position.x, self.position.y, self.width, self.height)

    def is_pressed(self, mouse_pos: Vector2, mouse_pressed: bool) -> bool:
        """Return True when the mouse was pressed while over the button."""
        return mouse_pressed and check_collision_point_rec(mouse_pos, self.rect)


def scaled_size(width: int, height: int, scale: float) -> tuple[int, int]:
    """Return an image size scaled by ``scale``, truncated to whole pixels."""
    if scale <= 0:
        raise ValueError(f"scale must be positive: {scale}")
    return int(width * scale), int(height * scale)


def _load_image(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        placeholder = pygame.Surface(_FALLBACK_SIZE)
        placeholder.fill(GREEN.rgba)
        return placeholder


def _scaled_button(path: Path, position: Vector2, scale: float) -> tuple[Button, pygame.Surface]:
    image = _load_image(path)
    size = scaled_size(*image.get_size(), scale)
    image = pygame.transform.smoothscale(image, size)
    return Button(position, *size), image


def _left_click(events: list[pygame.event.Event]) -> bool:
    return any(e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 for e in events)


def _quit_requested(events: list[pygame.event.Event]) -> bool:
    return any(
        e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE)
        for e in events
    )


def _mouse() -> Vector2:
    x, y = pygame.mouse.get_pos()
    return Vector2(x, y)


def main(argv: list[str] | None = None) -> int:
    """Show start and exit buttons; exit closes the window."""
    parser = argparse.ArgumentParser(prog="raygames-button", description="Button menu.")
    parser.add_argument("--images", type=Path, default=Path("Images"))
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((800, 600))
        pygame.display.set_caption("Check button press in raylib")
        background = _load_image(args.images / "background.png")
        start, start_image = _scaled_button(
            args.images / "start_button.png", Vector2(300, 150), 0.65
        )
        exit_button, exit_image = _scaled_button(
            args.images / "exit_button.png", Vector2(300, 300), 0.65
        )
        clock = pygame.time.Clock()

        running = True
        while running:
            events = pygame.event.get()
            if _quit_requested(events):
                break
            mouse = _mouse()
            pressed = _left_click(events)
            if start.is_pressed(mouse, pressed):
                print("Start button is pressed")
            if exit_button.is_pressed(mouse, pressed):
                running = False

            screen.fill(BLACK.rgba)
            screen.blit(background, (0, 0))
            screen.blit(start_image, (int(start.position.x), int(start.position.y)))
            screen.blit(exit_image, (int(exit_button.position.x), int(exit_button.position.y)))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


def link_main(argv: list[str] | None = None) -> int:
    """Show a button that highlights on hover and reports its link when clicked."""
    parser = argparse.ArgumentParser(prog="raygames-link", description="Show a link.")
    parser.add_argument("--image", type=Path, default=Path("src") / "start_button.png")
    parser.add_argument("--url", default=DEFAULT_URL)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((600, 500))
        pygame.display.set_caption("Mouse Interaction with Image")
        image = _load_image(args.image)
        button = Button(Vector2(100.0, 100.0), *image.get_size())
        overlay = pygame.Surface(image.get_size(), pygame.SRCALPHA)
        overlay.fill(color_alpha(RED, 0.3).rgba)
        clock = pygame.time.Clock()

        while True:
            events = pygame.event.get()
            if _quit_requested(events):
                break
            mouse = _mouse()
            hovering = check_collision_point_rec(mouse, button.rect)
            clicked = button.is_pressed(mouse, _left_click(events))

            screen.fill(RAYWHITE.rgba)
            position = (int(button.position.x), int(button.position.y))
            screen.blit(image, position)
            if hovering:
                screen.blit(overlay, position)
                if clicked:
                    print(f"Open this link in your browser: {args.url}")
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0