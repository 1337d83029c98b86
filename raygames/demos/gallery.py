"""Small one-screen demos: text, shapes, colours, images, mouse, frame rate and a delay."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

from raygames.palette import BLACK, BLUE, GREEN, MAGENTA, RAYWHITE, WHITE, Color

DARK_GRAY = Color(80, 80, 80, 255)
CUSTOM_COLOR = Color(131, 135, 49, 255)
RESIZED_IMAGE_SIZE = (300, 300)
DELAY_SECONDS = 2.0


@dataclass(frozen=True)
class _Scene:
    title: str
    size: tuple[int, int] | None
    fps: int


_SCENES: dict[str, _Scene] = {
    "structure": _Scene(" ", (600, 500), 0),
    "text": _Scene(" ", (600, 500), 0),
    "shapes": _Scene(" ", (600, 500), 0),
    "colors": _Scene("Colors", (600, 500), 0),
    "face": _Scene("No expression", (400, 400), 0),
    "fps": _Scene("FPS Counter", (600, 500), 0),
    "refresh_rate": _Scene("Refresh Rate", (500, 500), 60),
    "fullscreen": _Scene("Full screen", None, 0),
    "image": _Scene("Background image", (800, 600), 0),
    "resized_image": _Scene(" ", (600, 500), 60),
    "mouse": _Scene("Move object", (600, 500), 60),
    "delay": _Scene("Window with Delay", (600, 500), 0),
}


def delay(seconds: float, clock: Callable[[], float] = time.monotonic) -> float:
    """Busy-wait until ``clock`` has advanced ``seconds``; return the time that passed."""
    start = clock()
    now = start
    while now - start < seconds:
        now = clock()
    return now - start


def scene_names() -> tuple[str, ...]:
    """Return the names of every scene ``render_scene`` can draw."""
    return tuple(_SCENES)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _text(
    surface: pygame.Surface, text: str, x: int, y: int, size: int, color: Color
) -> str:
    surface.blit(_font(size).render(text, True, color.rgba), (x, y))
    return text


def _tinted(image: pygame.Surface, tint: Color) -> pygame.Surface:
    tinted = image.copy()
    tinted.fill(tint.rgba, special_flags=pygame.BLEND_RGBA_MULT)
    return tinted


def render_scene(
    name: str, surface: pygame.Surface, state: Mapping[str, Any] | None = None
) -> list[str]:
    """Draw one frame of scene ``name`` on ``surface`` and return the texts drawn.

    ``state`` supplies what a scene reads: "fps", "refresh_rate", "mouse" (x, y),
    "left" and "right" (keys held), "image" (a surface) and "waiting" (bool).
    """
    if name not in _SCENES:
        raise ValueError(f"unknown scene: {name!r}")
    state = state or {}
    texts: list[str] = []

    if name == "text":
        texts.append(_text(surface, "This is a text sample", 100, 100, 20, GREEN))
    elif name == "shapes":
        pygame.draw.circle(surface, BLUE.rgba, (50, 50), 20)
        pygame.draw.rect(surface, BLUE.rgba, pygame.Rect(100, 100, 50, 50))
        pygame.draw.line(surface, BLUE.rgba, (200, 200), (100, 200))
        pygame.draw.circle(surface, MAGENTA.rgba, (500, 300), 30, width=1)
        pygame.draw.rect(surface, MAGENTA.rgba, pygame.Rect(300, 300, 20, 40), width=1)
    elif name == "colors":
        surface.fill(WHITE.rgba)
        pygame.draw.circle(surface, CUSTOM_COLOR.rgba, (100, 200), 50)
    elif name == "face":
        pygame.draw.circle(surface, MAGENTA.rgba, (200, 200), 200, width=1)
        pygame.draw.circle(surface, MAGENTA.rgba, (130, 130), 50, width=1)
        pygame.draw.circle(surface, MAGENTA.rgba, (270, 130), 50, width=1)
    elif name == "fps":
        surface.fill(BLACK.rgba)
        fps = int(state.get("fps", 0))
        texts.append(_text(surface, f"FPS: {fps}", 10, 10, 30, GREEN))
    elif name == "refresh_rate":
        rate = int(state.get("refresh_rate", 0))
        texts.append(_text(surface, f"Refresh Rate: {rate} Hz", 10, 10, 20, GREEN))
    elif name == "image":
        surface.fill(BLACK.rgba)
        image = state.get("image")
        if image is not None:
            if state.get("left"):
                surface.blit(image, (0, 0))
            if state.get("right"):
                surface.blit(_tinted(image, BLUE), (0, 0))
    elif name == "resized_image":
        image = state.get("image")
        if image is not None:
            if image.get_size() != RESIZED_IMAGE_SIZE:
                image = pygame.transform.smoothscale(image, RESIZED_IMAGE_SIZE)
            surface.blit(image, (100, 100))
    elif name == "mouse":
        surface.fill(RAYWHITE.rgba)
        x, y = state.get("mouse", (0, 0))
        pygame.draw.circle(surface, BLUE.rgba, (x, y), 20)
    elif name == "delay":
        surface.fill(RAYWHITE.rgba)
        message = "Waiting for 2 seconds..." if state.get("waiting") else "2 seconds passed!"
        texts.append(_text(surface, message, 150, 200, 20, DARK_GRAY))
    return texts


def _refresh_rate() -> int:
    getter = getattr(pygame.display, "get_current_refresh_rate", None)
    if getter is None:
        return 0
    try:
        return int(getter())
    except pygame.error:
        return 0


def _load_image(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        placeholder = pygame.Surface((800, 600))
        placeholder.fill(GREEN.rgba)
        return placeholder


def main(argv: list[str] | None = None) -> int:
    """Open the window of one scene and show it until closed."""
    parser = argparse.ArgumentParser(prog="raygames-gallery", description="Small demos.")
    parser.add_argument("scene", nargs="?", choices=scene_names(), default="structure")
    parser.add_argument("--images", type=Path, default=Path("Images"))
    args = parser.parse_args(argv)
    scene = _SCENES[args.scene]

    pygame.init()
    try:
        size = scene.size or pygame.display.get_desktop_sizes()[0]
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(scene.title)
        clock = pygame.time.Clock()
        state: dict[str, Any] = {}
        if args.scene in ("image", "resized_image"):
            image = _load_image(args.images / "background.png")
            if args.scene == "resized_image":
                image = pygame.transform.smoothscale(image, RESIZED_IMAGE_SIZE)
            state["image"] = image
        if args.scene == "mouse":
            pygame.mouse.set_visible(False)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif (
                    args.scene == "mouse"
                    and event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                ):
                    running = False
            if not running:
                break

            keys = pygame.key.get_pressed()
            state["left"] = bool(keys[pygame.K_LEFT])
            state["right"] = bool(keys[pygame.K_RIGHT])
            state["mouse"] = pygame.mouse.get_pos()
            state["fps"] = int(clock.get_fps())
            state["refresh_rate"] = _refresh_rate()

            if args.scene == "delay":
                render_scene("delay", screen, {"waiting": True})
                pygame.display.flip()
                delay(DELAY_SECONDS)
                render_scene("delay", screen, {"waiting": False})
            else:
                render_scene(args.scene, screen, state)
            pygame.display.flip()
            clock.tick(scene.fps)
    finally:
        pygame.quit()
    return 0