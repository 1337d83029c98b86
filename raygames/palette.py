"""RGBA colours and the standard named palette."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour; alpha 0 is transparent, 255 opaque."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        """The colour as an ``(r, g, b, a)`` tuple."""
        return (self.r, self.g, self.b, self.a)

    def with_alpha(self, alpha: float) -> Color:
        """Return this colour with alpha set from a 0..1 fraction (clamped)."""
        alpha = min(max(alpha, 0.0), 1.0)
        return Color(self.r, self.g, self.b, int(255.0 * alpha))


def color_alpha(color: Color, alpha: float) -> Color:
    """Return ``color`` with alpha set from a 0..1 fraction (clamped)."""
    return color.with_alpha(alpha)


LIGHTGRAY = Color(200, 200, 200, 255)
GRAY = Color(130, 130, 130, 255)
DARKGRAY = Color(80, 80, 80, 255)
YELLOW = Color(253, 249, 0, 255)
GOLD = Color(255, 203, 0, 255)
ORANGE = Color(255, 161, 0, 255)
PINK = Color(255, 109, 194, 255)
RED = Color(230, 41, 55, 255)
MAROON = Color(190, 33, 55, 255)
GREEN = Color(0, 228, 48, 255)
LIME = Color(0, 158, 47, 255)
DARKGREEN = Color(0, 117, 44, 255)
SKYBLUE = Color(102, 191, 255, 255)
BLUE = Color(0, 121, 241, 255)
DARKBLUE = Color(0, 82, 172, 255)
PURPLE = Color(200, 122, 255, 255)
VIOLET = Color(135, 60, 190, 255)
DARKPURPLE = Color(112, 31, 126, 255)
BEIGE = Color(211, 176, 131, 255)
BROWN = Color(127, 106, 79, 255)
DARKBROWN = Color(76, 63, 47, 255)
WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
BLANK = Color(0, 0, 0, 0)
MAGENTA = Color(255, 0, 255, 255)
RAYWHITE = Color(245, 245, 245, 255)

OLIVE = Color(131, 135, 49, 255)

NAMED_COLORS: dict[str, Color] = {
    "LIGHTGRAY": LIGHTGRAY,
    "GRAY": GRAY,
    "DARKGRAY": DARKGRAY,
    "YELLOW": YELLOW,
    "GOLD": GOLD,
    "ORANGE": ORANGE,
    "PINK": PINK,
    "RED": RED,
    "MAROON": MAROON,
    "GREEN": GREEN,
    "LIME": LIME,
    "DARKGREEN": DARKGREEN,
    "SKYBLUE": SKYBLUE,
    "BLUE": BLUE,
    "DARKBLUE": DARKBLUE,
    "PURPLE": PURPLE,
    "VIOLET": VIOLET,
    "DARKPURPLE": DARKPURPLE,
    "BEIGE": BEIGE,
    "BROWN": BROWN,
    "DARKBROWN": DARKBROWN,
    "WHITE": WHITE,
    "BLACK": BLACK,
    "BLANK": BLANK,
    "MAGENTA": MAGENTA,
    "RAYWHITE": RAYWHITE,
}