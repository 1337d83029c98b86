"""2D vectors, rectangles and the collision checks used by the games."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """A point or direction in screen space."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Vector2:
        """Return the vector multiplied by ``factor``."""
        return Vector2(self.x * factor, self.y * factor)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float


def check_collision_recs(rec1: Rectangle, rec2: Rectangle) -> bool:
    """Return True when the two rectangles overlap (touching edges do not count)."""
    return (
        rec1.x < rec2.x + rec2.width
        and rec1.x + rec1.width > rec2.x
        and rec1.y < rec2.y + rec2.height
        and rec1.y + rec1.height > rec2.y
    )


def check_collision_circles(
    center1: Vector2, radius1: float, center2: Vector2, radius2: float
) -> bool:
    """Return True when the two circles overlap or touch."""
    dx = center2.x - center1.x
    dy = center2.y - center1.y
    reach = radius1 + radius2
    return dx * dx + dy * dy <= reach * reach


def check_collision_point_rec(point: Vector2, rec: Rectangle) -> bool:
    """Return True when the point lies inside the rectangle (right/bottom edges excluded)."""
    return rec.x <= point.x < rec.x + rec.width and rec.y <= point.y < rec.y + rec.height