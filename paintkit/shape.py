"""Shapes drawn on the canvas and the editor's global limits."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

WINDOW_HEIGHT = 400
WINDOW_WIDTH = 600
MAX_FIGURES = 20
MAX_FILES = 100

_RAND_MAX = 2**31 - 1


class ShapeType(IntEnum):
    """Kind of a shape; the integer values are those stored in drawing files."""

    POINT = 0
    LINE = 1
    SQUARE = 2
    TRIANGLE = 3
    POLYGON = 4
    FREE_DRAW = 5


@dataclass
class Shape:
    """A shape made of ``[x, y, z]`` points; ``z == 1`` marks a point to be drawn."""

    shape_type: ShapeType
    points: list[list[float]] = field(default_factory=list)
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    shape_id: int = 0

    @property
    def num_points(self) -> int:
        return len(self.points)

    @property
    def color(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


def create_shape(num_points: int, shape_type: ShapeType) -> Shape:
    """Create a black shape with ``num_points`` zeroed points and a random id."""
    if num_points < 0:
        raise ValueError("num_points must not be negative")
    return Shape(
        shape_type=ShapeType(shape_type),
        points=[[0.0, 0.0, 0.0] for _ in range(num_points)],
        shape_id=random.randint(0, _RAND_MAX),
    )