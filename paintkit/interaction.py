"""Stateful mouse-driven edits: rotating, shearing, scaling, recolouring, animating.

Coordinates given to these sessions are canvas coordinates, with y growing
upwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from paintkit.geometry import real_center
from paintkit.operations import rotate, scale, shear_horizontal, shear_vertical, translate
from paintkit.shape import WINDOW_HEIGHT, WINDOW_WIDTH, Shape
from paintkit.storage import ShapeStack

SHEAR_SENSITIVITY = 0.01
SCALE_STEP = 0.1
SCALE_MAX = 2.0
SCALE_MIN = 0.2
ANIMATION_STEP = 5.0
FRAME_INTERVAL_MS = 16

PALETTE: tuple[tuple[float, float, float], ...] = (
    (0.0, 0.0, 0.0),  # black
    (1.0, 0.0, 0.0),  # red
    (0.0, 1.0, 0.0),  # green
    (0.0, 0.0, 1.0),  # blue
    (1.0, 1.0, 0.0),  # yellow
    (1.0, 0.0, 1.0),  # magenta
    (0.0, 1.0, 1.0),  # cyan
    (1.0, 1.0, 1.0),  # white
)


def _copy_points(shape: Shape) -> list[list[float]]:
    return [list(point) for point in shape.points]


@dataclass
class RotationSession:
    """Rotates a shape around its centre as the mouse circles it."""

    started: bool = False
    last_angle: float = 0.0

    def update(self, shape: Shape, x: float, y: float) -> float:
        """Rotate ``shape`` by the change in the mouse's angle; return that change."""
        cx, cy = real_center(shape)
        current = math.atan2(y - cy, x - cx)
        if not self.started:
            self.last_angle = current
            self.started = True
        delta = current - self.last_angle
        rotate(shape.points, delta, cx, cy)
        self.last_angle = current
        return delta


@dataclass
class ShearSession:
    """Shears a shape around its centre, following the mouse from where it started."""

    started: bool = False
    original: list[list[float]] = field(default_factory=list)
    center: tuple[float, float] = (0.0, 0.0)
    last_x: float = 0.0
    last_y: float = 0.0
    shx: float = 0.0
    shy: float = 0.0

    def update(self, shape: Shape, x: float, y: float, vertical: bool) -> float | None:
        """Apply the accumulated shear to ``shape``; return the shear factor in use.

        Returns ``None`` and does nothing for a shape without points.
        """
        if not self.started:
            if shape.num_points <= 0:
                return None
            self.original = _copy_points(shape)
            self.center = real_center(shape)
            self.last_x, self.last_y = x, y
            self.shx = self.shy = 0.0
            self.started = True

        cx, cy = self.center
        if vertical:
            self.shy += (y - self.last_y) * SHEAR_SENSITIVITY
            shear_vertical(shape.points, self.original, cx, cy, self.shy)
            result = self.shy
        else:
            self.shx += (x - self.last_x) * SHEAR_SENSITIVITY
            shear_horizontal(shape.points, self.original, cx, cy, self.shx)
            result = self.shx
        self.last_x, self.last_y = x, y
        return result


@dataclass
class ScaleSession:
    """Scales a shape around its centre in steps driven by the mouse wheel."""

    current: float = 0.0
    center: tuple[float, float] = (0.0, 0.0)
    original: list[list[float]] = field(default_factory=list)

    @property
    def factor(self) -> float:
        return 1 + self.current

    def step(self, shape: Shape, direction: int) -> float:
        """Grow (``direction > 0``) or shrink (``direction < 0``) ``shape``; return the factor."""
        if self.center == (0.0, 0.0):
            self.original = _copy_points(shape)
            self.center = real_center(shape)

        if direction > 0 and self.factor < SCALE_MAX:
            self.current += SCALE_STEP
        elif direction < 0 and self.factor > SCALE_MIN:
            self.current -= SCALE_STEP

        cx, cy = self.center
        scale(shape.points, self.original, cx, cy, self.factor, self.factor)
        return self.factor


@dataclass
class ColorCycler:
    """Steps a shape's colour through the fixed palette."""

    position: int = 0

    def step(self, shape: Shape, direction: int) -> tuple[float, float, float]:
        """Move to the next (``direction > 0``) or previous colour and paint ``shape``."""
        if direction > 0:
            self.position += 1
            if self.position >= len(PALETTE):
                self.position = 0
        else:
            self.position -= 1
            if self.position < 0:
                self.position = len(PALETTE) - 1
        shape.r, shape.g, shape.b = PALETTE[self.position]
        return PALETTE[self.position]


@dataclass
class Animator:
    """Bounces shapes around the window, one step per frame.

    Every shape below the top of the stack moves diagonally and turns back
    when its drawn points reach an edge of the window.
    """

    directions: list[list[bool]] = field(default_factory=list)
    width: float = WINDOW_WIDTH
    height: float = WINDOW_HEIGHT

    def step(self, stack: ShapeStack) -> None:
        """Move each animated shape of ``stack`` by one frame."""
        animated = list(stack)[:-1]
        while len(self.directions) < len(animated):
            self.directions.append([True, True])

        for shape, direction in zip(animated, self.directions):
            if not shape.points:
                continue
            first = shape.points[0]
            drawn = [p for p in shape.points[1:] if p[2] == 1]
            xs = [first[0], *(p[0] for p in drawn)]
            ys = [first[1], *(p[1] for p in drawn)]

            if min(xs) <= 0:
                direction[0] = True
            if max(xs) >= self.width:
                direction[0] = False
            if min(ys) <= 0:
                direction[1] = True
            if max(ys) >= self.height:
                direction[1] = False

            dx = ANIMATION_STEP if direction[0] else -ANIMATION_STEP
            dy = ANIMATION_STEP if direction[1] else -ANIMATION_STEP
            translate(shape.points, dx, dy)