"""Affine transformations applied to shape points in homogeneous coordinates.

Each function updates the ``[x, y, z]`` point lists it is given in place and
returns the same list for convenience.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum

from paintkit.matrix import mat_mul, mat_vec

Points = list[list[float]]


class ReflectionKind(IntEnum):
    """Axis of a reflection through a shape's centre."""

    X_AXIS = 0
    Y_AXIS = 1
    ORIGIN = 2


def _translation(tx: float, ty: float):
    return ((1, 0, tx), (0, 1, ty), (0, 0, 1))


def _about(center_x: float, center_y: float, matrix):
    """Conjugate ``matrix`` so that it acts around the given centre."""
    return mat_mul(_translation(center_x, center_y), mat_mul(matrix, _translation(-center_x, -center_y)))


def _apply(transform, points: Points) -> Points:
    for point in points:
        x, y, _ = mat_vec(transform, (point[0], point[1], 1))
        point[0], point[1] = x, y
    return points


def translate(points: Points, dx: float, dy: float) -> Points:
    """Move every point by ``(dx, dy)``."""
    return _apply(_translation(dx, dy), points)


def rotate(points: Points, angle: float, cx: float, cy: float) -> Points:
    """Rotate every point by ``angle`` radians around ``(cx, cy)``."""
    c, s = math.cos(angle), math.sin(angle)
    rotation = ((c, -s, 0), (s, c, 0), (0, 0, 1))
    return _apply(_about(cx, cy, rotation), points)


def scale(
    points: Points,
    original: Sequence[Sequence[float]],
    cx: float,
    cy: float,
    sx: float,
    sy: float,
) -> Points:
    """Set ``points`` to ``original`` scaled by ``(sx, sy)`` around ``(cx, cy)``.

    Only x and y are written; each point keeps its own z.
    """
    transform = _about(cx, cy, ((sx, 0, 0), (0, sy, 0), (0, 0, 1)))
    for point, source in zip(points, original):
        x, y, _ = mat_vec(transform, (source[0], source[1], 1))
        point[0], point[1] = x, y
    return points


def _shear(points: Points, original, cx: float, cy: float, matrix) -> Points:
    if not original:
        return points
    for point, source in zip(points, original):
        x, y, _ = mat_vec(matrix, (source[0] - cx, source[1] - cy, 1))
        point[0], point[1], point[2] = x + cx, y + cy, source[2]
    return points


def shear_horizontal(
    points: Points, original: Sequence[Sequence[float]], cx: float, cy: float, shx: float
) -> Points:
    """Set ``points`` to ``original`` sheared along x by ``shx`` around ``(cx, cy)``."""
    return _shear(points, original, cx, cy, ((1, shx, 0), (0, 1, 0), (0, 0, 1)))


def shear_vertical(
    points: Points, original: Sequence[Sequence[float]], cx: float, cy: float, shy: float
) -> Points:
    """Set ``points`` to ``original`` sheared along y by ``shy`` around ``(cx, cy)``."""
    return _shear(points, original, cx, cy, ((1, 0, 0), (shy, 1, 0), (0, 0, 1)))


_REFLECTIONS = {
    ReflectionKind.X_AXIS: ((1, 0, 0), (0, -1, 0), (0, 0, 1)),
    ReflectionKind.Y_AXIS: ((-1, 0, 0), (0, 1, 0), (0, 0, 1)),
    ReflectionKind.ORIGIN: ((-1, 0, 0), (0, -1, 0), (0, 0, 1)),
}


def reflect(points: Points, cx: float, cy: float, kind: ReflectionKind | int) -> Points:
    """Reflect every point through ``(cx, cy)`` as chosen by ``kind``."""
    matrix = _REFLECTIONS[ReflectionKind(kind)]
    return _apply(_about(cx, cy, matrix), points)