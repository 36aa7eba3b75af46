"""Saving shape stacks to timestamped text files and loading them back."""

from __future__ import annotations

import re
import sys
from collections import deque
from datetime import datetime
from pathlib import Path

from paintkit.shape import MAX_FILES, Shape, ShapeType, create_shape
from paintkit.storage import ShapeStack, StackFullError

DEFAULT_DIRECTORY = "drawings"

_INT = r"[+-]?\d+"
_FLOAT = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_HEADER = re.compile(
    rf"SHAPE\s*({_INT})\s+({_INT})\s+({_FLOAT})\s+({_FLOAT})\s+({_FLOAT})\s+({_INT})"
)


def drawing_filename(when: datetime) -> str:
    """Name of the file a drawing saved at ``when`` is written to."""
    return (
        f"desenho_{when.day:02d}_{when.month:02d}_{when.year:04d}"
        f"_{when.hour:02d}_{when.minute:02d}_{when.second:02d}.txt"
    )


def _format_stack(stack: ShapeStack) -> str:
    blocks = []
    for shape in stack:
        lines = [
            f"SHAPE {shape.shape_id} {int(shape.shape_type)} "
            f"{shape.r:.2f} {shape.g:.2f} {shape.b:.2f} {shape.num_points}"
        ]
        lines.extend(f"{x:.2f} {y:.2f} {z:.2f}" for x, y, z in shape.points)
        blocks.append("\n".join(lines) + "\n\n")
    return "".join(blocks)


def save_stack(
    stack: ShapeStack,
    directory: str | Path = DEFAULT_DIRECTORY,
    now: datetime | None = None,
) -> Path:
    """Write every shape of ``stack`` to a timestamped file in ``directory``.

    The directory must already exist. Returns the path written.
    """
    when = now if now is not None else datetime.now()
    path = Path(directory) / drawing_filename(when)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(_format_stack(stack))
    print(f"Drawing saved to: {path}")
    return path


def _read_floats(lines: deque[str], count: int) -> list[float]:
    """Take up to ``count`` numbers from the front of ``lines``.

    A token that is not a number stops the reading; it and the rest of its
    line are put back so that they are looked at again as a line.
    """
    values: list[float] = []
    while lines and len(values) < count:
        tokens = lines.popleft().split()
        for position, token in enumerate(tokens):
            if len(values) == count:
                break
            try:
                values.append(float(token))
            except ValueError:
                lines.appendleft(" ".join(tokens[position:]))
                return values
    return values


def load_drawing(stack: ShapeStack, path: str | Path) -> list[Shape]:
    """Push the shapes stored in ``path`` onto ``stack``.

    Lines that are not shape headers are skipped. A shape whose points cannot
    all be read keeps the points read so far. Shapes that do not fit on the
    stack are reported and dropped. Returns the shapes that were pushed.
    """
    lines = deque(Path(path).read_text(encoding="utf-8").splitlines())
    loaded: list[Shape] = []
    while lines:
        match = _HEADER.match(lines.popleft())
        if match is None:
            continue
        shape_id, type_value, num_points = (int(match.group(i)) for i in (1, 2, 6))
        try:
            shape_type = ShapeType(type_value)
        except ValueError:
            raise ValueError(f"unknown shape type {type_value} for shape {shape_id}") from None
        shape = create_shape(num_points, shape_type)
        shape.shape_id = shape_id
        shape.r, shape.g, shape.b = (float(match.group(i)) for i in (3, 4, 5))

        values = _read_floats(lines, 3 * num_points)
        chunks = [values[start:start + 3] for start in range(0, len(values), 3)]
        for point, chunk in zip(shape.points, chunks):
            point[: len(chunk)] = chunk
        if len(values) < 3 * num_points:
            print(
                f"Error reading point {len(values) // 3} of shape {shape_id}",
                file=sys.stderr,
            )

        try:
            stack.push(shape)
        except StackFullError as exc:
            print(f"Error: {exc}", file=sys.stderr)
        else:
            loaded.append(shape)
    return loaded


def list_drawings(directory: str | Path = DEFAULT_DIRECTORY) -> list[Path]:
    """Regular ``.txt`` files in ``directory`` sorted by name, at most ``MAX_FILES``.

    A missing or unreadable directory gives an empty list.
    """
    base = Path(directory)
    try:
        entries = sorted(base.iterdir(), key=lambda entry: entry.name)
    except OSError:
        return []
    drawings = [
        entry
        for entry in entries
        if entry.name.endswith(".txt") and entry.is_file() and not entry.is_symlink()
    ]
    return drawings[:MAX_FILES]