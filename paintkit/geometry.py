"""Selection state and helpers that look at a shape's drawn points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from paintkit.shape import Shape
from paintkit.storage import ShapeStack


class ActionType(Enum):
    NONE = auto()
    TRANSLATE = auto()
    ROTATE = auto()
    SHEAR = auto()
    REFLECT = auto()
    DELETE = auto()


@dataclass
class Selector:
    """The currently selected shape and its position in the stack."""

    selected: Shape | None = None
    index: int = -1
    active: bool = False
    action: ActionType = ActionType.NONE


def _drawn(shape: Shape):
    return [p for p in shape.points if p[2] == 1]


def real_center(shape: Shape) -> tuple[float, float]:
    """Mean of the drawn points (``z == 1``), or ``(0, 0)`` if there are none."""
    drawn = _drawn(shape)
    if not drawn:
        return (0.0, 0.0)
    return (
        sum(p[0] for p in drawn) / len(drawn),
        sum(p[1] for p in drawn) / len(drawn),
    )


def real_num_points(shape: Shape) -> int:
    """Number of drawn points (``z == 1``)."""
    return len(_drawn(shape))


def verify_availability(stack: ShapeStack, selector: Selector) -> bool:
    """Report whether there is a selected shape to operate on."""
    if len(stack) == 0:
        print("No shapes created")
        return False
    if selector.selected is None:
        print("No shape selected")
        return False
    return True