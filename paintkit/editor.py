"""Keyboard and mouse handling for the drawing canvas.

Mouse positions handed to the editor are window coordinates, with y growing
downwards; they are turned into canvas coordinates (y growing upwards) here.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from pathlib import Path

from paintkit.drawings import DEFAULT_DIRECTORY, save_stack
from paintkit.geometry import Selector, real_center, verify_availability
from paintkit.interaction import (
    Animator,
    ColorCycler,
    RotationSession,
    ScaleSession,
    ShearSession,
)
from paintkit.menu import program_help
from paintkit.operations import ReflectionKind, reflect, translate
from paintkit.shape import MAX_FIGURES, WINDOW_HEIGHT, Shape, ShapeType, create_shape
from paintkit.storage import ShapeStack, StackEmptyError, StackFullError

Picker = Callable[[ShapeStack, float, float], "int | None"]

MAX_VERTICES = 15
_PICK_TOLERANCE = 5.0

_POINT_LIMITS = {
    ShapeType.POINT: 1,
    ShapeType.LINE: 2,
    ShapeType.FREE_DRAW: MAX_VERTICES,
    ShapeType.POLYGON: MAX_VERTICES,
}


class Operation(Enum):
    TRANSLATE = auto()
    ROTATE = auto()
    SCALE = auto()
    SHEAR = auto()
    COLOR = auto()
    NONE = auto()
    REFLECT = auto()
    SELECTION = auto()


class ShearType(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()


class SpecialKey(Enum):
    """Arrow keys, valued by their usual key symbols."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


class MouseButton(Enum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


_REFLECTION_KEYS = {
    SpecialKey.UP: (ReflectionKind.X_AXIS, "Reflecting on the X axis ..."),
    SpecialKey.RIGHT: (ReflectionKind.Y_AXIS, "Reflecting on the Y axis ..."),
    SpecialKey.DOWN: (ReflectionKind.ORIGIN, "Reflecting through the origin ..."),
}


def _pick_topmost(stack: ShapeStack, x: float, y: float) -> int | None:
    """Index of the topmost shape whose drawn points' box, widened a little, holds ``(x, y)``."""
    for index in range(len(stack) - 1, -1, -1):
        drawn = [p for p in stack[index].points if p[2] == 1]
        if not drawn:
            continue
        xs = [p[0] for p in drawn]
        ys = [p[1] for p in drawn]
        if (
            min(xs) - _PICK_TOLERANCE <= x <= max(xs) + _PICK_TOLERANCE
            and min(ys) - _PICK_TOLERANCE <= y <= max(ys) + _PICK_TOLERANCE
        ):
            return index
    return None


def _building_type(shape_type: ShapeType, clicks: int) -> ShapeType:
    """Type a shape under construction has after ``clicks`` points were placed."""
    if clicks <= 1:
        return ShapeType.LINE if shape_type is ShapeType.POLYGON and clicks == 1 else (
            ShapeType.POINT if clicks == 0 else shape_type
        )
    return shape_type


class Editor:
    """State of the drawing session, driven by key presses and mouse events.

    Every handler returns ``True`` when the canvas should be redrawn.
    """

    def __init__(
        self,
        stack: ShapeStack | None = None,
        selector: Selector | None = None,
        *,
        drawings_directory: str | Path = DEFAULT_DIRECTORY,
        show_help: Callable[[], object] = program_help,
        pick: Picker | None = None,
    ) -> None:
        self.stack = stack if stack is not None else ShapeStack(MAX_FIGURES)
        self.selector = selector if selector is not None else Selector()
        self.drawings_directory = drawings_directory
        self._show_help = show_help
        self._pick = pick if pick is not None else _pick_topmost
        self.background: tuple[float, float, float] = (1.0, 1.0, 1.0)
        self.shear_type = ShearType.HORIZONTAL
        self.shape_type = ShapeType.POINT
        self.animating = False
        self._stop_requested = False
        self._animator = Animator()
        self._key_actions: dict[str, Callable[[], None]] = {
            "b": lambda: self._set_background((0.0, 0.0, 0.0)),
            "w": lambda: self._set_background((1.0, 1.0, 1.0)),
            "q": self._quit,
            "c": self._start_color,
            "p": lambda: self._start_creation(
                ShapeType.POINT, "Click on the canvas to create the point"
            ),
            "l": lambda: self._start_creation(
                ShapeType.LINE, "Click on the canvas to choose the first point of the line"
            ),
            "k": lambda: self._start_creation(
                ShapeType.FREE_DRAW,
                "Click on the canvas to choose the first point of the free drawing",
            ),
            "j": lambda: self._start_creation(
                ShapeType.POLYGON,
                "Click on the canvas to choose the first point of the free drawing",
            ),
            "t": lambda: self._start_operation(
                Operation.TRANSLATE, "Move the mouse on the canvas to translate the shape", True
            ),
            "r": lambda: self._start_operation(
                Operation.ROTATE, "Move the mouse on the canvas to rotate the shape", True
            ),
            "e": lambda: self._start_operation(
                Operation.SCALE, "Use the scroll wheel to control the scale", False
            ),
            "z": lambda: self._start_operation(
                Operation.SHEAR, "Move the mouse on the canvas to shear the shape", True
            ),
            "s": self._start_selection,
            "d": self._save,
            "i": self._start_reflection,
            "x": self._delete_selected,
            "a": self._toggle_animation,
        }
        self.reset_states()

    # ---- state -------------------------------------------------------

    def reset_states(self) -> None:
        """Cancel any creation or operation in progress."""
        self.waiting_for_click = False
        self.create_mode = False
        self.operation = Operation.NONE
        self.n_points = 0
        self._building: Shape | None = None
        self._rotation = RotationSession()
        self._shear = ShearSession()
        self._scale = ScaleSession()
        self._colors = ColorCycler()

    # ---- keyboard ----------------------------------------------------

    def key_pressed(self, key: str) -> bool:
        """Handle an ordinary key; ``'q'`` ends the program."""
        print(f"Key: {key}")
        action = self._key_actions.get(key)
        if action is not None:
            action()
        return True

    def _set_background(self, color: tuple[float, float, float]) -> None:
        self.background = color

    def _quit(self) -> None:
        raise SystemExit(0)

    def _start_color(self) -> None:
        self.reset_states()
        print("Use the scroll wheel to change colours")
        self.waiting_for_click = True
        self.operation = Operation.COLOR

    def _start_creation(self, shape_type: ShapeType, message: str) -> None:
        self.reset_states()
        print(message)
        self.waiting_for_click = True
        self.create_mode = True
        self.shape_type = shape_type

    def _start_operation(self, operation: Operation, message: str, follow_mouse: bool) -> None:
        if not verify_availability(self.stack, self.selector):
            return
        self.reset_states()
        self.operation = operation
        print(message)
        if follow_mouse:
            self.waiting_for_click = True
            self.create_mode = False

    def _start_selection(self) -> None:
        if len(self.stack) == 0:
            print("No shape to select.")
            return
        self.selector.selected = None
        self.reset_states()
        self.operation = Operation.SELECTION
        self.waiting_for_click = True
        self.selector.active = True
        print("Click on the shape you want to select")

    def _save(self) -> None:
        if len(self.stack) == 0:
            print("No shape to save.")
            return
        self.reset_states()
        try:
            save_stack(self.stack, self.drawings_directory)
        except OSError as exc:
            print(f"Error creating drawing file: {exc}")

    def _start_reflection(self) -> None:
        if not verify_availability(self.stack, self.selector):
            return
        self.reset_states()
        self.operation = Operation.REFLECT
        print("Reflection mode on.")
        print("Press UP to reflect on the X axis.")
        print("Press RIGHT to reflect on the Y axis.")
        print("Press DOWN to reflect through the origin.")

    def _delete_selected(self) -> None:
        if not verify_availability(self.stack, self.selector):
            return
        self.reset_states()
        self.operation = Operation.REFLECT
        try:
            self.stack.remove_at(self.selector.index)
        except (IndexError, StackEmptyError) as exc:
            print(f"Error: {exc}")
        else:
            print("Shape deleted.")
        self.selector.selected = None
        self.selector.index = -1
        self.selector.active = False

    def _toggle_animation(self) -> None:
        if self.animating:
            self._stop_requested = True
            return
        self.reset_states()
        self.animating = True
        self._animator = Animator()

    def special_key(self, key: SpecialKey | str) -> bool:
        """Handle an arrow key: reflect in reflection mode, else pick the shear direction."""
        key = SpecialKey(key)
        selected = self.selector.selected
        if self.operation is Operation.REFLECT and selected is not None:
            cx, cy = real_center(selected)
            if key in _REFLECTION_KEYS:
                kind, message = _REFLECTION_KEYS[key]
                print(message)
                reflect(selected.points, cx, cy, kind)
            self.operation = Operation.NONE
            print("Reflection applied.")
            return True

        if key is SpecialKey.UP:
            self.shear_type = ShearType.VERTICAL
        elif self.operation is Operation.SHEAR:
            if key is SpecialKey.DOWN:
                self.shear_type = ShearType.VERTICAL
            else:
                self.shear_type = ShearType.HORIZONTAL
        return False

    # ---- mouse -------------------------------------------------------

    def mouse_button(self, button: MouseButton | int, pressed: bool, x: float, y: float) -> bool:
        """Handle a mouse button event at window position ``(x, y)``."""
        button = MouseButton(button)
        left_down = button is MouseButton.LEFT and pressed
        limit = _POINT_LIMITS.get(self.shape_type)
        if (
            limit is not None
            and self.n_points < limit
            and self.waiting_for_click
            and self.create_mode
            and left_down
        ):
            return self._add_point(limit, float(x), float(WINDOW_HEIGHT - y))
        if self.operation is Operation.SELECTION and self.waiting_for_click and left_down:
            return self._select_at(float(x), float(WINDOW_HEIGHT - y))
        if button is MouseButton.RIGHT and pressed:
            self.reset_states()
        return False

    def _add_point(self, limit: int, fx: float, fy: float) -> bool:
        if self.n_points == 0:
            shape = create_shape(limit, ShapeType.POINT)
            try:
                self.stack.push(shape)
            except StackFullError as exc:
                print(f"Error: {exc}")
                self.reset_states()
                return False
            self._building = shape
        else:
            shape = self._building
            assert shape is not None
            shape.shape_type = _building_type(self.shape_type, self.n_points)

        shape.points[self.n_points] = [fx, fy, 1.0]
        self.n_points += 1
        if self.n_points == limit:
            self.waiting_for_click = False
            self.create_mode = False
            self._building = None

        self._show_help()
        print(f"Point added at ({fx:.2f}, {fy:.2f})")
        if self.shape_type is ShapeType.LINE and self.n_points == 1:
            print("Choose the position of the second point")
        elif self.shape_type in (ShapeType.FREE_DRAW, ShapeType.POLYGON) and self.n_points != limit:
            print(f"Choose the position of point {self.n_points + 1}")
            print(f"At most {MAX_VERTICES} vertices")
        return True

    def _select_at(self, fx: float, fy: float) -> bool:
        self._show_help()
        index = self._pick(self.stack, fx, fy)
        if index is None:
            self.selector.selected = None
            self.selector.index = -1
            print("No shape selected")
        else:
            self.selector.selected = self.stack[index]
            self.selector.index = index
            print("Shape selected")
        return True

    def mouse_moved(self, x: float, y: float) -> bool:
        """Handle the mouse moving to window position ``(x, y)`` with no button held."""
        if not self.waiting_for_click or self.create_mode:
            return False
        fx, fy = float(x), float(WINDOW_HEIGHT - y)
        has_selection = self.selector.selected is not None

        if self.operation is Operation.TRANSLATE and has_selection:
            shape = self.stack[self.selector.index]
            first = shape.points[0]
            translate(shape.points, fx - first[0], fy - first[1])
            self._show_help()
            print("Right-click to confirm the translation")
            print(f"Shape translated to ({fx:.2f}, {fy:.2f})")
            return True

        if self.operation is Operation.ROTATE and has_selection:
            self._rotation.update(self.stack[self.selector.index], fx, fy)
            self._show_help()
            print("Right-click to confirm the rotation")
            return True

        if self.operation is Operation.SHEAR:
            if len(self.stack) == 0:
                return False
            vertical = self.shear_type is ShearType.VERTICAL
            factor = self._shear.update(self.stack[-1], fx, fy, vertical)
            if factor is None:
                return False
            self._show_help()
            print("Right-click to confirm the shear")
            print("Use the arrow keys to switch between horizontal and vertical shear")
            print(f"{'shy' if vertical else 'shx'} now: {factor:.3f}")
            return True
        return False

    def mouse_wheel(self, direction: int) -> bool:
        """Handle a wheel step: positive ``direction`` is up."""
        if self.create_mode or self.selector.selected is None:
            return False
        if self.operation is Operation.SCALE:
            self._scale.step(self.stack[self.selector.index], direction)
            self._show_help()
            print("Use the scroll wheel to control the scale")
            print("Right-click to confirm")
            print(f"Current scale {100 * self._scale.current:2.0f}%")
            return True
        if self.operation is Operation.COLOR:
            r, g, b = self._colors.step(self.stack[self.selector.index], direction)
            self._show_help()
            print("Use the scroll wheel to control the colour")
            print("Right-click to confirm")
            print(f"Current colour: ({r:.2f}, {g:.2f}, {b:.2f})")
            return True
        return False

    # ---- animation ---------------------------------------------------

    def animation_step(self) -> bool:
        """Advance the animation by one frame.

        Returns ``True`` while another frame should be scheduled; once a stop
        was asked for, the animation ends and ``False`` is returned.
        """
        if self._stop_requested:
            self.animating = False
            self._stop_requested = False
            return False
        if not self.animating:
            return False
        self._animator.step(self.stack)
        return True