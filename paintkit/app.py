"""The drawing window, canvas rendering and the program's entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from paintkit.drawings import DEFAULT_DIRECTORY
from paintkit.editor import Editor, MouseButton, SpecialKey
from paintkit.geometry import Selector
from paintkit.interaction import FRAME_INTERVAL_MS
from paintkit.menu import drawings_menu, keybinds_menu, program_help, start_menu
from paintkit.shape import MAX_FIGURES, WINDOW_HEIGHT, WINDOW_WIDTH, Shape, ShapeType
from paintkit.storage import ShapeStack

WINDOW_TITLE = "Paint 2025 updated Premium"
POINT_SIZE = 4.0
SELECTION_COLOR = "#808080"

_SPECIAL_KEYSYMS = {key.value: key for key in SpecialKey}


def _hex(color: Sequence[float]) -> str:
    """Turn an ``(r, g, b)`` triple of 0..1 floats into a ``#rrggbb`` string."""
    channels = (min(255, max(0, round(c * 255))) for c in color)
    return "#" + "".join(f"{c:02x}" for c in channels)


def _to_canvas(point: Sequence[float]) -> tuple[float, float]:
    """Canvas coordinates (y growing downwards) of a shape point."""
    return (point[0], WINDOW_HEIGHT - point[1])


def _flatten(points) -> list[float]:
    return [coordinate for point in points for coordinate in _to_canvas(point)]


def _drawn(shape: Shape) -> list[list[float]]:
    return [p for p in shape.points if p[2] == 1]


def _draw_shape(canvas: Any, shape: Shape) -> list[Any]:
    color = _hex(shape.color)
    kind = shape.shape_type
    if kind is ShapeType.POINT:
        if not shape.points:
            return []
        x, y = _to_canvas(shape.points[0])
        half = POINT_SIZE / 2
        return [
            canvas.create_rectangle(
                x - half, y - half, x + half, y + half, fill=color, outline=color
            )
        ]
    if kind is ShapeType.LINE:
        if shape.num_points < 2:
            return []
        return [canvas.create_line(*_flatten(shape.points[:2]), fill=color)]
    if kind is ShapeType.TRIANGLE:
        if shape.num_points < 3:
            return []
        return [canvas.create_polygon(*_flatten(shape.points[:3]), fill=color, outline=color)]
    if kind is ShapeType.FREE_DRAW:
        drawn = _drawn(shape)
        if len(drawn) < 2:
            return []
        return [canvas.create_line(*_flatten([*drawn, drawn[0]]), fill=color)]
    if kind is ShapeType.POLYGON:
        drawn = _drawn(shape)
        if len(drawn) < 3:
            return []
        return [canvas.create_polygon(*_flatten(drawn), fill=color, outline=color)]
    return []


def _draw_selection(canvas: Any, shape: Shape) -> list[Any]:
    drawn = _drawn(shape)
    if not drawn:
        return []
    corners = [_to_canvas(p) for p in drawn]
    xs = [c[0] for c in corners]
    ys = [c[1] for c in corners]
    return [
        canvas.create_rectangle(
            min(xs), min(ys), max(xs), max(ys), outline=SELECTION_COLOR, dash=(4, 2)
        )
    ]


def render(
    canvas: Any,
    stack: ShapeStack,
    selector: Selector | None = None,
    background: Sequence[float] = (1.0, 1.0, 1.0),
) -> list[Any]:
    """Redraw every shape of ``stack`` on ``canvas``; return the items created.

    ``canvas`` is anything with the drawing methods of a Tk canvas.
    """
    canvas.delete("all")
    canvas.configure(bg=_hex(background))
    items: list[Any] = []
    for shape in stack:
        items.extend(_draw_shape(canvas, shape))
    if selector is not None and selector.selected is not None:
        items.extend(_draw_selection(canvas, selector.selected))
    return items


class PaintWindow:
    """A Tk window that feeds keyboard and mouse events to an ``Editor``."""

    def __init__(self, editor: Editor, title: str = WINDOW_TITLE) -> None:
        import tkinter as tk

        self.editor = editor
        self._root = tk.Tk()
        self._root.title(title)
        self._root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}+100+100")
        self._root.resizable(False, False)
        self._canvas = tk.Canvas(
            self._root, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, highlightthickness=0
        )
        self._canvas.pack()
        self._timer: str | None = None
        self._closed = False

        self._root.bind("<Key>", self._on_key)
        self._canvas.bind("<ButtonPress-1>", lambda e: self._on_button(MouseButton.LEFT, e))
        self._canvas.bind("<ButtonPress-3>", lambda e: self._on_button(MouseButton.RIGHT, e))
        self._canvas.bind("<Motion>", self._on_motion)
        self._canvas.bind("<MouseWheel>", self._on_wheel)
        self._canvas.bind("<Button-4>", lambda e: self._wheel(1))
        self._canvas.bind("<Button-5>", lambda e: self._wheel(-1))
        self._root.protocol("WM_DELETE_WINDOW", self._close)

    def redraw(self) -> None:
        if not self._closed:
            render(self._canvas, self.editor.stack, self.editor.selector, self.editor.background)

    def run(self) -> None:
        """Show the window and process events until it is closed."""
        self.redraw()
        self._root.mainloop()

    def _close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._timer is not None:
            self._root.after_cancel(self._timer)
            self._timer = None
        self._root.destroy()

    def _on_key(self, event: Any) -> None:
        special = _SPECIAL_KEYSYMS.get(event.keysym)
        try:
            if special is not None:
                self.editor.special_key(special)
            elif event.char and len(event.char) == 1:
                self.editor.key_pressed(event.char)
            else:
                return
        except SystemExit:
            self._close()
            return
        self.redraw()
        self._ensure_animation()

    def _on_button(self, button: MouseButton, event: Any) -> None:
        if self.editor.mouse_button(button, True, event.x, event.y):
            self.redraw()

    def _on_motion(self, event: Any) -> None:
        if self.editor.mouse_moved(event.x, event.y):
            self.redraw()

    def _on_wheel(self, event: Any) -> None:
        if event.delta:
            self._wheel(1 if event.delta > 0 else -1)

    def _wheel(self, direction: int) -> None:
        if self.editor.mouse_wheel(direction):
            self.redraw()

    def _ensure_animation(self) -> None:
        if self.editor.animating and self._timer is None and not self._closed:
            self._timer = self._root.after(FRAME_INTERVAL_MS, self._tick)

    def _tick(self) -> None:
        self._timer = None
        if self._closed:
            return
        if self.editor.animation_step():
            self.redraw()
            self._timer = self._root.after(FRAME_INTERVAL_MS, self._tick)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="paint", description="A small vector paint program.")
    parser.add_argument(
        "--drawings",
        default=DEFAULT_DIRECTORY,
        help="directory where drawings are saved and loaded (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the start menu and, unless the user quits, the drawing window."""
    args = _parse_args(argv)
    directory = Path(args.drawings)
    stack = ShapeStack(MAX_FIGURES)
    selector = Selector()

    while True:
        option = start_menu()
        if option == 1:
            break
        if option == 2:
            drawings_menu(stack, directory)
            break
        if option == 3:
            return 0
        if option == 4:
            keybinds_menu()

    editor = Editor(stack, selector, drawings_directory=directory)
    window = PaintWindow(editor)
    program_help()
    window.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())