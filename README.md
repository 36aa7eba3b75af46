# paintkit

A small vector paint program. You draw points, lines, free outlines and
filled polygons on a 600×400 canvas, then select a shape and translate,
rotate, scale, shear, reflect, recolour or delete it. The drawing can
bounce around the window as an animation. Drawings are saved as plain
text files and can be loaded again at start-up.

## Installing

```
pip install .
```

The window uses Tkinter from the standard library, so a Python with Tk
support is needed. There are no other dependencies. For the tests:

```
pip install .[test]
pytest
```

## Running

```
paintkit
paintkit --drawings path/to/dir
```

`--drawings` sets the directory where drawings are saved and looked for
(default: `drawings`). A start menu appears in the terminal:

1. start drawing
2. list the `.txt` files in the drawings directory and load one
   (0 or an out-of-range number starts with a blank canvas)
3. quit
4. show the key bindings (answer `q` to go back)

## Keys inside the window

| Key | Action |
|-----|--------|
| `p` | create a point (one click) |
| `l` | create a line segment (two clicks) |
| `k` | free outline, up to 15 vertices |
| `j` | filled polygon, up to 15 vertices |
| `s` | select a shape by clicking on or near it (the topmost one wins) |
| `t` | translate the selected shape: its first point follows the mouse |
| `r` | rotate the selected shape around its centre as the mouse circles it |
| `e` | scale the selected shape with the mouse wheel (factor 0.2 to 2.0, in steps of 0.1) |
| `z` | shear with mouse movement; Left/Right choose horizontal, Up/Down vertical |
| `i` | reflect the selected shape: Up = X axis, Right = Y axis, Down = origin |
| `c` | cycle the selected shape's colour through eight colours with the mouse wheel |
| `x` | delete the selected shape |
| `d` | save the drawing |
| `a` | start or stop the animation |
| `b` / `w` | black / white background |
| `q` | quit |

`t`, `r`, `e`, `z`, `i` and `x` need a selected shape. The shear acts on
the shape at the top of the stack (the last one drawn). A right click
ends the current creation or operation and keeps the shape as it is.
The animation moves every shape except the last one drawn, turning it
back at the window's edges.

## Drawing files

`d` writes a file named `desenho_DD_MM_YYYY_HH_MM_SS.txt` into the
drawings directory. Each shape is a header line followed by its points
and a blank line:

```
SHAPE <id> <type> <r> <g> <b> <number of points>
<x> <y> <z>
...
```

`type` is the integer value of `ShapeType` (0 point, 1 line, 2 square,
3 triangle, 4 polygon, 5 free drawing); `z` is 1 for a point that is
drawn. At most 20 shapes fit on the canvas and at most 100 files are
listed.

## Using the library

The pieces work without a window:

```python
import math

from paintkit.shape import ShapeType, create_shape
from paintkit.storage import ShapeStack
from paintkit.operations import translate, rotate
from paintkit.geometry import real_center

stack = ShapeStack(20)
line = create_shape(2, ShapeType.LINE)
line.points[0] = [0.0, 0.0, 1.0]
line.points[1] = [10.0, 0.0, 1.0]
stack.push(line)

translate(line.points, 5, 5)
cx, cy = real_center(line)
rotate(line.points, math.pi / 2, cx, cy)
```

- `paintkit.matrix`: `mat_vec`, `mat_mul` for 3×3 homogeneous matrices.
- `paintkit.shape`: `Shape`, `ShapeType`, `create_shape`.
- `paintkit.storage`: `ShapeStack` with `push`, `pop`, `remove_at`,
  `find`; raises `StackFullError` and `StackEmptyError`.
- `paintkit.operations`: `translate`, `rotate`, `scale`,
  `shear_horizontal`, `shear_vertical`, `reflect` with `ReflectionKind`.
- `paintkit.geometry`: `Selector`, `real_center`, `real_num_points`,
  `verify_availability`.
- `paintkit.drawings`: `save_stack`, `load_drawing`, `list_drawings`,
  `drawing_filename`.
- `paintkit.interaction`: `RotationSession`, `ShearSession`,
  `ScaleSession`, `ColorCycler`, `Animator`.
- `paintkit.editor.Editor`: the keyboard and mouse state machine
  (`key_pressed`, `special_key`, `mouse_button`, `mouse_moved`,
  `mouse_wheel`, `animation_step`).
- `paintkit.app`: `render` draws a stack on a Tk canvas, `PaintWindow`
  runs the window, `main` is the `paintkit` command.

## What it does not do

- It does not create the drawings directory; saving fails with a message
  if the directory does not exist.
- There is no undo, and squares and triangles cannot be created from the
  keyboard, although triangles read from a drawing file are drawn.
- The start menu and prompts live in the terminal, not in the window.