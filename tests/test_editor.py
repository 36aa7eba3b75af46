import math

import pytest

from paintkit.drawings import list_drawings, load_drawing
from paintkit.editor import (
    Editor,
    MouseButton,
    Operation,
    ShearType,
    SpecialKey,
)
from paintkit.geometry import real_center
from paintkit.interaction import ANIMATION_STEP, PALETTE
from paintkit.operations import shear_horizontal
from paintkit.shape import WINDOW_HEIGHT, ShapeType
from paintkit.storage import ShapeStack


def make_editor(capacity=20, pick=None, directory="."):
    return Editor(
        ShapeStack(capacity),
        show_help=lambda: None,
        pick=pick,
        drawings_directory=directory,
    )


def click(editor, x, canvas_y):
    return editor.mouse_button(MouseButton.LEFT, True, x, WINDOW_HEIGHT - canvas_y)


def move(editor, x, canvas_y):
    return editor.mouse_moved(x, WINDOW_HEIGHT - canvas_y)


def add_polygon(editor, corners):
    editor.key_pressed("j")
    for x, y in corners:
        click(editor, x, y)
    editor.mouse_button(MouseButton.RIGHT, True, 0, 0)
    return editor.stack[-1]


def select(editor, index):
    editor.key_pressed("s")
    editor._pick = lambda stack, x, y: index
    click(editor, 0, 0)


def drawn(shape):
    return [p[:2] for p in shape.points if p[2] == 1]


SQUARE = [(100, 100), (200, 100), (200, 200), (100, 200)]


def test_point_creation_converts_window_coordinates():
    editor = make_editor()
    editor.key_pressed("p")
    assert editor.mouse_button(MouseButton.LEFT, True, 10, 100)
    shape = editor.stack[0]
    assert shape.shape_type is ShapeType.POINT
    assert shape.points == [[10.0, WINDOW_HEIGHT - 100.0, 1.0]]
    assert editor.waiting_for_click is False
    assert editor.create_mode is False


def test_line_is_point_until_second_click():
    editor = make_editor()
    editor.key_pressed("l")
    click(editor, 1, 2)
    assert editor.stack[0].shape_type is ShapeType.POINT
    click(editor, 30, 40)
    shape = editor.stack[0]
    assert shape.shape_type is ShapeType.LINE
    assert drawn(shape) == [[1.0, 2.0], [30.0, 40.0]]
    assert len(editor.stack) == 1
    assert editor.waiting_for_click is False


def test_polygon_types_progress_and_cap_at_fifteen():
    editor = make_editor()
    editor.key_pressed("j")
    click(editor, 0, 0)
    click(editor, 10, 0)
    assert editor.stack[0].shape_type is ShapeType.LINE
    click(editor, 10, 10)
    assert editor.stack[0].shape_type is ShapeType.POLYGON
    for i in range(12):
        click(editor, i, i)
    assert editor.n_points == 15
    assert editor.create_mode is False
    assert click(editor, 5, 5) is False
    assert len(editor.stack) == 1
    assert len(drawn(editor.stack[0])) == 15


def test_free_draw_keeps_type_and_unused_points_hidden():
    editor = make_editor()
    editor.key_pressed("k")
    for x, y in [(1, 1), (2, 2), (3, 3)]:
        click(editor, x, y)
    shape = editor.stack[0]
    assert shape.shape_type is ShapeType.FREE_DRAW
    assert shape.num_points == 15
    assert len(drawn(shape)) == 3


def test_right_click_cancels_creation():
    editor = make_editor()
    editor.key_pressed("k")
    click(editor, 1, 1)
    editor.mouse_button(MouseButton.RIGHT, True, 0, 0)
    assert editor.waiting_for_click is False
    assert editor.n_points == 0
    assert click(editor, 5, 5) is False
    assert len(drawn(editor.stack[0])) == 1


def test_full_stack_cancels_creation():
    editor = make_editor(capacity=0)
    editor.key_pressed("p")
    assert click(editor, 1, 1) is False
    assert len(editor.stack) == 0
    assert editor.waiting_for_click is False


def test_background_keys():
    editor = make_editor()
    editor.key_pressed("b")
    assert editor.background == (0.0, 0.0, 0.0)
    editor.key_pressed("w")
    assert editor.background == (1.0, 1.0, 1.0)


def test_quit_key_exits():
    editor = make_editor()
    with pytest.raises(SystemExit):
        editor.key_pressed("q")


def test_operations_need_a_selection():
    editor = make_editor()
    for key in "treiz":
        editor.key_pressed(key)
        assert editor.operation is Operation.NONE
    add_polygon(editor, SQUARE)
    editor.key_pressed("t")
    assert editor.operation is Operation.NONE


def test_selection_with_empty_stack_does_nothing():
    editor = make_editor()
    editor.key_pressed("s")
    assert editor.operation is Operation.NONE
    assert editor.selector.active is False


def test_default_pick_selects_shape_under_cursor():
    editor = make_editor()
    add_polygon(editor, [(10, 10), (20, 10), (20, 20)])
    add_polygon(editor, SQUARE)
    editor.key_pressed("s")
    click(editor, 150, 150)
    assert editor.selector.index == 1
    assert editor.selector.selected is editor.stack[1]
    editor.key_pressed("s")
    click(editor, 500, 350)
    assert editor.selector.selected is None
    assert editor.selector.index == -1


def test_translate_moves_first_point_to_cursor():
    editor = make_editor()
    shape = add_polygon(editor, SQUARE)
    select(editor, 0)
    editor.key_pressed("t")
    assert editor.operation is Operation.TRANSLATE
    assert move(editor, 50, 60)
    assert shape.points[0][:2] == [50.0, 60.0]
    assert shape.points[1][:2] == [150.0, 60.0]


def test_rotation_keeps_center_and_maps_square_onto_itself():
    editor = make_editor()
    shape = add_polygon(editor, SQUARE)
    select(editor, 0)
    editor.key_pressed("r")
    cx, cy = real_center(shape)
    move(editor, cx + 100, cy)
    move(editor, cx, cy + 100)
    new_cx, new_cy = real_center(shape)
    assert new_cx == pytest.approx(cx)
    assert new_cy == pytest.approx(cy)
    assert shape.points[0][0] == pytest.approx(SQUARE[1][0])
    assert shape.points[0][1] == pytest.approx(SQUARE[1][1])


def test_reflection_on_x_axis_mirrors_y_about_center():
    editor = make_editor()
    shape = add_polygon(editor, [(100, 100), (200, 120), (150, 250)])
    select(editor, 0)
    editor.key_pressed("i")
    assert editor.operation is Operation.REFLECT
    cx, cy = real_center(shape)
    before = drawn(shape)
    assert editor.special_key(SpecialKey.UP)
    for (x0, y0), (x1, y1) in zip(before, drawn(shape)):
        assert x1 == pytest.approx(x0)
        assert y0 + y1 == pytest.approx(2 * cy)
    assert editor.operation is Operation.NONE


def test_scale_wheel_steps_distance_from_center():
    editor = make_editor()
    shape = add_polygon(editor, SQUARE)
    select(editor, 0)
    editor.key_pressed("e")
    cx, cy = real_center(shape)
    original = [math.dist(p, (cx, cy)) for p in drawn(shape)]
    assert editor.mouse_wheel(1)
    for d0, p in zip(original, drawn(shape)):
        assert math.dist(p, (cx, cy)) == pytest.approx(d0 * 1.1)
    editor.mouse_wheel(-1)
    editor.mouse_wheel(-1)
    for d0, p in zip(original, drawn(shape)):
        assert math.dist(p, (cx, cy)) == pytest.approx(d0 * 0.9)


def test_color_wheel_paints_selected_shape():
    editor = make_editor()
    shape = add_polygon(editor, SQUARE)
    select(editor, 0)
    editor.key_pressed("c")
    assert editor.mouse_wheel(1)
    assert shape.color == PALETTE[1]
    editor.mouse_wheel(-1)
    editor.mouse_wheel(-1)
    assert shape.color == PALETTE[-1]


def test_shear_horizontal_follows_mouse():
    editor = make_editor()
    shape = add_polygon(editor, SQUARE)
    select(editor, 0)
    original = [list(p) for p in shape.points]
    cx, cy = real_center(shape)
    editor.key_pressed("z")
    assert editor.operation is Operation.SHEAR
    move(editor, 300, 300)
    move(editor, 400, 300)
    expected = shear_horizontal([list(p) for p in original], original, cx, cy, 1.0)
    for got, want in zip(shape.points, expected):
        assert got == pytest.approx(want)


def test_arrow_keys_choose_shear_direction():
    editor = make_editor()
    editor.special_key(SpecialKey.LEFT)
    assert editor.shear_type is ShearType.HORIZONTAL
    editor.special_key("Up")
    assert editor.shear_type is ShearType.VERTICAL
    editor.special_key(SpecialKey.RIGHT)
    assert editor.shear_type is ShearType.VERTICAL
    add_polygon(editor, SQUARE)
    select(editor, 0)
    editor.key_pressed("z")
    editor.special_key(SpecialKey.LEFT)
    assert editor.shear_type is ShearType.HORIZONTAL
    editor.special_key(SpecialKey.DOWN)
    assert editor.shear_type is ShearType.VERTICAL


def test_delete_removes_selected_shape():
    editor = make_editor()
    add_polygon(editor, SQUARE)
    keep = add_polygon(editor, [(1, 1), (5, 1), (5, 5)])
    select(editor, 0)
    editor.key_pressed("x")
    assert list(editor.stack) == [keep]
    assert editor.selector.selected is None
    assert editor.selector.index == -1
    assert editor.selector.active is False


def test_save_writes_loadable_drawing(tmp_path):
    editor = make_editor(directory=tmp_path)
    editor.key_pressed("d")
    assert list_drawings(tmp_path) == []
    shape = add_polygon(editor, SQUARE)
    editor.key_pressed("d")
    files = list_drawings(tmp_path)
    assert len(files) == 1
    restored = ShapeStack(5)
    load_drawing(restored, files[0])
    assert restored[0].points == shape.points
    assert restored[0].shape_type is ShapeType.POLYGON


def test_animation_moves_shapes_below_top_and_stops():
    editor = make_editor()
    editor.key_pressed("p")
    click(editor, 100, 100)
    editor.key_pressed("p")
    click(editor, 300, 300)
    editor.key_pressed("a")
    assert editor.animating
    assert editor.animation_step() is True
    assert editor.stack[0].points[0][:2] == [100 + ANIMATION_STEP, 100 + ANIMATION_STEP]
    assert editor.stack[1].points[0][:2] == [300.0, 300.0]
    editor.key_pressed("a")
    assert editor.animation_step() is False
    assert editor.animating is False
    assert editor.animation_step() is False
    assert editor.stack[0].points[0][:2] == [100 + ANIMATION_STEP, 100 + ANIMATION_STEP]