import pytest

from paintkit.geometry import (
    ActionType,
    Selector,
    real_center,
    real_num_points,
    verify_availability,
)
from paintkit.shape import Shape, ShapeType, create_shape
from paintkit.storage import ShapeStack


def polygon():
    return Shape(
        ShapeType.POLYGON,
        points=[[0, 0, 1], [4, 0, 1], [4, 4, 1], [0, 4, 1], [100, 100, 0]],
    )


def test_real_center_ignores_undrawn_points():
    assert real_center(polygon()) == pytest.approx((2.0, 2.0))


def test_real_center_without_drawn_points_is_origin():
    assert real_center(create_shape(15, ShapeType.POINT)) == (0.0, 0.0)


def test_real_center_of_single_point_is_that_point():
    s = Shape(ShapeType.POINT, points=[[7.5, 3.25, 1]])
    assert real_center(s) == (7.5, 3.25)


def test_real_num_points_counts_drawn_only():
    assert real_num_points(polygon()) == 4
    assert real_num_points(create_shape(15, ShapeType.POINT)) == 0


def test_selector_defaults_to_nothing_selected():
    sel = Selector()
    assert sel.selected is None
    assert sel.index == -1
    assert sel.action is ActionType.NONE


def test_verify_availability_empty_stack(capsys):
    assert verify_availability(ShapeStack(20), Selector(selected=polygon())) is False
    assert "No shapes created" in capsys.readouterr().out


def test_verify_availability_no_selection(capsys):
    stack = ShapeStack(20)
    stack.push(polygon())
    assert verify_availability(stack, Selector()) is False
    assert "No shape selected" in capsys.readouterr().out


def test_verify_availability_with_selection():
    stack = ShapeStack(20)
    shape = polygon()
    stack.push(shape)
    assert verify_availability(stack, Selector(selected=shape, index=0)) is True