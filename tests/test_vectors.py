import math

import pytest

from dungeonwalk.vectors import Rectangle, Vector2, Vector3, clamp


def test_clamp_inside_range_is_unchanged():
    assert clamp(6.0, 5.0, 7.0) == 6.0


def test_clamp_limits_to_bounds():
    assert clamp(1.0, 5.0, 7.0) == 5.0
    assert clamp(9.0, 5.0, 7.0) == 7.0


def test_normalized_has_unit_length():
    v = Vector3(1.5, -2.0, 7.25).normalized()
    assert math.isclose(v.length(), 1.0)


def test_normalized_keeps_direction():
    original = Vector3(2.0, 0.0, -2.0)
    unit = original.normalized()
    assert math.isclose(unit.x, -unit.z)
    assert unit.y == 0.0


def test_zero_vector_normalized_stays_zero():
    assert Vector3().normalized() == Vector3()


def test_scale_and_length_agree():
    v = Vector3(1.0, 2.0, 3.0)
    assert math.isclose(v.scale(3.0).length(), 3.0 * v.length())


def test_add_and_negate_cancel():
    v = Vector3(1.0, -4.0, 2.5)
    assert v + (-v) == Vector3()


def test_lerp_endpoints():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 8.0, 0.5)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_lerp_halfway_is_equidistant():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 8.0, 0.5)
    mid = a.lerp(b, 0.5)
    assert math.isclose((mid - a).length(), (b - mid).length())


def test_move_towards_reaches_close_target():
    a = Vector3(0.0, 0.0, 0.0)
    b = Vector3(0.5, 0.0, 0.0)
    assert a.move_towards(b, 1.0) == b


def test_move_towards_limits_step_length():
    a = Vector3(0.0, 0.0, 0.0)
    b = Vector3(10.0, -10.0, 3.0)
    step = a.move_towards(b, 0.25)
    assert math.isclose((step - a).length(), 0.25)
    assert (b - step).length() < (b - a).length()


def test_move_towards_same_point():
    a = Vector3(1.0, 1.0, 1.0)
    assert a.move_towards(a, 0.0) == a


def test_rectangle_contains_top_left_corner():
    rect = Rectangle(300.0, 300.0, 200.0, 50.0)
    assert rect.contains(Vector2(300.0, 300.0))


def test_rectangle_excludes_right_and_bottom_edges():
    rect = Rectangle(300.0, 300.0, 200.0, 50.0)
    assert not rect.contains(Vector2(500.0, 310.0))
    assert not rect.contains(Vector2(310.0, 350.0))


@pytest.mark.parametrize("point", [Vector2(0.0, 0.0), Vector2(299.0, 320.0)])
def test_rectangle_rejects_outside_points(point):
    assert not Rectangle(300.0, 300.0, 200.0, 50.0).contains(point)