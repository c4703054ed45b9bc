"""Tests for Vec2, Stroke and the direction algebra."""

import math

import pytest

from knotwork.models.port import (
    Direction,
    Port,
    bounce,
    cross,
    glance,
    is_front,
    is_left,
    turn,
)
from knotwork.models.stroke import Stroke, StrokeType
from knotwork.models.vector import Vec2


# ------------------------------------------------------------------
# Vec2
# ------------------------------------------------------------------

def test_vec2_arithmetic():
    a = Vec2(1, 2)
    b = Vec2(3, -1)
    assert a + b == Vec2(4, 1)
    assert a - b == Vec2(-2, 3)
    assert a * 2 == Vec2(2, 4)
    assert 2 * a == Vec2(2, 4)
    assert -a == Vec2(-1, -2)


def test_vec2_angle_and_length():
    assert Vec2(0, 1).angle() == pytest.approx(math.pi / 2)
    assert Vec2(-1, 0).angle() == pytest.approx(math.pi)
    assert Vec2(3, 4).length() == pytest.approx(5.0)


def test_vec2_order_is_x_then_y():
    pts = [Vec2(1, 0), Vec2(0, 1), Vec2(0, -1), Vec2(-1, 0)]
    assert sorted(pts) == [Vec2(-1, 0), Vec2(0, -1), Vec2(0, 1), Vec2(1, 0)]
    assert not Vec2(1, 1) < Vec2(1, 1)


def test_vec2_usable_as_key():
    d = {Vec2(0.5, 1): "a"}
    assert d[Vec2(0.5, 1.0)] == "a"


def test_vec2_is_immutable():
    v = Vec2(1, 2)
    with pytest.raises(AttributeError):
        v.x = 3


# ------------------------------------------------------------------
# Stroke
# ------------------------------------------------------------------

def test_stroke_derived_geometry():
    s = Stroke((0, 0), (0, 2), StrokeType.GLANCE)
    assert s.midpoint() == Vec2(0, 1)
    assert s.length() == pytest.approx(2.0)
    assert s.angle() == pytest.approx(math.pi / 2)
    assert s.normal() == Vec2(-2, 0)


def test_stroke_defaults_to_cross():
    assert Stroke((0, 0), (1, 0)).type is StrokeType.CROSS


def test_zero_length_stroke_rejected():
    with pytest.raises(ValueError):
        Stroke((1, 1), (1, 1))


def test_stroke_type_parse():
    assert StrokeType.parse("Bounce") is StrokeType.BOUNCE
    assert StrokeType.parse(" glance ") is StrokeType.GLANCE
    assert StrokeType.parse(StrokeType.CROSS) is StrokeType.CROSS
    with pytest.raises(ValueError):
        StrokeType.parse("twist")


# ------------------------------------------------------------------
# Direction algebra
# ------------------------------------------------------------------

@pytest.mark.parametrize("fn", [bounce, cross, glance])
def test_direction_maps_are_involutions(fn):
    for d in Direction:
        assert fn(fn(d)) == d
        assert fn(d) != d


def test_direction_maps_differ_pairwise():
    for d in Direction:
        assert len({bounce(d), cross(d), glance(d)}) == 3


def test_direction_axes():
    assert bounce(Direction.FRONT_LEFT) == Direction.BACK_LEFT
    assert cross(Direction.FRONT_RIGHT) == Direction.BACK_LEFT
    assert glance(Direction.BACK_RIGHT) == Direction.BACK_LEFT
    for d in Direction:
        assert is_left(bounce(d)) == is_left(d)
        assert is_front(glance(d)) == is_front(d)
        assert is_left(cross(d)) != is_left(d)
        assert is_front(cross(d)) != is_front(d)


@pytest.mark.parametrize("fn", [bounce, cross, glance])
def test_direction_maps_reject_unknown_tags(fn):
    with pytest.raises(ValueError):
        fn("sideways")
    with pytest.raises(ValueError):
        fn(7)


def test_turn_dispatches_on_type():
    d = Direction.FRONT_LEFT
    assert turn(d, StrokeType.BOUNCE) == bounce(d)
    assert turn(d, StrokeType.CROSS) == cross(d)
    assert turn(d, StrokeType.GLANCE) == glance(d)


def test_ports_order_by_midpoint_then_direction():
    low = Port(Vec2(0, 0), Direction.BACK_RIGHT, StrokeType.CROSS, Vec2(0, 1), None, None)
    high = Port(Vec2(0, 1), Direction.FRONT_LEFT, StrokeType.CROSS, Vec2(0, 1), None, None)
    sibling = low.with_direction(Direction.FRONT_LEFT)
    assert sorted([high, low, sibling]) == [sibling, low, high]
    assert sibling.type is low.type
