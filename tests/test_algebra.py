"""Tests for the 2D geometry helpers."""

import math

import numpy as np
import pytest

from stepsearch.core.algebra import Circle, Point2D, Rectangle, distance_xy, heading_xy, wrap_angle


def test_point_arithmetic():
    a = Point2D(1.0, 2.0)
    b = Point2D(3.0, -1.0)
    assert a + b == Point2D(4.0, 1.0)
    assert b - a == Point2D(2.0, -3.0)
    assert 2.0 * a == Point2D(2.0, 4.0)
    assert Point2D(3.0, 4.0).norm() == pytest.approx(5.0)


def test_point_conversions():
    p = Point2D.from_iterable(np.array([1.5, -2.0]))
    assert p == Point2D(1.5, -2.0)
    assert p.to_tuple() == (1.5, -2.0)
    assert np.allclose(p.to_numpy(), [1.5, -2.0])
    assert Point2D.zero() == Point2D(0.0, 0.0)


def test_point_is_hashable_value():
    assert len({Point2D(1.0, 1.0), Point2D(1.0, 1.0), Point2D(1.0, 2.0)}) == 2


def test_offset_polar():
    p = Point2D(1.0, 1.0).offset_polar(2.0, math.pi / 2)
    assert p.x == pytest.approx(1.0)
    assert p.y == pytest.approx(3.0)


def test_distance_and_heading():
    assert distance_xy(Point2D(0.0, 0.0), Point2D(3.0, 4.0)) == pytest.approx(5.0)
    assert heading_xy(Point2D(0.0, 0.0), Point2D(0.0, 2.0)) == pytest.approx(math.pi / 2)


def test_wrap_angle():
    assert wrap_angle(0.0) == 0.0
    assert wrap_angle(3 * math.pi / 2) == pytest.approx(-math.pi / 2)
    assert wrap_angle(-3 * math.pi / 2) == pytest.approx(math.pi / 2)


def test_rectangle_contains_inclusive():
    rect = Rectangle(-1.0, 1.0, -2.0, 2.0)
    assert rect.contains(Point2D(1.0, 2.0))
    assert rect.contains(Point2D(0.0, 0.0))
    assert not rect.contains(Point2D(1.1, 0.0))
    assert rect.is_space_available(Point2D(-1.0, -2.0))
    assert rect.width() == 2.0
    assert rect.height() == 4.0


def test_rectangle_around():
    rect = Rectangle.around(Point2D(1.0, 1.0), 2.0)
    assert rect.bounds() == (-1.0, 3.0, -1.0, 3.0)
    assert Rectangle.around(Point2D(0.0, 0.0), 1.0, 3.0).bounds() == (-1.0, 1.0, -3.0, 3.0)


def test_circle_contains_and_intersects():
    circle = Circle(Point2D(0.0, 0.0), 1.0)
    assert circle.contains(Point2D(1.0, 0.0))
    assert not circle.contains(Point2D(1.2, 0.0))
    assert circle.contains(Point2D(1.2, 0.0), margin=0.5)
    assert circle.intersects(Circle(Point2D(1.5, 0.0), 1.0))
    assert not circle.intersects(Circle(Point2D(3.0, 0.0), 1.0))
    assert circle.intersects(Circle(Point2D(3.0, 0.0), 1.0), margin=1.5)
