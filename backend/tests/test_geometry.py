import math

import pytest
from pydantic import ValidationError

from dronepath.schemas.geometry import Obstacle, Point, Segment
from dronepath.services.geometry import (
    bearing,
    closest_point_on_segment,
    distance,
    offset,
    segment_intersects_circle,
    segment_point_distance,
)


def seg(ax, ay, bx, by):
    return Segment(start=Point(x=ax, y=ay), end=Point(x=bx, y=by))


def test_distance():
    assert distance(Point(x=0, y=0), Point(x=3, y=4)) == 5.0
    assert distance(Point(x=1, y=1), Point(x=1, y=1)) == 0.0


def test_closest_point_inside_segment():
    assert closest_point_on_segment(Point(x=5, y=0), seg(0, 0, 10, 0)) == Point(x=5, y=0)
    assert closest_point_on_segment(Point(x=4, y=3), seg(0, 0, 10, 0)) == Point(x=4, y=0)


def test_closest_point_clamped_to_endpoints():
    assert closest_point_on_segment(Point(x=-5, y=2), seg(0, 0, 10, 0)) == Point(x=0, y=0)
    assert closest_point_on_segment(Point(x=15, y=-2), seg(0, 0, 10, 0)) == Point(x=10, y=0)


@pytest.mark.parametrize("p", [Point(x=0, y=0), Point(x=-3, y=8), Point(x=2, y=2)])
def test_degenerate_segment_returns_start(p):
    a = Point(x=2, y=2)
    assert closest_point_on_segment(p, Segment(start=a, end=a)) == a


def test_segment_intersects_circle_boundary_is_inclusive():
    # closest approach is exactly the radius
    assert segment_intersects_circle(seg(0, 2, 10, 2), Point(x=5, y=0), 2.0)
    assert not segment_intersects_circle(seg(0, 2.5, 10, 2.5), Point(x=5, y=0), 2.0)


def test_segment_point_distance_zero_length():
    assert segment_point_distance(Point(x=3, y=4), seg(0, 0, 0, 0)) == 5.0


def test_bearing_and_offset():
    assert bearing(Point(x=0, y=0), Point(x=0, y=5)) == pytest.approx(math.pi / 2)
    p = offset(Point(x=1, y=1), math.pi / 4, math.sqrt(2))
    assert p.x == pytest.approx(2.0)
    assert p.y == pytest.approx(2.0)


def test_obstacle_accepts_flat_circle_shape():
    ob = Obstacle.model_validate({"x": 5, "y": 1, "r": 2})
    assert ob.center == Point(x=5, y=1)
    assert ob.radius == 2.0
    assert Obstacle.model_validate({"x": 5, "y": 1, "radius": 3}).radius == 3.0


def test_obstacle_intersects_with_margin():
    ob = Obstacle(center=Point(x=5, y=0), radius=2)
    leg = seg(0, 2.5, 10, 2.5)
    assert not ob.intersects(leg)
    assert ob.intersects(leg, margin=1.0)
    assert ob.clearance(leg) == pytest.approx(0.5)


def test_points_are_immutable():
    p = Point(x=1, y=2)
    with pytest.raises(ValidationError):
        p.x = 5


@pytest.mark.parametrize("raw", [{"x": 5}, {"x": 5, "y": 1}, {"y": 1, "r": 2}])
def test_obstacle_with_missing_fields_is_rejected(raw):
    with pytest.raises(ValidationError):
        Obstacle.model_validate(raw)


def test_segment_length():
    assert seg(0, 0, 3, 4).length == 5.0
