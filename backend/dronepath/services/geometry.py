from __future__ import annotations

import math

from dronepath.schemas.geometry import (
    Point,
    closest_point_on_segment,
    distance,
    segment_intersects_circle,
    segment_point_distance,
)

__all__ = [
    "bearing",
    "closest_point_on_segment",
    "distance",
    "offset",
    "segment_intersects_circle",
    "segment_point_distance",
]


def bearing(a: Point, b: Point) -> float:
    """Heading from ``a`` to ``b`` in radians (atan2 of the delta)."""
    return math.atan2(b.y - a.y, b.x - a.x)


def offset(p: Point, angle: float, dist: float) -> Point:
    return Point(x=p.x + dist * math.cos(angle), y=p.y + dist * math.sin(angle))
