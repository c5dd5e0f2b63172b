from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


class Segment(BaseModel):
    """A straight leg under consideration. ``start == end`` is allowed."""

    model_config = ConfigDict(frozen=True)

    start: Point
    end: Point

    @property
    def length(self) -> float:
        return distance(self.start, self.end)


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def closest_point_on_segment(p: Point, seg: Segment) -> Point:
    """Nearest point to ``p`` on the finite segment (projection clamped to t in [0, 1])."""
    ax, ay = seg.start.x, seg.start.y
    abx, aby = seg.end.x - ax, seg.end.y - ay
    ab2 = abx * abx + aby * aby
    if ab2 == 0.0:
        return seg.start
    t = max(0.0, min(1.0, ((p.x - ax) * abx + (p.y - ay) * aby) / ab2))
    return Point(x=ax + t * abx, y=ay + t * aby)


def segment_point_distance(p: Point, seg: Segment) -> float:
    """Distance from point P to segment AB."""
    return distance(closest_point_on_segment(p, seg), p)


def segment_intersects_circle(seg: Segment, center: Point, radius: float) -> bool:
    # Touching the boundary counts as a hit.
    return segment_point_distance(center, seg) <= radius


class Obstacle(BaseModel):
    """Forbidden disk. Accepts ``{"center": {...}, "radius": ..}`` or the flat
    circle shape ``{"x": .., "y": .., "r": ..}`` used by the simulator world.
    """

    model_config = ConfigDict(frozen=True)

    center: Point
    radius: float

    @model_validator(mode="before")
    @classmethod
    def _accept_flat_circle(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "center" in data:
            return data
        if not ({"x", "y"} & data.keys()):
            return data
        # Only pass through what was sent; missing fields fail validation.
        out: dict = {"center": {k: data[k] for k in ("x", "y") if k in data}}
        if "r" in data:
            out["radius"] = data["r"]
        elif "radius" in data:
            out["radius"] = data["radius"]
        return out

    def intersects(self, segment: Segment, margin: float = 0.0) -> bool:
        return segment_intersects_circle(segment, self.center, self.radius + margin)

    def clearance(self, segment: Segment) -> float:
        """Closest approach of ``segment`` to the disk edge (negative when inside)."""
        return segment_point_distance(self.center, segment) - self.radius
