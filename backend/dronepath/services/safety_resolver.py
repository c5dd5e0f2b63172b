from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from dronepath.errors import InternalInvariantViolation
from dronepath.schemas.geometry import Obstacle, Point, Segment
from dronepath.schemas.route import SafetyConfig
from dronepath.services.geometry import bearing, distance, offset

logger = logging.getLogger("dronepath.safety_resolver")

DETOUR_SWING = math.pi / 4


class SafetyResolver:
    """Turns one leg into a sequence of points that starts at ``start`` and ends at ``end``.

    Two policies:
      - ``detour``: if the straight leg touches an obstacle (radius + margin),
        swing out 45 degrees either side of the bearing at offset radius
        ``obstacle.radius + margin``. One correction per leg; the new sub-legs
        are not re-checked against other obstacles.
      - ``subdivide``: step along the bearing every ``max_step`` until the
        remainder fits. No avoidance on its own.
    """

    def __init__(self, obstacles: Sequence[Obstacle], config: SafetyConfig):
        self.obstacles = tuple(obstacles)
        self.config = config

    def resolve(self, start: Point, end: Point) -> List[Point]:
        if self.config.policy == "subdivide":
            return self.subdivide(start, end, self.config.step_length)

        points = self.detour(start, end)
        if self.config.max_step is None:
            return points

        capped = [points[0]]
        for a, b in zip(points, points[1:]):
            capped.extend(self.subdivide(a, b, self.config.max_step)[1:])
        return capped

    def first_blocking(self, segment: Segment) -> Optional[int]:
        """Index of the first obstacle (input order) the segment touches, if any."""
        for i, ob in enumerate(self.obstacles):
            if ob.intersects(segment, self.config.margin):
                return i
        return None

    def detour(self, start: Point, end: Point) -> List[Point]:
        if self.first_blocking(Segment(start=start, end=end)) is None:
            return [start, end]
        return self._offset_detour(start, end)

    def _offset_detour(self, start: Point, end: Point) -> List[Point]:
        idx = self.first_blocking(Segment(start=start, end=end))
        if idx is None:
            raise InternalInvariantViolation(
                f"detour requested for leg ({start.x}, {start.y}) -> ({end.x}, {end.y}) but no obstacle blocks it"
            )

        ob = self.obstacles[idx]
        theta = bearing(start, end)
        r = ob.radius + self.config.margin
        first = offset(start, theta + DETOUR_SWING, r)
        second = offset(end, theta - DETOUR_SWING, -r)

        logger.debug(
            "Leg (%.3f, %.3f) -> (%.3f, %.3f) blocked by obstacle %d; detour via (%.3f, %.3f), (%.3f, %.3f)",
            start.x, start.y, end.x, end.y, idx, first.x, first.y, second.x, second.y,
        )
        return [start, first, second, end]

    @staticmethod
    def subdivide(start: Point, end: Point, step: float) -> List[Point]:
        points = [start]
        current = start
        while distance(current, end) > step:
            current = offset(current, bearing(current, end), step)
            points.append(current)
        points.append(end)
        return points
