from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from dronepath.config import settings
from dronepath.errors import InvalidInputError
from dronepath.schemas.geometry import Obstacle, Point, Segment
from dronepath.schemas.route import LegHazard, RoutePlan, SafetyConfig
from dronepath.services.geometry import distance, segment_intersects_circle
from dronepath.services.safety_resolver import SafetyResolver

logger = logging.getLogger("dronepath.tour_builder")


def default_safety_config() -> SafetyConfig:
    return SafetyConfig(
        policy=settings.default_policy,
        margin=settings.safety_margin_m,
        max_step=settings.max_step_m if settings.default_policy == "subdivide" else None,
    )


def validate_inputs(waypoints: Sequence[Point], obstacles: Sequence[Obstacle], config: SafetyConfig) -> None:
    if not waypoints:
        raise InvalidInputError("at least one waypoint is required")
    for i, w in enumerate(waypoints):
        if not w.is_finite():
            raise InvalidInputError(f"waypoint {i} has non-finite coordinates ({w.x}, {w.y})")
    for i, ob in enumerate(obstacles):
        if not ob.center.is_finite() or not math.isfinite(ob.radius):
            raise InvalidInputError(f"obstacle {i} is not finite")
        if ob.radius < 0:
            raise InvalidInputError(f"obstacle {i} has negative radius {ob.radius}")
    if not math.isfinite(config.margin) or config.margin < 0:
        raise InvalidInputError(f"safety margin must be >= 0 (got {config.margin})")
    if config.max_step is not None and not config.max_step > 0:
        raise InvalidInputError(f"max step must be > 0 (got {config.max_step})")


class TourBuilder:
    """Greedy nearest-neighbour tour with per-leg obstacle resolution.

    Waypoints are tracked by input index, so coincident waypoints are each
    visited once. Ties on distance go to the earliest input index.
    """

    def __init__(
        self,
        waypoints: Sequence[Point],
        obstacles: Sequence[Obstacle] = (),
        config: Optional[SafetyConfig] = None,
        close_loop: bool = True,
    ):
        self.waypoints = tuple(waypoints)
        self.obstacles = tuple(obstacles)
        self.config = config if config is not None else default_safety_config()
        self.close_loop = close_loop
        validate_inputs(self.waypoints, self.obstacles, self.config)
        self.resolver = SafetyResolver(self.obstacles, self.config)

    def nearest_unvisited(self, current: Point, unvisited: List[int]) -> int:
        """Position in ``unvisited`` of the closest waypoint (first wins on ties)."""
        best = 0
        best_d = distance(self.waypoints[unvisited[0]], current)
        for pos in range(1, len(unvisited)):
            d = distance(self.waypoints[unvisited[pos]], current)
            if d < best_d:
                best, best_d = pos, d
        return best

    def build(self) -> RoutePlan:
        origin = self.waypoints[0]
        route: List[Point] = [origin]
        order: List[int] = [0]
        unvisited = list(range(1, len(self.waypoints)))
        current = origin

        while unvisited:
            idx = unvisited.pop(self.nearest_unvisited(current, unvisited))
            selected = self.waypoints[idx]
            route.extend(self.resolver.resolve(current, selected)[1:])
            order.append(idx)
            current = selected

        closed = self.close_loop and len(self.waypoints) > 1
        if closed:
            route.extend(self.resolver.resolve(current, origin)[1:])

        hazards = self.find_hazards(route)
        logger.info(
            "Planned %d waypoints into %d route points (policy=%s, closed=%s, hazards=%d)",
            len(self.waypoints), len(route), self.config.policy, closed, len(hazards),
        )
        return RoutePlan(
            points=route,
            hazards=hazards,
            waypoint_order=order,
            policy=self.config.policy,
            closed=closed,
        )

    def find_hazards(self, route: Sequence[Point]) -> List[LegHazard]:
        """Every leg that still touches an obstacle's bare radius."""
        hazards: List[LegHazard] = []
        for i in range(len(route) - 1):
            seg = Segment(start=route[i], end=route[i + 1])
            for j, ob in enumerate(self.obstacles):
                if segment_intersects_circle(seg, ob.center, ob.radius):
                    clearance = ob.clearance(seg)
                    logger.warning(
                        "Leg %d (%.3f, %.3f) -> (%.3f, %.3f) still clips obstacle %d (clearance %.3f)",
                        i, seg.start.x, seg.start.y, seg.end.x, seg.end.y, j, clearance,
                    )
                    hazards.append(
                        LegHazard(leg_index=i, start=seg.start, end=seg.end, obstacle_index=j, clearance=clearance)
                    )
        return hazards


def optimize_route(
    waypoints: Sequence[Point],
    obstacles: Sequence[Obstacle] = (),
    config: Optional[SafetyConfig] = None,
    close_loop: Optional[bool] = None,
) -> RoutePlan:
    """Plan a tour over ``waypoints`` starting at the first one."""
    if close_loop is None:
        close_loop = settings.close_loop
    return TourBuilder(waypoints, obstacles, config, close_loop).build()
