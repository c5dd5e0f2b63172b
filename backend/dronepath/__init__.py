"""Obstacle-aware waypoint tour planner.

Usage:
    from dronepath import Point, Obstacle, optimize_route
    plan = optimize_route([Point(x=0, y=0), Point(x=10, y=0)], [Obstacle(center=Point(x=5, y=0), radius=2)])
"""

__version__ = "0.1.0"

from dronepath.errors import InternalInvariantViolation, InvalidInputError
from dronepath.schemas.geometry import Obstacle, Point, Segment
from dronepath.schemas.route import LegHazard, RoutePlan, SafetyConfig
from dronepath.services.geometry import closest_point_on_segment, distance, segment_intersects_circle
from dronepath.services.safety_resolver import SafetyResolver
from dronepath.services.tour_builder import TourBuilder, optimize_route

__all__ = [
    "InternalInvariantViolation",
    "InvalidInputError",
    "LegHazard",
    "Obstacle",
    "Point",
    "RoutePlan",
    "SafetyConfig",
    "SafetyResolver",
    "Segment",
    "TourBuilder",
    "closest_point_on_segment",
    "distance",
    "optimize_route",
    "segment_intersects_circle",
]
