from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from dronepath.config import DEFAULT_MAX_STEP, DEFAULT_SAFETY_MARGIN
from dronepath.schemas.geometry import Obstacle, Point


SafetyPolicy = Literal["detour", "subdivide"]


class SafetyConfig(BaseModel):
    """Detour behaviour for one planning run.

    ``detour`` (default) routes around the first blocking obstacle with two
    offset points. ``subdivide`` only caps leg length at ``max_step``; its
    sub-legs are still checked and any that clip an obstacle are reported as
    hazards. When ``max_step`` is given under ``detour`` it is applied
    afterwards as a length cap on every produced sub-leg.
    """

    model_config = ConfigDict(frozen=True)

    policy: SafetyPolicy = "detour"
    margin: float = DEFAULT_SAFETY_MARGIN
    max_step: Optional[float] = None

    @property
    def step_length(self) -> float:
        return self.max_step if self.max_step is not None else DEFAULT_MAX_STEP


class LegHazard(BaseModel):
    """A leg of the final route that still passes within an obstacle's radius."""

    leg_index: int
    start: Point
    end: Point
    obstacle_index: int
    clearance: float


class RoutePlan(BaseModel):
    points: List[Point]
    hazards: List[LegHazard] = Field(default_factory=list)
    waypoint_order: List[int] = Field(default_factory=list)
    policy: SafetyPolicy = "detour"
    closed: bool = False

    @property
    def is_clear(self) -> bool:
        return not self.hazards


class SafetyIn(BaseModel):
    policy: Optional[SafetyPolicy] = None
    margin: Optional[float] = None
    max_step: Optional[float] = None


class RouteRequest(BaseModel):
    waypoints: List[Point] = Field(..., description="Tour waypoints; the first one is the origin")
    obstacles: List[Obstacle] = Field(default_factory=list, description="Circles, e.g. {'x': 5, 'y': 0, 'r': 2}")
    safety: Optional[SafetyIn] = None
    close_loop: Optional[bool] = None
