from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from dronepath.config import settings
from dronepath.errors import InvalidInputError
from dronepath.schemas.route import RoutePlan, RouteRequest, SafetyConfig, SafetyIn
from dronepath.services.tour_builder import default_safety_config, optimize_route

logger = logging.getLogger("dronepath.api")

router = APIRouter()


def _to_config(safety: SafetyIn | None) -> SafetyConfig:
    base = default_safety_config()
    if safety is None:
        return base
    policy = safety.policy or base.policy
    max_step = safety.max_step
    if max_step is None and policy == "subdivide":
        max_step = settings.max_step_m
    return SafetyConfig(
        policy=policy,
        margin=base.margin if safety.margin is None else safety.margin,
        max_step=max_step,
    )


@router.get("/routes/defaults")
def route_defaults():
    """Safety settings applied when a request leaves them out."""
    return {
        "safety": default_safety_config().model_dump(),
        "close_loop": settings.close_loop,
    }


@router.post("/routes/optimize", response_model=RoutePlan)
def optimize(payload: RouteRequest):
    """Order the waypoints into a tour and route each leg around obstacles.

    Expected JSON:
    {
      "waypoints": [{"x": 0, "y": 0}, {"x": 10, "y": 0}],
      "obstacles": [{"x": 5, "y": 0, "r": 2}],
      "safety": {"policy": "detour", "margin": 1.0},
      "close_loop": true
    }
    """
    try:
        return optimize_route(
            payload.waypoints,
            payload.obstacles,
            config=_to_config(payload.safety),
            close_loop=payload.close_loop,
        )
    except InvalidInputError as e:
        logger.info("Rejected route request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
