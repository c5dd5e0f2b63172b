from __future__ import annotations

from fastapi import APIRouter

from dronepath import __version__
from dronepath.config import settings

router = APIRouter()


@router.get("/health")
def health():
    """Health check endpoint with planner defaults."""
    return {
        "status": "ok",
        "environment": settings.environment,
        "default_policy": settings.default_policy,
        "version": __version__,
    }
