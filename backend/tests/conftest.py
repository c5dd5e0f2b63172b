"""Shared fixtures: the sample tour used across the planner tests."""

from __future__ import annotations

import pytest

from dronepath.schemas.geometry import Obstacle, Point


def pts(*coords):
    return [Point(x=x, y=y) for x, y in coords]


@pytest.fixture
def square_tour():
    return pts((0, 0), (10, 0), (5, 5), (0, 10))


@pytest.fixture
def sample_obstacles():
    return [
        Obstacle(center=Point(x=3, y=3), radius=2),
        Obstacle(center=Point(x=7, y=2), radius=1),
    ]
