from __future__ import annotations


class InvalidInputError(ValueError):
    """Planner inputs that cannot produce a route (empty tour, negative radius, ...)."""


class InternalInvariantViolation(RuntimeError):
    """The resolver reached an obstacle-detour path with no obstacle to go around.

    This is a defect, not a recoverable condition; callers should let it propagate.
    """
