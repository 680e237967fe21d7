"""Pydantic models for reroute request realignment."""

from .options import (
    Approach,
    BearingConstraint,
    Point,
    RouteRequestOptions,
)
from .progress import ProgressSnapshot, PositionFix
from .results import (
    RealignmentErrorKind,
    RealignmentFailure,
    RealignmentResult,
)
from .requests import RerouteRequest
from .history import RerouteAttempt

__all__ = [
    # Route request
    "Approach",
    "BearingConstraint",
    "Point",
    "RouteRequestOptions",
    # Navigation state
    "ProgressSnapshot",
    "PositionFix",
    # Outcome
    "RealignmentErrorKind",
    "RealignmentFailure",
    "RealignmentResult",
    # API / history
    "RerouteRequest",
    "RerouteAttempt",
]
