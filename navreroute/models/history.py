"""Reroute attempt history models."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .options import RouteRequestOptions
from .progress import ProgressSnapshot, PositionFix
from .results import RealignmentErrorKind


class RerouteAttempt(BaseModel):
    """Record of a single reroute cycle, successful or abandoned."""
    request_id: str = Field(description="UUID for this attempt")
    timestamp: datetime

    # Inputs
    progress: Optional[ProgressSnapshot] = None
    fix: Optional[PositionFix] = None

    # Outcome
    succeeded: bool
    error_kind: Optional[RealignmentErrorKind] = None
    message: Optional[str] = Field(default=None, description="Failure diagnostic")
    realigned_options: Optional[RouteRequestOptions] = None

    # Directions backend
    route_fetched: bool = False
    route_error: Optional[str] = None
    duration_seconds: float = 0.0
