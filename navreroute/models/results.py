"""Realignment outcome models."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .options import RouteRequestOptions


class RealignmentErrorKind(str, Enum):
    """Why a reroute request could not be built."""
    MISSING_INPUT = "missing_input"
    NO_REMAINING_WAYPOINTS = "no_remaining_waypoints"
    INCONSISTENT_LIST_BOUNDS = "inconsistent_list_bounds"


class RealignmentFailure(BaseModel):
    """Diagnostic for an abandoned reroute."""
    model_config = ConfigDict(frozen=True)

    kind: RealignmentErrorKind
    message: str = Field(description="Human-readable diagnostic")

    @property
    def retryable(self) -> bool:
        """Whether the next progress update may succeed with fresh inputs."""
        return self.kind != RealignmentErrorKind.INCONSISTENT_LIST_BOUNDS


class RealignmentResult(BaseModel):
    """Either a new route request or a failure - never both."""
    model_config = ConfigDict(frozen=True)

    options: Optional[RouteRequestOptions] = None
    failure: Optional[RealignmentFailure] = None

    @classmethod
    def success(cls, options: RouteRequestOptions) -> "RealignmentResult":
        return cls(options=options)

    @classmethod
    def error(cls, kind: RealignmentErrorKind, message: str) -> "RealignmentResult":
        return cls(failure=RealignmentFailure(kind=kind, message=message))

    @property
    def is_success(self) -> bool:
        return self.failure is None
