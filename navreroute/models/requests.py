"""API request models."""

from typing import Optional
from pydantic import BaseModel, Field

from .options import RouteRequestOptions
from .progress import ProgressSnapshot, PositionFix


class RerouteRequest(BaseModel):
    """
    Request body for reroute endpoints.

    Every part is optional at the schema level so that an incomplete
    navigation state is reported as a realignment failure, not a schema error.
    """
    request_id: Optional[str] = Field(default=None, description="Client-provided ID for history lookup")
    options: Optional[RouteRequestOptions] = Field(default=None, description="Active route request")
    progress: Optional[ProgressSnapshot] = Field(default=None, description="Current route progress")
    fix: Optional[PositionFix] = Field(default=None, description="Current location fix")
