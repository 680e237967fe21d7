"""Navigation state inputs: route progress and location fix."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .options import Point


class ProgressSnapshot(BaseModel):
    """Where the traveler is along the active route."""
    model_config = ConfigDict(frozen=True)

    active_leg_index: int = Field(ge=0, description="0-based index of the leg underway")
    remaining_waypoints: int = Field(
        ge=0,
        description="Waypoints not yet reached, including the final destination",
    )
    distance_remaining_m: Optional[float] = Field(default=None, ge=0)
    duration_remaining_s: Optional[float] = Field(default=None, ge=0)


class PositionFix(BaseModel):
    """Current location and heading."""
    model_config = ConfigDict(frozen=True)

    lon: float = Field(description="Longitude in decimal degrees", ge=-180, le=180)
    lat: float = Field(description="Latitude in decimal degrees", ge=-90, le=90)
    bearing: float = Field(default=0.0, description="Compass heading in degrees", ge=0, lt=360)

    @property
    def point(self) -> Point:
        return Point(lon=self.lon, lat=self.lat)
