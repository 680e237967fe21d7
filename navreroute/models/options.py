"""Route request models - the directions request being realigned."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# (angle, tolerance) in degrees
BearingConstraint = tuple[float, float]


class Approach(str, Enum):
    """Side of the road a coordinate must be approached from."""
    UNRESTRICTED = "unrestricted"
    CURB = "curb"


class Point(BaseModel):
    """Longitude/latitude pair - lon first, matching directions APIs."""
    model_config = ConfigDict(frozen=True)

    lon: float = Field(description="Longitude in decimal degrees", ge=-180, le=180)
    lat: float = Field(description="Latitude in decimal degrees", ge=-90, le=90)

    def as_lon_lat(self) -> str:
        return f"{self.lon},{self.lat}"


class RouteRequestOptions(BaseModel):
    """
    Immutable multi-waypoint route request.

    Per-coordinate sequences (bearings, radiuses, approaches) line up with
    `coordinates`. Per-waypoint sequences (waypoint_names, waypoint_targets)
    line up with `waypoint_indices`, which marks the coordinates that are real
    stops rather than shaping points.

    Lengths are NOT cross-checked here: inconsistent requests must reach the
    realigner so it can report them.
    """
    model_config = ConfigDict(frozen=True)

    coordinates: list[Point] = Field(min_length=1, description="Ordered route coordinates")

    # Per-coordinate hints
    bearings: Optional[list[Optional[BearingConstraint]]] = Field(
        default=None,
        description="(angle, tolerance) per coordinate, None for no constraint",
    )
    radiuses: Optional[list[float]] = Field(
        default=None,
        description="Snapping radius per coordinate in meters, inf for unlimited",
    )
    approaches: Optional[list[Optional[Approach]]] = Field(
        default=None,
        description="Approach side per coordinate",
    )

    # Per-waypoint hints
    waypoint_names: Optional[list[str]] = Field(
        default=None,
        description="Name per waypoint in waypoint_indices",
    )
    waypoint_targets: Optional[list[Optional[Point]]] = Field(
        default=None,
        description="Arrival target per waypoint in waypoint_indices",
    )
    waypoint_indices: Optional[list[int]] = Field(
        default=None,
        description="Coordinate indices that are real waypoints, starting with 0",
    )

    # Carried over untouched on reroute
    user: str = Field(default="mapbox", description="Profile owner")
    profile: str = Field(default="driving-traffic", description="Routing profile")
    alternatives: bool = False
    continue_straight: Optional[bool] = None
    steps: bool = True
    language: Optional[str] = None
    voice_instructions: bool = False
    banner_instructions: bool = False
    geometries: str = "polyline6"
    overview: str = "full"
    annotations: Optional[list[str]] = None
    exclude: Optional[list[str]] = None
    access_token: Optional[str] = Field(default=None, repr=False)
