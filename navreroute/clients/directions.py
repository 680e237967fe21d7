"""
Directions API client for fetching rerouted routes.
Speaks the Mapbox Directions v5 URL convention.
"""

import math
from typing import Optional

import httpx

from ..models.options import RouteRequestOptions


class DirectionsError(Exception):
    """Raised when the directions backend cannot return a route."""
    pass


def _join(items: list[Optional[str]]) -> str:
    return ";".join("" if item is None else item for item in items)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _format_bearing(bearing: Optional[tuple[float, float]]) -> Optional[str]:
    if bearing is None:
        return None
    angle, tolerance = bearing
    return f"{angle:g},{tolerance:g}"


def _format_radius(radius: float) -> str:
    return "unlimited" if math.isinf(radius) else f"{radius:g}"


def build_route_query(options: RouteRequestOptions) -> tuple[str, dict[str, str]]:
    """
    Serialize a route request to a directions path and query parameters.

    Args:
        options: Route request to serialize

    Returns:
        (path, params) - path relative to the API base URL
    """
    coords_str = ";".join(point.as_lon_lat() for point in options.coordinates)
    path = f"/directions/v5/{options.user}/{options.profile}/{coords_str}"

    params = {
        "alternatives": _flag(options.alternatives),
        "steps": _flag(options.steps),
        "geometries": options.geometries,
        "overview": options.overview,
        "voice_instructions": _flag(options.voice_instructions),
        "banner_instructions": _flag(options.banner_instructions),
    }
    if options.continue_straight is not None:
        params["continue_straight"] = _flag(options.continue_straight)
    if options.language:
        params["language"] = options.language
    if options.annotations:
        params["annotations"] = ",".join(options.annotations)
    if options.exclude:
        params["exclude"] = ",".join(options.exclude)

    # Per-coordinate hints: empty slot for "no constraint"
    if options.bearings:
        params["bearings"] = _join([_format_bearing(b) for b in options.bearings])
    if options.radiuses:
        params["radiuses"] = _join([_format_radius(r) for r in options.radiuses])
    if options.approaches:
        params["approaches"] = _join([
            approach.value if approach is not None else None
            for approach in options.approaches
        ])

    # Per-waypoint hints
    if options.waypoint_indices:
        params["waypoints"] = ";".join(str(i) for i in options.waypoint_indices)
    if options.waypoint_names:
        params["waypoint_names"] = ";".join(options.waypoint_names)
    if options.waypoint_targets:
        params["waypoint_targets"] = _join([
            target.as_lon_lat() if target is not None else None
            for target in options.waypoint_targets
        ])

    if options.access_token:
        params["access_token"] = options.access_token

    return path, params


class DirectionsClient:
    """
    Fetch routes from a directions backend.

    Requests carry their own access token; the client-level token is used
    only when the request has none.
    """

    def __init__(
        self,
        base_url: str = "https://api.mapbox.com",
        access_token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()

    async def test_connection(self) -> bool:
        """Test API connectivity."""
        if not self.access_token:
            return False
        try:
            await self.get_route(
                RouteRequestOptions(
                    coordinates=[
                        {"lon": -122.4194, "lat": 37.7749},  # San Francisco
                        {"lon": -122.4089, "lat": 37.7849},
                    ],
                    steps=False,
                )
            )
            return True
        except DirectionsError:
            return False

    async def get_route(self, options: RouteRequestOptions) -> dict:
        """
        Request a route for the given options.

        Returns:
            Best route with distance, duration, geometry and legs

        Raises:
            DirectionsError: on transport failure or a non-Ok response
        """
        path, params = build_route_query(options)
        if "access_token" not in params and self.access_token:
            params["access_token"] = self.access_token

        try:
            response = await self._client.get(f"{self.base_url}{path}", params=params)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise DirectionsError(f"Directions request failed: {e}") from e

        if data.get("code") != "Ok" or not data.get("routes"):
            raise DirectionsError(
                f"Directions backend returned {data.get('code', response.status_code)}: "
                f"{data.get('message', '')}"
            )

        route = data["routes"][0]
        return {
            "distance_m": route.get("distance", 0),
            "duration_s": route.get("duration", 0),
            "geometry": route.get("geometry"),
            "legs": [
                {
                    "summary": leg.get("summary", ""),
                    "distance_m": leg.get("distance", 0),
                    "duration_s": leg.get("duration", 0),
                }
                for leg in route.get("legs", [])
            ],
            "waypoints": [
                {
                    "name": waypoint.get("name", ""),
                    "location": waypoint.get("location"),
                }
                for waypoint in data.get("waypoints", [])
            ],
        }
