"""API clients for external services."""

from .directions import DirectionsClient, DirectionsError, build_route_query

__all__ = [
    "DirectionsClient",
    "DirectionsError",
    "build_route_query",
]
