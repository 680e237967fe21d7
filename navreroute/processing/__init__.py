"""Reroute request realignment and the rerouting controller."""

from .bearings import DEFAULT_REROUTE_BEARING_TOLERANCE, rebuild_bearings
from .bounds import ListBoundsError
from .sparse import last_passed_position, realign_sparse_list, realign_waypoint_indices
from .realigner import OptionsRealigner
from .controller import RerouteController

__all__ = [
    "DEFAULT_REROUTE_BEARING_TOLERANCE",
    "rebuild_bearings",
    "ListBoundsError",
    "last_passed_position",
    "realign_sparse_list",
    "realign_waypoint_indices",
    "OptionsRealigner",
    "RerouteController",
]
