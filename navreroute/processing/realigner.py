"""
Route request realignment for rerouting.

Given the request of the active route, the traveler's progress along it and a
fresh location fix, builds the request for a new route starting at the fix
and visiting every waypoint not yet reached.
"""

import logging
from typing import Optional

from ..models.options import RouteRequestOptions
from ..models.progress import ProgressSnapshot, PositionFix
from ..models.results import RealignmentErrorKind, RealignmentResult
from .bearings import DEFAULT_REROUTE_BEARING_TOLERANCE, fit_bearings, rebuild_bearings
from .bounds import ListBoundsError, sublist
from .sparse import realign_sparse_list, realign_waypoint_indices

logger = logging.getLogger(__name__)


class OptionsRealigner:
    """
    Builds reroute requests from the active route request.

    Stateless apart from its tolerance setting; safe to share between
    concurrent callers.
    """

    def __init__(self, default_bearing_tolerance: float = DEFAULT_REROUTE_BEARING_TOLERANCE):
        self.default_bearing_tolerance = default_bearing_tolerance

    def realign(
        self,
        options: Optional[RouteRequestOptions],
        progress: Optional[ProgressSnapshot],
        fix: Optional[PositionFix],
    ) -> RealignmentResult:
        """
        Build a reroute request.

        Args:
            options: Request of the active route
            progress: Current progress along that route
            fix: Current location and heading

        Returns:
            RealignmentResult holding the new request, or a failure diagnostic
        """
        missing = [
            name
            for name, value in (("options", options), ("progress", progress), ("fix", fix))
            if value is None
        ]
        if missing:
            return self._fail(
                RealignmentErrorKind.MISSING_INPUT,
                "Cannot combine route options, invalid inputs. "
                f"Missing: {', '.join(missing)}. options, progress and fix mustn't be None",
            )

        if progress.remaining_waypoints == 0:
            return self._fail(
                RealignmentErrorKind.NO_REMAINING_WAYPOINTS,
                "Reroute failed. There are no remaining waypoints on the route.\n"
                + _describe_inputs(options, progress, fix),
            )

        try:
            updates = self._build_updates(options, progress, fix)
        except ListBoundsError as e:
            return self._fail(
                RealignmentErrorKind.INCONSISTENT_LIST_BOUNDS,
                f"{e}\n" + _describe_inputs(options, progress, fix),
            )

        realigned = options.model_copy(update=updates)
        logger.debug(
            f"Realigned {len(options.coordinates)} coordinates to "
            f"{len(realigned.coordinates)} (leg {progress.active_leg_index}, "
            f"{progress.remaining_waypoints} remaining)"
        )
        return RealignmentResult.success(realigned)

    def _build_updates(
        self,
        options: RouteRequestOptions,
        progress: ProgressSnapshot,
        fix: PositionFix,
    ) -> dict:
        """Compute every realigned field. Raises ListBoundsError on inconsistent input."""
        leg_index = progress.active_leg_index
        coordinate_count = len(options.coordinates)
        remaining = progress.remaining_waypoints

        # Coordinates: new origin + everything not yet reached
        retained_start = coordinate_count - remaining
        coordinates = [fix.point]
        coordinates.extend(
            sublist(options.coordinates, retained_start, coordinate_count, name="coordinates")
        )

        bearings = rebuild_bearings(
            leg_index,
            coordinate_count,
            fix.bearing,
            options.bearings,
            default_tolerance=self.default_bearing_tolerance,
        )
        bearings = fit_bearings(bearings, len(coordinates))

        # Radiuses and approaches are cut at the leg, not at the waypoint
        radiuses = _from_leg(options.radiuses, leg_index, coordinate_count, "radiuses")
        approaches = _from_leg(options.approaches, leg_index, coordinate_count, "approaches")

        last_passed_waypoint_index = coordinate_count - remaining - 1

        return {
            "coordinates": coordinates,
            "bearings": bearings,
            "radiuses": radiuses,
            "approaches": approaches,
            "waypoint_names": realign_sparse_list(
                options.waypoint_names,
                options.waypoint_indices,
                last_passed_waypoint_index,
            ),
            "waypoint_targets": realign_sparse_list(
                options.waypoint_targets,
                options.waypoint_indices,
                last_passed_waypoint_index,
            ),
            "waypoint_indices": realign_waypoint_indices(
                options.waypoint_indices,
                last_passed_waypoint_index,
            ),
        }

    @staticmethod
    def _fail(kind: RealignmentErrorKind, message: str) -> RealignmentResult:
        logger.error(message)
        return RealignmentResult.error(kind, message)


def _from_leg(values: Optional[list], leg_index: int, coordinate_count: int, name: str) -> list:
    """Per-coordinate list from the current leg on; empty if never populated."""
    if not values:
        return []
    return sublist(values, leg_index, coordinate_count, name=name)


def _describe_inputs(
    options: RouteRequestOptions,
    progress: ProgressSnapshot,
    fix: PositionFix,
) -> str:
    return (
        f"options=[{options!r}]\n"
        f"progress=[{progress!r}]\n"
        f"fix=[{fix!r}]"
    )
