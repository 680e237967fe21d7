"""
Bearing sequence rebuilding for rerouted requests.

The new origin always takes the live heading of the vehicle. Bearings of
coordinates past the leg underway are kept positionally.
"""

from typing import Optional

from ..models.options import BearingConstraint
from .bounds import ListBoundsError, sublist

DEFAULT_REROUTE_BEARING_TOLERANCE = 90.0


def rebuild_bearings(
    leg_index: int,
    coordinate_count: int,
    current_heading: float,
    original_bearings: Optional[list[Optional[BearingConstraint]]],
    default_tolerance: float = DEFAULT_REROUTE_BEARING_TOLERANCE,
) -> list[Optional[BearingConstraint]]:
    """
    Build the bearing list for a reroute request.

    Args:
        leg_index: Index of the leg underway
        coordinate_count: Number of coordinates in the original request
        current_heading: Live heading in degrees, used for the new origin
        original_bearings: Bearings of the original request, if any
        default_tolerance: Origin tolerance when the original has none

    Returns:
        One entry per original coordinate, None where unconstrained

    Raises:
        ListBoundsError: if leg_index lies past the original bearings
    """
    origin_tolerance = default_tolerance
    if original_bearings and original_bearings[0] is not None:
        origin_tolerance = original_bearings[0][1]

    rebuilt: list[Optional[BearingConstraint]] = [(current_heading, origin_tolerance)]

    if original_bearings:
        rebuilt.extend(
            sublist(
                original_bearings,
                leg_index + 1,
                min(len(original_bearings), coordinate_count),
                name="bearings",
            )
        )

    while len(rebuilt) < coordinate_count:
        rebuilt.append(None)

    return rebuilt


def fit_bearings(
    bearings: list[Optional[BearingConstraint]],
    target_length: int,
) -> list[Optional[BearingConstraint]]:
    """
    Trim trailing unconstrained entries so there is one bearing per coordinate.

    Raises:
        ListBoundsError: if a populated bearing falls past target_length
    """
    fitted = list(bearings)
    while len(fitted) > target_length:
        if fitted[-1] is not None:
            raise ListBoundsError(
                f"bearings: {len(bearings)} entries do not fit {target_length} coordinates"
            )
        fitted.pop()
    while len(fitted) < target_length:
        fitted.append(None)
    return fitted
