"""
Realignment of waypoint-indexed (sparse) sequences.

Waypoint names, waypoint targets and the waypoint index list itself are
aligned with `waypoint_indices`, not with coordinates. After a reroute they
must be re-based onto the new coordinate numbering, where coordinate 0 is the
current location.
"""

from typing import Optional, Sequence, TypeVar

from .bounds import element_at, sublist

T = TypeVar("T")


def last_passed_position(
    waypoint_indices: Optional[Sequence[int]],
    last_passed_waypoint_index: int,
) -> int:
    """
    Position in waypoint_indices of the last waypoint already passed.

    Scans in ascending order; the last qualifying entry wins. Returns 0 when
    nothing qualifies, including a negative last_passed_waypoint_index.
    """
    position = 0
    for i, waypoint_index in enumerate(waypoint_indices or []):
        if waypoint_index <= last_passed_waypoint_index:
            position = i
    return position


def realign_sparse_list(
    values: Optional[Sequence[T]],
    waypoint_indices: Optional[Sequence[int]],
    last_passed_waypoint_index: int,
) -> list[T]:
    """
    Drop entries of passed waypoints from a waypoint-aligned list.

    The entry at the cut is kept as the first element: it belongs to the new
    origin's waypoint slot.

    Raises:
        ListBoundsError: if values is shorter than waypoint_indices implies
    """
    if not values:
        return []

    cut = last_passed_position(waypoint_indices, last_passed_waypoint_index)
    realigned = [element_at(values, cut, name="waypoint list")]
    realigned.extend(sublist(values, cut + 1, len(values), name="waypoint list"))
    return realigned


def realign_waypoint_indices(
    waypoint_indices: Optional[Sequence[int]],
    last_passed_waypoint_index: int,
) -> list[int]:
    """
    Re-base waypoint indices onto the rerouted coordinate list.

    Always starts with 0 for the new origin; remaining indices are shifted by
    last_passed_waypoint_index.
    """
    if not waypoint_indices:
        return []

    cut = last_passed_position(waypoint_indices, last_passed_waypoint_index)
    realigned = [0]
    realigned.extend(
        index - last_passed_waypoint_index
        for index in sublist(waypoint_indices, cut + 1, len(waypoint_indices), name="waypoint_indices")
    )
    return realigned
