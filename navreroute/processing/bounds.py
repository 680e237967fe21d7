"""Strict sequence slicing for realignment."""

from typing import Sequence, TypeVar

T = TypeVar("T")


class ListBoundsError(IndexError):
    """A request sequence is too short for the requested window."""
    pass


def sublist(values: Sequence[T], start: int, end: int, name: str = "list") -> list[T]:
    """
    Return values[start:end], refusing any window Python would silently clamp.

    Raises:
        ListBoundsError: if start < 0, end > len(values) or start > end
    """
    if start < 0 or end > len(values) or start > end:
        raise ListBoundsError(
            f"{name}: window [{start}, {end}) out of bounds for length {len(values)}"
        )
    return list(values[start:end])


def element_at(values: Sequence[T], index: int, name: str = "list") -> T:
    """Return values[index] without negative indexing."""
    if index < 0 or index >= len(values):
        raise ListBoundsError(
            f"{name}: index {index} out of bounds for length {len(values)}"
        )
    return values[index]
