"""Sequential search and average timing of repeated searches."""

from collections.abc import Callable, Iterable, Sequence

from dsworkshop.timing import tick

__all__ = ["search_sequence", "average_ticks"]


def search_sequence(value: int, values: Iterable[int]) -> int:
    """Return the 1-based position of ``value`` in ``values``, or 0 if absent."""
    for position, item in enumerate(values, start=1):
        if item == value:
            return position
    return 0


def average_ticks(search: Callable[[int], object], values: Sequence[int]) -> float:
    """Search for every value in turn and return the mean ticks per search."""
    items = list(values)
    if not items:
        raise ValueError("no values to search for")
    start = tick()
    for value in items:
        search(value)
    return (tick() - start) / len(items)