"""High-resolution tick counter used to time stack, queue and search operations."""

import time

__all__ = ["tick"]


def tick() -> int:
    """Return the current value of a monotonic nanosecond counter."""
    return time.perf_counter_ns()