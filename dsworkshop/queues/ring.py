"""Bounded first-in first-out queue kept in a circular array of slots."""

from collections.abc import Iterator
from typing import Generic, TypeVar

__all__ = ["QueueFullError", "QueueEmptyError", "RingQueue"]

T = TypeVar("T")


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


class RingQueue(Generic[T]):
    """Queue with a fixed number of slots; the write position wraps around."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._head = 0
        self._size = 0

    def push(self, item: T) -> None:
        """Add ``item`` at the back of the queue."""
        if self.is_full():
            raise QueueFullError("The queue is full.")
        self._slots[(self._head + self._size) % self.capacity] = item
        self._size += 1

    def pop(self) -> T:
        """Remove and return the item at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError("Empty queue.")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return item  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the back."""
        for offset in range(self._size):
            yield self._slots[(self._head + offset) % self.capacity]  # type: ignore[misc]