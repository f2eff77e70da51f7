"""Fixed-capacity stack backed by a preallocated array."""

from collections.abc import Iterator

__all__ = ["StackFullError", "StackEmptyError", "ArrayStack"]


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no free slot."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class ArrayStack:
    """Stack of integers with a fixed maximum capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[int] = []

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: int) -> None:
        if self.is_full():
            raise StackFullError("stack-array is already full")
        self._items.append(value)

    def pop(self) -> int:
        if self.is_empty():
            raise StackEmptyError("stack-array is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)