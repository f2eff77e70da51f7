"""First-in first-out queue of linked nodes with simulated node addresses."""

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from dsworkshop.queues.ring import QueueEmptyError

__all__ = ["MemoryTracker", "LinkedQueue"]

T = TypeVar("T")

_BASE_ADDRESS = 0x1000
_NODE_SIZE = 0x10


class MemoryTracker:
    """Keeps count of node allocations and of addresses that were released.

    A released address is handed out again, most recent first, before a
    fresh one; when that happens the reuse is counted.
    """

    def __init__(self) -> None:
        self.allocated = 0
        self.reused = 0
        self.freed: list[int] = []
        self._next_fresh = _BASE_ADDRESS

    def _next_address(self) -> int:
        if self.freed:
            return self.freed[-1]
        address = self._next_fresh
        self._next_fresh += _NODE_SIZE
        return address

    def allocate(self, address: int) -> bool:
        """Record an allocation at ``address``; True if it reused a released one."""
        self.allocated += 1
        try:
            self.freed.remove(address)
        except ValueError:
            return False
        self.reused += 1
        return True

    def release(self, address: int) -> None:
        """Record that the node at ``address`` was released."""
        self.freed.append(address)

    @property
    def still_free(self) -> int:
        return len(self.freed)


@dataclass
class _Node(Generic[T]):
    item: T
    address: int


class LinkedQueue(Generic[T]):
    """Unbounded queue whose node allocations are reported to ``tracker``."""

    def __init__(self, tracker: MemoryTracker) -> None:
        self.tracker = tracker
        self._nodes: deque[_Node[T]] = deque()

    def push(self, item: T) -> int:
        """Add ``item`` at the back and return the address of its node."""
        address = self.tracker._next_address()
        self.tracker.allocate(address)
        self._nodes.append(_Node(item, address))
        return address

    def pop(self) -> T:
        """Remove and return the item at the front, releasing its node."""
        if not self._nodes:
            raise QueueEmptyError("The queue is empty.")
        node = self._nodes.popleft()
        self.tracker.release(node.address)
        return node.item

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the back."""
        return (node.item for node in self._nodes)