"""Stack of integers kept as linked nodes with simulated addresses."""

from dataclasses import dataclass

from dsworkshop.stacks.array_stack import StackEmptyError
from dsworkshop.stacks.freed import FreedAddresses

__all__ = ["ListStack"]

_BASE_ADDRESS = 0x1000
_NODE_SIZE = 0x20


@dataclass
class _Node:
    value: int
    index: int
    address: int


class ListStack:
    """Linked stack whose released node addresses are recorded in ``freed``.

    Node addresses are simulated: a released address is handed out again,
    most recent first, before a fresh one is allocated.
    """

    def __init__(self, freed: FreedAddresses) -> None:
        self.freed = freed
        self._nodes: list[_Node] = []
        self._released: list[int] = []
        self._next_fresh = _BASE_ADDRESS

    def _allocate(self) -> int:
        if self._released:
            return self._released.pop()
        address = self._next_fresh
        self._next_fresh += _NODE_SIZE
        return address

    def push(self, value: int) -> int:
        """Push a value and return the address of its new node."""
        address = self._allocate()
        self._nodes.append(_Node(value, len(self._nodes), address))
        return address

    def pop(self) -> int:
        """Remove the top node, record its address as freed and return its value."""
        if not self._nodes:
            raise StackEmptyError("stack-list is empty")
        node = self._nodes.pop()
        self.freed.record(node.address)
        self._released.append(node.address)
        return node.value

    def is_empty(self) -> bool:
        return not self._nodes

    def is_full(self, limit: int) -> bool:
        """True when the top node's index has reached ``limit``."""
        return bool(self._nodes) and self._nodes[-1].index >= limit

    def top_address(self) -> int | None:
        return self._nodes[-1].address if self._nodes else None

    def reclaim_top(self) -> bool:
        """Remove the top node's address from the freed record if it is there."""
        address = self.top_address()
        if address is None:
            return False
        return self.freed.reclaim(address)

    def entries(self) -> list[tuple[int, int]]:
        """Return (value, address) pairs from the top to the bottom."""
        return [(node.value, node.address) for node in reversed(self._nodes)]

    def clear(self) -> None:
        """Pop every node, recording each released address."""
        while self._nodes:
            self.pop()

    def __len__(self) -> int:
        return len(self._nodes)