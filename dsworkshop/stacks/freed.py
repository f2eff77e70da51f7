"""Record of addresses released by a linked stack."""

from collections.abc import Iterator

__all__ = ["FreedAddresses"]


class FreedAddresses:
    """Bounded, ordered record of released node addresses."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._addresses: list[int] = []

    def record(self, address: int) -> None:
        """Append a released address."""
        if len(self._addresses) >= self.capacity:
            raise OverflowError("array of free areas is full")
        self._addresses.append(address)

    def reclaim(self, address: int) -> bool:
        """Drop the latest record of an address that was allocated again.

        Returns True if the address was present.
        """
        for position in range(len(self._addresses) - 1, -1, -1):
            if self._addresses[position] == address:
                del self._addresses[position]
                return True
        return False

    def __iter__(self) -> Iterator[int]:
        return iter(self._addresses)

    def __len__(self) -> int:
        return len(self._addresses)

    def format(self) -> str:
        """Render the addresses in hexadecimal, one per line, ending with END."""
        if not self._addresses:
            lines = ["ERROR: array of free areas is empty"]
        else:
            lines = [f"{address:x}" for address in self._addresses]
        lines.append("END")
        return "\n".join(lines)