"""Undirected graph stored as an adjacency matrix."""

__all__ = ["AdjacencyMatrix", "CONNECTED"]

CONNECTED = 1


class AdjacencyMatrix:
    """Adjacency matrix of an undirected graph without loops."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._rows = [[0] * size for _ in range(size)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.size:
            raise ValueError(f"vertex {vertex} is out of range")

    def connect(self, v1: int, v2: int) -> None:
        """Add the edge between ``v1`` and ``v2``."""
        self._check(v1)
        self._check(v2)
        if v1 == v2:
            raise ValueError("loops are not allowed")
        self._rows[v1][v2] = CONNECTED
        self._rows[v2][v1] = CONNECTED

    def disconnect(self, v1: int, v2: int) -> None:
        """Remove the edge between ``v1`` and ``v2`` if there is one."""
        self._check(v1)
        self._check(v2)
        self._rows[v1][v2] = 0
        self._rows[v2][v1] = 0

    def has_edge(self, v1: int, v2: int) -> bool:
        self._check(v1)
        self._check(v2)
        return bool(self._rows[v1][v2])

    def copy(self) -> "AdjacencyMatrix":
        duplicate = AdjacencyMatrix(self.size)
        duplicate._rows = [row[:] for row in self._rows]
        return duplicate

    def reachable(self, start: int) -> set[int]:
        """Vertices reachable from ``start``, itself included."""
        self._check(start)
        seen = {start}
        pending = [start]
        while pending:
            vertex = pending.pop()
            for neighbour, linked in enumerate(self._rows[vertex]):
                if linked and neighbour not in seen:
                    seen.add(neighbour)
                    pending.append(neighbour)
        return seen

    def is_connected(self) -> bool:
        if self.size == 0:
            return True
        return len(self.reachable(0)) == self.size

    def edges(self) -> list[tuple[int, int]]:
        """Edges as (smaller, larger) vertex pairs in row order."""
        return [
            (v1, v2)
            for v1, row in enumerate(self._rows)
            for v2 in range(v1 + 1, self.size)
            if row[v2]
        ]

    def format(self) -> str:
        """Render the matrix, one row per line."""
        return "".join("".join(f"{cell} " for cell in row) + "\n" for row in self._rows)