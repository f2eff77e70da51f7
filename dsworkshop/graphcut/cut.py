"""Smallest set of edges whose removal disconnects a graph, and Graphviz export."""

import math
from itertools import combinations

from dsworkshop.graphcut.matrix import AdjacencyMatrix

__all__ = ["comb_amount", "minimum_cut", "to_dot", "to_dot_all_removed"]

_REMOVED_STYLE = "[color=green,penwidth=3.0]"


def comb_amount(n: int, k: int) -> int:
    """Number of ways to choose ``k`` edges out of ``n``."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    return math.comb(n, k)


def minimum_cut(matrix: AdjacencyMatrix) -> AdjacencyMatrix | None:
    """Return ``matrix`` with the fewest edges removed so that it is disconnected.

    Edge subsets are tried by increasing size, each size in lexicographic order
    of edges. A graph that is already disconnected is returned unchanged (as a
    copy); None means no removal disconnects it.
    """
    if not matrix.is_connected():
        return matrix.copy()
    edges = matrix.edges()
    for count in range(1, len(edges) + 1):
        for removed in combinations(edges, count):
            candidate = matrix.copy()
            for v1, v2 in removed:
                candidate.disconnect(v1, v2)
            if not candidate.is_connected():
                return candidate
    return None


def _dot(matrix: AdjacencyMatrix, kept: AdjacencyMatrix | None) -> str:
    lines = ["graph {"]
    edges = matrix.edges()
    for vertex in range(matrix.size):
        for v1, v2 in edges:
            if v1 != vertex:
                continue
            if kept is not None and kept.has_edge(v1, v2):
                lines.append(f"{v1} -- {v2};")
            else:
                lines.append(f"{v1} -- {v2}{_REMOVED_STYLE};")
        lines.append(f"{vertex};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def to_dot(matrix: AdjacencyMatrix, result: AdjacencyMatrix) -> str:
    """Graphviz text of ``matrix`` with edges missing from ``result`` highlighted."""
    if matrix.size != result.size:
        raise ValueError("graphs have different numbers of vertices")
    return _dot(matrix, result)


def to_dot_all_removed(matrix: AdjacencyMatrix) -> str:
    """Graphviz text of ``matrix`` with every edge highlighted as removed."""
    return _dot(matrix, None)