"""Command that finds the fewest edges whose removal disconnects a graph."""

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

from dsworkshop.graphcut.cut import minimum_cut, to_dot, to_dot_all_removed
from dsworkshop.graphcut.matrix import AdjacencyMatrix
from dsworkshop.timing import tick

__all__ = ["welcome_text", "read_edges", "main"]

OK = 0

_BAD_EDGE = "ERROR: incorrect edge. Try again:"
_LOOP = "ERROR: loops are not allowed. Try again:"


def welcome_text() -> str:
    """Describe what the program does."""
    return (
        "This program allows you to find the minimum (by the number of edges) subset of edges,\n"
        "the removal of which turns a given connected graph into a disconnected one.\n"
        'To see graphic visualisation, run "dot -c -Tpng graph.txt -o graph.png" '
        'and open "graph.png"\n'
        "Deleted edges will be colored in green.\n\n"
    )


def read_edges(lines: Iterable[str], size: int) -> AdjacencyMatrix:
    """Read "v1 v2" lines into a graph of ``size`` vertices until "-1 -1" or the end."""
    matrix = AdjacencyMatrix(size)
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        try:
            v1, v2 = (int(part) for part in parts)
        except ValueError:
            print(_BAD_EDGE)
            continue
        if v1 == -1 and v2 == -1:
            break
        if not (0 <= v1 < size and 0 <= v2 < size):
            print(_BAD_EDGE)
            continue
        if v1 == v2:
            print(_LOOP)
            continue
        matrix.connect(v1, v2)
    return matrix


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and write its minimum cut as Graphviz text."""
    parser = argparse.ArgumentParser(description="Find a minimum edge cut of a graph.")
    parser.add_argument(
        "--output", type=Path, default=Path("graph.txt"), help="Graphviz file to write"
    )
    args = parser.parse_args(argv)

    print(welcome_text())
    lines = iter(sys.stdin)

    print("Input amount of vertices of graph (int, >0): ", end="")
    size = None
    for line in lines:
        try:
            value = int(line.strip())
        except ValueError:
            value = 0
        if value > 0:
            size = value
            break
        print("ERROR: incorrect amount of vertices. Try again: ", end="")
    if size is None:
        return OK
    if size == 1:
        print(
            "ERROR: Graph consists of one vertex. It can't be disjoint. Exiting program..."
        )
        return OK

    print(
        'Input edges of graph in format "v1 v2" '
        "(numeration begins with 0, loops are not allowed)."
    )
    print('To finish input, enter "-1 -1":')
    matrix = read_edges(lines, size)

    if not matrix.is_connected():
        print("ERROR: Graph is already disjoint! Exiting program...")
        args.output.write_text(to_dot(matrix, matrix))
        return OK

    start = tick()
    result = minimum_cut(matrix)
    elapsed = tick() - start

    if result is not None:
        args.output.write_text(to_dot(matrix, result))
        removed = len(matrix.edges()) - len(result.edges())
        print(f"SUCCESS! Need to delete at least {removed} edges")
    else:
        args.output.write_text(to_dot_all_removed(matrix))
        print(f"SUCCESS! Will need to delete all {len(matrix.edges())} edges")
    print(f"Time (in ticks): {elapsed}")
    return OK