"""Build search structures from a file of numbers and compare lookups in them."""

import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TextIO, TypeVar

from dsworkshop.lookup.bst import balance, build_tree, depth_stats, render, search
from dsworkshop.lookup.hashing import HashTable, division_hash, mid_square_hash, next_prime
from dsworkshop.lookup.numbers import NumberFileError, read_numbers
from dsworkshop.lookup.search import average_ticks, search_sequence
from dsworkshop.timing import tick

__all__ = ["welcome_text", "main"]

OK = 0
ERRFILE = -1
ERRVALUE = -2
ERRPARAM = -3

_TREE_NODE_SIZE = 24
_LIST_NODE_SIZE = 16
_POINTER_SIZE = 8

T = TypeVar("T")


class _EndOfInput(Exception):
    """Raised when standard input is exhausted."""


class _Console:
    """Reads whole-line integers, re-prompting until one is accepted."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_int(self, valid: Callable[[int], bool], error: str) -> int:
        while True:
            line = self._stream.readline()
            if not line:
                raise _EndOfInput
            try:
                value = int(line.strip())
            except ValueError:
                print(error)
                continue
            if valid(value):
                return value
            print(error)


def welcome_text() -> str:
    """Describe what the program does."""
    return (
        "Welcome! This program can:\n"
        "--Build a binary search tree from numbers in file and display it as a tree.\n"
        "--Build a balanced binary search tree and display it as a tree.\n"
        "--Build a hash table from numbers in file (2 hash functions are implemented) "
        "and display it.\n"
        "--Search for a a number in each of the 4 data structures "
        "(BST, balanced BST, hash table, file)\n"
        "  and show quantitative information about the search.\n"
        "-------------------------------------------------------------------------------"
        "------------------"
    )


def _timed(operation: Callable[[], T]) -> tuple[T, int]:
    start = tick()
    value = operation()
    return value, tick() - start


def _file_values(path: Path) -> Iterator[int]:
    with path.open() as stream:
        for line in stream:
            for token in line.split():
                yield int(token)


def _report(
    title: str,
    target: int,
    found: int,
    ticks: int,
    average: Callable[[], float],
    memory: int,
    mean_comparisons: float,
) -> None:
    print(f"\n{title}")
    if found <= 0:
        print(f"Number {target} was not found.")
        return
    print(f"Number {target} was found by:        {ticks} ticks.")
    print(f"Average search time:           {average():f} ticks.")
    print(f"Memory usage:                  {memory} bytes.")
    print(f"Amount of comparisons:         {found}.")
    print(f"Average amount of comparisons: {mean_comparisons:f}.")


def _run(path: Path, numbers: list[int], console: _Console) -> None:
    root, ticks = _timed(lambda: build_tree(numbers))
    print("BINARY SEARCH TREE BASED ON FILE:")
    print(render(root), end="")
    print(f"Tree was built by = {ticks} ticks.\n")

    balanced, ticks = _timed(lambda: balance(root))
    unique, _ = depth_stats(balanced)
    print("BINARY SEARCH TREE AFTER BALANCING:")
    print(render(balanced), end="")
    print(f"Tree was balanced by = {ticks} ticks.\n")

    size = next_prime(len(numbers))
    _, ticks = _timed(lambda: division_hash(123456, size))
    print(f"Generating hash by remainder of division by {size}: {ticks}.")
    _, ticks = _timed(lambda: mid_square_hash(123456, 10))
    print(f"Generating hash by mid square:            {ticks}.")

    table = HashTable(size, division_hash)
    comparisons, ticks = _timed(lambda: table.build(numbers))
    print("\nHASH-TABLE BASED ON REMAINDER OF DIVISION:")
    print(table.render(), end="")
    print(f"maximum amount of comparisons: {comparisons}.")
    print(f"Table was built by = {ticks} ticks.\n")

    print("Input maximum amount of comparisons in hash-table (>=1):")
    desired = console.read_int(lambda v: v >= 1, "Incorrect value! Try again:")
    if comparisons > desired:
        print("rebuilding...")
        table = HashTable(next_prime(table.size), mid_square_hash)
        rebuilt = table
        comparisons, ticks = _timed(lambda: rebuilt.build(numbers))
        print("\nHASH-TABLE BASED ON MID SQUARE:")
        print(table.render(), end="")
        print(f"Maximum amount of comparisons {comparisons}.")
        print(f"Table was built by = {ticks} ticks.\n")
    else:
        print("Don't need to rebuild the table")

    print("\nInput the number to find:")
    target = console.read_int(lambda _: True, "Incorrect value! Try again:")

    tree_memory = unique * _TREE_NODE_SIZE
    for title, tree in (
        ("SEARCH IN BINARY SEARCH TREE", root),
        ("SEARCH IN BALANCED BINARY SEARCH TREE", balanced),
    ):
        found, ticks = _timed(lambda: search(tree, target))
        vertices, depths = depth_stats(tree)
        _report(
            title,
            target,
            found,
            ticks,
            lambda: average_ticks(lambda v: search(tree, v), numbers),
            tree_memory,
            depths / vertices,
        )

    found, ticks = _timed(lambda: table.lookup(target))
    _report(
        "SEARCH IN HASH-TABLE",
        target,
        found,
        ticks,
        lambda: average_ticks(table.lookup, numbers),
        (table.size + unique - table.occupied()) * _LIST_NODE_SIZE + _POINTER_SIZE,
        (1 + desired) / 2,
    )

    found, ticks = _timed(lambda: search_sequence(target, _file_values(path)))
    _report(
        "SEARCH IN FILE",
        target,
        found,
        ticks,
        lambda: average_ticks(lambda v: search_sequence(v, _file_values(path)), numbers),
        path.stat().st_size,
        len(numbers) / 2,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the lookup comparison on the file named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(welcome_text())
    if len(args) != 1:
        print("ERROR! Expected one argument: file_name.txt. Finishing...")
        return ERRPARAM

    path = Path(args[0])
    try:
        numbers = read_numbers(path)
    except NumberFileError as error:
        print(f"ERROR! {error}. Finishing...")
        return ERRFILE

    try:
        _run(path, numbers, _Console(sys.stdin))
    except _EndOfInput:
        print("ERROR! Input ended. Finishing...")
        return ERRVALUE
    return OK