"""Interactive workshop comparing an array stack with a linked stack."""

import argparse
import re
import sys
from collections.abc import Callable
from typing import Protocol, TextIO

from dsworkshop.stacks.array_stack import ArrayStack
from dsworkshop.stacks.freed import FreedAddresses
from dsworkshop.stacks.list_stack import ListStack
from dsworkshop.stacks.operations import decreasing_runs
from dsworkshop.timing import tick

__all__ = ["info_text", "commands_text", "memory_report", "compare", "main"]

OK = 0
ERRMEM = -1

_INT_SIZE = 4
_POINTER_SIZE = 8
_LIST_NODE_SIZE = 2 * _INT_SIZE + _POINTER_SIZE

_INT_LINE = re.compile(r"\s*([+-]?\d+)\n?")


class _Stack(Protocol):
    def pop(self) -> int: ...

    def is_empty(self) -> bool: ...


class _EndOfInput(Exception):
    """Raised when standard input is exhausted."""


def info_text() -> str:
    """Describe what the program does."""
    return (
        "The program implements working with stack and allows you to perform operations of:\n"
        "1) adding elements,\n"
        "2) deleting elements,\n"
        "3) displaying the current state of the stack,\n"
        "4) printing decreasing series of sequences of integers in reverse order.\n"
        "The stack is implemented in two types:\n"
        "a. array;\n"
        "b. list."
    )


def commands_text() -> str:
    """List the commands the interactive loop accepts."""
    return (
        "\nPossible commands:\n"
        "0   Exit the program\n"
        "Commands for stack-array:\n"
        "1   Create a stack-array and enter the initial values.\n"
        "2   Add an element to the existing stack-array.\n"
        "3   Delete an element from the stack-array (implemented as pop\n"
        "         when deleting, the value of the deleted element is displayed).\n"
        "4   Output a decreasing series of sequences of integers from the stack-array\n"
        "         in reverse order and a quantitative characteristic of processing\n"
        "         (the stack array will be completely emptied).\n"
        "5   Display the current state of the stack-array (the stack array itself will not change).\n"
        "Commands for stack-list:\n"
        "6   Create a stack-list and enter the initial values.\n"
        "7   Add an item to the stack-list.\n"
        "8   Delete an element from the stack-list (implemented as pop\n"
        "         when deleting, the value of the element being deleted is displayed)\n"
        "         and output an array of freed addresses\n"
        "9   Output an array of freed addresses.\n"
        "10  Output a decreasing series of sequences of integers from the stack-list\n"
        "         in reverse order and a quantitative characteristic of processing\n"
        "         (the stack array will be completely emptied and deleted).\n"
        "11  Display the current state of the stack-list with the addresses of elements\n"
        "         (the stack-list itself will not change).\n"
        "12  Show information about memory required for each method\n"
    )


def memory_report() -> str:
    """Describe the memory each stack realisation needs."""
    return (
        "Memory, needed for stack realizations:\n"
        "In array realisation:\n"
        f"   {_INT_SIZE} bytes for each element + {2 * _INT_SIZE + _POINTER_SIZE} "
        "bytes needed for information about stack\n"
        "In list realisation:\n"
        f"   {_LIST_NODE_SIZE} bytes for each element (each includes information about stack)"
    )


def _timed(operation: Callable[[], object]) -> int:
    start = tick()
    operation()
    return tick() - start


def _print_runs(stack: _Stack) -> int:
    """Print the decreasing runs of ``stack`` and return how many there were."""
    runs = decreasing_runs(stack)
    for run in runs:
        print("".join(f"{value} " for value in run))
    if not runs:
        print("Decreasing subsequences not found")
    return len(runs)


def compare(max_capacity: int, repeats: int) -> dict[str, tuple[int, int]]:
    """Time both stack realisations and print the mean ticks.

    Returns mean ticks as ``{"pop": (array, list), "push": ..., "runs": ...}``.
    Raises OverflowError when the record of released addresses overflows.
    """
    if repeats < 1:
        raise ValueError("repeats must be positive")
    if max_capacity < 1:
        raise ValueError("max_capacity must be positive")

    totals = {"pop": [0, 0], "push": [0, 0], "runs": [0, 0]}
    for _ in range(repeats):
        array = ArrayStack(max_capacity)
        linked = ListStack(FreedAddresses(max_capacity * max_capacity))
        for i in range(max_capacity):
            value = -(i % 10)
            array.push(value)
            linked.push(value)

        totals["pop"][0] += _timed(array.pop)
        totals["pop"][1] += _timed(linked.pop)
        totals["push"][0] += _timed(lambda: array.push(1))
        totals["push"][1] += _timed(lambda: linked.push(1))

        print("Decreasing subsequences in stack-array:")
        totals["runs"][0] += _timed(lambda: _print_runs(array))
        print("Decreasing subsequences in stack-list:")
        totals["runs"][1] += _timed(lambda: _print_runs(linked))
        linked.clear()

    means = {name: (pair[0] // repeats, pair[1] // repeats) for name, pair in totals.items()}
    print(f"\nMean time in ticks for {repeats} measurements:\n")
    print(f"Pop element {max_capacity} of {max_capacity} from stack:")
    print(f"stack-array: {means['pop'][0]}")
    print(f"stack-list: {means['pop'][1]}\n")
    print(f"Push element {max_capacity} of {max_capacity} to stack:")
    print(f"stack-array: {means['push'][0]}")
    print(f"stack-list: {means['push'][1]}\n")
    print(f"Displaying decreasing subsequences in stack of {max_capacity} elements")
    print(f"stack-array: {means['runs'][0]}")
    print(f"stack-list: {means['runs'][1]}\n")
    return means


class _Console:
    """Reads whole-line integers from a text stream, re-prompting on bad input."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_int(self, valid: Callable[[int], bool], error: str) -> int:
        while True:
            line = self._stream.readline()
            if not line:
                raise _EndOfInput
            match = _INT_LINE.fullmatch(line)
            if match and valid(int(match.group(1))):
                return int(match.group(1))
            print(error, end="")


class _Session:
    """State of the interactive loop: one array stack and one linked stack."""

    def __init__(self, console: _Console) -> None:
        self.console = console
        self.array: ArrayStack | None = None
        self.linked: ListStack | None = None
        self.freed: FreedAddresses | None = None
        self.list_limit = 0
        self.handlers: dict[int, Callable[[], None]] = {
            1: self.create_array,
            2: self.push_array,
            3: self.pop_array,
            4: self.runs_array,
            5: self.show_array,
            6: self.create_list,
            7: self.push_list,
            8: self.pop_list,
            9: self.show_freed,
            10: self.runs_list,
            11: self.show_list,
            12: lambda: print(memory_report()),
        }

    @property
    def list_exists(self) -> bool:
        return self.linked is not None and not self.linked.is_empty()

    def read_command(self) -> int:
        while True:
            line = self.console._stream.readline()
            if not line:
                raise _EndOfInput
            match = _INT_LINE.fullmatch(line)
            if match and 0 <= int(match.group(1)) <= 12:
                return int(match.group(1))
            print("ERROR: unknown command.")
            print(commands_text())
            print("Try to input command again:")

    def _read_elements(self, count: int, push: Callable[[int], object], error: str) -> int:
        elapsed = 0
        for number in range(1, count + 1):
            if count > 1:
                print(f"Input int element number {number}:")
            else:
                print("Input int element to be added:")
            value = self.console.read_int(lambda _: True, error)
            elapsed = _timed(lambda: push(value))
        return elapsed

    def _read_sizes(self, kind: str) -> tuple[int, int]:
        print(f"Input maximum amount of elements in {kind} (int, >=0):")
        limit = self.console.read_int(lambda v: v >= 0, "ERROR: incorrect amount. Try again\n")
        print(f"Input initial amount of elements in {kind} (int, >=0 and <={limit}):")
        count = self.console.read_int(
            lambda v: 0 <= v <= limit, "ERROR: incorrect initial amount. Try again\n"
        )
        return limit, count

    def create_array(self) -> None:
        if self.array is not None:
            print("ERROR: stack-array already exists")
            return
        limit, count = self._read_sizes("stack-array")
        self.array = ArrayStack(limit)
        self._read_elements(count, self.array.push, "ERROR: incorrect value. Try again: ")
        print(f"Successfully added {count} elements to stack-array")

    def push_array(self) -> None:
        if self.array is None:
            print("ERROR: first create a stack-array")
        elif self.array.is_full():
            print("ERROR: stack-array is already full")
        else:
            elapsed = self._read_elements(1, self.array.push, "ERROR: incorrect value. Try again: ")
            print("Successfully added 1 elements to stack-array")
            print(f"Elapsed time in ticks: {elapsed}")

    def pop_array(self) -> None:
        if self.array is None:
            print("ERROR: first create a stack-array")
        elif self.array.is_empty():
            print("ERROR: stack-array is empty")
        else:
            start = tick()
            value = self.array.pop()
            elapsed = tick() - start
            print(f"Successfully popped element with value {value}")
            print(f"Elapsed time in ticks: {elapsed}")

    def runs_array(self) -> None:
        if self.array is None:
            print("ERROR: first create a stack-array")
        elif self.array.is_empty():
            print("ERROR: stack-array is empty")
        else:
            print("Decreasing subsequences in stack-array:")
            array = self.array
            elapsed = _timed(lambda: _print_runs(array))
            print(f"Elapsed time in ticks (including printing): {elapsed}")

    def show_array(self) -> None:
        print("Current state of stack-array:", end="")
        if self.array is None:
            print("Stack-array was not created yet")
        elif self.array.is_empty():
            print("stack-array is empty")
        else:
            print()
            for value in self.array:
                print(value)

    def create_list(self) -> None:
        if self.list_exists:
            print("ERROR: stack-list already exists")
            return
        limit, count = self._read_sizes("stack-list")
        self.list_limit = limit
        self.freed = FreedAddresses(limit * limit)
        self.linked = ListStack(self.freed)
        self._read_elements(
            count, self.linked.push, "ERROR: incorrect value of element. Try again:\n"
        )
        print(f"Successfully input {count} elements of stack-list")

    def push_list(self) -> None:
        if not self.list_exists or self.linked is None:
            print("ERROR: first create a stack-list")
        elif self.linked.is_full(self.list_limit):
            print("ERROR: stack is already full")
        else:
            elapsed = self._read_elements(
                1, self.linked.push, "ERROR: incorrect value of element. Try again:\n"
            )
            print("Successfully input 1 elements of stack-list")
            print(f"Elapsed time in ticks: {elapsed}")
            self.linked.reclaim_top()

    def pop_list(self) -> None:
        if not self.list_exists or self.linked is None:
            print("ERROR: first create a stack-list")
            return
        start = tick()
        value = self.linked.pop()
        elapsed = tick() - start
        print(f"Successfully popped element with value {value}")
        print(f"Elapsed time in ticks: {elapsed}")
        self.show_freed()

    def show_freed(self) -> None:
        if not self.list_exists or self.freed is None:
            print("ERROR: first create a stack-list and make some operations")
        else:
            print("Array of released addresses:")
            print(self.freed.format())

    def runs_list(self) -> None:
        if not self.list_exists or self.linked is None:
            print("ERROR: first create a stack-list")
        else:
            print("Decreasing subsequences in stack-list:")
            linked = self.linked
            elapsed = _timed(lambda: _print_runs(linked))
            print(f"Elapsed time in ticks (including printing): {elapsed}")

    def show_list(self) -> None:
        if not self.list_exists or self.linked is None:
            print("Stack-list was not created yet")
        else:
            print("Current state of stack-list:")
            print("Value ~ address")
            for value, address in self.linked.entries():
                print(f"{value} ~ {address:x}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive stack workshop, or a timing comparison with --compare."""
    parser = argparse.ArgumentParser(description="Compare array and linked stacks.")
    parser.add_argument(
        "--compare",
        nargs=2,
        type=int,
        metavar=("CAPACITY", "REPEATS"),
        help="time both realisations instead of running interactively",
    )
    args = parser.parse_args(argv)

    if args.compare is not None:
        capacity, repeats = args.compare
        try:
            compare(capacity, repeats)
        except ValueError as error:
            print(f"ERROR: {error}")
            return ERRMEM
        except OverflowError:
            print("MEMORY ERROR. Array of released addresses is full.\nExiting program..")
            return ERRMEM
        return OK

    session = _Session(_Console(sys.stdin))
    print(info_text())
    print(commands_text())
    try:
        while True:
            print("\nInput command:")
            command = session.read_command()
            if command == 0:
                break
            session.handlers[command]()
    except _EndOfInput:
        pass
    except OverflowError:
        print(
            "MEMORY ERROR. Array of released addresses is full.\n"
            "Try again with smaller maximum amount of elements in stack-list.\n"
            "Exiting program.."
        )
        return ERRMEM

    print("\nExiting program..", end="")
    return OK