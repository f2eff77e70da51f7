"""Interactive front end for the two-queue service simulation."""

import argparse
import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO, TypeVar

from dsworkshop.queues.model import MAX_LEN, QueueKind, TimeRange, simulate

__all__ = ["Settings", "info_text", "format_settings", "main"]

T = TypeVar("T")

_MENU = (
    "\nEnter command:\n"
    "\t1 - Print current values\n"
    "\t2 - Change values\n"
    "\t3 - Model with queue-list\n"
    "\t4 - Model with queue-array\n"
    "\t0 - Exit program"
)
_RETRY = "\nERROR: incorrect value. Try again: "
_SHOWN_ADDRESSES = 20


@dataclass(frozen=True)
class Settings:
    """Parameters of a simulation run."""

    n: int = 1000
    interval: int = 100
    log: bool = True
    t1: TimeRange = field(default_factory=lambda: TimeRange(1, 5))
    t2: TimeRange = field(default_factory=lambda: TimeRange(0, 3))
    t3: TimeRange = field(default_factory=lambda: TimeRange(0, 4))
    t4: TimeRange = field(default_factory=lambda: TimeRange(0, 1))

    def __post_init__(self) -> None:
        if self.n <= 0:
            raise ValueError("stop amount must be positive")
        if self.interval <= 0:
            raise ValueError("interval must be positive")

    @property
    def ranges(self) -> tuple[TimeRange, TimeRange, TimeRange, TimeRange]:
        return self.t1, self.t2, self.t3, self.t4


class _EndOfInput(Exception):
    """Raised when standard input is exhausted."""


class _Console:
    """Reads values line by line, re-prompting until a line parses."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise _EndOfInput
        return line

    def read(self, parse: Callable[[str], T], error: str) -> T:
        while True:
            line = self.readline()
            try:
                return parse(line)
            except ValueError:
                print(error, end="")


def _bounded_int(low: int, high: int | None = None) -> Callable[[str], int]:
    def parse(line: str) -> int:
        value = int(line.strip())
        if value < low or (high is not None and value > high):
            raise ValueError(f"{value} is out of range")
        return value

    return parse


def _parse_range(line: str) -> TimeRange:
    parts = line.split()
    if len(parts) != 2:
        raise ValueError("expected two numbers")
    return TimeRange(float(parts[0]), float(parts[1]))


def info_text() -> str:
    """Describe what the program simulates."""
    return (
        "This program simulate the process of servicing the first 1000 requests of the 1st type\n"
        f"Max capacity of each queue = {MAX_LEN}"
    )


def format_settings(settings: Settings) -> str:
    """Render the current simulation parameters."""
    lines = [f"\nStop amount in queue1 is {settings.n}"]
    if settings.log:
        lines.append(f"Show intermediate results every {settings.interval} queue1 elements")
    else:
        lines.append("Don't show intermediate results.")
    for number, time_range in enumerate(settings.ranges, start=1):
        lines.append(
            f"T{number}_min: {time_range.low:f}   T{number}_max: {time_range.high:f} "
        )
    return "\n".join(lines)


def _input_settings(console: _Console, current: Settings) -> Settings:
    print("\nInput stop amount in queue1: ", end="")
    n = console.read(_bounded_int(1), _RETRY)

    print("\nDo you want to see intermediate results? 0(f)/1(t): ", end="")
    log = console.read(_bounded_int(0, 1), _RETRY)

    interval = current.interval
    if log:
        print("\nShow intermediate results every .. elements: ", end="")
        interval = console.read(_bounded_int(1, n), _RETRY)

    ranges = []
    for number in range(1, 5):
        print(f"\nInput T{number}_min T{number}_max  value: ", end="")
        ranges.append(console.read(_parse_range, _RETRY))
    return Settings(n, interval, bool(log), *ranges)


def _run(settings: Settings, kind: QueueKind, rng: random.Random, console: _Console) -> None:
    result = simulate(
        settings.n,
        settings.interval,
        *settings.ranges,
        kind=kind,
        log=settings.log,
        rng=rng,
    )
    if kind is not QueueKind.LIST:
        return
    print("Show memory results? 1-yes/0-no: ", end="")
    if console.read(_bounded_int(0, 1), _RETRY):
        print(f"Reused adresses: {result.reused}")
        print(f"Still free     : {result.still_free}")
        for address in result.freed_addresses[:_SHOWN_ADDRESSES]:
            print(f"{address:#x}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive simulation menu on standard input."""
    parser = argparse.ArgumentParser(description="Simulate a server fed by two queues.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random times")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    settings = Settings()
    console = _Console(sys.stdin)

    print(info_text())
    try:
        while True:
            print(_MENU)
            line = console.readline()
            try:
                command = int(line.strip())
            except ValueError:
                print("ERROR: unknown command")
                continue
            if command == 0:
                break
            if command == 1:
                print(format_settings(settings))
            elif command == 2:
                settings = _input_settings(console, settings)
            elif command == 3:
                _run(settings, QueueKind.LIST, rng, console)
            elif command == 4:
                _run(settings, QueueKind.ARRAY, rng, console)
            else:
                print("ERROR: unknown command")
    except _EndOfInput:
        pass
    return 0