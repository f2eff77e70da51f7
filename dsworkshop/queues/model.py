"""Simulation of a single server fed by two queues of requests."""

import math
import random
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TextIO

from dsworkshop.queues.linked import LinkedQueue, MemoryTracker
from dsworkshop.queues.ring import RingQueue
from dsworkshop.timing import tick

__all__ = [
    "MAX_LEN",
    "EPS",
    "TimeRange",
    "QueueStats",
    "QueueKind",
    "SimulationResult",
    "expected_time",
    "simulate",
]

MAX_LEN = 10000
EPS = 1e-6

_POINTER_SIZE = 8
_CHAR_SIZE = 1
_NODE_SIZE = 16


@dataclass(frozen=True)
class TimeRange:
    """Uniform range of durations."""

    low: float
    high: float

    def __post_init__(self) -> None:
        if self.low < 0 or self.high <= 0 or self.low > self.high:
            raise ValueError("time range needs 0 <= low <= high and high > 0")

    def sample(self, rng: random.Random) -> float:
        """Draw a duration uniformly from the range."""
        return (self.high - self.low) * rng.random() + self.low

    def mean(self) -> float:
        return (self.low + self.high) / 2


@dataclass
class QueueStats:
    """Counters used for the average number of requests waiting in a queue."""

    current: int = 0
    total: int = 0
    requests: int = 0
    added: int = 0
    removed: int = 0

    def add(self) -> None:
        self.current += 1
        self.total += self.current
        self.requests += 1
        self.added += 1

    def remove(self) -> None:
        self.current -= 1
        self.total += self.current
        self.requests += 1
        self.removed += 1

    def average(self) -> int:
        """Average queue length over all additions and removals (0 if none)."""
        operations = self.added + self.removed
        return 2 * self.total // operations if operations else 0


class QueueKind(Enum):
    ARRAY = "array"
    LIST = "list"


@dataclass
class SimulationResult:
    """Outcome of one simulation run."""

    time: float
    in1: int
    out1: int
    in2: int
    out2: int
    downtime: float
    expected: float
    error_percent: float
    ticks: int
    overflow: int | None
    stats1: QueueStats
    stats2: QueueStats
    reused: int = 0
    freed_addresses: tuple[int, ...] = field(default_factory=tuple)

    @property
    def still_free(self) -> int:
        return len(self.freed_addresses)


class _Queue(Protocol):
    def push(self, item: str) -> object: ...

    def pop(self) -> str: ...

    def is_empty(self) -> bool: ...

    def __len__(self) -> int: ...


def expected_time(n: int, t1: TimeRange, t3: TimeRange) -> float:
    """Expected time to serve ``n`` first-type requests."""
    return n * max(t1.mean(), t3.mean())


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.inf


def _print_progress(out: TextIO, clock: float, rows: list[tuple[QueueStats, int, int]]) -> None:
    print(f"after processing {rows[0][2]:4d} elements of first queue:", file=out)
    for number, (stats, came, left) in enumerate(rows, start=1):
        print(f"\tqueue{number}:", file=out)
        print(
            f"\t\tamount in queue: current -  {stats.current:3d}, avg - {stats.average():3d}",
            file=out,
        )
        print(f"\t\twent in -  {came:3d}, went out - {left:3d}", file=out)
        print(f"\t\tavg time in queue {_ratio(clock, left):f}", file=out)


def _print_report(
    out: TextIO,
    result: SimulationResult,
    n: int,
    kind: QueueKind,
    ranges: tuple[TimeRange, TimeRange, TimeRange, TimeRange],
) -> None:
    t1, t2, t3, t4 = ranges
    print("\n\nFINAL RESULTS OF MODELING", file=out)
    print(f"\tModeling time: {result.time:f} ", file=out)
    print(
        f"\tIn/Out from 1 queue: {result.in1} {result.out1} ({result.in1 - result.out1})",
        file=out,
    )
    print(
        f"\tIn/Out from 2 queue: {result.in2} {result.out2} ({result.in2 - result.out2})",
        file=out,
    )
    print(f"\tOA downtime: {result.downtime:f} \n", file=out)

    print("\n\nTHEORETICAL RESULTS:", file=out)
    print(f"\tQueue1: Avg time comings {t1.mean():f}, processing {t3.mean():f}", file=out)
    print(f"\tQueue2: Avg time comings {t2.mean():f}, processing {t4.mean():f}", file=out)
    if t1.mean() <= t3.mean():
        print("In queue1 avg time comings <= processing", file=out)
        print(
            "This means that expected modeling time is counted by avg time processing in queue1.",
            file=out,
        )
        basis = t3.mean()
    else:
        print("In queue1 avg time comings > processing", file=out)
        print(
            "This means that expected modeling time is counted by avg time coming in queue1.",
            file=out,
        )
        basis = t1.mean()
    print(f"\tExpected modeling time = {n} * {basis:f} = {result.expected:f}", file=out)
    print(f"Out error: {result.error_percent:f}%\n", file=out)

    print("\n\nEFFICIENCY RESULTS:", file=out)
    print(f"Time of modeling using queue-{kind.value}: {result.ticks} ticks", file=out)
    if kind is QueueKind.ARRAY:
        total = 2 * _POINTER_SIZE + _CHAR_SIZE * MAX_LEN * 2
        print(
            f"Avg memory needed = 2 * {_POINTER_SIZE} + 2 * {_CHAR_SIZE} * {MAX_LEN} = {total}b\n",
            file=out,
        )
    else:
        nodes = sum(
            (stats.total // stats.removed if stats.removed else 0) + 1
            for stats in (result.stats1, result.stats2)
        )
        print(f"Avg nodes, that are kept in memory in both queues: {nodes}", file=out)
        total = 2 * _POINTER_SIZE + _NODE_SIZE * nodes
        print(
            f"Avg memory needed = 2 * {_POINTER_SIZE} + {_NODE_SIZE} * {nodes} = {total}b\n",
            file=out,
        )


def simulate(
    n: int,
    interval: int,
    t1: TimeRange,
    t2: TimeRange,
    t3: TimeRange,
    t4: TimeRange,
    kind: QueueKind = QueueKind.LIST,
    log: bool = False,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> SimulationResult:
    """Serve requests until ``n`` first-type requests are done, and report.

    Requests of type 1 arrive every ``t1`` and take ``t3`` to serve; type 2
    arrive every ``t2`` and take ``t4``. The server always takes a waiting
    type-1 request first. The run stops early if a queue reaches MAX_LEN.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    if interval <= 0:
        raise ValueError("interval must be positive")
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout

    tracker = MemoryTracker() if kind is QueueKind.LIST else None
    queues: list[_Queue]
    if tracker is not None:
        queues = [LinkedQueue(tracker), LinkedQueue(tracker)]
    else:
        queues = [RingQueue(MAX_LEN), RingQueue(MAX_LEN)]
    q1, q2 = queues
    stats1, stats2 = QueueStats(), QueueStats()

    served = 1
    clock = 0.0
    t_q1 = t_q2 = t_oa = 0.0
    in1 = in2 = out1 = out2 = 0
    shown = 0
    busy1 = busy2 = 0.0
    overflow: int | None = None

    start = tick()
    while out1 < n:
        for number, queue in enumerate(queues, start=1):
            if len(queue) >= MAX_LEN:
                overflow = number
                break
        if overflow is not None:
            print("==========================", file=out)
            print(f"ERROR: Queue{overflow} is overflow. Stopping modeling.", file=out)
            break

        if abs(t_q1) < EPS:
            t_q1 = t1.sample(rng)
        if abs(t_q2) < EPS:
            t_q2 = t2.sample(rng)
        if abs(t_oa) < EPS:
            if not q1.is_empty():
                t_oa = t3.sample(rng)
                served = 1
                q1.pop()
                stats1.remove()
                busy1 += t_oa
            elif not q2.is_empty():
                t_oa = t4.sample(rng)
                served = 2
                q2.pop()
                stats2.remove()
                busy2 += t_oa

        t_min = min(t_q1, t_q2) if abs(t_oa) < EPS else min(t_q1, t_q2, t_oa)

        if abs(t_min - t_oa) < EPS:
            t_oa = 0.0
            if served == 1:
                out1 += 1
            else:
                out2 += 1
        if out1 == n:
            break

        if abs(t_min - t_q1) < EPS:
            q1.push("1")
            stats1.add()
            in1 += 1
        if abs(t_min - t_q2) < EPS:
            q2.push("2")
            stats2.add()
            in2 += 1

        t_q1 -= t_min
        t_q2 -= t_min
        if t_oa >= t_min:
            t_oa -= t_min
        clock += t_min

        if log and out1 % interval == 0 and out1 != shown:
            shown = out1
            _print_progress(out, clock, [(stats1, in1, out1), (stats2, in2, out2)])
    ticks = tick() - start

    expected = expected_time(n, t1, t3)
    result = SimulationResult(
        time=clock,
        in1=in1,
        out1=out1,
        in2=in2,
        out2=out2,
        downtime=abs(clock - busy1 - busy2),
        expected=expected,
        error_percent=abs(100 * (clock - expected) / expected),
        ticks=ticks,
        overflow=overflow,
        stats1=stats1,
        stats2=stats2,
        reused=tracker.reused if tracker is not None else 0,
        freed_addresses=tuple(tracker.freed) if tracker is not None else (),
    )
    _print_report(out, result, n, kind, (t1, t2, t3, t4))
    return result