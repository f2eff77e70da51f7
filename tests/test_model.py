import io
import random

import pytest

from dsworkshop.queues.model import (
    MAX_LEN,
    QueueKind,
    QueueStats,
    TimeRange,
    expected_time,
    simulate,
)

T1 = TimeRange(1, 5)
T2 = TimeRange(0, 3)
T3 = TimeRange(0, 4)
T4 = TimeRange(0, 1)


def run(kind, n=200, interval=50, log=False, seed=7, ranges=(T1, T2, T3, T4)):
    out = io.StringIO()
    result = simulate(n, interval, *ranges, kind=kind, log=log, rng=random.Random(seed), out=out)
    return result, out.getvalue()


def test_time_range_mean_and_sample_bounds():
    rng = random.Random(1)
    assert T1.mean() == 3
    samples = [T1.sample(rng) for _ in range(200)]
    assert all(1 <= value <= 5 for value in samples)


@pytest.mark.parametrize("low, high", [(-1, 2), (0, 0), (3, 2)])
def test_invalid_time_range_raises(low, high):
    with pytest.raises(ValueError):
        TimeRange(low, high)


def test_queue_stats_counts_operations():
    stats = QueueStats()
    stats.add()
    stats.add()
    stats.remove()
    assert stats.current == 1
    assert stats.added == 2 and stats.removed == 1
    assert stats.requests == 3
    assert stats.average() == 2


def test_queue_stats_average_without_operations():
    assert QueueStats().average() == 0


def test_expected_time_uses_slower_of_arrival_and_service():
    assert expected_time(1000, T1, T3) == 3000
    assert expected_time(10, TimeRange(0, 2), TimeRange(4, 6)) == 10 * TimeRange(4, 6).mean()


@pytest.mark.parametrize("kind", list(QueueKind))
def test_simulation_serves_requested_amount(kind):
    result, text = run(kind)
    assert result.out1 == 200
    assert result.overflow is None
    assert result.in1 >= result.out1
    assert result.in2 >= result.out2
    assert result.downtime >= 0
    assert result.time > 0
    assert "FINAL RESULTS OF MODELING" in text
    assert f"Time of modeling using queue-{kind.value}" in text


@pytest.mark.parametrize("kind", list(QueueKind))
def test_simulation_is_reproducible_with_seed(kind):
    first, _ = run(kind, seed=11)
    second, _ = run(kind, seed=11)
    assert (first.time, first.in1, first.in2, first.out2) == (
        second.time,
        second.in1,
        second.in2,
        second.out2,
    )


def test_both_queue_kinds_agree_for_same_seed():
    array_result, _ = run(QueueKind.ARRAY, seed=3)
    list_result, _ = run(QueueKind.LIST, seed=3)
    assert array_result.time == list_result.time
    assert array_result.in2 == list_result.in2


def test_logging_prints_progress_every_interval():
    _, text = run(QueueKind.ARRAY, n=200, interval=50, log=True)
    assert text.count("after processing") == 3
    _, quiet = run(QueueKind.ARRAY, n=200, interval=50, log=False)
    assert "after processing" not in quiet


def test_array_report_states_fixed_memory():
    _, text = run(QueueKind.ARRAY)
    assert "Avg memory needed = 2 * 8 + 2 * 1 * 10000 = 20016b" in text


def test_list_run_tracks_released_addresses():
    result, text = run(QueueKind.LIST)
    assert result.reused > 0
    assert result.still_free == len(result.freed_addresses)
    assert "Avg nodes, that are kept in memory in both queues" in text


@pytest.mark.parametrize("kind", list(QueueKind))
def test_overflow_stops_simulation(kind):
    ranges = (TimeRange(0.01, 0.01), T2, TimeRange(10, 10), T4)
    result, text = run(kind, n=5000, interval=100, ranges=ranges)
    assert result.overflow == 1
    assert result.out1 < 5000
    assert result.stats1.current == MAX_LEN
    assert "ERROR: Queue1 is overflow. Stopping modeling." in text


def test_invalid_arguments_raise():
    with pytest.raises(ValueError):
        simulate(0, 10, T1, T2, T3, T4, out=io.StringIO())
    with pytest.raises(ValueError):
        simulate(10, 0, T1, T2, T3, T4, out=io.StringIO())