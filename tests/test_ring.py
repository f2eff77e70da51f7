import pytest

from dsworkshop.queues.ring import QueueEmptyError, QueueFullError, RingQueue


def test_items_leave_in_arrival_order():
    queue = RingQueue(5)
    for item in "abc":
        queue.push(item)
    assert [queue.pop() for _ in range(3)] == ["a", "b", "c"]
    assert queue.is_empty()


def test_push_onto_full_queue_raises():
    queue = RingQueue(2)
    queue.push("1")
    queue.push("2")
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.push("3")
    assert list(queue) == ["1", "2"]


def test_pop_from_empty_queue_raises():
    queue = RingQueue(3)
    with pytest.raises(QueueEmptyError):
        queue.pop()


def test_wraps_around_the_slots():
    queue = RingQueue(3)
    for item in "abc":
        queue.push(item)
    assert queue.pop() == "a"
    assert queue.pop() == "b"
    queue.push("d")
    queue.push("e")
    assert queue.is_full()
    assert list(queue) == ["c", "d", "e"]
    assert [queue.pop() for _ in range(3)] == ["c", "d", "e"]


def test_length_tracks_pushes_and_pops():
    queue = RingQueue(4)
    queue.push(1)
    queue.push(2)
    queue.pop()
    assert len(queue) == 1
    assert not queue.is_empty()
    assert not queue.is_full()


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        RingQueue(0)