import pytest

from dsworkshop.stacks.array_stack import StackEmptyError
from dsworkshop.stacks.freed import FreedAddresses
from dsworkshop.stacks.list_stack import ListStack


@pytest.fixture
def stack():
    return ListStack(FreedAddresses(100))


def test_push_pop_is_lifo(stack):
    for value in (4, 5, 6):
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [6, 5, 4]
    assert stack.is_empty()


def test_addresses_are_distinct(stack):
    addresses = [stack.push(value) for value in range(5)]
    assert len(set(addresses)) == 5


def test_pop_records_freed_address(stack):
    address = stack.push(1)
    stack.pop()
    assert list(stack.freed) == [address]


def test_push_after_pop_reuses_address_and_reclaims(stack):
    stack.push(1)
    released = stack.push(2)
    stack.pop()
    again = stack.push(3)
    assert again == released
    assert stack.top_address() == again
    assert stack.reclaim_top() is True
    assert list(stack.freed) == []


def test_entries_top_to_bottom(stack):
    first = stack.push(10)
    second = stack.push(20)
    assert stack.entries() == [(20, second), (10, first)]


def test_is_full_when_top_index_reaches_limit(stack):
    assert not stack.is_full(0)
    stack.push(1)
    assert stack.is_full(0)
    assert not stack.is_full(1)
    stack.push(2)
    assert stack.is_full(1)


def test_pop_empty_raises(stack):
    with pytest.raises(StackEmptyError):
        stack.pop()


def test_clear_records_every_address(stack):
    addresses = [stack.push(value) for value in range(4)]
    stack.clear()
    assert len(stack) == 0
    assert sorted(stack.freed) == sorted(addresses)
    assert stack.top_address() is None
    assert stack.reclaim_top() is False