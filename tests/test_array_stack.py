import pytest

from dsworkshop.stacks.array_stack import ArrayStack, StackEmptyError, StackFullError


def test_new_stack_is_empty():
    stack = ArrayStack(3)
    assert stack.is_empty()
    assert not stack.is_full()
    assert len(stack) == 0


def test_push_pop_is_lifo():
    stack = ArrayStack(5)
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty()


def test_full_after_capacity_pushes():
    stack = ArrayStack(2)
    stack.push(7)
    stack.push(8)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(9)
    assert len(stack) == 2


def test_zero_capacity_is_full_and_empty():
    stack = ArrayStack(0)
    assert stack.is_full() and stack.is_empty()
    with pytest.raises(StackFullError):
        stack.push(1)


def test_pop_empty_raises():
    with pytest.raises(StackEmptyError):
        ArrayStack(4).pop()


def test_iteration_top_to_bottom_does_not_change_stack():
    stack = ArrayStack(4)
    for value in (10, 20, 30):
        stack.push(value)
    assert list(stack) == [30, 20, 10]
    assert len(stack) == 3


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayStack(-1)