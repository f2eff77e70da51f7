"""Operations over stacks."""

from typing import Protocol

__all__ = ["decreasing_runs"]


class _Stack(Protocol):
    def pop(self) -> int: ...

    def is_empty(self) -> bool: ...


def decreasing_runs(stack: _Stack) -> list[list[int]]:
    """Empty ``stack`` and return its decreasing runs in reverse order.

    Elements are popped from the top; every maximal stretch of at least two
    values that rise in pop order (and so fall in push order) becomes one run,
    listed in pop order. Raises the stack's empty error if it is empty.
    """
    runs: list[list[int]] = []
    current = stack.pop()
    while not stack.is_empty():
        following = stack.pop()
        run = [current]
        while following > current:
            run.append(following)
            current = following
            if not stack.is_empty():
                following = stack.pop()
        current = following
        if len(run) > 1:
            runs.append(run)
    return runs