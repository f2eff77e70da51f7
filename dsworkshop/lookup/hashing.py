"""Hash functions and a hash table with chained buckets."""

import math
from collections.abc import Callable, Iterable

__all__ = [
    "is_prime",
    "next_prime",
    "division_hash",
    "mid_square_hash",
    "HashTable",
]

_SEPARATOR = "------------------------------------------"


def is_prime(num: int) -> bool:
    """True if no integer in 2..sqrt(num) divides ``num`` (so 0 and 1 count)."""
    return all(num % divisor for divisor in range(2, math.isqrt(max(num, 0)) + 1))


def next_prime(n: int) -> int:
    """Return the smallest value above ``n`` accepted by is_prime."""
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def division_hash(value: int, n: int) -> int:
    """Hash by the remainder of division by ``n``."""
    return value % n


def mid_square_hash(value: int, n: int) -> int:
    """Hash by 16 middle bits of the 32-bit square of ``value``."""
    middle = ((value * value) >> 2) & 0xFFFF
    return middle % n


class HashTable:
    """Table of ``size`` buckets, each a chain of distinct values."""

    def __init__(self, size: int, hash_function: Callable[[int, int], int]) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self.hash_function = hash_function
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, value: int) -> list[int]:
        return self._buckets[self.hash_function(value, self.size)]

    def insert(self, value: int) -> int:
        """Add ``value``; return its position in its chain, or 0 if already present."""
        bucket = self._bucket(value)
        if value in bucket:
            return 0
        bucket.append(value)
        return len(bucket)

    def build(self, values: Iterable[int]) -> int:
        """Insert every value and return the largest number of comparisons needed."""
        return max((self.insert(value) for value in values), default=0)

    def lookup(self, value: int) -> int:
        """Return the number of comparisons that found ``value``, or 0 if absent."""
        bucket = self._bucket(value)
        try:
            return bucket.index(value) + 1
        except ValueError:
            return 0

    def occupied(self) -> int:
        """Number of non-empty buckets."""
        return sum(1 for bucket in self._buckets if bucket)

    def render(self) -> str:
        """Draw the non-empty buckets as a table of hash and data."""
        parts = [f"\n{_SEPARATOR}\n HASH | DATA \n{_SEPARATOR}\n"]
        for index, bucket in enumerate(self._buckets):
            if bucket:
                data = "".join(f"{value} " for value in bucket)
                parts.append(f"{index:5d} | {data}\n{_SEPARATOR}\n")
        return "".join(parts)