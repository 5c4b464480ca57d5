"""Summing collections of integers."""

from collections.abc import Iterable, Sequence


def total(numbers: Iterable[int]) -> int:
    """Return the sum of all numbers."""
    return sum(numbers)


def sum_all(*args: Iterable[int]) -> list[int]:
    """Return the sum of each given collection, in order."""
    return [total(numbers) for numbers in args]


def sum_all_tails(*args: Sequence[int]) -> list[int]:
    """Return the sum of each collection without its first element.

    An empty collection sums to zero.
    """
    return [total(numbers[1:]) for numbers in args]