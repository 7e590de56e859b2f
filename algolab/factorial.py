"""Factorial computed iteratively and recursively."""

from __future__ import annotations


def factorial_iterative(n: int) -> int:
    """Return n! by repeated multiplication; gives 1 for n below 1."""
    result = 1
    for factor in range(1, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """Return n! by recursion; gives 1 for n below 2."""
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)