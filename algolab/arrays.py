"""Simple operations over arrays and matrices."""

from __future__ import annotations

from typing import Optional, Sequence


def elementwise_product(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Multiply two matrices of the same shape entry by entry.

    Raises ValueError when the shapes differ.
    """
    try:
        return [
            [x * y for x, y in zip(row_a, row_b, strict=True)]
            for row_a, row_b in zip(a, b, strict=True)
        ]
    except ValueError as exc:
        raise ValueError("matrices must have the same shape") from exc


def largest(values: Sequence[int]) -> int:
    """Return the largest value; raises ValueError for an empty sequence."""
    if not values:
        raise ValueError("values must not be empty")
    best = values[0]
    for value in values[1:]:
        if value > best:
            best = value
    return best


def is_unique(values: Sequence[int]) -> bool:
    """Report whether no value repeats among all but the final element.

    The final element takes no part in the comparison.
    """
    head = values[:-1]
    return len(set(head)) == len(head)


def linear_search(values: Sequence[int], key: int) -> Optional[int]:
    """Return the index of the first occurrence of ``key``, or None."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return None