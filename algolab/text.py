"""Brute-force string matching."""

from __future__ import annotations


def find_pattern(text: str, pattern: str) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text``, overlaps included."""
    last_start = len(text) - len(pattern)
    return [start for start in range(last_start + 1) if text.startswith(pattern, start)]