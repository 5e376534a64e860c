"""Literal substring lookup used by the address parsers."""
from __future__ import annotations


def find_all(haystack: str, needle: str) -> list[int]:
    """Return every start index of ``needle`` in ``haystack``, left to right.

    Matches never overlap: scanning resumes after the end of the previous hit,
    so ``find_all(":::", "::")`` is ``[0]``.
    """
    if not needle:
        return []
    positions: list[int] = []
    start = 0
    while True:
        index = haystack.find(needle, start)
        if index < 0:
            return positions
        positions.append(index)
        start = index + len(needle)
