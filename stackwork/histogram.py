"""Monotonic-stack queries over bar heights and number sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_MODULUS = 10**9 + 7


def _spans(values: Sequence[int]) -> Iterator[tuple[int, int, int]]:
    """Yield ``(index, left, right)`` for every position of ``values``.

    ``right`` is the index of the next strictly smaller value (``len(values)``
    if none). ``left`` is the index of the previous value that is not larger
    (``-1`` if none). Between them, ``values[index]`` is a minimum.
    """
    stack: list[int] = []
    size = len(values)
    for i, value in enumerate(values):
        while stack and value < values[stack[-1]]:
            index = stack.pop()
            yield index, stack[-1] if stack else -1, i
        stack.append(i)
    while stack:
        index = stack.pop()
        yield index, stack[-1] if stack else -1, size


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under a histogram.

    An empty histogram has area 0.
    """
    return max(
        (heights[index] * (right - left - 1) for index, left, right in _spans(heights)),
        default=0,
    )


def maximal_rectangle(matrix: Iterable[Sequence[str]]) -> int:
    """Return the area of the largest rectangle of ``"1"`` cells in ``matrix``.

    Each row is a sequence of ``"0"``/``"1"`` characters (a string works).
    Every row is treated as the base of a histogram of consecutive ones.
    """
    best = 0
    histogram: list[int] = []
    for row in matrix:
        if not histogram:
            histogram = [0] * len(row)
        histogram = [
            height + 1 if cell == "1" else 0 for height, cell in zip(histogram, row)
        ]
        best = max(best, largest_rectangle_area(histogram))
    return best


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Return the sum of the minimum of every contiguous subarray, mod 1e9+7."""
    total = sum(
        arr[index] * (index - left) * (right - index)
        for index, left, right in _spans(arr)
    )
    return total % _MODULUS


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days pass until a warmer one (0 if never)."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperature > temperatures[pending[-1]]:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits