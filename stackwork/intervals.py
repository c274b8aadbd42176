"""Interval merging and the grid-cut check built on it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _merge(intervals: Iterable[Sequence[int]], *, join_touching: bool) -> list[list[int]]:
    """Merge intervals after sorting them by (start, end).

    When ``join_touching`` is true, an interval that starts exactly where the
    previous one ends is merged into it; otherwise it starts a new section.
    """
    merged: list[list[int]] = []
    for start, end in sorted((s, e) for s, e in intervals):
        if merged:
            last = merged[-1]
            overlaps = start <= last[1] if join_touching else start < last[1]
            if overlaps:
                last[1] = max(last[1], end)
                continue
        merged.append([start, end])
    return merged


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals.

    The input is left untouched; the result is sorted by start.
    """
    return _merge(intervals, join_touching=True)


def check_valid_cuts(n: int, rectangles: Iterable[Sequence[int]]) -> bool:
    """Tell whether an ``n`` x ``n`` grid can be cut into three sections.

    Each rectangle is ``[x1, y1, x2, y2]``. Two parallel cuts, either both
    horizontal or both vertical, must leave every section holding at least one
    rectangle while no rectangle is crossed by a cut.
    """
    horizontal: list[tuple[int, int]] = []
    vertical: list[tuple[int, int]] = []
    for x1, y1, x2, y2 in rectangles:
        horizontal.append((x1, x2))
        vertical.append((y1, y2))
    return (
        len(_merge(horizontal, join_touching=False)) >= 3
        or len(_merge(vertical, join_touching=False)) >= 3
    )