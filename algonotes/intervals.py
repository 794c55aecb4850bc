"""Algorithms on closed integer intervals given as ``[start, end]`` pairs."""

from __future__ import annotations

from collections.abc import Sequence


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Fewest intervals to remove so the rest do not overlap (touching is fine)."""
    ordered = sorted(intervals, key=lambda interval: (interval[1], -interval[0]))
    kept = 0
    end: int | None = None
    for start, finish in ordered:
        if end is None or start >= end:
            kept += 1
            end = finish
    return len(ordered) - kept


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals into a sorted list."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert into sorted disjoint intervals, merging where needed."""
    start, end = new_interval
    result: list[list[int]] = []
    remaining = iter(intervals)
    pending: Sequence[int] | None = None
    for interval in remaining:
        if interval[1] < start:
            result.append(list(interval))
            continue
        pending = interval
        break
    while pending is not None and pending[0] <= end:
        start = min(start, pending[0])
        end = max(end, pending[1])
        pending = next(remaining, None)
    result.append([start, end])
    if pending is not None:
        result.append(list(pending))
        result.extend(list(interval) for interval in remaining)
    return result