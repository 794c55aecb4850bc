"""Sudoku validation, subset enumeration and sorted-array merging."""

from __future__ import annotations

from collections.abc import Sequence
from heapq import merge
from itertools import compress
from typing import TypeVar

T = TypeVar("T")


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Whether no digit repeats in a row, column or 3x3 box; '.' marks an empty cell."""
    seen: set[tuple[str, int, str]] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == ".":
                continue
            keys = (("row", r, cell), ("col", c, cell), ("box", (r // 3) * 3 + c // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def subsets(nums: Sequence[T]) -> list[list[T]]:
    """Every subset, ordered by the bitmask of chosen positions."""
    n = len(nums)
    return [
        list(compress(nums, ((mask >> bit) & 1 for bit in range(n))))
        for mask in range(1 << n)
    ]


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if n == 0:
        return
    if m == 0:
        nums1[:] = nums2
        return
    nums1[: m + n] = list(merge(nums1[:m], nums2[:n]))