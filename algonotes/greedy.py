"""Greedy algorithms over sequences of numbers and characters."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def distribute_candy(ratings: Sequence[int]) -> int:
    """Fewest candies such that each child gets one and beats lower-rated neighbours."""
    if not ratings:
        raise ValueError("no children to give candy to")

    def climb(values: Sequence[int]) -> list[int]:
        counts = [1]
        for previous, current in pairwise(values):
            counts.append(counts[-1] + 1 if current > previous else 1)
        return counts

    from_left = climb(ratings)
    from_right = climb(ratings[::-1])[::-1]
    return sum(map(max, from_left, from_right))


def min_jumps(nums: Sequence[int]) -> int:
    """Fewest jumps from the first index to the last, each at most ``nums[i]`` long."""
    if not nums:
        raise ValueError("no positions to jump through")
    last = len(nums) - 1
    jumps = 0
    reach_end = 0
    farthest = 0
    for index, step in enumerate(nums[:-1]):
        farthest = max(farthest, index + step)
        if index == reach_end:
            if farthest <= index:
                raise ValueError("the last position cannot be reached")
            jumps += 1
            reach_end = farthest
            if reach_end >= last:
                break
    return jumps


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached, each jump at most ``nums[i]`` long."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Most children content when a child needs a cookie at least as big as its greed."""
    children = iter(sorted(greed))
    need = next(children, None)
    content = 0
    for size in sorted(sizes):
        if need is not None and size >= need:
            content += 1
            need = next(children, None)
    return content


def check_valid_string(s: str) -> bool:
    """Whether parentheses balance when each '*' may be '(', ')' or nothing."""
    low = high = 0
    for char in s:
        if char == "(":
            low += 1
            high += 1
        elif char == ")":
            high -= 1
            if high < 0:
                return False
            low = max(low - 1, 0)
        else:
            low = max(low - 1, 0)
            high += 1
    return low == 0


def lemonade_change(bills: Sequence[int]) -> bool:
    """Whether every customer paying 5, 10 or 20 for a 5 lemonade gets correct change."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if fives == 0:
                return False
            fives -= 1
            tens += 1
        elif tens:
            if fives == 0:
                return False
            tens -= 1
            fives -= 1
        else:
            if fives < 3:
                return False
            fives -= 3
    return True