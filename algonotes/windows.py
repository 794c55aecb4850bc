"""Sliding-window and prefix-sum counting over arrays and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def _count_at_most(weights: Iterable[int], limit: int) -> int:
    """Subarrays whose non-negative weights sum to at most ``limit``."""
    if limit < 0:
        return 0
    values = list(weights)
    left = window = count = 0
    for right, weight in enumerate(values):
        window += weight
        while window > limit:
            window -= values[left]
            left += 1
        count += right - left + 1
    return count


def number_of_nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Subarrays holding exactly ``k`` odd numbers."""
    odd = [num & 1 for num in nums]
    return _count_at_most(odd, k) - _count_at_most(odd, k - 1)


def count_substrings_with_abc(s: str) -> int:
    """Substrings containing at least one each of 'a', 'b' and 'c'."""
    counts: Counter[str] = Counter()
    total = left = 0
    for right, char in enumerate(s):
        counts[char] += 1
        while all(counts[letter] for letter in "abc"):
            total += len(s) - right
            counts[s[left]] -= 1
            left += 1
    return total


def max_card_score(card_points: Sequence[int], k: int) -> int:
    """Best total of ``k`` cards taken from the two ends; never below zero."""
    if not 0 <= k <= len(card_points):
        raise ValueError("k must be between 0 and the number of cards")
    left = sum(card_points[:k])
    right = 0
    best = max(left, 0)
    for taken in range(1, k + 1):
        left -= card_points[k - taken]
        right += card_points[-taken]
        best = max(best, left + right)
    return best


def character_replacement(s: str, k: int) -> int:
    """Longest run of one letter reachable by changing at most ``k`` characters."""
    freq: Counter[str] = Counter()
    left = best = max_freq = 0
    for right, char in enumerate(s):
        freq[char] += 1
        max_freq = max(max_freq, freq[char])
        if right - left + 1 - max_freq > k:
            freq[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Subarrays whose values sum to exactly ``k``."""
    seen: Counter[int] = Counter({0: 1})
    prefix = count = 0
    for num in nums:
        prefix += num
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Subarrays of a binary array summing to exactly ``goal``."""
    return _count_at_most(nums, goal) - _count_at_most(nums, goal - 1)