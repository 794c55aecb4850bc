import random

import pytest

from algonotes.greedy import (
    can_jump,
    check_valid_string,
    distribute_candy,
    find_content_children,
    lemonade_change,
    min_jumps,
)


def _random_list(seed, length, low, high):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(length)]


def test_candy_equal_ratings_give_one_each():
    ratings = [4] * 6
    assert distribute_candy(ratings) == len(ratings)


def test_candy_strictly_increasing():
    ratings = list(range(7))
    assert distribute_candy(ratings) == sum(range(1, len(ratings) + 1))


@pytest.mark.parametrize("seed", range(8))
def test_candy_is_symmetric_and_at_least_one_each(seed):
    ratings = _random_list(seed, 12, 0, 5)
    total = distribute_candy(ratings)
    assert total == distribute_candy(ratings[::-1])
    assert total >= len(ratings)


def test_candy_worked_example():
    assert distribute_candy([1, 0, 2]) == 5


def test_candy_empty_raises():
    with pytest.raises(ValueError):
        distribute_candy([])


@pytest.mark.parametrize("length", range(1, 6))
def test_min_jumps_unit_steps(length):
    nums = [1] * length
    assert min_jumps(nums) == len(nums) - 1


def test_min_jumps_worked_example():
    assert min_jumps([2, 3, 1, 1, 4]) == 2


def test_min_jumps_unreachable_raises():
    with pytest.raises(ValueError):
        min_jumps([3, 2, 1, 0, 4])


def test_min_jumps_empty_raises():
    with pytest.raises(ValueError):
        min_jumps([])


@pytest.mark.parametrize("seed", range(20))
def test_min_jumps_agrees_with_can_jump(seed):
    nums = _random_list(seed, 8, 0, 3)
    if can_jump(nums):
        jumps = min_jumps(nums)
        assert 0 <= jumps <= len(nums) - 1
    else:
        with pytest.raises(ValueError):
            min_jumps(nums)


def test_can_jump_cases():
    assert can_jump([2, 3, 1, 1, 4])
    assert not can_jump([3, 2, 1, 0, 4])
    assert can_jump([1, 1, 0])
    assert can_jump([0])


def test_cookies_none_to_give():
    assert find_content_children([1, 2, 3], []) == 0


def test_cookies_worked_example():
    assert find_content_children([1, 2, 3], [1, 1]) == 1


def test_cookies_all_satisfied():
    greed = [1, 2, 3]
    sizes = [5, 5, 5, 5]
    assert find_content_children(greed, sizes) == len(greed)


@pytest.mark.parametrize("seed", range(6))
def test_cookies_order_does_not_matter_and_inputs_kept(seed):
    greed = _random_list(seed, 7, 1, 6)
    sizes = _random_list(seed + 100, 5, 1, 6)
    greed_copy, sizes_copy = list(greed), list(sizes)
    result = find_content_children(greed, sizes)
    assert result == find_content_children(greed[::-1], sorted(sizes, reverse=True))
    assert result <= min(len(greed), len(sizes))
    assert greed == greed_copy
    assert sizes == sizes_copy


def _balanced(rng, pairs):
    out = []
    opened = closed = 0
    while closed < pairs:
        if opened < pairs and (opened == closed or rng.random() < 0.5):
            out.append("(")
            opened += 1
        else:
            out.append(")")
            closed += 1
    return "".join(out)


def test_valid_string_cases():
    assert check_valid_string("()")
    assert check_valid_string("(*)")
    assert check_valid_string("(*))")
    assert check_valid_string("*")
    assert not check_valid_string(")(")
    assert not check_valid_string("(((")


@pytest.mark.parametrize("seed", range(10))
def test_valid_string_balanced_and_stars(seed):
    rng = random.Random(seed)
    s = _balanced(rng, 5)
    assert check_valid_string(s)
    assert not check_valid_string(s + ")")
    chars = list(s)
    for index in rng.sample(range(len(chars)), 3):
        chars[index] = "*"
    assert check_valid_string("".join(chars))


def test_lemonade_cases():
    assert lemonade_change([5, 5, 5, 5])
    assert lemonade_change([5, 5, 5, 10, 20])
    assert not lemonade_change([10])
    assert not lemonade_change([5, 5, 10, 10, 20])