import pytest

from algonotes.linked_lists import is_palindrome
from algonotes.nodes import build_linked_list


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, 1], True),
        ([1, 2], False),
        ([1], True),
        ([1, 2, 3, 2, 1], True),
        ([1, 2, 3, 1], False),
        ([4, 4], True),
        ([1, 1, 2], False),
    ],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(build_linked_list(values)) is expected


def test_empty_list_is_palindrome():
    assert is_palindrome(None) is True


@pytest.mark.parametrize("half", [[1], [1, 2], [3, 1, 4, 1, 5], [9, 8, 7, 6]])
def test_mirrored_lists_are_palindromes(half):
    assert is_palindrome(build_linked_list(half + half[::-1])) is True
    assert is_palindrome(build_linked_list(half + [0] + half[::-1])) is True


@pytest.mark.parametrize("values", [[1, 2, 3], [5, 6, 7, 8], [2, 1, 1, 1]])
def test_agrees_with_reversal(values):
    assert is_palindrome(build_linked_list(values)) == (values == values[::-1])


def test_list_is_not_modified():
    head = build_linked_list([1, 2, 3, 2, 1])
    is_palindrome(head)
    assert list(head) == [1, 2, 3, 2, 1]