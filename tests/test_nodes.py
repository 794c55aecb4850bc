import pytest

from algonotes.nodes import (
    ListNode,
    TreeNode,
    build_linked_list,
    build_tree,
    tree_to_list,
)


@pytest.mark.parametrize(
    "values",
    [
        [1],
        [3, 9, 20, None, None, 15, 7],
        [1, None, 2, 3],
        [1, 2, 3, 4, 5, 6, 7],
        [5, 4, None, 3, None, 2],
    ],
)
def test_tree_round_trip(values):
    assert tree_to_list(build_tree(values)) == values


def test_empty_tree():
    assert build_tree([]) is None
    assert build_tree([None]) is None
    assert tree_to_list(None) == []


def test_build_tree_structure():
    root = build_tree([1, None, 2, 3])
    assert root.val == 1
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3
    assert root.right.right is None


def test_tree_to_list_strips_trailing_missing():
    root = TreeNode(1, TreeNode(2), None)
    assert tree_to_list(root) == [1, 2]


def test_tree_nodes_compare_by_identity():
    first = TreeNode(1)
    second = TreeNode(1)
    assert (first == second) is False
    assert (first == first) is True
    assert first.val == 1
    assert second.val == 1


@pytest.mark.parametrize("values", [[1], [1, 2, 2, 1], [7, 8, 9, 10, 11]])
def test_linked_list_round_trip(values):
    head = build_linked_list(values)
    assert list(head) == values


def test_linked_list_empty():
    assert build_linked_list([]) is None


def test_linked_list_iterates_from_node():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert list(head.next) == [2, 3]