import random

import pytest

from algokit.trees import (
    TreeNode,
    bst_insert,
    build_tree,
    diameter,
    floor_in_bst,
    inorder,
    is_balanced,
    kth_smallest,
    path_sum,
    postorder,
    preorder,
    search_bst,
    tree_from_level_order,
    vertical_traversal,
)

BST_VALUES = [7, 10, 5, 3, 6, 8, 12]


def make_bst(values):
    root = None
    for value in values:
        root = bst_insert(root, value)
    return root


def test_inorder_of_bst_is_sorted():
    root = make_bst(BST_VALUES)
    assert list(inorder(root)) == sorted(BST_VALUES)


def test_inorder_keeps_duplicates():
    values = [4, 2, 4, 1, 2]
    assert list(inorder(make_bst(values))) == sorted(values)


def test_preorder_starts_and_postorder_ends_with_root():
    root = make_bst(BST_VALUES)
    pre = list(preorder(root))
    post = list(postorder(root))
    assert pre[0] == 7
    assert post[-1] == 7
    assert sorted(pre) == sorted(post) == sorted(BST_VALUES)


def test_traversals_of_hand_built_tree():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    assert list(inorder(root)) == [4, 2, 5, 1, 3]
    assert list(preorder(root)) == [1, 2, 4, 5, 3]
    assert list(postorder(root)) == [4, 5, 2, 3, 1]


def test_traversals_of_empty_tree():
    assert list(inorder(None)) == []
    assert list(preorder(None)) == []
    assert list(postorder(None)) == []


def test_floor_in_bst():
    root = make_bst(BST_VALUES)
    assert floor_in_bst(root, 9) == 8
    assert floor_in_bst(root, 6) == 6
    assert floor_in_bst(root, 100) == 12
    assert floor_in_bst(root, 2) is None


def test_kth_smallest_matches_sorted_order():
    rng = random.Random(3)
    values = rng.sample(range(1000), 40)
    root = make_bst(values)
    ordered = sorted(values)
    for k in range(1, len(values) + 1):
        assert kth_smallest(root, k) == ordered[k - 1]


@pytest.mark.parametrize("k", [0, 8])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(make_bst(BST_VALUES), k)


def test_search_bst():
    root = make_bst(BST_VALUES)
    found = search_bst(root, 6)
    assert found.val == 6
    assert search_bst(root, 11) is None


def test_diameter():
    root = tree_from_level_order([1, 2, 3, 4, 5])
    assert diameter(root) == 3
    assert diameter(None) == 0
    assert diameter(TreeNode(1)) == 0


def test_is_balanced():
    assert is_balanced(tree_from_level_order([3, 9, 20, None, None, 15, 7])) is True
    assert (
        is_balanced(tree_from_level_order([1, 2, 2, 3, 3, None, None, 4, 4])) is False
    )
    assert is_balanced(None) is True


def test_path_sum():
    root = tree_from_level_order(
        [5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1]
    )
    assert path_sum(root, 22) == [[5, 4, 11, 2], [5, 8, 4, 5]]
    assert path_sum(root, 1000) == []
    assert path_sum(None, 0) == []


def test_build_tree_round_trip():
    rng = random.Random(11)
    values = rng.sample(range(500), 60)
    root = make_bst(values)
    rebuilt = build_tree(list(inorder(root)), list(postorder(root)))
    assert list(preorder(rebuilt)) == list(preorder(root))
    assert list(inorder(rebuilt)) == list(inorder(root))


def test_build_tree_round_trip_non_search_tree():
    root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
    rebuilt = build_tree(list(inorder(root)), list(postorder(root)))
    assert list(preorder(rebuilt)) == list(preorder(root))


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_build_tree_rejects_mismatched_input():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])
    with pytest.raises(ValueError):
        build_tree([1, 2], [1, 3])
    with pytest.raises(ValueError):
        build_tree([1, 1], [1, 1])


def test_tree_from_level_order():
    root = tree_from_level_order([1, None, 2, 3])
    assert root.val == 1
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3
    assert tree_from_level_order([]) is None
    assert tree_from_level_order([None]) is None


def test_vertical_traversal():
    root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
    assert vertical_traversal(root) == [[9], [3, 15], [20], [7]]
    assert vertical_traversal(None) == []


def test_vertical_traversal_orders_same_position_by_value():
    root = tree_from_level_order([1, 2, 3, 4, 6, 5, 7])
    columns = vertical_traversal(root)
    assert columns[2] == [1, 5, 6]
    assert sorted(v for column in columns for v in column) == [1, 2, 3, 4, 5, 6, 7]