"""Binary tree nodes, binary-search-tree helpers and tree queries."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def bst_insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert value into a binary search tree and return its root.

    Values equal to a node go into that node's left subtree.
    """
    new_node = TreeNode(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value <= node.val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def inorder(root: TreeNode | None) -> Iterator[int]:
    """Yield values left subtree first, then the node, then the right subtree."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def preorder(root: TreeNode | None) -> Iterator[int]:
    """Yield each node's value before those of its subtrees."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.val
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _postorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[tuple[TreeNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def postorder(root: TreeNode | None) -> Iterator[int]:
    """Yield each node's value after those of its subtrees."""
    for node in _postorder_nodes(root):
        yield node.val


def floor_in_bst(root: TreeNode | None, key: int) -> int | None:
    """Largest value in the search tree not above key, or None if there is none."""
    best = None
    node = root
    while node is not None:
        if node.val == key:
            return node.val
        if node.val > key:
            node = node.left
        else:
            best = node.val
            node = node.right
    return best


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """The k-th smallest value (counting from 1) of a binary search tree."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    missing = object()
    value = next(islice(inorder(root), k - 1, None), missing)
    if value is missing:
        raise ValueError(f"tree has fewer than {k} nodes")
    return value


def search_bst(root: TreeNode | None, value: int) -> TreeNode | None:
    """The node holding value in a binary search tree, or None."""
    node = root
    while node is not None and node.val != value:
        node = node.left if value < node.val else node.right
    return node


def _height(heights: dict[TreeNode, int], node: TreeNode | None) -> int:
    return 0 if node is None else heights[node]


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    heights: dict[TreeNode, int] = {}
    best = 0
    for node in _postorder_nodes(root):
        left = _height(heights, node.left)
        right = _height(heights, node.right)
        best = max(best, left + right)
        heights[node] = max(left, right) + 1
    return best


def is_balanced(root: TreeNode | None) -> bool:
    """True when every node's subtree heights differ by at most one."""
    heights: dict[TreeNode, int] = {}
    for node in _postorder_nodes(root):
        left = _height(heights, node.left)
        right = _height(heights, node.right)
        if abs(left - right) > 1:
            return False
        heights[node] = max(left, right) + 1
    return True


def path_sum(root: TreeNode | None, target: int) -> list[list[int]]:
    """All root-to-leaf paths whose values add up to target, left paths first."""
    paths: list[list[int]] = []
    if root is None:
        return paths
    stack = [(root, [root.val], target - root.val)]
    while stack:
        node, path, remaining = stack.pop()
        if node.left is None and node.right is None:
            if remaining == 0:
                paths.append(path)
            continue
        if node.right is not None:
            stack.append((node.right, path + [node.right.val], remaining - node.right.val))
        if node.left is not None:
            stack.append((node.left, path + [node.left.val], remaining - node.left.val))
    return paths


def build_tree(
    inorder_values: Iterable[int], postorder_values: Iterable[int]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its inorder and postorder sequences."""
    in_seq = list(inorder_values)
    post_seq = list(postorder_values)
    if len(in_seq) != len(post_seq):
        raise ValueError("inorder and postorder sequences differ in length")
    positions = {value: index for index, value in enumerate(in_seq)}
    if len(positions) != len(in_seq):
        raise ValueError("tree values must be distinct")

    root = None
    for value in reversed(post_seq):
        if value not in positions:
            raise ValueError(f"value {value!r} is missing from the inorder sequence")
        position = positions[value]
        new_node = TreeNode(value)
        if root is None:
            root = new_node
            continue
        node = root
        while True:
            if positions[node.val] > position:
                if node.left is None:
                    node.left = new_node
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    break
                node = node.right
    return root


def tree_from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from values in level order, None marking an absent child."""
    items = iter(values)
    root_value = next(items, None)
    if root_value is None:
        return None
    root = TreeNode(root_value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def vertical_traversal(root: TreeNode | None) -> list[list[int]]:
    """Values column by column from left to right.

    Within a column values are ordered by depth, and equal depths by value.
    """
    if root is None:
        return []
    columns: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    pending = deque([(root, 0, 0)])
    while pending:
        node, x, y = pending.popleft()
        columns[x].append((y, node.val))
        if node.left is not None:
            pending.append((node.left, x - 1, y + 1))
        if node.right is not None:
            pending.append((node.right, x + 1, y + 1))
    return [[value for _, value in sorted(columns[x])] for x in sorted(columns)]