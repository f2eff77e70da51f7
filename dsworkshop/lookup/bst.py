"""Binary search tree in which larger values go to the left child."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["TreeNode", "insert", "build_tree", "balance", "search", "depth_stats", "render"]

TAB = 10


@dataclass
class TreeNode:
    value: int
    left: "TreeNode | None" = None
    right: "TreeNode | None" = None


def insert(node: TreeNode | None, value: int) -> TreeNode:
    """Insert ``value`` below ``node`` and return the root; duplicates are ignored."""
    if node is None:
        return TreeNode(value)
    current = node
    while True:
        if value > current.value:
            if current.left is None:
                current.left = TreeNode(value)
                break
            current = current.left
        elif value < current.value:
            if current.right is None:
                current.right = TreeNode(value)
                break
            current = current.right
        else:
            break
    return node


def build_tree(values: Iterable[int]) -> TreeNode | None:
    """Build a tree by inserting ``values`` in order."""
    root: TreeNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def _walk(root: TreeNode | None) -> Iterator[tuple[TreeNode, int]]:
    """Yield (node, depth) in ascending order of value (right subtree first)."""
    stack: list[tuple[TreeNode, int]] = []
    node, depth = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.right, depth + 1
        node, depth = stack.pop()
        yield node, depth
        node, depth = node.left, depth + 1


def _build(values: list[int], start: int, end: int) -> TreeNode | None:
    if start > end:
        return None
    mid = (start + end) // 2
    node = TreeNode(values[mid])
    node.right = _build(values, start, mid - 1)
    node.left = _build(values, mid + 1, end)
    return node


def balance(root: TreeNode | None) -> TreeNode | None:
    """Return a balanced tree holding the same values as ``root``."""
    values = [node.value for node, _ in _walk(root)]
    return _build(values, 0, len(values) - 1)


def search(root: TreeNode | None, value: int) -> int:
    """Return the number of comparisons that found ``value``, or 0 if absent."""
    comparisons = 0
    node = root
    while node is not None:
        comparisons += 1
        if node.value == value:
            return comparisons
        node = node.right if node.value > value else node.left
    return 0


def depth_stats(root: TreeNode | None) -> tuple[int, int]:
    """Return (number of nodes, sum of node depths), the root having depth 0."""
    vertices = 0
    total_depth = 0
    for _, depth in _walk(root):
        vertices += 1
        total_depth += depth
    return vertices, total_depth


def render(root: TreeNode | None) -> str:
    """Draw the tree sideways, indenting each level by TAB spaces."""
    return "".join(f"\n{' ' * (TAB * depth)}{node.value}\n" for node, depth in _walk(root))