"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.node import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _levels(tree: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for no tree."""
    levels = 0
    frontier = [tree] if tree is not None else []
    while frontier:
        levels += 1
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path; 0 for None."""
    return max(_levels(tree) - 1, 0)


def depth(tree: Node | None) -> int:
    """Return the number of edges from ``tree`` up to its root; 0 for None."""
    count = 0
    node = tree.parent if tree is not None else None
    while node is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.left is None and node.right is None)


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(
        1 for node in _nodes(tree) if node.left is not None or node.right is not None
    )


def balance(tree: Node | None) -> int:
    """Return the height of the left subtree minus that of the right one."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Node | None) -> bool:
    """Return True if every level of the tree is completely filled."""
    if tree is None:
        return False
    return size(tree) == 2 ** (height(tree) + 1) - 1