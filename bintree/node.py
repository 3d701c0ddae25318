"""Binary tree nodes and operations on their links."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer and links to its relatives."""

    n: int
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)


def create_node(parent: Node | None, value: int) -> Node:
    """Create a detached node whose parent link points at ``parent``.

    The parent's own child links are left untouched. A value of zero is
    rejected.
    """
    if value == 0:
        raise ValueError("node value must be non-zero")
    return Node(value, parent)


def insert_left(parent: Node | None, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("parent node is required")
    new_node = Node(value, parent, left=parent.left)
    if parent.left is not None:
        parent.left.parent = new_node
    parent.left = new_node
    return new_node


def insert_right(parent: Node | None, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    A value of zero is rejected.
    """
    if parent is None:
        raise ValueError("parent node is required")
    if value == 0:
        raise ValueError("node value must be non-zero")
    new_node = Node(value, parent, right=parent.right)
    if parent.right is not None:
        parent.right.parent = new_node
    parent.right = new_node
    return new_node


def delete(tree: Node | None) -> None:
    """Take apart the whole subtree rooted at ``tree``, dropping every link."""
    if tree is None:
        return
    owner = tree.parent
    if owner is not None:
        if owner.left is tree:
            owner.left = None
        if owner.right is tree:
            owner.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Node | None) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def sibling(node: Node | None) -> Node | None:
    """Return the other child of ``node``'s parent, or None if there is none."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is not None and parent.left is not node:
        return parent.left
    if parent.right is not None and parent.right is not node:
        return parent.right
    return None


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of ``node``'s parent, or None if there is none."""
    if node is None:
        return None
    return sibling(node.parent)