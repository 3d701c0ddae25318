"""Depth-first traversals that call a function on each node's value."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from bintree.node import Node


def _preorder_nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _inorder_nodes(tree: Node | None) -> Iterator[Node]:
    stack: list[Node] = []
    current = tree
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node
        current = node.right


def _postorder_nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    reversed_order: list[Node] = []
    while stack:
        node = stack.pop()
        reversed_order.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_order)


def preorder(tree: Node | None, func: Callable[[int], object] | None) -> None:
    """Call ``func`` on each value: node, then left subtree, then right."""
    if tree is None or func is None:
        return
    for node in _preorder_nodes(tree):
        func(node.n)


def inorder(tree: Node | None, func: Callable[[int], object] | None) -> None:
    """Call ``func`` on each value: left subtree, then node, then right."""
    if tree is None or func is None:
        return
    for node in _inorder_nodes(tree):
        func(node.n)


def postorder(tree: Node | None, func: Callable[[int], object] | None) -> None:
    """Call ``func`` on each value: left subtree, then right, then node."""
    if tree is None or func is None:
        return
    for node in _postorder_nodes(tree):
        func(node.n)