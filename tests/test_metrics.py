import pytest

from bintree.metrics import (
    balance,
    depth,
    height,
    internal_nodes,
    is_full,
    is_perfect,
    leaves,
    size,
)
from bintree.node import create_node, insert_left, insert_right


def _perfect(levels):
    """Build a perfect tree with the given height; return root and all nodes."""
    counter = iter(range(1, 1 << 20))
    root = create_node(None, next(counter))
    nodes = [root]
    frontier = [root]
    for _ in range(levels):
        next_frontier = []
        for node in frontier:
            next_frontier.append(insert_left(node, next(counter)))
            next_frontier.append(insert_right(node, next(counter)))
        nodes.extend(next_frontier)
        frontier = next_frontier
    return root, nodes


def _chain(length, insert):
    root = create_node(None, 1)
    nodes = [root]
    for value in range(2, length + 1):
        nodes.append(insert(nodes[-1], value))
    return root, nodes


@pytest.mark.parametrize("func", [height, depth, size, leaves, internal_nodes, balance])
def test_counts_of_none_are_zero(func):
    assert func(None) == 0


@pytest.mark.parametrize("func", [is_full, is_perfect])
def test_predicates_of_none_are_false(func):
    assert func(None) is False


def test_single_node():
    node = create_node(None, 98)
    assert height(node) == 0
    assert depth(node) == 0
    assert size(node) == 1
    assert leaves(node) == 1
    assert internal_nodes(node) == 0
    assert balance(node) == 0
    assert is_full(node) is True
    assert is_perfect(node) is True


@pytest.mark.parametrize("length", [2, 3, 7, 50])
def test_left_chain(length):
    root, nodes = _chain(length, insert_left)
    assert height(root) == length - 1
    assert size(root) == length
    assert leaves(root) == 1
    assert internal_nodes(root) == length - 1
    assert balance(root) == length - 1
    assert depth(nodes[-1]) == length - 1
    assert is_full(root) is False
    assert is_perfect(root) is False


@pytest.mark.parametrize("length", [2, 5])
def test_right_chain_balance_is_negative(length):
    root, _ = _chain(length, insert_right)
    assert balance(root) == -(length - 1)


@pytest.mark.parametrize("levels", [1, 2, 3, 5])
def test_perfect_tree(levels):
    root, nodes = _perfect(levels)
    assert height(root) == levels
    assert size(root) == len(nodes)
    assert leaves(root) + internal_nodes(root) == size(root)
    assert leaves(root) == internal_nodes(root) + 1
    assert balance(root) == 0
    assert is_full(root) is True
    assert is_perfect(root) is True
    assert max(depth(node) for node in nodes) == levels


@pytest.mark.parametrize("levels", [1, 2, 3])
def test_depth_matches_path_to_root(levels):
    _, nodes = _perfect(levels)
    for node in nodes:
        steps = 0
        current = node
        while current.parent is not None:
            current = current.parent
            steps += 1
        assert depth(node) == steps


def test_full_but_not_perfect():
    root, nodes = _perfect(2)
    leaf = nodes[-1]
    insert_left(leaf, 900)
    insert_right(leaf, 901)
    assert is_full(root) is True
    assert is_perfect(root) is False
    assert height(root) == 3
    assert balance(root) == -1


def test_one_missing_child_breaks_fullness():
    root, nodes = _perfect(2)
    insert_left(nodes[-1], 900)
    assert is_full(root) is False
    assert is_perfect(root) is False


def test_subtree_measurements():
    root, nodes = _perfect(3)
    left = root.left
    assert size(left) * 2 + 1 == size(root)
    assert height(left) == height(root) - 1
    assert depth(left) == 1


def test_internal_and_leaves_partition_size():
    root = create_node(None, 98)
    left = insert_left(root, 12)
    insert_right(root, 402)
    insert_right(left, 54)
    insert_left(left, 10)
    insert_left(root.right, 45)
    assert leaves(root) + internal_nodes(root) == size(root)
    assert is_full(root) is False


def test_deep_chain_does_not_overflow():
    root, nodes = _chain(5000, insert_left)
    assert height(root) == len(nodes) - 1
    assert size(root) == len(nodes)
    assert depth(nodes[-1]) == len(nodes) - 1