# bintree

A small library of linked binary tree nodes. Each `Node` holds an integer
(`n`) and links to its `parent`, `left` and `right` nodes. Functions build and
rearrange trees, walk them in the three depth-first orders, and measure their
shape.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import create_node, insert_left, insert_right

root = create_node(None, 98)
insert_left(root, 12)
insert_right(root, 402)
insert_right(root.left, 54)
insert_right(root, 128)   # 128 takes the old right child (402) as its own right child
```

- `create_node(parent, value)` makes a node whose `parent` link points at
  `parent`, but does not link it as one of the parent's children. A value of
  `0` raises `ValueError`.
- `insert_left(parent, value)` links a new node as the left child of
  `parent`; an existing left child becomes the new node's left child. A
  `None` parent raises `ValueError`.
- `insert_right(parent, value)` does the same on the right side. A `None`
  parent or a value of `0` raises `ValueError`.
- `delete(tree)` takes the subtree rooted at `tree` apart: it unlinks it from
  its parent and clears every `parent`, `left` and `right` link inside it.
  `None` is accepted and does nothing.

## Questions about a node

From `bintree.node`:

- `is_leaf(node)`: `True` if the node exists and has no children
- `is_root(node)`: `True` if the node exists and has no parent
- `sibling(node)`: the other child of the node's parent, or `None`
- `uncle(node)`: the sibling of the node's parent, or `None`

## Traversal

From `bintree.traversal`, each function calls `func` with every node's value
in its order:

- `preorder(tree, func)`: node, left subtree, right subtree
- `inorder(tree, func)`: left subtree, node, right subtree
- `postorder(tree, func)`: left subtree, right subtree, node

```python
from bintree.traversal import inorder

values = []
inorder(root, values.append)
```

If `tree` or `func` is `None`, nothing is called.

## Metrics

From `bintree.metrics`:

- `height(tree)`: edges on the longest path down to a leaf
- `depth(tree)`: edges from the node up to its root
- `size(tree)`: number of nodes
- `leaves(tree)`: number of nodes with no children
- `internal_nodes(tree)`: number of nodes with at least one child
- `balance(tree)`: height of the left subtree minus that of the right
- `is_full(tree)`: every node has either zero or two children
- `is_perfect(tree)`: the node count equals `2 ** (height + 1) - 1`

Each of these takes `None` as an empty tree and gives `0` or `False`.

## What it does not do

The package is a library only: it has no command-line tool, and it has no
function for drawing or printing a tree.