"""Linked binary tree nodes with insertion, traversal and shape metrics."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "metrics"]