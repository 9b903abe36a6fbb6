"""Defines the node used by the lazy search tree; deleted nodes stay in place until garbage collection."""
from __future__ import annotations

from typing import Any, Optional


class LazyTreeNode:
    def __init__(self, data: Any, left_node: Optional[LazyTreeNode] = None, right_node: Optional[LazyTreeNode] = None):
        """
        Given some data, create a new lazy tree node.

        Comparing to the standard tree node, we add one field:
            - Deleted, which marks the node as logically removed while it still holds its place in the tree.
        :param data: The element stored in this node; must be comparable with every other element in the tree.
        :param left_node: The left child of this node.
        :param right_node: The right child of this node.
        """
        self.data: Any = data
        self.deleted: bool = False
        self.left_node: Optional[LazyTreeNode] = left_node
        self.right_node: Optional[LazyTreeNode] = right_node

    def __repr__(self) -> str:
        return f"LazyTreeNode(data={self.data!r}, deleted={self.deleted})"

    @property
    def num_children(self) -> int:
        """Get the number of children this node has."""
        return (self.left_node is not None) + (self.right_node is not None)
