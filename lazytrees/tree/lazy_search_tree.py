"""
Defines the lazy search tree, a binary search tree where removal only marks nodes as deleted.

Deleted nodes keep their place in the tree until either hard_remove or collect_garbage splices them out. The tree
keeps two counters: the soft size counts the elements that are logically present and the hard size counts every node
that is physically present. No balancing is performed, so all descents are written as loops to stay safe on trees
that degrade into a list.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, List, Optional, Tuple

from lazytrees.dependency import EmptyTreeError, LazyTreeNode, NotFoundError
from lazytrees.tree.tree_printer import TreePrinter

logger = logging.getLogger(__name__)

# A visitor is anything that can be called with one element, e.g. a Traverser.
VISITOR = Callable[[Any], None]


class LazySearchTree:
    def __init__(self, name: Optional[str] = None):
        """
        Initialize an empty lazy search tree.

        :param name: An optional label used when displaying the tree.
        """
        self.__name: Optional[str] = name
        self.__root: Optional[LazyTreeNode] = None
        self.__size: int = 0
        self.__size_hard: int = 0

    def __repr__(self) -> str:
        return f"LazySearchTree(name={self.__name!r}, size={self.__size}, size_hard={self.__size_hard})"

    def __len__(self) -> int:
        return self.__size

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.__in_order(self.__root) if not node.deleted)

    @property
    def name(self) -> Optional[str]:
        """Get the label of this tree."""
        return self.__name

    @property
    def root(self) -> Optional[LazyTreeNode]:
        """Get the root node; callers should treat it as read-only."""
        return self.__root

    @property
    def size(self) -> int:
        """Get the number of elements that are not deleted."""
        return self.__size

    @property
    def size_hard(self) -> int:
        """Get the number of nodes physically present, deleted or not."""
        return self.__size_hard

    def empty(self) -> bool:
        """Check whether the tree holds no node at all."""
        return self.__size_hard == 0 and self.__size == 0

    def clear(self) -> None:
        """Drop every node and reset both counters."""
        logger.debug("Clearing tree %s with %d nodes.", self.__name, self.__size_hard)
        self.__root = None
        self.__size = 0
        self.__size_hard = 0

    @staticmethod
    def __in_order(root: Optional[LazyTreeNode], reverse: bool = False) -> Iterator[LazyTreeNode]:
        """
        Walk the subtree in order, using a stack rather than recursion.

        :param root: The root of the subtree to walk.
        :param reverse: Walk from the largest element to the smallest when set.
        :return: An iterator over every node in the subtree, deleted ones included.
        """
        stack = []
        node = root

        while stack or node:
            # Go as far as possible towards the first side.
            while node:
                stack.append(node)
                node = node.right_node if reverse else node.left_node

            # Yield the node and move to the other side.
            node = stack.pop()
            yield node
            node = node.left_node if reverse else node.right_node

    @staticmethod
    def __post_order(root: Optional[LazyTreeNode]) -> Iterator[LazyTreeNode]:
        """Walk the subtree in post order (left, right, then self), using a stack rather than recursion."""
        if root is None:
            return

        stack = [root]
        result = []

        # Collect in (self, right, left) order; reversing it gives post order.
        while stack:
            node = stack.pop()
            result.append(node)
            if node.left_node:
                stack.append(node.left_node)
            if node.right_node:
                stack.append(node.right_node)

        yield from reversed(result)

    def __find_node(self, x: Any) -> Tuple[Optional[LazyTreeNode], Optional[LazyTreeNode]]:
        """
        Descend by comparison to the node holding x, ignoring the deleted flag.

        :param x: The element to search for.
        :return: The found node (or None) and its parent (None when the node is the root).
        """
        parent = None
        node = self.__root

        while node:
            if x < node.data:
                parent, node = node, node.left_node
            elif x > node.data:
                parent, node = node, node.right_node
            else:
                return node, parent

        return None, parent

    @staticmethod
    def __find_min_soft(root: Optional[LazyTreeNode]) -> Optional[LazyTreeNode]:
        """Get the smallest node of the subtree that is not deleted."""
        return next((node for node in LazySearchTree.__in_order(root) if not node.deleted), None)

    @staticmethod
    def __find_max_soft(root: Optional[LazyTreeNode]) -> Optional[LazyTreeNode]:
        """Get the largest node of the subtree that is not deleted."""
        return next((node for node in LazySearchTree.__in_order(root, reverse=True) if not node.deleted), None)

    @staticmethod
    def __find_min_hard(root: LazyTreeNode) -> Tuple[LazyTreeNode, Optional[LazyTreeNode]]:
        """Get the leftmost node of a non-empty subtree and its parent within that subtree."""
        parent = None
        while root.left_node:
            parent, root = root, root.left_node
        return root, parent

    @staticmethod
    def __find_max_hard(root: LazyTreeNode) -> LazyTreeNode:
        """Get the rightmost node of a non-empty subtree."""
        while root.right_node:
            root = root.right_node
        return root

    def __splice(self, node: LazyTreeNode, parent: Optional[LazyTreeNode]) -> None:
        """
        Physically unlink a node that has at most one child.

        :param node: The node to unlink; its only child (or None) takes its place.
        :param parent: The parent of the node; None means the node is the root.
        """
        child = node.left_node if node.left_node else node.right_node

        if parent is None:
            self.__root = child
        elif parent.left_node is node:
            parent.left_node = child
        else:
            parent.right_node = child

        self.__size_hard -= 1

    def insert(self, x: Any) -> bool:
        """
        Insert an element; a deleted node holding the same element is brought back instead.

        :param x: The element to insert.
        :return: False if x is already present and not deleted, True otherwise.
        """
        if self.__root is None:
            self.__root = LazyTreeNode(data=x)
            self.__size += 1
            self.__size_hard += 1
            return True

        node = self.__root

        # Deleted nodes still decide which way to go.
        while True:
            if x < node.data:
                if node.left_node is None:
                    node.left_node = LazyTreeNode(data=x)
                    break
                node = node.left_node
            elif x > node.data:
                if node.right_node is None:
                    node.right_node = LazyTreeNode(data=x)
                    break
                node = node.right_node
            elif node.deleted:
                # Resurrect the node in place.
                node.deleted = False
                self.__size += 1
                return True
            else:
                return False

        self.__size += 1
        self.__size_hard += 1
        return True

    def remove(self, x: Any) -> bool:
        """
        Mark the node holding x as deleted; the shape of the tree is unchanged.

        :param x: The element to remove.
        :return: True if x was present and not yet deleted.
        """
        node, _ = self.__find_node(x)

        if node is None or node.deleted:
            return False

        node.deleted = True
        self.__size -= 1
        return True

    def hard_remove(self, x: Any) -> bool:
        """
        Physically remove the node holding x, whether it is deleted or not.

        When the node has two children, it takes over the data of the smallest undeleted node in its right subtree.
        Deleted nodes smaller than that successor are spliced out first so the successor key still bounds the right
        subtree from below. If the right subtree has no undeleted node, its leftmost node is used instead.
        :param x: The element to remove.
        :return: True if a node holding x was found and removed.
        """
        node, parent = self.__find_node(x)

        if node is None:
            return False

        # Only an undeleted element counts towards the soft size.
        if not node.deleted:
            self.__size -= 1

        if node.num_children == 2:
            successor = self.__find_min_soft(node.right_node)

            if successor is None:
                successor, _ = self.__find_min_hard(node.right_node)
            else:
                # Drop the deleted nodes that precede the successor; each is the leftmost node when removed.
                leftmost, leftmost_parent = self.__find_min_hard(node.right_node)
                while leftmost is not successor:
                    self.__splice(node=leftmost, parent=leftmost_parent or node)
                    leftmost, leftmost_parent = self.__find_min_hard(node.right_node)

            # Copy the successor into the node, then unlink the successor, which now is the leftmost of the right.
            node.data = successor.data
            node.deleted = successor.deleted
            successor, successor_parent = self.__find_min_hard(node.right_node)
            node, parent = successor, successor_parent or node

        self.__splice(node=node, parent=parent)
        logger.debug("Hard removed %r from tree %s.", x, self.__name)
        return True

    def find(self, x: Any) -> Any:
        """
        Find the element equal to x among the undeleted nodes.

        :param x: The element to search for.
        :return: The element stored in the tree.
        """
        node, _ = self.__find_node(x)

        if node is None or node.deleted:
            raise NotFoundError(f"Element {x!r} not found.")

        return node.data

    def contains(self, x: Any) -> bool:
        """Check whether x is present and not deleted."""
        node, _ = self.__find_node(x)
        return node is not None and not node.deleted

    def hard_find(self, x: Any) -> Any:
        """Find the element equal to x, deleted or not."""
        node, _ = self.__find_node(x)

        if node is None:
            raise NotFoundError(f"Element {x!r} not found.")

        return node.data

    def hard_contains(self, x: Any) -> bool:
        """Check whether a node holding x is physically present."""
        return self.__find_node(x)[0] is not None

    def find_min(self) -> Any:
        """Get the smallest element that is not deleted."""
        if self.__root is None:
            raise EmptyTreeError("Cannot search in an empty tree.")

        node = self.__find_min_soft(self.__root)
        if node is None:
            raise NotFoundError("Every element in the tree is deleted.")

        return node.data

    def find_max(self) -> Any:
        """Get the largest element that is not deleted."""
        if self.__root is None:
            raise EmptyTreeError("Cannot search in an empty tree.")

        node = self.__find_max_soft(self.__root)
        if node is None:
            raise NotFoundError("Every element in the tree is deleted.")

        return node.data

    def find_min_hard(self) -> Any:
        """Get the smallest element physically present, deleted or not."""
        if self.__root is None:
            raise EmptyTreeError("Cannot search in an empty tree.")

        return self.__find_min_hard(self.__root)[0].data

    def find_max_hard(self) -> Any:
        """Get the largest element physically present, deleted or not."""
        if self.__root is None:
            raise EmptyTreeError("Cannot search in an empty tree.")

        return self.__find_max_hard(self.__root).data

    def traverse_soft(self, func: VISITOR) -> None:
        """
        Visit every undeleted element in ascending order.

        :param func: A visitor, e.g. a Traverser; it must not mutate this tree.
        """
        for node in self.__in_order(self.__root):
            if not node.deleted:
                func(node.data)

    def traverse_hard(self, func: VISITOR) -> None:
        """
        Visit every element in ascending order, including the deleted ones.

        :param func: A visitor, e.g. a Traverser; it must not mutate this tree.
        """
        for node in self.__in_order(self.__root):
            func(node.data)

    def collect_garbage(self) -> bool:
        """
        Physically remove every deleted node.

        The deleted elements are gathered first and removed afterwards, so no removal happens while walking the tree.
        :return: True if no deleted node remains, i.e. the soft and hard sizes agree.
        """
        garbage: List[Any] = [node.data for node in self.__post_order(self.__root) if node.deleted]
        logger.debug("Collecting %d deleted nodes from tree %s.", len(garbage), self.__name)

        # A key may already be gone if an earlier removal spliced it out while finding an undeleted successor.
        for x in garbage:
            self.hard_remove(x)

        logger.debug("Tree %s now has size %d and hard size %d.", self.__name, self.__size, self.__size_hard)
        return self.__size == self.__size_hard

    def copy(self) -> LazySearchTree:
        """Create an independent tree with the same shape, deleted flags and counters; elements are shared."""
        clone = LazySearchTree(name=self.__name)
        clone.__size = self.__size
        clone.__size_hard = self.__size_hard

        if self.__root is None:
            return clone

        clone.__root = LazyTreeNode(data=self.__root.data)
        stack = [(self.__root, clone.__root)]

        # Copy the node graph level by level.
        while stack:
            source, target = stack.pop()
            target.deleted = source.deleted
            if source.left_node:
                target.left_node = LazyTreeNode(data=source.left_node.data)
                stack.append((source.left_node, target.left_node))
            if source.right_node:
                target.right_node = LazyTreeNode(data=source.right_node.data)
                stack.append((source.right_node, target.right_node))

        return clone

    def display(self) -> None:
        """Print the sizes and the shape of the tree."""
        TreePrinter.print_tree(tree=self)
