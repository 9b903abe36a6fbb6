"""Render a lazy search tree as text, drawn sideways with the right subtree on top."""
from typing import List


class TreePrinter:
    """A wrapper for the display helpers; they only read data, deleted flags and child links."""

    # Number of spaces each level is indented by.
    INDENT = 4
    # Suffix marking a node that is deleted but still present.
    DELETED_MARK = "*"

    @staticmethod
    def render(tree) -> str:
        """
        Render the sizes of the tree followed by one line per node.

        :param tree: A LazySearchTree (or anything exposing size, size_hard and root).
        :return: The rendered text, without a trailing newline.
        """
        lines: List[str] = [f"Size: {tree.size} HardSize: {tree.size_hard}"]

        # The stack holds (node, depth); right children are drawn above their parent.
        stack = []
        node, depth = tree.root, 0

        while stack or node:
            while node:
                stack.append((node, depth))
                node, depth = node.right_node, depth + 1

            node, depth = stack.pop()
            mark = TreePrinter.DELETED_MARK if node.deleted else ""
            lines.append(f"{' ' * TreePrinter.INDENT * depth}{node.data}{mark}")
            node, depth = node.left_node, depth + 1

        return "\n".join(lines)

    @staticmethod
    def print_tree(tree) -> None:
        """Print the rendering of the tree."""
        print(TreePrinter.render(tree=tree))
