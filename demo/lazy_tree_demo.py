"""
Lazy Search Tree Example

This script walks through soft removal, resurrection, hard removal and garbage collection on a small tree,
printing the tree after each step.
"""
import logging

from lazytrees import LazySearchTree, PrintObject


def show(tree: LazySearchTree, title: str) -> None:
    """Print both traversals and the drawing of the tree."""
    print(f"\n--- {title} ---")
    print("soft: ", end="")
    tree.traverse_soft(PrintObject())
    print("\nhard: ", end="")
    tree.traverse_hard(PrintObject())
    print()
    tree.display()


def main():
    # Show the debug messages of garbage collection.
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    tree = LazySearchTree(name="demo")
    for x in [50, 30, 80, 10, 40, 90, 70, 60]:
        tree.insert(x)
    show(tree=tree, title="After inserting")

    # Soft remove a few elements.
    for x in [30, 70, 90]:
        tree.remove(x)
    show(tree=tree, title="After removing 30, 70 and 90")
    print(f"min: {tree.find_min()}, max: {tree.find_max()}, hard max: {tree.find_max_hard()}")

    # Bring one element back; no new node is created.
    tree.insert(90)
    show(tree=tree, title="After inserting 90 again")

    # Physically remove the root.
    tree.hard_remove(50)
    show(tree=tree, title="After hard removing 50")

    # Drop every remaining deleted node.
    print(f"\ncollected: {tree.collect_garbage()}")
    show(tree=tree, title="After collecting garbage")


if __name__ == "__main__":
    main()
