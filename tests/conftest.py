import pytest

from lazytrees import LazySearchTree


def _check_invariants(tree: LazySearchTree) -> None:
    """Walk every node and check the ordering and both size counters against the real node counts."""
    num_nodes, num_soft = 0, 0
    # Each entry holds a node with the open bounds its data must fall within.
    stack = [(tree.root, None, None)]

    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        assert low is None or node.data > low
        assert high is None or node.data < high
        num_nodes += 1
        num_soft += not node.deleted
        stack.append((node.left_node, low, node.data))
        stack.append((node.right_node, node.data, high))

    assert tree.size_hard == num_nodes
    assert tree.size == num_soft
    assert tree.size_hard >= tree.size


@pytest.fixture
def check_invariants():
    """Provide the invariant checker to tests that mutate a tree."""
    return _check_invariants


@pytest.fixture
def small_tree():
    """Provide the tree built from inserting 5, 3, 8, 1, 4."""
    tree = LazySearchTree(name="small")
    for x in [5, 3, 8, 1, 4]:
        tree.insert(x)
    return tree


@pytest.fixture
def full_tree():
    """Provide the tree built from inserting 5, 3, 8, 1, 4, 9, 7; every inner node has two children."""
    tree = LazySearchTree(name="full")
    for x in [5, 3, 8, 1, 4, 9, 7]:
        tree.insert(x)
    return tree
