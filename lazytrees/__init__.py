from lazytrees.dependency import (
    CollectObject,
    EmptyTreeError,
    LazyTreeError,
    LazyTreeNode,
    NotFoundError,
    PrintObject,
    Traverser,
)
from lazytrees.tree import LazySearchTree, TreePrinter
