from lazytrees.tree.lazy_search_tree import LazySearchTree
from lazytrees.tree.tree_printer import TreePrinter
