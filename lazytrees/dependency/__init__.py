from lazytrees.dependency.errors import EmptyTreeError, LazyTreeError, NotFoundError
from lazytrees.dependency.lazy_tree_node import LazyTreeNode
from lazytrees.dependency.traverser import CollectObject, PrintObject, Traverser
