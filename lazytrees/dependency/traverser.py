"""Visitors handed to the tree traversals; each one is called once per element in ascending order."""
from abc import ABC, abstractmethod
from typing import Any, List, Optional


class Traverser(ABC):
    """Abstract base class for traversal visitors."""

    @abstractmethod
    def visit(self, x: Any) -> None:
        """Visit one element of the tree; must not mutate the tree being walked."""
        pass

    def __call__(self, x: Any) -> None:
        self.visit(x)


class PrintObject(Traverser):
    """Print every visited element followed by a space, all on one line."""

    def visit(self, x: Any) -> None:
        print(f"{x} ", end="")


class CollectObject(Traverser):
    def __init__(self, result: Optional[List[Any]] = None):
        """
        Collect every visited element into a list.

        :param result: The list to append to; a new one is created if not provided.
        """
        self.result: List[Any] = [] if result is None else result

    def visit(self, x: Any) -> None:
        self.result.append(x)
