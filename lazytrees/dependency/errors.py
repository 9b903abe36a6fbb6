"""Errors raised by the lazy search tree."""


class LazyTreeError(Exception):
    """Base class for every error the lazy search tree raises."""


class NotFoundError(LazyTreeError, KeyError):
    """The requested element is absent, or present only as a deleted node."""


class EmptyTreeError(LazyTreeError, ValueError):
    """The tree has no root, hence there is nothing to search."""
