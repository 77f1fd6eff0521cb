"""Dependency tree construction and rendering."""

from go_resolve.tree.factory import DependencyTreeFactory
from go_resolve.tree.render import to_rich_tree

__all__ = ["DependencyTreeFactory", "to_rich_tree"]
