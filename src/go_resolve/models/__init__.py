"""Data models for go-resolve."""

from go_resolve.models.configuration import Configuration
from go_resolve.models.dependency import (
    DependencyCategory,
    DependencyDescriptor,
    DependencySet,
)
from go_resolve.models.package import (
    LocalDirectoryDependency,
    Package,
    RecognizedPackage,
    UnrecognizedPackage,
    VcsType,
)
from go_resolve.models.tree import DependencyTreeNode

__all__ = [
    "Configuration",
    "DependencyCategory",
    "DependencyDescriptor",
    "DependencySet",
    "DependencyTreeNode",
    "LocalDirectoryDependency",
    "Package",
    "RecognizedPackage",
    "UnrecognizedPackage",
    "VcsType",
]
