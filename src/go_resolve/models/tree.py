"""Dependency tree model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from go_resolve.models.dependency import DependencyDescriptor
from go_resolve.models.package import (
    LocalDirectoryDependency,
    TreePackage,
    UnrecognizedPackage,
    package_from_dict,
)


@dataclass(frozen=True)
class DependencyTreeNode:
    """One resolved package and the nodes for its own dependencies.

    Nodes are immutable once built. The same package may appear under
    several parents; each occurrence is its own node.

    Attributes:
        name: Import path this node was declared as
        package: Package the path resolved to
        descriptor: Declaration that produced the node (None for the root)
        children: Child nodes in declaration order
        truncated: Leaf emitted because its root is already an ancestor
    """

    name: str
    package: TreePackage
    descriptor: DependencyDescriptor | None = None
    children: tuple[DependencyTreeNode, ...] = field(default_factory=tuple)
    truncated: bool = False

    @property
    def unresolved(self) -> bool:
        """Whether the package could not be classified."""
        return isinstance(self.package, UnrecognizedPackage)

    @property
    def is_root(self) -> bool:
        return isinstance(self.package, LocalDirectoryDependency)

    @property
    def root_path(self) -> str:
        """Package root of this node, or the bare path when unresolved."""
        if isinstance(self.package, UnrecognizedPackage):
            return self.package.path
        return self.package.root_path

    def walk(self) -> Iterator[tuple[int, DependencyTreeNode]]:
        """Yield ``(depth, node)`` pairs in depth-first pre-order."""
        stack: list[tuple[int, DependencyTreeNode]] = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, child) for child in reversed(node.children))

    def find(self, path: str) -> list[DependencyTreeNode]:
        """All nodes declared as ``path``, in depth-first order."""
        return [node for _, node in self.walk() if node.name == path]

    def depth(self) -> int:
        """Length of the longest root-to-leaf path, counting edges."""
        return max(depth for depth, _ in self.walk())

    def flatten(self) -> list[str]:
        """Distinct resolved root paths below this node, in first-seen order."""
        seen: dict[str, None] = {}
        for _, node in self.walk():
            if node is not self:
                seen.setdefault(node.root_path, None)
        return list(seen)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DependencyTreeNode:
        descriptor_data = data.get("descriptor")
        return cls(
            name=data["name"],
            package=package_from_dict(data["package"]),
            descriptor=DependencyDescriptor.from_dict(descriptor_data) if descriptor_data else None,
            children=tuple(cls.from_dict(child) for child in data.get("children", [])),
            truncated=data.get("truncated", False),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "package": self.package.to_dict(),
        }
        if self.descriptor is not None:
            result["descriptor"] = self.descriptor.to_dict()
        if self.truncated:
            result["truncated"] = True
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result
