"""Dependency declaration models."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from go_resolve.logging_config import get_logger

logger = get_logger(__name__)


class DependencyCategory(Enum):
    """Category a dependency is declared under."""

    BUILD = "build"
    TEST = "test"


@dataclass(frozen=True)
class DependencyDescriptor:
    """A declared dependency on an import path."""

    path: str
    """Import path (e.g., 'github.com/foo/bar')"""

    version: str | None = None
    """Tag or version constraint (e.g., 'v1.2.0')"""

    commit: str | None = None
    """Pinned revision; takes precedence over version"""

    url: str | None = None
    """Explicit fetch URL overriding the ones derived from the path"""

    category: DependencyCategory = DependencyCategory.BUILD
    """Declared category"""

    @property
    def revision(self) -> str | None:
        """Most specific revision information available."""
        return self.commit or self.version

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DependencyDescriptor:
        """Create a descriptor from a manifest or lock file entry."""
        return cls(
            path=data["name"],
            version=data.get("version"),
            commit=data.get("commit"),
            url=data.get("url"),
            category=DependencyCategory(data.get("category", DependencyCategory.BUILD.value)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting unset optional fields."""
        result: dict[str, Any] = {"name": self.path}
        if self.version is not None:
            result["version"] = self.version
        if self.commit is not None:
            result["commit"] = self.commit
        if self.url is not None:
            result["url"] = self.url
        result["category"] = self.category.value
        return result


@dataclass
class DependencySet:
    """Ordered collection of descriptors, unique by path.

    The first declaration of a path wins. A later declaration with a
    different revision is a conflict: it is dropped, logged as a warning and
    remembered in ``conflicts``.
    """

    _descriptors: dict[str, DependencyDescriptor] = field(default_factory=dict)
    conflicts: list[tuple[DependencyDescriptor, DependencyDescriptor]] = field(
        default_factory=list
    )

    @classmethod
    def of(cls, descriptors: Iterable[DependencyDescriptor]) -> DependencySet:
        dependency_set = cls()
        dependency_set.extend(descriptors)
        return dependency_set

    def add(self, descriptor: DependencyDescriptor) -> bool:
        """Add a descriptor unless its path is already present.

        Returns:
            True if the descriptor was added
        """
        existing = self._descriptors.get(descriptor.path)
        if existing is None:
            self._descriptors[descriptor.path] = descriptor
            return True

        if existing.revision != descriptor.revision:
            self.conflicts.append((existing, descriptor))
            logger.warning(
                f"Conflicting revisions for {descriptor.path}: "
                f"keeping {existing.revision or 'unpinned'}, "
                f"ignoring {descriptor.revision or 'unpinned'}"
            )
        else:
            logger.debug(f"Ignoring duplicate declaration of {descriptor.path}")
        return False

    def extend(self, descriptors: Iterable[DependencyDescriptor]) -> None:
        for descriptor in descriptors:
            self.add(descriptor)

    def filter(self, predicate: Callable[[DependencyDescriptor], bool]) -> DependencySet:
        """Return a new set with the descriptors matching ``predicate``."""
        return DependencySet.of(d for d in self if predicate(d))

    def get(self, path: str) -> DependencyDescriptor | None:
        return self._descriptors.get(path)

    def paths(self) -> list[str]:
        return list(self._descriptors)

    def __contains__(self, path: object) -> bool:
        return path in self._descriptors

    def __iter__(self) -> Iterator[DependencyDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)
