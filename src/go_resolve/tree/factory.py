"""Recursive construction of dependency trees."""

from __future__ import annotations

from go_resolve.logging_config import get_logger
from go_resolve.models.configuration import Configuration
from go_resolve.models.dependency import DependencyDescriptor, DependencySet
from go_resolve.models.package import (
    LocalDirectoryDependency,
    Package,
    RecognizedPackage,
    UnrecognizedPackage,
)
from go_resolve.models.tree import DependencyTreeNode
from go_resolve.pack.classifier import PackageClassifier
from go_resolve.produce.visitor import DependencyVisitor

logger = get_logger(__name__)


class DependencyTreeFactory:
    """Builds the full dependency tree of a root project.

    Expansion is depth-first in declaration order. A package whose root is
    already on the current descent path becomes a truncated leaf, so
    mutually dependent packages do not recurse forever. The same package
    under unrelated parents is visited again for each occurrence.

    Unrecognized paths become leaves without children. Any error raised
    while visiting a package aborts the whole build.
    """

    def __init__(
        self,
        classifier: PackageClassifier,
        visitor: DependencyVisitor,
        configuration: Configuration = Configuration.BUILD,
    ):
        self.classifier = classifier
        self.visitor = visitor
        self.configuration = configuration

    def build_tree(
        self, root: LocalDirectoryDependency, dependencies: DependencySet
    ) -> DependencyTreeNode:
        """Build the tree for ``root`` whose own dependencies are ``dependencies``.

        Raises:
            VisitationError: If some package's dependencies cannot be read
            FetchError: If some package's sources cannot be materialized
        """
        logger.debug(f"Building dependency tree for {root.path}")
        children = self._build_children(dependencies, frozenset({root.root_path}))
        return DependencyTreeNode(name=root.path, package=root, children=children)

    def _build_children(
        self, dependencies: DependencySet, ancestors: frozenset[str]
    ) -> tuple[DependencyTreeNode, ...]:
        children = []
        listed: dict[str, DependencyDescriptor] = {}
        for descriptor in dependencies:
            package = self.classifier.classify(descriptor.path)
            root_path = package.root_path if package.is_recognized else package.path
            kept = listed.get(root_path)
            if kept is not None:
                if kept.revision != descriptor.revision:
                    logger.warning(
                        f"Conflicting revisions for {root_path}: "
                        f"keeping {kept.path}@{kept.revision or 'unpinned'}, "
                        f"ignoring {descriptor.path}@{descriptor.revision or 'unpinned'}"
                    )
                else:
                    logger.debug(f"Skipping {descriptor.path}: root {root_path} already listed")
                continue
            listed[root_path] = descriptor
            children.append(self._build_node(descriptor, package, ancestors))
        return tuple(children)

    def _build_node(
        self, descriptor: DependencyDescriptor, package: Package, ancestors: frozenset[str]
    ) -> DependencyTreeNode:
        match package:
            case UnrecognizedPackage():
                logger.warning(f"Cannot recognize {descriptor.path}, leaving it unresolved")
                return DependencyTreeNode(
                    name=descriptor.path, package=package, descriptor=descriptor
                )
            case RecognizedPackage():
                if descriptor.url and descriptor.url not in package.urls:
                    package = package.with_urls((descriptor.url, *package.urls))

                if package.root_path in ancestors:
                    logger.debug(f"Cycle through {package.root_path}, not expanding again")
                    return DependencyTreeNode(
                        name=descriptor.path,
                        package=package,
                        descriptor=descriptor,
                        truncated=True,
                    )

                dependencies = self.visitor.visit(package, self.configuration)
                children = self._build_children(dependencies, ancestors | {package.root_path})
                return DependencyTreeNode(
                    name=descriptor.path,
                    package=package,
                    descriptor=descriptor,
                    children=children,
                )

        raise TypeError(f"Unexpected package type: {type(package).__name__}")
