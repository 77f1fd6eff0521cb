"""Resolution entry point.

    from go_resolve.resolution import resolve

    tree = resolve("github.com/me/app", Path("."), Configuration.BUILD, "hybrid")
"""

from __future__ import annotations

from pathlib import Path

from go_resolve.fetch import PluginMaterializer
from go_resolve.fetch.base import SourceMaterializer
from go_resolve.logging_config import get_logger
from go_resolve.models.configuration import Configuration
from go_resolve.models.package import LocalDirectoryDependency
from go_resolve.models.tree import DependencyTreeNode
from go_resolve.pack.classifier import PackageClassifier
from go_resolve.produce.strategy import ProduceStrategy, get_strategy
from go_resolve.produce.visitor import DependencyVisitor
from go_resolve.tree.factory import DependencyTreeFactory
from go_resolve.utils import normalize_path

logger = get_logger(__name__)


class Resolver:
    """Wires classifier, visitor, strategy and tree factory for one run."""

    def __init__(
        self,
        strategy: ProduceStrategy | str,
        configuration: Configuration = Configuration.BUILD,
        materializer: SourceMaterializer | None = None,
        classifier: PackageClassifier | None = None,
    ):
        """Initialize the resolver.

        Args:
            strategy: Root produce strategy, or its registered name
            configuration: Dependency categories taking part
            materializer: Source service for transitive packages
                (default: plugin-backed, searching $GOPATH)
            classifier: Import path classifier (default: default registry)
        """
        self.strategy = get_strategy(strategy) if isinstance(strategy, str) else strategy
        self.configuration = configuration
        self.classifier = classifier or PackageClassifier()
        self.visitor = DependencyVisitor(
            classifier=self.classifier,
            materializer=materializer or PluginMaterializer(),
        )
        self.factory = DependencyTreeFactory(self.classifier, self.visitor, configuration)

    def resolve(self, root_path: str, root_source_location: Path) -> DependencyTreeNode:
        """Resolve the full dependency tree of a local project.

        Args:
            root_path: Import path of the root project
            root_source_location: Directory holding the root project

        Returns:
            Root node of the resolved tree

        Raises:
            VisitationError: If any package's dependencies cannot be read
            FetchError: If any package's sources cannot be materialized
        """
        root = LocalDirectoryDependency.from_local(normalize_path(root_path), root_source_location)
        logger.info(
            f"Resolving {root.path} ({self.configuration.value}, strategy: {self.strategy.name})"
        )

        dependencies = self.strategy.produce(
            root, root.directory, self.visitor, self.configuration
        )
        logger.debug(f"Root project declares {len(dependencies)} dependencies")

        tree = self.factory.build_tree(root, dependencies)
        logger.info(f"Resolved {len(tree.flatten())} package(s)")
        return tree


def resolve(
    root_path: str,
    root_source_location: Path,
    configuration: Configuration,
    strategy: ProduceStrategy | str,
    materializer: SourceMaterializer | None = None,
    classifier: PackageClassifier | None = None,
) -> DependencyTreeNode:
    """Resolve the dependency tree of the project at ``root_source_location``."""
    resolver = Resolver(
        strategy=strategy,
        configuration=configuration,
        materializer=materializer,
        classifier=classifier,
    )
    return resolver.resolve(root_path, Path(root_source_location))
