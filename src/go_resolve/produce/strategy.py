"""Strategies producing the root project's dependency set.

The root project is special: its dependencies may come from its manifest,
from its sources, or both. The strategy is chosen once per resolution run.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from go_resolve.logging_config import get_logger
from go_resolve.models.configuration import Configuration
from go_resolve.models.dependency import DependencySet
from go_resolve.models.package import LocalDirectoryDependency
from go_resolve.produce.visitor import DependencyVisitor

logger = get_logger(__name__)


class ProduceStrategy(ABC):
    """Policy for producing the root project's dependencies."""

    name: str
    """Strategy name (e.g., 'manifest', 'source', 'hybrid')"""

    description: str = ""

    @abstractmethod
    def produce(
        self,
        root: LocalDirectoryDependency,
        directory: Path,
        visitor: DependencyVisitor,
        configuration: Configuration,
    ) -> DependencySet:
        """Produce the dependency set of the root project.

        Args:
            root: Root project
            directory: Directory holding the root project's sources
            visitor: Visitor used to read manifests and sources
            configuration: Categories taking part in this resolution

        Returns:
            Ordered dependency set

        Raises:
            VisitationError: If dependencies cannot be produced
        """
        pass


class ManifestStrategy(ProduceStrategy):
    name = "manifest"
    description = "Only dependencies declared in the manifest (manifest required)"

    def produce(self, root, directory, visitor, configuration):
        return visitor.visit_manifest(directory, configuration, required=True)


class SourceCodeStrategy(ProduceStrategy):
    name = "source"
    description = "Only dependencies imported by the project's Go sources"

    def produce(self, root, directory, visitor, configuration):
        return visitor.visit_source(directory, configuration, root.path)


class HybridStrategy(ProduceStrategy):
    """Manifest declarations first, then imported packages not declared.

    Declared entries keep their pinned revisions; imports only add packages
    the manifest does not mention. A missing manifest is allowed.
    """

    name = "hybrid"
    description = "Manifest dependencies plus undeclared imports"

    def produce(self, root, directory, visitor, configuration):
        dependencies = visitor.visit_manifest(directory, configuration, required=False)
        if dependencies is None:
            logger.debug(f"No manifest in {directory}, using imports only")
            dependencies = DependencySet()

        for descriptor in visitor.visit_source(directory, configuration, root.path):
            if descriptor.path not in dependencies:
                logger.debug(f"Adding undeclared import {descriptor.path}")
                dependencies.add(descriptor)

        return dependencies


STRATEGIES: dict[str, type[ProduceStrategy]] = {
    strategy.name: strategy for strategy in (ManifestStrategy, SourceCodeStrategy, HybridStrategy)
}


def list_strategies() -> list[str]:
    return list(STRATEGIES)


def get_strategy(name: str) -> ProduceStrategy:
    """Create the strategy registered under ``name``.

    Raises:
        ValueError: If no strategy has that name
    """
    try:
        return STRATEGIES[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown strategy: {name}. Available: {', '.join(STRATEGIES)}"
        ) from None
