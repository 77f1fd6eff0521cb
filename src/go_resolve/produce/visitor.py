"""Visitor producing the dependency set of a single package."""

from pathlib import Path

from go_resolve.errors import VisitationError
from go_resolve.fetch.base import SourceMaterializer
from go_resolve.logging_config import get_logger
from go_resolve.models.configuration import Configuration
from go_resolve.models.dependency import DependencyCategory, DependencyDescriptor, DependencySet
from go_resolve.models.package import RecognizedPackage
from go_resolve.pack.classifier import PackageClassifier
from go_resolve.produce.imports import ImportScanner
from go_resolve.produce.manifest import ManifestReader
from go_resolve.utils import is_path_prefix

logger = get_logger(__name__)


class DependencyVisitor:
    """Reads the declared or imported dependencies of a package.

    Transitive packages are always visited the same way: their manifest when
    they ship one, otherwise the imports found in their sources.
    """

    def __init__(
        self,
        classifier: PackageClassifier,
        materializer: SourceMaterializer,
        manifest_reader: ManifestReader | None = None,
        import_scanner: ImportScanner | None = None,
    ):
        self.classifier = classifier
        self.materializer = materializer
        self.manifest_reader = manifest_reader or ManifestReader()
        self.import_scanner = import_scanner or ImportScanner()

    def visit(self, package: RecognizedPackage, configuration: Configuration) -> DependencySet:
        """Produce the dependency set of a recognized package.

        Raises:
            FetchError: If the package sources cannot be materialized
            VisitationError: If its dependencies cannot be read
        """
        directory = self.materializer.materialize(package)
        logger.debug(f"Visiting {package.root_path} at {directory}")

        dependencies = self.visit_manifest(directory, configuration, required=False)
        if dependencies is not None:
            return dependencies
        return self.visit_source(directory, configuration, package.root_path)

    def visit_manifest(
        self, directory: Path, configuration: Configuration, required: bool = True
    ) -> DependencySet | None:
        """Dependencies declared in the manifest of ``directory``.

        Returns:
            Filtered dependency set, or None when there is no manifest and
            ``required`` is False

        Raises:
            VisitationError: If the manifest is malformed, or missing while required
        """
        descriptors = self.manifest_reader.read(directory)
        if descriptors is None:
            if required:
                raise VisitationError(
                    f"No {self.manifest_reader.file_name} found in {directory}"
                )
            return None

        return DependencySet.of(d for d in descriptors if configuration.includes(d.category))

    def visit_source(
        self, directory: Path, configuration: Configuration, package_path: str
    ) -> DependencySet:
        """Dependencies inferred from the Go imports under ``directory``.

        Imports are reduced to their package root when recognized. Imports of
        ``package_path`` itself and its sub-packages are skipped.
        """
        roots: dict[str, DependencyCategory] = {}
        for import_path, category in self.import_scanner.scan(directory).items():
            if is_path_prefix(package_path, import_path):
                continue

            root_path = self.classifier.root_of(import_path)
            if is_path_prefix(package_path, root_path):
                continue
            if roots.get(root_path) is not DependencyCategory.BUILD:
                roots[root_path] = category

        return DependencySet.of(
            DependencyDescriptor(path=root_path, category=category)
            for root_path, category in roots.items()
            if configuration.includes(category)
        )
