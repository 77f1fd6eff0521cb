"""Classification of import paths into recognized and unrecognized packages."""

from __future__ import annotations

from go_resolve.logging_config import get_logger
from go_resolve.models.package import Package, RecognizedPackage, UnrecognizedPackage
from go_resolve.pack.registry import PackageRegistry, get_default_registry
from go_resolve.utils import is_path_prefix, normalize_path

logger = get_logger(__name__)


class PackageClassifier:
    """Classifies import paths against a package registry.

    ``classify`` never raises: every path is either recognized by some rule
    or reported as unrecognized.
    """

    def __init__(self, registry: PackageRegistry | None = None):
        """Initialize the classifier.

        Args:
            registry: Rules to consult (default: bundled plus plugin rules)
        """
        self.registry = registry if registry is not None else get_default_registry()

    def classify(self, path: str) -> Package:
        """Classify an import path.

        Args:
            path: Import path (e.g., 'github.com/foo/bar/baz')

        Returns:
            RecognizedPackage if a rule matched, UnrecognizedPackage otherwise
        """
        path = normalize_path(path)
        if not path:
            return UnrecognizedPackage(path)

        package = self.registry.match(path)
        if package is None:
            logger.debug(f"{path} is not recognized by any rule")
            return UnrecognizedPackage(path)
        return package

    def longer_path(self, current: Package, path: str) -> Package:
        """Classify a path that extends ``current``.

        A recognized package keeps its root, VCS and urls for any other path
        under its root, including siblings of ``current.path``. An
        unrecognized package only widens to paths extending its own path,
        which are classified from scratch.

        Raises:
            ValueError: If ``path`` does not extend ``current.root_path``
                (recognized) or ``current.path`` (unrecognized)
        """
        path = normalize_path(path)
        base = current.root_path if isinstance(current, RecognizedPackage) else current.path
        if path == current.path or not is_path_prefix(base, path):
            raise ValueError(f"'{path}' is not a longer path of '{current.path}'")

        longer = current.longer_path(path)
        if longer is not None:
            return longer
        return self.classify(path)

    def shorter_path(self, current: Package, path: str) -> UnrecognizedPackage:
        """Narrow an unrecognized package to one of its ancestor paths.

        The shorter path is not reclassified. Shortening a recognized package
        raises ``UnsupportedAccessError``.

        Raises:
            ValueError: If ``path`` is not strictly shorter than ``current.path``
        """
        path = normalize_path(path)
        if path == current.path or not is_path_prefix(path, current.path):
            raise ValueError(f"'{path}' is not a shorter path of '{current.path}'")

        return current.shorter_path(path)

    def root_of(self, path: str) -> str:
        """Package root for ``path``, or ``path`` itself when unrecognized."""
        package = self.classify(path)
        if isinstance(package, RecognizedPackage):
            return package.root_path
        return package.path
