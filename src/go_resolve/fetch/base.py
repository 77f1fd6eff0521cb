"""Base class for source materializers."""

from abc import ABC, abstractmethod
from pathlib import Path

from go_resolve.models.package import RecognizedPackage


class SourceMaterializer(ABC):
    """Makes the sources of a recognized package readable on local disk.

    Resolution only reads sources; how they get there (an existing
    checkout, a VCS clone, a download) is up to the implementation.
    """

    @abstractmethod
    def materialize(self, package: RecognizedPackage) -> Path:
        """Return a local directory holding the package root's sources.

        Args:
            package: Package whose root should be made available

        Returns:
            Directory containing the sources of ``package.root_path``

        Raises:
            FetchError: If the sources cannot be made available
        """
        pass
