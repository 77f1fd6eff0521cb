"""Source materialization.

    from go_resolve.fetch import PluginMaterializer, default_search_paths
"""

import os
from pathlib import Path

from go_resolve.config import DEFAULT_GOPATH, GOPATH_ENV_VAR
from go_resolve.errors import FetchError
from go_resolve.fetch.base import SourceMaterializer
from go_resolve.logging_config import get_logger
from go_resolve.models.package import RecognizedPackage
from go_resolve.utils import expand_search_paths

logger = get_logger(__name__)


def default_search_paths() -> list[Path]:
    """Source roots from ``$GOPATH``, falling back to ``~/go``."""
    return expand_search_paths(os.environ.get(GOPATH_ENV_VAR) or DEFAULT_GOPATH)


class PluginMaterializer(SourceMaterializer):
    """Asks source plugins for a package; the first plugin to answer wins."""

    def __init__(self, search_paths: list[Path] | None = None):
        """Initialize the materializer.

        Args:
            search_paths: Local source roots handed to plugins
                (default: from $GOPATH)
        """
        self.search_paths = (
            list(search_paths) if search_paths is not None else default_search_paths()
        )

    def materialize(self, package: RecognizedPackage) -> Path:
        from go_resolve.plugins import initialize_plugins, pm

        initialize_plugins()

        directory = pm.hook.materialize_package(
            root_path=package.root_path,
            vcs=package.vcs_type.value,
            urls=list(package.urls),
            search_paths=self.search_paths,
        )
        if directory is None:
            searched = ", ".join(str(p) for p in self.search_paths) or "no search paths"
            raise FetchError(
                f"Sources of {package.root_path} not available (searched {searched})",
                path=package.root_path,
            )
        return Path(directory)


__all__ = [
    "SourceMaterializer",
    "PluginMaterializer",
    "default_search_paths",
]
