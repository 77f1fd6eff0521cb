"""GOPATH source plugin.

Finds package sources that are already checked out under a GOPATH-style
source root, either as ``<entry>/src/<root>`` or ``<entry>/vendor/<root>``.
It never downloads anything.
"""

from pathlib import Path

from go_resolve import get_logger, hookimpl

logger = get_logger(__name__)

SOURCE_SUBDIRS = ("src", "vendor")


def find_in_search_paths(root_path: str, search_paths: list[Path]) -> Path | None:
    """Locate ``root_path`` under the given source roots.

    Args:
        root_path: Package root (e.g., 'github.com/foo/bar')
        search_paths: GOPATH entries, searched in order

    Returns:
        First existing directory, or None
    """
    for entry in search_paths:
        for subdir in SOURCE_SUBDIRS:
            candidate = Path(entry) / subdir / root_path
            if candidate.is_dir():
                logger.debug(f"Found {root_path} at {candidate}")
                return candidate
    return None


@hookimpl
def materialize_package(root_path: str, search_paths: list[Path]) -> Path | None:
    """Serve package sources from local GOPATH entries."""
    return find_in_search_paths(root_path, search_paths)
