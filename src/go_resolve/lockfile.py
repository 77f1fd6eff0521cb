"""Lock file serialization of dependency trees.

The lock file is TOML holding one nested ``[tree]`` table that mirrors the
tree node by node, children in order. Loading a dumped tree gives back an
equal tree.
"""

from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from go_resolve.config import LOCK_FILE_VERSION, __version__
from go_resolve.logging_config import get_logger
from go_resolve.models.tree import DependencyTreeNode

logger = get_logger(__name__)


def dump_tree(tree: DependencyTreeNode) -> str:
    """Serialize a tree to lock file content."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment(f"Generated by go-resolve {__version__}. Do not edit."))
    doc["version"] = LOCK_FILE_VERSION
    doc["tree"] = tree.to_dict()
    return tomlkit.dumps(doc)


def load_tree(content: str) -> DependencyTreeNode:
    """Parse lock file content back into a tree.

    Raises:
        ValueError: If the content is not a supported lock file
    """
    try:
        data = tomlkit.parse(content).unwrap()
    except TOMLKitError as e:
        raise ValueError(f"Invalid lock file: {e}") from e

    version = data.get("version")
    if version != LOCK_FILE_VERSION:
        raise ValueError(f"Unsupported lock file version: {version}")
    if "tree" not in data:
        raise ValueError("Invalid lock file: missing [tree] table")

    try:
        return DependencyTreeNode.from_dict(data["tree"])
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid lock file: {e}") from e


def write_lock_file(tree: DependencyTreeNode, path: Path) -> Path:
    path = Path(path)
    path.write_text(dump_tree(tree), encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path


def read_lock_file(path: Path) -> DependencyTreeNode:
    return load_tree(Path(path).read_text(encoding="utf-8"))
