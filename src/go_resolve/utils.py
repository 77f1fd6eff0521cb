"""Utility functions for go-resolve."""

from __future__ import annotations

import os
from pathlib import Path

from expandvars import expandvars


def normalize_path(path: str) -> str:
    """Strip whitespace and surrounding slashes from an import path."""
    return path.strip().strip("/")


def split_path(path: str) -> list[str]:
    """Split an import path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def is_path_prefix(prefix: str, path: str) -> bool:
    """Check whether ``prefix`` is ``path`` or one of its ancestor paths.

    Matching is per segment: ``github.com/a/b`` is a prefix of
    ``github.com/a/b/c`` but not of ``github.com/a/bc``.
    """
    if prefix == path:
        return True
    return bool(prefix) and path.startswith(prefix + "/")


def split_and_trim(value: str, separator: str = ",") -> list[str]:
    """Split a string and drop blank entries."""
    return [item.strip() for item in value.split(separator) if item.strip()]


def expand_search_paths(value: str) -> list[Path]:
    """Expand ``$VAR`` references and split a GOPATH-style list of directories."""
    return [Path(entry).expanduser() for entry in split_and_trim(expandvars(value), os.pathsep)]
