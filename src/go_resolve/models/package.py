"""Package classification models.

An import path is classified into exactly one of two variants:

- ``RecognizedPackage``: the path lives under a package root whose VCS and
  fetch URLs are known.
- ``UnrecognizedPackage``: no rule matched. Only the path is known; asking
  for anything else raises ``UnsupportedAccessError``.

Both variants are immutable. Widening or narrowing a path always produces a
new instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypeAlias

from go_resolve.errors import UnsupportedAccessError
from go_resolve.utils import is_path_prefix


class VcsType(Enum):
    """Version control systems that can own a package root."""

    GIT = "git"
    MERCURIAL = "hg"
    SVN = "svn"
    BAZAAR = "bzr"

    @classmethod
    def from_suffix(cls, suffix: str) -> VcsType | None:
        """Map a repository suffix such as ``git`` or ``hg`` to a VCS type."""
        for vcs in cls:
            if vcs.value == suffix:
                return vcs
        return None


@dataclass(frozen=True)
class RecognizedPackage:
    """A path under a known, fetchable package root.

    Attributes:
        path: The import path being described
        root_path: Prefix of ``path`` that forms one fetchable unit
        vcs_type: VCS owning the root
        urls: Candidate fetch locations, most preferred first
    """

    path: str
    root_path: str
    vcs_type: VcsType
    urls: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not is_path_prefix(self.root_path, self.path):
            raise ValueError(f"Root path '{self.root_path}' is not a prefix of '{self.path}'")
        if not self.urls:
            raise ValueError(f"Recognized package '{self.path}' needs at least one url")

    @property
    def is_recognized(self) -> bool:
        return True

    @property
    def is_root(self) -> bool:
        """Whether this instance describes its package root itself."""
        return self.path == self.root_path

    def longer_path(self, path: str) -> RecognizedPackage | None:
        """Describe a longer path under the same root.

        Returns None when ``path`` escapes this package's root, in which case
        the caller must classify it from scratch.
        """
        if not is_path_prefix(self.root_path, path):
            return None
        return RecognizedPackage(
            path=path, root_path=self.root_path, vcs_type=self.vcs_type, urls=self.urls
        )

    def shorter_path(self, path: str) -> RecognizedPackage:
        raise UnsupportedAccessError(
            f"Cannot shorten recognized package '{self.path}' to '{path}'"
        )

    def with_urls(self, urls: tuple[str, ...]) -> RecognizedPackage:
        """Return a copy whose candidate urls are ``urls``."""
        return RecognizedPackage(
            path=self.path, root_path=self.root_path, vcs_type=self.vcs_type, urls=urls
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "recognized",
            "path": self.path,
            "root_path": self.root_path,
            "vcs": self.vcs_type.value,
            "urls": list(self.urls),
        }


@dataclass(frozen=True)
class UnrecognizedPackage:
    """A path that no registry rule could classify."""

    path: str

    @property
    def is_recognized(self) -> bool:
        return False

    @property
    def root_path(self) -> str:
        raise UnsupportedAccessError(f"{self!r} has no root path")

    @property
    def vcs_type(self) -> VcsType:
        raise UnsupportedAccessError(f"{self.path} is unrecognized!")

    @property
    def urls(self) -> tuple[str, ...]:
        raise UnsupportedAccessError(f"{self!r} has no urls")

    def longer_path(self, path: str) -> None:
        # `golang.org` is unrecognized but `golang.org/x/tools` is not,
        # so nothing can be said about a longer path without reclassifying.
        return None

    def shorter_path(self, path: str) -> UnrecognizedPackage:
        return UnrecognizedPackage(path)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "unrecognized", "path": self.path}


@dataclass(frozen=True)
class LocalDirectoryDependency:
    """The root project: a package path backed by a local directory."""

    path: str
    directory: Path

    @property
    def is_recognized(self) -> bool:
        return True

    @property
    def root_path(self) -> str:
        return self.path

    @property
    def vcs_type(self) -> None:
        return None

    @property
    def urls(self) -> tuple[str, ...]:
        return (self.directory.resolve().as_uri(),)

    @classmethod
    def from_local(cls, path: str, directory: Path) -> LocalDirectoryDependency:
        return cls(path=path, directory=Path(directory))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "local", "path": self.path, "directory": str(self.directory)}


Package: TypeAlias = RecognizedPackage | UnrecognizedPackage
"""Result of classifying an import path."""

TreePackage: TypeAlias = RecognizedPackage | UnrecognizedPackage | LocalDirectoryDependency
"""Anything a dependency tree node can wrap."""


def package_from_dict(data: dict[str, Any]) -> TreePackage:
    """Rebuild a package from its ``to_dict`` form."""
    kind = data.get("kind")
    if kind == "recognized":
        return RecognizedPackage(
            path=data["path"],
            root_path=data["root_path"],
            vcs_type=VcsType(data["vcs"]),
            urls=tuple(data["urls"]),
        )
    if kind == "unrecognized":
        return UnrecognizedPackage(data["path"])
    if kind == "local":
        return LocalDirectoryDependency(path=data["path"], directory=Path(data["directory"]))
    raise ValueError(f"Unknown package kind: {kind!r}")
