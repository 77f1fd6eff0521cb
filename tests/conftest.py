"""Pytest configuration and fixtures for go-resolve tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test.

    Tests that call setup_logging() must not break caplog in later tests.
    """
    yield

    logger = logging.getLogger("go_resolve")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _write_go_file(directory: Path, name: str, imports: list[str], package: str = "main") -> Path:
    """Write a Go source file importing ``imports``."""
    directory.mkdir(parents=True, exist_ok=True)
    specs = "\n".join(f'\t"{path}"' for path in imports)
    path = directory / name
    path.write_text(f"package {package}\n\nimport (\n{specs}\n)\n\nfunc main() {{}}\n")
    return path


def _write_manifest(directory: Path, entries: list[dict]) -> Path:
    """Write a go-resolve.toml manifest with the given dependency entries."""
    directory.mkdir(parents=True, exist_ok=True)
    blocks = []
    for entry in entries:
        lines = ["[[dependencies]]"]
        lines.extend(f'{key} = "{value}"' for key, value in entry.items())
        blocks.append("\n".join(lines))
    path = directory / "go-resolve.toml"
    path.write_text("\n\n".join(blocks) + "\n")
    return path


@pytest.fixture
def gopath(tmp_path):
    """An empty GOPATH-style source root."""
    root = tmp_path / "gopath"
    (root / "src").mkdir(parents=True)
    return root


@pytest.fixture
def project_dir(tmp_path):
    """An empty directory for the root project."""
    directory = tmp_path / "app"
    directory.mkdir()
    return directory


@pytest.fixture
def write_go_file():
    """Helper writing Go source files."""
    return _write_go_file


@pytest.fixture
def write_manifest():
    """Helper writing go-resolve.toml manifests."""
    return _write_manifest
