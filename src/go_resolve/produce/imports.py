"""Scanner collecting import paths from Go sources."""

import re
from pathlib import Path

from go_resolve.config import GO_FILE_SUFFIX, GO_TEST_FILE_SUFFIX, IGNORED_SOURCE_DIRS
from go_resolve.errors import VisitationError
from go_resolve.logging_config import get_logger
from go_resolve.models.dependency import DependencyCategory

logger = get_logger(__name__)

# Strings are matched first so comment markers inside them survive
_COMMENT_OR_STRING = re.compile(r'("(?:\\.|[^"\\\n])*"|`[^`]*`)|//[^\n]*|/\*.*?\*/', re.S)
_IMPORT_BLOCK = re.compile(r"^\s*import\s*\((.*?)\)", re.S | re.M)
_IMPORT_SINGLE = re.compile(r'^\s*import\s+(?:[\w.]+\s+)?"([^"]+)"', re.M)
_IMPORT_SPEC = re.compile(r'(?:[\w.]+\s+)?"([^"]+)"')


def strip_comments(source: str) -> str:
    return _COMMENT_OR_STRING.sub(lambda m: m.group(1) or " ", source)


def parse_imports(source: str) -> list[str]:
    """Extract import paths from a Go source file, in order of appearance."""
    source = strip_comments(source)
    imports: list[str] = []
    for block in _IMPORT_BLOCK.finditer(source):
        imports.extend(_IMPORT_SPEC.findall(block.group(1)))
    imports.extend(_IMPORT_SINGLE.findall(source))
    return imports


def is_standard_import(path: str) -> bool:
    """Standard library paths have no dot in their first segment (e.g., 'net/http')."""
    return "." not in path.split("/", 1)[0]


def _is_ignored(name: str) -> bool:
    return name in IGNORED_SOURCE_DIRS or name.startswith((".", "_"))


class ImportScanner:
    """Collects the non-standard imports of every Go file below a directory."""

    def iter_go_files(self, directory: Path):
        """Yield Go source files, skipping directories the go tool ignores."""
        for path in sorted(Path(directory).iterdir()):
            if _is_ignored(path.name):
                continue
            if path.is_dir():
                yield from self.iter_go_files(path)
            elif path.suffix == GO_FILE_SUFFIX:
                yield path

    def scan(self, directory: Path) -> dict[str, DependencyCategory]:
        """Map each imported path to the category it is needed for.

        An import seen in any non-test file is BUILD; one seen only in
        ``_test.go`` files is TEST.

        Raises:
            VisitationError: If the directory or a source file cannot be read
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise VisitationError(f"Source directory not found: {directory}")

        found: dict[str, DependencyCategory] = {}
        try:
            for go_file in self.iter_go_files(directory):
                category = (
                    DependencyCategory.TEST
                    if go_file.name.endswith(GO_TEST_FILE_SUFFIX)
                    else DependencyCategory.BUILD
                )
                for path in parse_imports(go_file.read_text(encoding="utf-8", errors="replace")):
                    if is_standard_import(path):
                        continue
                    if found.get(path) is not DependencyCategory.BUILD:
                        found[path] = category
        except OSError as e:
            raise VisitationError(f"Failed to scan sources in {directory}: {e}") from e

        logger.debug(f"Found {len(found)} non-standard import(s) in {directory}")
        return dict(sorted(found.items()))
