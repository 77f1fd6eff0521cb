"""Reader for go-resolve.toml manifests."""

from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from go_resolve.config import MANIFEST_FILE_NAME
from go_resolve.errors import VisitationError
from go_resolve.models.dependency import DependencyDescriptor

STRING_FIELDS = ("version", "commit", "url", "category")


class ManifestReader:
    """Reads declared dependencies from a project's manifest.

    Manifest format:

        [[dependencies]]
        name = "github.com/foo/bar"
        version = "v1.2.0"
        commit = "0123abcd"
        url = "https://example.com/bar.git"
        category = "build"
    """

    def __init__(self, file_name: str = MANIFEST_FILE_NAME):
        self.file_name = file_name

    def manifest_path(self, directory: Path) -> Path:
        return Path(directory) / self.file_name

    def exists(self, directory: Path) -> bool:
        return self.manifest_path(directory).is_file()

    def read(self, directory: Path) -> list[DependencyDescriptor] | None:
        """Parse the manifest in ``directory``.

        Args:
            directory: Project directory

        Returns:
            Descriptors in declaration order, or None if there is no manifest

        Raises:
            VisitationError: If the manifest cannot be read or is malformed
        """
        manifest_path = self.manifest_path(directory)
        if not manifest_path.is_file():
            return None

        try:
            data = tomlkit.parse(manifest_path.read_text(encoding="utf-8")).unwrap()
        except (OSError, TOMLKitError) as e:
            raise VisitationError(f"Failed to read {manifest_path}: {e}") from e

        entries = data.get("dependencies", [])
        if not isinstance(entries, list):
            raise VisitationError(f"{manifest_path}: 'dependencies' must be an array of tables")

        descriptors = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict) or not entry.get("name"):
                raise VisitationError(f"{manifest_path}: dependency #{index + 1} has no name")
            if not isinstance(entry["name"], str):
                raise VisitationError(
                    f"{manifest_path}: dependency #{index + 1} name must be a string",
                    path=str(entry["name"]),
                )
            for key in STRING_FIELDS:
                if key in entry and not isinstance(entry[key], str):
                    raise VisitationError(
                        f"{manifest_path}: invalid dependency {entry['name']}: "
                        f"'{key}' must be a string",
                        path=entry["name"],
                    )
            try:
                descriptors.append(DependencyDescriptor.from_dict(entry))
            except ValueError as e:
                raise VisitationError(
                    f"{manifest_path}: invalid dependency {entry['name']}: {e}",
                    path=entry["name"],
                ) from e

        return descriptors
