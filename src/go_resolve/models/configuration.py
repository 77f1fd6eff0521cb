"""Resolution configurations."""

from enum import Enum

from go_resolve.models.dependency import DependencyCategory


class Configuration(Enum):
    """Selects which declared dependency categories take part in a resolution.

    Values:
        BUILD: Only dependencies needed to build the project
        TEST: Build dependencies plus test-only dependencies
    """

    BUILD = "build"
    TEST = "test"

    def includes(self, category: DependencyCategory) -> bool:
        """Check whether dependencies of ``category`` participate."""
        if self is Configuration.TEST:
            return True
        return category is DependencyCategory.BUILD
