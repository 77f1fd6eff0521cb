"""Import path classification.

    from go_resolve.pack import PackageClassifier, PackageRegistry
"""

from go_resolve.pack.classifier import PackageClassifier
from go_resolve.pack.registry import (
    DEFAULT_RULES,
    PackageRegistry,
    PackageRule,
    get_default_registry,
)

__all__ = [
    "DEFAULT_RULES",
    "PackageClassifier",
    "PackageRegistry",
    "PackageRule",
    "get_default_registry",
]
