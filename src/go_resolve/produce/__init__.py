"""Producing dependency sets from manifests and sources."""

from go_resolve.produce.imports import ImportScanner
from go_resolve.produce.manifest import ManifestReader
from go_resolve.produce.strategy import (
    HybridStrategy,
    ManifestStrategy,
    ProduceStrategy,
    SourceCodeStrategy,
    get_strategy,
    list_strategies,
)
from go_resolve.produce.visitor import DependencyVisitor

__all__ = [
    "DependencyVisitor",
    "HybridStrategy",
    "ImportScanner",
    "ManifestReader",
    "ManifestStrategy",
    "ProduceStrategy",
    "SourceCodeStrategy",
    "get_strategy",
    "list_strategies",
]
