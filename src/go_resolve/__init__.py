"""go-resolve: Resolve Go import paths into fetchable packages and dependency trees."""

import pluggy

# Convenience export for plugins: from go_resolve import hookimpl
hookimpl = pluggy.HookimplMarker("go_resolve")

from go_resolve.config import __version__  # noqa: E402
from go_resolve.logging_config import get_logger  # noqa: E402
from go_resolve.models.configuration import Configuration  # noqa: E402
from go_resolve.resolution import resolve  # noqa: E402

__all__ = [
    "__version__",
    "hookimpl",
    "Configuration",
    "get_logger",
    "resolve",
]
