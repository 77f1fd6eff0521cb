"""Plugin system for go-resolve.

Uses Pluggy for plugin discovery and hook management.

Core plugin functions:
    from go_resolve.plugins import initialize_plugins, reset_plugins, get_plugins
"""

import contextlib
import importlib

import pluggy

from go_resolve.logging_config import get_logger
from go_resolve.plugins.hookspecs import PackageRuleSpec, SourceSpec

logger = get_logger(__name__)


# Default plugins bundled with go-resolve
DEFAULT_PLUGINS = ("go_resolve.fetch.gopath",)


pm = pluggy.PluginManager("go_resolve")
pm.add_hookspecs(PackageRuleSpec)
pm.add_hookspecs(SourceSpec)

_initialized: bool = False


def _load_default_plugins() -> None:
    """Load plugins bundled with go-resolve."""
    for plugin_path in DEFAULT_PLUGINS:
        module = importlib.import_module(plugin_path)
        pm.register(module, name=plugin_path)
        logger.debug(f"Loaded plugin: {plugin_path}")


def _load_external_plugins() -> None:
    """Discover and load external plugins via entry points."""
    try:
        num_loaded = pm.load_setuptools_entrypoints("go_resolve")
        if num_loaded > 0:
            logger.debug(f"Loaded {num_loaded} external plugin(s)")
    except Exception as e:
        logger.warning(f"Error loading external plugins: {e}")


def initialize_plugins() -> None:
    """Initialize the plugin system.

    Loads bundled plugins first, then discovers external plugins via entry
    points. Idempotent.
    """
    global _initialized

    if _initialized:
        return

    _load_default_plugins()
    _load_external_plugins()
    _initialized = True

    logger.debug(f"Plugin system initialized with {len(pm.get_plugins())} plugin(s)")


def reset_plugins() -> None:
    """Reset the plugin system (mainly for testing).

    Unregisters all plugins, forgets the cached default registry and marks
    the system as uninitialized.
    """
    global _initialized

    for plugin in list(pm.get_plugins()):
        with contextlib.suppress(Exception):
            pm.unregister(plugin)

    from go_resolve.pack.registry import _reset_default_registry

    _reset_default_registry()
    _initialized = False


def collect_package_rules() -> list:
    """Gather package rules registered by plugins, in registration order."""
    from go_resolve.pack.registry import PackageRule

    initialize_plugins()

    rules = []
    # pluggy calls the most recently registered implementation first
    for plugin_rules in reversed(pm.hook.register_package_rules()):
        for rule_data in plugin_rules or []:
            rule = PackageRule.from_dict(rule_data)
            rules.append(rule)
            logger.debug(f"Registered package rule: {rule.name}")
    return rules


def get_plugins() -> list[dict]:
    """Get information about loaded plugins.

    Returns:
        List of plugin info dictionaries with name and module.
    """
    initialize_plugins()

    return [
        {
            "name": pm.get_name(plugin),
            "module": getattr(plugin, "__name__", str(plugin)),
        }
        for plugin in pm.get_plugins()
    ]


__all__ = [
    "pm",
    "DEFAULT_PLUGINS",
    "initialize_plugins",
    "reset_plugins",
    "collect_package_rules",
    "get_plugins",
]
