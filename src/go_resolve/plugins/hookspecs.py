"""Hook specifications for go-resolve plugins.

Plugins use the @hookimpl decorator to implement these hooks.

Example plugin implementation:

    from go_resolve import hookimpl

    @hookimpl
    def register_package_rules():
        return [
            {
                "name": "example",
                "pattern": r"^(?P<root>go\\.example\\.com/(?P<repo>[a-z]+))(?:/|$)",
                "vcs": "git",
                "urls": ["https://git.example.com/{repo}.git"],
            }
        ]
"""

from pathlib import Path

import pluggy

hookspec = pluggy.HookspecMarker("go_resolve")


class PackageRuleSpec:
    """Hook specifications for plugins that teach go-resolve new hosts."""

    @hookspec
    def register_package_rules(self) -> list[dict]:  # type: ignore[empty-body]
        """Register additional package rules.

        Called once when the default registry is built. Plugin rules are
        consulted after the bundled ones, in plugin registration order.

        Returns:
            List of dicts, each with:
                - name: Rule identifier (required)
                - pattern: Regex with a ``root`` group, anchored at the start
                  and ending on a segment boundary (required)
                - urls: ``str.format`` templates over the named groups (required)
                - vcs: 'git', 'hg', 'svn' or 'bzr'; omit to read a ``vcs`` group
                - description: Human-readable description
        """
        ...


class SourceSpec:
    """Hook specifications for plugins that make package sources available."""

    @hookspec(firstresult=True)
    def materialize_package(
        self,
        root_path: str,
        vcs: str,
        urls: list[str],
        search_paths: list[Path],
    ) -> Path | None:
        """Return a local directory holding the sources of a package root.

        Args:
            root_path: Package root (e.g., 'github.com/foo/bar')
            vcs: VCS type value (e.g., 'git')
            urls: Candidate fetch urls, most preferred first
            search_paths: Local source roots configured for this run

        Returns:
            Directory with the package sources, or None if this plugin cannot
            provide them. The first non-None result wins.
        """
