"""Ordered rules mapping import paths to package roots.

Each rule is an anchored regular expression with a named ``root`` group plus
URL templates formatted with the match's named groups. Rules are tried in
registry order and the first match wins; a registry never changes after it
is built.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from string import Formatter
from typing import Any

from go_resolve.logging_config import get_logger
from go_resolve.models.package import RecognizedPackage, VcsType
from go_resolve.utils import is_path_prefix

logger = get_logger(__name__)

_SEGMENT = r"[A-Za-z0-9_.\-]+"


@dataclass(frozen=True)
class PackageRule:
    """A hosting convention for recognizing package roots.

    Attributes:
        name: Rule identifier (e.g., 'github')
        pattern: Regex matched at the start of an import path. Must define a
            ``root`` group and end on a segment boundary.
        url_templates: ``str.format`` templates over the named groups
        vcs_type: VCS of matched roots; None to read it from a ``vcs`` group
        description: Human-readable description
    """

    name: str
    pattern: re.Pattern[str]
    url_templates: tuple[str, ...]
    vcs_type: VcsType | None = VcsType.GIT
    description: str = ""

    def __post_init__(self) -> None:
        groups = set(self.pattern.groupindex)
        if "root" not in groups:
            raise ValueError(f"Package rule '{self.name}' has no 'root' group")
        if self.vcs_type is None and "vcs" not in groups:
            raise ValueError(f"Package rule '{self.name}' needs a VCS or a 'vcs' group")
        if not self.url_templates:
            raise ValueError(f"Package rule '{self.name}' has no url templates")
        for template in self.url_templates:
            fields = {field for _, field, _, _ in Formatter().parse(template) if field is not None}
            unknown = fields - groups
            if unknown:
                raise ValueError(
                    f"Package rule '{self.name}': url template '{template}' "
                    f"uses unknown group(s) {', '.join(sorted(unknown))}"
                )

    def match(self, path: str) -> RecognizedPackage | None:
        """Classify ``path`` with this rule, or return None if it does not apply."""
        found = self.pattern.match(path)
        if found is None:
            return None

        root = found.group("root")
        if not root or not is_path_prefix(root, path):
            logger.debug(f"Rule '{self.name}' matched {path} without a usable root, skipping")
            return None

        groups = {key: value for key, value in found.groupdict().items() if value is not None}
        vcs_type = self.vcs_type or VcsType.from_suffix(groups.get("vcs", ""))
        if vcs_type is None:
            return None

        try:
            urls = tuple(template.format(**groups) for template in self.url_templates)
        except KeyError:
            # a group referenced by a template did not take part in the match
            logger.debug(f"Rule '{self.name}' cannot build urls for {path}, skipping")
            return None

        return RecognizedPackage(path=path, root_path=root, vcs_type=vcs_type, urls=urls)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PackageRule:
        """Create a rule from a plugin registration dict.

        Raises:
            ValueError: If the rule is incomplete or malformed
        """
        missing = [key for key in ("name", "pattern", "urls") if key not in data]
        if missing:
            raise ValueError(f"Package rule is missing {', '.join(missing)}: {data!r}")

        try:
            pattern = re.compile(data["pattern"])
        except re.error as e:
            raise ValueError(f"Package rule '{data['name']}' has an invalid pattern: {e}") from e

        urls = data["urls"]
        if isinstance(urls, str):
            urls = [urls]

        vcs = data.get("vcs")
        return cls(
            name=data["name"],
            pattern=pattern,
            url_templates=tuple(urls),
            vcs_type=VcsType(vcs) if vcs else None,
            description=data.get("description", ""),
        )


def _host_rule(name: str, host: str, ssh_user: str = "git") -> PackageRule:
    escaped = re.escape(host)
    return PackageRule(
        name=name,
        pattern=re.compile(
            rf"^(?P<root>{escaped}/(?P<owner>{_SEGMENT})/(?P<repo>{_SEGMENT}))(?:/|$)"
        ),
        url_templates=(
            "https://{root}.git",
            f"{ssh_user}@{host}:{{owner}}/{{repo}}.git",
        ),
        description=f"Repositories hosted on {host}",
    )


def _google_golang_rule(name: str, repository: str) -> PackageRule:
    return PackageRule(
        name=f"google.golang.org/{name}",
        pattern=re.compile(rf"^(?P<root>google\.golang\.org/{re.escape(name)})(?:/|$)"),
        url_templates=(f"https://github.com/{repository}.git",),
        description=f"Vanity path for github.com/{repository}",
    )


GOOGLE_GOLANG_REPOSITORIES = {
    "grpc": "grpc/grpc-go",
    "protobuf": "protocolbuffers/protobuf-go",
    "api": "googleapis/google-api-go-client",
    "genproto": "googleapis/go-genproto",
    "appengine": "golang/appengine",
}


DEFAULT_RULES: tuple[PackageRule, ...] = (
    _host_rule("github", "github.com"),
    _host_rule("bitbucket", "bitbucket.org"),
    _host_rule("gitlab", "gitlab.com"),
    PackageRule(
        name="launchpad",
        pattern=re.compile(rf"^(?P<root>launchpad\.net/(?P<project>{_SEGMENT}))(?:/|$)"),
        url_templates=("https://{root}",),
        vcs_type=VcsType.BAZAAR,
        description="Bazaar projects hosted on Launchpad",
    ),
    PackageRule(
        name="golang.org/x",
        pattern=re.compile(rf"^(?P<root>golang\.org/x/(?P<repo>{_SEGMENT}))(?:/|$)"),
        url_templates=(
            "https://go.googlesource.com/{repo}",
            "https://github.com/golang/{repo}.git",
        ),
        description="Go sub-repositories",
    ),
    PackageRule(
        name="gopkg.in",
        pattern=re.compile(
            r"^(?P<root>gopkg\.in/(?P<pkg>[A-Za-z0-9_\-]+)\.(?P<version>v[0-9]+))(?:/|$)"
        ),
        url_templates=("https://{root}", "https://github.com/go-{pkg}/{pkg}.git"),
        description="Versioned gopkg.in paths backed by github.com/go-<pkg>/<pkg>",
    ),
    PackageRule(
        name="gopkg.in/user",
        pattern=re.compile(
            r"^(?P<root>gopkg\.in/(?P<user>[A-Za-z0-9_\-]+)/"
            r"(?P<pkg>[A-Za-z0-9_\-]+)\.(?P<version>v[0-9]+))(?:/|$)"
        ),
        url_templates=("https://{root}", "https://github.com/{user}/{pkg}.git"),
        description="Versioned gopkg.in paths backed by github.com/<user>/<pkg>",
    ),
    *(
        _google_golang_rule(name, repository)
        for name, repository in GOOGLE_GOLANG_REPOSITORIES.items()
    ),
    PackageRule(
        name="vcs-suffix",
        pattern=re.compile(
            r"^(?P<root>(?P<repo>(?:[a-z0-9\-]+\.)+[a-z0-9\-]+(?::[0-9]+)?"
            r"(?:/~?[A-Za-z0-9_.\-]+)+?)\.(?P<vcs>git|hg|svn|bzr))(?:/|$)"
        ),
        url_templates=("https://{root}",),
        vcs_type=None,
        description="Any host with an explicit .git/.hg/.svn/.bzr repository suffix",
    ),
)


@dataclass(frozen=True)
class PackageRegistry:
    """An immutable, ordered list of package rules."""

    rules: tuple[PackageRule, ...] = DEFAULT_RULES

    def match(self, path: str) -> RecognizedPackage | None:
        """Apply rules in order and return the first match."""
        for rule in self.rules:
            package = rule.match(path)
            if package is not None:
                logger.debug(f"{path} matched rule '{rule.name}' with root {package.root_path}")
                return package
        return None

    def with_rules(self, rules: tuple[PackageRule, ...] | list[PackageRule]) -> PackageRegistry:
        """Return a new registry with ``rules`` appended at lowest priority."""
        return PackageRegistry(rules=self.rules + tuple(rules))

    def names(self) -> list[str]:
        return [rule.name for rule in self.rules]


_default_registry: PackageRegistry | None = None


def get_default_registry() -> PackageRegistry:
    """Registry of bundled rules followed by rules contributed by plugins.

    Built on first use and reused afterwards.
    """
    global _default_registry

    if _default_registry is None:
        from go_resolve.plugins import collect_package_rules

        _default_registry = PackageRegistry().with_rules(collect_package_rules())
        logger.debug(f"Package registry built with {len(_default_registry.rules)} rule(s)")

    return _default_registry


def _reset_default_registry() -> None:
    """Forget the cached default registry. Called by reset_plugins()."""
    global _default_registry
    _default_registry = None
