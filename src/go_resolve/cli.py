"""Command-line interface for go-resolve."""

from pathlib import Path

import click

from go_resolve.config import (
    DEFAULT_CONFIGURATION,
    DEFAULT_STRATEGY,
    LOCK_FILE_NAME,
    __version__,
)
from go_resolve.console import console, error, success, warning
from go_resolve.errors import FetchError, VisitationError
from go_resolve.fetch import PluginMaterializer, default_search_paths
from go_resolve.lockfile import write_lock_file
from go_resolve.logging_config import get_logger, setup_logging
from go_resolve.models.configuration import Configuration
from go_resolve.models.package import RecognizedPackage
from go_resolve.pack.classifier import PackageClassifier
from go_resolve.pack.registry import get_default_registry
from go_resolve.produce.strategy import list_strategies
from go_resolve.resolution import Resolver
from go_resolve.tree.render import to_rich_tree
from go_resolve.utils import expand_search_paths

logger = get_logger(__name__)


class GoResolveCLI:
    """Command-line orchestrator for a resolution run."""

    def __init__(self, search_paths: list[Path] | None = None):
        self.search_paths = search_paths if search_paths is not None else default_search_paths()

    def execute(
        self,
        project_dir: Path,
        package_path: str,
        configuration: str = DEFAULT_CONFIGURATION,
        strategy: str = DEFAULT_STRATEGY,
        lock: bool = False,
    ) -> int:
        """Resolve a project and print its tree.

        Returns:
            Exit code (0 = success, 1 = resolution failed)
        """
        resolver = Resolver(
            strategy=strategy,
            configuration=Configuration(configuration),
            materializer=PluginMaterializer(self.search_paths),
        )

        try:
            tree = resolver.resolve(package_path, project_dir)
        except (VisitationError, FetchError) as e:
            logger.debug("Resolution failed", exc_info=True)
            error(f"Resolution failed: {e}")
            return 1

        console.print(to_rich_tree(tree))

        unresolved = sorted({node.name for _, node in tree.walk() if node.unresolved})
        if unresolved:
            warning(f"{len(unresolved)} unrecognized package(s): {', '.join(unresolved)}")

        if lock:
            write_lock_file(tree, project_dir / LOCK_FILE_NAME)

        success(f"Resolved {len(tree.flatten())} package(s)")
        return 0


@click.group()
@click.version_option(__version__, prog_name="go-resolve")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output (DEBUG level)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Show only warnings and errors",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Explicit log level (overrides -v/-q)",
)
def cli(verbose, quiet, log_level):
    """Resolve Go import paths and dependency trees."""
    if sum([verbose, quiet, log_level is not None]) > 1:
        raise click.UsageError("--verbose, --quiet, and --log-level are mutually exclusive")

    setup_logging(verbose=verbose, quiet=quiet, log_level=log_level)


@cli.command(name="resolve")
@click.argument(
    "project_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),  # type: ignore[type-var]
    default=".",
)
@click.option(
    "-p",
    "--package-path",
    required=True,
    help="Import path of the project (e.g., github.com/me/app)",
)
@click.option(
    "-c",
    "--configuration",
    type=click.Choice([c.value for c in Configuration]),
    default=DEFAULT_CONFIGURATION,
    show_default=True,
    help="Dependency categories to include",
)
@click.option(
    "-s",
    "--strategy",
    type=click.Choice(list_strategies()),
    default=DEFAULT_STRATEGY,
    show_default=True,
    help="How the project's own dependencies are produced",
)
@click.option(
    "--gopath",
    default=None,
    help="Source roots to search, separated like $GOPATH (default: $GOPATH)",
)
@click.option(
    "--lock",
    is_flag=True,
    help=f"Write the resolved tree to {LOCK_FILE_NAME}",
)
def resolve(project_dir, package_path, configuration, strategy, gopath, lock):
    """Resolve the dependency tree of the project in PROJECT_DIR."""
    search_paths = expand_search_paths(gopath) if gopath else None
    go_resolve_cli = GoResolveCLI(search_paths=search_paths)
    exit_code = go_resolve_cli.execute(
        project_dir=project_dir,
        package_path=package_path,
        configuration=configuration,
        strategy=strategy,
        lock=lock,
    )

    raise SystemExit(exit_code)


@cli.command(name="classify")
@click.argument("paths", nargs=-1, required=True)
def classify(paths):
    """Show how import PATHS are classified."""
    classifier = PackageClassifier()

    for path in paths:
        package = classifier.classify(path)
        if isinstance(package, RecognizedPackage):
            click.echo(f"{click.style(package.path, bold=True)}")
            click.echo(f"    Root: {package.root_path}")
            click.echo(f"    VCS:  {package.vcs_type.value}")
            for url in package.urls:
                click.echo(f"    URL:  {url}")
        else:
            click.echo(
                f"{click.style(package.path or '(empty)', bold=True)}"
                f"{click.style(' [unrecognized]', fg='red')}"
            )


@cli.command(name="list-rules")
def list_rules():
    """List package rules in priority order."""
    registry = get_default_registry()

    click.echo("Package rules (first match wins):")
    click.echo("")
    for index, rule in enumerate(registry.rules, start=1):
        vcs = rule.vcs_type.value if rule.vcs_type else "from suffix"
        click.echo(f"  {index:2}. {click.style(rule.name, bold=True)} [{vcs}]")
        if rule.description:
            click.echo(f"      {rule.description}")


def main():
    """Main entry point for CLI."""
    return cli()


if __name__ == "__main__":
    main()
