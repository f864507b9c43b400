"""CLI entry point: depcheck.

Usage:
    depcheck                                  # check ./package.json against node_modules/
    depcheck --package-dir app --only-specified
    depcheck --package-manager bower --install
    depcheck --scope dependencies --json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from depcheck.checker import check_dependencies_sync
from depcheck.config import CheckConfig
from depcheck.core.logging import setup_logging
from depcheck.exceptions import InstallError, ManifestError
from depcheck.managers import MANAGER_REGISTRY


def _discard(message: str) -> None:
    pass


@click.command()
@click.option(
    "--package-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory containing the manifest (default: search upward from cwd)",
)
@click.option(
    "--package-manager",
    type=click.Choice(sorted(MANAGER_REGISTRY)),
    default="npm",
    show_default=True,
    help="Manifest and install conventions to use",
)
@click.option("--scope", "scopes", multiple=True, help="Scope to check (repeatable)")
@click.option(
    "--optional-scope",
    "optional_scopes",
    multiple=True,
    help="Scope exempt from --only-specified (repeatable)",
)
@click.option("--only-specified", is_flag=True, help="Flag installed packages not in the manifest")
@click.option("--check-git-urls", is_flag=True, help="Also check git URL dependencies")
@click.option("--install", is_flag=True, help="Run install/prune when problems are found")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--json", "as_json", is_flag=True, help="Output the result as JSON")
def main(
    package_dir: Path | None,
    package_manager: str,
    scopes: tuple[str, ...],
    optional_scopes: tuple[str, ...],
    only_specified: bool,
    check_git_urls: bool,
    install: bool,
    verbose: bool,
    as_json: bool,
) -> None:
    """Check that installed packages match the manifest."""
    setup_logging("DEBUG" if verbose and not as_json else None)

    # verbose: every message (errors included) reaches the log sink as it is
    # produced; otherwise errors are printed once the check finishes
    live = verbose and not as_json
    config = CheckConfig(
        package_dir=package_dir,
        package_manager=package_manager,
        scope_list=list(scopes) or None,
        optional_scope_list=list(optional_scopes),
        only_specified=only_specified,
        check_git_urls=check_git_urls,
        install=install,
        verbose=verbose,
        log=click.echo if live else _discard,
        error=_discard,
    )

    try:
        result = check_dependencies_sync(config)
    except (InstallError, ManifestError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif not live:
        for message in result.errors:
            click.echo(message, err=True)

    sys.exit(result.status)


if __name__ == "__main__":
    main()
