"""Prune commands.

Provides commands to prune a single project directory and to prune every
locked project inside a vendor directory.
"""

from pathlib import Path
from typing import Annotated

import typer

from vendorprune.core.config import ConfigError, resolve_config
from vendorprune.core.lock import LockError, load_lock
from vendorprune.core.paths import DEFAULT_LOCK_NAME
from vendorprune.models.config import Config
from vendorprune.prune.engine import PruneEngine
from vendorprune.prune.errors import PruneError, StageError
from vendorprune.prune.models import PruneOptions, PruneResult
from vendorprune.utils.formatting import (
    console,
    create_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Prune vendored dependencies.",
    no_args_is_help=True,
)


@app.command()
def project(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Argument(help="Project directory to prune."),
    ],
    packages: Annotated[
        list[str] | None,
        typer.Option(
            "--package",
            "-p",
            help="Package path used by the consumer ('.' is the project root). Repeatable.",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", help="Project name used to look up config overrides."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Prune configuration file."),
    ] = None,
    nested_vendor: Annotated[
        bool,
        typer.Option("--nested-vendor", help="Remove nested vendor directories."),
    ] = False,
    unused_packages: Annotated[
        bool,
        typer.Option("--unused-packages", help="Remove files of unused packages."),
    ] = False,
    non_go: Annotated[
        bool,
        typer.Option("--non-go", help="Remove non-Go files (license files are kept)."),
    ] = False,
    go_tests: Annotated[
        bool,
        typer.Option("--go-tests", help="Remove Go test files."),
    ] = False,
    all_policies: Annotated[
        bool,
        typer.Option("--all", help="Enable every prune policy."),
    ] = False,
    no_policies: Annotated[
        bool,
        typer.Option("--none", help="Apply no policy; only remove empty directories."),
    ] = False,
) -> None:
    """Prune a single project directory in place.

    Without any policy flag, the policies come from the configuration
    file (or its defaults, which remove nested vendor directories).
    Empty directories are always removed; --none skips every policy.

    Examples:
        vendorprune prune project vendor/github.com/foo/bar -p . -p baz --all
        vendorprune prune project ./bar --go-tests --non-go
        vendorprune prune project ./bar --none
    """
    quiet = _is_quiet(ctx)

    options = PruneOptions.from_flags(
        nested_vendor=nested_vendor,
        unused_packages=unused_packages,
        non_go=non_go,
        go_tests=go_tests,
    )
    if all_policies:
        options = PruneOptions.all()

    if no_policies and options:
        print_error("--none cannot be combined with policy flags.")
        raise typer.Exit(code=1)

    if not options and not no_policies:
        config = _load_config(config_path)
        options = config.prune.options_for(name or root.resolve().name)

    try:
        result = PruneEngine().prune(root, packages or [], options)
    except PruneError as e:
        _report_failure(name or str(root), e)
        raise typer.Exit(code=1) from e

    if not quiet:
        _print_results([(name or str(root), result)])
    print_success(f"Removed {result.removed_count} path(s) from {result.root}")


@app.command()
def vendor(
    ctx: typer.Context,
    vendor_dir: Annotated[
        Path,
        typer.Argument(help="Vendor directory holding one directory per project."),
    ] = Path("vendor"),
    lock_path: Annotated[
        Path,
        typer.Option("--lock", "-l", help="Lock file listing projects and used packages."),
    ] = Path(DEFAULT_LOCK_NAME),
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Prune configuration file."),
    ] = None,
) -> None:
    """Prune every locked project inside a vendor directory.

    Each project is pruned under VENDOR_DIR/<name> with the options
    resolved from the configuration file. The first failure stops the
    run; projects pruned before it stay pruned.

    Examples:
        vendorprune prune vendor
        vendorprune prune vendor ./vendor --lock Gopkg.lock --config prune.toml
    """
    quiet = _is_quiet(ctx)

    try:
        lock = load_lock(lock_path)
    except LockError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    config = _load_config(config_path)

    if not vendor_dir.is_dir():
        print_error(f"Vendor directory not found: {vendor_dir}")
        raise typer.Exit(code=1)

    if not lock.projects:
        print_info("No projects in lock file.")
        return

    engine = PruneEngine()
    results: list[tuple[str, PruneResult]] = []

    for locked in lock.projects:
        project_dir = vendor_dir.joinpath(*locked.name.split("/"))
        if not project_dir.is_dir():
            print_warning(f"Skipping {locked.name}: {project_dir} does not exist")
            continue

        options = config.prune.options_for(locked.name)
        try:
            results.append((locked.name, engine.prune(project_dir, locked.packages, options)))
        except PruneError as e:
            _report_failure(locked.name, e)
            raise typer.Exit(code=1) from e

    if not quiet and results:
        _print_results(results)

    total = sum(r.removed_count for _, r in results)
    print_success(f"Pruned {len(results)} project(s), removed {total} path(s).")


# === Private helper functions ===


def _is_quiet(ctx: typer.Context) -> bool:
    """Read the global --quiet flag."""
    return bool(ctx.obj and ctx.obj.get("quiet"))


def _load_config(config_path: Path | None) -> Config:
    """Load the prune configuration or exit with an error."""
    try:
        return resolve_config(config_path)
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e


def _report_failure(project_name: str, error: PruneError) -> None:
    """Print a pruning failure, naming the failed stage when known."""
    if isinstance(error, StageError):
        print_error(f"{project_name}: stage '{error.stage.value}' failed: {error.cause}")
    else:
        print_error(f"{project_name}: {error}")
    print_warning("Paths removed before the failure were not restored.")


def _print_results(results: list[tuple[str, PruneResult]]) -> None:
    """Display prune results as a Rich table."""
    table = create_table("Prune Results")
    table.add_column("Project", no_wrap=True)
    table.add_column("Policies", style="muted")
    table.add_column("Removed", justify="right")
    table.add_column("Unused pkgs", justify="right")

    for project_name, result in results:
        unused = "-" if result.unused_packages is None else str(len(result.unused_packages))
        table.add_row(
            project_name,
            result.options.describe(),
            f"[removed]{result.removed_count}[/]",
            unused,
        )

    console.print(table)
