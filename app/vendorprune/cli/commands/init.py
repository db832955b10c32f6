"""Init command implementation.

Creates a prune configuration file with default settings.
"""

from pathlib import Path
from typing import Annotated

import typer

from vendorprune.core.config import ConfigError, save_config
from vendorprune.core.paths import get_project_config_path
from vendorprune.models.config import Config, PruneConfig
from vendorprune.utils.formatting import print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Create a prune configuration file.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the configuration file.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing configuration file.",
        ),
    ] = False,
    all_policies: Annotated[
        bool,
        typer.Option(
            "--all",
            help="Enable every prune policy in the generated file.",
        ),
    ] = False,
) -> None:
    """Write a prune configuration file.

    Examples:
        vendorprune init                 # ./vendorprune.toml with defaults
        vendorprune init --all           # enable every policy
        vendorprune init -o prune.toml   # custom path
    """
    if ctx.invoked_subcommand is not None:
        return

    output_path = output or get_project_config_path()

    if output_path.exists():
        if not force:
            print_error(f"Config already exists: {output_path}")
            print_info("Use --force to overwrite or specify a different path with --output.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing config: {output_path}")

    prune = PruneConfig()
    if all_policies:
        prune = PruneConfig(nested_vendor=True, unused_packages=True, non_go=True, go_tests=True)

    try:
        saved_path = save_config(Config(prune=prune), output_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config created: {saved_path}")
