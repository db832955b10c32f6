"""Check command implementation.

Shows how the file-type and preservation rules classify file names,
without touching the filesystem.
"""

from typing import Annotated

import typer

from vendorprune.prune.filters import GO_TEST_SUFFIX, file_ext, is_go_build_file
from vendorprune.prune.preserved import is_preserved_file
from vendorprune.utils.formatting import console, create_table


def check_names(
    names: Annotated[
        list[str],
        typer.Argument(help="File names or paths to classify."),
    ],
) -> None:
    """Show which prune policies would remove each file name.

    Examples:
        vendorprune check LICENSE.md main.go foo_test.go README.md
    """
    table = create_table("File Classification")
    table.add_column("Name", no_wrap=True)
    table.add_column("Ext", style="muted")
    table.add_column("Build", justify="center")
    table.add_column("Preserved", justify="center")
    table.add_column("non-go", justify="center")
    table.add_column("go-tests", justify="center")

    for name in names:
        build = is_go_build_file(name)
        preserved = is_preserved_file(name)
        table.add_row(
            name,
            file_ext(name) or "-",
            _yes_no(build),
            _yes_no(preserved),
            _verdict(not build and not preserved),
            _verdict(name.endswith(GO_TEST_SUFFIX)),
        )

    console.print(table)


def _yes_no(value: bool) -> str:
    return "yes" if value else "[muted]no[/]"


def _verdict(removed: bool) -> str:
    return "[removed]remove[/]" if removed else "[kept]keep[/]"
