# topmark:header:start
#
#   project      : devbootstrap
#   file         : version.py
#   file_relpath : src/devbootstrap/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap `version` command.

Prints the current devbootstrap version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from devbootstrap.cli.cmd_common import get_console, get_effective_verbosity
from devbootstrap.cli.keys import CliCmd
from devbootstrap.cli.options import output_format_option
from devbootstrap.constants import DEVBOOTSTRAP_VERSION
from devbootstrap.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from devbootstrap.cli.console import ConsoleLike


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of devbootstrap.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of devbootstrap.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": DEVBOOTSTRAP_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# devbootstrap Version\n")
        console.print(f"**devbootstrap version: {DEVBOOTSTRAP_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("devbootstrap version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DEVBOOTSTRAP_VERSION, bold=True)}")
    else:
        console.print(console.styled(DEVBOOTSTRAP_VERSION, bold=True))
