# topmark:header:start
#
#   project      : devbootstrap
#   file         : steps.py
#   file_relpath : src/devbootstrap/cli/commands/steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap `steps` command.

Lists the provisioning steps in execution order.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from devbootstrap.cli.cmd_common import get_console
from devbootstrap.cli.keys import CliCmd
from devbootstrap.cli.options import CONTEXT_SETTINGS, output_format_option
from devbootstrap.rendering.formats import OutputFormat
from devbootstrap.steps import build_pipeline

if TYPE_CHECKING:
    from devbootstrap.cli.console import ConsoleLike
    from devbootstrap.steps.base import BaseStep


@click.command(
    name=CliCmd.STEPS,
    help="List the provisioning steps in execution order.",
    context_settings=CONTEXT_SETTINGS,
)
@output_format_option
def steps_command(*, output_format: OutputFormat | None = None) -> None:
    """List step names and descriptions.

    Args:
        output_format (OutputFormat | None): Output format (default: human text).
    """
    console: ConsoleLike = get_console(click.get_current_context())
    steps: list[BaseStep] = build_pipeline()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(
            json.dumps([{"step": s.name, "description": s.description} for s in steps], indent=2)
        )
    elif fmt == OutputFormat.NDJSON:
        for s in steps:
            console.print(json.dumps({"step": s.name, "description": s.description}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Provisioning Steps")
        console.print()
        console.print("| # | Step | Description |")
        console.print("| - | ---- | ----------- |")
        for i, s in enumerate(steps, start=1):
            console.print(f"| {i} | {s.name} | {s.description} |")
    else:
        width: int = max(len(s.name) for s in steps)
        for i, s in enumerate(steps, start=1):
            name: str = console.styled(f"{s.name:<{width}}", bold=True)
            console.print(f"{i}. {name}  {s.description}")
