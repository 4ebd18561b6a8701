# topmark:header:start
#
#   project      : devbootstrap
#   file         : setup.py
#   file_relpath : src/devbootstrap/cli/commands/setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap `setup` command.

Provisions the development environment: package manager, dependencies,
pre-commit hooks, secrets baseline, test directories. This is also what a bare
``devbootstrap`` invocation runs.

Exit codes:
    SUCCESS (0): All steps succeeded (or were already satisfied).
    CONFIG_ERROR (78): Invalid configuration.
    TOOL_UNAVAILABLE (69): A required tool is missing and could not be installed.
    IO_ERROR (74) / PERMISSION_DENIED (77): A file or directory could not be written.
    <n>: A command run by a step exited with status ``n``; the pipeline stopped there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from devbootstrap.cli.cmd_common import execute_pipeline, resolve_config_from_click
from devbootstrap.cli.keys import CliCmd
from devbootstrap.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    output_format_option,
    skip_steps_option,
)
from devbootstrap.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from devbootstrap.config import Config


@click.command(
    name=CliCmd.SETUP,
    help="Provision the development environment (the default command).",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@skip_steps_option
@output_format_option
def setup_command(
    *,
    root: Path | None = None,
    config_paths: tuple[Path, ...] = (),
    no_config: bool = False,
    skip_steps: tuple[str, ...] = (),
    output_format: OutputFormat | None = None,
) -> None:
    """Run every provisioning step in order, stopping at the first failure.

    Args:
        root (Path | None): Project root (default: current directory).
        config_paths (tuple[Path, ...]): Extra config files.
        no_config (bool): Ignore config files discovered in the project root.
        skip_steps (tuple[str, ...]): Steps to skip.
        output_format (OutputFormat | None): Output format (default: human text).
    """
    ctx: click.Context = click.get_current_context()
    config: Config = resolve_config_from_click(
        ctx,
        root=root,
        config_paths=config_paths,
        no_config=no_config,
        skip_steps=skip_steps,
    )
    execute_pipeline(ctx, config, dry_run=False, fmt=output_format or OutputFormat.DEFAULT)
