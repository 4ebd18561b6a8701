# topmark:header:start
#
#   project      : devbootstrap
#   file         : plan.py
#   file_relpath : src/devbootstrap/cli/commands/plan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap `plan` command.

Shows what ``setup`` would do without running any command or touching the
filesystem.

Exit codes:
    SUCCESS (0): Nothing to do; the environment is provisioned.
    WOULD_CHANGE (2): At least one step would run.
    CONFIG_ERROR (78): Invalid configuration.
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
from devbootstrap.core.exit_codes import ExitCode
from devbootstrap.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from devbootstrap.config import Config


@click.command(
    name=CliCmd.PLAN,
    help="Show what 'setup' would do, without doing it.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@skip_steps_option
@output_format_option
def plan_command(
    *,
    root: Path | None = None,
    config_paths: tuple[Path, ...] = (),
    no_config: bool = False,
    skip_steps: tuple[str, ...] = (),
    output_format: OutputFormat | None = None,
) -> None:
    """Preview the provisioning steps.

    Note:
        Steps after ``toolchain`` are planned as if the package manager were
        available, since installing it is part of the plan.

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
    exit_code: int = execute_pipeline(
        ctx, config, dry_run=True, fmt=output_format or OutputFormat.DEFAULT
    )
    if exit_code == ExitCode.WOULD_CHANGE:
        ctx.exit(ExitCode.WOULD_CHANGE)
