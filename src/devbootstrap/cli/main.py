# topmark:header:start
#
#   project      : devbootstrap
#   file         : main.py
#   file_relpath : src/devbootstrap/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap CLI entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once, placed into ``ctx.obj``.
- Invoking the group without a subcommand runs ``setup`` with its defaults, so
  a bare ``devbootstrap`` provisions the current directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from devbootstrap.cli.color import ColorMode, resolve_color_mode
from devbootstrap.cli.commands.config import config_command
from devbootstrap.cli.commands.plan import plan_command
from devbootstrap.cli.commands.setup import setup_command
from devbootstrap.cli.commands.steps import steps_command
from devbootstrap.cli.commands.version import version_command
from devbootstrap.cli.console import ClickConsole
from devbootstrap.cli.keys import ArgKey
from devbootstrap.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from devbootstrap.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from devbootstrap.config.logging import DevBootstrapLogger

logger: DevBootstrapLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Values already present in ``ctx.obj`` (e.g. a test-injected runner) are kept.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj[ArgKey.VERBOSITY_LEVEL] = resolve_verbosity(verbose, quiet)

    # Internal diagnostics logging is configured from the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj[ArgKey.LOG_LEVEL] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    enable_color: bool = resolve_color_mode(
        color_mode_override=effective_color_mode,
        output_format=None,
    )
    ctx.obj[ArgKey.COLOR_ENABLED] = enable_color
    ctx.color = enable_color

    ctx.obj[ArgKey.CONSOLE] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Bootstrap a local development environment.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the devbootstrap CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        logger.debug("No subcommand given; running '%s'", setup_command.name)
        ctx.invoke(setup_command)


cli.add_command(setup_command)

cli.add_command(plan_command)

cli.add_command(steps_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
