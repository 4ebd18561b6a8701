# topmark:header:start
#
#   project      : devbootstrap
#   file         : config.py
#   file_relpath : src/devbootstrap/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap `config` command group.

  * ``devbootstrap config init``: print a starter configuration file.
  * ``devbootstrap config dump``: show the effective merged configuration.
"""

from __future__ import annotations

import click

from devbootstrap.cli.keys import CliCmd
from devbootstrap.cli.options import CONTEXT_SETTINGS

from .config_dump import config_dump_command
from .config_init import config_init_command


@click.group(
    name=CliCmd.CONFIG,
    help="Inspect and scaffold devbootstrap configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""
    # No-op: behavior is provided by subcommands only.


config_command.add_command(config_init_command, name=CliCmd.CONFIG_INIT)
config_command.add_command(config_dump_command, name=CliCmd.CONFIG_DUMP)
