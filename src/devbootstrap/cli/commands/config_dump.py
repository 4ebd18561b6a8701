# topmark:header:start
#
#   project      : devbootstrap
#   file         : config_dump.py
#   file_relpath : src/devbootstrap/cli/commands/config_dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap `config dump` command.

Prints the effective configuration (defaults merged with every discovered and
explicit config file) as TOML. With ``-v``, the contributing sources are listed
first as TOML comments, so the output stays valid TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from devbootstrap.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    resolve_config_from_click,
)
from devbootstrap.cli.options import common_config_options

if TYPE_CHECKING:
    from pathlib import Path

    from devbootstrap.cli.console import ConsoleLike
    from devbootstrap.config import Config


@click.command(
    help="Show the effective merged configuration as TOML.",
)
@common_config_options
def config_dump_command(
    *,
    root: Path | None = None,
    config_paths: tuple[Path, ...] = (),
    no_config: bool = False,
) -> None:
    """Dump the merged configuration.

    Args:
        root (Path | None): Project root (default: current directory).
        config_paths (tuple[Path, ...]): Extra config files.
        no_config (bool): Ignore config files discovered in the project root.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config_from_click(
        ctx,
        root=root,
        config_paths=config_paths,
        no_config=no_config,
    )

    if get_effective_verbosity(ctx) > 0:
        console.print(f"# root: {config.root}")
        for source in config.config_files:
            console.print(f"# source: {source}")
        console.print()
    console.print(config.to_toml().rstrip("\n"))
