# topmark:header:start
#
#   project      : devbootstrap
#   file         : config_init.py
#   file_relpath : src/devbootstrap/cli/commands/config_init.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap `config init` command.

Prints a starter configuration file to stdout, using the annotated default
TOML template bundled with the package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from devbootstrap.cli.cmd_common import get_console
from devbootstrap.cli.errors import DevBootstrapConfigError
from devbootstrap.cli.keys import ArgKey, CliOpt
from devbootstrap.config.loaders import load_default_config_text, nest_toml_under_section
from devbootstrap.config.logging import get_logger
from devbootstrap.core.errors import ConfigError

if TYPE_CHECKING:
    from devbootstrap.cli.console import ConsoleLike
    from devbootstrap.config.logging import DevBootstrapLogger

logger: DevBootstrapLogger = get_logger(__name__)

PYPROJECT_SECTION: str = "tool.devbootstrap"


@click.command(
    help="Print a starter devbootstrap configuration file.",
)
@click.option(
    CliOpt.CONFIG_FOR_PYPROJECT,
    ArgKey.CONFIG_FOR_PYPROJECT,
    is_flag=True,
    help="Generate config for inclusion in pyproject.toml ([tool.devbootstrap]).",
)
def config_init_command(*, pyproject: bool = False) -> None:
    """Print the annotated default configuration.

    Args:
        pyproject (bool): If True, nest the content under ``[tool.devbootstrap]``.

    Raises:
        DevBootstrapConfigError: If the packaged template cannot be read.
    """
    console: ConsoleLike = get_console(click.get_current_context())
    try:
        toml_text: str = load_default_config_text()
        if pyproject:
            toml_text = nest_toml_under_section(toml_text, PYPROJECT_SECTION)
    except ConfigError as exc:
        raise DevBootstrapConfigError.from_bootstrap_error(exc) from exc

    console.print(toml_text.rstrip("\n"))
