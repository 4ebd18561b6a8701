# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/devbootstrap/cli/options.py
#   project      : devbootstrap
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config discovery,
output format) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from devbootstrap.cli.cli_types import EnumChoiceParam
from devbootstrap.cli.color import ColorMode
from devbootstrap.cli.errors import DevBootstrapUsageError
from devbootstrap.cli.keys import ArgKey, CliOpt
from devbootstrap.core.keys import STEP_NAMES
from devbootstrap.rendering.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by groups and commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}

# Program-output verbosity is clamped to this range
MAX_VERBOSITY: int = 2


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        Verbosity in ``-2..2``: 0 is the default, positive values show more
        (e.g. the commands each step runs), negative values show less.

    Raises:
        DevBootstrapUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DevBootstrapUsageError(
            f"The '{CliOpt.VERBOSE}' and '{CliOpt.QUIET}' options are mutually exclusive."
        )
    if verbose_count > 0:
        return min(verbose_count, MAX_VERBOSITY)
    return -min(quiet_count, MAX_VERBOSITY)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        "verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        CliOpt.QUIET,
        "quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        CliOpt.COLOR_MODE,
        ArgKey.COLOR_MODE,
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        CliOpt.NO_COLOR_MODE,
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add project-root and config discovery options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        CliOpt.ROOT,
        ArgKey.ROOT,
        type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
        default=None,
        help="Project root to provision (default: current directory).",
    )(f)
    f = click.option(
        CliOpt.CONFIG_PATHS,
        ArgKey.CONFIG_PATHS,
        type=click.Path(dir_okay=False, path_type=Path),
        multiple=True,
        help="Extra TOML config file(s), applied after discovered ones.",
    )(f)
    f = click.option(
        CliOpt.NO_CONFIG,
        ArgKey.NO_CONFIG,
        is_flag=True,
        help="Ignore pyproject.toml and devbootstrap.toml in the project root.",
    )(f)
    return f


def skip_steps_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the repeatable --skip STEP option."""
    return click.option(
        CliOpt.SKIP_STEPS,
        ArgKey.SKIP_STEPS,
        type=click.Choice(STEP_NAMES),
        multiple=True,
        help="Skip a step (repeatable).",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --output-format option."""
    return click.option(
        CliOpt.OUTPUT_FORMAT,
        ArgKey.OUTPUT_FORMAT,
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
