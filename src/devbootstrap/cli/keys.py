# topmark:header:start
#
#   project      : devbootstrap
#   file         : keys.py
#   file_relpath : src/devbootstrap/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI command names, option spellings and argument keys.

Design notes:
    - CLI option spellings (``CliOpt``) are user-facing and should be changed with care.
    - Argument destination keys (``ArgKey``) form the internal contract between
      Click parsing and downstream logic (config application, pipeline execution).
    - Neither class should contain behavior; they are pure namespaces for constants.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the devbootstrap CLI."""

    SETUP: Final[str] = "setup"
    PLAN: Final[str] = "plan"
    STEPS: Final[str] = "steps"
    CONFIG: Final[str] = "config"
    CONFIG_INIT: Final[str] = "init"
    CONFIG_DUMP: Final[str] = "dump"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings (values include the leading ``--``)."""

    # Config discovery
    ROOT: Final[str] = "--root"
    CONFIG_PATHS: Final[str] = "--config"
    NO_CONFIG: Final[str] = "--no-config"

    # Pipeline control
    SKIP_STEPS: Final[str] = "--skip"

    # Output
    OUTPUT_FORMAT: Final[str] = "--output-format"
    CONFIG_FOR_PYPROJECT: Final[str] = "--pyproject"

    # Logging / UX
    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"
    COLOR_MODE: Final[str] = "--color"
    NO_COLOR_MODE: Final[str] = "--no-color"


class ArgKey:
    """Canonical argument keys (Click ``dest`` names and ``ctx.obj`` keys)."""

    # Config discovery
    ROOT: Final[str] = "root"
    CONFIG_PATHS: Final[str] = "config_paths"
    NO_CONFIG: Final[str] = "no_config"

    # Pipeline control
    SKIP_STEPS: Final[str] = "skip_steps"

    # Output
    OUTPUT_FORMAT: Final[str] = "output_format"
    CONFIG_FOR_PYPROJECT: Final[str] = "pyproject"

    # Logging / UX (ctx.obj)
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
    LOG_LEVEL: Final[str] = "log_level"
    COLOR_ENABLED: Final[str] = "color_enabled"
    COLOR_MODE: Final[str] = "color_mode"
    CONSOLE: Final[str] = "console"

    # Test seam (ctx.obj): a CommandRunner replacing the subprocess runner
    RUNNER: Final[str] = "runner"
