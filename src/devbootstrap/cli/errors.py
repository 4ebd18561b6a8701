# topmark:header:start
#
#   project      : devbootstrap
#   file         : errors.py
#   file_relpath : src/devbootstrap/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the devbootstrap CLI.

Usage:
    Commands convert pipeline/config errors (`devbootstrap.core.errors`) into
    these Click exceptions so that Click prints the message and exits with the
    mapped code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from devbootstrap.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from devbootstrap.core.errors import BootstrapError


class DevBootstrapError(click.ClickException):
    """Base class for all devbootstrap CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    @classmethod
    def from_bootstrap_error(cls, exc: BootstrapError) -> DevBootstrapError:
        """Wrap a pipeline/config error, keeping its exit code."""
        message: str = f"{exc.step}: {exc.message}" if exc.step else exc.message
        return cls(message, exit_code=exc.exit_code)

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class DevBootstrapUsageError(DevBootstrapError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DevBootstrapConfigError(DevBootstrapError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
