# topmark:header:start
#
#   project      : devbootstrap
#   file         : errors.py
#   file_relpath : src/devbootstrap/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the provisioning pipeline and the config layer.

These are plain exceptions (no Click dependency). The CLI converts them into
`devbootstrap.cli.errors.DevBootstrapError` at its boundary, preserving the
exit code.
"""

from __future__ import annotations

from devbootstrap.core.exit_codes import ExitCode, clamp_exit_code


class BootstrapError(Exception):
    """Base class for all devbootstrap errors.

    Attributes:
        message (str): Human-readable description of the failure.
        exit_code (int): Process exit status to report.
        step (str | None): Name of the step that failed, if any.
    """

    default_exit_code: int = ExitCode.FAILURE

    def __init__(self, message: str, *, step: str | None = None, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.step = step
        self.exit_code = int(exit_code if exit_code is not None else self.default_exit_code)


class StepFailedError(BootstrapError):
    """An external command run by a step returned a non-zero status.

    The exit code is the command's own return code (clamped to ``1..255``).
    """

    def __init__(self, message: str, *, step: str | None = None, returncode: int = 1):
        super().__init__(message, step=step, exit_code=clamp_exit_code(returncode))
        self.returncode = returncode


class ToolUnavailableError(BootstrapError):
    """A required executable is not on PATH (and could not be installed)."""

    default_exit_code = ExitCode.TOOL_UNAVAILABLE


class ConfigError(BootstrapError):
    """Configuration is missing, malformed, or has values of the wrong type."""

    default_exit_code = ExitCode.CONFIG_ERROR


class ScaffoldError(BootstrapError):
    """A filesystem write (directory or baseline file) failed."""

    default_exit_code = ExitCode.IO_ERROR

    @classmethod
    def from_os_error(cls, exc: OSError, *, step: str | None = None) -> ScaffoldError:
        """Build an error from an ``OSError``, mapping permission problems to EX_NOPERM."""
        code = ExitCode.PERMISSION_DENIED if isinstance(exc, PermissionError) else ExitCode.IO_ERROR
        target = exc.filename if exc.filename is not None else "<unknown>"
        return cls(f"Cannot write {target}: {exc.strerror or exc}", step=step, exit_code=code)
