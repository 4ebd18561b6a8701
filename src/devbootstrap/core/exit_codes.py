# topmark:header:start
#
#   project      : devbootstrap
#   file         : exit_codes.py
#   file_relpath : src/devbootstrap/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for devbootstrap.

devbootstrap aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
`WOULD_CHANGE=2`, used by `devbootstrap plan` to signal that provisioning work is
pending. Tests must assert `result.exception is None` to disambiguate this from
Click's own usage errors (which also default to 2).

A failing external command does not map onto any member: its own return code is
propagated as-is (see `clamp_exit_code`).
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for devbootstrap.

    Attributes:
        SUCCESS: The environment is provisioned (or nothing is pending in plan mode).
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Plan mode: at least one step would run.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        TOOL_UNAVAILABLE: A required executable is missing and could not be
            installed. Mirrors BSD ``EX_UNAVAILABLE (69)``.
        SOFTWARE_ERROR: Internal contract violation. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error writing a file or directory. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid/malformed configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    TOOL_UNAVAILABLE = 69  # EX_UNAVAILABLE
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255


def clamp_exit_code(returncode: int) -> int:
    """Map a child process return code onto a valid, non-zero process exit status.

    Negative return codes (child killed by a signal) and codes outside the
    ``1..255`` range collapse to ``ExitCode.FAILURE`` so that a failure is never
    reported as success.

    Args:
        returncode (int): Return code reported by ``subprocess``.

    Returns:
        int: An exit status in ``1..255``.
    """
    if 1 <= returncode <= 255:
        return returncode
    return int(ExitCode.FAILURE)
