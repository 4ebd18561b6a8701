# topmark:header:start
#
#   project      : devbootstrap
#   file         : color.py
#   file_relpath : src/devbootstrap/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution based on CLI flags, environment, and output format.

Click-free on purpose so the logic is unit-testable in isolation.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. Machine formats (``json``/``ndjson``) never use color.
        2. CLI override: ``ALWAYS`` → True; ``NEVER`` → False.
        3. Environment: ``FORCE_COLOR`` (set, not ``"0"``) → True; ``NO_COLOR`` → False.
        4. Auto: ``stdout.isatty()``.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value, or None.
        output_format (str | None): Output format value, if known.
        stdout_isatty (bool | None): Override for TTY detection (tests).

    Returns:
        bool: True if ANSI color should be enabled.
    """
    if output_format and output_format.lower() in {"json", "ndjson"}:
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
