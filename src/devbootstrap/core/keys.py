# topmark:header:start
#
#   project      : devbootstrap
#   file         : keys.py
#   file_relpath : src/devbootstrap/core/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical pipeline step names.

Step names are part of the external contract: they appear in ``skip_steps``
(config), ``--skip`` (CLI) and in machine-readable output. Renaming one is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class StepName:
    """Names of the provisioning steps, in execution order."""

    TOOLCHAIN: Final[str] = "toolchain"
    SYNC: Final[str] = "sync"
    HOOKS: Final[str] = "hooks"
    SECRETS: Final[str] = "secrets"
    SCAFFOLD: Final[str] = "scaffold"


STEP_NAMES: Final[tuple[str, ...]] = (
    StepName.TOOLCHAIN,
    StepName.SYNC,
    StepName.HOOKS,
    StepName.SECRETS,
    StepName.SCAFFOLD,
)
