# topmark:header:start
#
#   project      : devbootstrap
#   file         : keys.py
#   file_relpath : src/devbootstrap/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for devbootstrap configuration.

These constants define the external configuration schema as it appears in
``devbootstrap.toml`` and in ``[tool.devbootstrap]`` inside ``pyproject.toml``.
Their ordering mirrors ``devbootstrap-default.toml``.

Notes:
    - Values must match user-facing TOML keys exactly.
    - Renaming or removing a key is a breaking change.
    - CLI keys are defined separately in `devbootstrap.cli.keys`.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by devbootstrap configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_DEVBOOTSTRAP: Final[str] = "devbootstrap"

    # [toolchain]
    KEY_PACKAGE_MANAGER: Final[str] = "package_manager"
    KEY_INSTALLER_URL: Final[str] = "installer_url"
    KEY_INSTALLER_BIN_DIRS: Final[str] = "installer_bin_dirs"

    # [sync]
    KEY_SYNC_ARGS: Final[str] = "sync_args"

    # [hooks]
    KEY_HOOK_TYPES: Final[str] = "hook_types"

    # [secrets]
    KEY_SECRETS_BASELINE: Final[str] = "secrets_baseline"
    KEY_SECRETS_SCAN_ARGS: Final[str] = "secrets_scan_args"

    # [scaffold]
    KEY_TEST_DIRS: Final[str] = "test_dirs"

    # pipeline control
    KEY_SKIP_STEPS: Final[str] = "skip_steps"

    # summary
    KEY_QUICK_COMMANDS: Final[str] = "quick_commands"
    KEY_COMMAND: Final[str] = "command"
    KEY_DESCRIPTION: Final[str] = "description"


STRING_KEYS: Final[frozenset[str]] = frozenset(
    {
        Toml.KEY_PACKAGE_MANAGER,
        Toml.KEY_INSTALLER_URL,
        Toml.KEY_SECRETS_BASELINE,
    }
)

STRING_LIST_KEYS: Final[frozenset[str]] = frozenset(
    {
        Toml.KEY_INSTALLER_BIN_DIRS,
        Toml.KEY_SYNC_ARGS,
        Toml.KEY_HOOK_TYPES,
        Toml.KEY_SECRETS_SCAN_ARGS,
        Toml.KEY_TEST_DIRS,
        Toml.KEY_SKIP_STEPS,
    }
)

KNOWN_KEYS: Final[frozenset[str]] = STRING_KEYS | STRING_LIST_KEYS | {Toml.KEY_QUICK_COMMANDS}
