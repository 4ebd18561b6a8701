# topmark:header:start
#
#   project      : devbootstrap
#   file         : constants.py
#   file_relpath : src/devbootstrap/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DEVBOOTSTRAP_VERSION: str = get_version("devbootstrap")

# Name of the bundled default config inside the package `devbootstrap.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "devbootstrap.config"
DEFAULT_TOML_CONFIG_NAME: str = "devbootstrap-default.toml"

# Per-project config files discovered in the project root
PROJECT_CONFIG_NAME: str = "devbootstrap.toml"
PYPROJECT_NAME: str = "pyproject.toml"

HEADER_END_MARKER: str = "topmark:header:end"
