# topmark:header:start
#
#   project      : devbootstrap
#   file         : __init__.py
#   file_relpath : src/devbootstrap/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the devbootstrap CLI."""

from __future__ import annotations
