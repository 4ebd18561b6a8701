# topmark:header:start
#
#   project      : devbootstrap
#   file         : __init__.py
#   file_relpath : src/devbootstrap/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""devbootstrap package.

devbootstrap provisions a local development checkout in one idempotent,
fail-fast run: it installs the package manager if needed, syncs dependencies,
registers pre-commit hooks, creates a detect-secrets baseline, and scaffolds the
test directory layout. It exposes a Click CLI (``devbootstrap``) and the
underlying pipeline (`devbootstrap.steps`) for automation.
"""

from __future__ import annotations
