# topmark:header:start
#
#   project      : devbootstrap
#   file         : __init__.py
#   file_relpath : src/devbootstrap/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic building blocks shared by the pipeline and the CLI.

Nothing in this package imports Click; the CLI layer wraps these types at its
boundary.
"""

from __future__ import annotations
