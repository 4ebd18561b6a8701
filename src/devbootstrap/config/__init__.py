# topmark:header:start
#
#   project      : devbootstrap
#   file         : __init__.py
#   file_relpath : src/devbootstrap/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for devbootstrap.

Re-exports the configuration model so callers can write
``from devbootstrap.config import Config, MutableConfig``.
"""

from __future__ import annotations

from devbootstrap.config.model import Config, MutableConfig, QuickCommand

__all__ = [
    "Config",
    "MutableConfig",
    "QuickCommand",
]
