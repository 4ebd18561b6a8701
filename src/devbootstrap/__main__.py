# topmark:header:start
#
#   project      : devbootstrap
#   file         : __main__.py
#   file_relpath : src/devbootstrap/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running devbootstrap via ``python -m devbootstrap``.

Delegates directly to :func:`devbootstrap.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how devbootstrap is launched.

Examples:
    Provision the current checkout::

        python -m devbootstrap
"""

from __future__ import annotations

from devbootstrap.cli.main import cli

if __name__ == "__main__":
    cli()
