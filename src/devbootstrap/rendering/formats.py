# topmark:header:start
#
#   project      : devbootstrap
#   file         : formats.py
#   file_relpath : src/devbootstrap/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats for CLI rendering."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON object with the overall outcome and per-step results.
      NDJSON: One JSON object per step (newline-delimited JSON).
      MARKDOWN: A Markdown table of step results.

    Notes:
      - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color or banners.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"

    @property
    def is_machine(self) -> bool:
        """Whether this format is meant for programs rather than people."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)
