# topmark:header:start
#
#   project      : devbootstrap
#   file         : loaders.py
#   file_relpath : src/devbootstrap/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading devbootstrap configuration from:
- the packaged default TOML template, and
- on-disk TOML files (``devbootstrap.toml`` / ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from devbootstrap.config.keys import Toml
from devbootstrap.config.logging import get_logger
from devbootstrap.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    HEADER_END_MARKER,
)
from devbootstrap.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from devbootstrap.config.logging import DevBootstrapLogger

TomlTable = dict[str, Any]

logger: DevBootstrapLogger = get_logger(__name__)


def load_default_config_text() -> str:
    """Return the bundled annotated default configuration as TOML text.

    The file header block (everything up to the header end marker) is removed so
    the output starts at the actual template content.

    Raises:
        ConfigError: If the packaged template cannot be read.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        toml_text: str = resource.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read packaged default config {resource}: {exc}") from exc

    lines: list[str] = toml_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == f"# {HEADER_END_MARKER}":
            return "".join(lines[i + 1 :]).lstrip("\n")
    return toml_text


def parse_toml_text(text: str, *, source: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document.
        source (str): Where the text came from (used in error messages).

    Returns:
        TomlTable: The parsed top-level table.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {source}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any)


def load_defaults_dict() -> TomlTable:
    """Return the packaged defaults as a plain dict."""
    return parse_toml_text(load_default_config_text(), source=DEFAULT_TOML_CONFIG_NAME)


def load_toml_dict(path: Path) -> TomlTable:
    """Load a TOML file from disk.

    Args:
        path (Path): File to read.

    Returns:
        TomlTable: The parsed top-level table.

    Raises:
        ConfigError: If the file is unreadable or not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    logger.debug("Loaded config file %s", path)
    return parse_toml_text(text, source=str(path))


def extract_pyproject_table(data: Mapping[str, Any], *, source: str) -> TomlTable | None:
    """Return the ``[tool.devbootstrap]`` table of a parsed ``pyproject.toml``.

    Returns None when the table is absent.

    Raises:
        ConfigError: If ``tool`` or ``tool.devbootstrap`` exists but is not a table.
    """
    tool_any: Any = data.get(Toml.SECTION_TOOL)
    if tool_any is None:
        return None
    if not isinstance(tool_any, dict):
        raise ConfigError(f"{source}: 'tool' must be a table")
    section_any: Any = cast("TomlTable", tool_any).get(Toml.SECTION_DEVBOOTSTRAP)
    if section_any is None:
        return None
    if not isinstance(section_any, dict):
        raise ConfigError(f"{source}: 'tool.devbootstrap' must be a table")
    return cast("TomlTable", section_any)


def nest_toml_under_section(toml_text: str, section: str) -> str:
    """Wrap a TOML document under a dotted section path.

    Leading comments (the preamble) stay at the top of the new document; all
    keyed content moves under the target section (e.g. ``tool.devbootstrap`` for
    inclusion in ``pyproject.toml``).

    Args:
        toml_text (str): TOML document.
        section (str): Dotted section path.

    Returns:
        str: The nested TOML document.

    Raises:
        ConfigError: If ``toml_text`` is not valid TOML.
        ValueError: If ``section`` has no non-empty component.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Error parsing TOML document: {exc}") from exc

    keys: list[str] = [k for k in section.split(".") if k]
    if not keys:
        raise ValueError("section must contain at least one non-empty component")

    start_index: int = len(doc.body)
    for i, (key, _) in enumerate(doc.body):
        if key is not None:
            start_index = i
            break

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    new_doc.body.extend(doc.body[0:start_index])

    current_level: tomlkit.TOMLDocument | Table = new_doc
    for key in keys:
        current_level.add(key, tomlkit.table())
        next_level: Any = current_level[key]
        if not isinstance(next_level, Table):
            raise ConfigError(
                f"Cannot nest configuration under [{section}]: [{key}] is not a table"
            )
        current_level = next_level

    for item_key, item_value in doc.items():
        current_level.add(item_key, item_value)

    return new_doc.as_string()


def to_toml(table: Mapping[str, Any]) -> str:
    """Serialize a TOML mapping to a string."""
    return tomlkit.dumps(table)
