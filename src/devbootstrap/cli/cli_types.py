# topmark:header:start
#
#   project      : devbootstrap
#   file         : cli_types.py
#   file_relpath : src/devbootstrap/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import click
from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Click parameter type mapping a case-insensitive string onto a member of ``enum_cls``.

    Members are matched by their ``value`` (e.g. ``"json"`` for `OutputFormat.JSON`).
    Values that already are members pass through, so defaults may be given as enums.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted spellings, in declaration order."""
        return [str(m.value) for m in self.enum_cls]

    def get_metavar(self, param: click.Parameter, *args: Any, **kwargs: Any) -> str:
        """Render ``[a|b|c]`` in help output, like `click.Choice`."""
        return f"[{'|'.join(self.choices)}]"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the enum member for ``value``.

        Raises:
            click.BadParameter: If ``value`` names no member (via `click.ParamType.fail`).
        """
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self._by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete enum values case-insensitively.

        Bash: `eval "$(_DEVBOOTSTRAP_COMPLETE=bash_source devbootstrap)"`
        """
        prefix: str = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
