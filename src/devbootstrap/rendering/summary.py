# topmark:header:start
#
#   project      : devbootstrap
#   file         : summary.py
#   file_relpath : src/devbootstrap/rendering/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render pipeline results.

Presentation-only helpers: they turn `StepResult` lists into text lines or
JSON-ready payloads and never write to a stream themselves. The CLI decides
where the output goes.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final

from devbootstrap.steps.status import StepStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

    from devbootstrap.config import Config
    from devbootstrap.steps.status import StepResult

READY_BANNER: Final[str] = "Development environment ready!"

STATUS_MARKERS: Final[dict[StepStatus, str]] = {
    StepStatus.PENDING: " ",
    StepStatus.DONE: "✓",
    StepStatus.SKIPPED: "•",
    StepStatus.DISABLED: "-",
    StepStatus.WOULD_RUN: "→",
    StepStatus.FAILED: "✗",
}

# Width of the step-name column (longest step name is "toolchain")
NAME_WIDTH: Final[int] = 9


def format_step_line(result: StepResult, *, color: bool, show_commands: bool = False) -> str:
    """Return a one-line (or multi-line with ``show_commands``) rendering of ``result``.

    Args:
        result (StepResult): The step result.
        color (bool): Apply the status color.
        show_commands (bool): Append the commands, one per line, indented.

    Returns:
        str: The rendered text (no trailing newline).
    """
    marker: str = STATUS_MARKERS[result.status]
    status_text: str = result.status.value
    if color:
        marker = result.status.color(marker)
        status_text = result.status.color(status_text)
    line = f"  {marker} {result.name:<{NAME_WIDTH}}  {status_text}"
    if result.detail and result.detail != result.status.value:
        line = f"{line}: {result.detail}"
    if show_commands:
        for command in result.commands:
            line = f"{line}\n      $ {command}"
    return line


def quick_command_lines(config: Config) -> list[str]:
    """Return the aligned quick-command lines shown after a successful setup."""
    if not config.quick_commands:
        return []
    width: int = max(len(qc.command) for qc in config.quick_commands)
    lines: list[str] = ["Quick commands:"]
    for qc in config.quick_commands:
        if qc.description:
            lines.append(f"  {qc.command:<{width}}  - {qc.description}")
        else:
            lines.append(f"  {qc.command}")
    return lines


def results_payload(results: Sequence[StepResult], *, exit_code: int) -> dict[str, object]:
    """Return the JSON document for ``--output-format json``.

    ``ok`` is false only when a step failed; a plan with pending work is still ok
    and reports ``WOULD_CHANGE`` in ``exit_code``.
    """
    return {
        "ok": not any(r.status is StepStatus.FAILED for r in results),
        "exit_code": exit_code,
        "steps": [r.to_dict() for r in results],
    }


def render_json(results: Sequence[StepResult], *, exit_code: int) -> str:
    """Render all results as one JSON object."""
    return json.dumps(results_payload(results, exit_code=exit_code), indent=2)


def render_ndjson(results: Sequence[StepResult]) -> list[str]:
    """Render each result as one compact JSON line."""
    return [json.dumps(r.to_dict(), separators=(",", ":")) for r in results]


def render_markdown(results: Sequence[StepResult], *, title: str) -> list[str]:
    """Render results as a Markdown table."""
    lines: list[str] = [
        f"# {title}",
        "",
        "| Step | Status | Detail | Commands |",
        "| ---- | ------ | ------ | -------- |",
    ]
    for r in results:
        commands: str = "<br>".join(f"`{c}`" for c in r.commands).replace("|", "\\|")
        detail: str = r.detail.replace("\n", " ").replace("|", "\\|")
        lines.append(f"| {r.name} | {r.status.value} | {detail} | {commands} |")
    return lines
