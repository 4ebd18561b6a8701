# topmark:header:start
#
#   project      : devbootstrap
#   file         : status.py
#   file_relpath : src/devbootstrap/steps/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-step status and result types.

Values are human-readable strings used in CLI output; machine formats emit the
member *name* in lowercase (see `StepStatus.key`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class StepStatus(str, Enum):
    """Outcome of a single provisioning step."""

    PENDING = "pending"
    DONE = "done"
    SKIPPED = "already present"
    DISABLED = "skipped by configuration"
    WOULD_RUN = "would run"
    FAILED = "failed"

    @property
    def color(self) -> Callable[..., str]:
        """yachalk style used to render this status in the terminal."""
        return _STATUS_COLORS[self]

    @property
    def key(self) -> str:
        """Stable machine-readable key (e.g. ``"would_run"``)."""
        return self.name.lower()

    @property
    def is_pending_work(self) -> bool:
        """Whether this status means provisioning work remains (plan mode)."""
        return self is StepStatus.WOULD_RUN


_STATUS_COLORS: dict[StepStatus, Callable[..., str]] = {
    StepStatus.PENDING: chalk.gray,
    StepStatus.DONE: chalk.green,
    StepStatus.SKIPPED: chalk.cyan,
    StepStatus.DISABLED: chalk.gray,
    StepStatus.WOULD_RUN: chalk.yellow,
    StepStatus.FAILED: chalk.red_bright,
}


@dataclass
class StepResult:
    """What a step did (or would do).

    Attributes:
        name (str): Step name (see `devbootstrap.core.keys.StepName`).
        status (StepStatus): Outcome.
        detail (str): One-line human-readable explanation.
        commands (list[str]): Shell-quoted commands that ran (or would run).
    """

    name: str
    status: StepStatus = StepStatus.PENDING
    detail: str = ""
    commands: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""
        return {
            "step": self.name,
            "status": self.status.key,
            "detail": self.detail,
            "commands": list(self.commands),
        }
