# topmark:header:start
#
#   project      : devbootstrap
#   file         : sync.py
#   file_relpath : src/devbootstrap/steps/sync.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Create the virtual environment and install all dependencies (``uv sync``).

No guard: the sync is idempotent and cheap when nothing changed, so it always runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from devbootstrap.core.keys import StepName
from devbootstrap.core.shell import format_argv
from devbootstrap.steps.base import BaseStep
from devbootstrap.steps.status import StepResult, StepStatus

if TYPE_CHECKING:
    from devbootstrap.steps.context import BootstrapContext


class SyncStep(BaseStep):
    """Install project dependencies with the package manager."""

    def __init__(self) -> None:
        super().__init__(
            name=StepName.SYNC,
            description="Create the virtual environment and install dependencies",
        )

    @staticmethod
    def argv(ctx: BootstrapContext) -> list[str]:
        """Return the sync command line."""
        return [ctx.config.package_manager, "sync", *ctx.config.sync_args]

    def plan(self, ctx: BootstrapContext) -> StepResult:
        """Sync always runs."""
        return StepResult(
            self.name,
            StepStatus.WOULD_RUN,
            "would sync dependencies",
            commands=[format_argv(self.argv(ctx))],
        )

    def run(self, ctx: BootstrapContext) -> StepResult:
        """Run the sync."""
        ctx.require_tool(ctx.config.package_manager, step=self.name)
        argv: list[str] = self.argv(ctx)
        ctx.run_checked(argv, step=self.name)
        return StepResult(
            self.name,
            StepStatus.DONE,
            "dependencies synced",
            commands=[format_argv(argv)],
        )
