# topmark:header:start
#
#   project      : devbootstrap
#   file         : hooks.py
#   file_relpath : src/devbootstrap/steps/hooks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Register pre-commit hooks for the configured stages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from devbootstrap.core.keys import StepName
from devbootstrap.core.shell import format_argv
from devbootstrap.steps.base import BaseStep
from devbootstrap.steps.status import StepResult, StepStatus

if TYPE_CHECKING:
    from devbootstrap.steps.context import BootstrapContext


class HooksStep(BaseStep):
    """Run ``pre-commit install`` inside the project environment."""

    def __init__(self) -> None:
        super().__init__(
            name=StepName.HOOKS,
            description="Register pre-commit hooks",
        )

    @staticmethod
    def argv(ctx: BootstrapContext) -> list[str]:
        """Return the hook installation command line (one ``-t`` per stage)."""
        argv: list[str] = [ctx.config.package_manager, "run", "pre-commit", "install"]
        for hook_type in ctx.config.hook_types:
            argv += ["-t", hook_type]
        return argv

    def _stages(self, ctx: BootstrapContext) -> str:
        return ", ".join(ctx.config.hook_types) or "default"

    def plan(self, ctx: BootstrapContext) -> StepResult:
        """Hook installation always runs; re-installing is harmless."""
        return StepResult(
            self.name,
            StepStatus.WOULD_RUN,
            f"would register hooks ({self._stages(ctx)})",
            commands=[format_argv(self.argv(ctx))],
        )

    def run(self, ctx: BootstrapContext) -> StepResult:
        """Install the hooks."""
        ctx.require_tool(ctx.config.package_manager, step=self.name)
        argv: list[str] = self.argv(ctx)
        ctx.run_checked(argv, step=self.name)
        return StepResult(
            self.name,
            StepStatus.DONE,
            f"registered hooks ({self._stages(ctx)})",
            commands=[format_argv(argv)],
        )
