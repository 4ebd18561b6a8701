# topmark:header:start
#
#   project      : devbootstrap
#   file         : scaffold.py
#   file_relpath : src/devbootstrap/steps/scaffold.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Create the test directory layout (``mkdir -p`` semantics)."""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

from devbootstrap.core.errors import ScaffoldError
from devbootstrap.core.keys import StepName
from devbootstrap.steps.base import BaseStep
from devbootstrap.steps.status import StepResult, StepStatus

if TYPE_CHECKING:
    from devbootstrap.steps.context import BootstrapContext


class ScaffoldStep(BaseStep):
    """Create each configured test directory that does not exist yet."""

    def __init__(self) -> None:
        super().__init__(
            name=StepName.SCAFFOLD,
            description="Create test directories",
        )

    @staticmethod
    def _missing(ctx: BootstrapContext) -> list[str]:
        return [d for d in ctx.config.test_dirs if not (ctx.root / d).is_dir()]

    @staticmethod
    def _mkdir_display(dirs: list[str]) -> str:
        return "mkdir -p " + " ".join(shlex.quote(d) for d in dirs)

    def plan(self, ctx: BootstrapContext) -> StepResult:
        """Report which directories would be created."""
        missing: list[str] = self._missing(ctx)
        if not missing:
            return StepResult(
                self.name,
                StepStatus.SKIPPED,
                f"all {len(ctx.config.test_dirs)} directories exist",
            )
        return StepResult(
            self.name,
            StepStatus.WOULD_RUN,
            f"would create {', '.join(missing)}",
            commands=[self._mkdir_display(missing)],
        )

    def run(self, ctx: BootstrapContext) -> StepResult:
        """Create missing directories.

        Raises:
            ScaffoldError: If a directory cannot be created (e.g. a file is in the way).
        """
        missing: list[str] = self._missing(ctx)
        if not missing:
            return StepResult(
                self.name,
                StepStatus.SKIPPED,
                f"all {len(ctx.config.test_dirs)} directories exist",
            )

        for rel in missing:
            try:
                (ctx.root / rel).mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ScaffoldError.from_os_error(exc, step=self.name) from exc

        return StepResult(
            self.name,
            StepStatus.DONE,
            f"created {', '.join(missing)}",
            commands=[self._mkdir_display(missing)],
        )
