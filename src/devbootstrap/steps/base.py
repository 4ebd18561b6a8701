# topmark:header:start
#
#   project      : devbootstrap
#   file         : base.py
#   file_relpath : src/devbootstrap/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for provisioning steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    result = step(ctx)  # internally: may_proceed → run() or plan() → record

Subclasses implement `run` (do the work) and `plan` (describe the work without
doing it). Both return a `StepResult`; failures are raised as
`devbootstrap.core.errors.BootstrapError` subclasses and recorded by the runner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from devbootstrap.config.logging import get_logger
from devbootstrap.steps.status import StepResult, StepStatus

if TYPE_CHECKING:
    from devbootstrap.config.logging import DevBootstrapLogger
    from devbootstrap.steps.context import BootstrapContext

logger: DevBootstrapLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for provisioning steps.

    Attributes:
        name (str): Stable step identifier (see `devbootstrap.core.keys.StepName`).
        description (str): One-line summary shown by ``devbootstrap steps``.
    """

    name: str
    description: str

    def __call__(self, ctx: BootstrapContext) -> StepResult:
        """Invoke the step lifecycle and record the result on ``ctx``.

        Args:
            ctx (BootstrapContext): The pipeline context.

        Returns:
            StepResult: The recorded result.
        """
        if not self.may_proceed(ctx):
            logger.info("Step %s disabled by configuration", self.name)
            result = StepResult(
                name=self.name,
                status=StepStatus.DISABLED,
                detail="skipped by configuration",
            )
        elif ctx.dry_run:
            logger.debug("Step %s - planning", self.name)
            result = self.plan(ctx)
        else:
            logger.debug("Step %s - running", self.name)
            result = self.run(ctx)

        ctx.record(result)
        return result

    def may_proceed(self, ctx: BootstrapContext) -> bool:
        """Return whether the step is enabled for this run."""
        return self.name not in ctx.config.skip_steps

    def run(self, ctx: BootstrapContext) -> StepResult:
        """Perform the step's work.

        Args:
            ctx (BootstrapContext): The pipeline context.

        Returns:
            StepResult: ``DONE`` or ``SKIPPED`` (guard already satisfied).
        """
        raise NotImplementedError

    def plan(self, ctx: BootstrapContext) -> StepResult:
        """Describe the step's work without side effects.

        Args:
            ctx (BootstrapContext): The pipeline context.

        Returns:
            StepResult: ``WOULD_RUN`` or ``SKIPPED``.
        """
        raise NotImplementedError
