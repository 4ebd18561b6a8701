# topmark:header:start
#
#   project      : devbootstrap
#   file         : pipeline.py
#   file_relpath : src/devbootstrap/steps/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble and run the provisioning pipeline.

Execution is strictly sequential and fail-fast: the first step that raises a
`BootstrapError` is recorded as ``FAILED``, the pipeline halts, and the error is
re-raised to the caller. Steps after the failing one are neither run nor recorded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from devbootstrap.config.logging import get_logger
from devbootstrap.core.errors import BootstrapError
from devbootstrap.steps.hooks import HooksStep
from devbootstrap.steps.scaffold import ScaffoldStep
from devbootstrap.steps.secrets import SecretsBaselineStep
from devbootstrap.steps.status import StepResult, StepStatus
from devbootstrap.steps.sync import SyncStep
from devbootstrap.steps.toolchain import ToolchainStep

if TYPE_CHECKING:
    from collections.abc import Sequence

    from devbootstrap.config.logging import DevBootstrapLogger
    from devbootstrap.steps.base import BaseStep
    from devbootstrap.steps.context import BootstrapContext

logger: DevBootstrapLogger = get_logger(__name__)


def build_pipeline() -> list[BaseStep]:
    """Return fresh step instances in execution order."""
    return [
        ToolchainStep(),
        SyncStep(),
        HooksStep(),
        SecretsBaselineStep(),
        ScaffoldStep(),
    ]


def run_pipeline(
    ctx: BootstrapContext,
    steps: Sequence[BaseStep] | None = None,
) -> BootstrapContext:
    """Execute ``steps`` sequentially, stopping at the first failure.

    Args:
        ctx (BootstrapContext): The pipeline context; results are recorded on it.
        steps (Sequence[BaseStep] | None): Steps to run (default: `build_pipeline()`).

    Returns:
        BootstrapContext: The same context, after all steps have run.

    Raises:
        BootstrapError: The first step failure, after it has been recorded.
    """
    pipeline: Sequence[BaseStep] = steps if steps is not None else build_pipeline()
    logger.info("Running %d step(s) in %s (dry_run=%s)", len(pipeline), ctx.root, ctx.dry_run)
    for step in pipeline:
        try:
            step(ctx)
        except BootstrapError as exc:
            if exc.step is None:
                exc.step = step.name
            ctx.record(StepResult(step.name, StepStatus.FAILED, exc.message))
            ctx.halted = True
            logger.info("Pipeline halted at %s (exit code %d)", step.name, exc.exit_code)
            raise
    return ctx
