# topmark:header:start
#
#   project      : devbootstrap
#   file         : secrets.py
#   file_relpath : src/devbootstrap/steps/secrets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Create the detect-secrets baseline.

Guard: the baseline file already exists.

The scan output is captured and written only after the scan succeeds, via a
temporary sibling file that is atomically renamed into place. A failed or
interrupted scan therefore never leaves a truncated baseline behind (which a
later run would mistake for a valid one).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from devbootstrap.config.logging import get_logger
from devbootstrap.core.errors import ScaffoldError
from devbootstrap.core.keys import StepName
from devbootstrap.core.shell import format_argv
from devbootstrap.steps.base import BaseStep
from devbootstrap.steps.status import StepResult, StepStatus

if TYPE_CHECKING:
    from pathlib import Path

    from devbootstrap.config.logging import DevBootstrapLogger
    from devbootstrap.core.shell import CommandResult
    from devbootstrap.steps.context import BootstrapContext

logger: DevBootstrapLogger = get_logger(__name__)


def write_atomic(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` via a temporary sibling and ``replace()``.

    Raises:
        OSError: If the file cannot be written; the temporary file is removed.
    """
    tmp: Path = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


class SecretsBaselineStep(BaseStep):
    """Write ``.secrets.baseline`` from ``detect-secrets scan`` when it is missing."""

    def __init__(self) -> None:
        super().__init__(
            name=StepName.SECRETS,
            description="Create the detect-secrets baseline if it is missing",
        )

    @staticmethod
    def argv(ctx: BootstrapContext) -> list[str]:
        """Return the scan command line."""
        return [
            ctx.config.package_manager,
            "run",
            "detect-secrets",
            "scan",
            *ctx.config.secrets_scan_args,
        ]

    def _display(self, ctx: BootstrapContext) -> str:
        return f"{format_argv(self.argv(ctx))} > {ctx.config.secrets_baseline}"

    def plan(self, ctx: BootstrapContext) -> StepResult:
        """Report whether the baseline would be created."""
        if ctx.config.baseline_path.exists():
            return StepResult(
                self.name,
                StepStatus.SKIPPED,
                f"{ctx.config.secrets_baseline} exists",
            )
        return StepResult(
            self.name,
            StepStatus.WOULD_RUN,
            f"would create {ctx.config.secrets_baseline}",
            commands=[self._display(ctx)],
        )

    def run(self, ctx: BootstrapContext) -> StepResult:
        """Scan and write the baseline unless it already exists.

        Raises:
            ScaffoldError: If the baseline cannot be written.
        """
        baseline: Path = ctx.config.baseline_path
        if baseline.exists():
            return StepResult(
                self.name,
                StepStatus.SKIPPED,
                f"{ctx.config.secrets_baseline} exists",
            )

        ctx.require_tool(ctx.config.package_manager, step=self.name)
        scan: CommandResult = ctx.run_checked(self.argv(ctx), step=self.name, capture=True)
        try:
            write_atomic(baseline, scan.stdout)
        except OSError as exc:
            raise ScaffoldError.from_os_error(exc, step=self.name) from exc

        logger.info("Wrote secrets baseline %s (%d bytes)", baseline, len(scan.stdout))
        return StepResult(
            self.name,
            StepStatus.DONE,
            f"created {ctx.config.secrets_baseline}",
            commands=[self._display(ctx)],
        )
