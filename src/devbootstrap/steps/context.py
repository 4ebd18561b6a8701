# topmark:header:start
#
#   project      : devbootstrap
#   file         : context.py
#   file_relpath : src/devbootstrap/steps/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable state threaded through the provisioning pipeline.

`BootstrapContext` carries the frozen `Config`, the `CommandRunner`, a private
copy of the process environment (the toolchain step may extend ``PATH``), the
run mode, and the per-step results collected so far.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from devbootstrap.config.logging import get_logger
from devbootstrap.core.errors import StepFailedError, ToolUnavailableError
from devbootstrap.core.shell import format_argv

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from devbootstrap.config import Config
    from devbootstrap.config.logging import DevBootstrapLogger
    from devbootstrap.core.shell import CommandResult, CommandRunner
    from devbootstrap.steps.status import StepResult

logger: DevBootstrapLogger = get_logger(__name__)

# Number of trailing stderr lines quoted in a failure message
STDERR_TAIL_LINES: int = 5


def _stderr_tail(text: str) -> str:
    lines: list[str] = [ln for ln in text.strip().splitlines() if ln.strip()]
    return "\n".join(lines[-STDERR_TAIL_LINES:])


@dataclass
class BootstrapContext:
    """Pipeline state for a single ``setup`` or ``plan`` invocation.

    Attributes:
        config (Config): Resolved, immutable configuration.
        runner (CommandRunner): Executes external commands.
        env (dict[str, str]): Environment passed to every child process.
        dry_run (bool): Plan mode; steps must not execute commands or write files.
        capture_output (bool): Capture child output instead of streaming it
            (set for machine-readable output formats).
        results (list[StepResult]): Results recorded so far, in execution order.
        halted (bool): Set when a step failed and the pipeline stopped.
        on_result (Callable[[StepResult], None] | None): Optional progress callback
            invoked after each recorded result.
    """

    config: Config
    runner: CommandRunner
    env: dict[str, str] = field(default_factory=lambda: dict(os.environ))
    dry_run: bool = False
    capture_output: bool = False
    results: list[StepResult] = field(default_factory=list)
    halted: bool = False
    on_result: Callable[[StepResult], None] | None = None

    @property
    def root(self) -> Path:
        """Project root."""
        return self.config.root

    @property
    def has_pending_work(self) -> bool:
        """Whether any recorded result reports work still to do."""
        return any(r.status.is_pending_work for r in self.results)

    def record(self, result: StepResult) -> None:
        """Append a step result and notify the progress callback."""
        self.results.append(result)
        logger.info("Step %s: %s (%s)", result.name, result.status.key, result.detail)
        if self.on_result is not None:
            self.on_result(result)

    def which(self, name: str) -> str | None:
        """Resolve an executable against this context's PATH."""
        return self.runner.which(name, env=self.env)

    def require_tool(self, name: str, *, step: str) -> str:
        """Return the resolved path of ``name`` or raise.

        Raises:
            ToolUnavailableError: If ``name`` is not on PATH.
        """
        found: str | None = self.which(name)
        if found is None:
            raise ToolUnavailableError(f"'{name}' not found on PATH", step=step)
        return found

    def run_checked(
        self,
        argv: Sequence[str],
        *,
        step: str,
        capture: bool | None = None,
        input_text: str | None = None,
    ) -> CommandResult:
        """Run a command in the project root and fail the step on a non-zero exit.

        Args:
            argv (Sequence[str]): Program and arguments.
            step (str): Name of the calling step (for error attribution).
            capture (bool | None): Force capturing; defaults to ``capture_output``.
            input_text (str | None): Text fed to the child's stdin.

        Returns:
            CommandResult: The successful result.

        Raises:
            StepFailedError: If the command exits non-zero; the error carries the
                command's return code.
        """
        result: CommandResult = self.runner.run(
            argv,
            cwd=self.root,
            env=self.env,
            capture=self.capture_output if capture is None else capture,
            input_text=input_text,
        )
        if not result.ok:
            message = f"Command failed with exit code {result.returncode}: {format_argv(argv)}"
            tail: str = _stderr_tail(result.stderr)
            if tail:
                message = f"{message}\n{tail}"
            raise StepFailedError(message, step=step, returncode=result.returncode)
        return result
