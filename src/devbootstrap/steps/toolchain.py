# topmark:header:start
#
#   project      : devbootstrap
#   file         : toolchain.py
#   file_relpath : src/devbootstrap/steps/toolchain.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ensure the package manager is installed.

Guard: the package manager resolves on the context's PATH.

Otherwise the installer script is downloaded with ``curl -LsSf`` and piped into
``sh``. Installers drop the binary into a user directory that is usually not on
the PATH of the *current* process yet, so the configured ``installer_bin_dirs``
that exist after installing are prepended to the context PATH before the tool is
resolved again.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from devbootstrap.config.logging import get_logger
from devbootstrap.core.errors import ToolUnavailableError
from devbootstrap.core.keys import StepName
from devbootstrap.core.shell import format_argv
from devbootstrap.steps.base import BaseStep
from devbootstrap.steps.status import StepResult, StepStatus

if TYPE_CHECKING:
    from devbootstrap.config.logging import DevBootstrapLogger
    from devbootstrap.core.shell import CommandResult
    from devbootstrap.steps.context import BootstrapContext

logger: DevBootstrapLogger = get_logger(__name__)

DOWNLOADER: str = "curl"
SHELL: str = "sh"


def expand_home(path: str, env: dict[str, str]) -> Path:
    """Expand a leading ``~`` using ``HOME`` from ``env`` (falling back to the process home)."""
    if path == "~" or path.startswith("~/"):
        home: str = env.get("HOME") or str(Path.home())
        return Path(home + path[1:])
    return Path(path)


def prepend_to_path(env: dict[str, str], dirs: list[Path]) -> list[Path]:
    """Prepend existing ``dirs`` to ``env["PATH"]``, keeping their relative order.

    Directories that do not exist or are already on PATH are left out.

    Returns:
        list[Path]: The directories that were added.
    """
    current: list[str] = [p for p in env.get("PATH", "").split(os.pathsep) if p]
    added: list[Path] = [d for d in dirs if d.is_dir() and str(d) not in current]
    if added:
        env["PATH"] = os.pathsep.join([*(str(d) for d in added), *current])
        logger.debug("PATH extended with %s", ", ".join(str(d) for d in added))
    return added


class ToolchainStep(BaseStep):
    """Install the package manager when it is not on PATH."""

    def __init__(self) -> None:
        super().__init__(
            name=StepName.TOOLCHAIN,
            description="Install the package manager if it is not on PATH",
        )

    @staticmethod
    def _install_display(ctx: BootstrapContext) -> str:
        return f"{format_argv(ToolchainStep._download_argv(ctx))} | {SHELL}"

    @staticmethod
    def _download_argv(ctx: BootstrapContext) -> list[str]:
        return [DOWNLOADER, "-LsSf", ctx.config.installer_url]

    def plan(self, ctx: BootstrapContext) -> StepResult:
        """Report whether the installer would run."""
        tool: str = ctx.config.package_manager
        found: str | None = ctx.which(tool)
        if found is not None:
            return StepResult(self.name, StepStatus.SKIPPED, f"{tool} found at {found}")
        return StepResult(
            self.name,
            StepStatus.WOULD_RUN,
            f"{tool} not found; would install from {ctx.config.installer_url}",
            commands=[self._install_display(ctx)],
        )

    def run(self, ctx: BootstrapContext) -> StepResult:
        """Install the package manager unless it is already available.

        Raises:
            ToolUnavailableError: If ``curl`` is missing, or the package manager is
                still not on PATH after the installer ran.
        """
        tool: str = ctx.config.package_manager
        found: str | None = ctx.which(tool)
        if found is not None:
            return StepResult(self.name, StepStatus.SKIPPED, f"{tool} found at {found}")

        logger.info("%s not found; installing from %s", tool, ctx.config.installer_url)
        ctx.require_tool(DOWNLOADER, step=self.name)
        download: CommandResult = ctx.run_checked(
            self._download_argv(ctx), step=self.name, capture=True
        )
        ctx.run_checked([SHELL], step=self.name, input_text=download.stdout)

        prepend_to_path(
            ctx.env, [expand_home(d, ctx.env) for d in ctx.config.installer_bin_dirs]
        )
        installed: str | None = ctx.which(tool)
        if installed is None:
            raise ToolUnavailableError(
                f"{tool} is still not on PATH after running the installer "
                f"(searched: {', '.join(ctx.config.installer_bin_dirs) or 'PATH only'})",
                step=self.name,
            )
        return StepResult(
            self.name,
            StepStatus.DONE,
            f"installed {tool} ({installed})",
            commands=[self._install_display(ctx)],
        )
