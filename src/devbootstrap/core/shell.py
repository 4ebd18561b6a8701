# topmark:header:start
#
#   project      : devbootstrap
#   file         : shell.py
#   file_relpath : src/devbootstrap/core/shell.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""External command execution.

Steps never call ``subprocess`` directly; they go through a `CommandRunner` held
by the pipeline context. `SubprocessRunner` is the production implementation;
tests substitute a scripted runner.

Contract:
    - ``run()`` never raises on a non-zero exit status. Callers inspect
      `CommandResult.ok` and decide how to fail.
    - A missing executable is reported as return code 127 (the shell's
      "command not found" status) rather than as ``FileNotFoundError``.
    - With ``capture=False`` the child inherits the terminal, so long-running
      installers stream their own progress output.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from devbootstrap.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from devbootstrap.config.logging import DevBootstrapLogger

logger: DevBootstrapLogger = get_logger(__name__)

COMMAND_NOT_FOUND: int = 127


def format_argv(argv: Sequence[str]) -> str:
    """Return a shell-quoted, copy-pasteable rendering of ``argv``."""
    return shlex.join(argv)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished external command.

    Attributes:
        argv (tuple[str, ...]): The command that was run.
        returncode (int): Exit status reported by the child process.
        stdout (str): Captured standard output (empty when not captured).
        stderr (str): Captured standard error (empty when not captured).
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Whether the command exited with status 0."""
        return self.returncode == 0

    @property
    def display(self) -> str:
        """Shell-quoted rendering of the command."""
        return format_argv(self.argv)


class CommandRunner(Protocol):
    """Minimal interface used by steps to run and locate executables."""

    def run(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        capture: bool = False,
        input_text: str | None = None,
    ) -> CommandResult:
        """Run ``argv`` to completion and return its result."""
        ...

    def which(self, name: str, *, env: Mapping[str, str] | None = None) -> str | None:
        """Return the absolute path of executable ``name``, or None if not on PATH."""
        ...


class SubprocessRunner(CommandRunner):
    """`CommandRunner` backed by `subprocess.run`."""

    def run(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        capture: bool = False,
        input_text: str | None = None,
    ) -> CommandResult:
        """Run ``argv`` to completion.

        Args:
            argv (Sequence[str]): Program and arguments.
            cwd (Path | None): Working directory for the child.
            env (Mapping[str, str] | None): Full environment for the child
                (inherits the current process environment when None).
            capture (bool): Capture stdout/stderr as text instead of streaming them.
            input_text (str | None): Text fed to the child's stdin.

        Returns:
            CommandResult: The finished command's status and captured output.
        """
        args: tuple[str, ...] = tuple(argv)
        logger.debug("Running: %s (cwd=%s, capture=%s)", format_argv(args), cwd, capture)
        try:
            proc: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
                args,
                cwd=cwd,
                env=dict(env) if env is not None else None,
                input=input_text,
                capture_output=capture,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            logger.warning("Executable not found: %s (%s)", args[0], exc)
            return CommandResult(argv=args, returncode=COMMAND_NOT_FOUND, stderr=str(exc))

        logger.debug("Finished: %s -> %d", format_argv(args), proc.returncode)
        return CommandResult(
            argv=args,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )

    def which(self, name: str, *, env: Mapping[str, str] | None = None) -> str | None:
        """Resolve ``name`` against ``env["PATH"]`` (or the process PATH)."""
        path: str | None = env.get("PATH") if env is not None else None
        found: str | None = shutil.which(name, path=path)
        logger.trace("which(%s) -> %s", name, found)
        return found
