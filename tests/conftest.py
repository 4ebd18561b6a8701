# topmark:header:start
#
#   project      : devbootstrap
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration and shared fixtures for the devbootstrap test suite.

No test runs a real external command. Steps and the CLI receive a `FakeRunner`
instead of `devbootstrap.core.shell.SubprocessRunner`: it records every call,
answers ``which()`` from a table of "installed" tools, and returns scripted
results matched by argv prefix.

Notes:
    Build configs using `devbootstrap.config.MutableConfig` (mutable), then
    `freeze()` into a `devbootstrap.config.Config`. Do **not** mutate a frozen
    `Config`; call `Config.thaw()` if you need to tweak one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import pytest

from devbootstrap.config import MutableConfig
from devbootstrap.config.logging import ChalkFormatter
from devbootstrap.core.shell import CommandResult
from devbootstrap.steps import BootstrapContext

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping, Sequence
    from pathlib import Path

    from devbootstrap.config import Config

UV_PATH: str = "/opt/tools/bin/uv"
CURL_PATH: str = "/usr/bin/curl"

BASELINE_TEXT: str = '{\n  "version": "1.5.0",\n  "results": {}\n}\n'


@dataclass
class Call:
    """One recorded `FakeRunner.run` invocation."""

    argv: tuple[str, ...]
    cwd: Path | None
    capture: bool
    input_text: str | None


@dataclass
class Scripted:
    """A canned answer for commands starting with ``prefix``."""

    prefix: tuple[str, ...]
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
    on_run: Callable[[FakeRunner], None] | None = None


@dataclass
class FakeRunner:
    """Scripted `CommandRunner` for tests.

    Attributes:
        tools (dict[str, str]): Executables reported by ``which()`` (name -> path).
        scripts (list[Scripted]): Canned results; the longest matching prefix wins,
            and among equally long prefixes the latest registration wins.
            Unscripted commands succeed with empty output.
        calls (list[Call]): Every ``run()`` invocation, in order.
    """

    tools: dict[str, str] = field(default_factory=dict)
    scripts: list[Scripted] = field(default_factory=list)
    calls: list[Call] = field(default_factory=list)

    def script(
        self,
        *prefix: str,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        on_run: Callable[[FakeRunner], None] | None = None,
    ) -> FakeRunner:
        """Register a canned result for commands starting with ``prefix``."""
        self.scripts.append(Scripted(tuple(prefix), returncode, stdout, stderr, on_run))
        return self

    def run(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        capture: bool = False,
        input_text: str | None = None,
    ) -> CommandResult:
        args: tuple[str, ...] = tuple(argv)
        self.calls.append(Call(argv=args, cwd=cwd, capture=capture, input_text=input_text))

        matches: list[Scripted] = [s for s in self.scripts if args[: len(s.prefix)] == s.prefix]
        if not matches:
            return CommandResult(argv=args, returncode=0)
        best: Scripted = max(reversed(matches), key=lambda s: len(s.prefix))
        if best.on_run is not None:
            best.on_run(self)
        return CommandResult(
            argv=args,
            returncode=best.returncode,
            stdout=best.stdout,
            stderr=best.stderr,
        )

    def which(self, name: str, *, env: Mapping[str, str] | None = None) -> str | None:
        return self.tools.get(name)

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        """The argv of every recorded call."""
        return [c.argv for c in self.calls]

    def ran(self, *prefix: str) -> bool:
        """Whether any recorded call starts with ``prefix``."""
        return any(a[: len(prefix)] == prefix for a in self.argvs)


def make_runner(*, uv: bool = True, curl: bool = True) -> FakeRunner:
    """Return a runner with a working ``detect-secrets scan`` and the requested tools."""
    tools: dict[str, str] = {}
    if uv:
        tools["uv"] = UV_PATH
    if curl:
        tools["curl"] = CURL_PATH
    runner = FakeRunner(tools=tools)
    runner.script("uv", "run", "detect-secrets", "scan", stdout=BASELINE_TEXT)
    return runner


def make_config(root: Path, **overrides: Any) -> Config:
    """Return a frozen config rooted at ``root`` from the packaged defaults plus ``overrides``."""
    draft: MutableConfig = MutableConfig.from_defaults(root)
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def make_context(
    root: Path,
    runner: FakeRunner,
    *,
    dry_run: bool = False,
    env: dict[str, str] | None = None,
    **overrides: Any,
) -> BootstrapContext:
    """Return a pipeline context over ``root`` with an isolated environment."""
    return BootstrapContext(
        config=make_config(root, **overrides),
        runner=runner,
        env=env if env is not None else {"PATH": "/usr/bin:/bin", "HOME": str(root / "home")},
        dry_run=dry_run,
    )


def provision(root: Path) -> None:
    """Create the on-disk artifacts of a fully provisioned project under ``root``."""
    (root / ".secrets.baseline").write_text(BASELINE_TEXT, encoding="utf-8")
    for rel in ("tests/unit", "tests/integration", "tests/contract"):
        (root / rel).mkdir(parents=True, exist_ok=True)


@pytest.fixture
def runner() -> FakeRunner:
    """A fake runner where ``uv`` and ``curl`` are installed."""
    return make_runner()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the caller's color and logging settings out of the tests.

    The CLI installs a root log handler bound to the stream Click captured for
    that invocation; it is removed afterwards so later tests do not log into a
    closed stream.
    """
    for var in ("FORCE_COLOR", "NO_COLOR", "DEVBOOTSTRAP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    yield

    root_logger: logging.Logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, ChalkFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)
