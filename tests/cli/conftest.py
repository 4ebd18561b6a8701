# topmark:header:start
#
#   project      : devbootstrap
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running devbootstrap in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so the project root defaults to the temporary
test directory exactly as it does for a developer running ``devbootstrap`` from
a checkout. A `tests.conftest.FakeRunner` is injected through Click's context
object so no real command is executed.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from devbootstrap.cli.main import cli
from devbootstrap.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from tests.conftest import FakeRunner


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    runner: FakeRunner | None = None,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation (and therefore the default project root).
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["plan"]``.
        runner (FakeRunner | None): Command runner injected into ``ctx.obj``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["setup"], runner=make_runner())
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, runner=runner, input_text=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    runner: FakeRunner | None = None,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on the project root
    (e.g. ``--help`` / ``version`` / ``steps``) or passes ``--root`` explicitly.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.
        runner (FakeRunner | None): Command runner injected into ``ctx.obj``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    obj: dict[str, Any] = {}
    if runner is not None:
        obj["runner"] = runner  # inject test override into Click's context object
    return CliRunner().invoke(cli, argv, input=input_text, obj=obj)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    # WOULD_CHANGE is a *normal* outcome; Click's own usage errors also exit 2
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit), result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
