# topmark:header:start
#
#   project      : devbootstrap
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: fail-fast behavior and exit codes.

A failing command stops the run immediately, and its own exit status becomes
the exit status of ``devbootstrap``. Tool, filesystem and configuration
problems map onto the sysexits-style codes in `devbootstrap.core.exit_codes`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from devbootstrap.core.exit_codes import ExitCode
from tests.cli.conftest import assert_CONFIG_ERROR, assert_USAGE_ERROR, run_cli_in
from tests.conftest import make_runner

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from tests.conftest import FakeRunner


@pytest.mark.cli
@pytest.mark.parametrize("code", [1, 3, 42, 127])
def test_sync_failure_propagates_exit_code(tmp_path: Path, code: int) -> None:
    """It should exit with the failing command's own status and stop there."""
    runner: FakeRunner = make_runner()
    runner.script("uv", "sync", returncode=code, stderr="error: resolution failed\n")

    result: Result = run_cli_in(tmp_path, ["--no-color", "setup"], runner=runner)

    assert result.exit_code == code, result.output
    assert runner.argvs == [("uv", "sync", "--all-extras")]
    assert "sync: Command failed with exit code" in result.output
    assert "error: resolution failed" in result.output
    # Later steps never ran
    assert not (tmp_path / ".secrets.baseline").exists()
    assert not (tmp_path / "tests").exists()
    assert "Development environment ready!" not in result.output


@pytest.mark.cli
def test_hooks_failure_stops_before_secrets(tmp_path: Path) -> None:
    """It should not scan for secrets when hook installation fails."""
    runner: FakeRunner = make_runner()
    runner.script("uv", "run", "pre-commit", returncode=1)

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert result.exit_code == 1, result.output
    assert not runner.ran("uv", "run", "detect-secrets")


@pytest.mark.cli
def test_failed_scan_leaves_no_baseline(tmp_path: Path) -> None:
    """It should not leave a partial baseline (or temp file) behind when the scan fails."""
    runner: FakeRunner = make_runner()
    runner.script("uv", "run", "detect-secrets", "scan", returncode=2, stdout='{"partial":')

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert result.exit_code == 2, result.output
    assert not (tmp_path / ".secrets.baseline").exists()
    assert list(tmp_path.glob(".*.tmp")) == []

    # A later run therefore retries the scan instead of trusting a broken file
    retry_runner: FakeRunner = make_runner()
    retry: Result = run_cli_in(tmp_path, ["setup"], runner=retry_runner)
    assert retry.exit_code == ExitCode.SUCCESS, retry.output
    assert retry_runner.ran("uv", "run", "detect-secrets", "scan")


@pytest.mark.cli
def test_installer_that_does_not_provide_tool_is_unavailable(tmp_path: Path) -> None:
    """It should exit TOOL_UNAVAILABLE when uv is still missing after the installer ran."""
    runner: FakeRunner = make_runner(uv=False)

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert result.exit_code == ExitCode.TOOL_UNAVAILABLE, result.output
    assert runner.ran("sh")
    assert not runner.ran("uv")
    assert "still not on PATH" in result.output


@pytest.mark.cli
def test_missing_downloader_is_unavailable(tmp_path: Path) -> None:
    """It should exit TOOL_UNAVAILABLE when neither uv nor curl is installed."""
    runner: FakeRunner = make_runner(uv=False, curl=False)

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert result.exit_code == ExitCode.TOOL_UNAVAILABLE, result.output
    assert runner.calls == []
    assert "'curl' not found on PATH" in result.output


@pytest.mark.cli
def test_installer_download_failure_propagates(tmp_path: Path) -> None:
    """It should not pipe anything into `sh` when the download fails."""
    runner: FakeRunner = make_runner(uv=False)
    runner.script("curl", returncode=22, stderr="curl: (22) The requested URL returned error: 404")

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert result.exit_code == 22, result.output
    assert not runner.ran("sh")


@pytest.mark.cli
def test_scaffold_blocked_by_file_is_io_error(tmp_path: Path) -> None:
    """It should exit IO_ERROR when a file occupies a test directory's parent path."""
    (tmp_path / "tests").write_text("not a directory\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["setup"], runner=make_runner())

    assert result.exit_code == ExitCode.IO_ERROR, result.output
    assert "scaffold: Cannot write" in result.output


@pytest.mark.cli
def test_signal_killed_command_still_fails(tmp_path: Path) -> None:
    """It should never report success for a command killed by a signal."""
    runner: FakeRunner = make_runner()
    runner.script("uv", "sync", returncode=-9)

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert result.exit_code == ExitCode.FAILURE, result.output


@pytest.mark.cli
def test_verbose_and_quiet_are_mutually_exclusive(tmp_path: Path) -> None:
    """It should reject `-v` combined with `-q` as a usage error."""
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(tmp_path, ["-v", "-q", "setup"], runner=runner)

    assert_USAGE_ERROR(result)
    assert runner.calls == []


@pytest.mark.cli
def test_missing_explicit_config_is_config_error(tmp_path: Path) -> None:
    """It should exit CONFIG_ERROR when a `--config` file does not exist."""
    result: Result = run_cli_in(
        tmp_path, ["setup", "--config", "missing.toml"], runner=make_runner()
    )

    assert_CONFIG_ERROR(result)
    assert "Config file not found" in result.output


@pytest.mark.cli
def test_malformed_project_config_is_config_error(tmp_path: Path) -> None:
    """It should exit CONFIG_ERROR without running anything when `devbootstrap.toml` is invalid."""
    (tmp_path / "devbootstrap.toml").write_text("sync_args = [\n", encoding="utf-8")
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert_CONFIG_ERROR(result)
    assert runner.calls == []


@pytest.mark.cli
def test_wrong_value_type_is_config_error(tmp_path: Path) -> None:
    """It should exit CONFIG_ERROR when a key has the wrong type."""
    (tmp_path / "devbootstrap.toml").write_text("hook_types = 'pre-commit'\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["setup"], runner=make_runner())

    assert_CONFIG_ERROR(result)
    assert "'hook_types' must be a list of strings" in result.output


@pytest.mark.cli
def test_unknown_skip_step_is_usage_error(tmp_path: Path) -> None:
    """It should reject an unknown `--skip` value before running anything."""
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(tmp_path, ["setup", "--skip", "lint"], runner=runner)

    # Click's own parameter validation (exit code 2 with a usage message)
    assert result.exit_code == 2, result.output
    assert isinstance(result.exception, SystemExit)
    assert runner.calls == []
