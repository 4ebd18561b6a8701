# topmark:header:start
#
#   project      : devbootstrap
#   file         : test_setup.py
#   file_relpath : tests/cli/test_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `setup` (and the bare `devbootstrap` invocation).

These tests pin the provisioning contract end to end:
- the commands run, in order, with their exact arguments,
- the artifacts left on disk (baseline, test directories),
- the summary printed on success.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import BASELINE_TEXT, make_runner

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from tests.conftest import FakeRunner

SYNC: tuple[str, ...] = ("uv", "sync", "--all-extras")
HOOKS: tuple[str, ...] = (
    "uv",
    "run",
    "pre-commit",
    "install",
    "-t",
    "pre-commit",
    "-t",
    "pre-push",
)
SCAN: tuple[str, ...] = ("uv", "run", "detect-secrets", "scan")

TEST_DIRS: tuple[str, ...] = ("tests/unit", "tests/integration", "tests/contract")


@pytest.mark.cli
def test_setup_runs_commands_in_order(tmp_path: Path) -> None:
    """It should sync, install hooks and scan for secrets, in that order."""
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert_SUCCESS(result)
    assert runner.argvs == [SYNC, HOOKS, SCAN]
    # Every command runs in the project root
    assert all(c.cwd == tmp_path.resolve() for c in runner.calls)


@pytest.mark.cli
def test_setup_creates_baseline_and_test_dirs(tmp_path: Path) -> None:
    """It should write the scan output to `.secrets.baseline` and create the test directories."""
    result: Result = run_cli_in(tmp_path, ["setup"], runner=make_runner())

    assert_SUCCESS(result)
    assert (tmp_path / ".secrets.baseline").read_text(encoding="utf-8") == BASELINE_TEXT
    for rel in TEST_DIRS:
        assert (tmp_path / rel).is_dir()


@pytest.mark.cli
def test_setup_prints_banner_and_quick_commands(tmp_path: Path) -> None:
    """It should end with the ready banner followed by the quick commands."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "setup"], runner=make_runner())

    assert_SUCCESS(result)
    out: str = result.output
    assert "Development environment ready!" in out
    assert "Quick commands:" in out
    assert "uv run pytest tests/unit" in out
    assert "- Run unit tests" in out
    assert "pre-commit run --all-files" in out
    assert out.index("Development environment ready!") < out.index("Quick commands:")


@pytest.mark.cli
def test_bare_invocation_runs_setup(tmp_path: Path) -> None:
    """It should provision the project when no subcommand is given."""
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(tmp_path, [], runner=runner)

    assert_SUCCESS(result)
    assert runner.argvs == [SYNC, HOOKS, SCAN]
    assert (tmp_path / ".secrets.baseline").is_file()


@pytest.mark.cli
def test_setup_is_idempotent(tmp_path: Path) -> None:
    """It should leave an existing baseline and existing directories alone on re-runs."""
    first: Result = run_cli_in(tmp_path, ["setup"], runner=make_runner())
    assert_SUCCESS(first)

    # A baseline edited by the developer must survive later runs
    baseline: Path = tmp_path / ".secrets.baseline"
    baseline.write_text("{}\n", encoding="utf-8")

    runner: FakeRunner = make_runner()
    second: Result = run_cli_in(tmp_path, ["--no-color", "setup"], runner=runner)

    assert_SUCCESS(second)
    assert not runner.ran(*SCAN)
    assert baseline.read_text(encoding="utf-8") == "{}\n"
    assert "already present: .secrets.baseline exists" in second.output
    assert "already present: all 3 directories exist" in second.output


@pytest.mark.cli
def test_setup_reports_existing_toolchain(tmp_path: Path) -> None:
    """It should not download the installer when the package manager is on PATH."""
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(tmp_path, ["--no-color", "setup"], runner=runner)

    assert_SUCCESS(result)
    assert not runner.ran("curl")
    assert "uv found at /opt/tools/bin/uv" in result.output


@pytest.mark.cli
def test_setup_installs_missing_package_manager(tmp_path: Path) -> None:
    """It should pipe the downloaded installer into `sh` and continue once uv resolves."""
    installer: str = "#!/bin/sh\necho installing uv\n"
    runner: FakeRunner = make_runner(uv=False)
    runner.script("curl", stdout=installer)
    runner.script("sh", on_run=lambda r: r.tools.__setitem__("uv", "/home/dev/.local/bin/uv"))

    result: Result = run_cli_in(tmp_path, ["--no-color", "setup"], runner=runner)

    assert_SUCCESS(result)
    download, shell = runner.calls[0], runner.calls[1]
    assert download.argv == ("curl", "-LsSf", "https://astral.sh/uv/install.sh")
    assert download.capture is True
    assert shell.argv == ("sh",)
    assert shell.input_text == installer
    assert runner.argvs[2:] == [SYNC, HOOKS, SCAN]
    assert "installed uv (/home/dev/.local/bin/uv)" in result.output


@pytest.mark.cli
def test_setup_skip_option_disables_steps(tmp_path: Path) -> None:
    """It should not run steps named with `--skip`, and report them as skipped."""
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(
        tmp_path, ["--no-color", "setup", "--skip", "hooks", "--skip", "secrets"], runner=runner
    )

    assert_SUCCESS(result)
    assert runner.argvs == [SYNC]
    assert not (tmp_path / ".secrets.baseline").exists()
    assert result.output.count("skipped by configuration") == 2


@pytest.mark.cli
def test_setup_honors_pyproject_configuration(tmp_path: Path) -> None:
    """It should apply `[tool.devbootstrap]` settings from `pyproject.toml`."""
    (tmp_path / "pyproject.toml").write_text(
        "[project]\nname = 'demo'\n\n"
        "[tool.devbootstrap]\n"
        "sync_args = ['--frozen']\n"
        "hook_types = ['pre-commit']\n"
        "test_dirs = ['tests/smoke']\n",
        encoding="utf-8",
    )
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(tmp_path, ["setup"], runner=runner)

    assert_SUCCESS(result)
    assert runner.argvs[:2] == [
        ("uv", "sync", "--frozen"),
        ("uv", "run", "pre-commit", "install", "-t", "pre-commit"),
    ]
    assert (tmp_path / "tests" / "smoke").is_dir()
    assert not (tmp_path / "tests" / "unit").exists()


@pytest.mark.cli
def test_setup_root_option_targets_other_directory(tmp_path: Path) -> None:
    """It should provision the directory given by `--root` instead of the CWD."""
    project: Path = tmp_path / "project"
    project.mkdir()
    elsewhere: Path = tmp_path / "elsewhere"
    elsewhere.mkdir()
    runner: FakeRunner = make_runner()

    result: Result = run_cli_in(elsewhere, ["setup", "--root", str(project)], runner=runner)

    assert_SUCCESS(result)
    assert (project / ".secrets.baseline").is_file()
    assert not (elsewhere / ".secrets.baseline").exists()
    assert all(c.cwd == project.resolve() for c in runner.calls)


@pytest.mark.cli
def test_setup_verbose_lists_commands(tmp_path: Path) -> None:
    """It should show each step's commands with `-v`."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "-v", "setup"], runner=make_runner())

    assert_SUCCESS(result)
    assert "$ uv sync --all-extras" in result.output
    assert "$ mkdir -p tests/unit tests/integration tests/contract" in result.output


@pytest.mark.cli
def test_setup_quiet_prints_only_the_banner(tmp_path: Path) -> None:
    """It should drop progress lines and quick commands with `-q`."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "-q", "setup"], runner=make_runner())

    assert_SUCCESS(result)
    assert result.output.strip() == "Development environment ready!"


@pytest.mark.cli
def test_setup_very_quiet_prints_nothing(tmp_path: Path) -> None:
    """It should print nothing on success with `-qq`."""
    result: Result = run_cli_in(tmp_path, ["-qq", "setup"], runner=make_runner())

    assert_SUCCESS(result)
    assert result.output.strip() == ""
    assert (tmp_path / ".secrets.baseline").is_file()


@pytest.mark.cli
def test_setup_warns_about_unknown_config_keys(tmp_path: Path) -> None:
    """It should warn about unknown keys in `devbootstrap.toml` and still succeed."""
    (tmp_path / "devbootstrap.toml").write_text("bogus = 1\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "setup"], runner=make_runner())

    assert_SUCCESS(result)
    assert "unknown configuration key 'bogus'" in result.output
