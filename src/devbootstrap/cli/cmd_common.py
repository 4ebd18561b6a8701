# topmark:header:start
#
#   project      : devbootstrap
#   file         : cmd_common.py
#   file_relpath : src/devbootstrap/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds the plumbing shared by ``setup`` and ``plan``: resolving the
configuration from Click options, running the pipeline with progress output,
and emitting the result in the requested format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from devbootstrap.cli.console import ClickConsole
from devbootstrap.cli.errors import DevBootstrapConfigError, DevBootstrapError
from devbootstrap.cli.keys import ArgKey
from devbootstrap.config import MutableConfig
from devbootstrap.config.logging import get_logger
from devbootstrap.core.errors import BootstrapError, ConfigError
from devbootstrap.core.exit_codes import ExitCode
from devbootstrap.core.shell import SubprocessRunner
from devbootstrap.rendering.formats import OutputFormat
from devbootstrap.rendering.summary import (
    READY_BANNER,
    format_step_line,
    quick_command_lines,
    render_json,
    render_markdown,
    render_ndjson,
)
from devbootstrap.steps import BootstrapContext, run_pipeline

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from devbootstrap.cli.console import ConsoleLike
    from devbootstrap.config import Config
    from devbootstrap.config.logging import DevBootstrapLogger
    from devbootstrap.core.shell import CommandRunner
    from devbootstrap.steps.status import StepResult

logger: DevBootstrapLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the project console from ``ctx.obj`` (a plain one if the group did not run)."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get(ArgKey.CONSOLE)
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj[ArgKey.CONSOLE] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 when unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get(ArgKey.VERBOSITY_LEVEL, 0))


def get_runner(ctx: click.Context) -> CommandRunner:
    """Return the command runner (tests inject one via ``obj={"runner": ...}``)."""
    ctx.ensure_object(dict)
    runner: CommandRunner | None = ctx.obj.get(ArgKey.RUNNER)
    return runner if runner is not None else SubprocessRunner()


def resolve_config_from_click(
    ctx: click.Context,
    *,
    root: Path | None,
    config_paths: Sequence[Path],
    no_config: bool,
    skip_steps: Sequence[str] = (),
) -> Config:
    """Merge all configuration layers with the CLI overrides and freeze the result.

    Config diagnostics (e.g. unknown keys) are shown as warnings unless ``-q`` is set.

    Raises:
        DevBootstrapConfigError: If any configuration source is invalid.
    """
    try:
        mutable: MutableConfig = MutableConfig.load_merged(
            root=root,
            config_paths=config_paths,
            no_config=no_config,
        )
        mutable.apply_args({ArgKey.SKIP_STEPS: list(skip_steps)})
    except ConfigError as exc:
        raise DevBootstrapConfigError.from_bootstrap_error(exc) from exc

    config: Config = mutable.freeze()
    if get_effective_verbosity(ctx) >= 0:
        console: ConsoleLike = get_console(ctx)
        for diagnostic in config.diagnostics:
            console.warn(f"Warning: {diagnostic}")
    logger.debug("Config sources: %s", ", ".join(config.config_files))
    return config


def _emit_structured(
    console: ConsoleLike,
    results: Sequence[StepResult],
    *,
    fmt: OutputFormat,
    exit_code: int,
    title: str,
) -> None:
    if fmt == OutputFormat.JSON:
        console.print(render_json(results, exit_code=exit_code))
    elif fmt == OutputFormat.NDJSON:
        for line in render_ndjson(results):
            console.print(line)
    elif fmt == OutputFormat.MARKDOWN:
        for line in render_markdown(results, title=title):
            console.print(line)


def execute_pipeline(
    ctx: click.Context,
    config: Config,
    *,
    dry_run: bool,
    fmt: OutputFormat,
) -> int:
    """Run (or plan) the provisioning pipeline and report the outcome.

    Human output streams one line per step as it completes; structured formats
    are emitted once the pipeline has finished (or stopped).

    Args:
        ctx (click.Context): Current Click context.
        config (Config): Resolved configuration.
        dry_run (bool): Plan mode.
        fmt (OutputFormat): Output format.

    Returns:
        int: ``SUCCESS``, or ``WOULD_CHANGE`` in plan mode when work is pending.

    Raises:
        DevBootstrapError: If a step failed; carries the step's exit code.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    color: bool = bool(ctx.obj.get(ArgKey.COLOR_ENABLED, False)) and not fmt.is_machine
    human: bool = fmt == OutputFormat.DEFAULT

    def _progress(result: StepResult) -> None:
        console.print(format_step_line(result, color=color, show_commands=dry_run or vlevel > 0))

    bctx = BootstrapContext(
        config=config,
        runner=get_runner(ctx),
        dry_run=dry_run,
        capture_output=fmt.is_machine,
        on_result=_progress if human and vlevel >= 0 else None,
    )

    if human and vlevel >= 0:
        verb: str = "Planning" if dry_run else "Setting up"
        console.print(
            console.styled(f"{verb} development environment in {config.root}", bold=True)
        )

    error: BootstrapError | None = None
    try:
        run_pipeline(bctx)
    except BootstrapError as exc:
        error = exc

    if error is not None:
        exit_code: int = error.exit_code
    elif dry_run and bctx.has_pending_work:
        exit_code = ExitCode.WOULD_CHANGE
    else:
        exit_code = ExitCode.SUCCESS

    title: str = "Development Environment Plan" if dry_run else "Development Environment Setup"
    _emit_structured(console, bctx.results, fmt=fmt, exit_code=exit_code, title=title)

    if error is not None:
        raise DevBootstrapError.from_bootstrap_error(error) from error

    if human:
        _emit_human_footer(console, config, bctx, dry_run=dry_run, vlevel=vlevel, color=color)
    return exit_code


def _emit_human_footer(
    console: ConsoleLike,
    config: Config,
    bctx: BootstrapContext,
    *,
    dry_run: bool,
    vlevel: int,
    color: bool,
) -> None:
    if vlevel <= -2:
        return

    if dry_run:
        pending: int = sum(1 for r in bctx.results if r.status.is_pending_work)
        console.print()
        if pending:
            console.print(f"{pending} step(s) would run. Run 'devbootstrap setup' to apply.")
        else:
            console.print("Nothing to do: the development environment is already provisioned.")
        return

    console.print()
    console.print(console.styled(READY_BANNER, fg="green", bold=True) if color else READY_BANNER)
    if vlevel < 0:
        return
    lines: list[str] = quick_command_lines(config)
    if lines:
        console.print()
        for line in lines:
            console.print(line)
        console.print()
