# topmark:header:start
#
#   project      : devbootstrap
#   file         : model.py
#   file_relpath : src/devbootstrap/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and layering.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the provisioning steps.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. the packaged ``devbootstrap-default.toml``
    2. ``[tool.devbootstrap]`` in ``<root>/pyproject.toml``
    3. ``<root>/devbootstrap.toml``
    4. explicit ``--config`` files, in order
    5. CLI overrides (`MutableConfig.apply_args`)

Each layer replaces the keys it sets; lists are replaced, not concatenated.
The only exception is ``skip_steps`` from the CLI, which extends the configured
set.

Validation:
    - Unknown keys are recorded as diagnostics and otherwise ignored.
    - Values of the wrong type raise `ConfigError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from devbootstrap.config.keys import KNOWN_KEYS, STRING_KEYS, STRING_LIST_KEYS, Toml
from devbootstrap.config.loaders import (
    extract_pyproject_table,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from devbootstrap.config.logging import get_logger
from devbootstrap.constants import PROJECT_CONFIG_NAME, PYPROJECT_NAME
from devbootstrap.core.errors import ConfigError
from devbootstrap.core.keys import STEP_NAMES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from devbootstrap.config.loaders import TomlTable
    from devbootstrap.config.logging import DevBootstrapLogger

# ArgsLike: generic mapping accepted by config loaders (CLI namespaces and plain dicts).
ArgsLike = Mapping[str, Any]

DEFAULTS_SOURCE: str = "<defaults>"

logger: DevBootstrapLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class QuickCommand:
    """A command advertised in the post-setup summary."""

    command: str
    description: str


def _ordered_steps(names: Iterable[str]) -> list[str]:
    """Return ``names`` in pipeline order."""
    wanted: set[str] = set(names)
    return [name for name in STEP_NAMES if name in wanted]


def _validate_step_names(names: Iterable[str], *, source: str) -> None:
    unknown: list[str] = sorted(set(names) - set(STEP_NAMES))
    if unknown:
        raise ConfigError(
            f"{source}: unknown step(s) in '{Toml.KEY_SKIP_STEPS}': {', '.join(unknown)} "
            f"(expected any of: {', '.join(STEP_NAMES)})"
        )


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        root (Path): Project root; all relative paths resolve against it.
        package_manager (str): Executable that must be on PATH (``uv``).
        installer_url (str): URL of the package manager's installer shell script.
        installer_bin_dirs (tuple[str, ...]): Directories prepended to PATH after
            installing (``~`` is expanded).
        sync_args (tuple[str, ...]): Extra arguments for ``<package_manager> sync``.
        hook_types (tuple[str, ...]): Hook stages passed to ``pre-commit install -t``.
        secrets_baseline (str): Baseline path, relative to ``root``.
        secrets_scan_args (tuple[str, ...]): Extra arguments for ``detect-secrets scan``.
        test_dirs (tuple[str, ...]): Directories to scaffold, relative to ``root``.
        skip_steps (frozenset[str]): Steps disabled by configuration or CLI.
        quick_commands (tuple[QuickCommand, ...]): Commands shown in the summary.
        config_files (tuple[str, ...]): Sources that contributed, in load order.
        diagnostics (tuple[str, ...]): Non-fatal warnings collected while loading.
    """

    root: Path
    package_manager: str
    installer_url: str
    installer_bin_dirs: tuple[str, ...]
    sync_args: tuple[str, ...]
    hook_types: tuple[str, ...]
    secrets_baseline: str
    secrets_scan_args: tuple[str, ...]
    test_dirs: tuple[str, ...]
    skip_steps: frozenset[str]
    quick_commands: tuple[QuickCommand, ...]
    config_files: tuple[str, ...] = ()
    diagnostics: tuple[str, ...] = ()

    @property
    def baseline_path(self) -> Path:
        """Absolute path of the secrets baseline."""
        return self.root / self.secrets_baseline

    def test_dir_paths(self) -> list[Path]:
        """Absolute paths of the directories to scaffold."""
        return [self.root / d for d in self.test_dirs]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            root=self.root,
            package_manager=self.package_manager,
            installer_url=self.installer_url,
            installer_bin_dirs=list(self.installer_bin_dirs),
            sync_args=list(self.sync_args),
            hook_types=list(self.hook_types),
            secrets_baseline=self.secrets_baseline,
            secrets_scan_args=list(self.secrets_scan_args),
            test_dirs=list(self.test_dirs),
            skip_steps=_ordered_steps(self.skip_steps),
            quick_commands=list(self.quick_commands),
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the schema-level settings as a TOML-ready dict.

        ``root``, ``config_files`` and ``diagnostics`` describe *how* the
        config was resolved and are not part of the schema.
        """
        return {
            Toml.KEY_PACKAGE_MANAGER: self.package_manager,
            Toml.KEY_INSTALLER_URL: self.installer_url,
            Toml.KEY_INSTALLER_BIN_DIRS: list(self.installer_bin_dirs),
            Toml.KEY_SYNC_ARGS: list(self.sync_args),
            Toml.KEY_HOOK_TYPES: list(self.hook_types),
            Toml.KEY_SECRETS_BASELINE: self.secrets_baseline,
            Toml.KEY_SECRETS_SCAN_ARGS: list(self.secrets_scan_args),
            Toml.KEY_TEST_DIRS: list(self.test_dirs),
            Toml.KEY_SKIP_STEPS: _ordered_steps(self.skip_steps),
            Toml.KEY_QUICK_COMMANDS: [
                {Toml.KEY_COMMAND: qc.command, Toml.KEY_DESCRIPTION: qc.description}
                for qc in self.quick_commands
            ],
        }

    def to_toml(self) -> str:
        """Render the effective configuration as a TOML document."""
        return to_toml(self.to_toml_dict())


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Field defaults match the packaged template so a builder is usable even
    without loading any TOML (e.g. in unit tests).
    """

    root: Path = field(default_factory=Path.cwd)
    package_manager: str = "uv"
    installer_url: str = "https://astral.sh/uv/install.sh"
    installer_bin_dirs: list[str] = field(default_factory=lambda: ["~/.local/bin", "~/.cargo/bin"])
    sync_args: list[str] = field(default_factory=lambda: ["--all-extras"])
    hook_types: list[str] = field(default_factory=lambda: ["pre-commit", "pre-push"])
    secrets_baseline: str = ".secrets.baseline"
    secrets_scan_args: list[str] = field(default_factory=list)
    test_dirs: list[str] = field(
        default_factory=lambda: ["tests/unit", "tests/integration", "tests/contract"]
    )
    skip_steps: list[str] = field(default_factory=list)
    quick_commands: list[QuickCommand] = field(default_factory=list)
    config_files: list[str] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)

    @classmethod
    def from_defaults(cls, root: Path | None = None) -> MutableConfig:
        """Return a builder initialized from the packaged default template."""
        cfg = cls(root=root if root is not None else Path.cwd())
        cfg.apply_toml(load_defaults_dict(), source=DEFAULTS_SOURCE)
        return cfg

    @classmethod
    def load_merged(
        cls,
        *,
        root: Path | None = None,
        config_paths: Iterable[str | Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Build a builder from all configuration layers.

        Args:
            root (Path | None): Project root (defaults to the current directory).
            config_paths (Iterable[str | Path]): Extra TOML files applied last, in order.
                Relative paths resolve against the current directory.
            no_config (bool): Skip discovery of ``pyproject.toml`` and
                ``devbootstrap.toml`` in ``root``.

        Returns:
            MutableConfig: The merged builder (not yet frozen).

        Raises:
            ConfigError: If an explicit config file does not exist or any source is invalid.
        """
        project_root: Path = (root if root is not None else Path.cwd()).resolve()
        cfg: MutableConfig = cls.from_defaults(project_root)

        if not no_config:
            for candidate in (project_root / PYPROJECT_NAME, project_root / PROJECT_CONFIG_NAME):
                if candidate.is_file():
                    cfg.apply_file(candidate)
        else:
            logger.info("Config discovery disabled (--no-config)")

        for raw in config_paths:
            path = Path(raw).expanduser()
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            cfg.apply_file(path)

        return cfg

    def apply_file(self, path: Path) -> None:
        """Apply one TOML file; ``pyproject.toml`` contributes only ``[tool.devbootstrap]``."""
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_NAME:
            table: TomlTable | None = extract_pyproject_table(data, source=str(path))
            if table is None:
                logger.debug("No [tool.devbootstrap] table in %s", path)
                return
            data = table
        self.apply_toml(data, source=str(path))

    def apply_toml(self, table: Mapping[str, Any], *, source: str) -> None:
        """Overlay the keys present in ``table`` onto this builder.

        Raises:
            ConfigError: If a known key has a value of the wrong type.
        """
        for key, value in table.items():
            if key not in KNOWN_KEYS:
                msg = f"{source}: unknown configuration key '{key}' (ignored)"
                logger.warning(msg)
                self.diagnostics.append(msg)
                continue

            if key in STRING_KEYS:
                if not isinstance(value, str) or not value.strip():
                    raise ConfigError(f"{source}: '{key}' must be a non-empty string")
                setattr(self, key, value)
            elif key in STRING_LIST_KEYS:
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigError(f"{source}: '{key}' must be a list of strings")
                if key == Toml.KEY_SKIP_STEPS:
                    _validate_step_names(value, source=source)
                setattr(self, key, list(value))
            else:
                self.quick_commands = self._parse_quick_commands(value, source=source)

        self.config_files.append(source)
        logger.debug("Applied config from %s", source)

    @staticmethod
    def _parse_quick_commands(value: Any, *, source: str) -> list[QuickCommand]:
        if not isinstance(value, list):
            raise ConfigError(f"{source}: '{Toml.KEY_QUICK_COMMANDS}' must be an array of tables")
        commands: list[QuickCommand] = []
        for entry in value:
            if not isinstance(entry, Mapping):
                raise ConfigError(
                    f"{source}: '{Toml.KEY_QUICK_COMMANDS}' entries must be tables "
                    f"with '{Toml.KEY_COMMAND}' and '{Toml.KEY_DESCRIPTION}'"
                )
            command: Any = entry.get(Toml.KEY_COMMAND)
            description: Any = entry.get(Toml.KEY_DESCRIPTION, "")
            if not isinstance(command, str) or not isinstance(description, str):
                raise ConfigError(
                    f"{source}: '{Toml.KEY_QUICK_COMMANDS}' entries need a string "
                    f"'{Toml.KEY_COMMAND}' (and optional string '{Toml.KEY_DESCRIPTION}')"
                )
            commands.append(QuickCommand(command=command, description=description))
        return commands

    def apply_args(self, args: ArgsLike) -> None:
        """Apply CLI overrides.

        Recognized keys: ``skip_steps`` (extends the configured set).
        """
        skip: Iterable[str] | None = args.get("skip_steps")
        if skip:
            skip_list: list[str] = list(skip)
            _validate_step_names(skip_list, source="command line")
            self.skip_steps = _ordered_steps([*self.skip_steps, *skip_list])

    def freeze(self) -> Config:
        """Return an immutable snapshot of this builder."""
        return Config(
            root=self.root,
            package_manager=self.package_manager,
            installer_url=self.installer_url,
            installer_bin_dirs=tuple(self.installer_bin_dirs),
            sync_args=tuple(self.sync_args),
            hook_types=tuple(self.hook_types),
            secrets_baseline=self.secrets_baseline,
            secrets_scan_args=tuple(self.secrets_scan_args),
            test_dirs=tuple(self.test_dirs),
            skip_steps=frozenset(self.skip_steps),
            quick_commands=tuple(self.quick_commands),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )
