# topmark:header:start
#
#   project      : FormatKit
#   file         : model.py
#   file_relpath : src/formatkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Setup options: immutable runtime snapshot plus a mutable merge builder.

Options are layered from lowest to highest precedence:

1. built-in defaults (`MutableSetupOptions.from_defaults`);
2. the project's ``formatkit.toml`` in the target directory, or an explicit
   ``--config`` file;
3. CLI arguments or library keyword arguments (`MutableSetupOptions.apply_cli_args`).

`MutableSetupOptions` keeps tri-state (``None`` = inherit) fields so that
`merge_with` only lets explicitly set values win. `freeze` produces the
read-only `SetupOptions` consumed by the pipeline.

TOML I/O is delegated to `formatkit.config.io`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

import tomlkit

from formatkit.config.io import (
    get_bool_value_or_none_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_toml_dict,
    warn_unknown_keys,
)
from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.constants import CONFIG_FILE_NAME, DEFAULT_PRESET
from formatkit.core.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from formatkit.core.errors import InvalidPresetError
from formatkit.presets.model import normalize_overrides
from formatkit.presets.yaml_presets import is_yaml_preset

if TYPE_CHECKING:
    from collections.abc import Mapping

    from formatkit.config.io import TomlTable

logger: FormatkitLogger = get_logger(__name__)

SETUP_KEYS: Final[frozenset[str]] = frozenset(
    {"preset", "formatters", "update_scripts", "force", "devcontainer"}
)
TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({"setup", "style"})

CLI_OVERRIDE_STR: Final[str] = "<CLI overrides>"

# camelCase spellings accepted from library callers
_ARG_ALIASES: Final[dict[str, str]] = {
    "targetDir": "target_dir",
    "updateScripts": "update_scripts",
    "dryRun": "dry_run",
}


@dataclass(frozen=True)
class SetupOptions:
    """Immutable options for one setup run.

    Attributes:
        target_dir (Path): Project directory holding ``package.json``.
        preset (str | None): Built-in preset name or YAML preset path. None means the
            default preset.
        style (Mapping[str, Any]): Inline style overrides applied on top of the preset.
        formatters (tuple[str, ...]): Explicit subset of formatters to configure.
            Empty means every detected formatter.
        update_scripts (bool): Merge scripts into ``package.json``.
        force (bool): Overwrite existing config files.
        devcontainer (bool): Also generate a dev container config.
        dry_run (bool): Plan everything, write nothing.
        config_files (tuple[str, ...]): Provenance of the merged options.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading config files.
    """

    target_dir: Path = Path(".")
    preset: str | None = DEFAULT_PRESET
    style: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    formatters: tuple[str, ...] = ()
    update_scripts: bool = True
    force: bool = False
    devcontainer: bool = False
    dry_run: bool = False
    config_files: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def thaw(self) -> MutableSetupOptions:
        """Return a mutable copy of these options."""
        return MutableSetupOptions(
            target_dir=self.target_dir,
            preset=self.preset,
            style=dict(self.style),
            formatters=list(self.formatters),
            update_scripts=self.update_scripts,
            force=self.force,
            devcontainer=self.devcontainer,
            dry_run=self.dry_run,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "target_dir": str(self.target_dir),
            "preset": self.preset,
            "style": dict(self.style),
            "formatters": list(self.formatters),
            "update_scripts": self.update_scripts,
            "force": self.force,
            "devcontainer": self.devcontainer,
            "dry_run": self.dry_run,
            "config_files": list(self.config_files),
        }


@dataclass
class MutableSetupOptions:
    """Mutable builder collecting options from defaults, config files and arguments.

    Attributes:
        target_dir (Path | None): Project directory. None = inherit.
        preset (str | None): Preset reference. None = inherit.
        style (dict[str, Any]): Style overrides, merged key-wise.
        formatters (list[str] | None): Requested formatters. None = inherit.
        update_scripts (bool | None): None = inherit.
        force (bool | None): None = inherit.
        devcontainer (bool | None): None = inherit.
        dry_run (bool | None): None = inherit.
        config_files (list[str]): Provenance of the values.
        diagnostics (DiagnosticLog): Warnings collected while loading and merging.
    """

    target_dir: Path | None = None
    preset: str | None = None
    style: dict[str, Any] = field(default_factory=lambda: {})
    formatters: list[str] | None = None
    update_scripts: bool | None = None
    force: bool | None = None
    devcontainer: bool | None = None
    dry_run: bool | None = None
    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> SetupOptions:
        """Freeze this builder into immutable `SetupOptions` (unset fields take defaults)."""
        return SetupOptions(
            target_dir=self.target_dir if self.target_dir is not None else Path("."),
            preset=self.preset if self.preset is not None else DEFAULT_PRESET,
            style=MappingProxyType(dict(self.style)),
            formatters=tuple(self.formatters or ()),
            update_scripts=self.update_scripts if self.update_scripts is not None else True,
            force=bool(self.force),
            devcontainer=bool(self.devcontainer),
            dry_run=bool(self.dry_run),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics.items),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableSetupOptions:
        """Return a builder holding the built-in defaults."""
        return cls(
            preset=DEFAULT_PRESET,
            formatters=[],
            update_scripts=True,
            force=False,
            devcontainer=False,
            dry_run=False,
        )

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableSetupOptions:
        """Create a builder from a parsed ``formatkit.toml`` document.

        Unknown keys, wrongly typed values and invalid style entries are
        recorded as ``config-file`` warnings and ignored.

        Args:
            data (TomlTable): Parsed TOML document.
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableSetupOptions: Builder with only the values present in ``data`` set.
        """
        draft: MutableSetupOptions = cls()
        diags: DiagnosticLog = draft.diagnostics
        if config_file is not None:
            draft.config_files.append(str(config_file))

        warn_unknown_keys(data, TOP_LEVEL_KEYS, where="<root>", diagnostics=diags)

        setup_tbl: TomlTable = get_table_value(data, "setup", diagnostics=diags)
        logger.trace("TOML [setup]: %s", setup_tbl)
        warn_unknown_keys(setup_tbl, SETUP_KEYS, where="setup", diagnostics=diags)

        preset: str | None = get_string_value_or_none_checked(
            setup_tbl, "preset", where="setup", diagnostics=diags
        )
        if preset is not None and config_file is not None and is_yaml_preset(preset):
            # YAML preset paths in a config file are relative to that file
            preset_path = Path(preset)
            if not preset_path.is_absolute():
                preset = str(config_file.parent / preset_path)
        draft.preset = preset
        draft.formatters = get_string_list_value_checked(
            setup_tbl, "formatters", where="setup", diagnostics=diags
        )
        draft.update_scripts = get_bool_value_or_none_checked(
            setup_tbl, "update_scripts", where="setup", diagnostics=diags
        )
        draft.force = get_bool_value_or_none_checked(
            setup_tbl, "force", where="setup", diagnostics=diags
        )
        draft.devcontainer = get_bool_value_or_none_checked(
            setup_tbl, "devcontainer", where="setup", diagnostics=diags
        )

        style_tbl: TomlTable = get_table_value(data, "style", diagnostics=diags)
        logger.trace("TOML [style]: %s", style_tbl)
        for key, value in style_tbl.items():
            try:
                normalize_overrides({key: value})
            except InvalidPresetError as exc:
                logger.warning("Ignoring [style] entry %s: %s", key, exc.message)
                diags.add_warning(DiagnosticKind.CONFIG_FILE, f"[style] {exc.message}: ignored")
                continue
            draft.style[key] = value

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableSetupOptions:
        """Load a builder from a TOML file.

        Raises:
            ConfigError: The file cannot be read or parsed.
        """
        logger.debug("Loading setup options from %s", path)
        return cls.from_toml_dict(load_toml_dict(path), config_file=path)

    @classmethod
    def load_merged(
        cls,
        target_dir: Path,
        *,
        config_file: Path | None = None,
        no_config: bool = False,
    ) -> MutableSetupOptions:
        """Merge defaults with the project config file (or an explicit one).

        Args:
            target_dir (Path): Project directory searched for ``formatkit.toml``.
            config_file (Path | None): Explicit config file; replaces the project file.
            no_config (bool): Skip the project file. An explicit ``config_file`` is
                still honored.

        Returns:
            MutableSetupOptions: The merged builder (CLI overrides not yet applied).

        Raises:
            ConfigError: A config file exists but cannot be parsed.
        """
        merged: MutableSetupOptions = cls.from_defaults()
        merged.target_dir = target_dir

        path: Path | None = config_file
        if path is None and not no_config:
            candidate: Path = target_dir / CONFIG_FILE_NAME
            if candidate.is_file():
                path = candidate
        if path is not None:
            merged = merged.merge_with(cls.from_toml_file(path))
        else:
            logger.debug("No config file used for %s", target_dir)
        return merged

    # ------------------------------ Merging -------------------------------
    def merge_with(self, other: MutableSetupOptions) -> MutableSetupOptions:
        """Return a new builder where explicitly set values of ``other`` win.

        Style overrides are merged key-wise; diagnostics and provenance are
        concatenated.
        """
        merged = MutableSetupOptions(
            target_dir=other.target_dir if other.target_dir is not None else self.target_dir,
            preset=other.preset if other.preset is not None else self.preset,
            style={**self.style, **other.style},
            formatters=other.formatters if other.formatters is not None else self.formatters,
            update_scripts=other.update_scripts
            if other.update_scripts is not None
            else self.update_scripts,
            force=other.force if other.force is not None else self.force,
            devcontainer=other.devcontainer
            if other.devcontainer is not None
            else self.devcontainer,
            dry_run=other.dry_run if other.dry_run is not None else self.dry_run,
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics.extend(self.diagnostics.items)
        merged.diagnostics.extend(other.diagnostics.items)
        return merged

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableSetupOptions:
        """Apply overrides from a CLI or library argument mapping.

        Only keys present with a non-None value override; ``style`` entries are
        merged on top of the existing overrides. Keys may use snake_case or
        camelCase (``dryRun``, ``updateScripts``, ``targetDir``).

        Args:
            args (Mapping[str, Any]): Parsed arguments.

        Returns:
            MutableSetupOptions: This builder, updated in place.
        """
        logger.debug("Applying arguments to setup options: %s", args)
        normalized: dict[str, Any] = {_ARG_ALIASES.get(k, k): v for k, v in args.items()}
        self.config_files.append(CLI_OVERRIDE_STR)

        if normalized.get("target_dir") is not None:
            self.target_dir = Path(normalized["target_dir"])
        if normalized.get("preset") is not None:
            self.preset = str(normalized["preset"])
        if normalized.get("style"):
            self.style.update(dict(normalized["style"]))
        if normalized.get("formatters") is not None:
            self.formatters = [str(name) for name in normalized["formatters"]]
        for flag in ("update_scripts", "force", "devcontainer", "dry_run"):
            if normalized.get(flag) is not None:
                setattr(self, flag, bool(normalized[flag]))
        return self


def render_default_config_toml() -> str:
    """Render the default ``formatkit.toml`` document, with comments."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment("FormatKit configuration"))
    doc.add(tomlkit.nl())

    setup_tbl = tomlkit.table()
    setup_tbl.add("preset", DEFAULT_PRESET)
    setup_tbl["preset"].comment("standard | strict | relaxed | path/to/preset.yaml")
    setup_tbl.add("formatters", tomlkit.array())
    setup_tbl["formatters"].comment("empty: every detected formatter")
    setup_tbl.add("update_scripts", True)
    setup_tbl.add("force", False)
    setup_tbl.add("devcontainer", False)
    setup_tbl["devcontainer"].comment("also write .devcontainer/devcontainer.json")
    doc.add("setup", setup_tbl)

    style_tbl = tomlkit.table()
    style_tbl.add(tomlkit.comment("Inline overrides applied on top of the preset, e.g.:"))
    style_tbl.add(tomlkit.comment("line_width = 100"))
    style_tbl.add(tomlkit.comment('quote_style = "double"'))
    doc.add("style", style_tbl)

    return tomlkit.dumps(doc)
