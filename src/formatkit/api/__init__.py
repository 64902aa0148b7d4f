# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public FormatKit API (stable surface).

A small, typed API for running FormatKit programmatically without the CLI:

```python
from formatkit import api

result = api.setup({"target_dir": "my-app", "preset": "relaxed"}, dry_run=True)
for artifact in result.artifacts:
    print(artifact.path, "skipped" if artifact.skipped else "planned")
```

Notes:
    - `setup` accepts a frozen `SetupOptions`, a plain mapping, keyword
      arguments, or a mapping plus keyword arguments (keywords win). Mappings
      and keywords are layered on top of the project's ``formatkit.toml``
      exactly like CLI arguments.
    - Domain failures never raise from `setup`: the result has status
      ``fatal`` and the error is in `SetupResult.errors`.
    - `detect_available_formatters`, `resolve_preset` and
      `analyze_eslint_config` raise the domain errors of
      `formatkit.core.errors`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from formatkit import migration
from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.config.model import MutableSetupOptions, SetupOptions
from formatkit.constants import FORMATKIT_VERSION
from formatkit.core.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLevel
from formatkit.core.errors import ConfigError, EslintConfigError
from formatkit.pipeline.detector import detect_formatters
from formatkit.pipeline.models import SetupResult, SetupStatus
from formatkit.pipeline.orchestrator import run_setup
from formatkit.presets import resolver
from formatkit.registry.formatters import FormatterRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping

    from formatkit.migration import MigrationAnalysis
    from formatkit.pipeline.models import DetectionResult
    from formatkit.presets.model import StyleDescriptor
    from formatkit.registry.formatters import FormatterInfo

logger: FormatkitLogger = get_logger(__name__)

__all__: list[str] = [
    "analyze_eslint_config",
    "detect_available_formatters",
    "list_formatters",
    "list_presets",
    "resolve_preset",
    "setup",
    "version",
]

_OPTION_KEYS: Final[frozenset[str]] = frozenset(
    {
        "target_dir",
        "targetDir",
        "preset",
        "style",
        "formatters",
        "update_scripts",
        "updateScripts",
        "force",
        "devcontainer",
        "dry_run",
        "dryRun",
        "config_file",
        "no_config",
    }
)


def _build_options(args: Mapping[str, Any]) -> SetupOptions:
    unknown: list[str] = sorted(k for k in args if k not in _OPTION_KEYS)
    if unknown:
        raise TypeError(f"Unknown setup option(s): {', '.join(unknown)}")
    raw_dir: Any = args.get("target_dir", args.get("targetDir"))
    target_dir = Path(raw_dir) if raw_dir is not None else Path(".")
    config_file: Any = args.get("config_file")
    draft: MutableSetupOptions = MutableSetupOptions.load_merged(
        target_dir,
        config_file=Path(config_file) if config_file is not None else None,
        no_config=bool(args.get("no_config", False)),
    )
    overrides: dict[str, Any] = {
        k: v for k, v in args.items() if k not in ("config_file", "no_config")
    }
    return draft.apply_cli_args(overrides).freeze()


def setup(
    options: SetupOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> SetupResult:
    """Configure the detected formatters of a project.

    Args:
        options (SetupOptions | Mapping[str, Any] | None): Frozen options, or a mapping
            with keys ``target_dir``, ``preset``, ``style``, ``formatters``,
            ``update_scripts``, ``force``, ``devcontainer``, ``dry_run``, ``config_file``,
            ``no_config``.
        **kwargs (Any): Same keys as the mapping; they override it.

    Returns:
        SetupResult: Run report. With ``dry_run`` nothing is written.

    Raises:
        TypeError: Unknown option names, or a `SetupOptions` combined with keyword arguments.
    """
    if isinstance(options, SetupOptions):
        if kwargs:
            raise TypeError("Keyword arguments cannot be combined with a SetupOptions instance")
        return run_setup(options)

    args: dict[str, Any] = {**(options or {}), **kwargs}
    try:
        frozen: SetupOptions = _build_options(args)
    except ConfigError as exc:
        logger.error("%s", exc.message)
        raw_dir: Any = args.get("target_dir", args.get("targetDir", "."))
        return SetupResult(
            status=SetupStatus.FATAL,
            target_dir=Path(raw_dir),
            dry_run=bool(args.get("dry_run", args.get("dryRun", False))),
            errors=(Diagnostic(DiagnosticLevel.ERROR, DiagnosticKind.CONFIG_FILE, exc.message),),
        )
    return run_setup(frozen)


def detect_available_formatters(target_dir: Path | str = ".") -> DetectionResult:
    """Detect the formatters used by a project.

    Raises:
        MissingManifestError: ``package.json`` does not exist.
        InvalidManifestError: ``package.json`` cannot be parsed.
    """
    return detect_formatters(Path(target_dir))


def resolve_preset(
    preset: str | None = "standard",
    overrides: Mapping[str, Any] | None = None,
    *,
    base_dir: Path | str | None = None,
) -> StyleDescriptor:
    """Resolve a preset name (or YAML preset path) plus overrides into a complete style.

    Raises:
        InvalidPresetError: Unknown preset, invalid YAML preset or invalid override.
    """
    return resolver.resolve_preset(
        preset, overrides, base_dir=Path(base_dir) if base_dir is not None else None
    )


def analyze_eslint_config(
    config: Path | str | None = None,
    *,
    target_dir: Path | str = ".",
) -> MigrationAnalysis:
    """Analyze an ESLint config for a migration to Biome.

    When ``config`` is omitted the config is discovered in ``target_dir``.

    Raises:
        EslintConfigError: No config was found, or it cannot be parsed.
    """
    path: Path | None = (
        Path(config) if config is not None else migration.find_eslint_config(Path(target_dir))
    )
    if path is None:
        raise EslintConfigError(Path(target_dir), "no ESLint config found")
    return migration.analyze_eslint_config(path)


def list_presets() -> Mapping[str, StyleDescriptor]:
    """Return the built-in presets by name, in declaration order."""
    return resolver.list_presets()


def list_formatters() -> list[FormatterInfo]:
    """Return metadata for every registered formatter, in registry order."""
    return list(FormatterRegistry.iter_info())


def version() -> str:
    """Return the installed FormatKit version."""
    return FORMATKIT_VERSION
