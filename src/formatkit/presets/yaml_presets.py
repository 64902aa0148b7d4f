# topmark:header:start
#
#   project      : FormatKit
#   file         : yaml_presets.py
#   file_relpath : src/formatkit/presets/yaml_presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom presets stored as YAML documents.

A YAML preset names itself, optionally extends a built-in preset or another
YAML preset living in the same directory, lists the style fields it changes
under ``common`` and may carry tool-specific settings under ``raw``:

```yaml
name: team
description: Team defaults
extends: relaxed
common:
  lineWidth: 100
  quotes:
    style: double
raw:
  prettier:
    proseWrap: never
  biome:
    linter:
      rules:
        style:
          noVar: error
```

Presets without ``extends`` are based on the ``standard`` preset. ``raw``
sections are deep-merged from the root of the ``extends`` chain down to the
preset itself, then over each formatter's generated config document.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, cast

import yaml

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.constants import DEFAULT_PRESET
from formatkit.core.errors import InvalidPresetError
from formatkit.presets.builtins import BUILTIN_PRESETS
from formatkit.presets.model import ResolvedPreset, normalize_overrides
from formatkit.utils.merge import deep_merge

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from formatkit.presets.model import StyleDescriptor

logger: FormatkitLogger = get_logger(__name__)

YAML_SUFFIXES: Final[tuple[str, ...]] = (".yaml", ".yml")

_KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {"name", "description", "extends", "common", "raw"}
)


def is_yaml_preset(preset: str) -> bool:
    """Return True when ``preset`` refers to a YAML preset file rather than a built-in name."""
    return preset.lower().endswith(YAML_SUFFIXES)


@dataclass(frozen=True)
class YamlPreset:
    """Parsed YAML preset document (inheritance not yet applied)."""

    path: Path
    name: str
    description: str = ""
    extends: str | None = None
    common: dict[str, Any] = field(default_factory=lambda: {})
    raw: dict[str, dict[str, Any]] = field(default_factory=lambda: {})


def _parse_raw(path: Path, value: Any) -> dict[str, dict[str, Any]]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidPresetError(f"Preset file {path}: 'raw' must be a mapping")
    out: dict[str, dict[str, Any]] = {}
    for tool, settings in cast("dict[Any, Any]", value).items():
        if settings is None:
            continue
        if not isinstance(settings, dict):
            raise InvalidPresetError(f"Preset file {path}: 'raw.{tool}' must be a mapping")
        out[str(tool)] = cast("dict[str, Any]", settings)
    return out


def load_yaml_preset(path: Path) -> YamlPreset:
    """Parse one YAML preset file.

    Args:
        path (Path): Path to the ``.yaml``/``.yml`` document.

    Returns:
        YamlPreset: The parsed preset.

    Raises:
        InvalidPresetError: The file is missing, is not valid YAML, lacks a name,
            or has a malformed ``common``/``raw`` section.
    """
    try:
        with path.open(encoding="utf-8") as f:
            doc: Any = yaml.safe_load(f)
    except OSError as exc:
        raise InvalidPresetError(f"Cannot read preset file {path}: {exc.strerror or exc}") from exc
    except yaml.YAMLError as exc:
        raise InvalidPresetError(f"Preset file {path} is not valid YAML: {exc}") from exc

    if not isinstance(doc, dict):
        raise InvalidPresetError(f"Preset file {path} must contain a mapping")
    name: Any = doc.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidPresetError(f"Preset file {path} must have a name")

    extends: Any = doc.get("extends")
    if extends is not None and not isinstance(extends, str):
        raise InvalidPresetError(f"Preset file {path}: 'extends' must be a string")
    common: Any = doc.get("common") or {}
    if not isinstance(common, dict):
        raise InvalidPresetError(f"Preset file {path}: 'common' must be a mapping")

    for key in doc:
        if key not in _KNOWN_KEYS:
            logger.warning("Ignoring unsupported key '%s' in preset file %s", key, path)

    description: Any = doc.get("description")
    return YamlPreset(
        path=path,
        name=name.strip(),
        description=description if isinstance(description, str) else "",
        extends=extends,
        common=dict(common),
        raw=_parse_raw(path, doc.get("raw")),
    )


def _find_parent(directory: Path, extends: str) -> Path | None:
    for suffix in YAML_SUFFIXES:
        candidate: Path = directory / f"{extends}{suffix}"
        if candidate.is_file():
            return candidate
    return None


def _merge_raw(
    parent: Mapping[str, Mapping[str, Any]],
    child: Mapping[str, Mapping[str, Any]],
) -> dict[str, dict[str, Any]]:
    merged: dict[str, dict[str, Any]] = {tool: dict(settings) for tool, settings in parent.items()}
    for tool, settings in child.items():
        merged[tool] = deep_merge(merged.get(tool, {}), settings)
    return merged


def resolve_yaml_preset_config(
    path: Path,
    *,
    _seen: frozenset[Path] = frozenset(),
) -> ResolvedPreset:
    """Resolve a YAML preset and its ``raw`` settings, following its ``extends`` chain.

    Args:
        path (Path): Path to the YAML preset.

    Returns:
        ResolvedPreset: The fully populated style and the inherited ``raw`` settings.

    Raises:
        InvalidPresetError: The preset (or a parent) is invalid, a parent cannot be
            found, or the inheritance chain is cyclic.
    """
    resolved_path: Path = path.resolve()
    if resolved_path in _seen:
        raise InvalidPresetError(f"Preset inheritance cycle detected at {path}")

    preset: YamlPreset = load_yaml_preset(path)
    logger.debug("Loaded YAML preset '%s' from %s (extends=%s)", preset.name, path, preset.extends)

    base: ResolvedPreset
    if preset.extends is None:
        base = ResolvedPreset(style=BUILTIN_PRESETS[DEFAULT_PRESET])
    else:
        parent_path: Path | None = _find_parent(path.parent, preset.extends)
        if parent_path is not None:
            base = resolve_yaml_preset_config(parent_path, _seen=_seen | {resolved_path})
        elif preset.extends in BUILTIN_PRESETS:
            base = ResolvedPreset(style=BUILTIN_PRESETS[preset.extends])
        else:
            raise InvalidPresetError(
                f"Parent preset not found: '{preset.extends}' (extended by {path})"
            )

    style: StyleDescriptor = replace(base.style, **normalize_overrides(preset.common))
    raw: dict[str, dict[str, Any]] = _merge_raw(base.raw, preset.raw)
    if raw:
        logger.trace("Raw settings of preset '%s': %s", preset.name, raw)
    return ResolvedPreset(style=style, raw=MappingProxyType(raw))
