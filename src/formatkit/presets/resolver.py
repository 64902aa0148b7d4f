# topmark:header:start
#
#   project      : FormatKit
#   file         : resolver.py
#   file_relpath : src/formatkit/presets/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Preset resolution.

Turns a preset reference (built-in name or YAML preset path) plus an optional
partial override mapping into one complete `StyleDescriptor`. YAML presets may
also carry per-formatter ``raw`` settings, returned alongside the style in a
`ResolvedPreset`.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.constants import DEFAULT_PRESET
from formatkit.core.errors import InvalidPresetError
from formatkit.presets.builtins import BUILTIN_PRESETS
from formatkit.presets.model import ResolvedPreset, normalize_overrides
from formatkit.presets.yaml_presets import is_yaml_preset, resolve_yaml_preset_config

if TYPE_CHECKING:
    from collections.abc import Mapping

    from formatkit.presets.model import StyleDescriptor

logger: FormatkitLogger = get_logger(__name__)


def resolve_preset_config(
    preset: str | None = None,
    overrides: Mapping[str, Any] | None = None,
    *,
    base_dir: Path | None = None,
) -> ResolvedPreset:
    """Resolve a preset and overlay caller overrides.

    Resolution starts from the complete descriptor of the named preset (the
    ``standard`` preset when ``preset`` is None) and replaces each field that
    is present in ``overrides``. The same inputs always yield an equal result.

    Args:
        preset (str | None): Built-in preset name or path to a ``.yaml``/``.yml`` preset.
        overrides (Mapping[str, Any] | None): Partial style mapping (snake_case or camelCase).
        base_dir (Path | None): Directory relative YAML preset paths are resolved against
            (defaults to the current working directory).

    Returns:
        ResolvedPreset: Fully populated style, plus the ``raw`` settings of a YAML preset.

    Raises:
        InvalidPresetError: Unknown preset name, invalid YAML preset, or invalid override.
    """
    name: str = DEFAULT_PRESET if preset is None else preset.strip()

    base: ResolvedPreset
    if is_yaml_preset(name):
        path = Path(name)
        if not path.is_absolute():
            path = (base_dir or Path.cwd()) / path
        base = resolve_yaml_preset_config(path)
    elif name in BUILTIN_PRESETS:
        base = ResolvedPreset(style=BUILTIN_PRESETS[name])
    else:
        available: str = ", ".join(BUILTIN_PRESETS)
        raise InvalidPresetError(f"Unknown preset '{name}' (available: {available})")

    changes: dict[str, Any] = normalize_overrides(overrides)
    logger.debug("Resolved preset '%s' with overrides %s", name, sorted(changes))
    return replace(base, style=replace(base.style, **changes))


def resolve_preset(
    preset: str | None = None,
    overrides: Mapping[str, Any] | None = None,
    *,
    base_dir: Path | None = None,
) -> StyleDescriptor:
    """Resolve a preset to its style only; see `resolve_preset_config`."""
    return resolve_preset_config(preset, overrides, base_dir=base_dir).style


def list_presets() -> Mapping[str, StyleDescriptor]:
    """Return the built-in presets as a read-only mapping, in declaration order."""
    return MappingProxyType(dict(BUILTIN_PRESETS))
