# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/presets/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting presets: the style model, built-in presets and preset resolution."""

from __future__ import annotations

from formatkit.presets.builtins import BUILTIN_PRESETS, PRESET_DESCRIPTIONS
from formatkit.presets.model import ResolvedPreset, StyleDescriptor, normalize_overrides
from formatkit.presets.resolver import list_presets, resolve_preset, resolve_preset_config

__all__ = [
    "BUILTIN_PRESETS",
    "PRESET_DESCRIPTIONS",
    "ResolvedPreset",
    "StyleDescriptor",
    "list_presets",
    "normalize_overrides",
    "resolve_preset",
    "resolve_preset_config",
]
