# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registries exposed to plugins and tests."""

from __future__ import annotations

from formatkit.registry.formatters import FormatterInfo, FormatterRegistry

__all__ = ["FormatterInfo", "FormatterRegistry"]
