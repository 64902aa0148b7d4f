# topmark:header:start
#
#   project      : FormatKit
#   file         : types.py
#   file_relpath : src/formatkit/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public types returned by `formatkit.api`.

Re-exported here so integrations do not need to import internal modules.
"""

from __future__ import annotations

from formatkit.config.model import SetupOptions
from formatkit.core.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLevel
from formatkit.pipeline.models import (
    ConfigArtifact,
    DetectionResult,
    DetectionStatus,
    FormatterDetection,
    SetupResult,
    SetupStatus,
)
from formatkit.presets.model import StyleDescriptor
from formatkit.registry.formatters import FormatterInfo

__all__ = [
    "ConfigArtifact",
    "DetectionResult",
    "DetectionStatus",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLevel",
    "FormatterDetection",
    "FormatterInfo",
    "SetupOptions",
    "SetupResult",
    "SetupStatus",
    "StyleDescriptor",
]
