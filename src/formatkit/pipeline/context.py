# topmark:header:start
#
#   project      : FormatKit
#   file         : context.py
#   file_relpath : src/formatkit/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable state of one setup run.

`SetupContext` is created empty by the orchestrator, filled in as each stage
completes, and frozen into the immutable `SetupResult` at the end (or at the
first fatal error, yielding a partial result).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from formatkit.core.diagnostics import DiagnosticLevel, DiagnosticLog
from formatkit.pipeline.models import SetupResult, SetupStatus

if TYPE_CHECKING:
    from formatkit.config.model import SetupOptions
    from formatkit.core.errors import FormatkitError
    from formatkit.core.manifest import PackageManifest
    from formatkit.formatters.base import FormatterDescriptor
    from formatkit.pipeline.models import ConfigArtifact, DetectionResult
    from formatkit.presets.model import StyleDescriptor


@dataclass
class SetupContext:
    """Accumulator for a setup run.

    Attributes:
        options (SetupOptions): Run options (read-only).
        diagnostics (DiagnosticLog): Warnings and errors, in the order they occurred.
        manifest (PackageManifest | None): Loaded ``package.json``.
        detection (DetectionResult | None): Detection snapshot.
        style (StyleDescriptor | None): Resolved style.
        formatters (list[FormatterDescriptor]): Formatters selected for configuration.
        artifacts (list[ConfigArtifact]): Planned or written config files (append-only).
        scripts (dict[str, str]): Planned scripts.
        updated_scripts (list[str]): Script keys added to ``package.json``.
        fatal (bool): Set once a fatal condition stopped the run.
    """

    options: SetupOptions
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    manifest: PackageManifest | None = None
    detection: DetectionResult | None = None
    style: StyleDescriptor | None = None
    formatters: list[FormatterDescriptor] = field(default_factory=lambda: [])
    artifacts: list[ConfigArtifact] = field(default_factory=lambda: [])
    scripts: dict[str, str] = field(default_factory=lambda: {})
    updated_scripts: list[str] = field(default_factory=lambda: [])
    fatal: bool = False

    def fail(self, error: FormatkitError) -> None:
        """Record a fatal domain error; the run stops after this."""
        self.diagnostics.add_error(error.kind, error.message)
        self.fatal = True

    def freeze(self) -> SetupResult:
        """Snapshot the accumulated state into an immutable `SetupResult`."""
        warnings = self.diagnostics.of_level(DiagnosticLevel.WARNING)
        status: SetupStatus
        if self.fatal:
            status = SetupStatus.FATAL
        elif warnings:
            status = SetupStatus.SUCCESS_WITH_WARNINGS
        else:
            status = SetupStatus.SUCCESS
        return SetupResult(
            status=status,
            target_dir=self.options.target_dir,
            dry_run=self.options.dry_run,
            artifacts=tuple(self.artifacts),
            updated_scripts=tuple(self.updated_scripts),
            scripts=MappingProxyType(dict(self.scripts)),
            warnings=warnings,
            errors=self.diagnostics.of_level(DiagnosticLevel.ERROR),
            detection=self.detection,
            style=self.style,
            formatters=tuple(fd.name for fd in self.formatters),
        )
