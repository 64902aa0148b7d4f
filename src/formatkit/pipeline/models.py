# topmark:header:start
#
#   project      : FormatKit
#   file         : models.py
#   file_relpath : src/formatkit/pipeline/models.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable records produced by the setup pipeline.

Every record here is built fresh on each run and never persisted. `SetupResult`
is the sole output contract of a setup run, for the CLI and library callers
alike.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from formatkit.core.diagnostics import Diagnostic
    from formatkit.core.manifest import PackageManager
    from formatkit.presets.model import StyleDescriptor


class DetectionStatus(str, Enum):
    """How one formatter was classified in a project."""

    AVAILABLE = "available"
    # Config file present without the package (e.g. a globally installed binary)
    UNVERIFIED = "unverified"
    MISSING = "missing"


@dataclass(frozen=True)
class FormatterDetection:
    """Detection record for one registered formatter.

    Attributes:
        name (str): Formatter name.
        status (DetectionStatus): Classification.
        section (str | None): ``dependencies`` or ``devDependencies`` when a package matched.
        package (str | None): Package that matched.
        version (str | None): Declared version range of that package.
        config_files (tuple[str, ...]): Known config files found in the project.
    """

    name: str
    status: DetectionStatus
    section: str | None = None
    package: str | None = None
    version: str | None = None
    config_files: tuple[str, ...] = ()

    @property
    def available(self) -> bool:
        """True for both verified and unverified availability."""
        return self.status is not DetectionStatus.MISSING

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "name": self.name,
            "status": self.status.value,
            "section": self.section,
            "package": self.package,
            "version": self.version,
            "config_files": list(self.config_files),
        }


@dataclass(frozen=True)
class DetectionResult:
    """Per-project detection snapshot.

    ``available`` includes unverified formatters; ``conflicting`` lists the
    available formatters that share an exclusive role with another available
    one. All name tuples follow registry declaration order.
    """

    target_dir: Path
    package_manager: PackageManager
    formatters: tuple[FormatterDetection, ...]
    available: tuple[str, ...]
    missing: tuple[str, ...]
    conflicting: tuple[str, ...]
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def unverified(self) -> tuple[str, ...]:
        """Names of formatters detected through config files only."""
        return tuple(d.name for d in self.formatters if d.status is DetectionStatus.UNVERIFIED)

    def get(self, name: str) -> FormatterDetection | None:
        """Return the detection record of one formatter."""
        for d in self.formatters:
            if d.name == name:
                return d
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "target_dir": str(self.target_dir),
            "package_manager": self.package_manager.value,
            "available": list(self.available),
            "missing": list(self.missing),
            "conflicting": list(self.conflicting),
            "unverified": list(self.unverified),
            "formatters": [d.to_dict() for d in self.formatters],
            "warnings": [w.to_dict() for w in self.warnings],
        }


@dataclass(frozen=True)
class ConfigArtifact:
    """One planned or written configuration file.

    Attributes:
        formatter (str): Formatter owning the file (``devcontainer`` for the dev container
            config).
        path (Path): Target path.
        content (str): Serialized content (also kept for skipped artifacts, as a preview).
        skipped (bool): True when an existing config file prevented the write.
        existing_path (Path | None): The existing file that caused the skip.
        written (bool): True once the content has actually been written to disk.
    """

    formatter: str
    path: Path
    content: str
    skipped: bool = False
    existing_path: Path | None = None
    written: bool = False

    def to_dict(self, *, include_content: bool = False) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        out: dict[str, Any] = {
            "formatter": self.formatter,
            "path": str(self.path),
            "skipped": self.skipped,
            "existing_path": str(self.existing_path) if self.existing_path else None,
            "written": self.written,
        }
        if include_content:
            out["content"] = self.content
        return out


class SetupStatus(str, Enum):
    """Terminal state of a setup run."""

    SUCCESS = "success"
    SUCCESS_WITH_WARNINGS = "success-with-warnings"
    FATAL = "fatal"


@dataclass(frozen=True)
class SetupResult:
    """Aggregate report of a setup run.

    Attributes:
        status (SetupStatus): Terminal state.
        target_dir (Path): Project directory.
        dry_run (bool): Whether writes were elided.
        artifacts (tuple[ConfigArtifact, ...]): Planned or written config files.
        updated_scripts (tuple[str, ...]): Script keys added to ``package.json``.
        scripts (Mapping[str, str]): Every script this run planned (key -> command).
        warnings (tuple[Diagnostic, ...]): Non-fatal conditions.
        errors (tuple[Diagnostic, ...]): The fatal condition that stopped the run, if any.
        detection (DetectionResult | None): Detection snapshot (None if never reached).
        style (StyleDescriptor | None): Resolved style (None if never reached).
        formatters (tuple[str, ...]): Formatters selected for configuration.
    """

    status: SetupStatus
    target_dir: Path
    dry_run: bool = False
    artifacts: tuple[ConfigArtifact, ...] = ()
    updated_scripts: tuple[str, ...] = ()
    scripts: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    warnings: tuple[Diagnostic, ...] = ()
    errors: tuple[Diagnostic, ...] = ()
    detection: DetectionResult | None = None
    style: StyleDescriptor | None = None
    formatters: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        """False only when a fatal condition stopped the run."""
        return self.status is not SetupStatus.FATAL

    def to_dict(self, *, include_content: bool = False) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "status": self.status.value,
            "success": self.success,
            "target_dir": str(self.target_dir),
            "dry_run": self.dry_run,
            "formatters": list(self.formatters),
            "style": self.style.to_dict() if self.style else None,
            "artifacts": [a.to_dict(include_content=include_content) for a in self.artifacts],
            "updated_scripts": list(self.updated_scripts),
            "scripts": dict(self.scripts),
            "warnings": [w.to_dict() for w in self.warnings],
            "errors": [e.to_dict() for e in self.errors],
            "detection": self.detection.to_dict() if self.detection else None,
        }
