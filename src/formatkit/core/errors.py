# topmark:header:start
#
#   project      : FormatKit
#   file         : errors.py
#   file_relpath : src/formatkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain errors raised by the FormatKit pipeline.

These exceptions are Click-free: the library raises them from the individual
stages, the orchestrator turns them into error diagnostics on a partial
`SetupResult`, and the CLI maps them onto exit codes
(see `formatkit.cli.errors`).

Each error carries the `DiagnosticKind` used when it is reported as part of a
run result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from formatkit.core.diagnostics import DiagnosticKind

if TYPE_CHECKING:
    from pathlib import Path


class FormatkitError(Exception):
    """Base class for all fatal FormatKit conditions."""

    kind: ClassVar[DiagnosticKind] = DiagnosticKind.NOTE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingManifestError(FormatkitError):
    """The target directory has no ``package.json``; nothing else can proceed."""

    kind = DiagnosticKind.MISSING_MANIFEST

    def __init__(self, path: Path) -> None:
        super().__init__(f"No package.json found at {path}")
        self.path = path


class InvalidManifestError(FormatkitError):
    """``package.json`` exists but is not a JSON object (or has malformed sections)."""

    kind = DiagnosticKind.INVALID_MANIFEST

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid package.json at {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidPresetError(FormatkitError):
    """Unknown preset name, unreadable YAML preset, or an invalid style override."""

    kind = DiagnosticKind.INVALID_PRESET


class TemplateContractError(FormatkitError):
    """A formatter template received a style value it has no translation for."""

    kind = DiagnosticKind.TEMPLATE_CONTRACT

    def __init__(self, formatter: str, field_name: str, value: object) -> None:
        super().__init__(
            f"Template for '{formatter}' cannot translate {field_name}={value!r}"
        )
        self.formatter = formatter
        self.field_name = field_name
        self.value = value


class ConfigWriteError(FormatkitError):
    """A formatter configuration file could not be written."""

    kind = DiagnosticKind.CONFIG_WRITE

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path


class ManifestWriteError(FormatkitError):
    """``package.json`` could not be updated (malformed ``scripts`` or unwritable file)."""

    kind = DiagnosticKind.MANIFEST_WRITE

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot update {path}: {reason}")
        self.path = path


class ConfigError(FormatkitError):
    """A FormatKit configuration file could not be parsed."""

    kind = DiagnosticKind.CONFIG_FILE


class EslintConfigError(FormatkitError):
    """An ESLint config could not be read for migration analysis."""

    kind = DiagnosticKind.INVALID_ESLINT_CONFIG

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot analyze ESLint config {path}: {reason}")
        self.path = path
        self.reason = reason
