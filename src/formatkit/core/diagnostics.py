# topmark:header:start
#
#   project      : FormatKit
#   file         : diagnostics.py
#   file_relpath : src/formatkit/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support.

Warnings and errors collected while running the setup pipeline are structured
`Diagnostic` records rather than free-form strings, so that callers can filter
them by `DiagnosticKind` (e.g. all formatter conflicts) and machine output can
report a stable identifier for each condition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from formatkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from formatkit.config.logging import FormatkitLogger

logger: FormatkitLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during a setup run.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


class DiagnosticKind(str, Enum):
    """Stable identifiers for the conditions reported by the pipeline.

    Warning kinds never stop a run. Error kinds mirror the fatal domain errors in
    `formatkit.core.errors` and are attached to the partial result of a run that
    was stopped.
    """

    # Warnings
    FORMATTER_CONFLICT = "formatter-conflict"
    SCRIPT_CONFLICT = "script-conflict"
    CONFIG_EXISTS = "config-exists"
    FORMATTER_UNAVAILABLE = "formatter-unavailable"
    UNVERIFIED_FORMATTER = "unverified-formatter"
    NO_FORMATTERS = "no-formatters"
    CONFIG_FILE = "config-file"

    # Fatal conditions
    MISSING_MANIFEST = "missing-manifest"
    INVALID_MANIFEST = "invalid-manifest"
    INVALID_PRESET = "invalid-preset"
    MANIFEST_WRITE = "manifest-write"
    CONFIG_WRITE = "config-write"
    TEMPLATE_CONTRACT = "template-contract"
    INVALID_ESLINT_CONFIG = "invalid-eslint-config"

    # Informational
    NOTE = "note"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a kind and a message."""

    level: DiagnosticLevel
    kind: DiagnosticKind
    message: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly representation."""
        return {"level": self.level.value, "kind": self.kind.value, "message": self.message}


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics, appended to while a run progresses."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics."""
        return cls(items=list(diagnostics))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace(
            "Adding [%s/%s]: %r",
            diagnostic.level.value,
            diagnostic.kind.value,
            diagnostic.message,
        )

    def add_info(self, message: str, kind: DiagnosticKind = DiagnosticKind.NOTE) -> None:
        """Add an ``info`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.INFO, kind, message))

    def add_warning(self, kind: DiagnosticKind, message: str) -> None:
        """Add a ``warning`` diagnostic.

        Args:
            kind (DiagnosticKind): What kind of condition this warning reports.
            message (str): Human-readable message.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, kind, message))

    def add_error(self, kind: DiagnosticKind, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.ERROR, kind, message))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append several diagnostics at once, preserving order."""
        for d in diagnostics:
            self._add(d)

    def of_level(self, level: DiagnosticLevel) -> tuple[Diagnostic, ...]:
        """Return the diagnostics of a single severity level, in insertion order."""
        return tuple(d for d in self.items if d.level == level)

    def __len__(self) -> int:
        return len(self.items)


def filter_kind(diags: Sequence[Diagnostic], kind: DiagnosticKind) -> list[Diagnostic]:
    """Return the diagnostics of ``diags`` with the given kind."""
    return [d for d in diags if d.kind == kind]
