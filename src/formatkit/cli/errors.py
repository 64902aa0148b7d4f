# topmark:header:start
#
#   project      : FormatKit
#   file         : errors.py
#   file_relpath : src/formatkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FormatKit CLI.

Raise these from commands to exit with a standardized message and exit code.
`cli_error_for` maps the domain errors of `formatkit.core.errors` onto them.

Styling:
    Exceptions print through the project console when one is installed on the
    Click context; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from formatkit.cli.exit_codes import ExitCode
from formatkit.core.diagnostics import DiagnosticKind

if TYPE_CHECKING:
    from formatkit.core.diagnostics import Diagnostic
    from formatkit.core.errors import FormatkitError


class FormatkitCliError(click.ClickException):
    """Base class for all FormatKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console: Any = ctx.obj.get("console") if ctx and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class FormatkitUsageError(FormatkitCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class FormatkitDataError(FormatkitCliError):
    """``package.json`` or an ESLint config is malformed."""

    exit_code = ExitCode.DATA_ERROR


class FormatkitFileNotFoundError(FormatkitCliError):
    """``package.json`` (or another input) does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FormatkitPipelineError(FormatkitCliError):
    """Internal contract violation in a formatter template."""

    exit_code = ExitCode.PIPELINE_ERROR


class FormatkitIOError(FormatkitCliError):
    """A file could not be written."""

    exit_code = ExitCode.IO_ERROR


class FormatkitConfigError(FormatkitCliError):
    """Invalid preset, style override or configuration file."""

    exit_code = ExitCode.CONFIG_ERROR


_ERROR_BY_KIND: dict[DiagnosticKind, type[FormatkitCliError]] = {
    DiagnosticKind.MISSING_MANIFEST: FormatkitFileNotFoundError,
    DiagnosticKind.INVALID_MANIFEST: FormatkitDataError,
    DiagnosticKind.INVALID_PRESET: FormatkitConfigError,
    DiagnosticKind.CONFIG_FILE: FormatkitConfigError,
    DiagnosticKind.MANIFEST_WRITE: FormatkitIOError,
    DiagnosticKind.CONFIG_WRITE: FormatkitIOError,
    DiagnosticKind.TEMPLATE_CONTRACT: FormatkitPipelineError,
    DiagnosticKind.INVALID_ESLINT_CONFIG: FormatkitDataError,
}


def cli_error_for(diagnostic: Diagnostic | FormatkitError) -> FormatkitCliError:
    """Return the CLI exception matching a fatal diagnostic or domain error."""
    cls: type[FormatkitCliError] = _ERROR_BY_KIND.get(diagnostic.kind, FormatkitCliError)
    return cls(diagnostic.message)
