# topmark:header:start
#
#   project      : FormatKit
#   file         : console.py
#   file_relpath : src/formatkit/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console implementations for user-facing program output.

`ClickConsole` is what the CLI installs in ``ctx.obj["console"]``;
`StdConsole` is a plain fallback used when no Click context is active.
Use these for messages intended for end users and keep `logging` for
diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Output surface shared by the CLI commands and emitters."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` with terminal styling applied when color is enabled."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console built on ``click.echo``.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self.enable_color, fg="yellow"
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with ``click.style`` (plain when color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


class StdConsole(ConsoleLike):
    """Simple console without colors, writing to plain streams."""

    def __init__(self, *, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        self.out.write(text + ("\n" if nl else ""))

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        self.err.write(text + ("\n" if nl else ""))

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        self.err.write(text + ("\n" if nl else ""))

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` unchanged."""
        return text


def get_console_safely() -> ConsoleLike:
    """Return the console of the active Click context, or a `StdConsole`."""
    ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return StdConsole()
