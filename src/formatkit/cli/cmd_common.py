# topmark:header:start
#
#   project      : FormatKit
#   file         : cmd_common.py
#   file_relpath : src/formatkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by several commands. They carry no policy about
messages or exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from formatkit.cli.errors import FormatkitUsageError
from formatkit.registry import FormatterRegistry

if TYPE_CHECKING:
    import click


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command.

    ``0`` is terse, each ``-v`` adds one; ``-q`` yields ``-1``.
    """
    obj: Any = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def split_formatter_names(values: Iterable[str]) -> tuple[str, ...]:
    """Flatten repeated and comma-separated ``--formatters`` values.

    Names are lower-cased and de-duplicated (first occurrence wins).

    Raises:
        FormatkitUsageError: A name is not a registered formatter.
    """
    names: list[str] = []
    for value in values:
        for part in value.split(","):
            name: str = part.strip().lower()
            if name and name not in names:
                names.append(name)

    known: tuple[str, ...] = FormatterRegistry.names()
    unknown: list[str] = [n for n in names if n not in known]
    if unknown:
        raise FormatkitUsageError(
            f"Unknown formatter(s): {', '.join(unknown)} (available: {', '.join(known)})"
        )
    return tuple(names)
