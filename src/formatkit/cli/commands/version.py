# topmark:header:start
#
#   project      : FormatKit
#   file         : version.py
#   file_relpath : src/formatkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from formatkit.cli.cli_types import EnumChoiceParam
from formatkit.cli.cmd_common import get_effective_verbosity
from formatkit.cli.utils import OutputFormat
from formatkit.constants import FORMATKIT_VERSION

if TYPE_CHECKING:
    from formatkit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of FormatKit.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the installed FormatKit version."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": FORMATKIT_VERSION}))
    elif fmt is OutputFormat.MARKDOWN:
        console.print("# FormatKit Version\n")
        console.print(f"**FormatKit version: {FORMATKIT_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("FormatKit version:", bold=True))
        console.print(f"    {FORMATKIT_VERSION}")
    else:
        console.print(FORMATKIT_VERSION)
