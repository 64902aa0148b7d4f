# topmark:header:start
#
#   project      : FormatKit
#   file         : presets.py
#   file_relpath : src/formatkit/cli/commands/presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit `presets` command.

Lists the built-in presets and their resolved style values.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from formatkit.cli.cli_types import EnumChoiceParam
from formatkit.cli.utils import OutputFormat, render_markdown_table
from formatkit.constants import FORMATKIT_VERSION
from formatkit.presets import PRESET_DESCRIPTIONS, list_presets
from formatkit.presets.model import STYLE_FIELDS

if TYPE_CHECKING:
    from formatkit.cli.console import ConsoleLike


@click.command(
    name="presets",
    help="List the built-in presets.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def presets_command(*, output_format: OutputFormat | None = None) -> None:
    """List the built-in presets."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    presets = list_presets()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt is OutputFormat.JSON:
        payload: list[dict[str, Any]] = [
            {"name": name, "description": PRESET_DESCRIPTIONS.get(name, ""), **style.to_dict()}
            for name, style in presets.items()
        ]
        console.print(json.dumps(payload, indent=2))
        return

    if fmt is OutputFormat.MARKDOWN:
        console.print("# Built-in Presets\n")
        console.print(f"FormatKit version **{FORMATKIT_VERSION}** ships these presets:\n")
        headers: list[str] = ["Option", *(f"`{name}`" for name in presets)]
        rows: list[list[str]] = [
            [f"`{key}`", *(str(style.to_dict()[key]) for style in presets.values())]
            for key in STYLE_FIELDS
        ]
        console.print(render_markdown_table(headers, rows))
        return

    for name, style in presets.items():
        console.print(
            f"{console.styled(name, bold=True):<10} {PRESET_DESCRIPTIONS.get(name, '')}"
        )
        for key, value in style.to_dict().items():
            console.print(f"    {key:<16} {value}")
        console.print()
