# topmark:header:start
#
#   project      : FormatKit
#   file         : detect.py
#   file_relpath : src/formatkit/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit `detect` command.

Reports which formatters a project uses. Purely informational: it always exits
0, including when ``package.json`` is missing or malformed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from formatkit.cli.cli_types import EnumChoiceParam
from formatkit.cli.cmd_common import get_effective_verbosity
from formatkit.cli.emitters import emit_detection
from formatkit.cli.utils import OutputFormat
from formatkit.core.errors import FormatkitError
from formatkit.pipeline.detector import detect_formatters

if TYPE_CHECKING:
    from formatkit.cli.console import ConsoleLike
    from formatkit.pipeline.models import DetectionResult


@click.command(
    name="detect",
    help="Show which formatters a project uses.",
)
@click.option(
    "--verbose",
    "verbose",
    is_flag=True,
    help="Also list the config files found for each formatter.",
)
@click.option(
    "--target-dir",
    "target_dir",
    type=click.Path(file_okay=False, path_type=str),
    default=".",
    show_default=True,
    help="Project directory containing package.json.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format (default, json).",
)
def detect_command(
    *,
    verbose: bool,
    target_dir: str,
    output_format: OutputFormat | None,
) -> None:
    """Print the detection result of one project."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    vlevel: int = get_effective_verbosity(ctx) + (1 if verbose else 0)

    try:
        detection: DetectionResult = detect_formatters(Path(target_dir))
    except FormatkitError as exc:
        if fmt is OutputFormat.JSON:
            console.print(json.dumps({"error": {"kind": exc.kind.value, "message": exc.message}}))
        else:
            console.warn(exc.message)
        return

    if fmt is OutputFormat.JSON:
        console.print(json.dumps(detection.to_dict(), indent=2))
        return
    emit_detection(console, detection, verbosity=vlevel, color=bool(ctx.obj.get("color_enabled")))
