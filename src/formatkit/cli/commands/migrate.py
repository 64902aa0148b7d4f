# topmark:header:start
#
#   project      : FormatKit
#   file         : migrate.py
#   file_relpath : src/formatkit/cli/commands/migrate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit `migrate` command.

Analyzes a project's ESLint config and reports what a move to Biome would
involve: rules with a Biome equivalent, rules without one, and the style
preset implied by ESLint's formatting rules. The project is never modified;
``--output`` only writes the report file.

Exit codes:
    0   Report produced.
    65  The ESLint config cannot be parsed (or is a JavaScript config).
    66  No ESLint config was found.
    74  The report file cannot be written.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from formatkit.cli.cli_types import EnumChoiceParam
from formatkit.cli.errors import FormatkitFileNotFoundError, FormatkitIOError, cli_error_for
from formatkit.cli.utils import OutputFormat, render_markdown_table
from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.core.errors import EslintConfigError
from formatkit.migration import analyze_eslint_config, find_eslint_config
from formatkit.pipeline.writer import FileSystemSink

if TYPE_CHECKING:
    from formatkit.cli.console import ConsoleLike
    from formatkit.migration import MigrationAnalysis

logger: FormatkitLogger = get_logger(__name__)


def render_migration_report(analysis: MigrationAnalysis) -> str:
    """Render a migration analysis as a Markdown document."""
    lines: list[str] = [
        "# ESLint to Biome Migration Report",
        "",
        f"Source: `{analysis.source}`",
        "",
        "## Summary",
        "",
        f"- Mappable rules: {len(analysis.mappable)}",
        f"- Unmappable rules: {len(analysis.unmappable)}",
        f"- Warnings: {len(analysis.warnings)}",
        "",
    ]
    if analysis.warnings:
        lines += ["## Warnings", "", *(f"- {w}" for w in analysis.warnings), ""]
    if analysis.mappable:
        table: str = render_markdown_table(
            ["ESLint Rule", "Biome Rule", "Severity"],
            [[f"`{m.eslint}`", f"`{m.biome}`", m.severity.value] for m in analysis.mappable],
        )
        lines += ["## Mappable Rules", "", table.rstrip("\n"), ""]
    if analysis.unmappable:
        lines += [
            "## Unmappable Rules",
            "",
            "These rules have no known Biome equivalent:",
            "",
            *(f"- `{rule}`" for rule in analysis.unmappable),
            "",
        ]
    if analysis.suggested_style:
        lines += [
            "## Suggested Formatting Preset",
            "",
            "```json",
            json.dumps(dict(analysis.suggested_style), indent=2),
            "```",
            "",
        ]
    style_args: str = "".join(
        f" --style {key}={value}" for key, value in analysis.suggested_style.items()
    )
    lines += [
        "## Next Steps",
        "",
        "1. Install Biome: `npm install -D @biomejs/biome`",
        f"2. Generate its config: `formatkit setup --formatters biome{style_args}`",
        "3. Enable the mappable rules in `biome.json` and review the unmappable ones",
        "4. Run `npx @biomejs/biome check .` and compare with the ESLint output",
        "5. Remove ESLint once the results match",
        "",
    ]
    return "\n".join(lines)


@click.command(
    name="migrate",
    help="Analyze an ESLint config for a migration to Biome.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="ESLint config to analyze (default: discovered in the target directory).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="Write the Markdown report to this file instead of printing it.",
)
@click.option(
    "--target-dir",
    "target_dir",
    type=click.Path(file_okay=False, path_type=str),
    default=".",
    show_default=True,
    help="Project directory searched for an ESLint config.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def migrate_command(
    *,
    config_path: str | None,
    output_path: str | None,
    target_dir: str,
    output_format: OutputFormat | None,
) -> None:
    """Print (or save) the migration analysis of one ESLint config."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    source: Path | None
    if config_path is not None:
        source = Path(config_path)
        if not source.is_file():
            raise FormatkitFileNotFoundError(f"ESLint config not found: {source}")
    else:
        source = find_eslint_config(Path(target_dir))
        if source is None:
            raise FormatkitFileNotFoundError(f"No ESLint config found in {target_dir}")

    try:
        analysis: MigrationAnalysis = analyze_eslint_config(source)
    except EslintConfigError as exc:
        raise cli_error_for(exc) from exc

    text: str = (
        json.dumps(analysis.to_dict(), indent=2)
        if fmt is OutputFormat.JSON
        else render_migration_report(analysis)
    )

    if output_path is None:
        console.print(text)
        return

    target: Path = Path(output_path)
    try:
        FileSystemSink().write(target, text if text.endswith("\n") else text + "\n")
    except OSError as exc:
        raise FormatkitIOError(f"Cannot write {target}: {exc.strerror or exc}") from exc
    logger.info("Migration report written to %s", target)
    console.print(console.styled(f"Migration report saved to {target}", fg="green"))
