# topmark:header:start
#
#   project      : FormatKit
#   file         : setup.py
#   file_relpath : src/formatkit/cli/commands/setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit `setup` command.

Detects the formatters of a project, generates their config files from the
selected preset and merges the formatting scripts into ``package.json``.
Exits 0 on success (with or without warnings) and with the mapped error code
when a fatal condition stopped the run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from formatkit.cli.cli_types import EnumChoiceParam, KeyValueParam
from formatkit.cli.cmd_common import get_effective_verbosity, split_formatter_names
from formatkit.cli.emitters import emit_setup
from formatkit.cli.errors import FormatkitConfigError, cli_error_for
from formatkit.cli.options import common_target_options
from formatkit.cli.utils import OutputFormat
from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.config.model import MutableSetupOptions
from formatkit.core.errors import ConfigError
from formatkit.pipeline.orchestrator import run_setup

if TYPE_CHECKING:
    from formatkit.cli.console import ConsoleLike
    from formatkit.config.model import SetupOptions
    from formatkit.pipeline.models import SetupResult

logger: FormatkitLogger = get_logger(__name__)

_SETUP_FORMATS: tuple[str, ...] = (OutputFormat.DEFAULT.value, OutputFormat.JSON.value)


@click.command(
    name="setup",
    help="Generate formatter config files and package.json scripts.",
    epilog="""
Only formatters found in package.json (or through their config files) are configured.
Existing config files are left untouched unless --force is given, and existing
package.json scripts are never overwritten.
""",
)
@click.option(
    "--preset",
    "preset",
    default=None,
    help="Built-in preset (standard, strict, relaxed) or path to a YAML preset.",
)
@click.option(
    "--formatters",
    "formatters",
    multiple=True,
    help="Only configure these formatters (repeatable, comma-separated).",
)
@click.option(
    "--style",
    "style",
    type=KeyValueParam(),
    multiple=True,
    help="Override one style option, e.g. --style lineWidth=100 (repeatable).",
)
@click.option(
    "--no-scripts",
    "no_scripts",
    is_flag=True,
    help="Do not touch package.json scripts.",
)
@click.option(
    "--force",
    "force",
    is_flag=True,
    help="Overwrite existing formatter config files.",
)
@click.option(
    "--devcontainer",
    "devcontainer",
    is_flag=True,
    help="Also generate .devcontainer/devcontainer.json for the configured formatters.",
)
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Report what would be written without changing any file.",
)
@click.option(
    "--verbose",
    "verbose",
    is_flag=True,
    help="Show the resolved style and, in a dry run, the generated files.",
)
@common_target_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(_SETUP_FORMATS)}).",
)
def setup_command(
    *,
    preset: str | None,
    formatters: tuple[str, ...],
    style: tuple[tuple[str, str], ...],
    no_scripts: bool,
    force: bool,
    devcontainer: bool,
    dry_run: bool,
    verbose: bool,
    target_dir: str,
    config_file: str | None,
    no_config: bool,
    output_format: OutputFormat | None,
) -> None:
    """Run the setup pipeline for one project."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt is OutputFormat.MARKDOWN:
        raise click.BadOptionUsage(
            "output_format", f"--format must be one of: {', '.join(_SETUP_FORMATS)}"
        )
    vlevel: int = get_effective_verbosity(ctx) + (1 if verbose else 0)

    args: dict[str, Any] = {
        "preset": preset,
        "formatters": split_formatter_names(formatters) if formatters else None,
        "style": dict(style),
        "update_scripts": False if no_scripts else None,
        "force": True if force else None,
        "devcontainer": True if devcontainer else None,
        "dry_run": True if dry_run else None,
    }

    try:
        draft: MutableSetupOptions = MutableSetupOptions.load_merged(
            Path(target_dir),
            config_file=Path(config_file) if config_file else None,
            no_config=no_config,
        )
    except ConfigError as exc:
        raise FormatkitConfigError(exc.message) from exc
    options: SetupOptions = draft.apply_cli_args(args).freeze()
    logger.debug("Effective setup options: %s", options.to_dict())

    result: SetupResult = run_setup(options)

    if fmt is OutputFormat.JSON:
        console.print(json.dumps(result.to_dict(include_content=vlevel > 0), indent=2))
    else:
        emit_setup(console, result, verbosity=vlevel, color=bool(ctx.obj.get("color_enabled")))

    if not result.success:
        raise cli_error_for(result.errors[0])
