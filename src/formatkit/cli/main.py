# topmark:header:start
#
#   project      : FormatKit
#   file         : main.py
#   file_relpath : src/formatkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit command line interface.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from formatkit.cli.commands.detect import detect_command
from formatkit.cli.commands.init_config import init_config_command
from formatkit.cli.commands.migrate import migrate_command
from formatkit.cli.commands.presets import presets_command
from formatkit.cli.commands.setup import setup_command
from formatkit.cli.commands.version import version_command
from formatkit.cli.console import ClickConsole, ConsoleLike
from formatkit.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from formatkit.config.logging import (
    FormatkitLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

logger: FormatkitLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Validates mutual exclusion of -v/-q
    ctx.obj["cli_log_level"] = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = -1 if quiet else verbose

    # Internal logging is configured from the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FormatKit: consistent formatter configuration for JavaScript projects.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the FormatKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'formatkit setup --dry-run' to preview the configuration.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(setup_command)
cli.add_command(detect_command)
cli.add_command(presets_command)
cli.add_command(migrate_command)
cli.add_command(init_config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
