# topmark:header:start
#
#   project      : FormatKit
#   file         : init_config.py
#   file_relpath : src/formatkit/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit `init-config` command.

Prints a starter ``formatkit.toml`` to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formatkit.cli.cmd_common import get_effective_verbosity
from formatkit.config.model import render_default_config_toml

if TYPE_CHECKING:
    from formatkit.cli.console import ConsoleLike


@click.command(
    name="init-config",
    help="Display an initial FormatKit configuration file.",
)
def init_config_command() -> None:
    """Print a starter config file to stdout."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    vlevel: int = get_effective_verbosity(ctx)
    if vlevel > 0:
        console.print(console.styled("Initial FormatKit configuration (TOML):", bold=True))

    console.print(render_default_config_toml(), nl=False)
