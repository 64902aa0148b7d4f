# topmark:header:start
#
#   project      : FormatKit
#   file         : options.py
#   file_relpath : src/formatkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from formatkit.cli.errors import FormatkitUsageError
from formatkit.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level for ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The logging level as an integer.

    Raises:
        FormatkitUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FormatkitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. JSON output never carries color.
      2. ``--color=always`` / ``--color=never``.
      3. ``FORCE_COLOR`` (set and not ``"0"``) enables, ``NO_COLOR`` disables.
      4. Otherwise color follows ``stdout.isatty()``.
    """
    if output_format and output_format.lower() in {"json", "ndjson"}:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_target_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--target-dir``, ``--config`` and ``--no-config`` to a command."""
    f = click.option(
        "--target-dir",
        "target_dir",
        type=click.Path(file_okay=False, path_type=str),
        default=".",
        show_default=True,
        help="Project directory containing package.json.",
    )(f)
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read FormatKit settings from this TOML file instead of <target>/formatkit.toml.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore formatkit.toml.",
    )(f)
    return f
