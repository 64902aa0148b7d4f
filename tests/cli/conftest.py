# topmark:header:start
#
#   project      : FormatKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test fixtures.

`run_cli_in` invokes the Click CLI with a given directory as the working
directory, so relative ``--target-dir`` values and YAML preset paths resolve
against the test project.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Callable, Sequence

import pytest
from click.testing import CliRunner, Result

from formatkit.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

RunCli = Callable[["Path", Sequence[str]], Result]


def _run_cli_in(cwd: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI from ``cwd`` with color disabled."""
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, ["--no-color", *argv])
    finally:
        os.chdir(previous)


@pytest.fixture
def run_cli_in() -> RunCli:
    """Return a helper running the CLI inside a directory."""
    return _run_cli_in
