# topmark:header:start
#
#   project      : FormatKit
#   file         : __main__.py
#   file_relpath : src/formatkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point for ``python -m formatkit``."""

from __future__ import annotations

from formatkit.cli.main import cli

if __name__ == "__main__":
    cli()
