# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit package.

FormatKit configures code formatters and linters (Prettier, Biome, ESLint,
remark) for JavaScript projects from one shared style preset. It detects the
tools a project uses, writes their configuration files without clobbering
existing ones, and merges matching scripts into ``package.json``.
"""

from __future__ import annotations
