# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit CLI commands."""
