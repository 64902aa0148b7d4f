# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/formatters/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in formatter descriptors, one module per tool.

Each module exports a ``FORMATTERS`` list consumed by
`formatkit.formatters.instances`.
"""
