# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across FormatKit.

Included modules:

- ``diagnostics``: structured warnings and errors collected during a run.
- ``errors``: fatal domain errors raised by the pipeline stages.
- ``manifest``: reading and updating ``package.json``, package-manager detection.
"""
