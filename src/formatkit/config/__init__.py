# topmark:header:start
#
#   project      : FormatKit
#   file         : __init__.py
#   file_relpath : src/formatkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for FormatKit.

Submodules:

- ``logging``: logger class, TRACE level and colored log formatting.
- ``io``: TOML loading, checked value getters and rendering.
- ``model``: `SetupOptions` snapshot and the `MutableSetupOptions` builder that
  layers defaults, ``formatkit.toml`` and CLI arguments.
"""
