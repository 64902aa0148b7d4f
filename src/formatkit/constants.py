# topmark:header:start
#
#   project      : FormatKit
#   file         : constants.py
#   file_relpath : src/formatkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FORMATKIT_VERSION: str = get_version("formatkit")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    FORMATKIT_VERSION = "0.0.0+unknown"

MANIFEST_NAME: str = "package.json"

# Project-level FormatKit configuration, looked up in the target directory
CONFIG_FILE_NAME: str = "formatkit.toml"

DEFAULT_PRESET: str = "standard"

# Entry-point group for third-party formatter descriptors
FORMATTER_ENTRYPOINT_GROUP: str = "formatkit.formatters"

# Joins the per-tool commands of an aggregate script
SCRIPT_SEQUENCE_OPERATOR: str = " && "
