# topmark:header:start
#
#   project      : FormatKit
#   file         : exit_codes.py
#   file_relpath : src/formatkit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FormatKit CLI.

FormatKit follows the BSD ``sysexits`` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FormatKit CLI.

    Attributes:
        SUCCESS: Successful run, with or without warnings.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: ``package.json`` is not a valid JSON object. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: No ``package.json`` in the target directory. Mirrors BSD
            ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: A formatter template violated its contract. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: A config file or ``package.json`` could not be written. Mirrors
            BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid preset, style override or config file. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
