# topmark:header:start
#
#   project      : FormatKit
#   file         : writer.py
#   file_relpath : src/formatkit/pipeline/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write sinks.

Every file FormatKit produces (formatter configs and the updated
``package.json``) goes through a `WriteSink`. A real run uses
`FileSystemSink`; a dry run uses `NullSink`, so the preview path is the same
code path minus the final write.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from formatkit.config.logging import FormatkitLogger, get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger: FormatkitLogger = get_logger(__name__)


class WriteStatus(str, Enum):
    """Outcome of one sink write."""

    WRITTEN = "written"
    PREVIEWED = "previewed"


@dataclass(frozen=True)
class WriteResult:
    """Result of a sink write with the number of bytes written."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for output sinks."""

    def write(self, path: Path, text: str) -> WriteResult:
        """Persist ``text`` at ``path``.

        Raises:
            OSError: The file cannot be written.
        """
        ...


class NullSink:
    """No-op sink used for dry runs."""

    def write(self, path: Path, text: str) -> WriteResult:
        """Discard the write, echoing back a preview result."""
        logger.debug("NullSink: would write %d chars to %s", len(text), path)
        return WriteResult(status=WriteStatus.PREVIEWED)


class FileSystemSink:
    """Filesystem sink writing UTF-8 text with ``\\n`` newlines."""

    def write(self, path: Path, text: str) -> WriteResult:
        """Write ``text`` to ``path``, creating parent directories as needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=bytes_written)


def select_sink(*, dry_run: bool) -> WriteSink:
    """Return the sink matching the run mode."""
    return NullSink() if dry_run else FileSystemSink()
