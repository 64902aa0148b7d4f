# topmark:header:start
#
#   project      : FormatKit
#   file         : utils.py
#   file_relpath : src/formatkit/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI rendering helpers shared by several commands."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Sequence


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      MARKDOWN: GitHub-flavoured Markdown.

    Notes:
      - Use with :class:`EnumChoiceParam` to parse ``--format`` from Click.
      - Not every command supports every format.
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
      headers: Column headers.
      rows: A sequence of row sequences (each row same length as ``headers``).
      align: Optional mapping of column index to alignment: ``"left"`` (default),
        ``"right"``, or ``"center"``.

    Returns:
      The Markdown table as a single string (ending with a newline).

    Raises:
      ValueError: A row does not have as many cells as there are headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(cells[i]):<{widths[i]}}" for i in range(ncols)) + " |"

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = max(3, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    sep_line: str = "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"
    lines: list[str] = [_line(headers), sep_line] + [_line(r) for r in rows]
    return "\n".join(lines) + "\n"
