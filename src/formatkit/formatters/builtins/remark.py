# topmark:header:start
#
#   project      : FormatKit
#   file         : remark.py
#   file_relpath : src/formatkit/formatters/builtins/remark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Remark (Markdown).

Exports:
    FORMATTERS (list[FormatterDescriptor]): The remark descriptor, writing ``.remarkrc.yaml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from formatkit.formatters.base import ConfigFormat, FormatterDescriptor, translate
from formatkit.presets.model import IndentStyle

if TYPE_CHECKING:
    from formatkit.presets.model import StyleDescriptor

NAME: Final[str] = "remark"

# remark-stringify only knows tab-or-space list item indentation
_LIST_ITEM_INDENT: Final[dict[IndentStyle, str]] = {
    IndentStyle.SPACE: "one",
    IndentStyle.TAB: "tab",
}


def remark_config(style: StyleDescriptor) -> dict[str, Any]:
    """Translate ``style`` into a ``.remarkrc.yaml`` document."""
    return {
        "settings": {
            "bullet": "-",
            "emphasis": "_",
            "strong": "*",
            "fences": True,
            "listItemIndent": translate(
                NAME, "indent_style", _LIST_ITEM_INDENT, style.indent_style
            ),
            "rule": "-",
        },
        "plugins": [
            "remark-preset-lint-recommended",
            ["remark-lint-unordered-list-marker-style", "-"],
            ["remark-lint-heading-style", "atx"],
            ["remark-lint-maximum-line-length", style.line_width],
        ],
    }


FORMATTERS: list[FormatterDescriptor] = [
    FormatterDescriptor(
        name=NAME,
        packages=("remark-cli", "remark"),
        config_files=(
            ".remarkrc.yaml",
            ".remarkrc.yml",
            ".remarkrc",
            ".remarkrc.json",
            ".remarkrc.js",
            ".remarkrc.cjs",
            ".remarkrc.mjs",
        ),
        template=remark_config,
        config_format=ConfigFormat.YAML,
        description="Markdown processor and linter",
        install_package="remark-cli",
        format_command="remark . --output",
        check_command="remark . --frail",
        editor_extension="unifiedjs.vscode-remark",
    ),
]
