# topmark:header:start
#
#   project      : FormatKit
#   file         : prettier.py
#   file_relpath : src/formatkit/formatters/builtins/prettier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prettier.

Exports:
    FORMATTERS (list[FormatterDescriptor]): The Prettier descriptor, writing
        ``.prettierrc.json``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from formatkit.formatters.base import FormatterDescriptor, translate
from formatkit.presets.model import (
    ArrowParens,
    EndOfLine,
    IndentStyle,
    QuoteStyle,
    SemicolonPolicy,
    TrailingCommaPolicy,
)

if TYPE_CHECKING:
    from formatkit.presets.model import StyleDescriptor

NAME: Final[str] = "prettier"

_TRAILING_COMMA: Final[dict[TrailingCommaPolicy, str]] = {
    TrailingCommaPolicy.ALL: "all",
    TrailingCommaPolicy.ES5: "es5",
    TrailingCommaPolicy.NONE: "none",
}

_ARROW_PARENS: Final[dict[ArrowParens, str]] = {
    ArrowParens.ALWAYS: "always",
    ArrowParens.AS_NEEDED: "avoid",
}

_END_OF_LINE: Final[dict[EndOfLine, str]] = {
    EndOfLine.LF: "lf",
    EndOfLine.CRLF: "crlf",
    EndOfLine.CR: "cr",
    EndOfLine.AUTO: "auto",
}

_SEMI: Final[dict[SemicolonPolicy, bool]] = {
    SemicolonPolicy.ALWAYS: True,
    SemicolonPolicy.AS_NEEDED: False,
}

_SINGLE: Final[dict[QuoteStyle, bool]] = {
    QuoteStyle.SINGLE: True,
    QuoteStyle.DOUBLE: False,
}

_USE_TABS: Final[dict[IndentStyle, bool]] = {
    IndentStyle.SPACE: False,
    IndentStyle.TAB: True,
}


def prettier_config(style: StyleDescriptor) -> dict[str, Any]:
    """Translate ``style`` into a ``.prettierrc.json`` document."""
    return {
        "printWidth": style.line_width,
        "tabWidth": style.indent_width,
        "useTabs": translate(NAME, "indent_style", _USE_TABS, style.indent_style),
        "semi": translate(NAME, "semicolons", _SEMI, style.semicolons),
        "singleQuote": translate(NAME, "quote_style", _SINGLE, style.quote_style),
        "jsxSingleQuote": translate(NAME, "jsx_quote_style", _SINGLE, style.jsx_quote_style),
        "trailingComma": translate(NAME, "trailing_comma", _TRAILING_COMMA, style.trailing_comma),
        "bracketSpacing": style.bracket_spacing,
        "arrowParens": translate(NAME, "arrow_parens", _ARROW_PARENS, style.arrow_parens),
        "endOfLine": translate(NAME, "end_of_line", _END_OF_LINE, style.end_of_line),
        "overrides": [
            {"files": "*.md", "options": {"proseWrap": "always"}},
        ],
    }


FORMATTERS: list[FormatterDescriptor] = [
    FormatterDescriptor(
        name=NAME,
        packages=("prettier",),
        config_files=(
            ".prettierrc.json",
            ".prettierrc",
            ".prettierrc.yaml",
            ".prettierrc.yml",
            ".prettierrc.json5",
            ".prettierrc.js",
            ".prettierrc.cjs",
            ".prettierrc.mjs",
            ".prettierrc.toml",
            "prettier.config.js",
            "prettier.config.cjs",
            "prettier.config.mjs",
        ),
        template=prettier_config,
        description="Opinionated code formatter",
        format_command="prettier --write .",
        check_command="prettier --check .",
        editor_extension="esbenp.prettier-vscode",
    ),
]
