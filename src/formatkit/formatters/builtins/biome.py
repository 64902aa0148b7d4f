# topmark:header:start
#
#   project      : FormatKit
#   file         : biome.py
#   file_relpath : src/formatkit/formatters/builtins/biome.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Biome.

Biome both formats and lints, so it owns the ``lint`` role alongside its
format scripts.

Exports:
    FORMATTERS (list[FormatterDescriptor]): The Biome descriptor, writing ``biome.json``.
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

NAME: Final[str] = "biome"

SCHEMA_URL: Final[str] = "https://biomejs.dev/schemas/1.8.3/schema.json"

_TRAILING_COMMAS: Final[dict[TrailingCommaPolicy, str]] = {
    TrailingCommaPolicy.ALL: "all",
    TrailingCommaPolicy.ES5: "es5",
    TrailingCommaPolicy.NONE: "none",
}

_SEMICOLONS: Final[dict[SemicolonPolicy, str]] = {
    SemicolonPolicy.ALWAYS: "always",
    SemicolonPolicy.AS_NEEDED: "asNeeded",
}

_ARROW_PARENS: Final[dict[ArrowParens, str]] = {
    ArrowParens.ALWAYS: "always",
    ArrowParens.AS_NEEDED: "asNeeded",
}

# Biome 1.x has no "auto" line ending
_LINE_ENDING: Final[dict[EndOfLine, str]] = {
    EndOfLine.LF: "lf",
    EndOfLine.CRLF: "crlf",
    EndOfLine.CR: "cr",
    EndOfLine.AUTO: "lf",
}

_QUOTES: Final[dict[QuoteStyle, str]] = {
    QuoteStyle.SINGLE: "single",
    QuoteStyle.DOUBLE: "double",
}

_INDENT_STYLE: Final[dict[IndentStyle, str]] = {
    IndentStyle.SPACE: "space",
    IndentStyle.TAB: "tab",
}


def biome_config(style: StyleDescriptor) -> dict[str, Any]:
    """Translate ``style`` into a ``biome.json`` document."""
    return {
        "$schema": SCHEMA_URL,
        "formatter": {
            "enabled": True,
            "indentStyle": translate(NAME, "indent_style", _INDENT_STYLE, style.indent_style),
            "indentWidth": style.indent_width,
            "lineWidth": style.line_width,
            "lineEnding": translate(NAME, "end_of_line", _LINE_ENDING, style.end_of_line),
        },
        "linter": {
            "enabled": True,
            "rules": {"recommended": True},
        },
        "javascript": {
            "formatter": {
                "quoteStyle": translate(NAME, "quote_style", _QUOTES, style.quote_style),
                "jsxQuoteStyle": translate(NAME, "jsx_quote_style", _QUOTES, style.jsx_quote_style),
                "semicolons": translate(NAME, "semicolons", _SEMICOLONS, style.semicolons),
                "trailingCommas": translate(
                    NAME, "trailing_comma", _TRAILING_COMMAS, style.trailing_comma
                ),
                "bracketSpacing": style.bracket_spacing,
                "arrowParentheses": translate(
                    NAME, "arrow_parens", _ARROW_PARENS, style.arrow_parens
                ),
            },
        },
    }


FORMATTERS: list[FormatterDescriptor] = [
    FormatterDescriptor(
        name=NAME,
        packages=("@biomejs/biome",),
        config_files=("biome.json", "biome.jsonc"),
        template=biome_config,
        description="Fast formatter and linter for JavaScript, TypeScript and JSON",
        exclusive_roles=frozenset({"lint"}),
        format_command="biome format --write .",
        check_command="biome format .",
        lint_command="biome lint .",
        lint_fix_command="biome lint --write .",
        editor_extension="biomejs.biome",
        requires_node=False,
    ),
]
