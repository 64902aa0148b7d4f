# topmark:header:start
#
#   project      : FormatKit
#   file         : eslint.py
#   file_relpath : src/formatkit/formatters/builtins/eslint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ESLint.

Only stylistic rules derived from the style are emitted; rule selection beyond
that is left to the project.

Exports:
    FORMATTERS (list[FormatterDescriptor]): The ESLint descriptor, writing ``.eslintrc.json``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from formatkit.core.errors import TemplateContractError
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

NAME: Final[str] = "eslint"

_COMMA_DANGLE: Final[dict[TrailingCommaPolicy, str]] = {
    TrailingCommaPolicy.ALL: "always-multiline",
    TrailingCommaPolicy.ES5: "only-multiline",
    TrailingCommaPolicy.NONE: "never",
}

_SEMI: Final[dict[SemicolonPolicy, str]] = {
    SemicolonPolicy.ALWAYS: "always",
    SemicolonPolicy.AS_NEEDED: "never",
}

_QUOTES: Final[dict[QuoteStyle, str]] = {
    QuoteStyle.SINGLE: "single",
    QuoteStyle.DOUBLE: "double",
}

_JSX_QUOTES: Final[dict[QuoteStyle, str]] = {
    QuoteStyle.SINGLE: "prefer-single",
    QuoteStyle.DOUBLE: "prefer-double",
}

_ARROW_PARENS: Final[dict[ArrowParens, str]] = {
    ArrowParens.ALWAYS: "always",
    ArrowParens.AS_NEEDED: "as-needed",
}

# None disables linebreak-style
_LINEBREAK: Final[dict[EndOfLine, str | None]] = {
    EndOfLine.LF: "unix",
    EndOfLine.CRLF: "windows",
    EndOfLine.CR: None,
    EndOfLine.AUTO: None,
}


def _indent_rule(style: StyleDescriptor) -> list[Any]:
    if style.indent_style is IndentStyle.TAB:
        return ["error", "tab"]
    if style.indent_style is IndentStyle.SPACE:
        return ["error", style.indent_width]
    raise TemplateContractError(NAME, "indent_style", style.indent_style)


def eslint_config(style: StyleDescriptor) -> dict[str, Any]:
    """Translate ``style`` into a legacy ``.eslintrc.json`` document."""
    rules: dict[str, Any] = {
        "indent": _indent_rule(style),
        "max-len": ["warn", {"code": style.line_width, "ignoreUrls": True}],
        "quotes": [
            "error",
            translate(NAME, "quote_style", _QUOTES, style.quote_style),
            {"avoidEscape": True},
        ],
        "jsx-quotes": [
            "error",
            translate(NAME, "jsx_quote_style", _JSX_QUOTES, style.jsx_quote_style),
        ],
        "semi": ["error", translate(NAME, "semicolons", _SEMI, style.semicolons)],
        "comma-dangle": [
            "error",
            translate(NAME, "trailing_comma", _COMMA_DANGLE, style.trailing_comma),
        ],
        "object-curly-spacing": ["error", "always" if style.bracket_spacing else "never"],
        "arrow-parens": [
            "error",
            translate(NAME, "arrow_parens", _ARROW_PARENS, style.arrow_parens),
        ],
    }
    linebreak: str | None = translate(NAME, "end_of_line", _LINEBREAK, style.end_of_line)
    rules["linebreak-style"] = ["error", linebreak] if linebreak else "off"

    return {
        "root": True,
        "env": {"browser": True, "es2022": True, "node": True},
        "extends": ["eslint:recommended"],
        "parserOptions": {"ecmaVersion": "latest", "sourceType": "module"},
        "rules": rules,
    }


FORMATTERS: list[FormatterDescriptor] = [
    FormatterDescriptor(
        name=NAME,
        packages=("eslint",),
        config_files=(
            ".eslintrc.json",
            ".eslintrc",
            ".eslintrc.js",
            ".eslintrc.cjs",
            ".eslintrc.yaml",
            ".eslintrc.yml",
            "eslint.config.js",
            "eslint.config.mjs",
            "eslint.config.cjs",
        ),
        template=eslint_config,
        description="Pluggable JavaScript linter",
        exclusive_roles=frozenset({"lint"}),
        lint_command="eslint .",
        lint_fix_command="eslint . --fix",
        editor_extension="dbaeumer.vscode-eslint",
    ),
]
