# topmark:header:start
#
#   project      : FormatKit
#   file         : builtins.py
#   file_relpath : src/formatkit/presets/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in presets.

Process-wide constant data: the three named, complete `StyleDescriptor`
values shipped with FormatKit, exposed through a read-only mapping in
declaration order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from formatkit.presets.model import (
    ArrowParens,
    EndOfLine,
    IndentStyle,
    QuoteStyle,
    SemicolonPolicy,
    StyleDescriptor,
    TrailingCommaPolicy,
)

# Balanced formatting for most projects
STANDARD: Final[StyleDescriptor] = StyleDescriptor(
    line_width=80,
    indent_width=2,
    indent_style=IndentStyle.SPACE,
    quote_style=QuoteStyle.SINGLE,
    jsx_quote_style=QuoteStyle.DOUBLE,
    semicolons=SemicolonPolicy.ALWAYS,
    trailing_comma=TrailingCommaPolicy.ALL,
    bracket_spacing=True,
    arrow_parens=ArrowParens.ALWAYS,
    end_of_line=EndOfLine.LF,
)

# Rigorous formatting for documentation-heavy projects
STRICT: Final[StyleDescriptor] = StyleDescriptor(
    line_width=80,
    indent_width=2,
    indent_style=IndentStyle.SPACE,
    quote_style=QuoteStyle.SINGLE,
    jsx_quote_style=QuoteStyle.SINGLE,
    semicolons=SemicolonPolicy.ALWAYS,
    trailing_comma=TrailingCommaPolicy.ALL,
    bracket_spacing=True,
    arrow_parens=ArrowParens.ALWAYS,
    end_of_line=EndOfLine.LF,
)

# Flexible formatting for rapid development
RELAXED: Final[StyleDescriptor] = StyleDescriptor(
    line_width=120,
    indent_width=2,
    indent_style=IndentStyle.SPACE,
    quote_style=QuoteStyle.SINGLE,
    jsx_quote_style=QuoteStyle.DOUBLE,
    semicolons=SemicolonPolicy.AS_NEEDED,
    trailing_comma=TrailingCommaPolicy.ES5,
    bracket_spacing=True,
    arrow_parens=ArrowParens.AS_NEEDED,
    end_of_line=EndOfLine.AUTO,
)

BUILTIN_PRESETS: Final[MappingProxyType[str, StyleDescriptor]] = MappingProxyType(
    {
        "standard": STANDARD,
        "strict": STRICT,
        "relaxed": RELAXED,
    }
)

PRESET_DESCRIPTIONS: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        "standard": "Balanced formatting for most projects",
        "strict": "Rigorous formatting for documentation-heavy projects",
        "relaxed": "Flexible formatting for rapid development",
    }
)
