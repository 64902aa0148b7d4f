# topmark:header:start
#
#   project      : FormatKit
#   file         : model.py
#   file_relpath : src/formatkit/presets/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tool-agnostic formatting policy.

`StyleDescriptor` is the single description of code style that every formatter
template translates into its own configuration schema. After preset resolution
every field holds a concrete value; partial input only exists as a plain
override mapping that is validated by `normalize_overrides`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, TypeVar

from formatkit.core.errors import InvalidPresetError

if TYPE_CHECKING:
    from collections.abc import Mapping

E = TypeVar("E", bound=Enum)


class IndentStyle(str, Enum):
    """Indentation character."""

    SPACE = "space"
    TAB = "tab"


class QuoteStyle(str, Enum):
    """Preferred string quote character."""

    SINGLE = "single"
    DOUBLE = "double"


class SemicolonPolicy(str, Enum):
    """Statement terminator policy."""

    ALWAYS = "always"
    AS_NEEDED = "as-needed"


class TrailingCommaPolicy(str, Enum):
    """Where trailing commas are printed in multi-line constructs."""

    ALL = "all"
    ES5 = "es5"
    NONE = "none"


class ArrowParens(str, Enum):
    """Parentheses around a sole arrow-function parameter."""

    ALWAYS = "always"
    AS_NEEDED = "as-needed"


class EndOfLine(str, Enum):
    """Line ending written by formatters."""

    LF = "lf"
    CRLF = "crlf"
    CR = "cr"
    AUTO = "auto"


LINE_WIDTH_RANGE: Final[tuple[int, int]] = (40, 200)
INDENT_WIDTH_RANGE: Final[tuple[int, int]] = (1, 8)


@dataclass(frozen=True)
class StyleDescriptor:
    """Resolved formatting policy shared by all formatter templates.

    Attributes:
        line_width (int): Preferred maximum line length.
        indent_width (int): Width of one indentation level.
        indent_style (IndentStyle): Spaces or tabs.
        quote_style (QuoteStyle): Quotes for regular code.
        jsx_quote_style (QuoteStyle): Quotes for JSX attributes.
        semicolons (SemicolonPolicy): ``always`` or ``as-needed``.
        trailing_comma (TrailingCommaPolicy): ``all``, ``es5`` or ``none``.
        bracket_spacing (bool): Spaces inside object literal braces.
        arrow_parens (ArrowParens): ``always`` or ``as-needed``.
        end_of_line (EndOfLine): Line ending policy.
    """

    line_width: int
    indent_width: int
    indent_style: IndentStyle
    quote_style: QuoteStyle
    jsx_quote_style: QuoteStyle
    semicolons: SemicolonPolicy
    trailing_comma: TrailingCommaPolicy
    bracket_spacing: bool
    arrow_parens: ArrowParens
    end_of_line: EndOfLine

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON/TOML-friendly mapping (enum members become strings)."""
        out: dict[str, Any] = {}
        for key, value in asdict(self).items():
            out[key] = value.value if isinstance(value, Enum) else value
        return out


STYLE_FIELDS: Final[tuple[str, ...]] = tuple(f.name for f in fields(StyleDescriptor))

_ENUM_FIELDS: Final[dict[str, type[Enum]]] = {
    "indent_style": IndentStyle,
    "quote_style": QuoteStyle,
    "jsx_quote_style": QuoteStyle,
    "semicolons": SemicolonPolicy,
    "trailing_comma": TrailingCommaPolicy,
    "arrow_parens": ArrowParens,
    "end_of_line": EndOfLine,
}

_INT_FIELDS: Final[dict[str, tuple[int, int]]] = {
    "line_width": LINE_WIDTH_RANGE,
    "indent_width": INDENT_WIDTH_RANGE,
}

_BOOL_FIELDS: Final[frozenset[str]] = frozenset({"bracket_spacing"})

# camelCase spellings used by package.json-style tooling and the YAML presets
_ALIASES: Final[dict[str, str]] = {
    "lineWidth": "line_width",
    "indentWidth": "indent_width",
    "indentStyle": "indent_style",
    "quoteStyle": "quote_style",
    "jsxQuoteStyle": "jsx_quote_style",
    "trailingComma": "trailing_comma",
    "trailingCommas": "trailing_comma",
    "bracketSpacing": "bracket_spacing",
    "arrowParens": "arrow_parens",
    "endOfLine": "end_of_line",
}


def _canonical_key(key: str) -> str:
    key = _ALIASES.get(key, key)
    return key.replace("-", "_")


def _coerce_enum(enum_cls: type[E], key: str, value: Any) -> E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        # Accept the camelCase spelling ("asNeeded") used by the YAML presets
        candidate: str = value.strip().lower().replace("asneeded", "as-needed").replace("_", "-")
        for member in enum_cls:
            if member.value == candidate:
                return member
    choices: str = ", ".join(str(m.value) for m in enum_cls)
    raise InvalidPresetError(f"Invalid value for '{key}': {value!r} (expected one of: {choices})")


def _coerce_int(key: str, value: Any, bounds: tuple[int, int]) -> int:
    number: int
    if isinstance(value, bool):
        raise InvalidPresetError(f"Invalid value for '{key}': {value!r} (expected an integer)")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())
    else:
        raise InvalidPresetError(f"Invalid value for '{key}': {value!r} (expected an integer)")
    lo, hi = bounds
    if not lo <= number <= hi:
        raise InvalidPresetError(f"Invalid value for '{key}': {number} (expected {lo}..{hi})")
    return number


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered: str = value.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
    raise InvalidPresetError(f"Invalid value for '{key}': {value!r} (expected a boolean)")


def _flatten_nested(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Expand the nested ``indentation``/``quotes`` shapes into flat fields."""
    flat: dict[str, Any] = {}
    for key, value in overrides.items():
        if key == "indentation" and isinstance(value, dict):
            if "style" in value:
                flat["indent_style"] = value["style"]
            if "width" in value:
                flat["indent_width"] = value["width"]
        elif key == "quotes" and isinstance(value, dict):
            if "style" in value:
                flat["quote_style"] = value["style"]
            if "jsx" in value:
                flat["jsx_quote_style"] = value["jsx"]
        else:
            flat[_canonical_key(str(key))] = value
    return flat


def normalize_overrides(overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Validate a partial style mapping and coerce it into `StyleDescriptor` field values.

    Keys may use snake_case, camelCase or the nested ``indentation``/``quotes``
    shapes. Values may be enum members or their string values; integers and
    booleans given as strings (as they arrive from the CLI) are coerced.

    Args:
        overrides (Mapping[str, Any] | None): Partial style mapping.

    Returns:
        dict[str, Any]: Canonical field name to typed value, only for fields present.

    Raises:
        InvalidPresetError: An unknown key or an invalid value was supplied.
    """
    if not overrides:
        return {}
    out: dict[str, Any] = {}
    for key, value in _flatten_nested(overrides).items():
        if key in _ENUM_FIELDS:
            out[key] = _coerce_enum(_ENUM_FIELDS[key], key, value)
        elif key in _INT_FIELDS:
            out[key] = _coerce_int(key, value, _INT_FIELDS[key])
        elif key in _BOOL_FIELDS:
            out[key] = _coerce_bool(key, value)
        else:
            known: str = ", ".join(STYLE_FIELDS)
            raise InvalidPresetError(f"Unknown style option '{key}' (known options: {known})")
    return out


@dataclass(frozen=True)
class ResolvedPreset:
    """A resolved style plus the per-tool raw settings of a YAML preset.

    Attributes:
        style (StyleDescriptor): Fully populated style.
        raw (Mapping[str, Mapping[str, Any]]): Formatter name to settings merged over that
            formatter's generated config document. Empty for built-in presets.
    """

    style: StyleDescriptor
    raw: Mapping[str, Mapping[str, Any]] = field(default_factory=lambda: MappingProxyType({}))

    def raw_for(self, formatter: str) -> Mapping[str, Any]:
        """Return the raw settings for one formatter (empty when none)."""
        return self.raw.get(formatter, MappingProxyType({}))
