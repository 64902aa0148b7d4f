# topmark:header:start
#
#   project      : FormatKit
#   file         : io.py
#   file_relpath : src/formatkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for FormatKit configuration.

Pure helpers for reading ``formatkit.toml``, inspecting its values with typed,
checked getters and rendering TOML back to text. None of these functions mutate
configuration objects; the checked getters record problems on the
`DiagnosticLog` they are given and return None for anything unusable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.core.diagnostics import DiagnosticKind
from formatkit.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from formatkit.core.diagnostics import DiagnosticLog

logger: FormatkitLogger = get_logger(__name__)

TomlTable: TypeAlias = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into plain Python values.

    Args:
        path (Path): Path to the TOML document.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: The file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    logger.trace("Parsed TOML from %s: %s", path, data)
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string (``None`` values are dropped)."""
    cleaned: dict[str, Any] = {k: v for k, v in toml_dict.items() if v is not None}
    return tomlkit.dumps(cleaned)


def get_table_value(
    table: TomlTable,
    key: str,
    *,
    diagnostics: DiagnosticLog | None = None,
) -> TomlTable:
    """Return the sub-table at ``key`` (empty when absent or not a table)."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected table [%s], got %s", key, type(value).__name__)
    if diagnostics is not None:
        diagnostics.add_warning(
            DiagnosticKind.CONFIG_FILE,
            f"Expected table [{key}], got {type(value).__name__}: ignored",
        )
    return {}


def _type_warning(
    diagnostics: DiagnosticLog,
    loc: str,
    expected: str,
    value: Any,
) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(
        DiagnosticKind.CONFIG_FILE,
        f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}",
    )


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not a ``str``."""
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _type_warning(diagnostics, f"{where}.{key}", "string", value)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional bool value, warning when present but not a ``bool``."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _type_warning(diagnostics, f"{where}.{key}", "bool", value)
    return None


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Return an optional list of strings.

    Notes:
        - Missing key -> None.
        - A non-list value is rejected as a whole; non-string items are dropped
          individually, each with a warning.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        _type_warning(diagnostics, loc, "list of strings", value)
        return None
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            _type_warning(diagnostics, f"{loc}[]", "string", item)
    return out


def warn_unknown_keys(
    table: TomlTable,
    known: frozenset[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> None:
    """Record a warning for every key of ``table`` not in ``known``."""
    for key in table:
        if key not in known:
            logger.warning("Unknown key '%s' in [%s]", key, where)
            diagnostics.add_warning(
                DiagnosticKind.CONFIG_FILE, f"Unknown key '{key}' in [{where}]: ignored"
            )
