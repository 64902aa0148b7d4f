# topmark:header:start
#
#   project      : FormatKit
#   file         : migration.py
#   file_relpath : src/formatkit/migration.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ESLint to Biome migration analysis.

Reads a project's ESLint configuration and reports which of its rules have a
Biome equivalent, which do not, and which FormatKit style options the
formatting-related rules suggest. Nothing is written to the project; the CLI
renders the analysis as a Markdown report or JSON.

Only declarative configs can be analyzed: JSON and YAML ``.eslintrc`` files,
the ``eslintConfig`` key of ``package.json``, and a JSON dump of a flat config
array. JavaScript configs are rejected with a hint to export them as JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, cast

import yaml

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.constants import MANIFEST_NAME
from formatkit.core.errors import EslintConfigError, InvalidPresetError
from formatkit.presets.model import normalize_overrides
from formatkit.registry.formatters import FormatterRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger: FormatkitLogger = get_logger(__name__)

ESLINT_FORMATTER: Final[str] = "eslint"

ESLINT_TO_BIOME_RULES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "@typescript-eslint/no-unused-vars": "correctness/noUnusedVariables",
        "@typescript-eslint/no-explicit-any": "suspicious/noExplicitAny",
        "@typescript-eslint/no-non-null-assertion": "style/noNonNullAssertion",
        "no-console": "suspicious/noConsole",
        "no-debugger": "suspicious/noDebugger",
        "prefer-const": "style/useConst",
        "no-var": "style/noVar",
        "react-hooks/rules-of-hooks": "correctness/useHookAtTopLevel",
        "react-hooks/exhaustive-deps": "correctness/useExhaustiveDependencies",
    }
)

_JS_SUFFIXES: Final[tuple[str, ...]] = (".js", ".cjs", ".mjs", ".ts", ".cts", ".mts")

_EXTENDS_WARNINGS: Final[tuple[tuple[str, str], ...]] = (
    (
        "plugin:react",
        "Biome has limited React support. Some React-specific rules may not have equivalents.",
    ),
    (
        "plugin:@typescript-eslint",
        "Biome TypeScript support differs from @typescript-eslint. "
        "Review type checking carefully.",
    ),
)


class RuleSeverity(str, Enum):
    """Rule severity shared by ESLint and Biome."""

    ERROR = "error"
    WARN = "warn"
    OFF = "off"

    @classmethod
    def from_eslint(cls, setting: Any) -> RuleSeverity:
        """Map an ESLint rule setting (``2``, ``"warn"``, ``["error", ...]``) to a severity."""
        if isinstance(setting, list) and setting:
            setting = cast("list[Any]", setting)[0]
        if setting in ("error", 2):
            return cls.ERROR
        if setting in ("warn", 1):
            return cls.WARN
        return cls.OFF


@dataclass(frozen=True)
class RuleMapping:
    """One ESLint rule with a Biome equivalent."""

    eslint: str
    biome: str
    severity: RuleSeverity

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly representation."""
        return {"eslint": self.eslint, "biome": self.biome, "severity": self.severity.value}


@dataclass(frozen=True)
class MigrationAnalysis:
    """Result of analyzing one ESLint config.

    Attributes:
        source (Path): The analyzed config file.
        mappable (tuple[RuleMapping, ...]): Rules with a Biome equivalent, in config order.
        unmappable (tuple[str, ...]): Rules without a known Biome equivalent.
        suggested_style (Mapping[str, Any]): Style options implied by formatting rules
            (snake_case keys, plain values), ready to pass as ``--style`` overrides.
        warnings (tuple[str, ...]): Caveats about the migration.
    """

    source: Path
    mappable: tuple[RuleMapping, ...] = ()
    unmappable: tuple[str, ...] = ()
    suggested_style: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "source": str(self.source),
            "mappable": [m.to_dict() for m in self.mappable],
            "unmappable": list(self.unmappable),
            "suggested_style": dict(self.suggested_style),
            "warnings": list(self.warnings),
        }


def find_eslint_config(target_dir: Path) -> Path | None:
    """Return the ESLint config of a project, if any.

    The config filenames known to the registered ``eslint`` formatter are tried
    in order, then ``package.json`` when it has an ``eslintConfig`` key.
    """
    descriptor = FormatterRegistry.get(ESLINT_FORMATTER)
    names: tuple[str, ...] = descriptor.config_files if descriptor is not None else ()
    for name in names:
        candidate: Path = target_dir / name
        if candidate.is_file():
            return candidate

    manifest: Path = target_dir / MANIFEST_NAME
    if manifest.is_file():
        try:
            data: Any = json.loads(manifest.read_text(encoding="utf-8-sig"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return None
        if isinstance(data, dict) and "eslintConfig" in data:
            return manifest
    return None


def load_eslint_config(path: Path) -> dict[str, Any]:
    """Read an ESLint config into one mapping.

    A flat config array is folded into a single mapping: ``rules`` are merged
    in array order and ``files``-scoped entries count as overrides.

    Raises:
        EslintConfigError: The file cannot be read or parsed, or is a JavaScript config.
    """
    if path.suffix in _JS_SUFFIXES:
        raise EslintConfigError(
            path,
            "JavaScript configs cannot be analyzed; export the resolved config as JSON "
            "(npx eslint --print-config <file>) and pass that file instead",
        )
    try:
        text: str = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise EslintConfigError(path, str(exc)) from exc

    doc: Any
    try:
        if path.suffix == ".json":
            doc = json.loads(text)
        else:
            # Legacy .eslintrc files may hold JSON or YAML; YAML parses both
            doc = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise EslintConfigError(path, f"not valid JSON/YAML ({exc})") from exc

    if path.name == MANIFEST_NAME and isinstance(doc, dict):
        doc = cast("dict[str, Any]", doc).get("eslintConfig")
    if isinstance(doc, list):
        return _fold_flat_config(path, cast("list[Any]", doc))
    if not isinstance(doc, dict):
        raise EslintConfigError(path, "config is not an object")
    return cast("dict[str, Any]", doc)


def _fold_flat_config(path: Path, entries: list[Any]) -> dict[str, Any]:
    rules: dict[str, Any] = {}
    overrides: list[Any] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise EslintConfigError(path, "flat config entries must be objects")
        entry = cast("dict[str, Any]", entry)
        if "files" in entry:
            overrides.append(entry)
            continue
        entry_rules: Any = entry.get("rules")
        if isinstance(entry_rules, dict):
            rules.update(cast("dict[str, Any]", entry_rules))
    return {"rules": rules, "overrides": overrides}


def _rule_option(setting: Any) -> Any:
    if isinstance(setting, list) and len(setting) > 1:
        return cast("list[Any]", setting)[1]
    return None


def extract_style_from_eslint(rules: Mapping[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Derive style options from ESLint formatting rules.

    Returns:
        tuple[dict[str, Any], list[str]]: Valid style options (snake_case, plain values)
            and a warning for each derived value FormatKit cannot use.
    """
    candidates: dict[str, Any] = {}

    quotes: Any = _rule_option(rules.get("quotes"))
    if quotes in ("single", "double"):
        candidates["quote_style"] = quotes
        candidates["jsx_quote_style"] = quotes

    if isinstance(rules.get("semi"), list):
        never: bool = _rule_option(rules["semi"]) == "never"
        candidates["semicolons"] = "as-needed" if never else "always"

    comma: Any = _rule_option(rules.get("comma-dangle"))
    if isinstance(comma, str):
        if comma == "never":
            candidates["trailing_comma"] = "none"
        elif "always" in comma:
            candidates["trailing_comma"] = "all"

    max_len: Any = _rule_option(rules.get("max-len"))
    if isinstance(max_len, dict):
        max_len = cast("dict[str, Any]", max_len).get("code")
    if isinstance(max_len, int) and not isinstance(max_len, bool):
        candidates["line_width"] = max_len

    indent: Any = _rule_option(rules.get("indent"))
    if indent == "tab":
        candidates["indent_style"] = "tab"
    elif isinstance(indent, int) and not isinstance(indent, bool):
        candidates["indent_style"] = "space"
        candidates["indent_width"] = indent

    style: dict[str, Any] = {}
    warnings: list[str] = []
    for key, value in candidates.items():
        try:
            normalize_overrides({key: value})
        except InvalidPresetError as exc:
            warnings.append(f"Not suggesting {key}: {exc.message}")
            continue
        style[key] = value
    return style, warnings


def analyze_eslint_config(path: Path) -> MigrationAnalysis:
    """Analyze an ESLint config for migration to Biome.

    Raises:
        EslintConfigError: The config cannot be loaded.
    """
    config: dict[str, Any] = load_eslint_config(path)
    rules_value: Any = config.get("rules") or {}
    if not isinstance(rules_value, dict):
        raise EslintConfigError(path, "'rules' is not an object")
    rules: dict[str, Any] = cast("dict[str, Any]", rules_value)

    mappable: list[RuleMapping] = []
    unmappable: list[str] = []
    for rule, setting in rules.items():
        biome: str | None = ESLINT_TO_BIOME_RULES.get(rule)
        if biome is None:
            unmappable.append(rule)
        else:
            mappable.append(RuleMapping(rule, biome, RuleSeverity.from_eslint(setting)))

    style, warnings = extract_style_from_eslint(rules)

    extends: Any = config.get("extends") or []
    extends_list: list[str] = (
        [extends] if isinstance(extends, str) else [str(e) for e in cast("list[Any]", extends)]
    )
    for prefix, message in _EXTENDS_WARNINGS:
        if any(entry.startswith(prefix) for entry in extends_list):
            warnings.append(message)
    if config.get("overrides"):
        warnings.append(
            "ESLint overrides detected. Biome uses different configuration for "
            "file-specific rules."
        )

    logger.debug(
        "Analyzed %s: %d mappable, %d unmappable rules", path, len(mappable), len(unmappable)
    )
    return MigrationAnalysis(
        source=path,
        mappable=tuple(mappable),
        unmappable=tuple(unmappable),
        suggested_style=MappingProxyType(style),
        warnings=tuple(warnings),
    )
