# topmark:header:start
#
#   project      : FormatKit
#   file         : test_resolver.py
#   file_relpath : tests/presets/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for preset resolution (built-in names, overrides and YAML presets)."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import pytest
from hypothesis import given
from hypothesis import strategies as st

from formatkit.core.errors import InvalidPresetError
from formatkit.presets import (
    BUILTIN_PRESETS,
    list_presets,
    resolve_preset,
    resolve_preset_config,
)
from formatkit.presets.model import (
    ArrowParens,
    EndOfLine,
    QuoteStyle,
    SemicolonPolicy,
    TrailingCommaPolicy,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_default_preset_is_standard() -> None:
    assert resolve_preset(None) == BUILTIN_PRESETS["standard"]
    assert resolve_preset("standard").line_width == 80


def test_presets_are_listed_in_declaration_order() -> None:
    assert list(list_presets()) == ["standard", "strict", "relaxed"]


def test_strict_differs_from_standard_only_in_jsx_quotes() -> None:
    strict = resolve_preset("strict")
    assert strict.jsx_quote_style is QuoteStyle.SINGLE
    assert replace(strict, jsx_quote_style=QuoteStyle.DOUBLE) == resolve_preset("standard")


def test_relaxed_values() -> None:
    relaxed = resolve_preset("relaxed")
    assert relaxed.line_width == 120
    assert relaxed.semicolons is SemicolonPolicy.AS_NEEDED
    assert relaxed.trailing_comma is TrailingCommaPolicy.ES5
    assert relaxed.arrow_parens is ArrowParens.AS_NEEDED
    assert relaxed.end_of_line is EndOfLine.AUTO


def test_override_changes_only_named_field() -> None:
    style = resolve_preset("standard", {"lineWidth": 100})
    assert style.line_width == 100
    assert replace(style, line_width=80) == resolve_preset("standard")


def test_overrides_accept_strings_from_the_command_line() -> None:
    style = resolve_preset(
        "standard",
        {"indent_width": "4", "bracket_spacing": "false", "semicolons": "asNeeded"},
    )
    assert style.indent_width == 4
    assert style.bracket_spacing is False
    assert style.semicolons is SemicolonPolicy.AS_NEEDED


def test_unknown_preset_lists_available_names() -> None:
    with pytest.raises(InvalidPresetError, match="standard, strict, relaxed"):
        resolve_preset("fancy")


@pytest.mark.parametrize(
    "overrides",
    [
        {"line_width": 10},
        {"line_width": True},
        {"indent_width": 9},
        {"quote_style": "backtick"},
        {"tab_size": 2},
        {"bracket_spacing": "maybe"},
    ],
)
def test_invalid_override_is_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(InvalidPresetError):
        resolve_preset("standard", overrides)


@given(
    name=st.sampled_from(sorted(BUILTIN_PRESETS)),
    line_width=st.integers(min_value=40, max_value=200),
    indent_width=st.integers(min_value=1, max_value=8),
)
def test_resolution_is_deterministic(name: str, line_width: int, indent_width: int) -> None:
    overrides = {"line_width": line_width, "indentWidth": indent_width}
    first = resolve_preset(name, overrides)
    second = resolve_preset(name, dict(overrides))
    assert first == second
    assert first.line_width == line_width
    assert first.indent_width == indent_width


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_yaml_preset_extends_builtin(tmp_path: Path) -> None:
    _write(
        tmp_path / "team.yaml",
        "name: team\nextends: relaxed\ncommon:\n  lineWidth: 100\n  quotes:\n    style: double\n",
    )
    style = resolve_preset("team.yaml", base_dir=tmp_path)
    assert style.line_width == 100
    assert style.quote_style is QuoteStyle.DOUBLE
    assert style.semicolons is SemicolonPolicy.AS_NEEDED


def test_yaml_preset_without_extends_uses_standard(tmp_path: Path) -> None:
    path = _write(tmp_path / "plain.yml", "name: plain\ncommon:\n  indentation:\n    width: 4\n")
    style = resolve_preset(str(path))
    assert style == replace(BUILTIN_PRESETS["standard"], indent_width=4)


def test_yaml_preset_extends_sibling_yaml(tmp_path: Path) -> None:
    _write(tmp_path / "base.yaml", "name: base\nextends: strict\ncommon:\n  lineWidth: 90\n")
    _write(tmp_path / "child.yaml", "name: child\nextends: base\ncommon:\n  indentWidth: 4\n")
    style = resolve_preset("child.yaml", base_dir=tmp_path)
    assert style.line_width == 90
    assert style.indent_width == 4
    assert style.jsx_quote_style is QuoteStyle.SINGLE


def test_yaml_preset_cycle_is_rejected(tmp_path: Path) -> None:
    _write(tmp_path / "a.yaml", "name: a\nextends: b\n")
    _write(tmp_path / "b.yaml", "name: b\nextends: a\n")
    with pytest.raises(InvalidPresetError, match="cycle"):
        resolve_preset("a.yaml", base_dir=tmp_path)


@pytest.mark.parametrize(
    "text",
    [
        "common: {}\n",
        "name: x\nextends: nowhere\n",
        "name: x\ncommon:\n  lineWidth: 5\n",
        "name: [unclosed\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_yaml_preset(tmp_path: Path, text: str) -> None:
    _write(tmp_path / "bad.yaml", text)
    with pytest.raises(InvalidPresetError):
        resolve_preset("bad.yaml", base_dir=tmp_path)


def test_missing_yaml_preset(tmp_path: Path) -> None:
    with pytest.raises(InvalidPresetError):
        resolve_preset("absent.yaml", base_dir=tmp_path)


def test_builtin_preset_has_no_raw_settings() -> None:
    resolved = resolve_preset_config("relaxed", {"lineWidth": 100})
    assert resolved.style.line_width == 100
    assert dict(resolved.raw) == {}
    assert dict(resolved.raw_for("prettier")) == {}


def test_yaml_preset_raw_settings(tmp_path: Path) -> None:
    _write(
        tmp_path / "team.yaml",
        "name: team\nraw:\n  prettier:\n    proseWrap: never\n  biome:\n"
        "    files:\n      ignore: [dist]\n",
    )
    resolved = resolve_preset_config("team.yaml", base_dir=tmp_path)
    assert resolved.raw_for("prettier") == {"proseWrap": "never"}
    assert resolved.raw_for("biome") == {"files": {"ignore": ["dist"]}}
    assert resolved.style == BUILTIN_PRESETS["standard"]


def test_raw_settings_are_inherited_and_deep_merged(tmp_path: Path) -> None:
    _write(
        tmp_path / "base.yaml",
        "name: base\nraw:\n  prettier:\n    proseWrap: always\n    overrides: [{files: '*.md'}]\n"
        "  biome:\n    formatter:\n      formatWithErrors: true\n      attributePosition: auto\n",
    )
    _write(
        tmp_path / "child.yaml",
        "name: child\nextends: base\nraw:\n  prettier:\n    proseWrap: never\n"
        "  biome:\n    formatter:\n      attributePosition: multiline\n",
    )

    resolved = resolve_preset_config("child.yaml", base_dir=tmp_path)

    assert resolved.raw_for("prettier") == {
        "proseWrap": "never",
        "overrides": [{"files": "*.md"}],
    }
    assert resolved.raw_for("biome") == {
        "formatter": {"formatWithErrors": True, "attributePosition": "multiline"}
    }


def test_overrides_do_not_touch_raw_settings(tmp_path: Path) -> None:
    _write(
        tmp_path / "team.yaml", "name: team\nraw:\n  remark:\n    settings:\n      bullet: '*'\n"
    )
    resolved = resolve_preset_config("team.yaml", {"lineWidth": 100}, base_dir=tmp_path)
    assert resolved.style.line_width == 100
    assert resolved.raw_for("remark") == {"settings": {"bullet": "*"}}


@pytest.mark.parametrize(
    "raw",
    ["raw: [prettier]\n", "raw:\n  prettier: never\n", "raw: text\n"],
)
def test_malformed_raw_section_is_rejected(tmp_path: Path, raw: str) -> None:
    _write(tmp_path / "bad.yaml", "name: bad\n" + raw)
    with pytest.raises(InvalidPresetError, match="raw"):
        resolve_preset_config("bad.yaml", base_dir=tmp_path)
