# topmark:header:start
#
#   project      : FormatKit
#   file         : test_templates.py
#   file_relpath : tests/formatters/test_templates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the built-in formatter templates."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import Any

import pytest
import yaml

from formatkit.core.errors import TemplateContractError
from formatkit.formatters.base import ConfigFormat, FormatterDescriptor, translate
from formatkit.formatters.instances import get_formatter_catalog
from formatkit.presets import BUILTIN_PRESETS, resolve_preset
from formatkit.presets.model import EndOfLine, IndentStyle

STANDARD = BUILTIN_PRESETS["standard"]
RELAXED = BUILTIN_PRESETS["relaxed"]


def _render_json(name: str, style: Any) -> dict[str, Any]:
    fd: FormatterDescriptor = get_formatter_catalog()[name]
    assert fd.config_format is ConfigFormat.JSON
    text = fd.render(style)
    assert text.endswith("\n")
    return json.loads(text)


def test_builtin_catalog_order() -> None:
    assert list(get_formatter_catalog())[:4] == ["prettier", "biome", "eslint", "remark"]


def test_prettier_standard() -> None:
    doc = _render_json("prettier", STANDARD)
    assert doc["printWidth"] == 80
    assert doc["tabWidth"] == 2
    assert doc["useTabs"] is False
    assert doc["semi"] is True
    assert doc["singleQuote"] is True
    assert doc["jsxSingleQuote"] is False
    assert doc["trailingComma"] == "all"
    assert doc["arrowParens"] == "always"
    assert doc["endOfLine"] == "lf"


def test_prettier_relaxed_maps_as_needed_values() -> None:
    doc = _render_json("prettier", RELAXED)
    assert doc["printWidth"] == 120
    assert doc["semi"] is False
    assert doc["arrowParens"] == "avoid"
    assert doc["trailingComma"] == "es5"
    assert doc["endOfLine"] == "auto"


def test_line_width_override_reaches_every_template() -> None:
    style = resolve_preset("standard", {"lineWidth": 100})
    assert _render_json("prettier", style)["printWidth"] == 100
    assert _render_json("biome", style)["formatter"]["lineWidth"] == 100
    assert _render_json("eslint", style)["rules"]["max-len"][1]["code"] == 100

    remark = get_formatter_catalog()["remark"]
    doc = yaml.safe_load(remark.render(style))
    assert ["remark-lint-maximum-line-length", 100] in doc["plugins"]


def test_biome_tables() -> None:
    doc = _render_json("biome", RELAXED)
    js = doc["javascript"]["formatter"]
    assert doc["formatter"]["indentStyle"] == "space"
    assert doc["formatter"]["lineEnding"] == "lf"
    assert js["semicolons"] == "asNeeded"
    assert js["arrowParentheses"] == "asNeeded"
    assert js["quoteStyle"] == "single"
    assert js["jsxQuoteStyle"] == "double"


def test_eslint_rules() -> None:
    doc = _render_json("eslint", STANDARD)
    rules = doc["rules"]
    assert rules["indent"] == ["error", 2]
    assert rules["quotes"][1] == "single"
    assert rules["jsx-quotes"] == ["error", "prefer-double"]
    assert rules["semi"] == ["error", "always"]
    assert rules["comma-dangle"] == ["error", "always-multiline"]
    assert rules["linebreak-style"] == ["error", "unix"]

    tabbed = _render_json("eslint", replace(STANDARD, indent_style=IndentStyle.TAB))
    assert tabbed["rules"]["indent"] == ["error", "tab"]

    auto = _render_json("eslint", replace(STANDARD, end_of_line=EndOfLine.AUTO))
    assert auto["rules"]["linebreak-style"] == "off"


def test_remark_is_yaml() -> None:
    remark = get_formatter_catalog()["remark"]
    assert remark.primary_config == ".remarkrc.yaml"
    doc = yaml.safe_load(remark.render(STANDARD))
    assert doc["settings"]["listItemIndent"] == "one"
    assert "remark-preset-lint-recommended" in doc["plugins"]


@pytest.mark.parametrize("name", ["prettier", "biome", "eslint", "remark"])
def test_rendering_is_deterministic(name: str) -> None:
    fd = get_formatter_catalog()[name]
    assert fd.render(STANDARD) == fd.render(resolve_preset("standard"))


def test_raw_settings_are_merged_over_the_template() -> None:
    fd = get_formatter_catalog()["biome"]
    doc = json.loads(
        fd.render(STANDARD, {"formatter": {"lineWidth": 100}, "files": {"ignore": ["dist"]}})
    )
    assert doc["formatter"]["lineWidth"] == 100
    assert doc["formatter"]["indentWidth"] == 2
    assert doc["files"] == {"ignore": ["dist"]}


def test_raw_settings_keep_the_config_format() -> None:
    remark = get_formatter_catalog()["remark"]
    doc = yaml.safe_load(remark.render(STANDARD, {"settings": {"bullet": "*"}}))
    assert doc["settings"]["bullet"] == "*"
    assert doc["settings"]["listItemIndent"] == "one"
    assert remark.render(STANDARD, {}) == remark.render(STANDARD)


def test_translate_reports_contract_violation() -> None:
    with pytest.raises(TemplateContractError) as exc_info:
        translate("demo", "end_of_line", {EndOfLine.LF: "lf"}, EndOfLine.CR)
    assert "demo" in exc_info.value.message


def test_descriptor_scripts() -> None:
    catalog = get_formatter_catalog()
    assert catalog["prettier"].scripts() == {
        "format:prettier": "prettier --write .",
        "format:prettier:check": "prettier --check .",
    }
    assert catalog["eslint"].scripts() == {
        "lint:eslint": "eslint .",
        "lint:eslint:fix": "eslint . --fix",
    }
    assert catalog["remark"].install_hint_package == "remark-cli"


def test_descriptor_requires_config_files() -> None:
    with pytest.raises(ValueError):
        FormatterDescriptor(name="x", packages=("x",), config_files=(), template=lambda s: {})
