# topmark:header:start
#
#   project      : FormatKit
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public `formatkit.api` surface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from formatkit import api
from formatkit.config.model import MutableSetupOptions
from formatkit.core.diagnostics import DiagnosticKind
from formatkit.core.errors import EslintConfigError, InvalidPresetError, MissingManifestError
from formatkit.pipeline.models import SetupStatus

if TYPE_CHECKING:
    from collections.abc import Callable

    ProjectFactory = Callable[..., Path]
    TreeSnapshot = Callable[[Path], dict[str, bytes]]


def test_setup_with_mapping_and_kwargs(
    make_project: ProjectFactory,
    tree_snapshot: TreeSnapshot,
) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    before = tree_snapshot(root)

    result = api.setup({"target_dir": root, "preset": "relaxed"}, dryRun=True)

    assert result.success
    assert result.dry_run
    assert result.style is not None and result.style.line_width == 120
    assert tree_snapshot(root) == before


def test_setup_with_frozen_options(make_project: ProjectFactory) -> None:
    root = make_project(dev_dependencies={"eslint": "^9.0.0"})
    draft = MutableSetupOptions.from_defaults()
    draft.target_dir = root
    result = api.setup(draft.freeze())

    assert result.status is SetupStatus.SUCCESS
    assert (root / ".eslintrc.json").is_file()
    scripts = json.loads((root / "package.json").read_text(encoding="utf-8"))["scripts"]
    assert scripts["lint:eslint"] == "eslint ."


def test_setup_reads_project_config(make_project: ProjectFactory) -> None:
    root = make_project(
        dev_dependencies={"prettier": "^3.0.0"},
        files={"formatkit.toml": "[setup]\nupdate_scripts = false\n\n[style]\nline_width = 90\n"},
    )

    result = api.setup(target_dir=root)

    assert result.updated_scripts == ()
    assert json.loads((root / ".prettierrc.json").read_text(encoding="utf-8"))["printWidth"] == 90


def test_setup_rejects_unknown_options() -> None:
    with pytest.raises(TypeError, match="colour"):
        api.setup(colour=True)


def test_setup_rejects_options_plus_kwargs() -> None:
    with pytest.raises(TypeError):
        api.setup(MutableSetupOptions.from_defaults().freeze(), dry_run=True)


def test_setup_reports_broken_config_as_fatal(make_project: ProjectFactory) -> None:
    root = make_project(files={"formatkit.toml": "[setup\n"})
    result = api.setup(target_dir=root)
    assert result.status is SetupStatus.FATAL
    assert [e.kind for e in result.errors] == [DiagnosticKind.CONFIG_FILE]


def test_setup_missing_manifest_does_not_raise(tmp_path: Path) -> None:
    result = api.setup(target_dir=tmp_path)
    assert not result.success
    assert result.errors[0].kind is DiagnosticKind.MISSING_MANIFEST


def test_detect_available_formatters(make_project: ProjectFactory) -> None:
    root = make_project(dev_dependencies={"@biomejs/biome": "1.8.3"})
    assert api.detect_available_formatters(root).available == ("biome",)


def test_detect_missing_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(MissingManifestError):
        api.detect_available_formatters(tmp_path)


def test_resolve_and_list_presets() -> None:
    assert set(api.list_presets()) == {"standard", "strict", "relaxed"}
    assert api.resolve_preset("strict", {"line_width": 100}).line_width == 100
    with pytest.raises(InvalidPresetError):
        api.resolve_preset("unknown")


def test_list_formatters_and_version() -> None:
    assert [f.name for f in api.list_formatters()] == ["prettier", "biome", "eslint", "remark"]
    assert api.version()


def test_analyze_eslint_config(make_project: ProjectFactory) -> None:
    root = make_project(files={".eslintrc.json": '{"rules": {"no-debugger": "error"}}'})

    discovered = api.analyze_eslint_config(target_dir=root)
    explicit = api.analyze_eslint_config(root / ".eslintrc.json")

    assert discovered == explicit
    assert [m.biome for m in discovered.mappable] == ["suspicious/noDebugger"]


def test_analyze_eslint_config_without_config(make_project: ProjectFactory) -> None:
    root = make_project()
    with pytest.raises(EslintConfigError):
        api.analyze_eslint_config(target_dir=root)
