# topmark:header:start
#
#   project      : FormatKit
#   file         : test_manifest.py
#   file_relpath : tests/core/test_manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `formatkit.core.manifest`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from formatkit.core.errors import InvalidManifestError, ManifestWriteError, MissingManifestError
from formatkit.core.manifest import PackageManager, PackageManifest, detect_package_manager
from formatkit.pipeline.writer import FileSystemSink, NullSink

if TYPE_CHECKING:
    from pathlib import Path


def test_missing_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(MissingManifestError):
        PackageManifest.load(tmp_path)


@pytest.mark.parametrize(
    "text",
    ["{not json", "[1, 2, 3]", '{"devDependencies": []}'],
)
def test_invalid_manifest_raises(tmp_path: Path, text: str) -> None:
    (tmp_path / "package.json").write_text(text, encoding="utf-8")
    with pytest.raises(InvalidManifestError):
        PackageManifest.load(tmp_path)


def test_find_dependency_prefers_dependencies_section(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        '{"dependencies": {"prettier": "^3.0.0"}, "devDependencies": {"prettier": "^2.0.0"}}',
        encoding="utf-8",
    )
    manifest = PackageManifest.load(tmp_path)
    assert manifest.find_dependency(("prettier",)) == ("dependencies", "prettier", "^3.0.0")
    assert manifest.find_dependency(("eslint",)) is None


def test_write_scripts_preserves_indent_and_key_order(tmp_path: Path) -> None:
    original = '{\n    "name": "demo",\n    "version": "1.0.0"\n}\n'
    (tmp_path / "package.json").write_text(original, encoding="utf-8")
    manifest = PackageManifest.load(tmp_path)
    assert manifest.indent == 4

    manifest.write_scripts({"format": "prettier --write ."}, FileSystemSink())

    text = (tmp_path / "package.json").read_text(encoding="utf-8")
    assert text.startswith('{\n    "name": "demo",\n    "version": "1.0.0",\n    "scripts"')
    assert text.endswith("}\n")


def test_write_scripts_through_null_sink_leaves_file(tmp_path: Path) -> None:
    original = '{"name": "demo"}'
    (tmp_path / "package.json").write_text(original, encoding="utf-8")
    manifest = PackageManifest.load(tmp_path)
    manifest.write_scripts({"format": "x"}, NullSink())
    assert (tmp_path / "package.json").read_text(encoding="utf-8") == original


def test_bom_prefixed_manifest_is_read_and_kept(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_bytes(b'\xef\xbb\xbf{\n  "devDependencies": {"prettier": "^3"}\n}\n')

    manifest = PackageManifest.load(tmp_path)
    assert manifest.bom
    assert manifest.find_dependency(("prettier",)) == ("devDependencies", "prettier", "^3")

    manifest.write_scripts({"format": "prettier --write ."}, FileSystemSink())
    raw = path.read_bytes()
    assert raw.startswith(b'\xef\xbb\xbf{\n  "devDependencies"')
    assert raw.count(b"\xef\xbb\xbf") == 1


def test_non_string_script_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text('{"scripts": {"build": 1}}', encoding="utf-8")
    manifest = PackageManifest.load(tmp_path)
    with pytest.raises(ManifestWriteError):
        manifest.scripts()


@pytest.mark.parametrize(
    ("lock_file", "expected"),
    [
        ("bun.lockb", PackageManager.BUN),
        ("pnpm-lock.yaml", PackageManager.PNPM),
        ("yarn.lock", PackageManager.YARN),
        ("package-lock.json", PackageManager.NPM),
        (None, PackageManager.NPM),
    ],
)
def test_detect_package_manager(
    tmp_path: Path, lock_file: str | None, expected: PackageManager
) -> None:
    if lock_file:
        (tmp_path / lock_file).write_text("", encoding="utf-8")
    assert detect_package_manager(tmp_path) is expected


def test_run_prefix_per_package_manager() -> None:
    assert PackageManager.NPM.run_prefix == "npm run"
    assert PackageManager.PNPM.run_prefix == "pnpm"
    assert PackageManager.YARN.run_prefix == "yarn"
    assert PackageManager.BUN.run_prefix == "bun run"
