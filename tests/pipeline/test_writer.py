# topmark:header:start
#
#   project      : FormatKit
#   file         : test_writer.py
#   file_relpath : tests/pipeline/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for write sinks and config artifact planning."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from formatkit.core.errors import ConfigWriteError
from formatkit.formatters.instances import get_formatter_catalog
from formatkit.pipeline.generator import find_existing_config, plan_artifact, write_artifacts
from formatkit.pipeline.writer import FileSystemSink, NullSink, WriteStatus, select_sink
from formatkit.presets import BUILTIN_PRESETS

if TYPE_CHECKING:
    from pathlib import Path


def test_select_sink() -> None:
    assert isinstance(select_sink(dry_run=True), NullSink)
    assert isinstance(select_sink(dry_run=False), FileSystemSink)


def test_file_system_sink_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "file.json"
    result = FileSystemSink().write(target, "{}\n")
    assert result.status is WriteStatus.WRITTEN
    assert target.read_text(encoding="utf-8") == "{}\n"


def test_null_sink_previews(tmp_path: Path) -> None:
    target = tmp_path / "file.json"
    assert NullSink().write(target, "{}").status is WriteStatus.PREVIEWED
    assert not target.exists()


def test_plan_artifact_detects_any_owned_config(tmp_path: Path) -> None:
    biome = get_formatter_catalog()["biome"]
    (tmp_path / "biome.jsonc").write_text("{}", encoding="utf-8")

    assert find_existing_config(biome, tmp_path) == tmp_path / "biome.jsonc"
    artifact = plan_artifact(biome, BUILTIN_PRESETS["standard"], tmp_path)
    assert artifact.skipped
    assert artifact.path == tmp_path / "biome.json"

    forced = plan_artifact(biome, BUILTIN_PRESETS["standard"], tmp_path, force=True)
    assert not forced.skipped


def test_write_artifacts_marks_written(tmp_path: Path) -> None:
    prettier = get_formatter_catalog()["prettier"]
    artifact = plan_artifact(prettier, BUILTIN_PRESETS["standard"], tmp_path)

    (written,) = write_artifacts([artifact], FileSystemSink())
    (previewed,) = write_artifacts([artifact], NullSink())

    assert written.written
    assert not previewed.written


def test_write_failure_is_config_write_error(tmp_path: Path) -> None:
    prettier = get_formatter_catalog()["prettier"]
    (tmp_path / "blocker").write_text("", encoding="utf-8")
    artifact = plan_artifact(prettier, BUILTIN_PRESETS["standard"], tmp_path / "blocker")
    with pytest.raises(ConfigWriteError):
        write_artifacts([artifact], FileSystemSink())
