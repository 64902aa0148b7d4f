# topmark:header:start
#
#   project      : FormatKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FormatKit test suite.

Sets up verbose logging for test runs and provides project fixtures: a
`make_project` factory that writes a ``package.json`` (plus optional extra
files) into ``tmp_path``.

Notes:
    Library calls take frozen `SetupOptions`. Build them from a
    `MutableSetupOptions` and ``freeze()``; never mutate a frozen instance.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

import pytest

from formatkit.config import logging as fk_logging
from formatkit.registry import FormatterRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping


class ProjectFactory(Protocol):
    """Callable signature of the `make_project` fixture."""

    def __call__(
        self,
        *,
        dev_dependencies: Mapping[str, str] | None = None,
        dependencies: Mapping[str, str] | None = None,
        scripts: Mapping[str, str] | None = None,
        files: Mapping[str, str] | None = None,
    ) -> Path: ...


def pytest_configure(config: pytest.Config) -> None:
    """Enable TRACE logging for the whole test session."""
    fk_logging.setup_logging(level=fk_logging.TRACE_LEVEL)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's FORMATKIT_LOG_LEVEL out of test runs."""
    monkeypatch.delenv(fk_logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def _reset_registry() -> Iterator[None]:
    """Drop process-local formatter overlays registered by a test."""
    yield
    FormatterRegistry.reset()


def write_manifest(target: Path, data: Mapping[str, Any]) -> Path:
    """Write ``data`` as ``package.json`` (2-space indent, trailing newline)."""
    path: Path = target / "package.json"
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Return a factory creating a JavaScript project under ``tmp_path``."""

    def _make(
        *,
        dev_dependencies: Mapping[str, str] | None = None,
        dependencies: Mapping[str, str] | None = None,
        scripts: Mapping[str, str] | None = None,
        files: Mapping[str, str] | None = None,
    ) -> Path:
        data: dict[str, Any] = {"name": "demo", "version": "1.0.0"}
        if scripts is not None:
            data["scripts"] = dict(scripts)
        if dependencies is not None:
            data["dependencies"] = dict(dependencies)
        if dev_dependencies is not None:
            data["devDependencies"] = dict(dev_dependencies)
        write_manifest(tmp_path, data)
        for rel, text in (files or {}).items():
            path: Path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _make


def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Return relative path -> bytes for every file below ``root``."""
    return {
        str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()
    }


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Return `snapshot_tree` for tests that compare a project before and after a run."""
    return snapshot_tree
