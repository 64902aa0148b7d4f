# topmark:header:start
#
#   project      : FormatKit
#   file         : test_devcontainer.py
#   file_relpath : tests/pipeline/test_devcontainer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the dev container config planner."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from formatkit.core.manifest import PackageManager
from formatkit.formatters.instances import get_formatter_catalog
from formatkit.pipeline.devcontainer import (
    BASE_IMAGE,
    NODE_IMAGE,
    devcontainer_config,
    plan_devcontainer,
)

if TYPE_CHECKING:
    from pathlib import Path

    from formatkit.formatters.base import FormatterDescriptor


def _descriptors(*names: str) -> list[FormatterDescriptor]:
    catalog = get_formatter_catalog()
    return [catalog[name] for name in names]


def test_node_formatters_use_node_image_and_install_on_create() -> None:
    config = devcontainer_config(_descriptors("prettier", "eslint"), PackageManager.PNPM)

    assert config["image"] == NODE_IMAGE
    assert config["postCreateCommand"] == "pnpm install"
    vscode = config["customizations"]["vscode"]
    assert vscode["extensions"] == [
        "esbenp.prettier-vscode",
        "dbaeumer.vscode-eslint",
        "editorconfig.editorconfig",
    ]
    assert vscode["settings"] == {
        "editor.formatOnSave": True,
        "editor.defaultFormatter": "esbenp.prettier-vscode",
    }


def test_biome_only_uses_base_image() -> None:
    config = devcontainer_config(_descriptors("biome"), PackageManager.NPM)

    assert config["image"] == BASE_IMAGE
    assert "postCreateCommand" not in config
    assert config["customizations"]["vscode"]["settings"]["editor.defaultFormatter"] == (
        "biomejs.biome"
    )


def test_linter_is_never_the_default_formatter() -> None:
    config = devcontainer_config(_descriptors("eslint"), PackageManager.NPM)
    assert "editor.defaultFormatter" not in config["customizations"]["vscode"]["settings"]


def test_plan_targets_devcontainer_folder(tmp_path: Path) -> None:
    artifact = plan_devcontainer(_descriptors("prettier"), PackageManager.NPM, tmp_path)

    assert artifact.path == tmp_path / ".devcontainer" / "devcontainer.json"
    assert artifact.formatter == "devcontainer"
    assert not artifact.skipped
    assert json.loads(artifact.content)["name"] == "Formatting"
    assert not artifact.path.exists()


def test_existing_root_devcontainer_is_respected(tmp_path: Path) -> None:
    existing = tmp_path / ".devcontainer.json"
    existing.write_text("{}", encoding="utf-8")

    skipped = plan_devcontainer(_descriptors("prettier"), PackageManager.NPM, tmp_path)
    forced = plan_devcontainer(_descriptors("prettier"), PackageManager.NPM, tmp_path, force=True)

    assert skipped.skipped
    assert skipped.existing_path == existing
    assert not forced.skipped
    assert forced.path == tmp_path / ".devcontainer" / "devcontainer.json"
