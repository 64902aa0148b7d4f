# topmark:header:start
#
#   project      : FormatKit
#   file         : test_cli_setup.py
#   file_relpath : tests/cli/test_cli_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `formatkit setup`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from formatkit.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    import pytest
    from click.testing import Result

    ProjectFactory = Callable[..., Path]
    RunCli = Callable[..., Result]
    TreeSnapshot = Callable[[Path], dict[str, bytes]]


def test_setup_writes_files_and_exits_zero(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})

    result = run_cli_in(root, ["setup"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert (root / ".prettierrc.json").is_file()
    assert "Setup complete." in result.output
    assert "format:prettier" in result.output


def test_setup_dry_run_json(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
    tree_snapshot: TreeSnapshot,
) -> None:
    root = make_project(dev_dependencies={"@biomejs/biome": "^1.8.0", "eslint": "^9.0.0"})
    before = tree_snapshot(root)

    result = run_cli_in(root, ["setup", "--dry-run", "--format", "json"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    payload = json.loads(result.output)
    assert payload["dry_run"] is True
    assert payload["status"] == "success-with-warnings"
    assert {w["kind"] for w in payload["warnings"]} == {"formatter-conflict"}
    assert tree_snapshot(root) == before


def test_setup_style_override_and_target_dir(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
    tmp_path_factory: pytest.TempPathFactory,
) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    elsewhere = tmp_path_factory.mktemp("cwd")

    result = run_cli_in(
        elsewhere,
        ["setup", "--target-dir", str(root), "--style", "lineWidth=100", "--no-scripts"],
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    doc = json.loads((root / ".prettierrc.json").read_text(encoding="utf-8"))
    assert doc["printWidth"] == 100
    assert "scripts" not in json.loads((root / "package.json").read_text(encoding="utf-8"))


def test_setup_formatters_option_limits_selection(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0", "remark-cli": "^12.0.0"})

    result = run_cli_in(root, ["setup", "--formatters", "remark", "--format", "json"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert json.loads(result.output)["formatters"] == ["remark"]
    assert not (root / ".prettierrc.json").exists()


def test_setup_unknown_formatter_is_usage_error(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    result = run_cli_in(root, ["setup", "--formatters", "prettier,gofmt"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "gofmt" in result.output


def test_setup_missing_manifest_exit_code(tmp_path: Path, run_cli_in: RunCli) -> None:
    result = run_cli_in(tmp_path, ["setup"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "package.json" in result.output


def test_setup_invalid_manifest_exit_code(tmp_path: Path, run_cli_in: RunCli) -> None:
    (tmp_path / "package.json").write_text("[]", encoding="utf-8")
    result = run_cli_in(tmp_path, ["setup"])
    assert result.exit_code == ExitCode.DATA_ERROR


def test_setup_invalid_preset_exit_code(make_project: ProjectFactory, run_cli_in: RunCli) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    result = run_cli_in(root, ["setup", "--preset", "fancy"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert not (root / ".prettierrc.json").exists()


def test_setup_invalid_style_value_exit_code(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    result = run_cli_in(root, ["setup", "--style", "lineWidth=wide"])
    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_setup_malformed_style_flag(make_project: ProjectFactory, run_cli_in: RunCli) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    result = run_cli_in(root, ["setup", "--style", "lineWidth"])
    assert result.exit_code == 2
    assert "KEY=VALUE" in result.output


def test_setup_broken_config_file_exit_code(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(files={"formatkit.toml": "[setup\n"})
    assert run_cli_in(root, ["setup"]).exit_code == ExitCode.CONFIG_ERROR
    assert run_cli_in(root, ["setup", "--no-config"]).exit_code == ExitCode.SUCCESS


def test_setup_rerun_reports_existing_configs(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    assert run_cli_in(root, ["setup"]).exit_code == ExitCode.SUCCESS

    result = run_cli_in(root, ["setup"])

    assert result.exit_code == ExitCode.SUCCESS
    assert "already exists" in result.output
    assert "Setup complete with warnings." in result.output


def test_setup_verbose_dry_run_shows_content(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    result = run_cli_in(root, ["setup", "--dry-run", "--verbose"])
    assert result.exit_code == ExitCode.SUCCESS
    assert '"printWidth": 80' in result.output
    assert "would write" in result.output


def test_setup_devcontainer_flag(make_project: ProjectFactory, run_cli_in: RunCli) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})

    result = run_cli_in(root, ["setup", "--devcontainer"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    devcontainer = root / ".devcontainer" / "devcontainer.json"
    assert json.loads(devcontainer.read_text(encoding="utf-8"))["name"] == "Formatting"
    assert "devcontainer.json: written" in result.output
