# topmark:header:start
#
#   project      : FormatKit
#   file         : test_cli_commands.py
#   file_relpath : tests/cli/test_cli_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `detect`, `presets`, `init-config`, `version` and global options."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import tomlkit

from formatkit.cli.exit_codes import ExitCode
from formatkit.constants import FORMATKIT_VERSION

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from click.testing import Result

    ProjectFactory = Callable[..., Path]
    RunCli = Callable[..., Result]
    TreeSnapshot = Callable[[Path], dict[str, bytes]]


def test_no_subcommand_prints_help(tmp_path: Path, run_cli_in: RunCli) -> None:
    result = run_cli_in(tmp_path, [])
    assert result.exit_code == ExitCode.SUCCESS
    assert "setup" in result.output
    assert "detect" in result.output


def test_verbose_and_quiet_are_exclusive(tmp_path: Path, run_cli_in: RunCli) -> None:
    result = run_cli_in(tmp_path, ["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR


def test_detect_human_output_with_install_hints(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(dev_dependencies={"@biomejs/biome": "^1.8.0"}, files={"yarn.lock": ""})

    result = run_cli_in(root, ["detect"])

    assert result.exit_code == ExitCode.SUCCESS
    assert "biome" in result.output
    assert "yarn add -D prettier" in result.output
    assert "yarn add -D remark-cli" in result.output


def test_detect_json(make_project: ProjectFactory, run_cli_in: RunCli) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    result = run_cli_in(root, ["detect", "--format", "json"])
    assert result.exit_code == ExitCode.SUCCESS
    payload = json.loads(result.output)
    assert payload["available"] == ["prettier"]
    assert payload["package_manager"] == "npm"


def test_detect_without_manifest_still_exits_zero(tmp_path: Path, run_cli_in: RunCli) -> None:
    result = run_cli_in(tmp_path, ["detect"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "package.json" in result.output


def test_presets_default_and_json(tmp_path: Path, run_cli_in: RunCli) -> None:
    text = run_cli_in(tmp_path, ["presets"])
    assert text.exit_code == ExitCode.SUCCESS
    assert "relaxed" in text.output

    result = run_cli_in(tmp_path, ["presets", "--format", "json"])
    payload = json.loads(result.output)
    assert [p["name"] for p in payload] == ["standard", "strict", "relaxed"]
    assert payload[2]["line_width"] == 120


def test_presets_markdown(tmp_path: Path, run_cli_in: RunCli) -> None:
    result = run_cli_in(tmp_path, ["presets", "--format", "markdown"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "| `line_width`" in result.output


def test_init_config_is_valid_toml(tmp_path: Path, run_cli_in: RunCli) -> None:
    result = run_cli_in(tmp_path, ["init-config"])
    assert result.exit_code == ExitCode.SUCCESS
    assert tomlkit.parse(result.output).unwrap()["setup"]["preset"] == "standard"


def test_version(tmp_path: Path, run_cli_in: RunCli) -> None:
    result = run_cli_in(tmp_path, ["version"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip() == FORMATKIT_VERSION

    as_json = run_cli_in(tmp_path, ["version", "--format", "json"])
    assert json.loads(as_json.output) == {"version": FORMATKIT_VERSION}


def _eslint_project(make_project: ProjectFactory) -> Path:
    rules = {"no-console": "warn", "prefer-const": "error", "import/order": "error"}
    config = {
        "extends": ["plugin:react/recommended"],
        "rules": {**rules, "semi": ["error", "never"]},
    }
    return make_project(
        dev_dependencies={"eslint": "^8.0.0"},
        files={".eslintrc.json": json.dumps(config)},
    )


def test_migrate_prints_markdown_report(make_project: ProjectFactory, run_cli_in: RunCli) -> None:
    root = _eslint_project(make_project)

    result = run_cli_in(root, ["migrate"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "# ESLint to Biome Migration Report" in result.output
    assert "| `no-console`" in result.output
    assert "`suspicious/noConsole`" in result.output
    assert "- `import/order`" in result.output
    assert "Biome has limited React support" in result.output
    assert '"semicolons": "as-needed"' in result.output
    assert "--style semicolons=as-needed" in result.output


def test_migrate_json(make_project: ProjectFactory, run_cli_in: RunCli) -> None:
    root = _eslint_project(make_project)

    result = run_cli_in(root, ["migrate", "--format", "json"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    payload = json.loads(result.output)
    assert [m["biome"] for m in payload["mappable"]] == ["suspicious/noConsole", "style/useConst"]
    assert payload["unmappable"] == ["import/order", "semi"]


def test_migrate_output_file_leaves_project_untouched(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
    tree_snapshot: TreeSnapshot,
) -> None:
    root = _eslint_project(make_project)
    before = tree_snapshot(root)

    result = run_cli_in(root, ["migrate", "-o", "reports/migration.md"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Migration report saved to" in result.output
    report = root / "reports" / "migration.md"
    assert report.read_text(encoding="utf-8").startswith("# ESLint to Biome Migration Report")
    after = tree_snapshot(root)
    del after[str(report.relative_to(root))]
    assert after == before


def test_migrate_explicit_yaml_config(tmp_path: Path, run_cli_in: RunCli) -> None:
    (tmp_path / "lint.yml").write_text("rules:\n  no-var: 2\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["migrate", "--config", "lint.yml", "--format", "json"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert json.loads(result.output)["mappable"][0]["biome"] == "style/noVar"


def test_migrate_without_eslint_config(make_project: ProjectFactory, run_cli_in: RunCli) -> None:
    root = make_project(dev_dependencies={"prettier": "^3.0.0"})
    result = run_cli_in(root, ["migrate"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "No ESLint config found" in result.output


def test_migrate_javascript_config_is_a_data_error(
    make_project: ProjectFactory,
    run_cli_in: RunCli,
) -> None:
    root = make_project(files={".eslintrc.js": "module.exports = {};\n"})
    result = run_cli_in(root, ["migrate"])
    assert result.exit_code == ExitCode.DATA_ERROR
    assert "--print-config" in result.output
