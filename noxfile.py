# topmark:header:start
#
#   project      : FormatKit
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FormatKit project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest.
  - `property_test`: Long-running property tests (opt-in).
  - `lint`: Ruff lint.
  - `lint_fixall`: Ruff lint autofix.
  - `format_check`: Verify formatting with ruff.
  - `format`: Apply formatting with ruff.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import Any, cast

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` with the stdlib TOML parser (Python 3.11+).

    This runs at **noxfile import time**, so it must not depend on project
    runtime dependencies.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists() or sys.version_info < (3, 11):
        return {}
    import tomllib

    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return {}


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers."""
    project_any: Any = _parse_pyproject_toml().get("project")
    if not isinstance(project_any, dict):
        warnings.warn(
            f"Could not read pyproject.toml. Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    prefix = "Programming Language :: Python :: "
    classifiers: list[str] = cast("list[str]", project_any.get("classifiers", []))
    versions: set[str] = {
        c[len(prefix) :] for c in classifiers if c.startswith(prefix) and c.count(".") == 1
    }
    if not versions:
        return [CURRENT_PYTHON_VERSION]

    def _key(s: str) -> tuple[int, int]:
        major, minor = s.split(".")
        return int(major), int(minor)

    return sorted(versions, key=_key)


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Lint with ruff."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Apply ruff lint autofixes."""
    session.install("ruff")
    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:  # noqa: A001
    """Apply formatting."""
    session.install("ruff")
    session.run("ruff", "format", ".")
