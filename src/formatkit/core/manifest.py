# topmark:header:start
#
#   project      : FormatKit
#   file         : manifest.py
#   file_relpath : src/formatkit/core/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading and updating a project's ``package.json``.

The manifest is the only piece of the target project FormatKit both reads and
writes: dependencies drive formatter detection, and the ``scripts`` object is
where the script merger stores its commands. Key order and indentation of the
original document are preserved on write so that a merge which adds nothing
is byte-for-byte a no-op.
"""

from __future__ import annotations

import codecs
import json
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.constants import MANIFEST_NAME
from formatkit.core.errors import InvalidManifestError, ManifestWriteError, MissingManifestError

if TYPE_CHECKING:
    from formatkit.pipeline.writer import WriteSink

logger: FormatkitLogger = get_logger(__name__)

DEPENDENCY_SECTIONS: Final[tuple[str, ...]] = ("dependencies", "devDependencies")

_INDENT_RE: Final[re.Pattern[str]] = re.compile(r"^([ \t]+)\S", re.MULTILINE)


class PackageManager(str, Enum):
    """JavaScript package managers recognized through their lock files."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    @property
    def lock_file(self) -> str:
        """Lock file whose presence selects this package manager."""
        return {
            PackageManager.NPM: "package-lock.json",
            PackageManager.PNPM: "pnpm-lock.yaml",
            PackageManager.YARN: "yarn.lock",
            PackageManager.BUN: "bun.lockb",
        }[self]

    @property
    def run_prefix(self) -> str:
        """Command prefix that runs a ``package.json`` script."""
        return {
            PackageManager.NPM: "npm run",
            PackageManager.PNPM: "pnpm",
            PackageManager.YARN: "yarn",
            PackageManager.BUN: "bun run",
        }[self]

    @property
    def install_command(self) -> str:
        """Command installing the dependencies declared in ``package.json``."""
        return f"{self.value} install"

    @property
    def add_dev_prefix(self) -> str:
        """Command prefix that installs a development dependency."""
        return {
            PackageManager.NPM: "npm install -D",
            PackageManager.PNPM: "pnpm add -D",
            PackageManager.YARN: "yarn add -D",
            PackageManager.BUN: "bun add -d",
        }[self]


# Checked in order; npm is the fallback when no lock file is present.
_LOCK_FILE_ORDER: Final[tuple[PackageManager, ...]] = (
    PackageManager.BUN,
    PackageManager.PNPM,
    PackageManager.YARN,
)


def detect_package_manager(target_dir: Path) -> PackageManager:
    """Return the package manager used in ``target_dir`` (defaults to npm)."""
    for pm in _LOCK_FILE_ORDER:
        if (target_dir / pm.lock_file).exists():
            logger.debug("Package manager %s selected via %s", pm.value, pm.lock_file)
            return pm
    return PackageManager.NPM


@dataclass
class PackageManifest:
    """In-memory view of a ``package.json`` document.

    Attributes:
        path (Path): Location of the manifest.
        data (dict[str, Any]): Parsed JSON object (insertion order preserved).
        indent (str | int): Indentation detected in the original text.
        trailing_newline (bool): Whether the original text ended with a newline.
        bom (bool): Whether the original file started with a UTF-8 byte order mark.
    """

    path: Path
    data: dict[str, Any]
    indent: str | int = 2
    trailing_newline: bool = True
    bom: bool = False

    @classmethod
    def load(cls, target_dir: Path) -> PackageManifest:
        """Read and parse ``package.json`` from ``target_dir``.

        Raises:
            MissingManifestError: The file does not exist.
            InvalidManifestError: The file is unreadable, not JSON, or not a JSON object.
        """
        path: Path = target_dir / MANIFEST_NAME
        if not path.is_file():
            raise MissingManifestError(path)
        try:
            raw: bytes = path.read_bytes()
            # npm accepts a leading BOM; keep it so a rewrite stays byte-faithful
            text: str = raw.decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidManifestError(path, str(exc)) from exc
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            reason: str = f"not valid JSON ({exc.msg}, line {exc.lineno})"
            raise InvalidManifestError(path, reason) from exc
        if not isinstance(data, dict):
            raise InvalidManifestError(path, "top-level value is not an object")
        for section in DEPENDENCY_SECTIONS:
            if section in data and not isinstance(data[section], dict):
                raise InvalidManifestError(path, f"'{section}' is not an object")

        logger.debug("Loaded manifest %s (%d top-level keys)", path, len(data))
        return cls(
            path=path,
            data=data,
            indent=_detect_indent(text),
            trailing_newline=text.endswith("\n"),
            bom=raw.startswith(codecs.BOM_UTF8),
        )

    def dependencies(self, section: str) -> dict[str, Any]:
        """Return one dependency section (empty when absent)."""
        value: Any = self.data.get(section)
        return value if isinstance(value, dict) else {}

    def find_dependency(self, packages: tuple[str, ...]) -> tuple[str, str, str] | None:
        """Return ``(section, package, version)`` for the first package present.

        Sections are searched in `DEPENDENCY_SECTIONS` order, packages in the
        order given.
        """
        for section in DEPENDENCY_SECTIONS:
            deps: dict[str, Any] = self.dependencies(section)
            for package in packages:
                if package in deps:
                    return section, package, str(deps[package])
        return None

    def scripts(self) -> dict[str, str]:
        """Return a copy of the ``scripts`` object.

        Raises:
            ManifestWriteError: ``scripts`` exists but is not an object of strings.
        """
        value: Any = self.data.get("scripts", {})
        if not isinstance(value, dict):
            raise ManifestWriteError(self.path, "'scripts' is not an object")
        out: dict[str, str] = {}
        for key, command in value.items():
            if not isinstance(command, str):
                raise ManifestWriteError(self.path, f"script '{key}' is not a string")
            out[str(key)] = command
        return out

    def render(self) -> str:
        """Serialize the manifest the way it was formatted on disk."""
        text: str = json.dumps(self.data, indent=self.indent, ensure_ascii=False)
        if self.trailing_newline:
            text += "\n"
        return "\ufeff" + text if self.bom else text

    def write_scripts(self, scripts: dict[str, str], sink: WriteSink) -> None:
        """Replace the ``scripts`` object and write the manifest through ``sink``.

        Raises:
            ManifestWriteError: The file cannot be written.
        """
        self.data["scripts"] = scripts
        try:
            sink.write(self.path, self.render())
        except OSError as exc:
            raise ManifestWriteError(self.path, exc.strerror or str(exc)) from exc


def _detect_indent(text: str) -> str | int:
    """Return the indentation unit of a JSON document (2 spaces when unknown)."""
    m = _INDENT_RE.search(text)
    if m is None:
        return 2
    unit: str = m.group(1)
    if unit.startswith("\t"):
        return "\t"
    return len(unit)
