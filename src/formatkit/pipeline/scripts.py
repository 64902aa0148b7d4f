# topmark:header:start
#
#   project      : FormatKit
#   file         : scripts.py
#   file_relpath : src/formatkit/pipeline/scripts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Script merging for ``package.json``.

Each selected formatter contributes its canonical scripts (``format:<name>``,
``format:<name>:check``, ``lint:<name>``, ``lint:<name>:fix`` where the tool
has them). Two aggregates are added on top: ``format`` and ``format:check``
run every formatter's format (or check) script through the project's package
manager, in registry order.

Merging never touches a script FormatKit did not generate: a key that is absent
is added, a key holding exactly the command FormatKit would generate is left as
is, and a key holding anything else is left untouched and reported as a
``script-conflict``. A script generated under a different preset in the past
therefore counts as user-modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.constants import SCRIPT_SEQUENCE_OPERATOR
from formatkit.core.diagnostics import DiagnosticKind

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from formatkit.core.diagnostics import DiagnosticLog
    from formatkit.core.manifest import PackageManager
    from formatkit.formatters.base import FormatterDescriptor

logger: FormatkitLogger = get_logger(__name__)

FORMAT_SCRIPT: str = "format"
FORMAT_CHECK_SCRIPT: str = "format:check"


@dataclass(frozen=True)
class ScriptMergeResult:
    """Outcome of merging planned scripts into an existing ``scripts`` object.

    Attributes:
        scripts (dict[str, str]): The merged ``scripts`` object (existing keys keep their
            position; added keys follow in planned order).
        planned (dict[str, str]): Every script FormatKit wanted to own.
        added (tuple[str, ...]): Keys that were absent and have been added.
        unchanged (tuple[str, ...]): Keys already holding the planned command.
        conflicts (tuple[str, ...]): Keys holding a different command, left untouched.
    """

    scripts: dict[str, str]
    planned: dict[str, str]
    added: tuple[str, ...] = ()
    unchanged: tuple[str, ...] = ()
    conflicts: tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        """True when the merged object differs from the existing one."""
        return bool(self.added)


def plan_scripts(
    formatters: Sequence[FormatterDescriptor],
    package_manager: PackageManager,
) -> dict[str, str]:
    """Compute the scripts owned by ``formatters``, including the aggregates.

    Args:
        formatters (Sequence[FormatterDescriptor]): Selected formatters, in registry order.
        package_manager (PackageManager): Determines how aggregates invoke per-tool scripts.

    Returns:
        dict[str, str]: Script key to command, in a deterministic order.
    """
    planned: dict[str, str] = {}
    format_steps: list[str] = []
    check_steps: list[str] = []
    for fd in formatters:
        planned.update(fd.scripts())
        if fd.format_script:
            format_steps.append(f"{package_manager.run_prefix} {fd.format_script}")
        if fd.check_script:
            check_steps.append(f"{package_manager.run_prefix} {fd.check_script}")

    if format_steps:
        planned[FORMAT_SCRIPT] = SCRIPT_SEQUENCE_OPERATOR.join(format_steps)
    if check_steps:
        planned[FORMAT_CHECK_SCRIPT] = SCRIPT_SEQUENCE_OPERATOR.join(check_steps)
    return planned


def merge_scripts(
    existing: Mapping[str, str],
    planned: Mapping[str, str],
    *,
    diagnostics: DiagnosticLog | None = None,
) -> ScriptMergeResult:
    """Merge ``planned`` into ``existing`` without overwriting foreign scripts.

    Args:
        existing (Mapping[str, str]): Current ``scripts`` object.
        planned (Mapping[str, str]): Output of `plan_scripts`.
        diagnostics (DiagnosticLog | None): Receives one ``script-conflict`` warning
            per conflicting key.

    Returns:
        ScriptMergeResult: Merged object and per-key classification.
    """
    merged: dict[str, str] = dict(existing)
    added: list[str] = []
    unchanged: list[str] = []
    conflicts: list[str] = []

    for key, command in planned.items():
        current: str | None = existing.get(key)
        if current is None:
            merged[key] = command
            added.append(key)
        elif current == command:
            unchanged.append(key)
        else:
            conflicts.append(key)
            logger.info("Script %r differs from generated command; leaving it untouched", key)
            if diagnostics is not None:
                diagnostics.add_warning(
                    DiagnosticKind.SCRIPT_CONFLICT,
                    f"Script '{key}' already exists with a different command "
                    f"({current!r}); expected {command!r}. Left untouched.",
                )

    return ScriptMergeResult(
        scripts=merged,
        planned=dict(planned),
        added=tuple(added),
        unchanged=tuple(unchanged),
        conflicts=tuple(conflicts),
    )
