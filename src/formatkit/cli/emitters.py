# topmark:header:start
#
#   project      : FormatKit
#   file         : emitters.py
#   file_relpath : src/formatkit/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable emitters for the ``detect`` and ``setup`` commands.

These helpers only print; data shaping lives in the pipeline records
(`DetectionResult`, `SetupResult`) and machine output is produced from their
``to_dict()`` methods by the commands themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formatkit.pipeline.models import DetectionStatus, SetupStatus
from formatkit.registry import FormatterRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from formatkit.cli.console import ConsoleLike
    from formatkit.core.diagnostics import Diagnostic
    from formatkit.pipeline.models import DetectionResult, SetupResult

_STATUS_MARK: dict[DetectionStatus, str] = {
    DetectionStatus.AVAILABLE: "✓",
    DetectionStatus.UNVERIFIED: "?",
    DetectionStatus.MISSING: "✗",
}


def emit_diagnostics(
    console: ConsoleLike,
    diagnostics: Iterable[Diagnostic],
    *,
    color: bool,
) -> None:
    """Print one line per diagnostic, colored by severity."""
    for diag in diagnostics:
        text: str = f"[{diag.level.value}] {diag.message}"
        console.print("  " + (diag.level.color(text) if color else text))


def emit_detection(
    console: ConsoleLike,
    detection: DetectionResult,
    *,
    verbosity: int,
    color: bool,
) -> None:
    """Print a detection summary, with install hints for missing formatters."""
    console.print(console.styled("Formatter detection", bold=True, underline=True))
    console.print(f"  Project:         {detection.target_dir}")
    console.print(f"  Package manager: {detection.package_manager.value}")
    console.print()

    for record in detection.formatters:
        mark: str = _STATUS_MARK[record.status]
        fg: str = "green" if record.available else "bright_black"
        line: str = f"  {mark} {record.name:<10} {record.status.value}"
        if record.package:
            line += f"  ({record.package}@{record.version} in {record.section})"
        console.print(console.styled(line, fg=fg))
        if verbosity > 0 and record.config_files:
            console.print(f"      config: {', '.join(record.config_files)}")

    if detection.warnings:
        console.print()
        emit_diagnostics(console, detection.warnings, color=color)

    if detection.missing:
        console.print()
        console.print(console.styled("Install hints:", bold=True))
        for name in detection.missing:
            descriptor = FormatterRegistry.get(name)
            if descriptor is None:
                continue
            hint: str = (
                f"{detection.package_manager.add_dev_prefix} {descriptor.install_hint_package}"
            )
            console.print(f"  {name:<10} {console.styled(hint, fg='cyan')}")


def emit_setup(
    console: ConsoleLike,
    result: SetupResult,
    *,
    verbosity: int,
    color: bool,
) -> None:
    """Print a per-stage summary of a setup run."""
    title: str = "Formatter setup (dry run)" if result.dry_run else "Formatter setup"
    console.print(console.styled(title, bold=True, underline=True))

    if result.detection is not None:
        available: str = ", ".join(result.detection.available) or "none"
        console.print(f"  Detected:   {available}")
    if result.formatters:
        console.print(f"  Configured: {', '.join(result.formatters)}")
    if result.style is not None and verbosity > 0:
        console.print("  Style:")
        for key, value in result.style.to_dict().items():
            console.print(f"    {key:<16} {value}")

    if result.artifacts:
        console.print()
        console.print(console.styled("Config files:", bold=True))
        for artifact in result.artifacts:
            if artifact.skipped:
                state: str = console.styled(
                    f"skipped (found {artifact.existing_path})", fg="yellow"
                )
            elif artifact.written:
                state = console.styled("written", fg="green")
            else:
                state = console.styled("would write", fg="cyan")
            console.print(f"  {artifact.path}: {state}")
            if verbosity > 0 and result.dry_run and not artifact.skipped:
                for line in artifact.content.rstrip("\n").splitlines():
                    console.print(console.styled(f"    | {line}", dim=True))

    if result.scripts:
        console.print()
        console.print(console.styled("Scripts:", bold=True))
        for key, command in result.scripts.items():
            added: bool = key in result.updated_scripts
            marker: str = "+" if added else " "
            line: str = f"  {marker} {key}: {command}"
            console.print(console.styled(line, fg="green") if added else line)

    if result.warnings:
        console.print()
        console.print(console.styled("Warnings:", bold=True))
        emit_diagnostics(console, result.warnings, color=color)

    console.print()
    if result.status is SetupStatus.SUCCESS:
        console.print(console.styled("Setup complete.", fg="green", bold=True))
    elif result.status is SetupStatus.SUCCESS_WITH_WARNINGS:
        console.print(console.styled("Setup complete with warnings.", fg="yellow", bold=True))
    else:
        console.print(console.styled("Setup stopped.", fg="red", bold=True))
