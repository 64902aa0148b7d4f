# topmark:header:start
#
#   project      : FormatKit
#   file         : detector.py
#   file_relpath : src/formatkit/pipeline/detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter detection.

Classifies every registered formatter for a project directory:

* **available**: one of its packages is declared in ``dependencies`` or
  ``devDependencies``;
* **unverified**: no package is declared, but one of its config files exists
  (the tool may be installed globally). Still counted as available;
* **missing**: neither.

Available formatters sharing an exclusive role (e.g. two linters) are all kept
as available, reported as conflicting, and a ``formatter-conflict`` warning is
attached. Detection has no side effects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.core.diagnostics import DiagnosticKind, DiagnosticLog
from formatkit.core.manifest import PackageManifest, detect_package_manager
from formatkit.pipeline.models import DetectionResult, DetectionStatus, FormatterDetection
from formatkit.registry.formatters import FormatterRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from formatkit.core.manifest import PackageManager
    from formatkit.formatters.base import FormatterDescriptor

logger: FormatkitLogger = get_logger(__name__)


def _detect_one(
    fd: FormatterDescriptor,
    manifest: PackageManifest,
    target_dir: Path,
) -> FormatterDetection:
    found: tuple[str, ...] = tuple(
        name for name in fd.config_files if (target_dir / name).is_file()
    )
    match: tuple[str, str, str] | None = manifest.find_dependency(fd.packages)
    if match is not None:
        section, package, version = match
        return FormatterDetection(
            name=fd.name,
            status=DetectionStatus.AVAILABLE,
            section=section,
            package=package,
            version=version,
            config_files=found,
        )
    if found:
        return FormatterDetection(
            name=fd.name, status=DetectionStatus.UNVERIFIED, config_files=found
        )
    return FormatterDetection(name=fd.name, status=DetectionStatus.MISSING)


def detect_formatters(
    target_dir: Path,
    *,
    manifest: PackageManifest | None = None,
    formatters: Mapping[str, FormatterDescriptor] | None = None,
) -> DetectionResult:
    """Detect which registered formatters a project uses.

    Args:
        target_dir (Path): Project directory.
        manifest (PackageManifest | None): Already loaded manifest; loaded from
            ``target_dir`` when None.
        formatters (Mapping[str, FormatterDescriptor] | None): Catalog to check
            (defaults to the composed `FormatterRegistry`).

    Returns:
        DetectionResult: Classification of every formatter, in registry order.

    Raises:
        MissingManifestError: ``package.json`` does not exist.
        InvalidManifestError: ``package.json`` cannot be parsed.
    """
    if manifest is None:
        manifest = PackageManifest.load(target_dir)
    catalog: Mapping[str, FormatterDescriptor] = (
        formatters if formatters is not None else FormatterRegistry.as_mapping()
    )
    package_manager: PackageManager = detect_package_manager(target_dir)
    diags = DiagnosticLog()

    records: list[FormatterDetection] = []
    for fd in catalog.values():
        record: FormatterDetection = _detect_one(fd, manifest, target_dir)
        logger.debug("Formatter %s: %s", fd.name, record.status.value)
        if record.status is DetectionStatus.UNVERIFIED:
            diags.add_warning(
                DiagnosticKind.UNVERIFIED_FORMATTER,
                f"{fd.name}: found {', '.join(record.config_files)} but no "
                f"{' / '.join(fd.packages)} package in package.json",
            )
        records.append(record)

    available: list[str] = [r.name for r in records if r.available]

    by_role: dict[str, list[str]] = {}
    for name in available:
        for role in sorted(catalog[name].exclusive_roles):
            by_role.setdefault(role, []).append(name)
    conflicting: set[str] = set()
    for role, names in by_role.items():
        if len(names) > 1:
            conflicting.update(names)
            diags.add_warning(
                DiagnosticKind.FORMATTER_CONFLICT,
                f"Formatters {' and '.join(names)} are all configured for {role}; "
                "consider keeping only one",
            )

    return DetectionResult(
        target_dir=target_dir,
        package_manager=package_manager,
        formatters=tuple(records),
        available=tuple(available),
        missing=tuple(r.name for r in records if not r.available),
        conflicting=tuple(n for n in available if n in conflicting),
        warnings=tuple(diags.items),
    )
