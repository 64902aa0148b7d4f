# topmark:header:start
#
#   project      : FormatKit
#   file         : orchestrator.py
#   file_relpath : src/formatkit/pipeline/orchestrator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Setup orchestration.

Runs the pipeline stages strictly in sequence:

1. load ``package.json`` and detect formatters;
2. resolve the preset and style overrides;
3. select formatters, plan their config files (plus the dev container config
   when requested) and write them;
4. plan scripts and merge them into ``package.json``.

Terminal states are ``success``, ``success-with-warnings`` and ``fatal``.
A fatal domain error stops the run and yields the partial result accumulated so
far; stages already committed are not rolled back. A dry run executes every
stage through a `NullSink`, so nothing on disk changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.core.diagnostics import DiagnosticKind
from formatkit.core.errors import FormatkitError
from formatkit.core.manifest import PackageManifest
from formatkit.pipeline.context import SetupContext
from formatkit.pipeline.detector import detect_formatters
from formatkit.pipeline.devcontainer import plan_devcontainer
from formatkit.pipeline.generator import plan_artifacts, write_artifacts
from formatkit.pipeline.scripts import merge_scripts, plan_scripts
from formatkit.pipeline.writer import select_sink
from formatkit.presets.resolver import resolve_preset_config
from formatkit.registry.formatters import FormatterRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping

    from formatkit.config.model import SetupOptions
    from formatkit.formatters.base import FormatterDescriptor
    from formatkit.pipeline.models import DetectionResult, SetupResult
    from formatkit.pipeline.scripts import ScriptMergeResult
    from formatkit.pipeline.writer import WriteSink
    from formatkit.presets.model import ResolvedPreset

logger: FormatkitLogger = get_logger(__name__)


def select_formatters(
    ctx: SetupContext,
    catalog: Mapping[str, FormatterDescriptor],
    detection: DetectionResult,
) -> list[FormatterDescriptor]:
    """Pick the formatters to configure, in registry order.

    Without an explicit request every available formatter is selected.
    Requested names that are unknown or not detected are dropped with a
    ``formatter-unavailable`` warning.
    """
    requested: tuple[str, ...] = ctx.options.formatters
    if not requested:
        return [catalog[name] for name in detection.available]

    wanted: set[str] = set()
    for name in requested:
        if name not in catalog:
            ctx.diagnostics.add_warning(
                DiagnosticKind.FORMATTER_UNAVAILABLE,
                f"Unknown formatter '{name}' (known: {', '.join(catalog)})",
            )
        elif name not in detection.available:
            ctx.diagnostics.add_warning(
                DiagnosticKind.FORMATTER_UNAVAILABLE,
                f"Formatter '{name}' was requested but is not installed in this project",
            )
        else:
            wanted.add(name)
    return [fd for name, fd in catalog.items() if name in wanted]


def _run(ctx: SetupContext, sink: WriteSink) -> None:
    options: SetupOptions = ctx.options
    target_dir = options.target_dir
    catalog: Mapping[str, FormatterDescriptor] = FormatterRegistry.as_mapping()

    # Stage 1: manifest + detection
    ctx.manifest = PackageManifest.load(target_dir)
    ctx.detection = detect_formatters(target_dir, manifest=ctx.manifest, formatters=catalog)
    ctx.diagnostics.extend(ctx.detection.warnings)

    # Stage 2: preset
    preset: ResolvedPreset = resolve_preset_config(
        options.preset, options.style, base_dir=target_dir
    )
    ctx.style = preset.style
    for tool in preset.raw:
        if tool not in catalog:
            ctx.diagnostics.add_warning(
                DiagnosticKind.FORMATTER_UNAVAILABLE,
                f"Preset has raw settings for unknown formatter '{tool}'; ignored",
            )

    # Stage 3: config files
    ctx.formatters = select_formatters(ctx, catalog, ctx.detection)
    if not ctx.formatters:
        ctx.diagnostics.add_warning(
            DiagnosticKind.NO_FORMATTERS, "No formatters selected; nothing to configure"
        )
        return
    logger.info("Configuring formatters: %s", ", ".join(fd.name for fd in ctx.formatters))

    planned = plan_artifacts(
        ctx.formatters, ctx.style, target_dir, force=options.force, raw=preset.raw
    )
    if options.devcontainer:
        planned.append(
            plan_devcontainer(
                ctx.formatters,
                ctx.detection.package_manager,
                target_dir,
                force=options.force,
            )
        )
    for artifact in planned:
        if artifact.skipped:
            ctx.diagnostics.add_warning(
                DiagnosticKind.CONFIG_EXISTS,
                f"{artifact.formatter}: {artifact.existing_path} already exists; "
                "not overwritten (use --force to replace it)",
            )
    # Committed one by one: a write failure keeps the artifacts written before it
    for artifact in planned:
        ctx.artifacts.extend(write_artifacts([artifact], sink))

    # Stage 4: scripts
    if not options.update_scripts:
        logger.info("Script update disabled")
        return
    ctx.scripts = plan_scripts(ctx.formatters, ctx.detection.package_manager)
    merge: ScriptMergeResult = merge_scripts(
        ctx.manifest.scripts(), ctx.scripts, diagnostics=ctx.diagnostics
    )
    if merge.changed:
        ctx.manifest.write_scripts(merge.scripts, sink)
    ctx.updated_scripts.extend(merge.added)


def run_setup(options: SetupOptions) -> SetupResult:
    """Run the setup pipeline.

    Domain failures never raise: they end the run with status ``fatal`` and an
    error diagnostic on the returned partial result.

    Args:
        options (SetupOptions): Run options.

    Returns:
        SetupResult: The run report.
    """
    ctx = SetupContext(options=options)
    ctx.diagnostics.extend(options.diagnostics)
    sink: WriteSink = select_sink(dry_run=options.dry_run)
    logger.debug("Running setup in %s (dry_run=%s)", options.target_dir, options.dry_run)
    try:
        _run(ctx, sink)
    except FormatkitError as exc:
        logger.error("%s", exc.message)
        ctx.fail(exc)
    result: SetupResult = ctx.freeze()
    logger.debug("Setup finished with status %s", result.status.value)
    return result
