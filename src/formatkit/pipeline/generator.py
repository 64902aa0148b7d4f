# topmark:header:start
#
#   project      : FormatKit
#   file         : generator.py
#   file_relpath : src/formatkit/pipeline/generator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Config generation.

Maps the resolved style onto each selected formatter's native config document
and plans one `ConfigArtifact` per formatter. An artifact is skipped when any
config file the formatter owns already exists, unless ``force`` is set.
`write_artifacts` then commits the plan through a `WriteSink`.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.core.errors import ConfigWriteError
from formatkit.pipeline.models import ConfigArtifact
from formatkit.pipeline.writer import WriteStatus

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from pathlib import Path

    from formatkit.formatters.base import FormatterDescriptor
    from formatkit.pipeline.writer import WriteResult, WriteSink
    from formatkit.presets.model import StyleDescriptor

logger: FormatkitLogger = get_logger(__name__)


def find_existing_config(fd: FormatterDescriptor, target_dir: Path) -> Path | None:
    """Return the first existing config file owned by ``fd``, if any."""
    for name in fd.config_files:
        candidate: Path = target_dir / name
        if candidate.exists():
            return candidate
    return None


def plan_artifact(
    fd: FormatterDescriptor,
    style: StyleDescriptor,
    target_dir: Path,
    *,
    force: bool = False,
    raw: Mapping[str, Any] | None = None,
) -> ConfigArtifact:
    """Plan the config file of one formatter.

    ``raw`` holds tool-specific settings merged over the generated document.

    Raises:
        TemplateContractError: The template cannot translate a value of ``style``.
    """
    content: str = fd.render(style, raw)
    path: Path = target_dir / fd.primary_config
    existing: Path | None = find_existing_config(fd, target_dir)
    if existing is not None and not force:
        logger.info("Skipping %s: %s already exists", fd.name, existing)
        return ConfigArtifact(
            formatter=fd.name,
            path=path,
            content=content,
            skipped=True,
            existing_path=existing,
        )
    return ConfigArtifact(formatter=fd.name, path=path, content=content, existing_path=existing)


def plan_artifacts(
    formatters: Sequence[FormatterDescriptor],
    style: StyleDescriptor,
    target_dir: Path,
    *,
    force: bool = False,
    raw: Mapping[str, Mapping[str, Any]] | None = None,
) -> list[ConfigArtifact]:
    """Plan the config files of all ``formatters``, in the order given.

    ``raw`` maps formatter names to the settings passed to `plan_artifact`.
    """
    return [
        plan_artifact(fd, style, target_dir, force=force, raw=(raw or {}).get(fd.name))
        for fd in formatters
    ]


def write_artifacts(artifacts: Iterable[ConfigArtifact], sink: WriteSink) -> list[ConfigArtifact]:
    """Commit non-skipped artifacts through ``sink``.

    Returns:
        list[ConfigArtifact]: The artifacts, with ``written`` set for each file
            actually written to disk.

    Raises:
        ConfigWriteError: A file could not be written. Files written before the
            failure are kept.
    """
    out: list[ConfigArtifact] = []
    for artifact in artifacts:
        if artifact.skipped:
            out.append(artifact)
            continue
        try:
            result: WriteResult = sink.write(artifact.path, artifact.content)
        except OSError as exc:
            raise ConfigWriteError(artifact.path, exc.strerror or str(exc)) from exc
        out.append(replace(artifact, written=result.status is WriteStatus.WRITTEN))
    return out
