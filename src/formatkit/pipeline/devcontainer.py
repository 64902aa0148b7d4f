# topmark:header:start
#
#   project      : FormatKit
#   file         : devcontainer.py
#   file_relpath : src/formatkit/pipeline/devcontainer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dev container configuration for the configured formatters.

Plans ``.devcontainer/devcontainer.json`` so that editors running inside the
container have the formatters' VS Code extensions installed and format on save
with the same config files the ``package.json`` scripts use. Like formatter
configs, the file is skipped when a dev container config already exists,
unless ``force`` is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.formatters.base import ConfigFormat
from formatkit.pipeline.models import ConfigArtifact

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from formatkit.core.manifest import PackageManager
    from formatkit.formatters.base import FormatterDescriptor

logger: FormatkitLogger = get_logger(__name__)

DEVCONTAINER_ARTIFACT: Final[str] = "devcontainer"

# The Dev Containers tooling reads either location
DEVCONTAINER_FILES: Final[tuple[str, ...]] = (
    ".devcontainer/devcontainer.json",
    ".devcontainer.json",
)

NODE_IMAGE: Final[str] = "mcr.microsoft.com/devcontainers/javascript-node:1-20-bullseye"
BASE_IMAGE: Final[str] = "mcr.microsoft.com/devcontainers/base:bullseye"

BASE_EXTENSIONS: Final[tuple[str, ...]] = ("editorconfig.editorconfig",)


def devcontainer_image(formatters: Sequence[FormatterDescriptor]) -> str:
    """Return the base image able to run every formatter in ``formatters``."""
    if not formatters or any(fd.requires_node for fd in formatters):
        return NODE_IMAGE
    return BASE_IMAGE


def devcontainer_extensions(formatters: Sequence[FormatterDescriptor]) -> list[str]:
    """Return the recommended VS Code extensions, formatter extensions first."""
    out: list[str] = [fd.editor_extension for fd in formatters if fd.editor_extension]
    out.extend(ext for ext in BASE_EXTENSIONS if ext not in out)
    return out


def devcontainer_config(
    formatters: Sequence[FormatterDescriptor],
    package_manager: PackageManager,
) -> dict[str, Any]:
    """Build the ``devcontainer.json`` document."""
    image: str = devcontainer_image(formatters)
    settings: dict[str, Any] = {"editor.formatOnSave": True}
    # The first code formatter wins; linters do not become the default formatter
    for fd in formatters:
        if fd.format_command and fd.editor_extension:
            settings["editor.defaultFormatter"] = fd.editor_extension
            break

    config: dict[str, Any] = {
        "name": "Formatting",
        "image": image,
        "customizations": {
            "vscode": {
                "extensions": devcontainer_extensions(formatters),
                "settings": settings,
            }
        },
    }
    if image == NODE_IMAGE:
        config["postCreateCommand"] = package_manager.install_command
    return config


def find_existing_devcontainer(target_dir: Path) -> Path | None:
    """Return the existing dev container config of ``target_dir``, if any."""
    for name in DEVCONTAINER_FILES:
        candidate: Path = target_dir / name
        if candidate.exists():
            return candidate
    return None


def plan_devcontainer(
    formatters: Sequence[FormatterDescriptor],
    package_manager: PackageManager,
    target_dir: Path,
    *,
    force: bool = False,
) -> ConfigArtifact:
    """Plan the dev container config for the selected formatters."""
    content: str = ConfigFormat.JSON.serialize(devcontainer_config(formatters, package_manager))
    path: Path = target_dir / DEVCONTAINER_FILES[0]
    existing: Path | None = find_existing_devcontainer(target_dir)
    if existing is not None and not force:
        logger.info("Skipping dev container config: %s already exists", existing)
    return ConfigArtifact(
        formatter=DEVCONTAINER_ARTIFACT,
        path=path,
        content=content,
        skipped=existing is not None and not force,
        existing_path=existing,
    )
