# topmark:header:start
#
#   project      : FormatKit
#   file         : instances.py
#   file_relpath : src/formatkit/formatters/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter instances.

Builds the runtime catalog of `FormatterDescriptor` objects from the built-in
modules and from plugin entry points. The catalog is constructed lazily on
first access and cached thereafter.

Notes:
    * Declaration order is significant: aggregate scripts and reports follow it.
      Built-ins come first (in `_BUILTIN_MODULES` order), then plugins.
    * Plugins are discovered via the ``formatkit.formatters`` entry point group;
      an entry point may expose a descriptor, an iterable of descriptors, or a
      callable returning either.
    * The returned mapping should be treated as immutable. Overlay mutations go
      through `formatkit.registry.formatters.FormatterRegistry`.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from importlib import import_module
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any, Final, cast

from formatkit.config.logging import FormatkitLogger, get_logger
from formatkit.constants import FORMATTER_ENTRYPOINT_GROUP
from formatkit.formatters.base import FormatterDescriptor

if TYPE_CHECKING:
    from importlib.metadata import EntryPoints
    from types import ModuleType

logger: FormatkitLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "formatkit.formatters.builtins.prettier",
    "formatkit.formatters.builtins.biome",
    "formatkit.formatters.builtins.eslint",
    "formatkit.formatters.builtins.remark",
)


def _iter_builtin_formatters() -> Iterable[FormatterDescriptor]:
    """Yield built-in descriptors from the per-tool modules (lazy import)."""
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        formatters: Any = getattr(mod, "FORMATTERS", None)
        if not isinstance(formatters, list):
            logger.warning("Module %s has no FORMATTERS list; skipping", modname)
            continue
        for obj in cast("list[object]", formatters):
            if isinstance(obj, FormatterDescriptor):
                yield obj
            else:
                logger.warning("Non-FormatterDescriptor entry in %s.FORMATTERS: %r", modname, obj)


def _iter_plugin_formatters() -> Iterable[FormatterDescriptor]:
    """Yield descriptors provided by external plugins (entry points)."""
    candidates: EntryPoints = entry_points().select(group=FORMATTER_ENTRYPOINT_GROUP)

    for ep in candidates:
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
        except Exception:
            # Plugin failures are logged and skipped
            logger.exception("Failed loading formatters from entry point %s", ep.name)
            continue
        if isinstance(provided, FormatterDescriptor):
            yield provided
            continue
        if not isinstance(provided, Iterable):
            logger.warning(
                "Entry point %s did not return FormatterDescriptor objects: %r",
                ep.name,
                provided,
            )
            continue
        for obj in cast("Iterable[object]", provided):
            if isinstance(obj, FormatterDescriptor):
                yield obj
            else:
                logger.warning("Entry point %s provided non-FormatterDescriptor: %r", ep.name, obj)


def _dedupe_by_name(items: Iterable[FormatterDescriptor]) -> list[FormatterDescriptor]:
    """Deduplicate by name, preserving first occurrence order."""
    seen: set[str] = set()
    acc: list[FormatterDescriptor] = []
    for fd in items:
        if fd.name in seen:
            logger.warning("Duplicate formatter name detected: %s (keeping first)", fd.name)
            continue
        seen.add(fd.name)
        acc.append(fd)
    return acc


@lru_cache(maxsize=1)
def get_formatter_catalog() -> dict[str, FormatterDescriptor]:
    """Return (and cache) the base formatter catalog in declaration order."""
    ordered: list[FormatterDescriptor] = list(_iter_builtin_formatters())
    ordered.extend(_iter_plugin_formatters())
    catalog: dict[str, FormatterDescriptor] = {fd.name: fd for fd in _dedupe_by_name(ordered)}
    logger.debug("Loaded %d formatters: %s", len(catalog), ", ".join(catalog))
    return catalog
