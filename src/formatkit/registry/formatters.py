# topmark:header:start
#
#   project      : FormatKit
#   file         : formatters.py
#   file_relpath : src/formatkit/registry/formatters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public formatter registry.

Exposes read-only views of the registered formatters and process-local
mutation helpers for plugins and tests.

Notes:
    * All views are derived from a **composed** registry (built-ins + entry
      points + local overlays − removals) and keep declaration order; overlays
      registered at runtime come last.
    * `register()` / `unregister()` perform overlay-only changes. They never
      mutate the cached base catalog built by `formatkit.formatters.instances`.
      Overlays are process-local and guarded by an `RLock`.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from formatkit.formatters.instances import get_formatter_catalog

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from formatkit.formatters.base import FormatterDescriptor


@dataclass(frozen=True)
class FormatterInfo:
    """Stable, serializable metadata about a registered formatter."""

    name: str
    description: str
    packages: tuple[str, ...]
    config_files: tuple[str, ...]
    config_format: str
    exclusive_roles: tuple[str, ...]
    scripts: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "name": self.name,
            "description": self.description,
            "packages": list(self.packages),
            "config_files": list(self.config_files),
            "config_format": self.config_format,
            "exclusive_roles": list(self.exclusive_roles),
            "scripts": list(self.scripts),
        }


class FormatterRegistry:
    """Read-only oriented view of the formatter catalog with overlay hooks."""

    _lock: ClassVar[RLock] = RLock()

    _overrides: ClassVar[dict[str, FormatterDescriptor]] = {}
    _removals: ClassVar[set[str]] = set()

    @classmethod
    def _compose(cls) -> dict[str, FormatterDescriptor]:
        base: dict[str, FormatterDescriptor] = dict(get_formatter_catalog())
        base.update(cls._overrides)
        for name in cls._removals:
            base.pop(name, None)
        return base

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return registered formatter names in declaration order."""
        with cls._lock:
            return tuple(cls._compose())

    @classmethod
    def get(cls, name: str) -> FormatterDescriptor | None:
        """Return a descriptor by name, or None if not registered."""
        with cls._lock:
            return cls._compose().get(name)

    @classmethod
    def as_mapping(cls) -> Mapping[str, FormatterDescriptor]:
        """Return a read-only name -> descriptor mapping in declaration order."""
        with cls._lock:
            return MappingProxyType(cls._compose())

    @classmethod
    def iter_info(cls) -> Iterator[FormatterInfo]:
        """Iterate over stable metadata for the registered formatters.

        Yields:
            FormatterInfo: Serializable metadata about each formatter.
        """
        with cls._lock:
            composed: dict[str, FormatterDescriptor] = cls._compose()
        for name, fd in composed.items():
            yield FormatterInfo(
                name=name,
                description=fd.description,
                packages=fd.packages,
                config_files=fd.config_files,
                config_format=fd.config_format.value,
                exclusive_roles=tuple(sorted(fd.exclusive_roles)),
                scripts=tuple(fd.scripts()),
            )

    @classmethod
    def register(cls, descriptor: FormatterDescriptor) -> None:
        """Register an additional formatter.

        Args:
            descriptor (FormatterDescriptor): Descriptor with a unique name.

        Raises:
            ValueError: If the name is already registered.

        Notes:
            This mutates process-global state. In tests, pair it with
            `unregister()` in a ``try/finally`` block or a fixture.
        """
        with cls._lock:
            if descriptor.name in cls._compose():
                raise ValueError(f"Duplicate formatter name: {descriptor.name}")
            cls._removals.discard(descriptor.name)
            cls._overrides[descriptor.name] = descriptor

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Remove a formatter from the composed view.

        Returns:
            bool: True if a formatter was removed, False if the name was unknown.
        """
        with cls._lock:
            if name not in cls._compose():
                return False
            if cls._overrides.pop(name, None) is None:
                cls._removals.add(name)
            return True

    @classmethod
    def reset(cls) -> None:
        """Drop every overlay registration and removal."""
        with cls._lock:
            cls._overrides.clear()
            cls._removals.clear()
