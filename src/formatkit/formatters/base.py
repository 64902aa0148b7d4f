# topmark:header:start
#
#   project      : FormatKit
#   file         : base.py
#   file_relpath : src/formatkit/formatters/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter descriptors.

A `FormatterDescriptor` is the immutable identity of one external tool FormatKit
can configure: which packages reveal it in ``package.json``, which config files
it owns, which ``package.json`` scripts it contributes, and a pure *template*
function mapping a resolved `StyleDescriptor` onto the tool's native config
document.

Adding a formatter means declaring one descriptor plus one template; detection,
generation and script merging only ever go through this interface.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

import yaml

from formatkit.core.errors import TemplateContractError
from formatkit.utils.merge import deep_merge

if TYPE_CHECKING:
    from collections.abc import Mapping

    from formatkit.presets.model import StyleDescriptor

K = TypeVar("K")
V = TypeVar("V")


class ConfigFormat(str, Enum):
    """Serialization used for a generated configuration file."""

    JSON = "json"
    YAML = "yaml"

    def serialize(self, document: Mapping[str, Any]) -> str:
        """Serialize a config document; output always ends with a newline."""
        if self is ConfigFormat.JSON:
            return json.dumps(document, indent=2) + "\n"
        return yaml.dump(dict(document), default_flow_style=False, sort_keys=False)


@runtime_checkable
class ConfigTemplate(Protocol):
    """Pure mapping from a resolved style to a tool-native config document."""

    def __call__(self, style: StyleDescriptor) -> dict[str, Any]:
        """Return the config document for ``style``.

        Raises:
            TemplateContractError: ``style`` holds a value the template cannot translate.
        """
        ...


def translate(formatter: str, field_name: str, table: Mapping[K, V], value: K) -> V:
    """Look ``value`` up in a template's translation table.

    Args:
        formatter (str): Name of the formatter whose template is translating.
        field_name (str): StyleDescriptor field being translated.
        table (Mapping[K, V]): The template's own translation table.
        value (K): The style value.

    Returns:
        V: The tool-native value.

    Raises:
        TemplateContractError: ``value`` is not in ``table``.
    """
    try:
        return table[value]
    except KeyError:
        raise TemplateContractError(formatter, field_name, value) from None


@dataclass(frozen=True)
class FormatterDescriptor:
    """Identity of one supported formatting or linting tool.

    Attributes:
        name (str): Registry name, also used in script keys (``format:<name>``).
        packages (tuple[str, ...]): Package names whose presence in ``dependencies`` or
            ``devDependencies`` signals the tool is installed.
        config_files (tuple[str, ...]): Config filenames the tool reads. The first one is the
            file FormatKit writes.
        template (ConfigTemplate): Style to config document mapping.
        config_format (ConfigFormat): Serialization of the written file.
        description (str): Human-readable description.
        install_package (str): Package suggested in install hints (first package if empty).
        exclusive_roles (frozenset[str]): Responsibilities (e.g. ``"lint"``) only one tool
            should own. Two available tools sharing a role are reported as conflicting.
        format_command (str | None): Command behind ``format:<name>``.
        check_command (str | None): Command behind ``format:<name>:check``.
        lint_command (str | None): Command behind ``lint:<name>``.
        lint_fix_command (str | None): Command behind ``lint:<name>:fix``.
        editor_extension (str | None): VS Code extension id of the tool, recommended in the
            generated dev container.
        requires_node (bool): Whether the tool needs a Node.js runtime (false for tools
            shipped as standalone binaries).
    """

    name: str
    packages: tuple[str, ...]
    config_files: tuple[str, ...]
    template: ConfigTemplate
    config_format: ConfigFormat = ConfigFormat.JSON
    description: str = ""
    install_package: str = ""
    exclusive_roles: frozenset[str] = field(default_factory=frozenset)
    format_command: str | None = None
    check_command: str | None = None
    lint_command: str | None = None
    lint_fix_command: str | None = None
    editor_extension: str | None = None
    requires_node: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("FormatterDescriptor.name is required.")
        if not self.config_files:
            raise ValueError(f"Formatter '{self.name}' must declare at least one config file.")

    @property
    def primary_config(self) -> str:
        """Config filename FormatKit writes for this tool."""
        return self.config_files[0]

    @property
    def install_hint_package(self) -> str:
        """Package to suggest when the tool is missing."""
        return self.install_package or (self.packages[0] if self.packages else self.name)

    @property
    def format_script(self) -> str | None:
        """Key of the tool's format script, if it formats code."""
        return f"format:{self.name}" if self.format_command else None

    @property
    def check_script(self) -> str | None:
        """Key of the tool's check script, if it has a check mode."""
        return f"format:{self.name}:check" if self.check_command else None

    def scripts(self) -> dict[str, str]:
        """Return the canonical script entries owned by this tool, in a stable order."""
        out: dict[str, str] = {}
        if self.format_command:
            out[f"format:{self.name}"] = self.format_command
        if self.check_command:
            out[f"format:{self.name}:check"] = self.check_command
        if self.lint_command:
            out[f"lint:{self.name}"] = self.lint_command
        if self.lint_fix_command:
            out[f"lint:{self.name}:fix"] = self.lint_fix_command
        return out

    def render(self, style: StyleDescriptor, raw: Mapping[str, Any] | None = None) -> str:
        """Apply the template to ``style`` and serialize the result.

        ``raw`` settings, when given, are deep-merged over the template output
        and win over it.
        """
        document: dict[str, Any] = self.template(style)
        if raw:
            document = deep_merge(document, raw)
        return self.config_format.serialize(document)
