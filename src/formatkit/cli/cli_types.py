# topmark:header:start
#
#   project      : FormatKit
#   file         : cli_types.py
#   file_relpath : src/formatkit/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for the FormatKit CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Iterable, NoReturn, Protocol, TypeVar, cast

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string (case-insensitive) to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_FORMATKIT_COMPLETE=bash_source formatkit)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [
            RuntimeCompletionItem(str(getattr(e, "value", e)))
            for e in cast("Iterable[E]", self.enum_cls)
            if str(getattr(e, "value", e)).lower().startswith(prefix)
        ]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class KeyValueParam(ParamTypeBase):
    """Parse ``KEY=VALUE`` option values into ``(key, value)`` tuples.

    Used by ``--style`` so that style overrides can be given one per flag, e.g.
    ``--style lineWidth=100 --style quote_style=double``.
    """

    name = "key=value"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> tuple[str, str]:
        """Split ``value`` on the first ``=``."""
        if isinstance(value, tuple):
            return cast("tuple[str, str]", value)
        text: str = str(value)
        key, sep, raw = text.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(
                f"Expected KEY=VALUE, got '{text}'", param=param, ctx=ctx
            )
        return key.strip(), raw.strip()
