# topmark:header:start
#
#   project      : FormatKit
#   file         : merge.py
#   file_relpath : src/formatkit/utils/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive merging of JSON-like documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from collections.abc import Mapping


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged on top of it.

    Mappings are merged key by key; any other value in ``override`` (lists
    included) replaces the value in ``base``. ``None`` values in ``override``
    are skipped. Neither input is modified.

    Args:
        base (Mapping[str, Any]): Document to start from.
        override (Mapping[str, Any]): Document whose values win.

    Returns:
        dict[str, Any]: The merged document.
    """
    out: dict[str, Any] = dict(base)
    for key, value in override.items():
        if value is None:
            continue
        if isinstance(value, dict):
            current: Any = out.get(key)
            nested: Mapping[str, Any] = (
                cast("Mapping[str, Any]", current) if isinstance(current, dict) else {}
            )
            out[key] = deep_merge(nested, cast("Mapping[str, Any]", value))
        else:
            out[key] = value
    return out
