# topmark:header:start
#
#   project      : FormatKit
#   file         : test_diagnostics.py
#   file_relpath : tests/core/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `formatkit.core.diagnostics`."""

from __future__ import annotations

from formatkit.core.diagnostics import (
    DiagnosticKind,
    DiagnosticLevel,
    DiagnosticLog,
    filter_kind,
)


def test_log_keeps_insertion_order_and_levels() -> None:
    log = DiagnosticLog()
    log.add_warning(DiagnosticKind.FORMATTER_CONFLICT, "conflict")
    log.add_info("note")
    log.add_error(DiagnosticKind.MISSING_MANIFEST, "missing")

    assert len(log) == 3
    assert [d.message for d in log.items] == ["conflict", "note", "missing"]
    assert [d.kind for d in log.of_level(DiagnosticLevel.ERROR)] == [
        DiagnosticKind.MISSING_MANIFEST
    ]


def test_filter_kind_and_to_dict() -> None:
    log = DiagnosticLog()
    log.add_warning(DiagnosticKind.SCRIPT_CONFLICT, "a")
    log.add_warning(DiagnosticKind.CONFIG_EXISTS, "b")

    conflicts = filter_kind(log.items, DiagnosticKind.SCRIPT_CONFLICT)
    assert len(conflicts) == 1
    assert conflicts[0].to_dict() == {
        "level": "warning",
        "kind": "script-conflict",
        "message": "a",
    }
