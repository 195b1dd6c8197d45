# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering adapters from tool specific lint records."""

from __future__ import annotations

import pytest

from assetqa.adapters import (
    ADAPTATION_FAILURE,
    CssLintErrorAdapter,
    DiagnosticAdapter,
    FieldMappingAdapter,
    LinterErrorAdapter,
    adapt_report,
)
from assetqa.errors import AdaptationError, ConfigurationError
from assetqa.models import CssLintError, DiagnosticItem, LinterError


class _ExplodingAdapter:
    tool_name = "exploding"

    def __init__(self, fail_on: int) -> None:
        self.fail_on = fail_on
        self.calls = 0

    def adapt(self, raw: int) -> DiagnosticItem:
        self.calls += 1
        if raw == self.fail_on:
            raise ValueError(f"cannot adapt {raw}")
        return DiagnosticItem(line=raw)


def test_linter_error_adapter_maps_fields() -> None:
    error = LinterError(line=7, character=12, reason="Missing semicolon.", evidence="var a = 1", code="W033")

    item = LinterErrorAdapter().adapt(error)

    assert item == DiagnosticItem(
        severity="warning",
        line=7,
        column=12,
        reason="Missing semicolon.",
        evidence="var a = 1",
    )


def test_linter_error_adapter_leaves_unknown_code_without_severity() -> None:
    item = LinterErrorAdapter().adapt(LinterError(line=1, reason="odd", code="I001"))
    assert item.severity is None


def test_css_lint_error_adapter_maps_fields() -> None:
    error = CssLintError(line=5, col=2, message="bad selector", type="warning", evidence=".a{}", rule="ids")

    item = CssLintErrorAdapter().adapt(error)

    assert item.line == 5
    assert item.column == 2
    assert item.reason == "bad selector"
    assert item.severity == "warning"
    assert item.evidence == ".a{}"


def test_adapters_satisfy_protocol() -> None:
    assert isinstance(LinterErrorAdapter(), DiagnosticAdapter)
    assert isinstance(CssLintErrorAdapter(), DiagnosticAdapter)
    assert isinstance(FieldMappingAdapter("eslint"), DiagnosticAdapter)


def test_field_mapping_adapter_reads_configured_keys() -> None:
    adapter = FieldMappingAdapter(
        "eslint",
        fields={"reason": "message", "evidence": "source", "severity": "severity"},
    )

    item = adapter.adapt({"line": "4", "column": 9, "message": "no-unused-vars", "severity": 2})

    assert item == DiagnosticItem(severity="error", line=4, column=9, reason="no-unused-vars")


def test_field_mapping_adapter_rejects_non_integer_line() -> None:
    with pytest.raises(TypeError):
        FieldMappingAdapter("stylelint").adapt({"line": "four"})


def test_field_mapping_adapter_rejects_unknown_fields() -> None:
    with pytest.raises(ConfigurationError):
        FieldMappingAdapter("eslint", fields={"rule": "ruleId"})


def test_adapt_report_preserves_group_and_item_order() -> None:
    groups = [
        ("z.js", [LinterError(line=3), LinterError(line=1)]),
        ("a.js", []),
        ("z.js", [LinterError(line=2)]),
    ]

    report = adapt_report(groups, LinterErrorAdapter())

    assert [entry.resource_path for entry in report.reports] == ["z.js", "a.js", "z.js"]
    assert [item.line for item in report.reports[0].items] == [3, 1]
    assert report.reports[1].items == ()


def test_adapt_report_accepts_mapping() -> None:
    report = adapt_report({"site.css": [CssLintError(line=1)]}, CssLintErrorAdapter())
    assert report.reports[0].resource_path == "site.css"


def test_adapt_report_fails_fast_without_partial_report() -> None:
    adapter = _ExplodingAdapter(fail_on=2)
    groups = [("first.js", [1]), ("second.js", [5, 2, 7]), ("third.js", [9])]

    with pytest.raises(AdaptationError) as excinfo:
        adapt_report(groups, adapter)

    error = excinfo.value
    assert str(error).startswith(ADAPTATION_FAILURE)
    assert error.resource_path == "second.js"
    assert error.index == 1
    assert isinstance(error.__cause__, ValueError)
    assert adapter.calls == 3


@pytest.mark.parametrize(
    ("groups", "adapter"),
    [(None, LinterErrorAdapter()), ([("a.js", [])], None)],
)
def test_adapt_report_requires_inputs(groups: object, adapter: object) -> None:
    with pytest.raises(ConfigurationError):
        adapt_report(groups, adapter)  # type: ignore[arg-type]


def test_adapt_report_rejects_blank_resource_path() -> None:
    with pytest.raises(ConfigurationError):
        adapt_report([(" ", [LinterError(line=1)])], LinterErrorAdapter())
