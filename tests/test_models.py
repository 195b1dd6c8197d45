# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the canonical diagnostic and resource models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from assetqa.errors import ConfigurationError
from assetqa.models import DiagnosticItem, DiagnosticReport, Resource, ResourceDiagnostics, ResourceType


def test_diagnostic_item_is_immutable() -> None:
    item = DiagnosticItem(line=3, reason="missing semicolon")

    with pytest.raises(ValidationError):
        item.line = 4  # type: ignore[misc]

    assert item.severity is None
    assert item.column is None


def test_resource_diagnostics_rejects_blank_path() -> None:
    with pytest.raises(ValidationError):
        ResourceDiagnostics(resource_path="   ")


def test_report_preserves_insertion_order_and_duplicates() -> None:
    report = DiagnosticReport()
    report.add_report("b.css", [DiagnosticItem(line=1)])
    report.add_report("a.css")
    report.add_report("b.css", [DiagnosticItem(line=2), DiagnosticItem(line=3)])

    assert [entry.resource_path for entry in report.reports] == ["b.css", "a.css", "b.css"]
    assert [item.line for item in report.reports[2].items] == [2, 3]
    assert report.total_items == 3


def test_resource_from_path_infers_type() -> None:
    assert Resource.from_path("static/site.CSS").type is ResourceType.CSS
    resource = Resource.from_path("static/app.js", minimize=False)
    assert resource.type is ResourceType.JS
    assert resource.uri == "static/app.js"
    assert resource.minimize is False


def test_resource_from_path_rejects_unknown_suffix() -> None:
    with pytest.raises(ConfigurationError):
        Resource.from_path("index.html")
