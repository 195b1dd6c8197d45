# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for canonical lint reports."""

from __future__ import annotations

from .xml_report import (
    DIALECT_NAMES,
    Dialect,
    DialectNames,
    XmlReportFormatter,
    format_report,
    serialize_document,
    write_xml_report,
)

__all__ = [
    "DIALECT_NAMES",
    "Dialect",
    "DialectNames",
    "XmlReportFormatter",
    "format_report",
    "serialize_document",
    "write_xml_report",
]
