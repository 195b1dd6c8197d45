# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build Checkstyle, CSSLint and plain lint XML reports from canonical diagnostics."""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import BinaryIO, Final

from ..adapters import CssLintErrorAdapter, LinterErrorAdapter, RawGroups, adapt_report
from ..errors import ConfigurationError
from ..models import CssLintError, DiagnosticItem, DiagnosticReport, LinterError, ResourceDiagnostics

ELEMENT_FILE: Final[str] = "file"
ATTR_NAME: Final[str] = "name"
ATTR_EVIDENCE: Final[str] = "evidence"
ATTR_LINE: Final[str] = "line"
ATTR_SEVERITY: Final[str] = "severity"


class Dialect(StrEnum):
    """Output schemas a :class:`DiagnosticReport` can be rendered into."""

    PLAIN = "lint"
    CHECKSTYLE = "checkstyle"
    CSSLINT = "csslint"

    @classmethod
    def parse(cls, value: Dialect | str | None) -> Dialect:
        """Return the dialect named by ``value`` (member name or value, any case).

        Raises:
            ConfigurationError: If ``value`` is missing or names no dialect.
        """

        if isinstance(value, Dialect):
            return value
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(f"unsupported report dialect: {value!r}")
        token = value.strip().lower()
        for member in cls:
            if token in {member.value, member.name.lower()}:
                return member
        raise ConfigurationError(f"unsupported report dialect: {value!r}")


@dataclass(frozen=True, slots=True)
class DialectNames:
    """Element and attribute names that differ between dialects."""

    root: str
    issue: str
    column: str
    reason: str


DIALECT_NAMES: Final[Mapping[Dialect, DialectNames]] = {
    Dialect.PLAIN: DialectNames(root="lint", issue="issue", column="char", reason="reason"),
    Dialect.CHECKSTYLE: DialectNames(root="checkstyle", issue="error", column="column", reason="message"),
    Dialect.CSSLINT: DialectNames(root="csslint", issue="issue", column="char", reason="reason"),
}


def _is_blank(value: object) -> bool:
    return value is None or not str(value).strip()


def _set_if_present(element: ET.Element, name: str, value: object) -> None:
    if not _is_blank(value):
        element.set(name, str(value))


def _issue_element(item: DiagnosticItem, names: DialectNames) -> ET.Element:
    element = ET.Element(names.issue)
    _set_if_present(element, names.column, item.column)
    _set_if_present(element, ATTR_EVIDENCE, item.evidence)
    _set_if_present(element, ATTR_LINE, item.line)
    _set_if_present(element, names.reason, item.reason)
    _set_if_present(element, ATTR_SEVERITY, item.severity)
    return element


def _file_element(entry: ResourceDiagnostics, names: DialectNames) -> ET.Element:
    element = ET.Element(ELEMENT_FILE, {ATTR_NAME: entry.resource_path})
    for item in entry.items:
        element.append(_issue_element(item, names))
    return element


def format_report(report: DiagnosticReport, dialect: Dialect | str) -> ET.Element:
    """Render ``report`` into an element tree using ``dialect`` naming.

    Only attributes carrying a non-blank value are emitted. File and issue
    elements follow the report's insertion order.

    Raises:
        ConfigurationError: If the report is missing or the dialect unknown.
    """

    if not isinstance(report, DiagnosticReport):
        raise ConfigurationError(f"a DiagnosticReport is required, got {type(report).__name__}")
    names = DIALECT_NAMES[Dialect.parse(dialect)]
    root = ET.Element(names.root)
    for entry in report.reports:
        root.append(_file_element(entry, names))
    return root


def serialize_document(root: ET.Element, *, indent: bool = True) -> bytes:
    """Serialise ``root`` into UTF-8 encoded XML with a declaration."""

    document = root
    if indent:
        document = copy.deepcopy(root)
        ET.indent(document)
    return ET.tostring(document, encoding="utf-8", xml_declaration=True)


def write_xml_report(report: DiagnosticReport, dialect: Dialect | str, path: Path) -> None:
    """Format ``report`` and write the XML document to ``path``."""

    payload = serialize_document(format_report(report, dialect))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)


class XmlReportFormatter:
    """Pair a canonical report with a dialect and render it on demand."""

    def __init__(self, report: DiagnosticReport, dialect: Dialect | str) -> None:
        if not isinstance(report, DiagnosticReport):
            raise ConfigurationError("a DiagnosticReport is required")
        self._report = report
        self._dialect = Dialect.parse(dialect)

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @classmethod
    def create(cls, report: DiagnosticReport, dialect: Dialect | str) -> XmlReportFormatter:
        return cls(report, dialect)

    @classmethod
    def create_for_linter_errors(
        cls,
        groups: RawGroups[LinterError],
        dialect: Dialect | str,
    ) -> XmlReportFormatter:
        """Adapt JSHint style errors and return a formatter for the result."""

        resolved = Dialect.parse(dialect)
        return cls(adapt_report(groups, LinterErrorAdapter()), resolved)

    @classmethod
    def create_for_css_lint_errors(
        cls,
        groups: RawGroups[CssLintError],
        dialect: Dialect | str,
    ) -> XmlReportFormatter:
        """Adapt CSSLint messages and return a formatter for the result."""

        resolved = Dialect.parse(dialect)
        return cls(adapt_report(groups, CssLintErrorAdapter()), resolved)

    def build(self) -> ET.Element:
        return format_report(self._report, self._dialect)

    def write(self, destination: Path | BinaryIO) -> None:
        """Write the rendered document to a path or binary stream."""

        if isinstance(destination, Path):
            write_xml_report(self._report, self._dialect, destination)
            return
        destination.write(serialize_document(self.build()))


__all__ = [
    "DIALECT_NAMES",
    "Dialect",
    "DialectNames",
    "XmlReportFormatter",
    "format_report",
    "serialize_document",
    "write_xml_report",
]
