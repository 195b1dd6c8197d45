# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Adapters converting tool specific lint records into canonical items."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Final, Protocol, TypeAlias, TypeVar, runtime_checkable

from .errors import AdaptationError, ConfigurationError
from .models import CssLintError, DiagnosticItem, DiagnosticReport, LinterError
from .severity import severity_from_code, severity_from_label

LOGGER = logging.getLogger(__name__)

RawT = TypeVar("RawT")
RawT_contra = TypeVar("RawT_contra", contravariant=True)
RawGroups: TypeAlias = Mapping[str, Iterable[RawT]] | Iterable[tuple[str, Iterable[RawT]]]

ADAPTATION_FAILURE: Final[str] = "Problem while adapting lint item"
_CANONICAL_FIELDS: Final[frozenset[str]] = frozenset({"severity", "line", "column", "reason", "evidence"})


@runtime_checkable
class DiagnosticAdapter(Protocol[RawT_contra]):
    """Convert one raw record emitted by a lint tool into a :class:`DiagnosticItem`."""

    @property
    @abstractmethod
    def tool_name(self) -> str:
        """Return the name of the tool whose records this adapter understands."""
        raise NotImplementedError

    @abstractmethod
    def adapt(self, raw: RawT_contra) -> DiagnosticItem:
        """Return the canonical representation of ``raw``."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class LinterErrorAdapter:
    """Adapt JSHint/JSLint :class:`LinterError` records."""

    tool_name: str = "linter"

    def adapt(self, raw: LinterError) -> DiagnosticItem:
        severity = severity_from_code(raw.code)
        return DiagnosticItem(
            severity=severity.value if severity is not None else None,
            line=raw.line,
            column=raw.character,
            reason=raw.reason,
            evidence=raw.evidence,
        )


@dataclass(frozen=True, slots=True)
class CssLintErrorAdapter:
    """Adapt CSSLint :class:`CssLintError` messages."""

    tool_name: str = "csslint"

    def adapt(self, raw: CssLintError) -> DiagnosticItem:
        return DiagnosticItem(
            severity=raw.type,
            line=raw.line,
            column=raw.col,
            reason=raw.message,
            evidence=raw.evidence,
        )


@dataclass(frozen=True, slots=True)
class FieldMappingAdapter:
    """Adapt plain mapping records by looking canonical fields up under configured keys.

    ``fields`` maps canonical field names (``severity``, ``line``, ``column``,
    ``reason``, ``evidence``) to the key holding that value in the raw record.
    Canonical fields without an entry are looked up under their own name.
    """

    tool_name: str
    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = set(self.fields) - _CANONICAL_FIELDS
        if unknown:
            raise ConfigurationError(f"unknown canonical fields for {self.tool_name}: {sorted(unknown)}")

    def adapt(self, raw: Mapping[str, object]) -> DiagnosticItem:
        severity = self._lookup(raw, "severity")
        normalized = severity_from_label(severity)
        return DiagnosticItem(
            severity=normalized.value if normalized is not None else _optional_str(severity),
            line=_optional_int(self._lookup(raw, "line"), "line"),
            column=_optional_int(self._lookup(raw, "column"), "column"),
            reason=_optional_str(self._lookup(raw, "reason")),
            evidence=_optional_str(self._lookup(raw, "evidence")),
        )

    def _lookup(self, raw: Mapping[str, object], name: str) -> object:
        return raw.get(self.fields.get(name, name))


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_int(value: object, label: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError(f"{label} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise TypeError(f"{label} must be an integer, got {value!r}")


def _iter_groups(groups: RawGroups[RawT]) -> Iterable[tuple[str, Iterable[RawT]]]:
    if isinstance(groups, Mapping):
        return groups.items()
    return groups


def adapt_report(groups: RawGroups[RawT], adapter: DiagnosticAdapter[RawT]) -> DiagnosticReport:
    """Adapt every raw record of every resource into a :class:`DiagnosticReport`.

    Resource order and per-resource record order are preserved. The first
    record the adapter cannot convert aborts the whole conversion; no partial
    report is returned.

    Args:
        groups: ``(resource_path, records)`` pairs or a mapping of the same.
        adapter: Adapter understanding the records' tool specific schema.

    Returns:
        DiagnosticReport: Canonical report mirroring ``groups``.

    Raises:
        ConfigurationError: If ``groups`` or ``adapter`` is missing.
        AdaptationError: If any record fails to adapt.
    """

    if groups is None:
        raise ConfigurationError("raw lint groups are required")
    if adapter is None:
        raise ConfigurationError("a diagnostic adapter is required")

    report = DiagnosticReport()
    for resource_path, records in _iter_groups(groups):
        items: list[DiagnosticItem] = []
        for index, record in enumerate(records):
            try:
                items.append(adapter.adapt(record))
            except Exception as exc:  # noqa: BLE001 - any adapter failure aborts the batch
                raise AdaptationError(ADAPTATION_FAILURE, resource_path=resource_path, index=index) from exc
        try:
            report.add_report(resource_path, items)
        except ValueError as exc:
            raise ConfigurationError(f"invalid resource path {resource_path!r}") from exc
        LOGGER.debug("adapted %d %s item(s) for %s", len(items), adapter.tool_name, resource_path)
    return report


__all__ = [
    "ADAPTATION_FAILURE",
    "CssLintErrorAdapter",
    "DiagnosticAdapter",
    "FieldMappingAdapter",
    "LinterErrorAdapter",
    "adapt_report",
]
