# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the assetqa package."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ConfigurationError


class ResourceType(StrEnum):
    """Kinds of web resources the processors understand."""

    CSS = "css"
    JS = "js"


class Resource(BaseModel):
    """Identity of the resource handed to every processing stage."""

    model_config = ConfigDict(frozen=True)

    uri: str = Field(min_length=1)
    type: ResourceType
    minimize: bool = True

    @classmethod
    def from_path(cls, path: str | PurePath, *, minimize: bool = True) -> Resource:
        """Build a resource inferring its type from the file suffix.

        Raises:
            ConfigurationError: If the suffix maps to no known resource type.
        """

        pure = PurePath(path)
        suffix = pure.suffix.lstrip(".").lower()
        try:
            resource_type = ResourceType(suffix)
        except ValueError as exc:
            raise ConfigurationError(f"cannot infer resource type for {pure.as_posix()!r}") from exc
        return cls(uri=pure.as_posix(), type=resource_type, minimize=minimize)


class DiagnosticItem(BaseModel):
    """Tool agnostic lint finding; every field is optional."""

    model_config = ConfigDict(frozen=True)

    severity: str | None = None
    line: int | None = None
    column: int | None = None
    reason: str | None = None
    evidence: str | None = None


class ResourceDiagnostics(BaseModel):
    """Findings reported for a single resource, in discovery order."""

    model_config = ConfigDict(frozen=True)

    resource_path: str
    items: tuple[DiagnosticItem, ...] = Field(default_factory=tuple)

    @field_validator("resource_path")
    @classmethod
    def _require_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("resource_path must not be blank")
        return value


class DiagnosticReport(BaseModel):
    """Append-only collection of per-resource findings.

    Insertion order is preserved and the same resource path may appear more
    than once.
    """

    model_config = ConfigDict(validate_assignment=True)

    entries: list[ResourceDiagnostics] = Field(default_factory=list)

    def add_report(self, resource_path: str, items: Iterable[DiagnosticItem] = ()) -> ResourceDiagnostics:
        """Append the findings of ``resource_path`` and return the stored entry."""

        entry = ResourceDiagnostics(resource_path=resource_path, items=tuple(items))
        self.entries.append(entry)
        return entry

    @property
    def total_items(self) -> int:
        """Return the number of findings across every resource."""
        return sum(len(entry.items) for entry in self.entries)

    @property
    def reports(self) -> tuple[ResourceDiagnostics, ...]:
        """Return a read-only snapshot of the stored entries."""
        return tuple(self.entries)


class LinterError(BaseModel):
    """Error record emitted by JSHint/JSLint style JavaScript linters."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    line: int | None = None
    character: int | None = None
    reason: str | None = None
    evidence: str | None = None
    raw: str | None = None
    code: str | None = None


class CssLintError(BaseModel):
    """Message record emitted by CSSLint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    line: int | None = None
    col: int | None = None
    message: str | None = None
    evidence: str | None = None
    type: str | None = None
    rule: str | None = None


__all__ = [
    "CssLintError",
    "DiagnosticItem",
    "DiagnosticReport",
    "LinterError",
    "Resource",
    "ResourceDiagnostics",
    "ResourceType",
]
