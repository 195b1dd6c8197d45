# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels normalising different tool vocabularies."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "error": Severity.ERROR,
    "err": Severity.ERROR,
    "fatal": Severity.ERROR,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "info": Severity.INFO,
    "notice": Severity.INFO,
    "note": Severity.INFO,
}


def severity_from_code(code: str | None) -> Severity | None:
    """Infer severity from conventional code prefixes (e.g. ``E``, ``W``)."""

    if not code or not code.strip():
        return None
    head = code.strip()[0].upper()
    if head in {"E", "F"}:
        return Severity.ERROR
    if head == "W":
        return Severity.WARNING
    return None


def severity_from_label(
    label: object,
    *,
    aliases: Mapping[str, Severity] | None = None,
) -> Severity | None:
    """Return a :class:`Severity` derived from a tool specific ``label``.

    Integer labels follow the ESLint convention (``2`` error, ``1`` warning).
    Unknown labels yield ``None`` so the caller can keep the raw value.
    """

    if isinstance(label, bool):
        return None
    if isinstance(label, int):
        return {2: Severity.ERROR, 1: Severity.WARNING}.get(label)
    if not isinstance(label, str):
        return None
    table = aliases if aliases is not None else _SEVERITY_ALIASES
    return table.get(label.strip().lower())


__all__ = ["Severity", "severity_from_code", "severity_from_label"]
