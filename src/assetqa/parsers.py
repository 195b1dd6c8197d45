# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load raw lint tool JSON output into per-resource record groups."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from typing import Final, TypeAlias, TypeVar, overload

from pydantic import BaseModel, ValidationError

from .errors import ConfigurationError
from .models import CssLintError, LinterError

JsonValue: TypeAlias = str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]
RecordT = TypeVar("RecordT", bound=BaseModel)

PATH_KEYS: Final[tuple[str, ...]] = ("file", "source", "filePath")
RECORD_KEYS: Final[tuple[str, ...]] = ("errors", "messages", "warnings")

TOOL_RECORD_TYPES: Final[Mapping[str, type[BaseModel]]] = {
    "linter": LinterError,
    "csslint": CssLintError,
}


def _load_json(text: str) -> JsonValue:
    stripped = text.strip()
    if not stripped:
        return []
    try:
        return json.loads(stripped)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"lint payload is not valid JSON: {exc}") from exc


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _first_present(entry: Mapping[str, JsonValue], keys: Sequence[str]) -> JsonValue:
    for key in keys:
        if key in entry:
            return entry[key]
    return None


def iter_raw_groups(payload: JsonValue) -> Iterator[tuple[str, list[Mapping[str, JsonValue]]]]:
    """Yield ``(resource_path, records)`` pairs from a decoded lint payload.

    Raises:
        ConfigurationError: If the payload matches none of the supported shapes.
    """

    if isinstance(payload, Mapping):
        for path, records in payload.items():
            yield str(path), _records(records, str(path))
        return
    if not _is_sequence(payload):
        raise ConfigurationError("lint payload must be a mapping or a list of file entries")
    for position, entry in enumerate(payload):
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"lint payload entry #{position} is not an object")
        path = _first_present(entry, PATH_KEYS)
        if not isinstance(path, str) or not path.strip():
            raise ConfigurationError(f"lint payload entry #{position} names no resource")
        yield path, _records(_first_present(entry, RECORD_KEYS) or [], path)


def _records(value: JsonValue, path: str) -> list[Mapping[str, JsonValue]]:
    if not _is_sequence(value):
        raise ConfigurationError(f"records for {path!r} must be a list")
    collected: list[Mapping[str, JsonValue]] = []
    for record in value:
        if not isinstance(record, Mapping):
            raise ConfigurationError(f"record for {path!r} is not an object: {record!r}")
        collected.append(record)
    return collected


@overload
def load_raw_groups(text: str, record_type: type[RecordT]) -> list[tuple[str, list[RecordT]]]: ...


@overload
def load_raw_groups(text: str, record_type: None = None) -> list[tuple[str, list[Mapping[str, JsonValue]]]]: ...


def load_raw_groups(
    text: str,
    record_type: type[BaseModel] | None = None,
) -> list[tuple[str, list[BaseModel]]] | list[tuple[str, list[Mapping[str, JsonValue]]]]:
    """Decode ``text`` and validate each record into ``record_type`` when given.

    Without a ``record_type`` the records are returned as plain mappings,
    ready for a :class:`~assetqa.adapters.FieldMappingAdapter`.

    Raises:
        ConfigurationError: If the JSON or any record is malformed.
    """

    groups = list(iter_raw_groups(_load_json(text)))
    if record_type is None:
        return groups
    typed: list[tuple[str, list[BaseModel]]] = []
    for path, records in groups:
        try:
            typed.append((path, [record_type.model_validate(record) for record in records]))
        except ValidationError as exc:
            raise ConfigurationError(f"invalid {record_type.__name__} record for {path!r}: {exc}") from exc
    return typed


def record_type_for(tool: str) -> type[BaseModel]:
    """Return the raw record model used by ``tool``."""

    try:
        return TOOL_RECORD_TYPES[tool]
    except KeyError as exc:
        raise ConfigurationError(f"unsupported lint tool: {tool!r}") from exc


__all__ = ["TOOL_RECORD_TYPES", "iter_raw_groups", "load_raw_groups", "record_type_for"]
