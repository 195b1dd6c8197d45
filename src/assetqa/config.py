# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loading helpers for assetqa."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .reporting.xml_report import Dialect

CONFIG_FILENAME: Final[str] = "assetqa.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "assetqa"


class ReportConfig(BaseModel):
    """Settings controlling how lint reports are adapted and rendered."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    dialect: Dialect = Dialect.CHECKSTYLE
    tool: Literal["linter", "csslint"] = "linter"
    output: Path | None = None

    @field_validator("dialect", mode="before")
    @classmethod
    def _parse_dialect(cls, value: object) -> Dialect:
        return Dialect.parse(value)  # type: ignore[arg-type]


class PipelineConfig(BaseModel):
    """Ordered processor names applied by ``assetqa process``."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    stages: list[str] = Field(default_factory=lambda: ["strip-comments", "trim-lines"])
    minimize: bool = True


class OutputConfig(BaseModel):
    """Console presentation preferences."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    color: bool = True
    emoji: bool = True
    quiet: bool = False


class Config(BaseModel):
    """Top level configuration object."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    report: ReportConfig = Field(default_factory=ReportConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except OSError as exc:
        raise ConfigurationError(f"cannot read configuration at {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"invalid TOML in {path}: {exc}") from exc


def _pyproject_section(data: Mapping[str, Any]) -> Mapping[str, Any]:
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return section


def _locate(root: Path, config_file: Path | None) -> tuple[Path, bool] | None:
    if config_file is not None:
        if not config_file.is_file():
            raise ConfigurationError(f"configuration file not found: {config_file}")
        return config_file, config_file.name == PYPROJECT_FILENAME
    dedicated = root / CONFIG_FILENAME
    if dedicated.is_file():
        return dedicated, False
    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file():
        return pyproject, True
    return None


def load_config(root: Path, *, config_file: Path | None = None) -> Config:
    """Load configuration for ``root``.

    An explicit ``config_file`` wins; otherwise ``assetqa.toml`` is preferred
    over the ``[tool.assetqa]`` table of ``pyproject.toml``. Missing files
    yield the defaults.

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated.
    """

    located = _locate(root, config_file)
    if located is None:
        return Config()
    path, is_pyproject = located
    data = _read_toml(path)
    payload = _pyproject_section(data) if is_pyproject else data
    try:
        return Config.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration in {path}: {exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "OutputConfig",
    "PipelineConfig",
    "ReportConfig",
    "load_config",
]
