# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration discovery and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetqa.config import Config, load_config
from assetqa.errors import ConfigurationError
from assetqa.reporting import Dialect


def test_defaults_without_files(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)

    assert cfg == Config()
    assert cfg.report.dialect is Dialect.CHECKSTYLE
    assert cfg.pipeline.stages == ["strip-comments", "trim-lines"]


def test_dedicated_file_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "assetqa.toml").write_text('[report]\ndialect = "csslint"\n', encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text('[tool.assetqa.report]\ndialect = "lint"\n', encoding="utf-8")

    assert load_config(tmp_path).report.dialect is Dialect.CSSLINT


def test_pyproject_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "site"\n\n[tool.assetqa.pipeline]\nstages = ["collapse-whitespace"]\nminimize = false\n',
        encoding="utf-8",
    )

    cfg = load_config(tmp_path)

    assert cfg.pipeline.stages == ["collapse-whitespace"]
    assert cfg.pipeline.minimize is False


def test_explicit_file(tmp_path: Path) -> None:
    explicit = tmp_path / "ci.toml"
    explicit.write_text('[report]\ntool = "csslint"\ndialect = "PLAIN"\n\n[output]\nquiet = true\n', encoding="utf-8")

    cfg = load_config(tmp_path, config_file=explicit)

    assert cfg.report.tool == "csslint"
    assert cfg.report.dialect is Dialect.PLAIN
    assert cfg.output.quiet is True


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_config(tmp_path, config_file=tmp_path / "absent.toml")


@pytest.mark.parametrize(
    "content",
    [
        "[report\n",
        '[report]\ndialect = "junit"\n',
        '[report]\ntool = "eslint"\n',
        "[unknown]\nvalue = 1\n",
    ],
)
def test_invalid_configuration(tmp_path: Path, content: str) -> None:
    (tmp_path / "assetqa.toml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(tmp_path)
