# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Name based lookup of the built-in processors."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Final

from ..errors import ConfigurationError
from .base import ResourceProcessor
from .chain import ChainedProcessor
from .text import (
    CollapseWhitespaceProcessor,
    SemicolonAppenderProcessor,
    StripCommentsProcessor,
    TrimLinesProcessor,
)

ProcessorFactory = Callable[[], ResourceProcessor]

PROCESSOR_FACTORIES: Final[Mapping[str, ProcessorFactory]] = {
    StripCommentsProcessor.name: StripCommentsProcessor,
    TrimLinesProcessor.name: TrimLinesProcessor,
    CollapseWhitespaceProcessor.name: CollapseWhitespaceProcessor,
    SemicolonAppenderProcessor.name: SemicolonAppenderProcessor,
}


def available_processors() -> tuple[str, ...]:
    """Return the registered processor names in sorted order."""

    return tuple(sorted(PROCESSOR_FACTORIES))


def create_processor(name: str) -> ResourceProcessor:
    """Instantiate the processor registered under ``name``.

    Raises:
        ConfigurationError: If no processor is registered under ``name``.
    """

    try:
        factory = PROCESSOR_FACTORIES[name.strip().lower()]
    except (AttributeError, KeyError) as exc:
        known = ", ".join(available_processors())
        raise ConfigurationError(f"unknown processor {name!r} (known: {known})") from exc
    return factory()


def build_pipeline(names: Iterable[str] | None) -> ChainedProcessor:
    """Compose the processors named in ``names`` into a chain, in order."""

    if names is None:
        raise ConfigurationError("a list of processor names is required")
    return ChainedProcessor.create([create_processor(name) for name in names])


__all__ = ["PROCESSOR_FACTORIES", "available_processors", "build_pipeline", "create_processor"]
