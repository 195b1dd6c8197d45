# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Processor composing an ordered list of processors into one."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import ConfigurationError, StageError
from ..models import Resource
from .base import ResourceProcessor, init_processor, processor_name

LOGGER = logging.getLogger(__name__)


class ChainedProcessor:
    """A processor which feeds each stage the complete output of the previous one.

    The chain is itself a :class:`ResourceProcessor`, so chains nest. Stage
    order is fixed when the chain is created. An empty chain returns its
    input unchanged.
    """

    name = "chain"

    def __init__(self, processors: tuple[ResourceProcessor, ...]) -> None:
        self._processors = processors

    @classmethod
    def create(cls, processors: Iterable[ResourceProcessor] | None) -> ChainedProcessor:
        """Build a chain running ``processors`` in the given order.

        Raises:
            ConfigurationError: If the list, or any of its members, is missing
                or does not expose a ``process`` method.
        """

        if processors is None:
            raise ConfigurationError("a processor list is required")
        staged = tuple(processors)
        for index, processor in enumerate(staged):
            if processor is None or not callable(getattr(processor, "process", None)):
                raise ConfigurationError(f"stage #{index} is not a processor: {processor!r}")
        return cls(staged)

    @property
    def processors(self) -> tuple[ResourceProcessor, ...]:
        return self._processors

    def process(self, resource: Resource, text: str) -> str:
        """Run every stage over ``text`` and return the last stage's output.

        Raises:
            ConfigurationError: If ``resource`` or ``text`` is missing.
            StageError: If any stage fails; later stages are not run.
        """

        if resource is None:
            raise ConfigurationError("a resource is required")
        if text is None:
            raise ConfigurationError("input text is required")
        current = text
        for index, processor in enumerate(self._processors):
            name = processor_name(processor)
            LOGGER.debug("running stage #%d (%s) on %s", index, name, resource.uri)
            try:
                init_processor(processor)
                current = processor.process(resource, current)
            except StageError:
                raise
            except Exception as exc:  # noqa: BLE001 - any stage failure aborts the chain
                raise StageError(
                    stage_index=index,
                    stage_name=name,
                    resource_uri=resource.uri,
                    reason=str(exc) or type(exc).__name__,
                ) from exc
            if not isinstance(current, str):
                raise StageError(
                    stage_index=index,
                    stage_name=name,
                    resource_uri=resource.uri,
                    reason=f"returned {type(current).__name__} instead of text",
                )
            LOGGER.debug("stage #%d (%s) produced %d characters", index, name, len(current))
        return current


__all__ = ["ChainedProcessor"]
