# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols and base classes describing resource processors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, runtime_checkable

from ..models import Resource, ResourceType


@runtime_checkable
class ResourceProcessor(Protocol):
    """Transform the full text of one resource into new text.

    Implementations may hold their own configuration but must not keep state
    between calls nor assume which processor runs before or after them.
    """

    def process(self, resource: Resource, text: str) -> str:
        """Return the transformed ``text`` of ``resource``."""
        ...


def processor_name(processor: object) -> str:
    """Return a readable name for ``processor``."""

    name = getattr(processor, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(processor).__name__


def init_processor(processor: object) -> None:
    """Run the optional ``initialize`` hook of ``processor``.

    Hooks must be idempotent, the chain calls them before every invocation.
    """

    hook = getattr(processor, "initialize", None)
    if callable(hook):
        hook()


class BaseProcessor(ABC):
    """Common behaviour for the built-in text processors.

    ``supported_types`` limits the resource types a processor touches and
    ``minimizing`` processors leave resources flagged ``minimize=False``
    untouched. Anything skipped is passed through unchanged.
    """

    name: ClassVar[str] = "processor"
    minimizing: ClassVar[bool] = False
    supported_types: ClassVar[frozenset[ResourceType]] = frozenset(ResourceType)

    def initialize(self) -> None:
        """Prepare internal state; safe to call any number of times."""

    def process(self, resource: Resource, text: str) -> str:
        if resource.type not in self.supported_types:
            return text
        if self.minimizing and not resource.minimize:
            return text
        return self.transform(resource, text)

    @abstractmethod
    def transform(self, resource: Resource, text: str) -> str:
        """Return the processed ``text``; only called for applicable resources."""
        raise NotImplementedError


__all__ = ["BaseProcessor", "ResourceProcessor", "init_processor", "processor_name"]
