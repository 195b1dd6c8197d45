# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by adaptation, formatting and processing."""

from __future__ import annotations


class AssetQAError(RuntimeError):
    """Base class for every failure surfaced by :mod:`assetqa`."""


class ConfigurationError(AssetQAError):
    """Raised when an unsupported option or a missing required input is supplied."""


class AdaptationError(AssetQAError):
    """Raised when a raw lint record cannot be converted into a canonical item.

    Attributes:
        resource_path: Resource whose findings were being adapted.
        index: Position of the offending record within that resource.
    """

    def __init__(self, message: str, *, resource_path: str, index: int) -> None:
        super().__init__(f"{message} (resource={resource_path!r}, item={index})")
        self.resource_path = resource_path
        self.index = index


class StageError(AssetQAError):
    """Raised when a processing stage fails while transforming a resource.

    Attributes:
        stage_index: Zero-based position of the failing stage in its chain.
        stage_name: Human readable name of the failing stage.
        resource_uri: Identity of the resource being transformed.
    """

    def __init__(self, *, stage_index: int, stage_name: str, resource_uri: str, reason: str) -> None:
        super().__init__(f"Stage #{stage_index} ({stage_name}) failed while processing {resource_uri}: {reason}")
        self.stage_index = stage_index
        self.stage_name = stage_name
        self.resource_uri = resource_uri


__all__ = ["AdaptationError", "AssetQAError", "ConfigurationError", "StageError"]
