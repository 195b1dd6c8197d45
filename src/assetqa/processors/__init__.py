# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resource processors and the chain composing them."""

from __future__ import annotations

from .base import BaseProcessor, ResourceProcessor, init_processor, processor_name
from .chain import ChainedProcessor
from .registry import available_processors, build_pipeline, create_processor
from .text import (
    CollapseWhitespaceProcessor,
    RegexReplaceProcessor,
    SemicolonAppenderProcessor,
    StripCommentsProcessor,
    TrimLinesProcessor,
)

__all__ = [
    "BaseProcessor",
    "ChainedProcessor",
    "CollapseWhitespaceProcessor",
    "RegexReplaceProcessor",
    "ResourceProcessor",
    "SemicolonAppenderProcessor",
    "StripCommentsProcessor",
    "TrimLinesProcessor",
    "available_processors",
    "build_pipeline",
    "create_processor",
    "init_processor",
    "processor_name",
]
