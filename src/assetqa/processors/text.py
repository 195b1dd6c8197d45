# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in in-memory text processors for CSS and JavaScript resources."""

from __future__ import annotations

import re
from typing import ClassVar, Final

from ..errors import ConfigurationError
from ..models import Resource, ResourceType
from .base import BaseProcessor

_STRING_LITERAL: Final[str] = r"""'(?:\\.|[^'\\\n])*'|"(?:\\.|[^"\\\n])*\""""
_KEEP: Final[dict[ResourceType, str]] = {
    ResourceType.CSS: _STRING_LITERAL + r"""|url\(\s*[^\s"')][^)]*\)""",
    ResourceType.JS: _STRING_LITERAL + r"|`(?:\\.|[^`\\])*`|//[^\n]*",
}
# Group 1 is text that survives: literals, licence blocks and JS line comments.
_COMMENT_SCANNERS: Final[dict[ResourceType, re.Pattern[str]]] = {
    kind: re.compile(rf"({keep}|/\*!.*?\*/)|/\*.*?\*/", re.DOTALL) for kind, keep in _KEEP.items()
}
_WHITESPACE_RUN: Final[re.Pattern[str]] = re.compile(r"\s+")


class StripCommentsProcessor(BaseProcessor):
    """Remove ``/* ... */`` comments while keeping ``/*! ... */`` licence blocks.

    Quoted strings, CSS ``url(...)`` bodies and JavaScript template literals
    and line comments are copied through untouched, so a ``/*`` inside them
    never opens a comment.
    """

    name: ClassVar[str] = "strip-comments"
    minimizing: ClassVar[bool] = True

    def transform(self, resource: Resource, text: str) -> str:
        scanner = _COMMENT_SCANNERS[resource.type]
        return scanner.sub(lambda match: match.group(1) or "", text)


class TrimLinesProcessor(BaseProcessor):
    """Strip trailing whitespace and drop blank lines."""

    name: ClassVar[str] = "trim-lines"

    def transform(self, resource: Resource, text: str) -> str:
        del resource
        lines = (line.rstrip() for line in text.splitlines())
        return "\n".join(line for line in lines if line)


class CollapseWhitespaceProcessor(BaseProcessor):
    """Collapse every whitespace run in a stylesheet into a single space.

    Scripts pass through: joining lines would let a ``//`` comment swallow
    the code after it.
    """

    name: ClassVar[str] = "collapse-whitespace"
    minimizing: ClassVar[bool] = True
    supported_types: ClassVar[frozenset[ResourceType]] = frozenset({ResourceType.CSS})

    def transform(self, resource: Resource, text: str) -> str:
        del resource
        return _WHITESPACE_RUN.sub(" ", text).strip()


class SemicolonAppenderProcessor(BaseProcessor):
    """Terminate scripts with ``;`` so concatenated JavaScript stays valid."""

    name: ClassVar[str] = "semicolon-append"
    supported_types: ClassVar[frozenset[ResourceType]] = frozenset({ResourceType.JS})

    def transform(self, resource: Resource, text: str) -> str:
        del resource
        stripped = text.rstrip()
        if not stripped or stripped.endswith(";"):
            return text
        return f"{stripped};"


class RegexReplaceProcessor(BaseProcessor):
    """Replace every match of a configured pattern.

    The pattern is compiled lazily by :meth:`initialize`.
    """

    name: ClassVar[str] = "regex-replace"

    def __init__(self, pattern: str, replacement: str = "", *, flags: int = 0) -> None:
        self._source = pattern
        self._replacement = replacement
        self._flags = flags
        self._compiled: re.Pattern[str] | None = None

    def initialize(self) -> None:
        if self._compiled is not None:
            return
        try:
            self._compiled = re.compile(self._source, self._flags)
        except re.error as exc:
            raise ConfigurationError(f"invalid pattern {self._source!r}: {exc}") from exc

    def transform(self, resource: Resource, text: str) -> str:
        del resource
        self.initialize()
        assert self._compiled is not None
        return self._compiled.sub(self._replacement, text)


__all__ = [
    "CollapseWhitespaceProcessor",
    "RegexReplaceProcessor",
    "SemicolonAppenderProcessor",
    "StripCommentsProcessor",
    "TrimLinesProcessor",
]
