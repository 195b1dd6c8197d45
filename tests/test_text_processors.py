# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the built-in text processors and their registry."""

from __future__ import annotations

import pytest

from assetqa.errors import ConfigurationError
from assetqa.models import Resource, ResourceType
from assetqa.processors import (
    CollapseWhitespaceProcessor,
    RegexReplaceProcessor,
    SemicolonAppenderProcessor,
    StripCommentsProcessor,
    TrimLinesProcessor,
    available_processors,
    build_pipeline,
    create_processor,
)

CSS = Resource(uri="/css/site.css", type=ResourceType.CSS)
JS = Resource(uri="/js/app.js", type=ResourceType.JS)


def test_strip_comments_keeps_licence_blocks() -> None:
    source = "/*! keep me */\na { /* drop\nme */ color: red; }"

    assert StripCommentsProcessor().process(CSS, source) == "/*! keep me */\na {  color: red; }"


def test_minimizing_processors_respect_resource_flag() -> None:
    resource = Resource(uri="/css/site.css", type=ResourceType.CSS, minimize=False)
    source = "a  {\n  color: red; /* note */\n}"

    assert StripCommentsProcessor().process(resource, source) == source
    assert CollapseWhitespaceProcessor().process(resource, source) == source


def test_trim_lines_drops_blank_lines() -> None:
    assert TrimLinesProcessor().process(JS, "var a = 1;   \n\n   \nvar b;\t\n") == "var a = 1;\nvar b;"


def test_collapse_whitespace() -> None:
    assert CollapseWhitespaceProcessor().process(CSS, "  a {\n\tcolor:  red;\n}  ") == "a { color: red; }"


def test_semicolon_appender_only_touches_scripts() -> None:
    appender = SemicolonAppenderProcessor()

    assert appender.process(JS, "foo()\n") == "foo();"
    assert appender.process(JS, "foo();") == "foo();"
    assert appender.process(JS, "") == ""
    assert appender.process(CSS, "a {}") == "a {}"


def test_regex_replace_initialize_is_idempotent() -> None:
    processor = RegexReplaceProcessor(r"console\.log\([^)]*\);?", "")
    processor.initialize()
    processor.initialize()

    assert processor.process(JS, "a();console.log('x');b();") == "a();b();"


def test_registry_lists_builtin_processors() -> None:
    assert available_processors() == (
        "collapse-whitespace",
        "semicolon-append",
        "strip-comments",
        "trim-lines",
    )
    assert isinstance(create_processor(" Strip-Comments "), StripCommentsProcessor)


def test_registry_rejects_unknown_names() -> None:
    with pytest.raises(ConfigurationError):
        create_processor("uglify")
    with pytest.raises(ConfigurationError):
        build_pipeline(["trim-lines", "uglify"])
    with pytest.raises(ConfigurationError):
        build_pipeline(None)


def test_build_pipeline_runs_stages_in_order() -> None:
    pipeline = build_pipeline(["strip-comments", "trim-lines", "semicolon-append"])
    source = "/* header */\nfoo()   \n\nbar()\n"

    assert pipeline.process(JS, source) == "foo()\nbar();"


def test_strip_comments_ignores_comment_markers_in_script_strings() -> None:
    source = 'var p = "/static/*"; var q = \'*/\'; /* c */ run();'

    assert StripCommentsProcessor().process(JS, source) == 'var p = "/static/*"; var q = \'*/\';  run();'


def test_strip_comments_keeps_template_literals_and_line_comments() -> None:
    source = "var t = `a /* b */ c`; // see /* here\nrun(); /* gone */"

    assert StripCommentsProcessor().process(JS, source) == "var t = `a /* b */ c`; // see /* here\nrun(); "


@pytest.mark.parametrize(
    "rule",
    ['background: url("img/*.png");', "background: url(img/*.png);", "content: '/* x */';"],
)
def test_strip_comments_keeps_stylesheet_literals(rule: str) -> None:
    pipeline = build_pipeline(["strip-comments"])
    source = f"a {{ {rule} }} /* x */ b {{ color: red; }}"

    assert pipeline.process(CSS, source) == f"a {{ {rule} }}  b {{ color: red; }}"


def test_collapse_whitespace_leaves_scripts_alone() -> None:
    source = "var a = 1; // note\nvar b = 2;"

    assert CollapseWhitespaceProcessor().process(JS, source) == source
