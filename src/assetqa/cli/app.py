# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the report and process commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer

from ..adapters import CssLintErrorAdapter, DiagnosticAdapter, LinterErrorAdapter, adapt_report
from ..config import Config, load_config
from ..errors import AssetQAError
from ..logging import fail, info, ok, section, warn
from ..models import Resource
from ..parsers import load_raw_groups, record_type_for
from ..processors import available_processors, build_pipeline
from ..reporting.console import render_summary
from ..reporting.xml_report import Dialect, format_report, serialize_document, write_xml_report

TOOL_ADAPTERS: Final[dict[str, DiagnosticAdapter]] = {
    "linter": LinterErrorAdapter(),
    "csslint": CssLintErrorAdapter(),
}

CONFIG_HELP: Final[str] = "Explicit configuration file (assetqa.toml or pyproject.toml)."

app = typer.Typer(
    name="assetqa",
    help="Aggregate web resource lint results and run text processing chains.",
    no_args_is_help=True,
    add_completion=False,
)


def _load(config_file: Path | None) -> Config:
    try:
        return load_config(Path.cwd(), config_file=config_file)
    except AssetQAError as exc:
        fail(str(exc), use_emoji=True)
        raise typer.Exit(code=1) from exc


@app.command("report")
def report_command(
    source: Annotated[Path, typer.Argument(help="JSON lint output to convert.", exists=True, dir_okay=False)],
    tool: Annotated[str | None, typer.Option("--tool", help="Tool that produced SOURCE: linter or csslint.")] = None,
    dialect: Annotated[
        str | None, typer.Option("--dialect", help="Report dialect: lint, checkstyle or csslint.")
    ] = None,
    out: Annotated[Path | None, typer.Option("--out", "-o", help="Write the XML report here.")] = None,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Suppress the console summary.")] = False,
    config_file: Annotated[Path | None, typer.Option("--config", help=CONFIG_HELP)] = None,
) -> None:
    """Convert raw lint output into a Checkstyle, CSSLint or plain lint XML report.

    Without ``--out`` the XML document is printed and the summary is skipped.
    """

    cfg = _load(config_file)
    output_cfg = cfg.output.model_copy(update={"quiet": quiet or cfg.output.quiet})
    try:
        tool_name = tool or cfg.report.tool
        resolved = Dialect.parse(dialect) if dialect is not None else cfg.report.dialect
        record_type = record_type_for(tool_name)
        groups = load_raw_groups(source.read_text(encoding="utf-8"), record_type)
        report = adapt_report(groups, TOOL_ADAPTERS[tool_name])
        destination = out or cfg.report.output
        if destination is None:
            typer.echo(serialize_document(format_report(report, resolved)).decode("utf-8"))
            return
        write_xml_report(report, resolved, destination)
    except AssetQAError as exc:
        fail(str(exc), use_emoji=output_cfg.emoji, use_color=output_cfg.color)
        raise typer.Exit(code=1) from exc

    if not output_cfg.quiet:
        if not report.reports:
            warn(f"no lint records found in {source}", use_emoji=output_cfg.emoji, use_color=output_cfg.color)
        section("Summary", use_color=output_cfg.color)
    render_summary(report, output_cfg)
    if not output_cfg.quiet:
        ok(
            f"{resolved.value} report written to {destination}",
            use_emoji=output_cfg.emoji,
            use_color=output_cfg.color,
        )


@app.command("process")
def process_command(
    source: Annotated[Path, typer.Argument(help="CSS or JS resource to process.", exists=True, dir_okay=False)],
    stage: Annotated[
        list[str] | None, typer.Option("--stage", "-s", help="Processor to run; repeat to chain in order.")
    ] = None,
    out: Annotated[Path | None, typer.Option("--out", "-o", help="Write the processed text here.")] = None,
    no_minimize: Annotated[
        bool, typer.Option("--no-minimize", help="Skip minimizing processors for this resource.")
    ] = False,
    config_file: Annotated[Path | None, typer.Option("--config", help=CONFIG_HELP)] = None,
) -> None:
    """Run a chain of processors over a single resource."""

    cfg = _load(config_file)
    try:
        resource = Resource.from_path(source, minimize=cfg.pipeline.minimize and not no_minimize)
        pipeline = build_pipeline(stage if stage else cfg.pipeline.stages)
        if not pipeline.processors and not cfg.output.quiet:
            info(
                "no processors configured, output is unchanged",
                use_emoji=cfg.output.emoji,
                use_color=cfg.output.color,
            )
        result = pipeline.process(resource, source.read_text(encoding="utf-8"))
    except AssetQAError as exc:
        fail(str(exc), use_emoji=cfg.output.emoji, use_color=cfg.output.color)
        raise typer.Exit(code=1) from exc

    if out is None:
        typer.echo(result)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(result, encoding="utf-8")
    if not cfg.output.quiet:
        ok(f"{resource.uri} processed into {out}", use_emoji=cfg.output.emoji, use_color=cfg.output.color)


@app.command("processors")
def processors_command() -> None:
    """List the built-in processor names."""

    for name in available_processors():
        typer.echo(name)


__all__ = ["app"]
