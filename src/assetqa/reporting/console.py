# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console summary of canonical lint reports."""

from __future__ import annotations

from rich import box
from rich.table import Table

from ..config import OutputConfig
from ..console import get_console_manager
from ..logging import emoji
from ..models import DiagnosticReport


def build_summary_table(report: DiagnosticReport) -> Table:
    """Return a table listing each resource with its issue count."""

    table = Table(box=box.SIMPLE, show_edge=False)
    table.add_column("Resource", overflow="fold")
    table.add_column("Issues", justify="right")
    for entry in report.reports:
        count = len(entry.items)
        table.add_row(entry.resource_path, str(count), style="red" if count else "green")
    return table


def render_summary(report: DiagnosticReport, cfg: OutputConfig) -> None:
    if cfg.quiet:
        return
    console = get_console_manager().get(color=cfg.color, emoji=cfg.emoji)
    if report.reports:
        console.print(build_summary_table(report))
    files = len(report.reports)
    issues = report.total_items
    marker = emoji("✅ ", cfg.emoji) if issues == 0 else emoji("⚠️ ", cfg.emoji)
    console.print(f"{marker}{issues} issue(s) across {files} resource(s)")


__all__ = ["build_summary_table", "render_summary"]
