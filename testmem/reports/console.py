"""Console output for memory scans."""

from __future__ import annotations

import base64

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.sizes import format_size
from ..models import DirectoryOutcome, OutcomeKind, ScanReport

LABEL_WIDTH = 10
ERROR_LABEL = "ERROR"

_KIND_STYLE: dict[OutcomeKind, str] = {
    OutcomeKind.MEASURED: "green",
    OutcomeKind.FLAGGED: "red",
    OutcomeKind.ERROR: "yellow",
    OutcomeKind.SKIPPED: "dim",
}


def format_line(label: str, path: str) -> str:
    """One report line: the label right-aligned to a fixed width, then the path."""
    return f"{label:>{LABEL_WIDTH}} {path}"


class ConsoleReporter:
    """Prints one line per measured directory to stdout as the scan runs.

    Per-directory lines go through ``click.echo`` so they stay plain text
    whatever the terminal; the optional summary table is rendered with Rich
    on stderr.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def raw_output(self, label: str, output: str) -> None:
        click.echo(f"{label} output: {output}")

    def report_outcome(self, outcome: DirectoryOutcome) -> None:
        if outcome.kind == OutcomeKind.SKIPPED:
            return
        if outcome.kind == OutcomeKind.ERROR:
            click.echo(format_line(ERROR_LABEL, outcome.path))
            return

        click.echo(format_line(outcome.size or "", outcome.path))
        for warning in outcome.warnings:
            click.echo(warning)
        if outcome.kind == OutcomeKind.FLAGGED and outcome.profile_blob is not None:
            encoded = base64.b64encode(outcome.profile_blob).decode("ascii")
            click.echo(f"Base64 encoding of pprof mem.out:\n {encoded}")

    def print_summary(self, report: ScanReport) -> None:
        """Render a table of every reported directory and the totals."""
        limit = format_size(report.limit_bytes) if report.limit_bytes > 0 else "none"
        heading = f"Memory usage under {escape(report.root)} (limit: {limit})"
        table = Table()
        table.add_column("Directory")
        table.add_column("Size", justify="right")
        table.add_column("Status")

        for outcome in report.reported:
            style = _KIND_STYLE[outcome.kind]
            size = outcome.size or "-"
            table.add_row(escape(outcome.path), escape(size), f"[{style}]{outcome.kind.value}[/{style}]")

        self.console.print(heading, soft_wrap=True)
        self.console.print(table)
        self.console.print(
            f"{report.measured} measured, {report.flagged} flagged, "
            f"{report.errors} errors, {report.skipped} skipped"
        )
