"""CLI command: lintreport render <findings> — report lint results."""

from __future__ import annotations

import dataclasses
import sys

import click
from rich.console import Console

from lintreport import __version__
from lintreport.config import ReportConfig
from lintreport.findings import load_findings
from lintreport.models import Finding, Status
from lintreport.reporter import RunReporter
from lintreport.sink import RichSink


@click.command()
@click.argument("findings", type=click.Path(allow_dash=True))
@click.option("--no-progress", is_flag=True, help="Hide the progress bar.")
@click.option(
    "--context-lines",
    type=click.IntRange(min=0),
    default=None,
    help="Source lines shown on each side of a finding.",
)
@click.pass_context
def render(
    ctx: click.Context,
    findings: str,
    no_progress: bool,
    context_lines: int | None,
) -> None:
    """Render findings (JSON array or JSON Lines, '-' for stdin)."""
    config: ReportConfig = ctx.obj.get("config") or ReportConfig()
    options = config.display_options()
    if no_progress:
        options = dataclasses.replace(options, no_progress=True)
    if context_lines is not None:
        options = dataclasses.replace(options, context_lines=context_lines)

    try:
        results = load_findings(findings)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    reporter = RunReporter(RichSink(Console(highlight=False)), options)
    reporter.start_application(__version__, sys.argv)

    reportable = _collect(reporter, results)
    for finding in reportable:
        reporter.report_finding(finding)

    if reporter.finish():
        ctx.exit(1)


def _collect(reporter: RunReporter, results: list[Finding]) -> list[Finding]:
    """Walk the results under a progress bar, keeping the non-OK ones."""
    reportable: list[Finding] = []
    reporter.progress_start(len(results))
    for finding in results:
        if finding.status is not Status.OK:
            reportable.append(finding)
        reporter.progress_advance()
    reporter.progress_finish()
    return reportable
