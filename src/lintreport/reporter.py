"""Run reporter — turns a stream of findings into the terminal report."""

from __future__ import annotations

import logging
import platform
import sys
from collections.abc import Sequence

import psutil

from lintreport.formatting import format_duration, format_memory
from lintreport.models import DisplayOptions, Finding, RunPhase, RunState
from lintreport.palette import Color, Style, color_for
from lintreport.sink import ReportSink
from lintreport.snippet import SnippetRenderer

logger = logging.getLogger(__name__)


class RunReporter:
    """Writes findings, progress and the final summary for one run.

    The reporter mutates a :class:`RunState` which the caller may supply and
    keep a reference to; it is read once more by :meth:`finish`.
    """

    def __init__(
        self,
        sink: ReportSink,
        options: DisplayOptions | None = None,
        state: RunState | None = None,
    ) -> None:
        self._sink = sink
        self._options = options or DisplayOptions()
        self.state = state if state is not None else RunState()
        self._snippets = SnippetRenderer(
            context_lines=self._options.context_lines,
            gutter_width=self._options.gutter_width,
        )

    @property
    def finding_count(self) -> int:
        return self.state.finding_count

    @property
    def success(self) -> bool:
        return self.state.success

    def start_application(self, version: str, argv: Sequence[str] | None = None) -> None:
        """Print the banner: invoked command line, tool and runtime version."""
        argv = sys.argv if argv is None else argv
        self._sink.write_line([("> " + " ".join(argv), Style())])
        self._sink.write_line(
            [
                ("Lint", Color.BLUE.style(bold=True)),
                ("Report", Color.YELLOW.style(bold=True)),
                (
                    f" {version} - current Python version: {platform.python_version()}",
                    Style(),
                ),
            ]
        )
        self._sink.new_line()
        self.state.phase = RunPhase.RUNNING

    def progress_start(self, count: int) -> None:
        if self._options.no_progress:
            return
        self._sink.write_line([("Linting files...", Style())])
        self._sink.new_line()
        self._sink.progress_start(count)

    def progress_advance(self) -> None:
        if self._options.no_progress:
            return
        self._sink.progress_advance()

    def progress_finish(self) -> None:
        if self._options.no_progress:
            return
        self._sink.progress_finish()

    def report_finding(self, finding: Finding) -> None:
        """Write the header, message and snippet block for one finding.

        Every reported finding marks the run as failed.
        """
        if self.state.phase is RunPhase.FINISHED:
            raise RuntimeError("cannot report findings after the run has finished")
        self.state.phase = RunPhase.RUNNING

        color = color_for(finding.status)
        self.state.finding_count += 1

        self._sink.write_line(
            [
                (
                    f"#{self.state.finding_count} - line {finding.line} ",
                    Color.WHITE.style(bold=True),
                ),
                (f"[{finding.filename}]", Color.GRAY.style(bold=True)),
            ]
        )
        self._sink.write_line(
            [
                (finding.label, color.style(bright=True, bold=True)),
                (": ", Style()),
                (finding.message, color.body),
            ]
        )
        rows = self._snippets.write(
            self._sink, finding.filename, finding.line_number, color
        )
        self._sink.new_line()

        logger.debug(
            "Reported finding #%d for %s:%s (%d snippet rows)",
            self.state.finding_count,
            finding.filename,
            finding.line,
            rows,
        )
        self.state.success = False

    def finish(self, execution_time: float | None = None) -> bool:
        """Print memory usage and the summary block.

        Returns True when the run failed.
        """
        if self.state.phase is RunPhase.FINISHED:
            raise RuntimeError("run already finished")
        self.state.phase = RunPhase.FINISHED

        elapsed = self.state.elapsed if execution_time is None else execution_time
        memory = psutil.Process().memory_info().rss
        self._sink.write_line([(f"Memory usage: {format_memory(memory)}", Style())])

        message = f"Finished in {format_duration(elapsed)}"
        if not self.state.success:
            self._sink.error(message)
            return True

        self._sink.success(message)
        return False
