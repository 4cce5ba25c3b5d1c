"""Output sinks — where rendered report lines end up."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TimeElapsedColumn,
)
from rich.style import Style as RichStyle
from rich.text import Text

from lintreport.palette import Style

Span = tuple[str, Style]

# Logical color name -> rich color name for the plain and bright variants.
_COLOR_NAMES = {
    "gray": ("bright_black", "white"),
}


class ReportSink(Protocol):
    """Line-oriented, style-aware output surface."""

    def write_line(self, spans: Sequence[Span] = ()) -> None: ...

    def new_line(self) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def progress_start(self, total: int) -> None: ...

    def progress_advance(self, step: int = 1) -> None: ...

    def progress_finish(self) -> None: ...


def to_rich_style(style: Style) -> RichStyle:
    """Encode a semantic style for a rich console."""
    if style.color == "default":
        return RichStyle(bold=style.bold or None)
    plain, bright = _COLOR_NAMES.get(style.color, (style.color, f"bright_{style.color}"))
    return RichStyle(color=bright if style.bright else plain, bold=style.bold or None)


def to_text(spans: Sequence[Span]) -> Text:
    text = Text(no_wrap=True, overflow="ignore")
    for content, style in spans:
        text.append(content, style=to_rich_style(style))
    return text


class RichSink:
    """ReportSink backed by a rich Console and Progress bar."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    @property
    def console(self) -> Console:
        return self._console

    def write_line(self, spans: Sequence[Span] = ()) -> None:
        self._console.print(to_text(spans), soft_wrap=True)

    def new_line(self) -> None:
        self._console.line()

    def success(self, message: str) -> None:
        self._block("[OK]", message, "green")

    def error(self, message: str) -> None:
        self._block("[ERROR]", message, "red")

    def progress_start(self, total: int) -> None:
        if self._progress is not None:
            self.progress_finish()
        self._progress = Progress(
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self._console,
        )
        self._task = self._progress.add_task("lint", total=total)
        self._progress.start()

    def progress_advance(self, step: int = 1) -> None:
        if self._progress is None or self._task is None:
            return
        self._progress.advance(self._task, step)

    def progress_finish(self) -> None:
        if self._progress is None or self._task is None:
            return
        total = self._progress.tasks[0].total
        if total is not None:
            self._progress.update(self._task, completed=total)
        self._progress.stop()
        self._progress = None
        self._task = None
        self._console.line()

    def _block(self, tag: str, message: str, color: str) -> None:
        body = Text(f"{tag} {message}", style=f"bold {color}")
        self._console.print(Panel(body, border_style=color, expand=True))
