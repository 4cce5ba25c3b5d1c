"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from lintreport.sink import Span


class RecordingSink:
    """ReportSink that keeps every call for later inspection."""

    def __init__(self) -> None:
        self.lines: list[list[Span]] = []
        self.events: list[tuple] = []

    def write_line(self, spans: Sequence[Span] = ()) -> None:
        self.lines.append(list(spans))
        self.events.append(("line", "".join(text for text, _ in spans)))

    def new_line(self) -> None:
        self.lines.append([])
        self.events.append(("line", ""))

    def success(self, message: str) -> None:
        self.events.append(("success", message))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    def progress_start(self, total: int) -> None:
        self.events.append(("progress_start", total))

    def progress_advance(self, step: int = 1) -> None:
        self.events.append(("progress_advance", step))

    def progress_finish(self) -> None:
        self.events.append(("progress_finish",))

    @property
    def text_lines(self) -> list[str]:
        return ["".join(text for text, _ in spans) for spans in self.lines]

    @property
    def progress_events(self) -> list[tuple]:
        return [e for e in self.events if e[0].startswith("progress")]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def twenty_line_file(tmp_path: Path) -> Path:
    path = tmp_path / "example.py"
    path.write_text(
        "\n".join(f"source line {n}" for n in range(1, 21)) + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def findings_json(tmp_path: Path, twenty_line_file: Path) -> Path:
    path = tmp_path / "findings.json"
    path.write_text(
        "[\n"
        f'  {{"status": "ok", "filename": "{twenty_line_file}", "line": 1, "message": ""}},\n'
        f'  {{"status": "warning", "filename": "{twenty_line_file}", "line": "10", '
        '"message": "Unused variable"}\n'
        "]\n",
        encoding="utf-8",
    )
    return path
