"""Reporting data models — findings, run state and display options."""

from __future__ import annotations

import enum
import re
import time
from dataclasses import dataclass, field

from lintreport.formatting import ucfirst

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Status(enum.Enum):
    """Severity of a finding."""

    OK = "ok"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, text: str) -> Status | str:
        """Map text to a member, keeping unknown values as the raw string."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return text


class RunPhase(enum.Enum):
    """Lifecycle of a single reporting run."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class Finding:
    """One result handed over by the lint engine."""

    status: Status | str
    filename: str
    line: int | str
    message: str = ""

    @property
    def line_number(self) -> int:
        """The line as an integer, 0 when it cannot be parsed."""
        if isinstance(self.line, int):
            return self.line
        match = _LEADING_INT.match(str(self.line))
        return int(match.group(1)) if match else 0

    @property
    def label(self) -> str:
        text = self.status.value if isinstance(self.status, Status) else str(self.status)
        return ucfirst(text)


@dataclass
class RunState:
    """Accumulated state of one run, owned by whoever drives the reporter.

    ``success`` is a one-way latch: once cleared it stays cleared.
    """

    finding_count: int = 0
    success: bool = True
    phase: RunPhase = RunPhase.NOT_STARTED
    started_at: float = field(default_factory=time.monotonic)

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started_at


@dataclass(frozen=True)
class DisplayOptions:
    """Per-run display switches."""

    no_progress: bool = False
    context_lines: int = 5
    gutter_width: int = 5
