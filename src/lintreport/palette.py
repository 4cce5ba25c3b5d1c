"""Severity palette — maps a finding's status to display colors.

The renderers only talk in terms of :class:`Style`; turning a style into
actual terminal markup is left to the sink.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from lintreport.models import Status


@dataclass(frozen=True)
class Style:
    """Semantic description of how a span of text should look."""

    color: str = "default"
    bright: bool = False
    bold: bool = False


class Color(enum.Enum):
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    RED = "red"
    WHITE = "white"
    GRAY = "gray"

    @property
    def accent(self) -> Style:
        """Bright rendering, used for labels and the highlighted gutter."""
        return Style(color=self.value, bright=True)

    @property
    def body(self) -> Style:
        return Style(color=self.value)

    def style(self, bright: bool = False, bold: bool = False) -> Style:
        return Style(color=self.value, bright=bright, bold=bold)


_STATUS_COLORS = {
    Status.OK: Color.GREEN,
    Status.NOTICE: Color.BLUE,
    Status.WARNING: Color.YELLOW,
    Status.ERROR: Color.RED,
}


def color_for(status: Status | str) -> Color:
    """Color for a status; anything unrecognised is treated as an error."""
    if isinstance(status, str):
        status = Status.parse(status)
    return _STATUS_COLORS.get(status, Color.RED)  # type: ignore[arg-type]
