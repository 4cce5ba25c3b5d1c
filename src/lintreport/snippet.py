"""Code snippet rendering — a numbered window of source around a finding."""

from __future__ import annotations

from pathlib import Path

from lintreport.palette import Color, Style
from lintreport.sink import ReportSink, Span

StyledLine = list[Span]

_SEPARATOR = ("|", Color.GRAY.body)


def split_gutter(number: int, width: int = 5) -> tuple[str, str]:
    """Split a zero-padded line number into filler and significant digits.

    ``split_gutter(12)`` gives ``("000", "12")``. Numbers wider than the
    gutter get no filler.
    """
    digits = str(number)
    padded = digits.zfill(width)
    return padded[: len(padded) - len(digits)], digits


class SnippetRenderer:
    """Renders up to ``2 * context_lines - 1`` source lines, from
    ``line - context_lines + 1`` to ``line + context_lines - 1``.

    A file that is missing or unreadable yields an empty snippet.
    """

    def __init__(self, context_lines: int = 5, gutter_width: int = 5) -> None:
        self._context = context_lines
        self._width = gutter_width

    def window(self, line: int) -> tuple[int, int]:
        """Half-open range of 0-based indices shown for a target line."""
        return line - self._context, line + self._context - 1

    def render(self, filename: str, line: int, color: Color) -> list[StyledLine]:
        try:
            content = Path(filename).read_bytes().decode("utf-8", errors="replace")
        except (OSError, ValueError):
            return []

        source_lines = content.split("\n")
        start, end = self.window(line)

        rows: list[StyledLine] = []
        for index in range(max(start, 0), min(end, len(source_lines))):
            number = index + 1
            rows.append(self._row(number, source_lines[index], number == line, color))
        return rows

    def write(self, sink: ReportSink, filename: str, line: int, color: Color) -> int:
        """Render straight into a sink; returns the number of rows written."""
        rows = self.render(filename, line, color)
        for row in rows:
            sink.write_line(row)
        return len(rows)

    def _row(self, number: int, text: str, highlight: bool, color: Color) -> StyledLine:
        prefix, digits = split_gutter(number, self._width)
        if highlight:
            prefix_style = color.accent
            digits_style = color.style(bold=True)
            text_style = color.body
        else:
            prefix_style = Color.GRAY.body
            digits_style = Color.WHITE.style(bold=True)
            text_style = Color.WHITE.body

        row: StyledLine = []
        if prefix:
            row.append((prefix, prefix_style))
        row.append((digits, digits_style))
        row.append(_SEPARATOR)
        row.append((" ", Style()))
        row.append((text, text_style))
        return row
