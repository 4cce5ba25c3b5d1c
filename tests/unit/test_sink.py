"""Tests for the rich-backed report sink."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from lintreport.palette import Color, Style
from lintreport.sink import RichSink, to_rich_style


def _make_sink() -> tuple[RichSink, StringIO]:
    buf = StringIO()
    console = Console(file=buf, width=100, color_system=None, highlight=False)
    return RichSink(console), buf


def test_style_encoding():
    assert to_rich_style(Color.GRAY.body).color.name == "bright_black"
    assert to_rich_style(Color.GRAY.accent).color.name == "white"

    accent = to_rich_style(Color.RED.style(bright=True, bold=True))
    assert accent.color.name == "bright_red"
    assert accent.bold is True

    body = to_rich_style(Color.YELLOW.body)
    assert body.color.name == "yellow"
    assert not body.bold

    assert to_rich_style(Style()).color is None


def test_write_line_concatenates_spans():
    sink, buf = _make_sink()
    sink.write_line([("000", Color.GRAY.body), ("12", Color.WHITE.style(bold=True))])
    sink.new_line()
    assert buf.getvalue() == "00012\n\n"


def test_long_lines_are_not_wrapped():
    sink, buf = _make_sink()
    sink.write_line([("x" * 250, Style())])
    assert buf.getvalue() == "x" * 250 + "\n"


def test_markup_is_not_interpreted():
    sink, buf = _make_sink()
    sink.write_line([("[bold]literal[/bold]", Style())])
    assert "[bold]literal[/bold]" in buf.getvalue()


def test_summary_blocks():
    sink, buf = _make_sink()
    sink.success("Finished in 0.10s")
    sink.error("Finished in 0.20s")
    output = buf.getvalue()
    assert "[OK] Finished in 0.10s" in output
    assert "[ERROR] Finished in 0.20s" in output


def test_progress_lifecycle():
    sink, _buf = _make_sink()
    sink.progress_advance()
    sink.progress_finish()

    sink.progress_start(3)
    for _ in range(3):
        sink.progress_advance()
    sink.progress_finish()
    sink.progress_finish()
