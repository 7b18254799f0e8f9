# =============================================================================
# Rich Output Tests
# =============================================================================

from rich.text import Text

from kata_tui.rendering import render_markup
from kata_tui.rendering.rich_output import line_to_text, lines_to_text, to_rich_style
from kata_tui.rendering.styles import DisplayLine, RunStyle, StyledRun


def test_to_rich_style():
    style = to_rich_style(RunStyle(fg="cyan", bg="#282837", bold=True))

    assert style.color.name == "cyan"
    assert style.bgcolor is not None
    assert style.bold is True
    # Unset attributes are inherited, not forced off
    assert style.italic is None


def test_to_rich_style_is_cached():
    style = RunStyle(fg="yellow", italic=True)
    assert to_rich_style(style) is to_rich_style(RunStyle(fg="yellow", italic=True))


def test_line_to_text_keeps_runs():
    line = DisplayLine((
        StyledRun("plain ", RunStyle(fg="white")),
        StyledRun("bold", RunStyle(fg="cyan", bold=True)),
    ))
    text = line_to_text(line, indent=2)

    assert isinstance(text, Text)
    assert text.plain == "  plain bold"
    bold_span = next(span for span in text.spans if text.plain[span.start:span.end] == "bold")
    assert bold_span.style.bold


def test_brackets_are_not_markup():
    text = line_to_text(render_markup("nums[i] = [1,2]")[0])
    assert text.plain == "nums[i] = [1,2]"


def test_lines_to_text_joins_rows():
    lines = render_markup("<p>one</p><p>two</p>")
    text = lines_to_text(lines, indent=1)

    assert text.plain == " one\n \n two"


def test_lines_to_text_empty():
    assert lines_to_text([]).plain == ""
