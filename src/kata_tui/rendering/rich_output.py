# =============================================================================
# Rich Output
# =============================================================================
# Maps rendered lines onto Rich Text objects, which Textual widgets and
# Rich consoles can display directly. Styles are built through Rich's own
# Style class rather than markup strings, so problem text containing
# "[brackets]" never needs escaping.
# =============================================================================

from functools import lru_cache

from rich.style import Style
from rich.text import Text

from kata_tui.rendering.styles import DisplayLine, RunStyle


@lru_cache(maxsize=256)
def to_rich_style(style: RunStyle) -> Style:
    """Convert a RunStyle to a Rich Style (cached, RunStyle is hashable)."""
    return Style(
        color=style.fg,
        bgcolor=style.bg,
        bold=style.bold or None,
        italic=style.italic or None,
    )


def line_to_text(line: DisplayLine, indent: int = 0) -> Text:
    """
    Build a Rich Text for one display line.

    Args:
        line: Line to convert.
        indent: Unstyled spaces to put in front of the line.
    """
    text = Text(" " * indent, end="")
    for run in line:
        text.append(run.text, style=to_rich_style(run.style))
    return text


def lines_to_text(lines: list[DisplayLine], indent: int = 0) -> Text:
    """Join display lines into one Rich Text, one row per line."""
    return Text("\n", end="").join(line_to_text(line, indent) for line in lines)
