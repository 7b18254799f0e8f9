# =============================================================================
# Styled Text Model
# =============================================================================
# The renderer's output vocabulary:
#   - RunStyle: foreground/background colors plus bold/italic attributes
#   - StyledRun: a span of text sharing one style
#   - DisplayLine: one terminal row's worth of runs
#   - Theme: palette and layout knobs used while rendering
#
# Colors are Rich color strings ("cyan", "#282837", "bright_black"), so the
# display layer can hand them straight to rich.style.Style.
# =============================================================================

from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from rich.cells import cell_len


@dataclass(frozen=True)
class RunStyle:
    """
    Attribute set for one run of text.

    Attributes:
        fg: Foreground color (None = terminal default).
        bg: Background color (None = terminal default).
        bold: Render in bold.
        italic: Render in italics.
    """
    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    italic: bool = False

    def with_background(self, color: str | None) -> "RunStyle":
        """Return a copy of this style with a different background."""
        return replace(self, bg=color)


@dataclass(frozen=True)
class StyledRun:
    """A span of text rendered with a single style."""
    text: str
    style: RunStyle = field(default_factory=RunStyle)

    @property
    def width(self) -> int:
        """Width of the run in terminal cells."""
        return cell_len(self.text)


@dataclass(frozen=True)
class DisplayLine:
    """
    One display row: runs laid out left to right, no implicit separators.

    A line with zero runs is a blank line.
    """
    runs: tuple[StyledRun, ...] = ()

    @classmethod
    def blank(cls) -> "DisplayLine":
        return cls(())

    def __iter__(self) -> Iterator[StyledRun]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    @property
    def text(self) -> str:
        """Concatenated text of every run."""
        return "".join(run.text for run in self.runs)

    @property
    def width(self) -> int:
        """Rendered width in terminal cells."""
        return sum(run.width for run in self.runs)

    @property
    def is_blank(self) -> bool:
        """True if the line has no runs or only whitespace runs."""
        return all(not run.text.strip() for run in self.runs)


@dataclass(frozen=True)
class Theme:
    """
    Palette and layout settings for the markup renderer.

    The defaults give a dark-terminal look: white prose, cyan emphasis,
    yellow inline code on a slate background, and dim box borders.

    Attributes:
        text_color: Plain prose foreground.
        emphasis_color: Foreground for bold text.
        italic_color: Foreground for italic (non-bold) text.
        code_color: Inline code foreground.
        code_background: Background for inline code and code boxes.
        pre_accent_color: Foreground for bold text inside code boxes.
        border_color: Code box border color.
        bullet_color: List bullet color.
        bullet: Glyph placed before list items.
        list_indent: Spaces added per nested list level.
        min_box_width: Minimum content width of a code box.
        box_padding: Blank columns on each side of code box content.
        box_indent: Spaces before the left edge of a code box.
        tab_width: Spaces a tab expands to inside code boxes.
    """
    text_color: str = "white"
    emphasis_color: str = "cyan"
    italic_color: str = "grey70"
    code_color: str = "yellow"
    code_background: str = "#282837"
    pre_accent_color: str = "cyan"
    border_color: str = "bright_black"
    bullet_color: str = "cyan"
    bullet: str = "•"
    list_indent: int = 2
    min_box_width: int = 20
    box_padding: int = 1
    box_indent: int = 2
    tab_width: int = 4
