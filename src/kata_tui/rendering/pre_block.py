# =============================================================================
# Code Box Layout
# =============================================================================
# Wraps the lines collected inside a <pre> block in a rounded box:
#
#     ╭──────────────────────╮
#     │ Input: nums = [1,2]  │
#     │ Output: 3            │
#     ╰──────────────────────╯
#
# Every content line is padded to the same width, and every run inside the
# box is re-styled onto the code background so the block reads as one
# solid panel in the terminal.
# =============================================================================

from kata_tui.rendering.styles import DisplayLine, RunStyle, StyledRun, Theme

# Box-drawing glyphs
TOP_LEFT = "╭"
TOP_RIGHT = "╮"
BOTTOM_LEFT = "╰"
BOTTOM_RIGHT = "╯"
HORIZONTAL = "─"
VERTICAL = "│"


def layout_pre_block(lines: list[DisplayLine], theme: Theme) -> list[DisplayLine]:
    """
    Frame preformatted lines in a bordered box.

    Args:
        lines: Lines collected while in preformatted mode (may contain
               zero-run lines for empty source lines).
        theme: Palette and box dimensions.

    Returns:
        Top border, one line per input line, bottom border. An empty
        block produces no output at all.
    """
    if not lines:
        return []

    content_width = max(max(line.width for line in lines), theme.min_box_width)
    box_width = content_width + 2 * theme.box_padding

    indent = " " * theme.box_indent
    border = RunStyle(fg=theme.border_color)
    background = RunStyle(bg=theme.code_background)

    boxed = [_border_line(indent + TOP_LEFT, TOP_RIGHT, box_width, border)]

    for line in lines:
        runs = [
            StyledRun(indent + VERTICAL, border),
            StyledRun(" " * theme.box_padding, background),
        ]
        runs.extend(
            StyledRun(run.text, run.style.with_background(theme.code_background))
            for run in line
        )
        fill = box_width - theme.box_padding - line.width
        runs.append(StyledRun(" " * fill, background))
        runs.append(StyledRun(VERTICAL, border))
        # Zero-width padding (box_padding = 0) never makes it into a line
        boxed.append(DisplayLine(tuple(run for run in runs if run.text)))

    boxed.append(_border_line(indent + BOTTOM_LEFT, BOTTOM_RIGHT, box_width, border))
    return boxed


def _border_line(left: str, right: str, width: int, style: RunStyle) -> DisplayLine:
    return DisplayLine((
        StyledRun(left, style),
        StyledRun(HORIZONTAL * width, style),
        StyledRun(right, style),
    ))
