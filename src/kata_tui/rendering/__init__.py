# =============================================================================
# Rendering Module
# =============================================================================
# Turns problem-description HTML into styled terminal lines.
#
# The pipeline:
#   1. markup: scan tags/entities/text, track formatting, build runs
#   2. pre_block: frame <pre> samples in a bordered box
#   3. normalize: trim and collapse blank lines
#   4. rich_output: convert lines to Rich Text for display
#
# engine.RenderEngine ties this to the Problem model (placeholders and
# caching) and is what the UI calls.
# =============================================================================

from kata_tui.rendering.engine import RenderEngine, RenderResult
from kata_tui.rendering.markup import MarkupRenderer, render_markup
from kata_tui.rendering.rich_output import line_to_text, lines_to_text
from kata_tui.rendering.styles import DisplayLine, RunStyle, StyledRun, Theme

__all__ = [
    "DisplayLine",
    "MarkupRenderer",
    "RenderEngine",
    "RenderResult",
    "RunStyle",
    "StyledRun",
    "Theme",
    "line_to_text",
    "lines_to_text",
    "render_markup",
]
