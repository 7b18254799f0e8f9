# =============================================================================
# Detail Screen
# =============================================================================
# Full-screen view of a single problem description.
#
# Keybindings mirror a pager:
#   - j/k or arrows: scroll one line
#   - d/u: scroll half a page
#   - g/G: jump to top/bottom
#   - b/Escape: go back
# =============================================================================

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer

from kata_tui.core import Problem
from kata_tui.rendering import RenderEngine
from kata_tui.ui.widgets.problem_view import ProblemView


class DetailScreen(Screen):
    """
    Screen showing one problem.

    Attributes:
        problem: The problem being displayed.
    """

    BINDINGS = [
        Binding("j", "scroll_lines(1)", "Down", show=False),
        Binding("k", "scroll_lines(-1)", "Up", show=False),
        Binding("down", "scroll_lines(1)", "Down", show=False),
        Binding("up", "scroll_lines(-1)", "Up", show=False),
        Binding("d", "half_page(1)", "Half page"),
        Binding("u", "half_page(-1)", "Half page up", show=False),
        Binding("g", "top", "Top", show=False),
        Binding("G", "bottom", "Bottom", show=False),
        Binding("b", "back", "Back"),
        Binding("escape", "back", "Back", show=False),
    ]

    AUTO_FOCUS = "#problem-view"

    CSS = """
    #problem-view {
        height: 1fr;
    }
    """

    def __init__(
        self,
        problem: Problem,
        engine: RenderEngine | None = None,
        content_padding: int = 2,
        show_tags: bool = True,
    ) -> None:
        """
        Initialize the detail screen.

        Args:
            problem: Problem to display.
            engine: Shared rendering engine.
            content_padding: Left padding for description lines.
            show_tags: Show topic tags in the header.
        """
        super().__init__()
        self.problem = problem
        self._engine = engine
        self._content_padding = content_padding
        self._show_tags = show_tags

    def compose(self) -> ComposeResult:
        yield ProblemView(
            self._engine,
            problem=self.problem,
            content_padding=self._content_padding,
            show_tags=self._show_tags,
            id="problem-view",
        )
        yield Footer()

    @property
    def view(self) -> ProblemView:
        return self.query_one("#problem-view", ProblemView)

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_scroll_lines(self, delta: int) -> None:
        """Scroll by a number of lines (negative scrolls up)."""
        self.view.scroll_relative(y=delta, animate=False)

    def action_half_page(self, direction: int) -> None:
        """Scroll half a page up or down."""
        step = max(self.view.scrollable_content_region.height // 2, 1)
        self.view.scroll_relative(y=direction * step, animate=False)

    def action_top(self) -> None:
        self.view.scroll_home(animate=False)

    def action_bottom(self) -> None:
        self.view.scroll_end(animate=False)

    def action_back(self) -> None:
        """Go back, or quit if this is the only screen."""
        if len(self.app.screen_stack) > 2:
            self.app.pop_screen()
        else:
            self.app.exit()
