# =============================================================================
# Problem View Widget
# =============================================================================
# Displays a problem: a title block (number, title, difficulty, solve
# status, topic tags) above the rendered description.
#
# The description is rendered once by the RenderEngine and handed to a
# Static as Rich Text. Scrolling comes for free from ScrollableContainer;
# wrapping long lines to the viewport is left to Textual.
# =============================================================================

from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Static
from rich.text import Text

from kata_tui.core import Problem
from kata_tui.rendering import RenderEngine, lines_to_text

DIFFICULTY_COLORS = {
    "Easy": "green",
    "Medium": "yellow",
    "Hard": "red",
}


def build_header(problem: Problem, show_tags: bool = True) -> Text:
    """
    Build the title block for a problem.

    Line 1: " 1. Two Sum [Easy] ✔ Solved"
    Line 2: topic tags as inverse-video chips (omitted if there are none)
    """
    header = Text(end="")
    header.append(f" {problem.display_title} ", style="bold white")

    if problem.difficulty:
        color = DIFFICULTY_COLORS.get(problem.difficulty, "white")
        header.append(f"[{problem.difficulty}]", style=f"bold {color}")

    if problem.is_solved:
        header.append(" ✔ Solved", style="green")
    elif problem.is_attempted:
        header.append(" ● Attempted", style="yellow")

    if show_tags and problem.topic_tags:
        header.append("\n ")
        for i, tag in enumerate(problem.topic_tags):
            if i:
                header.append(" ")
            header.append(f" {tag.name} ", style="black on bright_black")

    return header


class ProblemView(ScrollableContainer):
    """
    A scrollable view of one problem.

    Usage:
        >>> view = ProblemView(engine, problem=problem)
        >>> view.show_problem(other_problem)  # switch problems later
    """

    DEFAULT_CSS = """
    ProblemView {
        padding: 0 1;
    }

    ProblemView > #problem-header {
        height: auto;
        border-bottom: solid $surface-lighten-2;
        margin-bottom: 1;
    }

    ProblemView > #problem-body {
        height: auto;
    }
    """

    def __init__(
        self,
        engine: RenderEngine | None = None,
        problem: Problem | None = None,
        content_padding: int = 2,
        show_tags: bool = True,
        **kwargs,
    ) -> None:
        """
        Initialize the problem view.

        Args:
            engine: Engine used to render descriptions.
            problem: Problem to show once the widget is mounted.
            content_padding: Columns of padding before each description line.
            show_tags: Show topic tags in the header.
            **kwargs: Additional arguments passed to ScrollableContainer.
        """
        super().__init__(**kwargs)
        self.engine = engine or RenderEngine()
        self.content_padding = content_padding
        self.show_tags = show_tags
        self._problem: Problem | None = problem

    def compose(self) -> ComposeResult:
        """Compose the widget."""
        yield Static("", id="problem-header")
        yield Static("", id="problem-body")

    def on_mount(self) -> None:
        """Render the initial problem, if one was given."""
        if self._problem is not None:
            self.show_problem(self._problem)

    def show_problem(self, problem: Problem) -> None:
        """
        Display a problem.

        Args:
            problem: Problem to display.
        """
        self._problem = problem

        result = self.engine.render(problem)
        body = lines_to_text(result.lines, indent=self.content_padding)

        self.query_one("#problem-header", Static).update(build_header(problem, self.show_tags))
        self.query_one("#problem-body", Static).update(body)

        self.scroll_home(animate=False)

    @property
    def current_problem(self) -> Problem | None:
        """Get the currently displayed problem."""
        return self._problem
