# =============================================================================
# UI Widgets
# =============================================================================
# Reusable UI components for Kata-TUI:
#   - ProblemView: Title block plus rendered, scrollable description
# =============================================================================

from kata_tui.ui.widgets.problem_view import ProblemView, build_header

__all__ = ["ProblemView", "build_header"]
