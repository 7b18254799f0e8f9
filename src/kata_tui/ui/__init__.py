# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for Kata-TUI.
#
# Structure:
#   - screens/: Full-screen views (problem detail)
#   - widgets/: Reusable UI components (problem view)
# =============================================================================

from kata_tui.ui.screens.detail import DetailScreen
from kata_tui.ui.widgets.problem_view import ProblemView

__all__ = [
    "DetailScreen",
    "ProblemView",
]
