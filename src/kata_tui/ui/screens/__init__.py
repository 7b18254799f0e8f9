# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for Kata-TUI:
#   - DetailScreen: A single problem description
# =============================================================================

from kata_tui.ui.screens.detail import DetailScreen

__all__ = ["DetailScreen"]
