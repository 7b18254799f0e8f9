# =============================================================================
# Kata-TUI: Coding Problems in Your Terminal
# =============================================================================
#
# Kata-TUI renders coding-problem descriptions - the HTML the problem site
# serves - as styled terminal text: emphasis, inline code, bulleted lists,
# and example blocks framed in boxes.
#
# Features:
#   - Single-pass, never-failing renderer for the site's HTML dialect
#   - Textual detail view with pager-style scrolling
#   - Plain output mode for piping into other tools
#   - XDG Base Directory compliant configuration
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "kata-tui"

# Main entry point - this is what gets called by the 'kata-tui' command
from kata_tui.app import main

__all__ = ["main", "__version__", "__app_name__"]
