# =============================================================================
# Kata-TUI Entry Point for `python -m kata_tui`
# =============================================================================
# This module allows Kata-TUI to be run as a Python module:
#
#   python -m kata_tui problem.json
#
# This is equivalent to running the 'kata-tui' command after installation.
# =============================================================================

import sys

from kata_tui.app import main

if __name__ == "__main__":
    sys.exit(main())
