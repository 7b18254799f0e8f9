# =============================================================================
# Kata-TUI Core Module
# =============================================================================
# Core domain models. These are plain dataclasses with no dependencies on
# the UI or rendering layers, so they can be imported from anywhere.
#
#   - Problem: A coding problem with its HTML description and metadata
#   - TopicTag: A topic label attached to a problem
# =============================================================================

from kata_tui.core.problem import Problem, ProblemError, TopicTag

__all__ = [
    "Problem",
    "ProblemError",
    "TopicTag",
]
