# =============================================================================
# Rendering Engine
# =============================================================================
# Turns a Problem into the lines shown in the detail view.
#
# This is the entry point the UI uses. It:
#   - Substitutes placeholder lines when there is nothing to render
#     (premium problems, missing descriptions)
#   - Runs the markup renderer with the configured theme
#   - Caches results so revisiting a problem doesn't re-render it
# =============================================================================

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kata_tui.rendering.markup import MarkupRenderer
from kata_tui.rendering.styles import DisplayLine, RunStyle, StyledRun, Theme

if TYPE_CHECKING:
    from kata_tui.config import RenderingConfig
    from kata_tui.core import Problem

logger = logging.getLogger(__name__)

PREMIUM_PLACEHOLDER = "Premium content - not available without authentication."
EMPTY_PLACEHOLDER = "No content available."

PREMIUM_COLOR = "yellow"
EMPTY_COLOR = "bright_black"

# Problems kept rendered; the least recently viewed is dropped first
CACHE_SIZE = 64


@dataclass
class RenderResult:
    """
    Result of rendering a problem description.

    Attributes:
        lines: Display lines, ready for the display layer.
        cached: Whether this result came from cache.
        placeholder: True if the lines are a stand-in message rather than
                     rendered content.
    """
    lines: list[DisplayLine] = field(default_factory=list)
    cached: bool = False
    placeholder: bool = False


class RenderEngine:
    """
    Renders problem descriptions with caching and placeholders.

    Usage:
        >>> engine = RenderEngine(config.rendering)
        >>> result = engine.render(problem)
        >>> text = lines_to_text(result.lines, indent=2)

    Attributes:
        theme: Theme passed to the markup renderer.
    """

    def __init__(self, config: "RenderingConfig | None" = None) -> None:
        """
        Initialize the rendering engine.

        Args:
            config: Rendering configuration. Defaults to the built-in theme.
        """
        self.theme = config.to_theme() if config is not None else Theme()
        self._renderer = MarkupRenderer(self.theme)
        self._cache: OrderedDict[tuple[str, str], list[DisplayLine]] = OrderedDict()

    def render(self, problem: "Problem") -> RenderResult:
        """
        Render a problem's description.

        Args:
            problem: Problem to render.

        Returns:
            RenderResult with the description lines, or a single
            placeholder line if there is no description.
        """
        if not problem.has_content:
            if problem.is_paid_only:
                return self._placeholder(PREMIUM_PLACEHOLDER, PREMIUM_COLOR)
            return self._placeholder(EMPTY_PLACEHOLDER, EMPTY_COLOR)

        key = (problem.title_slug or problem.title, problem.content)
        if key in self._cache:
            self._cache.move_to_end(key)
            return RenderResult(lines=list(self._cache[key]), cached=True)

        lines = self._renderer.render(problem.content)
        self._cache[key] = lines
        if len(self._cache) > CACHE_SIZE:
            self._cache.popitem(last=False)
        logger.debug(f"Rendered '{problem.title}' ({len(lines)} lines)")

        # Callers may mutate the list they get back
        return RenderResult(lines=list(lines))

    def clear_cache(self) -> None:
        """Clear the rendering cache."""
        self._cache.clear()

    def _placeholder(self, message: str, color: str) -> RenderResult:
        line = DisplayLine((StyledRun(message, RunStyle(fg=color)),))
        return RenderResult(lines=[line], placeholder=True)
