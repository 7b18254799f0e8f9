# =============================================================================
# Markup Renderer
# =============================================================================
# Converts the restricted HTML used in problem descriptions into styled
# display lines.
#
# This is deliberately not a general HTML parser. The content service emits
# a small, known vocabulary (emphasis, inline code, <pre> samples,
# paragraphs, lists, line breaks) and we recognise exactly that. Anything
# else is skipped rather than rejected, since a failed render would blank
# out the whole detail view.
#
# The pipeline is a single left-to-right pass:
#   1. Scan characters into tags, entities and literal text
#   2. Track formatting state (bold, italic, code, pre, list depth)
#   3. Flush pending text into styled runs whenever the style changes
#   4. Frame <pre> content in a bordered box when the block closes
#   5. Trim and collapse blank lines once the scan is done
# =============================================================================

import logging
from dataclasses import dataclass, field

from kata_tui.rendering.entities import decode_entity
from kata_tui.rendering.normalize import normalize_blank_lines
from kata_tui.rendering.pre_block import layout_pre_block
from kata_tui.rendering.styles import DisplayLine, RunStyle, StyledRun, Theme

logger = logging.getLogger(__name__)

# Tags that share a handler with another tag
TAG_ALIASES = {
    "b": "strong",
    "i": "em",
    "ol": "ul",
}

# Folded into a single space outside <pre>
COLLAPSIBLE_WHITESPACE = "\t\n\r"


@dataclass
class FormattingState:
    """
    Live formatting context for one render call.

    Attributes:
        bold: Inside <strong>/<b>.
        italic: Inside <em>/<i>.
        code: Inside inline <code> (never set while preformatted).
        pre: Inside a <pre> block.
        list_depth: Number of open <ul>/<ol> tags, never negative.
        buffer: Text fragments waiting to be flushed into a run.
    """
    bold: bool = False
    italic: bool = False
    code: bool = False
    pre: bool = False
    list_depth: int = 0
    buffer: list[str] = field(default_factory=list)


def resolve_style(state: FormattingState, theme: Theme) -> RunStyle:
    """
    Compute the style for text flushed under the given state.

    Inline code keeps its own colors even inside emphasis. Code boxes
    ignore emphasis and code styling, except that bold picks up an accent
    color.
    """
    if state.code and not state.pre:
        return RunStyle(
            fg=theme.code_color,
            bg=theme.code_background,
            bold=state.bold,
            italic=state.italic,
        )

    if state.pre:
        if state.bold:
            return RunStyle(fg=theme.pre_accent_color, bold=True)
        return RunStyle(fg=theme.text_color)

    if state.bold:
        fg = theme.emphasis_color
    elif state.italic:
        fg = theme.italic_color
    else:
        fg = theme.text_color
    return RunStyle(fg=fg, bold=state.bold, italic=state.italic)


class CharStream:
    """Forward-only cursor over a string with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self) -> str | None:
        """Return the next character without consuming it."""
        if self.at_end:
            return None
        return self._text[self._pos]

    def next(self) -> str | None:
        """Consume and return the next character."""
        ch = self.peek()
        if ch is not None:
            self._pos += 1
        return ch

    def read_through(self, stop: str) -> str:
        """
        Consume up to and including `stop`, returning the text before it.

        Reads to the end of input if `stop` never appears.
        """
        end = self._text.find(stop, self._pos)
        if end == -1:
            chunk = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            chunk = self._text[self._pos:end]
            self._pos = end + len(stop)
        return chunk


class MarkupRenderer:
    """
    Renders problem-description HTML into display lines.

    A renderer holds only its theme; each call to render() works on its
    own private state, so one instance can be shared freely, including
    across threads.

    Usage:
        >>> renderer = MarkupRenderer()
        >>> lines = renderer.render("<p>Return <code>true</code>.</p>")
        >>> lines[0].text
        'Return true.'
    """

    def __init__(self, theme: Theme | None = None) -> None:
        """
        Initialize the renderer.

        Args:
            theme: Palette and layout settings. Defaults to Theme().
        """
        self.theme = theme or Theme()

    def render(self, markup: str) -> list[DisplayLine]:
        """
        Render markup into display lines.

        Never raises: unknown tags are ignored, unknown entities are kept
        verbatim, and unclosed tags are closed at end of input.

        Args:
            markup: HTML fragment to render.

        Returns:
            Lines with no leading/trailing blank lines and no two blank
            lines in a row.
        """
        if not markup:
            return []

        lines = _RenderPass(self.theme).run(markup)
        logger.debug(f"Rendered {len(markup)} chars of markup into {len(lines)} lines")
        return lines


def render_markup(markup: str, theme: Theme | None = None) -> list[DisplayLine]:
    """Render markup with a one-off renderer."""
    return MarkupRenderer(theme).render(markup)


class _RenderPass:
    """State and tag handlers for a single render call."""

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self.state = FormattingState()
        self.lines: list[DisplayLine] = []
        self.current: list[StyledRun] = []
        self.pre_lines: list[DisplayLine] = []
        # The newline right after <pre> belongs to the markup, not the code
        self.skip_newline = False
        self.bullet_run: StyledRun | None = None

    def run(self, markup: str) -> list[DisplayLine]:
        stream = CharStream(markup)

        while not stream.at_end:
            ch = stream.next()
            if ch == "<":
                self._read_tag(stream)
            elif ch == "&":
                self._read_entity(stream)
            else:
                self._add_char(ch)

        # End of input closes whatever is still open
        if self.state.pre:
            self._close_pre()
        self._end_line()

        return normalize_blank_lines(self.lines)

    # =========================================================================
    # Scanning
    # =========================================================================

    def _read_tag(self, stream: CharStream) -> None:
        """Consume a tag through its '>' and dispatch on its name."""
        raw = stream.read_through(">").lower()
        closing = raw.startswith("/")
        words = raw.lstrip("/").split()
        if not words:
            return

        # Self-closing forms like <br/>
        name = words[0].rstrip("/")
        name = TAG_ALIASES.get(name, name)

        handler = getattr(self, f"_tag_{name}", None)
        if handler is None:
            return
        handler(closing)

    def _read_entity(self, stream: CharStream) -> None:
        """Consume an entity reference after its '&'."""
        chars: list[str] = []
        terminated = False

        while not stream.at_end:
            ch = stream.peek()
            if ch == ";":
                stream.next()
                terminated = True
                break
            if ch == "<" or ch.isspace():
                break
            chars.append(ch)
            stream.next()

        name = "".join(chars)
        # Any entity is text, so a later newline in <pre> is a real line break
        if self.state.pre:
            self.skip_newline = False

        if not terminated:
            # Malformed: a bare '&' in prose, e.g. "AT&T"
            self.state.buffer.append("&" + name)
            return

        decoded = decode_entity(name)
        if decoded is None:
            logger.debug(f"Passing through unknown entity &{name};")
            self.state.buffer.append(f"&{name};")
        else:
            self.state.buffer.append(decoded)

    def _add_char(self, ch: str) -> None:
        """Handle one literal character."""
        buffer = self.state.buffer

        if self.state.pre:
            if ch == "\r":
                return
            if ch == "\n":
                if self.skip_newline:
                    self.skip_newline = False
                else:
                    self._end_pre_line()
                return
            self.skip_newline = False
            if ch == "\t":
                buffer.append(" " * self.theme.tab_width)
            else:
                buffer.append(ch)
            return

        if ch in COLLAPSIBLE_WHITESPACE:
            if self._accepts_space():
                buffer.append(" ")
            return

        buffer.append(ch)

    def _accepts_space(self) -> bool:
        """True if the current line has text not already ending in whitespace."""
        if self.state.buffer:
            last = self.state.buffer[-1]
        elif self.current:
            last = self.current[-1].text
        else:
            return False
        return not last[-1].isspace()

    # =========================================================================
    # Run and Line Accumulation
    # =========================================================================

    def _flush(self) -> None:
        """Turn pending text into a run styled by the current state."""
        if not self.state.buffer:
            return
        text = "".join(self.state.buffer)
        self.state.buffer.clear()
        if text:
            self.current.append(StyledRun(text, resolve_style(self.state, self.theme)))

    def _has_content(self) -> bool:
        return bool(self.state.buffer or self.current)

    def _end_line(self) -> None:
        """Close the current display line, if it has anything on it."""
        self._flush()
        if self.current:
            self.lines.append(DisplayLine(tuple(self.current)))
            self.current = []

    def _ensure_separator(self) -> None:
        """Make sure a blank line separates what follows from prior content."""
        self._end_line()
        if self.lines and not self.lines[-1].is_blank:
            self.lines.append(DisplayLine.blank())

    def _end_pre_line(self) -> None:
        """Close the current line of a code block (empty lines count)."""
        self._flush()
        self.pre_lines.append(DisplayLine(tuple(self.current)))
        self.current = []

    def _close_pre(self) -> None:
        self._flush()
        if self.current:
            self._end_pre_line()
        self.state.pre = False
        self.skip_newline = False
        self.lines.extend(layout_pre_block(self.pre_lines, self.theme))
        self.pre_lines = []

    # =========================================================================
    # Tag Handlers
    # =========================================================================
    # Each handler receives closing=True for </tag>. Tags without a handler
    # (div, span, sup, sub, a, img, ...) leave the state untouched.

    def _tag_strong(self, closing: bool) -> None:
        self._flush()
        self.state.bold = not closing

    def _tag_em(self, closing: bool) -> None:
        self._flush()
        self.state.italic = not closing

    def _tag_code(self, closing: bool) -> None:
        self._flush()
        # <pre><code> is a code box, not inline code
        if not self.state.pre:
            self.state.code = not closing

    def _tag_pre(self, closing: bool) -> None:
        if closing:
            if self.state.pre:
                self._close_pre()
            return

        if self.state.pre:
            return
        self._end_line()
        self.state.pre = True
        self.skip_newline = True

    def _tag_p(self, closing: bool) -> None:
        if self.state.pre:
            return
        if closing:
            self._end_line()
        elif self._bullet_only():
            # <li><p>text</p></li> keeps the text next to its bullet
            return
        else:
            self._ensure_separator()

    def _tag_br(self, closing: bool) -> None:
        if self.state.pre:
            self._end_pre_line()
        elif self._has_content():
            self._end_line()
        else:
            self.lines.append(DisplayLine.blank())

    def _tag_ul(self, closing: bool) -> None:
        if closing:
            self.state.list_depth = max(self.state.list_depth - 1, 0)
        else:
            self.state.list_depth += 1

    def _tag_li(self, closing: bool) -> None:
        if self.state.pre:
            return
        self._end_line()
        if closing:
            return

        nesting = max(self.state.list_depth - 1, 0)
        indent = " " * (self.theme.list_indent * (nesting + 1))
        self.bullet_run = StyledRun(
            f"{indent}{self.theme.bullet} ", RunStyle(fg=self.theme.bullet_color)
        )
        self.current.append(self.bullet_run)

    def _bullet_only(self) -> bool:
        """True if the current line holds nothing but a list bullet."""
        return (
            not self.state.buffer
            and len(self.current) == 1
            and self.current[0] is self.bullet_run
        )
