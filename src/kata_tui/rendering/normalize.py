# =============================================================================
# Blank Line Normalization
# =============================================================================
# Runs once over the finished line list: trims blank lines from both ends
# and squeezes each run of blank lines down to a single one. Keeping this
# as a separate pass lets the scanner emit separators freely without
# looking back at what it already produced.
# =============================================================================

from kata_tui.rendering.styles import DisplayLine


def normalize_blank_lines(lines: list[DisplayLine]) -> list[DisplayLine]:
    """
    Trim and collapse blank lines.

    Blank lines that survive are replaced by a canonical zero-run line,
    so whitespace-only runs never reach the display layer.

    Example:
        [blank, text, blank, blank, text, blank]  ->  [text, blank, text]
    """
    start = 0
    end = len(lines)
    while start < end and lines[start].is_blank:
        start += 1
    while end > start and lines[end - 1].is_blank:
        end -= 1

    result: list[DisplayLine] = []
    previous_blank = False
    for line in lines[start:end]:
        if line.is_blank:
            if not previous_blank:
                result.append(DisplayLine.blank())
            previous_blank = True
        else:
            result.append(line)
            previous_blank = False

    return result
