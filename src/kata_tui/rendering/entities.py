# =============================================================================
# HTML Entity Decoding
# =============================================================================
# Problem descriptions use a small, predictable set of entities: escaped
# angle brackets and ampersands in code, comparison operators in
# constraints, and typographic dashes in prose.
#
# Anything outside the table is handed back to the caller as "unknown" so
# it can be shown verbatim. Dropping an unfamiliar entity would silently
# corrupt the problem text.
# =============================================================================

import string

NAMED_ENTITIES: dict[str, str] = {
    "nbsp": " ",
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
    "le": "≤",
    "ge": "≥",
    "ne": "≠",
    "times": "×",
    "minus": "−",
    "mdash": "—",
    "ndash": "–",
    "hellip": "…",
}

# Highest valid Unicode code point
MAX_CODE_POINT = 0x10FFFF


def decode_entity(name: str) -> str | None:
    """
    Decode the body of an entity reference (the part between & and ;).

    Args:
        name: Entity name, e.g. "lt", "#39" or "#x2264".

    Returns:
        The decoded character, or None if the name is unknown or the
        numeric reference does not name a valid character.

    Example:
        >>> decode_entity("le")
        '≤'
        >>> decode_entity("#x41")
        'A'
        >>> decode_entity("bogus") is None
        True
    """
    if name in NAMED_ENTITIES:
        return NAMED_ENTITIES[name]

    if name.startswith("#"):
        return _decode_numeric(name[1:])

    return None


def _decode_numeric(digits: str) -> str | None:
    """Decode the digits of a numeric reference (after the '#')."""
    if digits[:1] in ("x", "X"):
        base, allowed = 16, string.hexdigits
        digits = digits[1:]
    else:
        base, allowed = 10, string.digits

    # int() would also accept signs, underscores and surrounding spaces
    if not digits or not all(c in allowed for c in digits):
        return None

    code_point = int(digits, base)

    # NUL and lone surrogates aren't displayable characters
    if code_point == 0 or code_point > MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        return None

    return chr(code_point)
