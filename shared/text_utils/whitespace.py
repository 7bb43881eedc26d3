"""
Whitespace helpers: trimming and forward whitespace search.
"""

import re
from typing import Any

from textkit_logging import get_logger


logger = get_logger("textkit.whitespace", component="whitespace")

# Whitespace as JavaScript's \s defines it. Python's \s also matches
# \x1c-\x1f and \x85, which are kept here.
_WHITESPACE_CLASS = (
    r"\t\n\v\f\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_TRIM_PATTERN = re.compile(rf"^[{_WHITESPACE_CLASS}]+|[{_WHITESPACE_CLASS}]+$")
_WHITESPACE = re.compile(rf"[{_WHITESPACE_CLASS}]")


def trim(value: Any) -> Any:
    """Remove leading and trailing whitespace.

    Whitespace follows the JavaScript definition: ASCII spaces, tabs and line
    breaks, the Unicode space separators, U+FEFF (BOM) and U+00A0 (no-break
    space). The information separators U+001C-U+001F and U+0085 are kept.
    Non-string input is returned unmodified.
    """
    if not isinstance(value, str):
        logger.debug("trim received non-string input", input_type=type(value).__name__)
        return value
    return _TRIM_PATTERN.sub("", value)


def next_white_space(
    text: str,
    start: int,
    end: int,
    matcher: re.Pattern | str | None = None,
) -> int:
    """Find the next whitespace character between start and end.

    Args:
        text: The string to search.
        start: First position to test (included).
        end: Position at which the search stops (excluded).
        matcher: Pattern deciding what counts as whitespace, tested against
            each single character. Defaults to the same whitespace set as
            ``trim``.

    Returns:
        The index of the first matching character, or -1 if none is found.
    """
    pattern = _WHITESPACE if matcher is None else re.compile(matcher)
    for position in range(max(start, 0), min(end, len(text))):
        if pattern.search(text[position]):
            return position
    return -1
