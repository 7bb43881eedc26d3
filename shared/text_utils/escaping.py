"""
Escaping utilities.

Two families live here:
- Backslash escapes: tell whether a character is escaped, find the next
  unescaped occurrence, and produce double-quoted string literals.
- HTML escapes: fixed-pattern character replacement for text nodes and
  quoted attribute values. Nothing here parses HTML.

Replacement order matters. ``&`` is always replaced first so that entities
introduced by later replacements are not escaped again, and when both HTML
contexts are requested the text context runs before the attribute context.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from textkit_logging import get_logger


logger = get_logger("textkit.escaping", component="escaping")

_LITERAL_SPECIALS = re.compile(r'([\\"])')
_NEWLINE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class EscapeOptions:
    """Which HTML contexts ``escape_for_html`` escapes for.

    Attributes:
        text: Escape for safe insertion inside an HTML text node.
        attr: Escape for safe insertion inside a quoted attribute value.
    """

    text: bool = True
    attr: bool = True


@dataclass(frozen=True)
class EscapeInfo:
    """What ``escape_for_html_with_info`` actually applied.

    Attributes:
        escaped: True if any context was applied.
        text: True if text-node escaping was applied.
        attr: True if attribute escaping was applied.
    """

    escaped: bool = False
    text: bool = False
    attr: bool = False


def is_escaped(text: str, index: int) -> bool:
    """Return True if the character at index is escaped with backslashes.

    A character is escaped when the run of backslashes directly before it has
    odd length. An index past the end of text is never escaped.
    """
    if index > len(text):
        return False

    escaped = False
    for position in range(index - 1, -1, -1):
        if text[position] != "\\":
            break
        escaped = not escaped
    return escaped


def index_of_not_escaped(text: str, char: str, start: int = 0) -> int:
    """Find the next occurrence of char that is not backslash-escaped.

    Args:
        text: The string to search.
        char: The character (or substring) to find.
        start: Position to start searching from (negative values mean 0).

    Returns:
        The index of the first unescaped occurrence, or -1.
    """
    index = text.find(char, max(start, 0))
    while index != -1:
        if not is_escaped(text, index):
            return index
        index = text.find(char, index + 1)
    return -1


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``.

    Not idempotent: escaping ``&lt;`` again yields ``&amp;lt;``.
    """
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_html_attr(text: str) -> str:
    """Escape single and double quotes."""
    return text.replace("'", "&#x27;").replace('"', "&quot;")


def _resolve_options(options: Any) -> tuple[bool, bool]:
    """Turn the loose ``options`` argument into (text, attr) flags."""
    if options is None:
        return True, True

    if isinstance(options, EscapeOptions):
        return bool(options.text), bool(options.attr)

    if isinstance(options, Mapping):
        return bool(options.get("text")), bool(options.get("attr"))

    logger.debug("Coercing escape options to a boolean", options_type=type(options).__name__)
    flag = bool(options)
    return flag, flag


def escape_for_html_with_info(text: str, options: Any = None) -> tuple[str, EscapeInfo]:
    """Escape a string for HTML and report which contexts were applied.

    Args:
        text: Input string.
        options: Contexts to escape for. Accepted forms:

            - ``None``: every context.
            - ``EscapeOptions(text=..., attr=...)``.
            - A mapping with ``"text"`` / ``"attr"`` keys; a missing or falsy
              key disables that context.
            - Anything else is converted with ``bool()`` and applied to both
              contexts. Python truthiness applies, so an empty list or
              tuple disables escaping.

    Returns:
        Tuple of (escaped_text, EscapeInfo).

    Example:
        >>> escape_for_html_with_info("a/b", {"text": True})
        ('a&#x2F;b', EscapeInfo(escaped=True, text=True, attr=False))
    """
    escape_text, escape_attr = _resolve_options(options)

    if escape_text:
        text = escape_html(text).replace("/", "&#x2F;")

    if escape_attr:
        text = escape_html_attr(text)

    info = EscapeInfo(
        escaped=escape_text or escape_attr,
        text=escape_text,
        attr=escape_attr,
    )
    return text, info


def escape_for_html(text: str, options: Any = None) -> str:
    """Escape a string for the HTML contexts selected by options.

    See ``escape_for_html_with_info`` for the accepted option forms.

    Example:
        >>> escape_for_html("<b>\\"hi\\"</b>")
        '&lt;b&gt;&quot;hi&quot;&lt;&#x2F;b&gt;'
    """
    return escape_for_html_with_info(text, options)[0]


def encode_for_quoted_html_attribute(text: str | None) -> str:
    """Encode untrusted data for a double-quoted attribute value.

    Only suited to simple attributes (value, name, class...), not to style or
    href. Falsy input yields an empty string.
    """
    return text.replace('"', "&quot;") if text else ""


def stringify(value: str) -> str:
    """Return a double-quoted literal that evaluates back to value.

    Backslashes and double quotes are escaped, and CRLF or LF line breaks
    become ``\\n``.

    Example:
        >>> print(stringify('say "hi"\\r\\n'))
        "say \\"hi\\"\\n"
    """
    body = _NEWLINE.sub(r"\\n", _LITERAL_SPECIALS.sub(r"\\\1", value))
    return f'"{body}"'
