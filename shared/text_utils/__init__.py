"""
Text utilities for textkit.

Stateless string helpers: substitution, trimming, escaping, padding,
chunking and case conversion. Every function is pure and safe to call from
any thread.

Usage:
    from text_utils import chunk, escape_for_html, substitute

    substitute("Hello %1, you are %2", "Bob", 30)
    # 'Hello Bob, you are 30'

    chunk("abcdefg", 3, at_beginning=True)
    # ['abc', 'def', 'g']

    escape_for_html("<a href='x'>", {"text": True})
    # "&lt;a href='x'&gt;"

Functions that accept loose input (``chunk``, ``trim``) return a sentinel
for the wrong type. All others expect ``str`` arguments and raise whatever
Python raises otherwise.
"""

from .case import camel_to_dashed, dashed_to_camel
from .chunking import chunk
from .escaping import (
    EscapeInfo,
    EscapeOptions,
    encode_for_quoted_html_attribute,
    escape_for_html,
    escape_for_html_with_info,
    escape_html,
    escape_html_attr,
    index_of_not_escaped,
    is_escaped,
    stringify,
)
from .formatting import capitalize, crop, ends_with, pad, strip_accents, wrap
from .substitution import flatten_deep, substitute
from .whitespace import next_white_space, trim


__all__ = [
    "EscapeInfo",
    "EscapeOptions",
    "camel_to_dashed",
    "capitalize",
    "chunk",
    "crop",
    "dashed_to_camel",
    "encode_for_quoted_html_attribute",
    "ends_with",
    "escape_for_html",
    "escape_for_html_with_info",
    "escape_html",
    "escape_html_attr",
    "flatten_deep",
    "index_of_not_escaped",
    "is_escaped",
    "next_white_space",
    "pad",
    "stringify",
    "strip_accents",
    "substitute",
    "trim",
    "wrap",
]
