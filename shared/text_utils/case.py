"""
Case-style conversion between camelCase and dashed-case.

The two functions undo each other for lower camelCase words without
hyphens. A leading capital or a literal hyphen in the input does not survive
a round trip:

    >>> dashed_to_camel(camel_to_dashed("fooBarABC"))
    'fooBarABC'
    >>> dashed_to_camel(camel_to_dashed("FooBar"))
    'fooBar'
"""

import re


_UPPERCASE = re.compile(r"[A-Z]")
_DASHED_LETTER = re.compile(r"-([a-z])", re.IGNORECASE)


def camel_to_dashed(text: str) -> str:
    """Convert camelCase to dashed-case, e.g. "fooBarABC" -> "foo-bar-a-b-c"."""
    dashed = _UPPERCASE.sub(lambda match: "-" + match.group(0).lower(), text)
    # strip leading dash if first char was uppercase
    return dashed[1:] if dashed.startswith("-") else dashed


def dashed_to_camel(text: str) -> str:
    """Convert dashed-case to camelCase, e.g. "foo-bar-a-b-c" -> "fooBarABC"."""
    return _DASHED_LETTER.sub(lambda match: match.group(1).upper(), text)
