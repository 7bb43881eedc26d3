"""
Small formatting helpers: accents, capitalization, padding, cropping,
suffix test and wrapping.
"""

import re
from typing import Any


# Accented vowels of the fixed table, matched case-insensitively
_ACCENTS = (
    (re.compile("[àâä]", re.IGNORECASE), "a"),
    (re.compile("[éèêë]", re.IGNORECASE), "e"),
    (re.compile("[îï]", re.IGNORECASE), "i"),
    (re.compile("[ôö]", re.IGNORECASE), "o"),
    (re.compile("[ùûü]", re.IGNORECASE), "u"),
)


def strip_accents(text: str) -> str:
    """Remove accents from French-style accented vowels.

    Upper- and lowercase accented letters both map to the lowercase plain
    vowel. Any other character, including other accented letters, is kept.

    Example:
        >>> strip_accents("Élève à l'école")
        "eleve a l'ecole"
    """
    for pattern, replacement in _ACCENTS:
        text = pattern.sub(replacement, text)
    return text


def capitalize(text: str) -> str:
    """Uppercase the first character; the rest is left untouched."""
    return text[:1].upper() + text[1:]


def ends_with(text: str, suffix: str) -> bool:
    """Tell if text ends exactly with suffix. An empty suffix always matches."""
    return text.endswith(suffix)


def wrap(text: str, wrapper: str) -> str:
    """Put wrapper before and after text."""
    return wrapper + text + wrapper


def pad(value: Any, size: int, character: str, at_beginning: bool = False) -> str:
    """Pad a value's string form up to a minimum length.

    Args:
        value: Anything; it is converted with ``str()`` first.
        size: Minimum length of the result.
        character: Fill string, repeated once per missing character.
        at_beginning: Prepend the padding instead of appending it.

    Returns:
        The padded string, or the plain string if it is already long enough.
    """
    string = str(value)
    missing = size - len(string)
    if missing <= 0:
        return string

    padding = character * missing
    return padding + string if at_beginning else string + padding


def crop(text: str, size: int, character: str, at_beginning: bool = False) -> str:
    """Remove consecutive occurrences of character from one end of text.

    Works like a one-sided trim for an arbitrary character. Cropping stops at
    the first other character, or before the result gets shorter than size.

    Args:
        text: String to crop.
        size: Minimum length of the result.
        character: Character to remove.
        at_beginning: Crop from the start instead of the end.
    """
    if at_beginning:
        start = 0
        while start < len(text) - size and text[start] == character:
            start += 1
        return text[start:]

    end = len(text) - 1
    while end >= size and text[end] == character:
        end -= 1
    return text[: end + 1]
