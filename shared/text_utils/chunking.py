"""
Text chunking utilities.

Splits a string into consecutive pieces whose lengths are either uniform or
given one by one. Joining the pieces always gives back the original string.
"""

from collections.abc import Sequence
from typing import Any

from textkit_logging import get_logger


logger = get_logger("textkit.chunking", component="chunking")


def chunk(text: Any, size: int | Sequence[int], at_beginning: bool = False) -> list[str] | None:
    """Split a string into a list of chunks.

    Args:
        text: String to split. Any other type yields None.
        size: Either a number, giving every chunk the same length except one
            shorter chunk at the far end, or a sequence of numbers giving the
            length of each chunk in turn. When the sequence is exhausted the
            rest of the string becomes one last chunk.
        at_beginning: Cut chunks starting from the left. By default chunks are
            cut from the right, so the short chunk ends up first.

    Returns:
        The list of chunks in left-to-right order. ``"".join(result)`` always
        equals ``text``. An empty string gives ``[""]``.

    Example:
        >>> chunk("abcdefg", 3, True)
        ['abc', 'def', 'g']
        >>> chunk("abcdefg", 3)
        ['a', 'bcd', 'efg']
        >>> chunk("abcdefg", [1, 2], True)
        ['a', 'bc', 'defg']
        >>> chunk("abcdefg", [1, 2])
        ['abcd', 'ef', 'g']
    """
    if not isinstance(text, str):
        logger.debug("chunk received non-string input", input_type=type(text).__name__)
        return None
    if not text:
        return [text]

    if isinstance(size, Sequence):
        return _chunk_sequence(text, size, at_beginning)
    return _chunk_number(text, size, at_beginning)


def _chunk_number(text: str, size: int, at_beginning: bool) -> list[str]:
    """Chunk on a uniform length."""
    length = len(text)

    if size < 1 or size >= length:
        return [text]
    if size == 1:
        return list(text)

    if at_beginning:
        return [text[start : start + size] for start in range(0, length, size)]

    result = [text[max(0, end - size) : end] for end in range(length, 0, -size)]
    result.reverse()
    return result


def _chunk_sequence(text: str, sizes: Sequence[int], at_beginning: bool) -> list[str]:
    """Chunk on a list of lengths, the first one being for the first chunk cut."""
    result = []
    length = len(text)

    if at_beginning:
        start = 0
        for size in sizes:
            result.append(text[start : start + size])
            start += size
            if start >= length:
                break

        if start < length:
            # sizes exhausted before the end of the string
            result.append(text[start:])
        return result

    end = length
    for size in sizes:
        result.append(text[max(0, end - size) : end])
        end -= size
        if end <= 0:
            break

    if end > 0:
        # sizes exhausted before the start of the string
        result.append(text[:end])

    result.reverse()
    return result
