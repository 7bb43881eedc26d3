"""
Positional ``%n`` substitution.

Replaces ``%1``, ``%2``, ... in a template with values taken from the
remaining arguments, which may be nested lists or tuples of any depth.
"""

import re
from collections.abc import Iterable
from typing import Any


_TOKEN_PATTERN = re.compile(r"%[0-9]+")


def flatten_deep(values: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and tuples into a single list.

    Order is preserved (depth-first). Strings and every other type are
    treated as atoms.

    Example:
        >>> flatten_deep(["a", ["b", ("c", ["d"])], "e"])
        ['a', 'b', 'c', 'd', 'e']
    """
    result: list[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            result.extend(flatten_deep(value))
        else:
            result.append(value)
    return result


def substitute(template: str, *values: Any) -> str:
    """Substitute ``%n`` tokens in a template.

    ``%1`` is replaced with the first flattened value, ``%2`` with the second,
    and so on. A token whose index has no value (or whose value is None) is
    left as-is, and ``%0`` is never replaced.

    Args:
        template: The string containing ``%n`` tokens.
        *values: Replacement values; nested lists/tuples are flattened.

    Returns:
        The template with tokens replaced by ``str(value)``.

    Example:
        >>> substitute("Hello %1, you are %2", "Bob", 30)
        'Hello Bob, you are 30'
        >>> substitute("%1-%2-%3", ["a", ["b"]])
        'a-b-%3'
    """
    params = flatten_deep(values)

    def replace(match: re.Match) -> str:
        token = match.group(0)
        index = int(token[1:]) - 1
        if 0 <= index < len(params) and params[index] is not None:
            return str(params[index])
        return token

    return _TOKEN_PATTERN.sub(replace, template)
