"""Text helpers for user-entered fields."""

import re

# Unicode whitespace plus the byte order mark, which str.strip() keeps
_EDGE_WHITESPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(value: str) -> str:
    """
    Remove leading and trailing whitespace, including U+FEFF.

    Example:
        >>> trim("\\ufeff  notes \\n")
        'notes'
    """
    return _EDGE_WHITESPACE.sub("", value)
