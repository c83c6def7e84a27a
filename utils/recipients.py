"""Recipient list parsing for email dispatch."""

from typing import List

from utils.text import trim


def parse_recipients(raw: str) -> List[str]:
    """
    Parse comma-separated recipient text into a list of addresses.

    Each piece is trimmed with utils.text.trim; empty pieces and pieces
    without "@" are dropped. Order and duplicates are preserved as typed.

    Example:
        >>> parse_recipients("a@x.com, , bad, b@y.com")
        ['a@x.com', 'b@y.com']
    """
    pieces = (trim(piece) for piece in raw.split(","))
    return [piece for piece in pieces if piece and "@" in piece]
