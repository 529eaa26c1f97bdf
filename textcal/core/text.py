"""Fixed-width text cell helpers.

All helpers pad with spaces and are total: any string and any non-negative
width produce a result. ``center`` puts an odd padding space on the right.
"""


def fit(text: str, width: int) -> str:
    """Truncate ``text`` to ``width`` characters, or right-align it within ``width``.

    >>> fit("31", 3)
    ' 31'
    >>> fit("Thursday", 2)
    'Th'
    """
    if len(text) >= width:
        return text[:width]
    return " " * (width - len(text)) + text


def center(text: str, width: int) -> str:
    """Center ``text`` in ``width``; the left pad is rounded down.

    Text that already fills ``width`` is returned unchanged.

    >>> center("May", 10)
    '   May    '
    """
    if len(text) >= width:
        return text
    left_pad = (width - len(text)) // 2
    right_pad = width - len(text) - left_pad
    return " " * left_pad + text + " " * right_pad


def left(text: str, width: int) -> str:
    """Left-align ``text`` by padding on the right. Never truncates."""
    return text + " " * (width - len(text))


def right(text: str, width: int) -> str:
    """Right-align ``text`` by padding on the left. Never truncates."""
    return " " * (width - len(text)) + text
