"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

CANONICAL_GREETING = "Hello, World!"


def build_greeting() -> str:
    """Return the canonical greeting string.

    The value is a constant; nothing alters it between program start and
    the single write to standard output.

    Returns:
        The canonical greeting string, without a line terminator.

    Example:
        >>> build_greeting()
        'Hello, World!'
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
