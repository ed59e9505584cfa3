"""Domain layer - pure logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The canonical greeting
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)

__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
