"""Public package surface exposing the greeting and configuration.

Routes imports through the architectural layers:
- Domain exports: the canonical greeting
- Composition exports: wired configuration loader
"""

from __future__ import annotations

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)

__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
    "get_config",
]
