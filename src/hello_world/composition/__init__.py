"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright verifies each adapter function
# structurally satisfies its Protocol.
if TYPE_CHECKING:
    from ..application.ports import GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Returns:
        AppServices container that reads no configuration files and leaves
        the logging runtime untouched.
    """
    from ..adapters.memory import get_config_in_memory, init_logging_in_memory

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "get_config",
    "init_logging",
    "AppServices",
    "build_production",
    "build_testing",
]
