"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading with lib_layered_config
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory test doubles for the ports
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
