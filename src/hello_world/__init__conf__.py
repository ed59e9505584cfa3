"""Static package metadata and configuration discovery identifiers.

Contents:
    * :data:`name`, :data:`title`, :data:`version` - distribution metadata.
    * :data:`shell_command` - console script name.
    * ``LAYEREDCONF_*`` - identifiers handed to lib_layered_config.
"""

from __future__ import annotations

from typing import Final

#: Distribution name as published on the index.
name: Final[str] = "hello_world"

#: One-line description shown as the command help text.
title: Final[str] = "Print the canonical greeting and exit"

#: Keep in sync with ``[project].version`` in pyproject.toml.
version: Final[str] = "1.0.0"

#: Console script name installed by pip.
shell_command: Final[str] = "hello-world"

# Platform-specific configuration paths are derived from these identifiers:
# Linux uses the slug, macOS and Windows use vendor/app.
LAYEREDCONF_VENDOR: Final[str] = "hello-world"
LAYEREDCONF_APP: Final[str] = "Hello World"
LAYEREDCONF_SLUG: Final[str] = "hello-world"

__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "shell_command",
    "title",
    "version",
]
