"""POSIX-conventional exit codes for the CLI boundary.

:attr:`ExitCode.SUCCESS` is produced by normal operation and
:attr:`ExitCode.BROKEN_PIPE` when the reader of standard output has gone
away. Other faults are mapped by ``lib_cli_exit_tools``.

Contents:
    * :class:`ExitCode` — IntEnum of exit codes known to this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes.

    * 0: success
    * 128+N: terminated by signal N (SIGPIPE is 13)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.BROKEN_PIPE)
        141
    """

    SUCCESS = 0
    BROKEN_PIPE = 141


__all__ = ["ExitCode"]
