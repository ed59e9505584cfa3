"""CLI entry point and execution wrapper.

Provides the main entry point used by console scripts and ``python -m``
execution, so error reporting and exit codes are identical on both paths.

Contents:
    * :func:`main` - Primary entry point for CLI execution.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_world import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Execute the CLI with exception handling.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        services_factory: Factory function that returns AppServices. Passed via ctx.obj.

    Returns:
        Exit code produced by the command.
    """
    import sys

    import click

    from .root import cli

    # lib_cli_exit_tools.run_cli cannot pass ctx.obj, so its behaviour is
    # replicated here around Click's non-standalone invocation.
    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        # Non-standalone Click returns the code of a ctx.exit() instead of raising.
        result = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return result if isinstance(result, int) else int(ExitCode.SUCCESS)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Already carries its status; Click raises it for faults it reported itself.
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        # BaseException so KeyboardInterrupt and other non-Exception faults
        # are formatted and mapped by lib_cli_exit_tools too.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI with error handling and return the exit code.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv. The
            arguments are accepted and ignored.
        services_factory: Factory function returning AppServices. Required.
            Callers outside the adapters layer should pass ``build_production``.

    Returns:
        Exit code reported by the CLI run.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from hello_world.composition import build_production
        >>> main([], services_factory=build_production)  # doctest: +SKIP
        Hello, World!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        # Shutting down from a worker thread would kill logging for the others.
        is_main_thread = threading.current_thread() is threading.main_thread()
        if is_main_thread and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
