"""The greeter command.

A single Click command with no options: every argument is accepted and
ignored, the greeting goes to standard output and the command returns.

Contents:
    * :func:`cli` - Root command emitting the canonical greeting.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click

from hello_world import __init__conf__
from hello_world.domain.behaviors import build_greeting

from .constants import CLICK_CONTEXT_SETTINGS
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from hello_world.composition import AppServices

logger = logging.getLogger(__name__)


def _start_logging(services: AppServices) -> None:
    """Load configuration and start the logging runtime.

    Configuration and logging are diagnostics only. When either fails the
    reason is reported on stderr and the command carries on unlogged.
    """
    try:
        services.init_logging(services.get_config())
    except Exception as exc:  # noqa: BLE001
        click.echo(f"{__init__conf__.shell_command}: logging disabled: {exc}", err=True)


def _log_scope() -> AbstractContextManager[object]:
    """Bind the command context when the logging runtime is live."""
    if lib_log_rich.runtime.is_initialised():
        return lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"})
    return contextlib.nullcontext()


def _silence_stdout() -> None:
    """Point the stdout descriptor at devnull so the shutdown flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    add_help_option=False,  # --help would change the output
)
@click.argument("ignored", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, ignored: tuple[str, ...]) -> None:
    """Write the canonical greeting to standard output.

    Starts logging through the services factory stored in ``ctx.obj``, then
    echoes the greeting. Arguments, configuration and environment never
    change the output. A reader that has gone away ends the command with
    :attr:`ExitCode.BROKEN_PIPE`.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_world.composition import build_production
        >>> result = CliRunner().invoke(cli, ["--help"], obj=build_production)
        >>> result.exit_code
        0
        >>> result.stdout
        'Hello, World!\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    _start_logging(services)

    with _log_scope():
        if ignored:
            logger.debug("Ignoring %d command-line argument(s)", len(ignored))
        logger.info("Emitting greeting")
        try:
            click.echo(build_greeting())
        except BrokenPipeError:
            _silence_stdout()
            ctx.exit(int(ExitCode.BROKEN_PIPE))


__all__ = ["cli"]
