"""
rpcstub CLI Utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform

import typer

from rpcstub._version import __version__

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"rpcstub {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Enable DEBUG logging to stderr when verbose.

    Without it, warnings still reach stderr through logging's last-resort handler.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, force=True)
