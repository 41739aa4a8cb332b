"""
rpcstub CLI - Entry point.

Commands:
- render: Print the client for one service
- generate: Write clients for every service in a file or directory
- check: Validate descriptors without writing anything
"""

from __future__ import annotations

import sys

import typer

from rpcstub.cli.stubs import check_command, generate_command, render_command
from rpcstub.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""rpcstub - RPC client stub generator

Renders service descriptors (TOML or JSON) into Java client classes that
forward every call to a generic call handler.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
) -> None:
    """rpcstub CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="render")(render_command)
app.command(name="generate")(generate_command)
app.command(name="check")(check_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
