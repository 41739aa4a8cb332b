"""
rpcstub CLI Package.

- main.py: Typer application and entry point
- stubs.py: render / generate / check commands
- utils.py: Shared utilities
"""

from rpcstub.cli.main import app, main
from rpcstub.cli.utils import version_callback

__all__ = [
    "app",
    "main",
    "version_callback",
]
