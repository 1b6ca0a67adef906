# src/containerservice/cli/main.py
"""
This module is the main entry point for the containerservice CLI.
"""

import logging

import typer

from ..core.config import config
from . import inspect

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="containerservice",
    help="Inspect ARM container service cluster definitions.",
    add_completion=False,
)


def _echo_version():
    from .. import __version__

    typer.echo(f"containerservice version: {__version__}")


def version_callback(value: bool):
    """
    Prints the version of containerservice.
    """
    if value:
        _echo_version()
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of containerservice.
    """
    _echo_version()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    containerservice CLI main entry point.
    """
    pass


app.command(name="inspect")(inspect.inspect)


if __name__ == "__main__":
    app()
