# src/containerservice/cli/inspect.py
"""
Implements the `inspect` command for the containerservice CLI.
"""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..core.exceptions import DecodeError
from ..core.parser import load_cluster_resource, to_json
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)


def inspect(
    path: Annotated[
        Path,
        typer.Argument(
            help="Path to a container service definition (JSON).",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the normalized definition as JSON instead of a report."),
    ] = False,
):
    """
    Load a container service definition and describe it.
    """
    try:
        resource = load_cluster_resource(path)
    except DecodeError as e:
        logger.error(f"Invalid orchestrator in {path}: {e}")
        raise typer.Exit(code=1)
    except ValidationError as e:
        logger.error(f"{path} is not a valid container service definition: {e}")
        raise typer.Exit(code=1)
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(to_json(resource))
        return

    ConsoleReporter().report(resource)
