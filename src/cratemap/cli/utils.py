"""
CLI Utilities - Shared helper functions for command line operations.

Formatted status lines, logging setup, the JSON envelope used by ``--json``
modes, and the graph loading every command starts with.
"""

import json
import logging
from typing import Any, Dict, Optional

import click

from ..config import ViewerSettings, load_settings
from ..core.types import RawGraph
from ..shell.loader import fetch_graph


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def setup_logging(verbose: bool) -> None:
    """Configure root logging once for the whole CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def json_envelope(data: Any = None, error: Optional[str] = None) -> str:
    """Wrap command output as ``{"meta": {"status"}, "data"|"error"}``."""
    payload: Dict[str, Any]
    if error is not None:
        payload = {"meta": {"status": "error"}, "error": {"message": error}}
    else:
        payload = {"meta": {"status": "success"}, "data": data}
    return json.dumps(payload, indent=2)


def load_raw_graph(source: str, timeout: float, json_mode: bool = False) -> Optional[RawGraph]:
    """
    Load the graph document for a command, reporting failures.

    Args:
        source (str): Path, directory or URL of the graph document.
        timeout (float): Fetch timeout in seconds.
        json_mode (bool): Report failures as a JSON envelope on stdout
            instead of a styled message on stderr.

    Returns:
        Optional[RawGraph]: The graph, or None if it could not be loaded.
    """
    result = fetch_graph(source, timeout=timeout)
    if result.is_ok():
        return result.unwrap()

    error = result.unwrap_err()
    if json_mode:
        click.echo(json_envelope(error=str(error)))
    else:
        echo_error(f"Failed to load graph: {error}")
        click.echo("Run the crate analyzer first, or pass the path/URL of its output.")
    return None


def get_settings(ctx: click.Context) -> ViewerSettings:
    """Settings loaded by the group, or fresh ones when a command runs alone."""
    if isinstance(ctx.obj, ViewerSettings):
        return ctx.obj
    return load_settings()
