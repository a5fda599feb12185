"""
Serve Command - Run the interactive viewer.

Starts the HTTP viewer around a session. A graph that fails to load is
reported but does not stop the server; the page stays empty until a
successful reload.
"""

import logging

import click
import uvicorn

from ...graph.layout import LayoutOptions
from ...shell.loader import fetch_graph
from ...shell.server import create_app
from ...shell.session import GraphSession
from ..utils import echo_info, echo_success, echo_warning, get_settings

logger = logging.getLogger(__name__)


@click.command()
@click.argument("source", required=False)
@click.option("--host", default=None, help="Interface to bind (overrides settings)")
@click.option("--port", type=int, default=None, help="Port to bind (overrides settings)")
@click.pass_context
def serve(ctx: click.Context, source: str | None, host: str | None, port: int | None):
    """
    Serve the interactive graph viewer.

    SOURCE is fetched once at startup and again on every POST /api/reload.
    """
    settings = get_settings(ctx)
    source = source or settings.source
    host = host or settings.server.host
    port = port if port is not None else settings.server.port

    session = GraphSession(layout=LayoutOptions.from_settings(settings.layout))

    result = fetch_graph(source, timeout=settings.request_timeout)
    if result.is_ok():
        graph = session.load(result.unwrap())
        echo_success(f"Loaded {graph.node_count} nodes, {graph.edge_count} edges from {source}")
    else:
        error = result.unwrap_err()
        session.record_error(str(error))
        echo_warning(f"Could not load graph: {error}")
        echo_info("The viewer will start empty; POST /api/reload to retry.")

    app = create_app(session, source=source, timeout=settings.request_timeout)

    click.echo(f"🌐 Viewer at http://{host}:{port}/")
    uvicorn.run(app, host=host, port=port, log_level="debug" if logger.isEnabledFor(logging.DEBUG) else "info")
