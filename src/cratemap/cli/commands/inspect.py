"""
Inspect Command - Show the detail view of one node.

Loads the graph into a fresh session, picks the node and prints what the
detail panel would show.
"""

import click
from rich.console import Console

from ...shell.session import GraphSession, NodeNotFoundError
from ..formatting import format_detail
from ..utils import echo_error, get_settings, json_envelope, load_raw_graph

console = Console()


@click.command()
@click.argument("source")
@click.argument("node_id", type=int)
@click.option("--json", "json_mode", is_flag=True, help="Output the detail view as JSON")
@click.pass_context
def inspect(ctx: click.Context, source: str, node_id: int, json_mode: bool):
    """
    Show the details of NODE_ID.

    \b
    Examples:
        cratemap inspect crate_graph.json 0
        cratemap inspect http://127.0.0.1:8000/api/graph 12 --json
    """
    settings = get_settings(ctx)

    raw_graph = load_raw_graph(source, settings.request_timeout, json_mode=json_mode)
    if raw_graph is None:
        ctx.exit(1)

    session = GraphSession()
    session.load(raw_graph)

    try:
        detail = session.pick(node_id)
    except NodeNotFoundError as e:
        if json_mode:
            click.echo(json_envelope(error=str(e)))
        else:
            echo_error(str(e))
        ctx.exit(1)

    if json_mode:
        click.echo(json_envelope(detail.to_dict()))
        return

    console.print(format_detail(detail))
