"""
Nodes Command - List the nodes of a graph.
"""

import click
from rich.console import Console

from ...core.kinds import NodeKindTag
from ...graph.transform import transform
from ..formatting import format_nodes_table
from ..utils import get_settings, load_raw_graph

console = Console()


@click.command()
@click.argument("source", required=False)
@click.option(
    "--kind",
    type=click.Choice([tag.value for tag in NodeKindTag]),
    default=None,
    help="Only list nodes of this kind",
)
@click.pass_context
def nodes(ctx: click.Context, source: str | None, kind: str | None):
    """
    List node ids, labels and kinds.

    Use the ids with 'cratemap inspect'.
    """
    settings = get_settings(ctx)
    source = source or settings.source

    raw_graph = load_raw_graph(source, settings.request_timeout)
    if raw_graph is None:
        ctx.exit(1)

    render_graph = transform(raw_graph)
    console.print(format_nodes_table(render_graph, NodeKindTag(kind) if kind else None))
    console.print(f"[dim]{render_graph.node_count} nodes, {render_graph.edge_count} edges[/dim]")
